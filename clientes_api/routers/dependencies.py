from __future__ import annotations

from fastapi import Request

from clientes_api.services.cliente_service import ClienteService
from clientes_api.services.endereco_service import EnderecoService


def _state_attr(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if not svc:
        raise RuntimeError(f"{name} nao configurado")
    return svc


def get_cliente_service(request: Request) -> ClienteService:
    return _state_attr(request, "cliente_service")


def get_endereco_service(request: Request) -> EnderecoService:
    return _state_attr(request, "endereco_service")
