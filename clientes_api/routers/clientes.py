"""Customer CRUD endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from clientes_api.exceptions import ValidationMessageError
from clientes_api.routers.dependencies import get_cliente_service
from clientes_api.schemas import ClienteIn, ClienteOut
from clientes_api.services.cliente_service import ClienteService

router = APIRouter(prefix="/clientes", tags=["clientes"])

_NOT_FOUND = {404: {"description": "Cliente nao encontrado"}}
_BAD_REQUEST = {400: {"model": ValidationMessageError}}


@router.get("", response_model=list[ClienteOut])
def listar_todos(clientes: ClienteService = Depends(get_cliente_service)):
    return [ClienteOut.model_validate(c) for c in clientes.listar_todos()]


@router.get("/{id}", response_model=ClienteOut, responses=_NOT_FOUND)
def buscar_por_id(id: int, clientes: ClienteService = Depends(get_cliente_service)):
    cliente = clientes.buscar_por_id(id)
    if cliente is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return ClienteOut.model_validate(cliente)


@router.post("", response_model=ClienteOut, status_code=status.HTTP_201_CREATED, responses=_BAD_REQUEST)
def salvar(payload: ClienteIn, clientes: ClienteService = Depends(get_cliente_service)):
    return ClienteOut.model_validate(clientes.salvar(payload.model_dump()))


@router.put("/{id}", response_model=ClienteOut, responses={**_NOT_FOUND, **_BAD_REQUEST})
def atualizar(id: int, payload: ClienteIn, clientes: ClienteService = Depends(get_cliente_service)):
    cliente = clientes.atualizar(id, payload.model_dump())
    if cliente is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return ClienteOut.model_validate(cliente)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
def deletar(id: int, clientes: ClienteService = Depends(get_cliente_service)):
    if clientes.buscar_por_id(id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    clientes.deletar_por_id(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
