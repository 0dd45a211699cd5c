"""Address endpoints nested under the owning customer."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from clientes_api.exceptions import ValidationMessageError
from clientes_api.routers.dependencies import get_cliente_service, get_endereco_service
from clientes_api.schemas import EnderecoIn, EnderecoOut
from clientes_api.services.cliente_service import ClienteService
from clientes_api.services.endereco_service import EnderecoService

router = APIRouter(prefix="/clientes/{id}/enderecos", tags=["enderecos"])

_NOT_FOUND = {404: {"description": "Cliente ou endereco nao encontrado"}}
_BAD_REQUEST = {400: {"model": ValidationMessageError}}


@router.get("", response_model=list[EnderecoOut], responses=_NOT_FOUND)
def listar_todos(
    id: int,
    clientes: ClienteService = Depends(get_cliente_service),
    enderecos: EnderecoService = Depends(get_endereco_service),
):
    cliente = clientes.buscar_por_id(id)
    if cliente is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return [EnderecoOut.model_validate(e) for e in enderecos.listar_por_cliente(id)]


@router.get("/{idEndereco}", response_model=EnderecoOut, responses=_NOT_FOUND)
def buscar_por_id(
    id: int,
    idEndereco: int,
    enderecos: EnderecoService = Depends(get_endereco_service),
):
    endereco = enderecos.buscar_do_cliente(id, idEndereco)
    if endereco is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return EnderecoOut.model_validate(endereco)


@router.post(
    "",
    response_model=EnderecoOut,
    status_code=status.HTTP_201_CREATED,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def salvar(
    id: int,
    payload: EnderecoIn,
    enderecos: EnderecoService = Depends(get_endereco_service),
):
    endereco = enderecos.adicionar_ao_cliente(id, payload.model_dump())
    if endereco is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return EnderecoOut.model_validate(endereco)


@router.delete("/{idEndereco}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
def deletar(
    id: int,
    idEndereco: int,
    clientes: ClienteService = Depends(get_cliente_service),
    enderecos: EnderecoService = Depends(get_endereco_service),
):
    if clientes.buscar_por_id(id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    if not enderecos.deletar_do_cliente(id, idEndereco):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
