"""Request/response bodies. JSON is camelCase; snake_case is accepted on input."""
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EnderecoIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rua: Optional[str] = None
    numero: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None
    cep: Optional[str] = None


class EnderecoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    rua: str
    numero: str
    bairro: str
    cidade: str
    estado: str
    cep: str
    cliente_id: int = Field(alias="clienteId")


class ClienteIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nome: Optional[str] = None
    email: Optional[str] = None
    cpf: Optional[str] = None
    data_nascimento: Optional[date] = Field(default=None, alias="dataNascimento")
    telefone: Optional[str] = None


class ClienteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    nome: str
    email: str
    cpf: str
    data_nascimento: Optional[date] = Field(default=None, alias="dataNascimento")
    telefone: Optional[str] = None
    idade: int = 0
    enderecos: list[EnderecoOut] = Field(default_factory=list)
