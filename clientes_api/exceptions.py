"""Errors raised by services and the payload returned to clients."""
from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field

from clientes_api.domain.validacao import ErroCampo

MENSAGEM_PADRAO = "Há erros na sua requisição, verique"


class ErroValidacaoCampo(BaseModel):
    field: str
    message: str


class ValidationMessageError(BaseModel):
    """Body of every 400 response."""

    message: str = MENSAGEM_PADRAO
    errors: list[ErroValidacaoCampo] = Field(default_factory=list)

    @classmethod
    def from_erros(cls, erros: Iterable[ErroCampo]) -> "ValidationMessageError":
        return cls(errors=[ErroValidacaoCampo(field=e.campo, message=e.mensagem) for e in erros])


class ValidacaoError(Exception):
    """Raised when a payload fails validation; nothing was persisted."""

    def __init__(self, erros: Iterable[ErroCampo]) -> None:
        self.erros = list(erros)
        super().__init__("; ".join(f"{e.campo}: {e.mensagem}" for e in self.erros))

    def to_payload(self) -> ValidationMessageError:
        return ValidationMessageError.from_erros(self.erros)
