"""Endereco use cases, always scoped to the owning Cliente for writes."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from clientes_api.db.models import Endereco
from clientes_api.domain.validacao import validar_endereco
from clientes_api.exceptions import ValidacaoError
from clientes_api.repositories.sql_repository import EnderecoRepository

logger = logging.getLogger(__name__)

CAMPOS = ("rua", "numero", "bairro", "cidade", "estado", "cep")


class EnderecoService:
    def __init__(self, repository: EnderecoRepository | None = None) -> None:
        self.repository = repository or EnderecoRepository()

    def listar_todos(self) -> list[Endereco]:
        return self.repository.listar_todos()

    def buscar_por_id(self, endereco_id: int) -> Optional[Endereco]:
        return self.repository.buscar_por_id(endereco_id)

    def salvar(self, endereco: Endereco) -> Endereco:
        self._validar(endereco_dados(endereco))
        return self.repository.salvar(endereco)

    def deletar_por_id(self, endereco_id: int) -> None:
        self.repository.deletar_por_id(endereco_id)

    def listar_por_cliente(self, cliente_id: int) -> list[Endereco]:
        return self.repository.listar_por_cliente(cliente_id)

    def buscar_do_cliente(self, cliente_id: int, endereco_id: int) -> Optional[Endereco]:
        return self.repository.buscar_do_cliente(cliente_id, endereco_id)

    def adicionar_ao_cliente(self, cliente_id: int, dados: Mapping[str, Any]) -> Optional[Endereco]:
        """Validate and attach a new address. Returns None when the Cliente does not exist."""
        self._validar(dados)
        endereco = Endereco(**{campo: dados.get(campo) for campo in CAMPOS})
        saved = self.repository.adicionar_ao_cliente(cliente_id, endereco)
        if saved is not None:
            logger.info("Endereco %s adicionado ao cliente %s", saved.id, cliente_id)
        return saved

    def deletar_do_cliente(self, cliente_id: int, endereco_id: int) -> bool:
        removed = self.repository.deletar_do_cliente(cliente_id, endereco_id)
        if removed:
            logger.info("Endereco %s removido do cliente %s", endereco_id, cliente_id)
        return removed

    def _validar(self, dados: Mapping[str, Any]) -> None:
        erros = validar_endereco(dados)
        if erros:
            logger.warning("Endereco rejeitado: %s", [e.campo for e in erros])
            raise ValidacaoError(erros)


def endereco_dados(endereco: Endereco) -> dict:
    return {campo: getattr(endereco, campo) for campo in CAMPOS}
