"""Cliente use cases: listing, lookup, validated writes and removal."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from clientes_api.db.models import Cliente
from clientes_api.domain.validacao import ErroCampo, validar_cliente
from clientes_api.exceptions import ValidacaoError
from clientes_api.repositories.sql_repository import ClienteRepository

logger = logging.getLogger(__name__)

CAMPOS = ("nome", "email", "cpf", "data_nascimento", "telefone")


class ClienteService:
    def __init__(self, repository: ClienteRepository | None = None) -> None:
        self.repository = repository or ClienteRepository()

    def listar_todos(self) -> list[Cliente]:
        return self.repository.listar_todos()

    def buscar_por_id(self, cliente_id: int) -> Optional[Cliente]:
        return self.repository.buscar_por_id(cliente_id)

    def salvar(self, dados: Mapping[str, Any], cliente_id: int | None = None) -> Cliente:
        """Validate ``dados`` and persist it as a new Cliente (or over ``cliente_id``)."""
        erros = validar_cliente(dados)
        erros.extend(self._conflitos(dados, cliente_id))
        if erros:
            logger.warning("Cliente rejeitado: %s", [e.campo for e in erros])
            raise ValidacaoError(erros)
        entity = Cliente(id=cliente_id, **{campo: dados.get(campo) for campo in CAMPOS})
        saved = self.repository.salvar(entity)
        logger.info("Cliente %s salvo", saved.id)
        return saved

    def atualizar(self, cliente_id: int, dados: Mapping[str, Any]) -> Optional[Cliente]:
        if not self.repository.existe(cliente_id):
            return None
        return self.salvar(dados, cliente_id=cliente_id)

    def deletar_por_id(self, cliente_id: int) -> None:
        self.repository.deletar_por_id(cliente_id)
        logger.info("Cliente %s removido", cliente_id)

    def _conflitos(self, dados: Mapping[str, Any], cliente_id: int | None) -> list[ErroCampo]:
        checks = (
            ("email", self.repository.buscar_por_email, "Email já cadastrado"),
            ("cpf", self.repository.buscar_por_cpf, "CPF já cadastrado"),
            ("telefone", self.repository.buscar_por_telefone, "Telefone já cadastrado"),
        )
        erros: list[ErroCampo] = []
        for campo, buscar, mensagem in checks:
            existente = buscar(dados.get(campo))
            if existente is not None and existente.id != cliente_id:
                erros.append(ErroCampo(campo, mensagem))
        return erros
