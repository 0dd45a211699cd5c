"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import delete, select

from clientes_api.db.models import Cliente, Endereco
from clientes_api.db.session import get_session

T = TypeVar("T", Cliente, Endereco)


class SQLRepository(Generic[T]):
    """CRUD helpers wrapping the SQLAlchemy session for a single model."""

    model: Type[T]

    def _carregar(self, entity: T) -> None:
        """Load relationships needed after the session closes."""

    def listar_todos(self) -> list[T]:
        with get_session() as session:
            stmt = select(self.model).order_by(self.model.id)
            return list(session.execute(stmt).scalars().all())

    def buscar_por_id(self, entity_id: int) -> Optional[T]:
        with get_session() as session:
            return session.get(self.model, entity_id)

    def existe(self, entity_id: int) -> bool:
        with get_session() as session:
            stmt = select(self.model.id).where(self.model.id == entity_id).limit(1)
            return session.execute(stmt).first() is not None

    def salvar(self, entity: T) -> T:
        with get_session() as session:
            entity = session.merge(entity)
            session.commit()
            session.refresh(entity)
            self._carregar(entity)
            return entity

    def deletar(self, entity: T) -> None:
        self.deletar_por_id(entity.id)

    def deletar_por_id(self, entity_id: int) -> None:
        with get_session() as session:
            entity = session.get(self.model, entity_id)
            if entity is not None:
                # session.delete so ORM cascades run
                session.delete(entity)
                session.commit()


class ClienteRepository(SQLRepository[Cliente]):
    model = Cliente

    def _carregar(self, entity: Cliente) -> None:
        list(entity.enderecos)

    def _buscar_por(self, column, value: str | None) -> Optional[Cliente]:
        if value is None:
            return None
        with get_session() as session:
            stmt = select(Cliente).where(column == value)
            return session.execute(stmt).scalar_one_or_none()

    def buscar_por_email(self, email: str | None) -> Optional[Cliente]:
        return self._buscar_por(Cliente.email, email)

    def buscar_por_cpf(self, cpf: str | None) -> Optional[Cliente]:
        return self._buscar_por(Cliente.cpf, cpf)

    def buscar_por_telefone(self, telefone: str | None) -> Optional[Cliente]:
        return self._buscar_por(Cliente.telefone, telefone)


class EnderecoRepository(SQLRepository[Endereco]):
    model = Endereco

    def listar_por_cliente(self, cliente_id: int) -> list[Endereco]:
        with get_session() as session:
            stmt = select(Endereco).where(Endereco.cliente_id == cliente_id).order_by(Endereco.id)
            return list(session.execute(stmt).scalars().all())

    def buscar_do_cliente(self, cliente_id: int, endereco_id: int) -> Optional[Endereco]:
        with get_session() as session:
            stmt = select(Endereco).where(
                Endereco.id == endereco_id,
                Endereco.cliente_id == cliente_id,
            )
            return session.execute(stmt).scalar_one_or_none()

    def adicionar_ao_cliente(self, cliente_id: int, endereco: Endereco) -> Optional[Endereco]:
        """Append ``endereco`` to the customer's collection and commit both sides together."""
        with get_session() as session:
            cliente = session.get(Cliente, cliente_id)
            if cliente is None:
                return None
            cliente.enderecos.append(endereco)
            session.commit()
            session.refresh(endereco)
            return endereco

    def deletar_do_cliente(self, cliente_id: int, endereco_id: int) -> bool:
        with get_session() as session:
            result = session.execute(
                delete(Endereco).where(
                    Endereco.id == endereco_id,
                    Endereco.cliente_id == cliente_id,
                )
            )
            session.commit()
            return result.rowcount > 0
