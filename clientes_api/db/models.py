"""SQLAlchemy models for customers and their addresses."""
from __future__ import annotations

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from clientes_api.domain.validacao import calcular_idade

from .session import Base


class Cliente(Base):
    __tablename__ = "cliente"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    cpf = Column(String(14), unique=True, nullable=False)
    data_nascimento = Column(Date, nullable=True)
    telefone = Column(String(15), unique=True, nullable=True)

    enderecos = relationship(
        "Endereco",
        back_populates="cliente",
        cascade="all,delete-orphan",
        order_by="Endereco.id",
        lazy="selectin",
    )

    @property
    def idade(self) -> int:
        return calcular_idade(self.data_nascimento)


class Endereco(Base):
    __tablename__ = "endereco"

    id = Column(Integer, primary_key=True, autoincrement=True)
    rua = Column(String(150), nullable=False)
    numero = Column(String(10), nullable=False)
    bairro = Column(String(100), nullable=False)
    cidade = Column(String(100), nullable=False)
    estado = Column(String(2), nullable=False)
    cep = Column(String(9), nullable=False)
    cliente_id = Column(Integer, ForeignKey("cliente.id", ondelete="CASCADE"), nullable=False, index=True)

    cliente = relationship("Cliente", back_populates="enderecos")
