"""Schema bootstrap for the cliente/endereco tables."""
from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from clientes_api.core.config import get_settings
from clientes_api.core.logging import configure_logging

from .session import Base, get_engine
from . import models  # noqa: F401  # registers Cliente/Endereco on Base.metadata

logger = logging.getLogger(__name__)


def create_all() -> list[str]:
    """Create missing tables and return the names that were created."""
    engine = get_engine()
    existentes = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    criadas = [name for name in Base.metadata.tables if name not in existentes]
    if criadas:
        logger.info("Tabelas criadas: %s", ", ".join(criadas))
    return criadas


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    try:
        create_all()
    except SQLAlchemyError as exc:
        logger.error("Falha ao criar tabelas: %s", exc)
        raise SystemExit(1) from exc
