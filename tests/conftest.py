from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

# Garante que o pacote clientes_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from clientes_api.db import models  # noqa: E402
from clientes_api.db import session as db_session  # noqa: E402
from clientes_api.core import config as core_config  # noqa: E402


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e reseta caches de settings/engine."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def cliente_valido() -> dict:
    return {
        "nome": "Ana Maria",
        "email": "ana.maria@mail.com",
        "cpf": "123.456.789-10",
        "data_nascimento": date(1985, 1, 1),
        "telefone": "(11) 91234-5678",
    }


@pytest.fixture()
def endereco_valido() -> dict:
    return {
        "rua": "Rua das Flores",
        "numero": "123",
        "bairro": "Centro",
        "cidade": "São Paulo",
        "estado": "SP",
        "cep": "01001-000",
    }
