"""ASGI entry point: ``uvicorn clientes_api.app_factory:app``."""
from clientes_api.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
