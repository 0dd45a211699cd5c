from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.middleware.base import BaseHTTPMiddleware

from clientes_api.core.config import get_settings
from clientes_api.core.logging import configure_logging
from clientes_api.db.create_tables import create_all
from clientes_api.domain.validacao import ErroCampo
from clientes_api.exceptions import ValidacaoError, ValidationMessageError
from clientes_api.repositories.sql_repository import ClienteRepository, EnderecoRepository
from clientes_api.routers import clientes as clientes_router
from clientes_api.routers import enderecos as enderecos_router
from clientes_api.services.cliente_service import ClienteService
from clientes_api.services.endereco_service import EnderecoService

logger = logging.getLogger(__name__)

# nomes de atributo -> nomes usados no JSON
_JSON_FIELDS = {"data_nascimento": "dataNascimento"}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, nosniff, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _bad_request(payload: ValidationMessageError) -> JSONResponse:
    return JSONResponse(status_code=400, content=payload.model_dump())


def _request_errors(exc: RequestValidationError) -> list[ErroCampo]:
    erros = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        campo = loc[-1] if loc else "body"
        erros.append(ErroCampo(_JSON_FIELDS.get(campo, campo), str(error.get("msg", ""))))
    return erros


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidacaoError)
    async def validacao_handler(request: Request, exc: ValidacaoError) -> JSONResponse:
        return _bad_request(exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _bad_request(ValidationMessageError.from_erros(_request_errors(exc)))

    @app.exception_handler(IntegrityError)
    async def integrity_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("Violacao de integridade em %s %s: %s", request.method, request.url.path, exc.orig)
        return _bad_request(ValidationMessageError.from_erros([ErroCampo("body", "Registro duplicado ou inválido")]))


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_all()
    yield


def create_app(
    cliente_service: ClienteService | None = None,
    endereco_service: EnderecoService | None = None,
) -> FastAPI:
    """Factory compatível com uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Clientes API", lifespan=lifespan)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    register_exception_handlers(app)

    app.state.cliente_service = cliente_service or ClienteService(ClienteRepository())
    app.state.endereco_service = endereco_service or EnderecoService(EnderecoRepository())

    app.include_router(clientes_router.router)
    app.include_router(enderecos_router.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info("Clientes API configurada (env=%s)", settings.app_env)
    return app
