"""
FastAPI routers grouped by resource (clientes, enderecos).

Each module exposes an APIRouter included by ``clientes_api.app``. Services are
looked up on ``app.state`` so the app factory decides which instances are used.
"""
