"""
FastAPI routers grouped by resource.

Each module exposes a ``build_router`` that returns an APIRouter to include in
the application built by ``productapi.app.create_app``.
"""
