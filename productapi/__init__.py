"""Product CRUD API (FastAPI + SQLAlchemy)."""
