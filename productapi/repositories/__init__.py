"""
Persistence adapters.

Handlers depend on the repository interface rather than touching SQLAlchemy
sessions directly.
"""
