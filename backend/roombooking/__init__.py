"""
Room Booking Backend — Application Package Initializer
======================================================

What: Marks the `roombooking` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │        Routes (Controllers)         │  ← HTTP verbs, status codes
    ├─────────────────────────────────────┤
    │    Services (Business Rules)        │  ← Validation, ServiceResult
    ├─────────────────────────────────────┤
    │          Repositories               │  ← Generic CRUD per entity
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the ORM, and services never see HTTP objects.
"""

__version__ = "1.0.0"
