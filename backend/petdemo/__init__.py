"""
PetDemo: Application Package Initializer
========================================

What: Marks the `petdemo` directory as a Python package.
Who:  Used by uvicorn (`petdemo.main:app`), Alembic, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │     Routes (pages, cats, dogs)      │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (CatService, DogService) │  ← Validation, store operations
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database (injected store client)  │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
