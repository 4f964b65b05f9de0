"""
Contactbook — Application Package Initializer
==============================================

What: Marks the `contactbook` directory as a Python package.
Who:  Imported by uvicorn (`contactbook.main:app`), Alembic, and pytest.

Architecture Note:
    The application is split into thin layers:

    ┌─────────────────────────────────────┐
    │      Routes (HTML pages / HTTP)     │  ← response selection only
    ├─────────────────────────────────────┤
    │   Services (validate, sanitize)     │  ← orchestration, error typing
    ├─────────────────────────────────────┤
    │   Repositories (memory / SQL)       │  ← storage behind one interface
    ├─────────────────────────────────────┤
    │   Models & Schemas (data)           │  ← SQLAlchemy rows + Pydantic records
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
