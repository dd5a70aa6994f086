"""
Pinnote: Application Package Initializer
=========================================

A minimal notes application: a FastAPI CRUD service over a single notes
table, and a Python client that drives it the way the browser front end does.

    ┌─────────────────────────────────────┐
    │   Client (pinnote.client)           │  ← httpx calls + board state
    ├─────────────────────────────────────┤
    │   Routes (API Layer)                │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Business Logic)         │  ← validation, existence checks
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database (Persistence)            │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
