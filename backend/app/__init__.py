"""
Mobile Bazar Backend — Application Package Initializer
========================================================

What: Marks the `app` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows the same layered structure for every collection:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (one store call each)  │  ← Validation, result shaping
    ├─────────────────────────────────────┤
    │          Schemas (Pydantic)         │  ← Request/response contracts
    ├─────────────────────────────────────┤
    │     Database (PyMongo async client) │  ← Shared client, collections
    └─────────────────────────────────────┘

    Collections: products, orders, review, users.
"""

__version__ = "1.0.0"
