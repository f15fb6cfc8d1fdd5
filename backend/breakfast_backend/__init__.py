"""
Healthy Breakfast Backend — Application Package Initializer
===========================================================

What: Marks the `breakfast_backend` directory as a Python package.
Why:  Enables module imports like `from breakfast_backend.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Static Data)      │  ← Menu table ownership
    ├─────────────────────────────────────┤
    │          Schemas (Contracts)        │  ← Pydantic response models
    └─────────────────────────────────────┘

    There is no persistence layer: every response is built from data fixed
    at import time.
"""

__version__ = "1.0.0"
