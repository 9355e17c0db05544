"""
Mediashelf Backend

REST backend for cataloging, rating and shelving media works.

Package Structure:
==================
    mediashelf/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, storage, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server on HOST:PORT from settings
    python -m mediashelf

    # or directly
    uvicorn mediashelf.api.main:app --reload
"""
