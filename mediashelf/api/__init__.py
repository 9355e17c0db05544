"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← Backend and service injection
    ├── handlers/         ← Route handlers
    └── middleware/       ← Error handlers, request logging

Usage:
======
    # Run the API
    uvicorn mediashelf.api.main:app --reload

    # Import the app
    from mediashelf.api.main import app, create_application
"""
