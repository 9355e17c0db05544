"""
Database Module

Storage for Mediashelf: the SQL engine lifecycle, the storage interface with
its two backends, and the sample catalog.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        STORAGE LAYER                                        │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   FastAPI Route                                                             │
│       │                                                                     │
│       │  Dependency Injection: get_backend()                                │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │   SqlBackend(session)   or   app.state.memory_backend       │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       │  Passed to Repositories                                             │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │   UserRepository, WorkRepository,                           │          │
│   │   RatingRepository, ShelfRepository                         │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Components:
===========
- session.py: Lazy engine, session factory, init/close lifecycle
- backends.py: StorageBackend, SqlBackend, MemoryBackend
- seed.py: Sample catalog for the in-memory backend
"""

from mediashelf.shared.db.session import (
    init_db,
    close_db,
    session_scope,
)
from mediashelf.shared.db.backends import StorageBackend, SqlBackend, MemoryBackend
from mediashelf.shared.db.seed import seed_sample_catalog

__all__ = [
    # Session management
    "init_db",
    "close_db",
    "session_scope",
    # Backends
    "StorageBackend",
    "SqlBackend",
    "MemoryBackend",
    # Sample data
    "seed_sample_catalog",
]
