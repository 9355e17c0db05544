"""
Storage Backend Dependency

FastAPI dependency that resolves the storage backend for a request.

    database connected → SqlBackend over a fresh session
                         (committed on success, rolled back on error)
    otherwise          → the application's shared MemoryBackend

Usage:
======
    from mediashelf.api.dependencies.backend import Backend

    @router.get("/debug/works/count")
    async def count_works(backend: Backend):
        return await backend.count(Work)
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request

from mediashelf.shared.db import SqlBackend, StorageBackend, session_scope


async def get_backend(request: Request) -> AsyncGenerator[StorageBackend, None]:
    """
    Yield the storage backend for the current request.

    Yields:
        StorageBackend: SQL or in-memory backend
    """
    if request.app.state.database_connected:
        async with session_scope() as session:
            yield SqlBackend(session)
    else:
        yield request.app.state.memory_backend


# Type alias for cleaner route signatures
Backend = Annotated[StorageBackend, Depends(get_backend)]
