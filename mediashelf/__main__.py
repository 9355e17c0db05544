"""
Run the API server.

Usage:
    python -m mediashelf

Binds to HOST:PORT from settings and reloads on code changes when DEBUG is set.
"""

import uvicorn

from mediashelf.config.settings import settings


def main() -> None:
    uvicorn.run(
        "mediashelf.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
