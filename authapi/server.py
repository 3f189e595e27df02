"""
Run the API with uvicorn.

Uvicorn turns SIGINT/SIGTERM into a graceful lifespan shutdown, which
closes the datastore and flushes the log handlers.
"""

import uvicorn

from authapi.core.config import settings


def main() -> None:
    uvicorn.run(
        "authapi.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
