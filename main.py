"""Main entry point for the FastAPI application."""

import uvicorn

from components.core.config import get_settings
from restapi.router import create_app

settings = get_settings()
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
