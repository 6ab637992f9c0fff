"""FastAPI application entry point for the Resume Studio API."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_studio.api.routes import catalog, enhance, health, preview, storage
from resume_studio.data.db import Database
from resume_studio.services.enhancement import EnhancementBackend, TextEnhancer
from resume_studio.services.storage import SqlPersistenceGateway

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


def create_app(
    database: Database | None = None,
    enhancer: EnhancementBackend | None = None,
) -> FastAPI:
    """Build the application around explicit resources.

    The database is opened when the app starts and closed when it stops.
    """
    database = database or Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database.open()
        try:
            yield
        finally:
            database.close()

    app = FastAPI(
        title="Resume Studio API",
        description="Resume versions, preview rendering and text enhancement",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.gateway = SqlPersistenceGateway(database)
    app.state.enhancer = enhancer or TextEnhancer()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(catalog.router, prefix="/api")
    app.include_router(enhance.router, prefix="/api")
    app.include_router(preview.router, prefix="/api")
    app.include_router(storage.router, prefix="/api")
    return app


app = create_app()


def main() -> None:
    """Start the development server."""
    import uvicorn

    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "resume_studio.api.main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "8000")),
        reload=True,
    )


if __name__ == "__main__":
    main()
