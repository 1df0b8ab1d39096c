"""Game Store Proxy — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GameStoreError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One shared httpx pool per process, opened and closed by the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Swagger UI at /swagger and schema at /swagger/v1/swagger.json: the paths
      existing client tooling already points at
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import games, health
from app.config import get_settings
from app.infrastructure.observability import setup_logging
from app.infrastructure.store_client import StoreClient, create_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    async with create_http_client(settings) as http_client:
        app.state.store_client = StoreClient(http_client, settings)
        logger.info(
            "Game Store Proxy started",
            extra={"upstream_url": settings.store_base_url},
        )
        yield
        logger.info("Game Store Proxy shutting down")


app = FastAPI(
    title="Game API",
    version="v1",
    lifespan=lifespan,
    docs_url="/swagger",
    openapi_url="/swagger/v1/swagger.json",
    redoc_url=None,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(games.router)

register_error_handlers(app)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
