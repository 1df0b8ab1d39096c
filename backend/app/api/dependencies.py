"""Route Dependencies — hand the process-wide StoreClient to request handlers."""

from fastapi import Request

from app.infrastructure.store_client import StoreClient


def get_store_client(request: Request) -> StoreClient:
    """StoreClient built in lifespan; tests override this dependency."""
    return request.app.state.store_client
