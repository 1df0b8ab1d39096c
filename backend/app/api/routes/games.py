"""Game Routes — genre list, games by genre, and single game details.

Invariants:
    - Exactly one store call per request, no retry
    - Non-2xx store status returned verbatim with an empty body
    - 2xx store answer with nothing usable (bad JSON, missing field, unknown id)
      also returns the store's own status with an empty body, even though
      that status is a success code
    - Success bodies: genres <= genre_limit, games <= games_limit

Design Decisions:
    - Bare Response for pass-through failures instead of HTTPException:
      the client expects no JSON envelope on these
"""

import logging
from typing import Any

import httpx
from fastapi import APIRouter, Depends, Response

from app.api.dependencies import get_store_client
from app.config import Settings, get_settings
from app.core.reshape import (
    reshape_game_details, reshape_games_by_genre, reshape_genres,
)
from app.infrastructure.store_client import StoreClient
from app.schemas.games import GameDetails, GameIdInfo, GenreInfo

logger = logging.getLogger(__name__)
router = APIRouter(tags=["games"])

_PASS_THROUGH = {
    "default": {"description": "Store status passed through, empty body"},
}


def _decode(response: httpx.Response) -> Any:
    """JSON tree of a successful store answer; None if not JSON."""
    try:
        return response.json()
    except ValueError:
        logger.warning(
            "Store answered with a non-JSON body",
            extra={"upstream_url": response.request.url.path,
                   "status_code": response.status_code},
        )
        return None


def _pass_through(response: httpx.Response) -> Response:
    return Response(status_code=response.status_code)


@router.get(
    "/genres", response_model=list[GenreInfo], responses=_PASS_THROUGH,
)
async def get_genres(
    store: StoreClient = Depends(get_store_client),
    settings: Settings = Depends(get_settings),
):
    """First genres of the store's genre list, in store order."""
    response = await store.get_genre_list()
    if response.is_success:
        genres = reshape_genres(_decode(response), settings.genre_limit)
        if genres is not None:
            return genres
        logger.warning(
            "Genre list payload had no genres",
            extra={"status_code": response.status_code},
        )
    return _pass_through(response)


@router.get(
    "/games/{name}", response_model=list[GameIdInfo], responses=_PASS_THROUGH,
)
async def get_games_by_genre(
    name: str,
    store: StoreClient = Depends(get_store_client),
    settings: Settings = Depends(get_settings),
):
    """A handful of games from the genre's store tabs."""
    response = await store.get_apps_in_genre(name)
    if response.is_success:
        games = reshape_games_by_genre(
            _decode(response),
            per_tab=settings.games_per_tab_limit,
            limit=settings.games_limit,
        )
        if games is not None:
            return games
        logger.warning(
            "Genre payload had no tabs",
            extra={"genre": name, "status_code": response.status_code},
        )
    return _pass_through(response)


@router.get(
    "/game/{app_id}", response_model=GameDetails, responses=_PASS_THROUGH,
)
async def get_game_details(
    app_id: str, store: StoreClient = Depends(get_store_client),
):
    """Store details of one app, narrowed to what the client displays."""
    response = await store.get_app_details(app_id)
    if response.is_success:
        details = reshape_game_details(_decode(response), app_id)
        if details is not None:
            return details
        logger.warning(
            "App details payload had no data for requested id",
            extra={"app_id": app_id, "status_code": response.status_code},
        )
    return _pass_through(response)
