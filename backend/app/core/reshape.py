"""Store Reshapers — narrow decoded store payloads to the client's output shapes.

Invariants:
    - All functions are pure (no IO, no async, no logging)
    - None means "nothing useful decoded"; the caller answers with the
      upstream status and an empty body
    - Genre list keeps upstream order and is cut to `limit`
    - Games are gathered tab by tab (at most `per_tab` each, mapping order),
      then cut to `limit` overall
    - App details lookup uses the requested id verbatim (case-sensitive key)

Design Decisions:
    - Typed fields matched case-insensitively and ignoring underscores:
      the store sends `genres`/`is_free`/`header_image`, older clients and
      fixtures send `Genres`/`IsFree`/`HeaderImage`; both project
    - The `tabs` key of the generic tree is matched exactly
    - Payloads that fail schema validation return None instead of raising
    - Caps are always passed in by the caller (Settings is their only source)
"""

from typing import Any

from pydantic import ValidationError

from app.schemas.games import GameDetails, GameIdInfo, GenreInfo


def _normalize(key: str) -> str:
    return key.replace("_", "").lower()


def get_field(mapping: Any, name: str) -> Any:
    """Read `name` from a decoded JSON object, tolerating key casing.

    Exact key wins; otherwise the first key equal after lower-casing and
    dropping underscores. Non-dict input yields None.
    """
    if not isinstance(mapping, dict):
        return None
    if name in mapping:
        return mapping[name]
    wanted = _normalize(name)
    for key, value in mapping.items():
        if isinstance(key, str) and _normalize(key) == wanted:
            return value
    return None


def reshape_genres(payload: Any, limit: int) -> list[GenreInfo] | None:
    """Project the genre-list payload to at most `limit` GenreInfo entries."""
    genres = get_field(payload, "Genres")
    if not isinstance(genres, list):
        return None
    try:
        return [GenreInfo(name=get_field(g, "Name")) for g in genres[:limit]]
    except ValidationError:
        return None


def reshape_games_by_genre(
    payload: Any,
    per_tab: int,
    limit: int,
) -> list[GameIdInfo] | None:
    """Collect tab items from the apps-in-genre payload.

    Every tab contributes up to `per_tab` items even when earlier tabs
    already filled `limit`; the cut happens once, after the last tab.
    """
    if not isinstance(payload, dict):
        return None
    tabs = payload.get("tabs")
    if not isinstance(tabs, dict):
        return None

    games: list[GameIdInfo] = []
    for tab in tabs.values():
        items = get_field(tab, "Items")
        if isinstance(items, list):
            games.extend(items[:per_tab])
    return games[:limit]


def _string_list(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    return [v for v in value if isinstance(v, str)]


def _flag(value: Any) -> Any:
    """Absent flag is False; anything else is left to pydantic's bool parsing."""
    return False if value is None else value


def reshape_game_details(payload: Any, app_id: str) -> GameDetails | None:
    """Project the app-details record stored under `app_id`."""
    if not isinstance(payload, dict) or app_id not in payload:
        return None
    data = get_field(payload[app_id], "Data")
    if not isinstance(data, dict):
        return None
    try:
        return GameDetails(
            name=get_field(data, "Name"),
            is_free=_flag(get_field(data, "IsFree")),
            about=get_field(data, "AboutTheGame"),
            header_image=get_field(data, "HeaderImage"),
            website=get_field(data, "Website"),
            developers=_string_list(get_field(data, "Developers")),
            publishers=_string_list(get_field(data, "Publishers")),
        )
    except ValidationError:
        return None
