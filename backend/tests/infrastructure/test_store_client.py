"""Store client tests — request shape and transport error mapping.

Tests cover:
    - Genre endpoints carry the configured country code and language
    - App details carries only the app id
    - Non-2xx responses are returned, never raised
    - Timeouts -> StoreTimeoutError; transport and decoding errors -> StoreUnavailableError
    - create_http_client honours base URL, timeout and redirects
"""

import httpx
import pytest

from app.config import Settings
from app.core.errors import StoreTimeoutError, StoreUnavailableError
from app.infrastructure.store_client import StoreClient, create_http_client

STORE = "https://store.example.test"


@pytest.fixture
def settings():
    return Settings(
        store_base_url=f"{STORE}/",
        store_country_code="de",
        store_language="german",
        http_timeout_seconds=3.0,
    )


@pytest.fixture
async def store(settings):
    async with create_http_client(settings) as http_client:
        yield StoreClient(http_client, settings)


def test_base_url_trailing_slash_stripped(settings):
    assert settings.store_base_url == STORE


async def test_create_http_client_configuration(settings):
    async with create_http_client(settings) as http_client:
        assert str(http_client.base_url).rstrip("/") == STORE
        assert http_client.timeout.read == 3.0
        assert http_client.follow_redirects is True


async def test_genre_list_uses_configured_locale(store, respx_mock):
    route = respx_mock.get(f"{STORE}/api/getgenrelist/").mock(
        return_value=httpx.Response(200, json={}),
    )
    await store.get_genre_list()
    params = route.calls.last.request.url.params
    assert dict(params) == {"cc": "de", "l": "german"}


async def test_apps_in_genre_encodes_genre(store, respx_mock):
    route = respx_mock.get(f"{STORE}/api/getappsingenre/").mock(
        return_value=httpx.Response(200, json={}),
    )
    await store.get_apps_in_genre("Sports & Racing")
    params = route.calls.last.request.url.params
    assert params["genre"] == "Sports & Racing"
    assert params["cc"] == "de"


async def test_app_details_sends_only_app_id(store, respx_mock):
    route = respx_mock.get(f"{STORE}/api/appdetails").mock(
        return_value=httpx.Response(200, json={}),
    )
    await store.get_app_details("620")
    assert dict(route.calls.last.request.url.params) == {"appids": "620"}


async def test_error_status_returned_not_raised(store, respx_mock):
    respx_mock.get(f"{STORE}/api/appdetails").mock(
        return_value=httpx.Response(500),
    )
    response = await store.get_app_details("620")
    assert response.status_code == 500
    assert not response.is_success


async def test_timeout_mapped_to_store_timeout(store, respx_mock):
    respx_mock.get(f"{STORE}/api/getappsingenre/").mock(
        side_effect=httpx.ConnectTimeout("slow"),
    )
    with pytest.raises(StoreTimeoutError) as exc_info:
        await store.get_apps_in_genre("Action")
    assert exc_info.value.http_status == 504
    assert exc_info.value.timeout_seconds == 3.0
    assert exc_info.value.context.genre == "Action"
    assert exc_info.value.context.upstream_url == "/api/getappsingenre/"


async def test_transport_error_mapped_to_store_unavailable(store, respx_mock):
    respx_mock.get(f"{STORE}/api/getgenrelist/").mock(
        side_effect=httpx.ConnectError("dns failure"),
    )
    with pytest.raises(StoreUnavailableError) as exc_info:
        await store.get_genre_list()
    assert exc_info.value.http_status == 502
    assert "ConnectError" in exc_info.value.message


async def test_undecodable_body_mapped_to_store_unavailable(store, respx_mock):
    respx_mock.get(f"{STORE}/api/appdetails").mock(return_value=httpx.Response(
        200, content=b"not gzip at all", headers={"Content-Encoding": "gzip"},
    ))
    with pytest.raises(StoreUnavailableError) as exc_info:
        await store.get_app_details("620")
    assert "DecodingError" in exc_info.value.message
    assert exc_info.value.context.app_id == "620"
