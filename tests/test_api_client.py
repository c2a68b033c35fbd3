import httpx
import pytest
from pydantic import ValidationError

from hero_explorer.api_client import ApiClient

BASE_URL = "https://www.superheroapi.com/api.php"


def make_client(handler):
    return ApiClient(BASE_URL, "token123", client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_search_url_escapes_query_as_one_path_segment():
    api = make_client(lambda request: httpx.Response(200))
    assert api.search_url("Batman") == f"{BASE_URL}/token123/search/Batman"
    assert api.search_url("Spider-Man") == f"{BASE_URL}/token123/search/Spider-Man"
    assert api.search_url("a/b c?d#e") == f"{BASE_URL}/token123/search/a%2Fb%20c%3Fd%23e"


def test_search_heroes_parses_response():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={
            "response": "success",
            "results-for": "batman",
            "results": [{"id": "70", "name": "Batman",
                         "powerstats": {"intelligence": "100", "strength": "26", "speed": "27",
                                        "durability": "50", "power": "47", "combat": "100"},
                         "image": {"url": "https://example.com/70.jpg"}}],
        })

    response = make_client(handler).search_heroes("batman")

    assert seen[0].method == "GET"
    assert seen[0].url.path == "/api.php/token123/search/batman"
    assert response.is_usable
    assert response.results[0].name == "Batman"


def test_error_envelope_is_returned_not_raised():
    api = make_client(lambda request: httpx.Response(200, json={"response": "error", "error": "not found"}))
    response = api.search_heroes("Zzzznotahero")
    assert not response.is_usable


def test_http_error_status_raises():
    api = make_client(lambda request: httpx.Response(503))
    with pytest.raises(httpx.HTTPStatusError):
        api.search_heroes("batman")


def test_transport_error_propagates():
    def handler(request):
        raise httpx.ConnectTimeout("timeout", request=request)

    with pytest.raises(httpx.TimeoutException, match="timeout"):
        make_client(handler).search_heroes("batman")


def test_malformed_body_raises():
    api = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(ValueError):
        api.search_heroes("batman")


def test_wrong_shape_raises_validation_error():
    api = make_client(lambda request: httpx.Response(200, json={"results": "nope"}))
    with pytest.raises(ValidationError):
        api.search_heroes("batman")


def test_fetch_image_returns_bytes():
    api = make_client(lambda request: httpx.Response(200, content=b"\x89PNG..."))
    assert api.fetch_image("https://example.com/70.jpg") == b"\x89PNG..."
