"""Tests for the HTML page and the JSON API."""
import pytest
from fastapi.testclient import TestClient

from conftest import BASE_URL, make_poem
from core.client import get_client
from main import app


@pytest.fixture
def web(fake_api):
    async def override_client():
        async with fake_api.client() as client:
            yield client

    app.dependency_overrides[get_client] = override_client
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(web):
    assert web.get("/health").json() == {"status": "ok"}


def test_index_without_query_shows_form(web, fake_api):
    response = web.get("/")

    assert response.status_code == 200
    assert 'name="author"' in response.text
    assert "No poems to display" in response.text
    assert fake_api.calls == []


def test_index_renders_results(web, fake_api):
    fake_api.reply("/author/X", [make_poem("A", "X", ["first", "", "third"])])
    fake_api.reply("/title/A", [make_poem("A", "X"), make_poem("B", "Y")])

    response = web.get("/", params={"author": "X", "title": "A"})

    assert response.status_code == 200
    assert "Found 2 poems" in response.text
    assert "Poem 1 of 2" in response.text
    assert "&nbsp;" in response.text


def test_index_shows_no_results_hint(web, fake_api):
    response = web.get("/", params={"author": "Nobody"})

    assert "No poems found. Try different search terms." in response.text


def test_index_shows_error_banner(web, fake_api):
    fake_api.fail("/title/T")

    response = web.get("/", params={"title": "T"})

    assert response.status_code == 200
    assert "error-message" in response.text
    assert f"Network error: unable to reach the server at {BASE_URL}" in response.text


def test_index_empty_form(web, fake_api):
    response = web.get("/", params={"author": " ", "title": ""})

    assert "Please enter an author name or poem title" in response.text
    assert fake_api.calls == []


def test_random_page(web, fake_api):
    fake_api.reply("/random", [make_poem("Sonnet 18", "William Shakespeare")])

    response = web.get("/random")

    assert "Sonnet 18" in response.text
    assert "Found 1 poem<" in response.text


def test_api_search(web, fake_api):
    fake_api.reply("/author/X", [make_poem("A", "X")])

    response = web.get("/api/search", params={"author": "X"})

    assert response.status_code == 200
    assert [p["title"] for p in response.json()] == ["A"]


def test_api_search_requires_a_field(web):
    response = web.get("/api/search")

    assert response.status_code == 422
    assert response.json()["detail"] == "At least one search parameter is required"


def test_api_search_not_found(web, fake_api):
    fake_api.reply("/author/Nobody", {"status": 404}, status=404)

    response = web.get("/api/search", params={"author": "Nobody"})

    assert response.status_code == 404
    assert "No results found" in response.json()["detail"]


def test_api_random_malformed(web, fake_api):
    fake_api.reply("/random", [])

    response = web.get("/api/random")

    assert response.status_code == 502
    assert response.json()["detail"] == "Random poem retrieval: Invalid response format"
