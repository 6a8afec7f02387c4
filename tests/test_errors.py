"""Tests for error rendering at the HTTP boundary."""

from typing import List

import pytest
from fastapi.testclient import TestClient

from blog_api_gateway.app.core.errors import InternalError, NotFoundError
from blog_api_gateway.app.main import create_app
from blog_api_gateway.app.repositories.post_repository import PostRepository
from blog_api_gateway.app.schemas.post import Post
from tests.conftest import NEW_POST, make_settings


class BrokenRepository(PostRepository):
    """Fails every operation with an unexpected error."""

    def list_posts(self) -> List[Post]:
        raise RuntimeError("connection reset")

    def get_post(self, post_id: int) -> Post:
        raise InternalError(f"backend lost post {post_id}")

    def create_post(self, post: Post) -> int:
        raise RuntimeError("connection reset")

    def update_post(self, post: Post) -> None:
        raise NotFoundError("post 5 not found")

    def delete_post(self, post_id: int) -> None:
        raise RuntimeError("connection reset")


@pytest.fixture
def broken_client() -> TestClient:
    app = create_app(make_settings(seed_on_startup=False), post_repository=BrokenRepository())
    return TestClient(app, raise_server_exceptions=False)


INTERNAL = {"code": "InternalServerError", "description": "Internal server error"}


def test_unexpected_error_is_500_without_detail(broken_client: TestClient) -> None:
    resp = broken_client.get("/posts")
    assert resp.status_code == 500
    assert resp.json() == INTERNAL


def test_unexpected_error_is_logged(broken_client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("ERROR"):
        broken_client.post("/posts", json=NEW_POST)
    assert "connection reset" in caplog.text


def test_internal_app_error_hides_description(broken_client: TestClient) -> None:
    resp = broken_client.get("/posts/5")
    assert resp.status_code == 500
    assert resp.json() == INTERNAL


def test_store_errors_propagate_unchanged(broken_client: TestClient) -> None:
    resp = broken_client.put("/posts", json={"id": 5, **NEW_POST})
    assert resp.status_code == 404
    assert resp.json() == {"code": "NotFound", "description": "post 5 not found"}


def test_unknown_route(client: TestClient) -> None:
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json()["code"] == "NotFound"


def test_method_not_allowed(client: TestClient) -> None:
    resp = client.patch("/posts", json=NEW_POST)
    assert resp.status_code == 405
    assert resp.json() == {"code": "Method Not Allowed", "description": "Method not supported"}


def test_openapi_documents_routes(client: TestClient) -> None:
    paths = client.get("/openapi.json").json()["paths"]
    assert {"/posts", "/posts/{post_id}", "/items", "/items/{item_id}/decrease"} <= set(paths)
