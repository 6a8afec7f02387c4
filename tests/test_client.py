"""Tests for the requests based API client."""

import json
from typing import Any, List, Optional

import pytest
import requests

from blog_api_gateway.client import BlogApiClient

BASE_URL = "http://blog.example.com"


def make_response(status: int, body: Optional[Any] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    response.url = BASE_URL
    return response


class FakeSession:
    """Records requests and replays canned responses in order."""

    def __init__(self, *responses: Any) -> None:
        self.responses: List[Any] = list(responses)
        self.calls: List[dict] = []

    def request(self, **kwargs: Any) -> requests.Response:
        self.calls.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def make_client(*responses: Any) -> tuple[BlogApiClient, FakeSession]:
    session = FakeSession(*responses)
    return BlogApiClient(base_url=BASE_URL + "/", session=session), session


def test_list_posts() -> None:
    client, session = make_client(make_response(200, {"posts": [{"id": 1}]}))
    posts, error = client.list_posts()
    assert error is None
    assert posts == [{"id": 1}]
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == f"{BASE_URL}/posts"


def test_create_post_sends_body() -> None:
    client, session = make_client(make_response(200, {"id": 51}))
    post_id, error = client.create_post("testB", "testA", "testC")
    assert (post_id, error) == (51, None)
    assert session.calls[0]["json"] == {"title": "testB", "author": "testA", "content": "testC"}


def test_update_post_sends_full_record() -> None:
    client, session = make_client(make_response(200, {"id": 22}))
    assert client.update_post(22, "t", "a") == (22, None)
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["json"] == {"id": 22, "title": "t", "author": "a", "content": ""}


def test_not_found_error_is_parsed() -> None:
    client, _ = make_client(make_response(404, {"code": "NotFound", "description": "post 222 not found"}))
    post, error = client.get_post(222)
    assert post is None
    assert error == {"status_code": 404, "code": "NotFound", "message": "post 222 not found"}


def test_delete_post_with_empty_body() -> None:
    client, session = make_client(make_response(200))
    assert client.delete_post(22) == (True, None)
    assert session.calls[0]["url"] == f"{BASE_URL}/posts/22"


def test_transport_error() -> None:
    client, _ = make_client(requests.ConnectionError("refused"))
    posts, error = client.list_posts()
    assert posts == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_non_json_error_body() -> None:
    response = make_response(502)
    response._content = b"bad gateway"
    client, _ = make_client(response)
    _, error = client.get_item(1)
    assert error["status_code"] == 502
    assert error["code"] is None
    assert error["message"] == "bad gateway"


@pytest.mark.parametrize(
    ("method", "path"),
    [("increase_item", "/items/3/increase"), ("decrease_item", "/items/3/decrease")],
)
def test_adjust_item(method: str, path: str) -> None:
    client, session = make_client(make_response(200, {"id": 3, "quantity": 4}))
    item, error = getattr(client, method)(3, amount=2)
    assert error is None
    assert item["quantity"] == 4
    assert session.calls[0]["url"] == BASE_URL + path
    assert session.calls[0]["json"] == {"amount": 2}


def test_create_and_list_items() -> None:
    client, session = make_client(
        make_response(201, {"id": 1, "name": "oil"}),
        make_response(200, {"items": [{"id": 1, "name": "oil"}]}),
    )
    item, _ = client.create_item("oil", quantity=2)
    items, _ = client.list_items()
    assert item["id"] == 1
    assert items == [{"id": 1, "name": "oil"}]
    assert session.calls[0]["json"] == {"name": "oil", "quantity": 2, "location": ""}
