"""Shared test constants, fixtures, and factory functions."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from blog_api_gateway.app.core.config import Settings
from blog_api_gateway.app.main import create_app
from blog_api_gateway.app.repositories.post_repository import InMemoryPostRepository
from blog_api_gateway.app.services.seed_service import run_seed

# -- Constants --

SEEDED_POSTS = 50

POST_22 = {
    "id": 22,
    "title": "Title 22",
    "author": "Author 22",
    "content": (
        "Labore quiquia tempora modi. Dolore ut amet modi sed porro. Dolorem velit porro non "
        "adipisci. Etincidunt tempora labore dolore dolorem consectetur. Labore labore quaerat "
        "magnam ut. Quaerat ut labore ut modi quaerat. Ipsum ut sit sed ut porro non."
    ),
}

NEW_POST = {"title": "testB", "author": "testA", "content": "testC"}
MISSING_ID = 222


# -- Factories --


def make_settings(**overrides: Any) -> Settings:
    defaults: dict[str, Any] = {
        "project_name": "Blog API Gateway (test)",
        "api_version": "test",
        "log_level": "INFO",
        "log_format": "text",
        "log_file": None,
        "http_host": "127.0.0.1",
        "http_port": 8080,
        "seed_on_startup": True,
        "seed_file": None,
    }
    return Settings(**(defaults | overrides))


# -- Fixtures --


@pytest.fixture
def repo() -> InMemoryPostRepository:
    """A post store seeded with the bundled data (ids 1..50)."""
    repository = InMemoryPostRepository()
    run_seed(repository)
    return repository


@pytest.fixture
def empty_repo() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(make_settings()))


@pytest.fixture
def empty_client() -> TestClient:
    return TestClient(create_app(make_settings(seed_on_startup=False)))
