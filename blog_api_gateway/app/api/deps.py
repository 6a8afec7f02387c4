"""FastAPI dependencies shared by the endpoint modules."""

from typing import Any, Dict

from fastapi import Path, Request

from blog_api_gateway.app.core.errors import INVALID_ID_DESCRIPTION, BadRequestError
from blog_api_gateway.app.schemas.error import ErrorResponse
from blog_api_gateway.app.services.item_service import ItemService
from blog_api_gateway.app.services.post_service import PostService

MAX_ID = 2**64 - 1


def get_post_service(request: Request) -> PostService:
    return request.app.state.post_service


def get_item_service(request: Request) -> ItemService:
    return request.app.state.item_service


def parse_id(raw: str) -> int:
    """Parse a path id as an unsigned 64 bit integer.

    Only ASCII digits are accepted, so signs, whitespace, underscores
    and decimal points are all rejected with :class:`BadRequestError`.
    """
    if not (raw.isascii() and raw.isdigit()):
        raise BadRequestError(INVALID_ID_DESCRIPTION)
    value = int(raw)
    if value > MAX_ID:
        raise BadRequestError(INVALID_ID_DESCRIPTION)
    return value


def post_id_path(post_id: str = Path(..., description="Post identifier", examples=["22"])) -> int:
    return parse_id(post_id)


def item_id_path(item_id: str = Path(..., description="Item identifier", examples=["1"])) -> int:
    return parse_id(item_id)


def error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """OpenAPI ``responses`` entry documenting the error body for each code."""
    return {code: {"model": ErrorResponse} for code in status_codes}
