"""
Inventory item endpoints.

A small CRUD surface with two stock adjustment routes.  Both
``/increase`` and ``/decrease`` take an optional ``{"amount": n}``
body (default 1); taking more than is in stock is refused with 409.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Response, status

from blog_api_gateway.app.api.deps import error_responses, get_item_service, item_id_path
from blog_api_gateway.app.schemas.item import Item, ItemAdjust, ItemCreate, ItemList
from blog_api_gateway.app.services.item_service import ItemService

router = APIRouter()


def _amount(adjust: Optional[ItemAdjust]) -> int:
    return adjust.amount if adjust is not None else ItemAdjust().amount


@router.get("", response_model=ItemList, responses=error_responses(500))
def list_items(service: ItemService = Depends(get_item_service)) -> ItemList:
    return ItemList(items=service.list_items())


@router.get("/{item_id}", response_model=Item, responses=error_responses(400, 404))
def get_item(
    item_id: int = Depends(item_id_path),
    service: ItemService = Depends(get_item_service),
) -> Item:
    return service.get_item(item_id)


@router.post("", response_model=Item, status_code=status.HTTP_201_CREATED, responses=error_responses(400))
def create_item(
    item_in: ItemCreate,
    service: ItemService = Depends(get_item_service),
) -> Item:
    """Create an item; the response includes its id and timestamps."""
    return service.create_item(item_in)


@router.put("/{item_id}/increase", response_model=Item, responses=error_responses(400, 404))
def increase_quantity(
    item_id: int = Depends(item_id_path),
    adjust: Optional[ItemAdjust] = Body(None),
    service: ItemService = Depends(get_item_service),
) -> Item:
    return service.increase_quantity(item_id, _amount(adjust))


@router.put("/{item_id}/decrease", response_model=Item, responses=error_responses(400, 404, 409))
def decrease_quantity(
    item_id: int = Depends(item_id_path),
    adjust: Optional[ItemAdjust] = Body(None),
    service: ItemService = Depends(get_item_service),
) -> Item:
    """Take stock out of an item.  Refused with 409 if stock would go negative."""
    return service.decrease_quantity(item_id, _amount(adjust))


@router.delete("/{item_id}", responses=error_responses(400, 404))
def delete_item(
    item_id: int = Depends(item_id_path),
    service: ItemService = Depends(get_item_service),
) -> Response:
    service.delete_item(item_id)
    return Response(status_code=status.HTTP_200_OK)
