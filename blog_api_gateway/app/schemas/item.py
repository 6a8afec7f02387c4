"""
Pydantic models for inventory items.

Items are a small stand‑alone resource: a named stock entry with a
quantity and a storage location.  Quantities never drop below zero;
``ItemAdjust`` carries the step used by the increase/decrease
endpoints.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

NAME_MAX_LENGTH = 255
LOCATION_MAX_LENGTH = 255


class Item(BaseModel):
    """A stored inventory item."""

    id: int = Field(0, examples=[1])
    name: str = Field(..., examples=["Drum of engine oil"])
    quantity: int = Field(0, examples=[12])
    location: str = Field("", examples=["Warehouse A"])
    created_at: datetime
    updated_at: datetime


class ItemCreate(BaseModel):
    """Schema for creating an item."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, examples=["Drum of engine oil"])
    quantity: int = Field(0, ge=0, strict=True, examples=[12])
    location: str = Field("", max_length=LOCATION_MAX_LENGTH, examples=["Warehouse A"])


class ItemAdjust(BaseModel):
    """Body of the increase/decrease endpoints.  Defaults to a step of one."""

    amount: int = Field(1, ge=1, strict=True, examples=[5])


class ItemList(BaseModel):
    items: List[Item]
