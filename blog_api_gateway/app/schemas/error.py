"""Error body returned by every failing endpoint."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    code: str = Field(..., examples=["NotFound"])
    description: str = Field(..., examples=["not found"])
