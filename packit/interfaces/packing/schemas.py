"""
Pydantic schemas for packing API request/response validation.

These schemas enforce input validation and define the API contract.
All fields use strict typing with constraints.
No business logic belongs here.
"""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from packit.domain.packing.entities import Gender

NAME_MAX_LEN = 200
PLACE_MAX_LEN = 100
NOT_BLANK = r"\S"


class LocalizationSchema(BaseModel):
    """City/country pair of the trip destination."""

    city: str = Field(..., min_length=1, max_length=PLACE_MAX_LEN)
    country: str = Field(..., min_length=1, max_length=PLACE_MAX_LEN)


class CreatePackingListRequest(BaseModel):
    """Request schema for creating a packing list with default items.

    Attributes:
        id: Optional client-chosen identity. Generated when omitted.
        name: Unique list name (1-200 chars, not only whitespace).
        days: Trip duration in days (1-100).
        gender: Traveler gender category.
        localization: Trip destination used for the weather lookup.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN, pattern=NOT_BLANK)
    days: int = Field(..., ge=1, le=100, description="Trip duration in days (1-100)")
    gender: Gender
    localization: LocalizationSchema | None = None


class CreatePackingListResponse(BaseModel):
    id: UUID


class AddPackingItemRequest(BaseModel):
    """Request schema for adding an item to a packing list."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN, pattern=NOT_BLANK)
    quantity: int = Field(..., ge=1)


class PackingItemSchema(BaseModel):
    name: str
    quantity: int
    is_packed: bool


class PackingListResponse(BaseModel):
    """Response schema for a single packing list."""

    id: UUID
    name: str
    days: int
    gender: str
    temperature: float
    localization: LocalizationSchema
    items: list[PackingItemSchema]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    storage_backend: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
