from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    appetizer = "appetizer"
    entree = "entree"
    dessert = "dessert"
    beverage = "beverage"


class MenuItemFields(BaseModel):
    """Validated, normalized body of a create or update request.

    ``available`` stays ``None`` when the caller omitted it, so create and
    update can apply their own defaults.
    """

    name: str
    description: str
    price: float
    category: Category
    ingredients: list[str]
    available: bool | None = None


class MenuItem(BaseModel):
    id: int
    name: str
    description: str
    price: float
    category: Category
    ingredients: list[str]
    available: bool = True


class DeletedResponse(BaseModel):
    deleted: MenuItem


class EndpointHits(BaseModel):
    endpoint: str
    count: int


class MetricsResponse(BaseModel):
    hits: list[EndpointHits]


class HealthResponse(BaseModel):
    status: str = "ok"


class FieldError(BaseModel):
    field: str
    msg: str


class ErrorBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str
    message: str
    request_id: str | None = Field(default=None, alias="requestId")
    timestamp: str
    details: list[FieldError] | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody
