from __future__ import annotations

import math
import re
from typing import Annotated, Any

import structlog
from fastapi import Body, Request
from pydantic import BeforeValidator, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from menu_api.core.errors import ValidationFailed
from menu_api.models.schemas import Category, FieldError, MenuItemFields

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_CATEGORY_VALUES = [category.value for category in Category]

logger = structlog.get_logger(__name__)


def _invalid(field: str, message: str) -> PydanticCustomError:
    return PydanticCustomError(f"{field}_invalid", message)


def _trimmed_text(field: str, value: Any, min_length: int) -> str:
    if not isinstance(value, str):
        raise _invalid(field, f"{field} must be a string")
    value = value.strip()
    if len(value) < min_length:
        raise _invalid(field, f"{field} must be at least {min_length} characters")
    return value


def _ingredient(value: Any) -> str:
    if not isinstance(value, str):
        raise _invalid("ingredient", "each ingredient must be a string")
    value = value.strip()
    if not value:
        raise _invalid("ingredient", "ingredient entries cannot be empty")
    return value


Ingredient = Annotated[str, BeforeValidator(_ingredient)]


class MenuItemInput(MenuItemFields):
    """Request-side rules for :class:`MenuItemFields`.

    Every field defaults to ``None`` and defaults are validated, so a missing
    field reports the same message as one of the wrong type.
    """

    model_config = ConfigDict(validate_default=True)

    name: str = None  # type: ignore[assignment]
    description: str = None  # type: ignore[assignment]
    price: float = None  # type: ignore[assignment]
    category: Category = None  # type: ignore[assignment]
    ingredients: list[Ingredient] = None  # type: ignore[assignment]
    available: bool | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        return _trimmed_text("name", value, 3)

    @field_validator("description", mode="before")
    @classmethod
    def _check_description(cls, value: Any) -> str:
        return _trimmed_text("description", value, 10)

    @field_validator("price", mode="before")
    @classmethod
    def _check_price(cls, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise _invalid("price", "price must be a number > 0")
        try:
            # Huge JSON integers overflow here rather than becoming inf.
            value = float(value.strip() if isinstance(value, str) else value)
        except (OverflowError, ValueError):
            raise _invalid("price", "price must be a number > 0") from None
        if not math.isfinite(value) or value <= 0:
            raise _invalid("price", "price must be a number > 0")
        return value

    @field_validator("category", mode="before")
    @classmethod
    def _check_category(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise _invalid("category", "category must be a string")
        if value not in _CATEGORY_VALUES:
            raise _invalid("category", f"category must be one of: {', '.join(_CATEGORY_VALUES)}")
        return value

    @field_validator("ingredients", mode="before")
    @classmethod
    def _check_ingredients(cls, value: Any) -> list:
        if not isinstance(value, list) or not value:
            raise _invalid("ingredients", "ingredients must be a non-empty array")
        return value

    @field_validator("available", mode="before")
    @classmethod
    def _check_available(cls, value: Any, info: ValidationInfo) -> bool | None:
        # None means omitted only when the key is absent; an explicit null is rejected.
        present = (info.context or {}).get("present", ())
        if value is None and "available" not in present:
            return None
        if not isinstance(value, bool):
            raise _invalid("available", "available must be a boolean")
        return value


def _field_name(loc: tuple[Any, ...]) -> str:
    name = ""
    for part in loc:
        if isinstance(part, int):
            name += f"[{part}]"
        else:
            name = f"{name}.{part}" if name else str(part)
    return name or "body"


def check_item_id(raw: Any) -> tuple[int | None, list[FieldError]]:
    """Parse a path id; return ``(id, [])`` or ``(None, [error])``."""
    text = str(raw).strip()
    if _INT_RE.match(text) and int(text) > 0:
        return int(text), []
    return None, [FieldError(field="id", msg="id must be a positive integer")]


def check_menu_item(payload: Any) -> tuple[MenuItemFields | None, list[FieldError]]:
    """Run every body rule and collect all failures instead of stopping at the first."""
    if not isinstance(payload, dict):
        payload = {}
    try:
        validated = MenuItemInput.model_validate(payload, context={"present": set(payload)})
    except ValidationError as exc:
        errors = [FieldError(field=_field_name(err["loc"]), msg=err["msg"]) for err in exc.errors()]
        return None, errors
    return MenuItemFields.model_validate(validated.model_dump()), []


def _fail(details: list[FieldError]) -> ValidationFailed:
    logger.warning("request_validation_failed", fields=[detail.field for detail in details])
    return ValidationFailed(details)


def _log_body(request: Request, payload: Any) -> None:
    if request.method in {"POST", "PUT", "PATCH"}:
        logger.info("request_body", body=payload)


# FastAPI dependencies. Each one is a pipeline stage that either hands the
# coerced values to the handler or short-circuits with ValidationFailed.


async def valid_item_id(item_id: str) -> int:
    parsed, errors = check_item_id(item_id)
    if errors:
        raise _fail(errors)
    return parsed


async def valid_menu_item(request: Request, payload: Any = Body(default=None)) -> MenuItemFields:
    _log_body(request, payload)
    fields, errors = check_menu_item(payload)
    if errors:
        raise _fail(errors)
    return fields


async def valid_menu_update(
    request: Request,
    item_id: str,
    payload: Any = Body(default=None),
) -> tuple[int, MenuItemFields]:
    _log_body(request, payload)
    parsed, id_errors = check_item_id(item_id)
    fields, body_errors = check_menu_item(payload)
    if id_errors or body_errors:
        raise _fail(id_errors + body_errors)
    return parsed, fields
