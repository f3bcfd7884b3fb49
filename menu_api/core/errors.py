from __future__ import annotations

from datetime import datetime, timezone

from fastapi import Request
from fastapi.responses import JSONResponse

from menu_api.models.schemas import ErrorBody, ErrorResponse, FieldError

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please retry, and contact support if it persists."


class ApiError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, details: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationFailed(ApiError):
    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(self, details: list[FieldError]) -> None:
        super().__init__("Request validation failed.", details=details)


class NotFoundError(ApiError):
    status_code = 404
    code = "NOT_FOUND"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def error_payload(
    code: str,
    message: str,
    request_id: str | None,
    details: list[FieldError] | None = None,
) -> dict:
    body = ErrorBody(
        code=code,
        message=message,
        request_id=request_id,
        timestamp=utc_timestamp(),
        details=details,
    )
    return ErrorResponse(error=body).model_dump(by_alias=True, exclude_none=True)


def request_id_of(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def error_response(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(exc.code, exc.message, request_id_of(request), exc.details),
    )
