"""Shared error primitives and FastAPI exception handlers.

Every failure leaves the API as the same envelope::

    {"error": "...", "statusCode": 404, "hint": "...", "example": "..."}

``hint`` and ``example`` teach the player how to fix the call and are omitted
when there is nothing useful to say. Unexpected failures never carry either.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from http import HTTPStatus
from typing import Any, Awaitable, Callable, Sequence, cast

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

ExceptionHandlerCallable = Callable[[Request, Exception], Awaitable[Response]]

logger = logging.getLogger("fetch_legends.errors")

EXAMPLE_KEY = "x-example"

_HEAD = "HEAD"


class ApplicationError(Exception):
    """Domain error that should be rendered in the public API."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        hint: str | None = None,
        example: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.hint = hint
        self.example = example


class BadRequestError(ApplicationError):
    """400 for requests that are well-formed JSON but break a game rule."""

    def __init__(self, message: str, *, hint: str | None = None, example: str | None = None) -> None:
        super().__init__(
            message,
            status_code=status.HTTP_400_BAD_REQUEST,
            hint=hint,
            example=example,
        )


class NotFoundError(ApplicationError):
    """404 raised when a resource or challenge id does not resolve."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, hint=hint)

    @classmethod
    def for_resource(cls, label: str, known_ids: Iterable[str]) -> "NotFoundError":
        """Build the "<Label> not found" error listing the ids that do exist."""
        ids = sorted(known_ids)
        hint = f"Valid ids: {', '.join(ids)}" if ids else f"There are no {label.lower()}s right now."
        return cls(f"{label} not found", hint=hint)


class MethodNotAllowedError(ApplicationError):
    """405 raised when a path exists but does not accept the verb used."""

    def __init__(self, method: str, path: str, allowed: Sequence[str]) -> None:
        super().__init__(
            f"Method {method} not allowed for {path}",
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            hint=_allowed_methods_hint(path, allowed),
            example=f"{allowed[0]} {path}" if allowed else None,
        )
        self.allowed = list(allowed)


class ConflictError(ApplicationError):
    """409 for duplicate identifiers."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message, status_code=status.HTTP_409_CONFLICT, hint=hint)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach global exception handlers to the FastAPI app."""

    app.add_exception_handler(
        ApplicationError,
        cast(ExceptionHandlerCallable, application_error_handler),
    )
    app.add_exception_handler(
        RequestValidationError,
        cast(ExceptionHandlerCallable, request_validation_exception_handler),
    )
    app.add_exception_handler(
        StarletteHTTPException,
        cast(ExceptionHandlerCallable, http_exception_handler),
    )
    app.add_exception_handler(
        Exception,
        cast(ExceptionHandlerCallable, unexpected_exception_handler),
    )


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    headers = None
    if isinstance(exc, MethodNotAllowedError) and exc.allowed:
        headers = {"Allow": ", ".join(exc.allowed)}
    return error_response(
        status_code=exc.status_code,
        message=exc.message,
        hint=exc.hint,
        example=exc.example,
        headers=headers,
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    problems = _format_validation_errors(exc)
    hint = None
    if problems:
        hint = "Check these fields: " + "; ".join(
            f"{field} ({message})" for field, message in problems.items()
        )
    return error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        message="Malformed request",
        hint=hint,
        example=_route_example(request),
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    headers = dict(exc.headers or {})

    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        allowed = allowed_methods_for_path(request.app, request.url.path)
        if allowed:
            headers["Allow"] = ", ".join(allowed)
        error = MethodNotAllowedError(request.method, request.url.path, allowed)
        return error_response(
            status_code=error.status_code,
            message=error.message,
            hint=error.hint,
            example=error.example,
            headers=headers or None,
        )

    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail in (None, "Not Found"):
        collections = collection_paths(request.app)
        hint = f"Known resources: {', '.join(collections)}" if collections else None
        return error_response(
            status_code=exc.status_code,
            message=f"No route for {request.url.path}",
            hint=hint,
            headers=headers or None,
        )

    detail = exc.detail
    if isinstance(detail, Mapping):
        message = str(detail.get("error") or detail.get("message") or HTTPStatus(exc.status_code).phrase)
        hint = detail.get("hint")
        example = detail.get("example")
    else:
        message = str(detail or HTTPStatus(exc.status_code).phrase)
        hint = None
        example = None

    return error_response(
        status_code=exc.status_code,
        message=message,
        hint=str(hint) if hint else None,
        example=str(example) if example else None,
        headers=headers or None,
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled exception during request",
        exc_info=(exc.__class__, exc, exc.__traceback__),
        extra={"http_method": request.method, "http_path": request.url.path},
    )
    return error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="Internal server error",
    )


def error_response(
    *,
    status_code: int,
    message: str,
    hint: str | None = None,
    example: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Return JSONResponse adhering to the public error contract."""
    body = build_error_payload(status_code=status_code, message=message, hint=hint, example=example)
    return JSONResponse(
        content=jsonable_encoder(body),
        status_code=status_code,
        headers=dict(headers) if headers else None,
    )


def build_error_payload(
    *,
    status_code: int,
    message: str,
    hint: str | None = None,
    example: str | None = None,
) -> dict[str, object]:
    payload: dict[str, object] = {"error": message, "statusCode": status_code}
    if hint:
        payload["hint"] = hint
    if example:
        payload["example"] = example
    return payload


def allowed_methods_for_path(app: Any, path: str) -> list[str]:
    """Collect the verbs every route matching ``path`` accepts (HEAD excluded).

    A literal route such as ``/challenges/validate`` shadows templated ones
    like ``/challenges/{challenge_id}`` that happen to match the same path.
    """
    matching = [
        route
        for route in getattr(app, "routes", ())
        if isinstance(route, APIRoute) and route.path_regex.match(path) is not None
    ]
    literal = [route for route in matching if "{" not in route.path]
    methods: set[str] = set()
    for route in literal or matching:
        methods.update(method for method in route.methods if method != _HEAD)
    return sorted(methods)


def collection_paths(app: Any) -> list[str]:
    """Return GET paths without path parameters, i.e. the browsable collections."""
    paths = {
        route.path
        for route in getattr(app, "routes", ())
        if isinstance(route, APIRoute)
        and "GET" in route.methods
        and "{" not in route.path
        and route.include_in_schema
    }
    return sorted(paths)


def _allowed_methods_hint(path: str, allowed: Sequence[str]) -> str | None:
    if not allowed:
        return None
    if len(allowed) == 1:
        return f"Use {allowed[0]} for {path}"
    verbs = ", ".join(allowed[:-1]) + f" or {allowed[-1]}"
    return f"Use {verbs} for {path}"


def _route_example(request: Request) -> str | None:
    route = request.scope.get("route")
    extra = getattr(route, "openapi_extra", None) or {}
    example = extra.get(EXAMPLE_KEY)
    if example is None:
        return None
    if isinstance(example, str):
        return example
    return json.dumps(example, separators=(", ", ": "))


def _format_validation_errors(exc: RequestValidationError) -> dict[str, str]:
    formatted: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = _format_error_location(loc)
        message = error.get("msg", "Invalid value")
        if field in formatted:
            formatted[field] = f"{formatted[field]}; {message}"
        else:
            formatted[field] = message
    return formatted


def _format_error_location(location: Sequence[object]) -> str:
    filtered = [
        str(part)
        for part in location
        if part not in {"body", "query", "path"}  # hide transport-specific prefixes
    ]
    if not filtered:
        filtered = [str(part) for part in location]
    return ".".join(filtered) if filtered else "_schema"


__all__ = [
    "ApplicationError",
    "BadRequestError",
    "ConflictError",
    "EXAMPLE_KEY",
    "MethodNotAllowedError",
    "NotFoundError",
    "allowed_methods_for_path",
    "application_error_handler",
    "build_error_payload",
    "collection_paths",
    "error_response",
    "http_exception_handler",
    "register_exception_handlers",
    "request_validation_exception_handler",
    "unexpected_exception_handler",
]
