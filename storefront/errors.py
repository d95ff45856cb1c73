"""
errors.py
Exception taxonomy for the storefront API and the handler that turns
request-level errors into plain-text HTTP responses.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import PlainTextResponse


class StorefrontError(Exception):
    """Base error. status_code is used when the error reaches an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


# startup (fatal)

class ConfigurationError(StorefrontError):
    """Missing MONGODB_URL or an unreadable env file."""


class ConnectivityError(StorefrontError):
    """MongoDB could not be reached, or did not answer the ping in time."""


# per request

class InvalidIdError(StorefrontError):
    status_code = 400

    def __init__(self, value: str):
        super().__init__("Invalid ID format")
        self.value = value


class DocumentNotFoundError(StorefrontError):
    status_code = 404

    def __init__(self, entity: str):
        super().__init__(f"{entity.capitalize()} not found")
        self.entity = entity


class DatabaseOperationError(StorefrontError):
    status_code = 500


async def storefront_exception_handler(request: Request, exc: StorefrontError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)
