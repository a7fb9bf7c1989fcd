"""
Error types and their HTTP rendering.

Services raise the domain errors defined here; the handlers registered
by :func:`register_exception_handlers` turn them into JSON bodies the
front‑end can use to re‑render a form.  Every error is terminal for
the request.

* ``Unauthenticated``, ``Forbidden``, ``NotFound`` and
  ``BusinessRuleConflict`` render as ``{"message": ...}``.
* ``ValidationFailed`` renders as ``{"errors": [{"field", "message"}]}``.
* Anything else becomes a generic 500 ``{"message": ...}``.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class CarShopError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, object]:
        return {"message": self.message}


class Unauthenticated(CarShopError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(CarShopError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(CarShopError):
    status_code = status.HTTP_404_NOT_FOUND


class BusinessRuleConflict(CarShopError):
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationFailed(CarShopError):
    """One or more field rules rejected the request payload.

    ``errors`` keeps the order in which the rules were declared.
    """

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[Dict[str, str]]) -> None:
        super().__init__("Validation failed")
        self.errors = list(errors)

    def to_body(self) -> Dict[str, object]:
        return {"errors": self.errors}


async def carshop_error_handler(request: Request, exc: CarShopError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(CarShopError, carshop_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
