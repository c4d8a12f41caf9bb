"""Map searchkit validation errors to HTTP 400 responses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse

from searchkit_core.primitives.exceptions import ValidationError
from searchkit_specifications.exceptions import SpecificationError

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


async def search_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a rejected search as ``400`` with the error's ``to_dict()`` body.

    Covers ``InvalidFieldError``, ``TypeMismatchError`` and every other
    ``SpecificationError``, plus ``FilterParseError`` for reserved
    parameters.
    """
    body = exc.to_dict() if hasattr(exc, "to_dict") else {"message": str(exc)}
    logger.warning(
        "Rejected search %s %s: %s",
        request.method,
        request.url.path,
        body.get("error", type(exc).__name__),
    )
    return JSONResponse(status_code=400, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    """Install :func:`search_error_handler` on *app*.

    Example:
        ```python
        app = FastAPI()
        register_exception_handlers(app)
        app.include_router(create_search_router(schema, repo), prefix="/products")
        ```
    """
    app.add_exception_handler(SpecificationError, search_error_handler)
    app.add_exception_handler(ValidationError, search_error_handler)
