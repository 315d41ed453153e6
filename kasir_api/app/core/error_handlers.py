"""
Application-wide exception handlers.

* ``RequestValidationError``: a body that is not valid JSON or cannot
  be coerced into a product, or a non-numeric path id.  Answered with
  400 instead of FastAPI's default 422.
* ``StorageError``: the database failed mid-request.  Logged and
  answered with 500.

Every response body has the same ``{"detail": "<message>"}`` shape as
FastAPI's own ``HTTPException`` responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import StorageError

logger = logging.getLogger(__name__)

INVALID_REQUEST_DETAIL = "Invalid request"
INVALID_ID_DETAIL = "Invalid produk ID"
STORAGE_ERROR_DETAIL = "Gagal mengakses penyimpanan"


def _is_path_error(exc: RequestValidationError) -> bool:
    return any(error.get("loc", ())[:1] == ("path",) for error in exc.errors())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = INVALID_ID_DETAIL if _is_path_error(exc) else INVALID_REQUEST_DETAIL
    logger.info("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": STORAGE_ERROR_DETAIL},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
