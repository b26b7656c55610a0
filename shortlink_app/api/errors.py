"""
Uniform mapping from service errors to HTTP responses.

Routes never build error responses themselves: they let ShortlinkError
subclasses propagate and the handlers below translate them.
"""

import logging
from typing import Dict, Tuple, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shortlink_app.errors import (
    DuplicateCodeError,
    LinkNotFoundError,
    LinkRegistryError,
    ShortlinkError,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR = (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

# Looked up along the exception's MRO, so subclasses (e.g. LinkLookupError)
# inherit their parent's mapping.
ERROR_RESPONSES: Dict[Type[Exception], Tuple[int, str]] = {
    LinkNotFoundError: (status.HTTP_404_NOT_FOUND, "Not found"),
    DuplicateCodeError: (status.HTTP_400_BAD_REQUEST, "Duplicated code"),
    LinkRegistryError: INTERNAL_ERROR,
    StoreUnavailable: INTERNAL_ERROR,
}


def status_for(exc: Exception) -> Tuple[int, str]:
    for cls in type(exc).__mro__:
        if cls in ERROR_RESPONSES:
            return ERROR_RESPONSES[cls]
    return INTERNAL_ERROR


async def shortlink_error_handler(request: Request, exc: ShortlinkError) -> JSONResponse:
    status_code, message = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=status_code, content={"message": message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed unexpectedly", request.method, request.url.path, exc_info=exc)
    status_code, message = INTERNAL_ERROR
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShortlinkError, shortlink_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
