"""
HTTP responses shared by the controllers

Every error leaves the API as {"message": ..., "error": ...}: a fixed
human message for the operation plus the underlying error text.
"""
import logging
from typing import Optional

from fastapi import Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from order_api.core.errors import ErrorContext, classify

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    message: str
    error: str


def error_response(status_code: int, message: str, error: Exception) -> JSONResponse:
    body = ErrorResponse(message=message, error=str(error))
    if status_code >= 500:
        logger.error(f"{message}: {error}", exc_info=error)
    else:
        logger.warning(f"{status_code} {message}: {error}")
    return JSONResponse(status_code=status_code, content=body.model_dump())


def bad_request(message: str, error: Exception) -> JSONResponse:
    return error_response(400, message, error)


def use_case_error(context: ErrorContext, error: Exception) -> JSONResponse:
    """Classify a use-case failure and render it"""
    status_code, message = classify(context, error)
    return error_response(status_code, message, error)


def ok(body: Optional[dict] = None) -> Response:
    """200 with a JSON body, or with an empty body when there is nothing to return"""
    if body is None:
        return Response(status_code=200)
    return JSONResponse(status_code=200, content=body)


def no_content() -> Response:
    return Response(status_code=204)
