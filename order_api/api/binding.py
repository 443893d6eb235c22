"""
Request binding - turns raw bodies, query strings and path segments into
typed request values

Every failure is raised as DecodeError carrying the underlying parser
message unchanged, so clients see exactly what went wrong.
"""
import json
import re
from decimal import Decimal
from typing import Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel

from order_api.core.config import settings
from order_api.core.errors import DecodeError
from order_api.domain.page import PageParams

ModelT = TypeVar("ModelT", bound=BaseModel)

_INTEGER = re.compile(r"-?[0-9]+")


def _first_error(error: pydantic.ValidationError) -> str:
    detail = error.errors()[0]
    field = ".".join(str(part) for part in detail["loc"])
    if field:
        return f"{field}: {detail['msg']}"
    return detail["msg"]


def bind_json(body: bytes, model: Type[ModelT]) -> ModelT:
    """
    Decode a JSON body into a request model

    JSON numbers with a fraction are read as Decimal so money values keep
    their exact digits.

    Args:
        body: Raw request body
        model: Pydantic model describing the payload

    Raises:
        DecodeError: body is not JSON, not an object, or has mistyped fields
    """
    try:
        payload = json.loads(body, parse_float=Decimal)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(str(e)) from e

    if not isinstance(payload, dict):
        raise DecodeError(f"cannot bind {type(payload).__name__} into {model.__name__}")

    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as e:
        raise DecodeError(_first_error(e)) from e


def parse_int(value: str) -> int:
    """
    Parse a plain base-10 integer: optional minus sign, ASCII digits only

    Text int() would still accept (underscores, spaces, '+', non-ASCII
    digits) is rejected with the same message int() gives for bad input.
    """
    if not _INTEGER.fullmatch(value):
        raise DecodeError(f"invalid literal for int() with base 10: {value!r}")
    return int(value)


def bind_page_params(limit: Optional[str], offset: Optional[str]) -> PageParams:
    """
    Decode the limit/offset query parameters

    Absent or empty values fall back to settings.DEFAULT_PAGE_LIMIT and 0.
    limit may not exceed settings.MAX_PAGE_LIMIT.
    """
    page_limit = parse_int(limit) if limit else settings.DEFAULT_PAGE_LIMIT
    page_offset = parse_int(offset) if offset else 0

    if page_limit <= 0:
        raise DecodeError("limit must be greater than zero")
    if page_limit > settings.MAX_PAGE_LIMIT:
        raise DecodeError(f"limit must not exceed {settings.MAX_PAGE_LIMIT}")
    if page_offset < 0:
        raise DecodeError("offset must not be negative")

    return PageParams(limit=page_limit, offset=page_offset)

