"""Request Body Parsing — JSON or HTML-form bodies validated by one Pydantic schema.

Invariants:
    - application/x-www-form-urlencoded and multipart bodies are read as flat string dicts
    - Any other content type is read as JSON; an empty body is {}
    - Malformed JSON and schema violations raise RequestValidationError (400 via handler)
"""

import json
from typing import TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request, schema: type[T]) -> T:
    """Parse and validate the request body against `schema`."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        data = {k: v for k, v in form.items() if isinstance(v, str)}
    else:
        raw = await request.body()
        try:
            data = json.loads(raw) if raw.strip() else {}
        except ValueError:
            raise RequestValidationError([{
                "loc": ("body",), "msg": "Invalid JSON body", "type": "json_invalid",
            }])
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError([
            {**err, "loc": ("body", *err["loc"])} for err in e.errors()
        ])
