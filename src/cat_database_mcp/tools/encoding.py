"""Helpers for turning handler results into MCP text content."""

import json
from typing import Any

from mcp import types
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .errors import ResultEncodingError


def encode_json(value: Any) -> str:
    """
    Pretty-print ``value`` (models, lists of models, plain data) as JSON.

    Raises:
        ResultEncodingError: if the value cannot be serialized
    """
    try:
        return json.dumps(to_jsonable_python(value), indent=2, ensure_ascii=False)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise ResultEncodingError(f"Serialization error: {e}") from e


def text_content(text: str) -> types.TextContent:
    return types.TextContent(type="text", text=text)
