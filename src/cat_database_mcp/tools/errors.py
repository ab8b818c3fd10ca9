"""
Error taxonomy for tool dispatch.

MCP ERROR HANDLING:
Failures that stop a tool call are reported as JSON-RPC errors using the
standard codes from ``mcp.types``:

- -32601 METHOD_NOT_FOUND: the requested tool is not in the catalog
- -32602 INVALID_PARAMS: the argument bag failed validation
- -32603 INTERNAL_ERROR: the result could not be encoded (a server bug)

A lookup that finds nothing (e.g. ``get_cat_by_id`` with an unknown id) is
NOT an error; it is a successful result whose text says so.

``ToolCallError`` subclasses ``McpError`` so the MCP server turns it into an
error response without any extra translation.
"""

import enum
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class ToolErrorCode(enum.IntEnum):
    """Taxonomy codes a tool call can fail with."""

    METHOD_NOT_FOUND = METHOD_NOT_FOUND
    INVALID_PARAMS = INVALID_PARAMS
    INTERNAL_ERROR = INTERNAL_ERROR

    @property
    def taxonomy(self) -> str:
        """Lower-case name, e.g. ``invalid_params``."""
        return self.name.lower()


class ValidationErrorKind(str, enum.Enum):
    """Why an argument bag was rejected."""

    MISSING_PARAMETER = "missing_parameter"
    TYPE_MISMATCH = "type_mismatch"


class ArgumentValidationError(ValueError):
    """Raised by the validator when an argument bag does not satisfy a contract."""

    def __init__(self, kind: ValidationErrorKind, message: str, parameter: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.parameter = parameter


class ResultEncodingError(Exception):
    """Raised when a handler's result cannot be serialized."""


class ToolRegistryError(RuntimeError):
    """Raised at startup when the catalog and handler map disagree."""


class ToolCallError(McpError):
    """
    A structured tool-call failure.

    Carries an ``ErrorData`` payload (code, message, optional data) that the
    MCP server sends back verbatim as the JSON-RPC error.
    """

    def __init__(self, code: ToolErrorCode, message: str, data: dict[str, Any] | None = None):
        super().__init__(ErrorData(code=int(code), message=message, data=data))
        self.code = ToolErrorCode(code)

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def data(self) -> Any:
        return self.error.data

    @classmethod
    def method_not_found(cls, tool_name: str) -> "ToolCallError":
        return cls(
            ToolErrorCode.METHOD_NOT_FOUND,
            f"Unknown tool: {tool_name}",
            {"tool": tool_name},
        )

    @classmethod
    def invalid_params(cls, tool_name: str, error: ArgumentValidationError) -> "ToolCallError":
        return cls(
            ToolErrorCode.INVALID_PARAMS,
            error.message,
            {
                "tool": tool_name,
                "parameter": error.parameter,
                "reason": error.kind.value,
            },
        )

    @classmethod
    def internal_error(cls, tool_name: str, detail: str) -> "ToolCallError":
        return cls(
            ToolErrorCode.INTERNAL_ERROR,
            detail,
            {"tool": tool_name},
        )

    def __repr__(self) -> str:
        return f"ToolCallError({self.code.taxonomy}, {self.message!r})"
