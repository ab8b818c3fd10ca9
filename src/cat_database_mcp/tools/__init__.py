"""
MCP Tools for the Cat Database Server.

Tools in the Model Context Protocol are:
1. Named operations with a JSON Schema input contract
2. Advertised to clients via ``tools/list``
3. Invoked by clients via ``tools/call``
4. Answered with content blocks, or a JSON-RPC error on failure

The pieces:
- contract.py: tool descriptors and parameter contracts
- catalog.py: the fixed, ordered tool catalog
- validation.py: argument validation and coercion
- dispatcher.py: lookup, validation, execution and result wrapping
- cats.py: the four cat tools
"""

from .catalog import ToolCatalog, ensure_catalog_consistency
from .cats import CAT_TOOLS
from .contract import ParameterSpec, ParameterType, ToolContract, ToolDescriptor
from .dispatcher import ToolBinding, ToolDispatcher, ToolHandler
from .errors import (
    ArgumentValidationError,
    ResultEncodingError,
    ToolCallError,
    ToolErrorCode,
    ToolRegistryError,
    ValidationErrorKind,
)
from .validation import ValidatedArguments, validate_arguments

__all__ = [
    "CAT_TOOLS",
    "ArgumentValidationError",
    "ParameterSpec",
    "ParameterType",
    "ResultEncodingError",
    "ToolBinding",
    "ToolCallError",
    "ToolCatalog",
    "ToolContract",
    "ToolDescriptor",
    "ToolDispatcher",
    "ToolErrorCode",
    "ToolHandler",
    "ToolRegistryError",
    "ValidatedArguments",
    "ValidationErrorKind",
    "ensure_catalog_consistency",
    "validate_arguments",
]
