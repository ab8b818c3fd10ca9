"""
Argument validation for tool calls.

MCP INPUT VALIDATION:
``tools/call`` delivers arguments as an arbitrary JSON value. This module is
the only place that untyped value is inspected; everything downstream receives
a plain dict of already-checked ``int | float | str | bool`` values.

Rules, applied in order:
1. A missing argument bag counts as ``{}``; anything other than an object is rejected.
2. Every required parameter must be present (``missing_parameter``).
3. Every declared parameter that is present must have the declared primitive
   type (``type_mismatch``). Booleans are never numbers.
4. Keys the contract does not declare are ignored.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import JsonValue, StrictBool, StrictFloat, StrictInt, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .contract import ParameterSpec, ParameterType, ToolContract
from .errors import ArgumentValidationError, ValidationErrorKind

ArgumentValue = int | float | str | bool
ValidatedArguments = dict[str, ArgumentValue]

_ADAPTERS: dict[ParameterType, TypeAdapter[Any]] = {
    ParameterType.NUMBER: TypeAdapter(StrictInt | StrictFloat),
    ParameterType.STRING: TypeAdapter(StrictStr),
    ParameterType.BOOLEAN: TypeAdapter(StrictBool),
}


def json_type_name(value: object) -> str:
    """Name of the JSON type ``value`` would have on the wire."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _coerce(param: ParameterSpec, value: JsonValue) -> ArgumentValue:
    mismatch = ArgumentValidationError(
        ValidationErrorKind.TYPE_MISMATCH,
        f"Parameter '{param.name}' must be a {param.type.value}, got {json_type_name(value)}",
        parameter=param.name,
    )
    # bool is a subclass of int; a JSON true is never a number
    if param.type is ParameterType.NUMBER and isinstance(value, bool):
        raise mismatch
    try:
        return _ADAPTERS[param.type].validate_python(value)
    except PydanticValidationError as e:
        raise mismatch from e


def validate_arguments(contract: ToolContract, arguments: JsonValue | None) -> ValidatedArguments:
    """
    Check ``arguments`` against ``contract`` and return the typed values.

    Optional parameters that were not supplied are absent from the result.

    Raises:
        ArgumentValidationError: on the first violation found
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ArgumentValidationError(
            ValidationErrorKind.TYPE_MISMATCH,
            f"Tool arguments must be an object, got {json_type_name(arguments)}",
        )

    for name in contract.required:
        if name not in arguments:
            raise ArgumentValidationError(
                ValidationErrorKind.MISSING_PARAMETER,
                f"Missing required parameter '{name}'",
                parameter=name,
            )

    validated: ValidatedArguments = {}
    for param in contract.parameters:
        if param.name in arguments:
            validated[param.name] = _coerce(param, arguments[param.name])
    return validated
