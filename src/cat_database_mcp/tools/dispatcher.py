"""
Tool dispatcher for the Cat Database MCP Server.

The dispatcher is the whole protocol surface for tools:

- ``list_tools(cursor)`` answers ``tools/list`` with the full catalog
- ``call_tool(name, arguments)`` answers ``tools/call``

MCP TOOL EXECUTION:
1. Look the tool up in the catalog (unknown -> METHOD_NOT_FOUND)
2. Validate the argument bag against its contract (bad -> INVALID_PARAMS)
3. Run the bound handler against a repository opened for this call
4. Wrap the handler's text content in a ``CallToolResult``
   (serialization failure -> INTERNAL_ERROR)

Steps 1 and 2 run before any handler code, so a rejected call never
partially executes. Every call is independent; the dispatcher keeps no
state between requests.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from mcp import types
from pydantic import JsonValue

from ..database.repository import CatRepository, RepositoryException
from ..database.session import DatabaseManager
from ..observability.decorators import trace_tool_call
from .catalog import ToolCatalog, ensure_catalog_consistency
from .contract import ToolDescriptor
from .errors import ArgumentValidationError, ResultEncodingError, ToolCallError
from .validation import ValidatedArguments, validate_arguments

logger = logging.getLogger(__name__)

ToolHandler = Callable[[CatRepository, ValidatedArguments], list[types.TextContent]]


@dataclass(frozen=True)
class ToolBinding:
    """A tool descriptor paired with the function that implements it."""

    descriptor: ToolDescriptor
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolDispatcher:
    """
    Routes ``tools/list`` and ``tools/call`` to the registered tools.

    Built once at startup from a sequence of bindings; refuses to construct
    if the catalog and the handler map would not match one-to-one.
    """

    def __init__(self, bindings: Sequence[ToolBinding], db_manager: DatabaseManager):
        self.catalog = ToolCatalog(binding.descriptor for binding in bindings)
        self._handlers: dict[str, ToolHandler] = {
            binding.name: binding.handler for binding in bindings
        }
        ensure_catalog_consistency(self.catalog, self._handlers)
        self.db_manager = db_manager
        logger.info("Registered %d tools: %s", len(self.catalog), ", ".join(self.catalog.names()))

    # =========================================================================
    # tools/list
    # =========================================================================

    def list_tools(self, cursor: str | None = None) -> types.ListToolsResult:
        """
        Return every tool in catalog order.

        The catalog always fits in one page: ``cursor`` is accepted for
        protocol compatibility and ignored, and ``nextCursor`` is never set.
        """
        if cursor is not None:
            logger.debug("Ignoring pagination cursor %r; tool list is a single page", cursor)
        return types.ListToolsResult(
            tools=[descriptor.to_mcp_tool() for descriptor in self.catalog.list()],
            nextCursor=None,
        )

    # =========================================================================
    # tools/call
    # =========================================================================

    @trace_tool_call
    def call_tool(self, name: str, arguments: JsonValue | None = None) -> types.CallToolResult:
        """
        Validate and execute one tool call.

        Raises:
            ToolCallError: METHOD_NOT_FOUND, INVALID_PARAMS or INTERNAL_ERROR
        """
        descriptor = self.catalog.lookup(name)
        if descriptor is None:
            logger.warning("Rejected call to unknown tool %r", name)
            raise ToolCallError.method_not_found(name)

        try:
            validated = validate_arguments(descriptor.contract, arguments)
        except ArgumentValidationError as e:
            logger.warning("Invalid arguments for %s: %s", name, e.message)
            raise ToolCallError.invalid_params(name, e) from e

        handler = self._handlers[name]
        logger.debug("Calling %s with %s", name, validated)

        try:
            with self.db_manager.session_scope() as session:
                content = handler(CatRepository(session), validated)
        except ResultEncodingError as e:
            logger.error("Failed to encode result of %s: %s", name, e)
            raise ToolCallError.internal_error(name, str(e)) from e
        except RepositoryException as e:
            logger.error("Repository failure in %s: %s", name, e)
            raise ToolCallError.internal_error(name, str(e)) from e

        return types.CallToolResult(content=list(content), isError=False)
