"""
The tool catalog: a fixed, ordered collection of tool descriptors.

The catalog is built once at startup and never changes afterwards. Its order
is the order tools were registered, and ``tools/list`` returns it verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .contract import ToolDescriptor
from .errors import ToolRegistryError


class ToolCatalog:
    """Immutable, ordered set of ``ToolDescriptor`` objects keyed by name."""

    def __init__(self, descriptors: Iterable[ToolDescriptor]):
        self._descriptors: tuple[ToolDescriptor, ...] = tuple(descriptors)
        self._by_name: dict[str, ToolDescriptor] = {}
        for descriptor in self._descriptors:
            if descriptor.name in self._by_name:
                raise ToolRegistryError(f"Duplicate tool name in catalog: {descriptor.name}")
            self._by_name[descriptor.name] = descriptor

    def list(self) -> list[ToolDescriptor]:
        """All descriptors in registration order."""
        return list(self._descriptors)

    def lookup(self, name: str) -> ToolDescriptor | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [d.name for d in self._descriptors]

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._descriptors)

    def __repr__(self) -> str:
        return f"ToolCatalog({self.names()!r})"


def ensure_catalog_consistency(catalog: ToolCatalog, handlers: Mapping[str, object]) -> None:
    """
    Check that every catalog entry has a handler and every handler has an entry.

    Raises:
        ToolRegistryError: naming the tools on either side that have no partner
    """
    catalog_names = set(catalog.names())
    handler_names = set(handlers)

    missing_handlers = sorted(catalog_names - handler_names)
    orphan_handlers = sorted(handler_names - catalog_names)

    problems = []
    if missing_handlers:
        problems.append(f"tools without a handler: {', '.join(missing_handlers)}")
    if orphan_handlers:
        problems.append(f"handlers without a catalog entry: {', '.join(orphan_handlers)}")
    if problems:
        raise ToolRegistryError("Tool catalog and handler map disagree; " + "; ".join(problems))
