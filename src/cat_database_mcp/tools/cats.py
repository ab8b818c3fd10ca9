"""
Cat tools for the Cat Database MCP Server.

Four read-only tools over the cat repository:

- ``list_all_cats``: every cat
- ``get_cat_by_id``: one cat by numeric id; an unknown id is a normal,
  successful "not found" answer rather than an error
- ``search_by_breed``: case-sensitive substring match on breed
- ``get_indoor_cats``: cats whose ``is_indoor`` flag is set

Each handler receives a repository and already-validated arguments and
returns a list of text content blocks. Listings are a one-line summary
followed by the matching cats as pretty-printed JSON.
"""

from mcp import types

from ..database.repository import CatPredicate, CatRepository
from ..models.cat import Cat
from .contract import ParameterSpec, ParameterType, ToolContract, ToolDescriptor
from .dispatcher import ToolBinding
from .encoding import encode_json, text_content
from .validation import ArgumentValue, ValidatedArguments

# SQLite INTEGER upper bound; larger ids cannot exist
_MAX_CAT_ID = 2**63 - 1


# =============================================================================
# PREDICATES
# =============================================================================


def breed_contains(fragment: str) -> CatPredicate:
    """Case-sensitive substring match on breed; no wildcards or regex."""
    return lambda cat: fragment in cat.breed


def is_indoor(cat: Cat) -> bool:
    return cat.is_indoor


# =============================================================================
# HANDLERS
# =============================================================================


def list_all_cats(repo: CatRepository, _args: ValidatedArguments) -> list[types.TextContent]:
    cats = repo.all()
    return [text_content(f"All registered cats ({len(cats)} cats):\n{encode_json(cats)}")]


def _as_cat_id(value: ArgumentValue) -> int | None:
    """Integral, in-range numbers become ids; anything else can never match."""
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if not isinstance(value, int) or isinstance(value, bool):
        return None
    if value < 0 or value > _MAX_CAT_ID:
        return None
    return value


def get_cat_by_id(repo: CatRepository, args: ValidatedArguments) -> list[types.TextContent]:
    raw_id = args["id"]
    cat_id = _as_cat_id(raw_id)
    label = cat_id if cat_id is not None else raw_id

    cat = repo.get(cat_id) if cat_id is not None else None
    if cat is None:
        return [text_content(f"Cat with ID {label} not found")]
    return [text_content(f"Cat details (ID: {label}):\n{encode_json(cat)}")]


def search_by_breed(repo: CatRepository, args: ValidatedArguments) -> list[types.TextContent]:
    breed = str(args["breed"])
    matches = repo.filter(breed_contains(breed))
    if not matches:
        return [text_content(f'No cats found with breed "{breed}"')]
    return [
        text_content(
            f'Cats with breed "{breed}" ({len(matches)} cats):\n{encode_json(matches)}'
        )
    ]


def get_indoor_cats(repo: CatRepository, _args: ValidatedArguments) -> list[types.TextContent]:
    cats = repo.filter(is_indoor)
    return [text_content(f"Indoor cats ({len(cats)} cats):\n{encode_json(cats)}")]


# =============================================================================
# TOOL REGISTRATION
# =============================================================================

# Order here is the order clients see in tools/list
CAT_TOOLS: tuple[ToolBinding, ...] = (
    ToolBinding(
        ToolDescriptor(
            name="list_all_cats",
            description="Get a list of all cats",
        ),
        list_all_cats,
    ),
    ToolBinding(
        ToolDescriptor(
            name="get_cat_by_id",
            description="Get information about a specific cat by ID",
            contract=ToolContract(
                parameters=(
                    ParameterSpec(name="id", type=ParameterType.NUMBER, description="Cat ID"),
                ),
            ),
        ),
        get_cat_by_id,
    ),
    ToolBinding(
        ToolDescriptor(
            name="search_by_breed",
            description="Search for cats by breed",
            contract=ToolContract(
                parameters=(
                    ParameterSpec(
                        name="breed",
                        type=ParameterType.STRING,
                        description="Breed to search for",
                    ),
                ),
            ),
        ),
        search_by_breed,
    ),
    ToolBinding(
        ToolDescriptor(
            name="get_indoor_cats",
            description="Get only indoor cats",
        ),
        get_indoor_cats,
    ),
)
