"""
Tool descriptors and their input contracts.

MCP TOOL STRUCTURE:
Each tool is advertised with:
- name: stable identifier used to dispatch ``tools/call``
- description: free text shown to the model
- inputSchema: a JSON Schema object describing the accepted arguments

Contracts here are flat: every parameter is a primitive
(number, string or boolean) and no nested objects or arrays are allowed.
The rendered schema always has the shape::

    {"type": "object",
     "properties": {<name>: {"type": <primitive>, "description": <text>}},
     "required": [<names>]}
"""

import enum
from typing import Any

from mcp import types
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ParameterType(str, enum.Enum):
    """Primitive JSON Schema types a parameter may declare."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"


class ParameterSpec(BaseModel):
    """One named parameter of a tool contract."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Argument key the caller must use",
        min_length=1,
        pattern=r"^[A-Za-z_][A-Za-z0-9_-]*$",
    )
    type: ParameterType = Field(..., description="Primitive type of the value")
    description: str = Field(..., description="Human-readable parameter description")
    required: bool = Field(default=True, description="Whether the caller must supply it")

    def to_json_schema(self) -> dict[str, Any]:
        return {"type": self.type.value, "description": self.description}


class ToolContract(BaseModel):
    """The ordered parameter set a tool accepts."""

    model_config = ConfigDict(frozen=True)

    parameters: tuple[ParameterSpec, ...] = ()

    @model_validator(mode="after")
    def check_unique_names(self) -> "ToolContract":
        seen: set[str] = set()
        for param in self.parameters:
            if param.name in seen:
                raise ValueError(f"Duplicate parameter name: {param.name}")
            seen.add(param.name)
        return self

    @property
    def required(self) -> list[str]:
        """Names of required parameters, in declaration order."""
        return [p.name for p in self.parameters if p.required]

    def get(self, name: str) -> ParameterSpec | None:
        for param in self.parameters:
            if param.name == name:
                return param
        return None

    def to_json_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.to_json_schema() for p in self.parameters},
            "required": self.required,
        }


class ToolDescriptor(BaseModel):
    """
    Everything the catalog knows about one tool.

    ``to_mcp_tool()`` produces the ``mcp.types.Tool`` sent in ``tools/list``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Unique tool name",
        pattern=r"^[a-z][a-z0-9_]*$",
        examples=["list_all_cats", "get_cat_by_id"],
    )
    description: str = Field(..., min_length=1)
    contract: ToolContract = Field(default_factory=ToolContract)

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.contract.to_json_schema()

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )
