"""
Cat model for the Cat Database MCP Server.

This model represents one cat record. In the MCP architecture, cats are
returned by tools (list_all_cats, get_cat_by_id, search_by_breed,
get_indoor_cats) as pretty-printed JSON inside text content blocks.

The model follows MCP best practices:
1. Complete type hints for protocol compliance
2. Pydantic v2 for automatic JSON serialization
3. Validation rules for data integrity
4. Immutable instances - records never change once loaded
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Cat(BaseModel):
    """
    Represents a cat in the database.

    Identity is the numeric ``id``; it is unique within the repository.
    Field order here is the order used in serialized tool output.
    """

    id: int = Field(
        ...,
        description="Unique numeric identifier of the cat",
        ge=0,
        examples=[1, 2, 3],
    )

    name: str = Field(
        ...,
        description="The cat's name",
        min_length=1,
        max_length=100,
        examples=["Mike", "Shiro"],
    )

    age: int = Field(
        ...,
        description="Age in years",
        ge=0,
        le=40,
        examples=[2, 5, 7],
    )

    breed: str = Field(
        ...,
        description="Breed of the cat",
        min_length=1,
        max_length=100,
        examples=["Persian", "Calico", "Orange tabby"],
    )

    color: str = Field(
        ...,
        description="Coat color",
        min_length=1,
        max_length=100,
        examples=["White", "Black"],
    )

    is_indoor: bool = Field(
        default=True,
        description="Whether the cat lives indoors",
    )

    favorite_toy: str = Field(
        ...,
        description="The cat's favorite toy",
        max_length=200,
        examples=["Yarn ball", "Catnip"],
    )

    @field_validator("name", "breed", "color")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip surrounding whitespace so substring searches behave predictably."""
        v = v.strip()
        if not v:
            raise ValueError("Value must not be blank")
        return v

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 2,
                "name": "Shiro",
                "age": 5,
                "breed": "Persian",
                "color": "White",
                "is_indoor": True,
                "favorite_toy": "Yarn ball",
            }
        },
    )
