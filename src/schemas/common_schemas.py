"""Common schemas used across multiple API endpoints.

JSON field names are camelCase on the wire (tenantId, createdAt) and
snake_case in Python.
"""

from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

JsonAmount = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]
"""Decimal held exactly in Python, written as a JSON number."""


class CamelModel(BaseModel):
    """Base schema with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreatedResponse(BaseModel):
    """Response for a created resource.

    Attributes:
        id: Generated identifier.
    """

    id: UUID = Field(..., description="Identifier of the created resource")
