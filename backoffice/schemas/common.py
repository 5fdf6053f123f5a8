"""Shared schema plumbing — camelCase base model, money output type, paging envelope."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimal internally, JSON number on the wire (pydantic would emit a string)
MoneyOut = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PageEnvelope(CamelModel):
    """Paging metadata shared by every list response."""
    page_number: int
    page_size: int
    total_count: int
    total_pages: int
