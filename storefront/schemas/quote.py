from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class QuoteFields(BaseModel):
    """Validated caller input for a new quote request."""

    topic: str
    phone: str
    name: str = ""
    requirement: str = ""


class QuoteRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    topic: str
    name: str = ""
    phone: str
    requirement: str = ""
    created_at: str = Field(alias="createdAt")


class QuoteListResponse(BaseModel):
    quotes: List[QuoteRecord]
