from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ReviewFields(BaseModel):
    """Validated caller input for a new review."""

    name: str
    rating: int
    comment: str


class ReviewRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    rating: int
    comment: str
    created_at: str = Field(alias="createdAt")


class ReviewListResponse(BaseModel):
    reviews: List[ReviewRecord]
