"""
Pydantic schemas for cards.

A card is an atomic task record with a title and a content body.
Both fields are required to be non-empty; that check is performed by
the card service so that missing and empty values are reported the
same way.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CardCreate(BaseModel):
    """Schema for creating a new card."""

    title: Optional[str] = Field(None, description="Short title of the card")
    content: Optional[str] = Field(None, description="Body text of the card")


class CardRead(BaseModel):
    """Schema for reading a card."""

    id: str
    title: str
    content: str
