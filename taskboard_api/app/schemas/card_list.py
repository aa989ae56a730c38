"""
Pydantic schemas for lists.

A list is a named grouping of cards.  It stores the identifiers of
the cards it contains, in order, under the JSON key ``cardIds``.
Card identifiers are strings; numeric identifiers sent by clients
are converted to their decimal string form so that every lookup uses
the same id type.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


def _coerce_card_ids(value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError("cardIds must be a list of card identifiers")
    card_ids = []
    for item in value:
        # bool is an int subclass but never a valid identifier
        if isinstance(item, bool) or not isinstance(item, (str, int)):
            raise ValueError("Each card identifier must be a string or an integer")
        card_ids.append(str(item))
    return card_ids


class ListCreate(BaseModel):
    """Schema for creating a new list."""

    header: Optional[str] = Field(None, description="Display header of the list")
    card_ids: List[str] = Field(
        default_factory=list,
        alias="cardIds",
        description="Identifiers of existing cards, in display order",
    )

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("card_ids", mode="before")
    @classmethod
    def validate_card_ids(cls, v):
        return _coerce_card_ids(v)


class ListRead(BaseModel):
    """Schema for reading a list."""

    id: str
    header: str
    card_ids: List[str] = Field(default_factory=list, alias="cardIds")

    model_config = {
        "populate_by_name": True,
    }
