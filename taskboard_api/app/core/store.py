"""
In-memory storage for cards and lists.

``BoardStore`` owns two insertion-ordered mappings (id → record), one
per collection, and a single ``asyncio.Lock`` that services hold while
they mutate either mapping.  Records are stored as schema instances
and copies are handed out, so the only way to change stored state is
through the store's methods.

The application factory creates one store per application and keeps
it on ``app.state.store``; route handlers obtain it through the
``get_store`` dependency.  Nothing is persisted: the data lives as
long as the application object does.
"""

import asyncio
import uuid
from typing import Dict, List, Optional

from fastapi import Request

from ..schemas.card import CardRead
from ..schemas.card_list import ListRead


class BoardStore:
    """Simple in-memory store backing the Taskboard API."""

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self._cards: Dict[str, CardRead] = {}
        self._lists: Dict[str, ListRead] = {}

    @staticmethod
    def new_id() -> str:
        """Return a fresh, collision-resistant record identifier."""
        return str(uuid.uuid4())

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------
    def list_cards(self) -> List[CardRead]:
        return [card.model_copy(deep=True) for card in self._cards.values()]

    def get_card(self, card_id: str) -> Optional[CardRead]:
        card = self._cards.get(card_id)
        return card.model_copy(deep=True) if card is not None else None

    def has_card(self, card_id: str) -> bool:
        return card_id in self._cards

    def add_card(self, card: CardRead) -> None:
        if card.id in self._cards:
            raise ValueError(f"Duplicate card id {card.id}")
        self._cards[card.id] = card.model_copy(deep=True)

    def remove_card(self, card_id: str) -> bool:
        return self._cards.pop(card_id, None) is not None

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------
    def list_lists(self) -> List[ListRead]:
        return [card_list.model_copy(deep=True) for card_list in self._lists.values()]

    def get_list(self, list_id: str) -> Optional[ListRead]:
        card_list = self._lists.get(list_id)
        return card_list.model_copy(deep=True) if card_list is not None else None

    def add_list(self, card_list: ListRead) -> None:
        if card_list.id in self._lists:
            raise ValueError(f"Duplicate list id {card_list.id}")
        self._lists[card_list.id] = card_list.model_copy(deep=True)

    def remove_list(self, list_id: str) -> bool:
        return self._lists.pop(list_id, None) is not None

    def prune_card_references(self, card_id: str) -> int:
        """Remove ``card_id`` from every list, keeping the remaining order.

        Returns the number of lists that referenced the card.
        """
        touched = 0
        for card_list in self._lists.values():
            remaining = [cid for cid in card_list.card_ids if cid != card_id]
            if len(remaining) != len(card_list.card_ids):
                card_list.card_ids = remaining
                touched += 1
        return touched

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------
    def seed_demo_data(self) -> None:
        """Populate the store with one card and one list referencing it."""
        card = CardRead(id=self.new_id(), title="Task One", content="This is card one")
        self.add_card(card)
        self.add_list(ListRead(id=self.new_id(), header="List One", card_ids=[card.id]))


def get_store(request: Request) -> BoardStore:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.store
