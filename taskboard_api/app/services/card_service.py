"""
Service layer for cards.

Cards are created with a non-empty title and content and are never
modified afterwards.  Deleting a card also removes its identifier
from every list that references it; the prune and the removal happen
under the store lock so no reader observes a list pointing at a card
that is half deleted.
"""

from __future__ import annotations

import logging
from typing import List

from taskboard_api.app.core.errors import InvalidInputError, NotFoundError
from taskboard_api.app.core.store import BoardStore
from taskboard_api.app.schemas.card import CardCreate, CardRead

logger = logging.getLogger(__name__)


class CardService:
    """Service class for managing cards."""

    @classmethod
    async def list_cards(cls, store: BoardStore) -> List[CardRead]:
        """Return every card in creation order."""
        return store.list_cards()

    @classmethod
    async def get_card(cls, store: BoardStore, card_id: str) -> CardRead:
        """Retrieve a single card by its ID.

        Raises ``NotFoundError`` if no card has that ID.
        """
        card = store.get_card(card_id)
        if card is None:
            logger.error("Card with id %s not found.", card_id)
            raise NotFoundError("Card Not Found")
        return card

    @classmethod
    async def create_card(cls, store: BoardStore, data: CardCreate) -> CardRead:
        """Validate the payload and store a new card.

        Both ``title`` and ``content`` must be present and non-empty.
        Validation happens before an ID is allocated, so a rejected
        request never leaves a record behind.
        """
        if not data.title:
            logger.error("title is required")
            raise InvalidInputError("title is required")
        if not data.content:
            logger.error("content is required")
            raise InvalidInputError("content is required")

        async with store.lock:
            card = CardRead(id=store.new_id(), title=data.title, content=data.content)
            store.add_card(card)
        logger.info("Card with id %s created", card.id)
        return card

    @classmethod
    async def delete_card(cls, store: BoardStore, card_id: str) -> None:
        """Delete a card and remove it from every list.

        Raises ``NotFoundError`` if no card has that ID.
        """
        async with store.lock:
            if not store.has_card(card_id):
                logger.error("Card with id %s not found.", card_id)
                raise NotFoundError("Not found")
            pruned = store.prune_card_references(card_id)
            store.remove_card(card_id)
        if pruned:
            logger.info("Card with id %s removed from %d list(s).", card_id, pruned)
        logger.info("Card with id %s deleted.", card_id)
