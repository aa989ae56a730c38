"""
Service layer for lists.

A list has a non-empty header and an ordered sequence of card
identifiers.  Every identifier must resolve to an existing card when
the list is created; a single unknown identifier rejects the whole
request.  After creation a list's membership only changes when one of
its cards is deleted (see ``CardService.delete_card``).
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import status

from taskboard_api.app.core.errors import InvalidInputError, NotFoundError
from taskboard_api.app.core.store import BoardStore
from taskboard_api.app.schemas.card_list import ListCreate, ListRead

logger = logging.getLogger(__name__)


class ListService:
    """Service class for managing lists."""

    @classmethod
    async def list_lists(cls, store: BoardStore) -> List[ListRead]:
        """Return every list in creation order."""
        return store.list_lists()

    @classmethod
    async def get_list(cls, store: BoardStore, list_id: str) -> ListRead:
        """Retrieve a single list by its ID.

        Raises ``NotFoundError`` if no list has that ID.
        """
        card_list = store.get_list(list_id)
        if card_list is None:
            logger.error("List with id %s not found", list_id)
            raise NotFoundError("List Not Found")
        return card_list

    @classmethod
    async def create_list(cls, store: BoardStore, data: ListCreate) -> ListRead:
        """Validate the payload and store a new list.

        ``header`` must be present and non-empty.  Each entry of
        ``card_ids`` must name an existing card; every unknown ID is
        logged before the request is rejected.
        """
        if not data.header:
            logger.error("Header is required")
            raise InvalidInputError("header is required")

        async with store.lock:
            missing = [cid for cid in data.card_ids if not store.has_card(cid)]
            for cid in missing:
                logger.error("Card with id %s not found in cards collection.", cid)
            if missing:
                raise InvalidInputError("Invalid data")
            card_list = ListRead(id=store.new_id(), header=data.header, card_ids=list(data.card_ids))
            store.add_list(card_list)
        logger.info("List with id %s created", card_list.id)
        return card_list

    @classmethod
    async def delete_list(cls, store: BoardStore, list_id: str) -> None:
        """Delete a list by ID.

        An unknown ID raises ``NotFoundError`` reported as HTTP 400,
        which is the status published for this route.
        """
        async with store.lock:
            deleted = store.remove_list(list_id)
        if not deleted:
            logger.error("List with id %s not found", list_id)
            raise NotFoundError("not found", http_status=status.HTTP_400_BAD_REQUEST)
        logger.info("List with id %s deleted", list_id)
