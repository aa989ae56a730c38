"""
Card endpoints.

These routes list, fetch, create and delete cards.  All of them
require the shared bearer token, which is checked by
``BearerTokenMiddleware`` before the request is routed.  Deleting a
card also removes it from every list that referenced it.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from taskboard_api.app.core.store import BoardStore, get_store
from taskboard_api.app.schemas.card import CardCreate, CardRead
from taskboard_api.app.services.card_service import CardService

router = APIRouter()


@router.get("", response_model=List[CardRead])
async def list_cards(store: BoardStore = Depends(get_store)) -> List[CardRead]:
    """Return all cards in creation order."""
    return await CardService.list_cards(store)


@router.get("/{card_id}", response_model=CardRead)
async def get_card(card_id: str, store: BoardStore = Depends(get_store)) -> CardRead:
    """Retrieve a single card by ID.

    Returns HTTP 404 if the card is not found.
    """
    return await CardService.get_card(store, card_id)


@router.post("", response_model=CardRead, status_code=status.HTTP_201_CREATED)
async def create_card(
    card_in: CardCreate,
    response: Response,
    store: BoardStore = Depends(get_store),
) -> CardRead:
    """Create a new card.

    Returns HTTP 400 when ``title`` or ``content`` is missing or empty.
    The ``Location`` header of a successful response points at the new
    card.
    """
    card = await CardService.create_card(store, card_in)
    response.headers["Location"] = f"/card/{card.id}"
    return card


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card(card_id: str, store: BoardStore = Depends(get_store)) -> None:
    """Delete a card and prune it from all lists.

    Returns HTTP 404 if the card is not found.
    """
    await CardService.delete_card(store, card_id)
    return None
