"""
List endpoints.

These routes list, fetch, create and delete lists of cards.  A list
can only be created when all of its card identifiers resolve to
existing cards.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from taskboard_api.app.core.store import BoardStore, get_store
from taskboard_api.app.schemas.card_list import ListCreate, ListRead
from taskboard_api.app.services.list_service import ListService

router = APIRouter()


@router.get("", response_model=List[ListRead])
async def list_lists(store: BoardStore = Depends(get_store)) -> List[ListRead]:
    """Return all lists in creation order."""
    return await ListService.list_lists(store)


@router.get("/{list_id}", response_model=ListRead)
async def get_list(list_id: str, store: BoardStore = Depends(get_store)) -> ListRead:
    """Retrieve a single list by ID.

    Returns HTTP 404 if the list is not found.
    """
    return await ListService.get_list(store, list_id)


@router.post("", response_model=ListRead, status_code=status.HTTP_201_CREATED)
async def create_list(
    list_in: ListCreate,
    response: Response,
    store: BoardStore = Depends(get_store),
) -> ListRead:
    """Create a new list.

    Returns HTTP 400 when ``header`` is missing or empty, or when any
    entry of ``cardIds`` does not name an existing card.
    """
    card_list = await ListService.create_list(store, list_in)
    response.headers["Location"] = f"/list/{card_list.id}"
    return card_list


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_list(list_id: str, store: BoardStore = Depends(get_store)) -> None:
    """Delete a list by ID.

    Returns HTTP 400 if the list is not found.
    """
    await ListService.delete_list(store, list_id)
    return None
