"""
Album endpoints for API v1.

These routes expose CRUD operations over the in‑memory album store:
list, retrieve by id, create, replace by id and delete by id.  Bodies
are decoded into ``Album`` models by FastAPI; a body that fails to
decode is answered with 400 by the application's exception handler
and never reaches the store.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from album_store_api.app.api.deps import get_album_store
from album_store_api.app.schemas.album import Album, AlbumReplace
from album_store_api.app.services.album_store import AlbumStore

router = APIRouter()


@router.get("", response_model=List[Album])
async def list_albums(store: AlbumStore = Depends(get_album_store)) -> List[Album]:
    """Return every album sorted by ``id`` ascending."""
    return store.list_albums()


@router.get("/{album_id}", response_model=Album)
async def get_album(album_id: str, store: AlbumStore = Depends(get_album_store)) -> Album:
    """Retrieve a single album by its ID.

    Returns HTTP 404 with ``{"message": "album not found"}`` if no
    album carries the identifier.
    """
    album = store.find_by_id(album_id)
    if album is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="album not found")
    return album


@router.post("", response_model=Album, status_code=status.HTTP_201_CREATED)
async def create_album(album: Album, store: AlbumStore = Depends(get_album_store)) -> Album:
    """Add an album to the store.

    The album is appended as given; an existing album with the same
    ``id`` is not replaced.
    """
    return store.insert(album)


@router.put("/{album_id}", status_code=status.HTTP_204_NO_CONTENT)
async def replace_album(
    album_id: str,
    album: AlbumReplace,
    store: AlbumStore = Depends(get_album_store),
) -> Response:
    """Replace the album(s) stored under ``album_id``.

    The ``id`` in the body is ignored.  Replacing an identifier that is
    not stored leaves the store unchanged and still answers 204.
    """
    store.replace_by_id(album_id, album)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{album_id}", response_model=List[Album])
async def delete_album(album_id: str, store: AlbumStore = Depends(get_album_store)) -> List[Album]:
    """Delete the album(s) stored under ``album_id`` and return what remains.

    Deleting an unknown identifier is not an error.
    """
    return store.delete_by_id(album_id)
