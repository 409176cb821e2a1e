"""
FastAPI dependencies shared by the route handlers.

The album store is created by ``create_app`` and kept on
``app.state``; handlers receive it through ``get_album_store`` instead
of importing a module level instance.
"""

from fastapi import Request

from ..services.album_store import AlbumStore


def get_album_store(request: Request) -> AlbumStore:
    """Return the store owned by the application serving ``request``."""
    return request.app.state.album_store
