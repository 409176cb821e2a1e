"""
Main entrypoint for the Album Store API.

This module assembles the FastAPI application, sets up logging,
creates the album store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn album_store_api.app.main:app --reload
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI

from .api.deps import get_album_store
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.responses import IndentedJSONResponse
from .services.album_store import AlbumStore


def create_app(store: Optional[AlbumStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[AlbumStore]
        Store to serve.  When omitted a new store is created, holding
        the seed albums unless ``SEED_ALBUMS`` is disabled.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    if store is None:
        store = AlbumStore.with_seed_albums() if settings.seed_albums else AlbumStore()
    logger.info("Serving %d album(s)", len(store))

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        default_response_class=IndentedJSONResponse,
    )
    app.state.album_store = store

    register_exception_handlers(app)

    # Album routes live at the root: /albums, /albums/{id}.
    app.include_router(v1_router)

    @app.get("/health")
    async def health(album_store: AlbumStore = Depends(get_album_store)) -> Dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "albums": len(album_store)}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
