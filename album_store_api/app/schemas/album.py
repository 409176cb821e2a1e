"""
Pydantic models for album data.

``AlbumBase`` holds the descriptive fields; ``Album`` adds the
caller‑supplied identifier and is used both for request bodies and
for responses.  ``AlbumReplace`` is the body accepted by ``PUT``: it
may carry an ``id`` but the value is dropped when the model is dumped
and the store uses the identifier from the URL.

Fields missing from a body fall back to empty values, matching how
the service has always decoded albums.  Values of the wrong type are
rejected rather than coerced (``"12.5"`` or ``true`` is not a price,
``5`` is not an id), and so are ``inf`` and ``NaN`` prices, which
cannot be written back out as JSON.
"""

from pydantic import BaseModel, Field


class AlbumBase(BaseModel):
    title: str = Field("", examples=["Blue Train"])
    artist: str = Field("", examples=["John Coltrane"])
    price: float = Field(0.0, examples=[56.99])

    # Strict mode still accepts JSON integers for ``price``.
    model_config = {
        "strict": True,
        "allow_inf_nan": False,
    }


class Album(AlbumBase):
    """Schema for an album as stored and returned by the API."""

    id: str = Field("", examples=["1"])


class AlbumReplace(Album):
    """Schema for replacing an album.

    ``id`` is accepted for symmetry with ``Album`` but excluded from
    ``model_dump``; the store forces it to the identifier taken from
    the path.
    """

    id: str = Field("", exclude=True, examples=["ignored"])
