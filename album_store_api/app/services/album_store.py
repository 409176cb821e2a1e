"""
In‑memory storage for albums.

``AlbumStore`` keeps albums in insertion order in a plain list and
exposes list, lookup, insert, replace and delete operations.  Nothing
is persisted; the catalogue lives for as long as the process does.

A single store instance is shared by every request, so each operation
takes the store's lock for its whole duration.  Replace and delete
rebuild the list and swap it in while holding the lock, which means a
concurrent reader sees either the old or the new list, never a
partially rebuilt one.

Identifiers are not required to be unique.  Inserting an album whose
``id`` already exists adds a second entry; lookups return the first
match in insertion order, replacement rewrites every match and
deletion removes every match.
"""

from __future__ import annotations

import logging
import threading
from operator import attrgetter
from typing import Iterable, List, Optional

from ..schemas.album import Album, AlbumBase

logger = logging.getLogger(__name__)


SEED_ALBUMS = (
    Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
    Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
    Album(id="3", title="Sarah Vaughan and Clifford Brown", artist="Sarah Vaughan", price=39.99),
)


class AlbumStore:
    """Thread‑safe, ordered collection of albums."""

    def __init__(self, albums: Optional[Iterable[Album]] = None) -> None:
        self._lock = threading.Lock()
        self._albums: List[Album] = list(albums) if albums is not None else []

    @classmethod
    def with_seed_albums(cls) -> AlbumStore:
        """Return a store holding copies of the three seed albums."""
        return cls(album.model_copy() for album in SEED_ALBUMS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._albums)

    def list_albums(self) -> List[Album]:
        """Return all albums sorted by ``id`` ascending.

        Identifiers are compared as strings, so ``"10"`` sorts before
        ``"2"``.  The sort is stable and works on a copy; the stored
        insertion order is left untouched.
        """
        with self._lock:
            return sorted(self._albums, key=attrgetter("id"))

    def find_by_id(self, album_id: str) -> Optional[Album]:
        """Return the first album whose ``id`` equals ``album_id``, or ``None``."""
        with self._lock:
            for album in self._albums:
                if album.id == album_id:
                    return album
        return None

    def insert(self, album: Album) -> Album:
        """Append ``album`` to the store and return it.

        No check is made for an existing album with the same ``id``.
        """
        with self._lock:
            self._albums.append(album)
            size = len(self._albums)
        logger.info("Inserted album %s (%d albums stored)", album.id, size)
        return album

    def replace_by_id(self, album_id: str, replacement: AlbumBase) -> int:
        """Replace every album whose ``id`` equals ``album_id``.

        Each match becomes a copy of ``replacement`` with its ``id``
        forced to ``album_id``; any ``id`` carried by the replacement is
        ignored.  Other albums keep their values and positions.  When no
        album matches the store is left unchanged.

        Returns the number of albums replaced.
        """
        fields = replacement.model_dump(exclude={"id"})
        replaced = 0
        with self._lock:
            rebuilt: List[Album] = []
            for album in self._albums:
                if album.id != album_id:
                    rebuilt.append(album)
                else:
                    rebuilt.append(Album(id=album_id, **fields))
                    replaced += 1
            self._albums = rebuilt
        if replaced:
            logger.info("Replaced %d album(s) with id %s", replaced, album_id)
        else:
            logger.info("No album with id %s to replace", album_id)
        return replaced

    def delete_by_id(self, album_id: str) -> List[Album]:
        """Remove every album whose ``id`` equals ``album_id``.

        Deleting an identifier that is not stored is not an error.
        Returns the remaining albums in insertion order.
        """
        with self._lock:
            remaining = [album for album in self._albums if album.id != album_id]
            removed = len(self._albums) - len(remaining)
            self._albums = remaining
            result = list(remaining)
        if removed:
            logger.info("Deleted %d album(s) with id %s", removed, album_id)
        return result
