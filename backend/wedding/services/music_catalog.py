"""Requested music catalog repository.

Artists, albums and songs share one implementation. Each kind is described
by a ``MusicRequestKind`` (ORM model, per-user junction table, target column)
and every repository method takes the kind it operates on.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Type

from sqlalchemy import Table, delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from wedding.database import Base
from wedding.exceptions import ConflictError
from wedding.models.music_request import RequestedArtist, RequestedAlbum, RequestedSong
from wedding.models.user_music_requests import (
    user_requested_artists,
    user_requested_albums,
    user_requested_songs,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MusicRequestKind:
    """One kind of requestable music."""

    name: str
    model: Type[Base]
    association: Table
    target_column: str
    has_image: bool = True
    has_artist: bool = False

    @property
    def target(self):
        """Junction column pointing at the catalog row."""
        return self.association.c[self.target_column]


ARTIST_KIND = MusicRequestKind("artist", RequestedArtist, user_requested_artists, "artist_id")
ALBUM_KIND = MusicRequestKind(
    "album", RequestedAlbum, user_requested_albums, "album_id", has_artist=True
)
SONG_KIND = MusicRequestKind(
    "song", RequestedSong, user_requested_songs, "song_id", has_image=False, has_artist=True
)

MUSIC_REQUEST_KINDS = (ARTIST_KIND, ALBUM_KIND, SONG_KIND)


def _duplicate_association(kind: MusicRequestKind, user_id: int, target_id: int) -> ConflictError:
    return ConflictError(
        message=f"Requested {kind.name} is already associated to the current user",
        context={"kind": kind.name, "user_id": user_id, "target_id": target_id},
    )


class MusicCatalogRepository:
    """Data access for requested catalog entries and their per-user associations.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def _query(self, kind: MusicRequestKind):
        query = self.db.query(kind.model)
        if kind.has_artist:
            query = query.options(joinedload(kind.model.artist))
        return query

    def find_by_url(self, kind: MusicRequestKind, url: str):
        """Get a catalog entry by its unique url."""
        return self._query(kind).filter(kind.model.url == url).first()

    def upsert_by_url(self, kind: MusicRequestKind, values: Dict[str, Any]):
        """Find-or-create the entry keyed by ``values["url"]``.

        An existing row keeps its id and url; its name and image are
        refreshed from ``values``. A new row is flushed so it has an id.

        The insert runs under a SAVEPOINT. If a concurrent request won the
        unique url, only the savepoint is rolled back and the winner row is
        used instead.
        """
        url = values["url"]
        entry = self.find_by_url(kind, url)
        if entry is not None:
            return self._refresh(entry, values)

        entry = kind.model(**values)
        try:
            with self.db.begin_nested():
                self.db.add(entry)
        except IntegrityError:
            winner = self.find_by_url(kind, url)
            if winner is None:
                raise
            logger.info(f"Duplicate requested {kind.name} detected via constraint: {url}")
            return self._refresh(winner, values)

        logger.debug(f"Created requested {kind.name} {entry.id}: {url}")
        return entry

    def _refresh(self, entry, values: Dict[str, Any]):
        for key in ("name", "image_url"):
            value = values.get(key)
            if value is not None and hasattr(entry, key):
                setattr(entry, key, value)
        self.db.flush()
        return entry

    def association_exists(self, kind: MusicRequestKind, user_id: int, target_id: int) -> bool:
        """Check whether the user already requested the entry."""
        result = self.db.execute(
            select(kind.association).where(
                kind.association.c.user_id == user_id,
                kind.target == target_id,
            )
        ).first()
        return result is not None

    def create_association(self, kind: MusicRequestKind, user_id: int, target_id: int) -> None:
        """Record that the user requested the entry.

        Raises ConflictError if the pair already exists. The junction
        table's primary key is the authority; the pre-check only gives
        a clean error in the common, non-concurrent case.
        """
        if self.association_exists(kind, user_id, target_id):
            raise _duplicate_association(kind, user_id, target_id)

        try:
            with self.db.begin_nested():
                self.db.execute(
                    insert(kind.association).values(user_id=user_id, **{kind.target_column: target_id})
                )
        except IntegrityError:
            raise _duplicate_association(kind, user_id, target_id)

    def delete_association(self, kind: MusicRequestKind, user_id: int, target_id: int) -> bool:
        """Remove the user's association. Returns False if there was none."""
        result = self.db.execute(
            delete(kind.association).where(
                kind.association.c.user_id == user_id,
                kind.target == target_id,
            )
        )
        return result.rowcount > 0

    def count_associations(self, kind: MusicRequestKind, user_id: int) -> int:
        """Number of entries of this kind the user has requested."""
        return self.db.execute(
            select(func.count())
            .select_from(kind.association)
            .where(kind.association.c.user_id == user_id)
        ).scalar_one()

    def list_for_user(self, kind: MusicRequestKind, user_id: int) -> List[Any]:
        """Entries the user requested, ordered by catalog id."""
        return (
            self._query(kind)
            .join(kind.association, kind.target == kind.model.id)
            .filter(kind.association.c.user_id == user_id)
            .order_by(kind.model.id.asc())
            .all()
        )
