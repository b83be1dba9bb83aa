"""Music request workflows: request, withdraw and list per-user music wishes."""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from wedding.config import settings
from wedding.exceptions import ConflictError, NotFoundError, QuotaExceededError, ValidationError
from wedding.services.music_catalog import (
    ARTIST_KIND,
    MUSIC_REQUEST_KINDS,
    MusicCatalogRepository,
    MusicRequestKind,
)

logger = logging.getLogger(__name__)


class MusicRequestService:
    """Service for guests' music requests.

    Catalog entries are shared by every guest and deduplicated by url;
    what a guest owns is the association row. Each workflow runs in one
    transaction and rolls back completely when it fails.
    """

    def __init__(self, db: Session, max_requests: Optional[int] = None):
        self.db = db
        self.catalog = MusicCatalogRepository(db)
        if max_requests is None:
            max_requests = settings.max_music_requests_per_user
        self.max_requests = max_requests

    def list_requests(self, kind: MusicRequestKind, user_id: int) -> List[Any]:
        """Catalog entries the user requested, ordered by id."""
        return self.catalog.list_for_user(kind, user_id)

    def count_requests(self, kind: MusicRequestKind, user_id: int) -> int:
        """Number of requests of this kind the user holds."""
        return self.catalog.count_associations(kind, user_id)

    def get_quota(self, user_id: int) -> Dict[str, int]:
        """Per-kind request counts plus the ceiling."""
        quota = {f"{kind.name}s": self.count_requests(kind, user_id) for kind in MUSIC_REQUEST_KINDS}
        quota["limit"] = self.max_requests
        return quota

    def request(self, kind: MusicRequestKind, user_id: int, payload: Dict[str, Any]):
        """Find-or-create the submitted entry and associate it to the user.

        Raises:
            ValidationError: blank name or url, or album/song without artist
            QuotaExceededError: user already holds ``max_requests`` of this kind
            ConflictError: user already requested this entry
        """
        values = self._entry_values(kind, payload)
        artist_values = self._artist_values(kind, payload)
        return self._associate(kind, user_id, values, artist_values)

    def withdraw(self, kind: MusicRequestKind, user_id: int, target_id: int) -> None:
        """Remove the user's association. The catalog entry itself stays."""
        if not self.catalog.delete_association(kind, user_id, target_id):
            self.db.rollback()
            raise NotFoundError(f"requested {kind.name}", target_id)
        self.db.commit()
        logger.info(f"User {user_id} withdrew {kind.name} request {target_id}")

    def _entry_values(self, kind: MusicRequestKind, payload: Dict[str, Any]) -> Dict[str, Any]:
        values = {
            "name": _required(payload.get("name"), f"Requested {kind.name} needs a name", "name"),
            "url": _required(payload.get("url"), f"Requested {kind.name} needs a url", "url"),
        }
        if kind.has_image:
            values["image_url"] = payload.get("image_url")
        return values

    def _artist_values(self, kind: MusicRequestKind, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if not kind.has_artist:
            return None

        artist = payload.get("artist") or {}
        url = _required(
            artist.get("url"),
            f"Requested {kind.name} must reference an artist with a url",
            "artist.url",
        )
        name = _required(
            artist.get("name"),
            f"Requested {kind.name} must reference an artist with a name",
            "artist.name",
        )
        return {"name": name, "url": url, "image_url": artist.get("image_url")}

    def _associate(
        self,
        kind: MusicRequestKind,
        user_id: int,
        values: Dict[str, Any],
        artist_values: Optional[Dict[str, Any]],
    ):
        if artist_values is not None:
            artist = self.catalog.upsert_by_url(ARTIST_KIND, artist_values)
            values["artist_id"] = artist.id

        entry = self.catalog.upsert_by_url(kind, values)

        count = self.catalog.count_associations(kind, user_id)
        if count >= self.max_requests:
            self.db.rollback()
            logger.warning(
                f"User {user_id} reached {kind.name} request limit ({self.max_requests})"
            )
            raise QuotaExceededError(kind.name, self.max_requests)

        try:
            self.catalog.create_association(kind, user_id, entry.id)
        except ConflictError:
            self.db.rollback()
            logger.warning(f"User {user_id} already requested {kind.name} {values['url']}")
            raise

        self.db.commit()
        self.db.refresh(entry)
        logger.info(f"User {user_id} requested {kind.name} {entry.id}")
        return entry


def _required(value: Optional[str], message: str, field: str) -> str:
    """Strip a submitted string; blank or missing is a validation error."""
    value = (value or "").strip()
    if not value:
        raise ValidationError(message, field=field)
    return value
