"""Music request schemas."""
from typing import Optional
from pydantic import ConfigDict, Field

from wedding.schemas.common import CamelModel


class SubmissionModel(CamelModel):
    """Base for submitted bodies. Surrounding whitespace is stripped."""
    model_config = ConfigDict(str_strip_whitespace=True)


class ArtistReference(SubmissionModel):
    """Nested artist inside an album or song submission.

    Every field is optional here so a missing url surfaces as a 400 from
    the request workflow instead of a schema error.
    """
    name: Optional[str] = Field(None, max_length=255)
    url: Optional[str] = Field(None, max_length=1000)
    image_url: Optional[str] = Field(None, max_length=1000)


class ArtistRequestCreate(SubmissionModel):
    """Artist submission."""
    name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=1000)
    image_url: Optional[str] = Field(None, max_length=1000)


class AlbumRequestCreate(SubmissionModel):
    """Album submission with its artist."""
    name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=1000)
    image_url: Optional[str] = Field(None, max_length=1000)
    artist: Optional[ArtistReference] = None


class SongRequestCreate(SubmissionModel):
    """Song submission with its artist."""
    name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=1000)
    artist: Optional[ArtistReference] = None


class RequestedArtistResponse(CamelModel):
    """Requested artist."""
    id: int
    name: str
    url: str
    image_url: Optional[str] = None


class RequestedAlbumResponse(CamelModel):
    """Requested album with its artist."""
    id: int
    name: str
    url: str
    image_url: Optional[str] = None
    artist_id: int
    artist: RequestedArtistResponse


class RequestedSongResponse(CamelModel):
    """Requested song with its artist."""
    id: int
    name: str
    url: str
    artist_id: int
    artist: RequestedArtistResponse


class MusicRequestQuotaResponse(CamelModel):
    """How many requests of each kind the current user holds."""
    artists: int
    albums: int
    songs: int
    limit: int
