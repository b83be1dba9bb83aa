"""Pydantic schemas for API request/response validation."""
from wedding.schemas.common import CamelModel, MessageResponse
from wedding.schemas.user import (
    PartyResponse,
    UserResponse,
    UserDetailResponse,
    PartyMembersResponse,
    UserLogin,
    LoginResponse,
)
from wedding.schemas.music_request import (
    ArtistReference,
    ArtistRequestCreate,
    AlbumRequestCreate,
    SongRequestCreate,
    RequestedArtistResponse,
    RequestedAlbumResponse,
    RequestedSongResponse,
    MusicRequestQuotaResponse,
)
from wedding.schemas.hotel_room import HotelRoomResponse

__all__ = [
    "CamelModel",
    "MessageResponse",
    "PartyResponse",
    "UserResponse",
    "UserDetailResponse",
    "PartyMembersResponse",
    "UserLogin",
    "LoginResponse",
    "ArtistReference",
    "ArtistRequestCreate",
    "AlbumRequestCreate",
    "SongRequestCreate",
    "RequestedArtistResponse",
    "RequestedAlbumResponse",
    "RequestedSongResponse",
    "MusicRequestQuotaResponse",
    "HotelRoomResponse",
]
