"""Business logic services."""
from wedding.services.auth import AuthService
from wedding.services.hotel_rooms import HotelRoomService
from wedding.services.music_catalog import (
    ARTIST_KIND,
    ALBUM_KIND,
    SONG_KIND,
    MusicCatalogRepository,
    MusicRequestKind,
)
from wedding.services.music_requests import MusicRequestService

__all__ = [
    "AuthService",
    "HotelRoomService",
    "ARTIST_KIND",
    "ALBUM_KIND",
    "SONG_KIND",
    "MusicCatalogRepository",
    "MusicRequestKind",
    "MusicRequestService",
]
