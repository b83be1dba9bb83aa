"""SQLAlchemy models for the wedding backend."""
from wedding.models.party import Party, Relation
from wedding.models.user import User
from wedding.models.hotel_room import HotelRoom, party_hotel_rooms
from wedding.models.music_request import RequestedArtist, RequestedAlbum, RequestedSong
from wedding.models.user_music_requests import (
    user_requested_artists,
    user_requested_albums,
    user_requested_songs,
)

__all__ = [
    "Party",
    "Relation",
    "User",
    "HotelRoom",
    "party_hotel_rooms",
    "RequestedArtist",
    "RequestedAlbum",
    "RequestedSong",
    "user_requested_artists",
    "user_requested_albums",
    "user_requested_songs",
]
