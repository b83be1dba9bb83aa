"""Per-user music request junction tables."""
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Table
from sqlalchemy.sql import func
from wedding.database import Base

# Composite primary keys make each (user, entry) pair unique.

user_requested_artists = Table(
    "user_requested_artists",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("artist_id", Integer, ForeignKey("requested_artists.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
)

user_requested_albums = Table(
    "user_requested_albums",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("album_id", Integer, ForeignKey("requested_albums.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
)

user_requested_songs = Table(
    "user_requested_songs",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("song_id", Integer, ForeignKey("requested_songs.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
)
