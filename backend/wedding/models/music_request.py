"""Requested music catalog: artists, albums and songs deduplicated by URL."""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from wedding.database import Base


class RequestedArtist(Base):
    """Artist some guest asked the DJ for."""

    __tablename__ = "requested_artists"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    url = Column(String(1000), nullable=False, unique=True)
    image_url = Column(String(1000))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<RequestedArtist {self.name}>"


class RequestedAlbum(Base):
    """Requested album. Always attributed to an artist."""

    __tablename__ = "requested_albums"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    url = Column(String(1000), nullable=False, unique=True)
    image_url = Column(String(1000))
    artist_id = Column(Integer, ForeignKey("requested_artists.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    artist = relationship("RequestedArtist")

    def __repr__(self):
        return f"<RequestedAlbum {self.name}>"


class RequestedSong(Base):
    """Requested song. Always attributed to an artist."""

    __tablename__ = "requested_songs"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    url = Column(String(1000), nullable=False, unique=True)
    artist_id = Column(Integer, ForeignKey("requested_artists.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    artist = relationship("RequestedArtist")

    def __repr__(self):
        return f"<RequestedSong {self.name}>"
