"""Music request endpoints for the current user."""
from typing import List
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from wedding.database import get_db
from wedding.dependencies import get_current_user
from wedding.services.music_catalog import ARTIST_KIND, ALBUM_KIND, SONG_KIND
from wedding.services.music_requests import MusicRequestService
from wedding.schemas.music_request import (
    ArtistRequestCreate,
    AlbumRequestCreate,
    SongRequestCreate,
    RequestedArtistResponse,
    RequestedAlbumResponse,
    RequestedSongResponse,
    MusicRequestQuotaResponse,
)
from wedding.schemas.common import MAX_DB_ID, MessageResponse
from wedding.models.user import User

router = APIRouter(prefix="/users/me")


@router.get("/music-request-quota", response_model=MusicRequestQuotaResponse)
def get_quota(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """How many music requests of each kind the current user holds."""
    return MusicRequestQuotaResponse(**MusicRequestService(db).get_quota(user.id))


# ============================================================================
# Artists
# ============================================================================

@router.get("/music-request-artists", response_model=List[RequestedArtistResponse])
def list_requested_artists(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """List artists requested by the current user."""
    service = MusicRequestService(db)
    return [
        RequestedArtistResponse.model_validate(a)
        for a in service.list_requests(ARTIST_KIND, user.id)
    ]


@router.post("/music-request-artists", response_model=RequestedArtistResponse)
def request_artist(
    request: ArtistRequestCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Request an artist (created on first request by anyone)."""
    service = MusicRequestService(db)
    artist = service.request(ARTIST_KIND, user.id, request.model_dump())
    return RequestedArtistResponse.model_validate(artist)


@router.delete("/music-request-artists/{artist_id}", response_model=MessageResponse)
def withdraw_artist(
    artist_id: int = Path(..., ge=1, le=MAX_DB_ID),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Withdraw the current user's artist request."""
    MusicRequestService(db).withdraw(ARTIST_KIND, user.id, artist_id)
    return MessageResponse(message="Artist request removed")


# ============================================================================
# Albums
# ============================================================================

@router.get("/music-request-albums", response_model=List[RequestedAlbumResponse])
def list_requested_albums(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """List albums requested by the current user."""
    service = MusicRequestService(db)
    return [
        RequestedAlbumResponse.model_validate(a)
        for a in service.list_requests(ALBUM_KIND, user.id)
    ]


@router.post("/music-request-albums", response_model=RequestedAlbumResponse)
def request_album(
    request: AlbumRequestCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Request an album. The nested artist must carry a url."""
    service = MusicRequestService(db)
    album = service.request(ALBUM_KIND, user.id, request.model_dump())
    return RequestedAlbumResponse.model_validate(album)


@router.delete("/music-request-albums/{album_id}", response_model=MessageResponse)
def withdraw_album(
    album_id: int = Path(..., ge=1, le=MAX_DB_ID),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Withdraw the current user's album request."""
    MusicRequestService(db).withdraw(ALBUM_KIND, user.id, album_id)
    return MessageResponse(message="Album request removed")


# ============================================================================
# Songs
# ============================================================================

@router.get("/music-request-songs", response_model=List[RequestedSongResponse])
def list_requested_songs(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """List songs requested by the current user."""
    service = MusicRequestService(db)
    return [
        RequestedSongResponse.model_validate(s)
        for s in service.list_requests(SONG_KIND, user.id)
    ]


@router.post("/music-request-songs", response_model=RequestedSongResponse)
def request_song(
    request: SongRequestCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Request a song. The nested artist must carry a url."""
    service = MusicRequestService(db)
    song = service.request(SONG_KIND, user.id, request.model_dump())
    return RequestedSongResponse.model_validate(song)


@router.delete("/music-request-songs/{song_id}", response_model=MessageResponse)
def withdraw_song(
    song_id: int = Path(..., ge=1, le=MAX_DB_ID),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Withdraw the current user's song request."""
    MusicRequestService(db).withdraw(SONG_KIND, user.id, song_id)
    return MessageResponse(message="Song request removed")
