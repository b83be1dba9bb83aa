"""Hotel room endpoints."""
from typing import List
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from wedding.database import get_db
from wedding.dependencies import get_current_user
from wedding.services.hotel_rooms import HotelRoomService
from wedding.schemas.hotel_room import HotelRoomResponse
from wedding.schemas.common import MAX_DB_ID, MessageResponse
from wedding.models.user import User

router = APIRouter()


@router.get("/hotel-rooms", response_model=List[HotelRoomResponse])
def list_hotel_rooms(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """List all hotel rooms."""
    return [HotelRoomResponse.model_validate(r) for r in HotelRoomService(db).list_rooms()]


@router.get("/users/me/hotel-rooms", response_model=List[HotelRoomResponse])
def list_party_hotel_rooms(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """List rooms reserved by the current user's party."""
    service = HotelRoomService(db)
    return [HotelRoomResponse.model_validate(r) for r in service.list_party_rooms(user.party_id)]


@router.post("/users/me/hotel-rooms/{room_id}", response_model=HotelRoomResponse)
def reserve_hotel_room(
    room_id: int = Path(..., ge=1, le=MAX_DB_ID),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Reserve a hotel room for the current user's party."""
    room = HotelRoomService(db).reserve(user.party, room_id)
    return HotelRoomResponse.model_validate(room)


@router.delete("/users/me/hotel-rooms/{room_id}", response_model=MessageResponse)
def release_hotel_room(
    room_id: int = Path(..., ge=1, le=MAX_DB_ID),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Cancel the current user's party reservation."""
    HotelRoomService(db).release(user.party, room_id)
    return MessageResponse(message="Hotel room reservation removed")
