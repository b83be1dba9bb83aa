"""API routes."""
from fastapi import APIRouter
from wedding.api import auth, users, music_requests, hotel_rooms

api_router = APIRouter()

# Auth
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Guests
api_router.include_router(users.router, tags=["users"])
api_router.include_router(music_requests.router, tags=["music-requests"])
api_router.include_router(hotel_rooms.router, tags=["hotel-rooms"])
