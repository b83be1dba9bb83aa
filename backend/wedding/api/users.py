"""Current user endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from wedding.database import get_db
from wedding.dependencies import get_current_user
from wedding.services.auth import AuthService
from wedding.schemas.user import UserDetailResponse, UserResponse, PartyMembersResponse, PartyResponse
from wedding.models.user import User

router = APIRouter()


@router.get("/users/me", response_model=UserDetailResponse)
def get_me(user: User = Depends(get_current_user)):
    """Get current user info with party."""
    return UserDetailResponse.model_validate(user)


@router.get("/users/me/party", response_model=PartyMembersResponse)
def get_my_party(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Get the members of the current user's party."""
    members = AuthService(db).list_party_members(user)
    return PartyMembersResponse(
        party=PartyResponse.model_validate(user.party),
        members=[UserResponse.model_validate(m) for m in members],
    )
