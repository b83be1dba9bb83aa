"""User and party schemas."""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel

from wedding.schemas.common import CamelModel


class PartyResponse(CamelModel):
    """Party response."""
    id: int
    code: str
    max_person_count: Optional[int] = None


class UserResponse(CamelModel):
    """User response."""
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    accepted: Optional[bool] = None
    avatar_url: Optional[str] = None
    visible_for_others: bool = False
    party_id: int
    relation_key: Optional[str] = None
    created_at: Optional[datetime] = None


class UserDetailResponse(UserResponse):
    """Current user with their party."""
    party: PartyResponse


class PartyMembersResponse(CamelModel):
    """Members of a party the caller may see."""
    party: PartyResponse
    members: List[UserResponse]


class UserLogin(BaseModel):
    """Login request: invitation code, guest name and password."""
    code: str
    name: str
    password: str


class LoginResponse(BaseModel):
    """Login response with token."""
    token: str
    user: UserResponse
