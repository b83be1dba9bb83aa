"""Authentication endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from wedding.database import get_db
from wedding.services.auth import AuthService
from wedding.schemas.user import UserLogin, LoginResponse, UserResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(request: UserLogin, db: Session = Depends(get_db)):
    """Authenticate a guest and return a JWT token."""
    auth = AuthService(db)
    user = auth.authenticate(request.code, request.name, request.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid invitation code, name or password",
        )

    return LoginResponse(
        token=auth.create_token(user),
        user=UserResponse.model_validate(user),
    )
