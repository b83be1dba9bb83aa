"""Authentication service."""
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from wedding.config import settings
from wedding.models.party import Party
from wedding.models.user import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class AuthService:
    """Authentication and guest onboarding service."""

    def __init__(self, db: Session):
        self.db = db

    def verify_password(self, plain: str, hashed: str) -> bool:
        """Verify a password against its hash."""
        return pwd_context.verify(plain, hashed)

    def hash_password(self, password: str) -> str:
        """Hash a password for storage."""
        return pwd_context.hash(password)

    def create_token(self, user: User) -> str:
        """Create a JWT token for a user."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "name": user.name,
            "party_id": user.party_id,
            "exp": now + timedelta(hours=settings.jwt_expiry_hours),
            "iat": now,
        }
        return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    def decode_token(self, token: str) -> Optional[int]:
        """Decode a JWT token and return user_id, or None if invalid."""
        try:
            payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
            return int(payload.get("sub"))
        except (JWTError, TypeError, ValueError):
            return None

    def authenticate(self, party_code: str, name: str, password: str) -> Optional[User]:
        """Authenticate a guest by invitation code, name and password."""
        user = (
            self.db.query(User)
            .join(Party, User.party_id == Party.id)
            .filter(Party.code == party_code, User.name == name)
            .first()
        )
        if user and user.hashed_password and self.verify_password(password, user.hashed_password):
            return user
        return None

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID."""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_party_by_code(self, code: str) -> Optional[Party]:
        """Get a party by its invitation code."""
        return self.db.query(Party).filter(Party.code == code).first()

    def create_party(self, code: str, max_person_count: Optional[int] = None) -> Party:
        """Create a new party."""
        party = Party(code=code, max_person_count=max_person_count)
        self.db.add(party)
        self.db.commit()
        self.db.refresh(party)
        return party

    def create_user(
        self,
        party: Party,
        name: str,
        password: Optional[str] = None,
        email: Optional[str] = None,
        relation_key: Optional[str] = None,
        visible_for_others: bool = False,
    ) -> User:
        """Create a new guest in a party."""
        user = User(
            name=name,
            party_id=party.id,
            email=email,
            relation_key=relation_key,
            visible_for_others=visible_for_others,
            hashed_password=self.hash_password(password) if password else None,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def list_party_members(self, user: User) -> list:
        """Members of the user's party visible to the user (always including themselves)."""
        return (
            self.db.query(User)
            .filter(User.party_id == user.party_id)
            .filter((User.id == user.id) | (User.visible_for_others.is_(True)))
            .order_by(User.id)
            .all()
        )
