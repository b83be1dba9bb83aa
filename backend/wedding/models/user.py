"""User model."""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from wedding.database import Base


class User(Base):
    """A guest. Belongs to exactly one party."""

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint('name', 'party_id', name='uq_user_name_party'),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True)
    phone = Column(String(255))
    accepted = Column(Boolean)
    hashed_password = Column(String(255))
    avatar_url = Column(String(1000))
    scopes = Column(JSON)
    visible_for_others = Column(Boolean, default=False)
    party_id = Column(Integer, ForeignKey("parties.id", ondelete="CASCADE"), nullable=False, index=True)
    relation_key = Column(String(255), ForeignKey("relations.key"))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    party = relationship("Party", back_populates="users")
    relation = relationship("Relation")

    def __repr__(self):
        return f"<User {self.name}>"
