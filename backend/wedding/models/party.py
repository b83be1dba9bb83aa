"""Party and relation models."""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from wedding.database import Base


class Party(Base):
    """A group of guests invited together, identified by an invitation code."""

    __tablename__ = "parties"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(255), nullable=False, unique=True)
    max_person_count = Column(Integer)

    users = relationship("User", back_populates="party", order_by="User.id")

    def __repr__(self):
        return f"<Party {self.code}>"


class Relation(Base):
    """How a guest relates to the couple (bride, family, witness, ...)."""

    __tablename__ = "relations"

    key = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Relation {self.key}>"
