"""Hotel room model and party reservations."""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, Table
from sqlalchemy.sql import func
from wedding.database import Base

# Party reservations - many-to-many between parties and hotel rooms
party_hotel_rooms = Table(
    "party_hotel_rooms",
    Base.metadata,
    Column("party_id", Integer, ForeignKey("parties.id", ondelete="CASCADE"), primary_key=True),
    Column("hotel_room_id", Integer, ForeignKey("hotel_rooms.id", ondelete="CASCADE"), primary_key=True),
    Column("reserved_at", DateTime(timezone=True), server_default=func.now()),
)


class HotelRoom(Base):
    """A bookable room near the venue."""

    __tablename__ = "hotel_rooms"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(1000))
    price = Column(Numeric(10, 2, asdecimal=False))
    max_person_count = Column(Integer)

    def __repr__(self):
        return f"<HotelRoom {self.id}>"
