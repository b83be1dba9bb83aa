"""Hotel room listing and party reservations."""
import logging
from typing import List

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from wedding.exceptions import ConflictError, NotFoundError, ValidationError
from wedding.models.hotel_room import HotelRoom, party_hotel_rooms
from wedding.models.party import Party

logger = logging.getLogger(__name__)


class HotelRoomService:
    """Service for hotel rooms and the parties that reserved them."""

    def __init__(self, db: Session):
        self.db = db

    def list_rooms(self) -> List[HotelRoom]:
        """All rooms ordered by id."""
        return self.db.query(HotelRoom).order_by(HotelRoom.id.asc()).all()

    def get_room(self, room_id: int) -> HotelRoom:
        room = self.db.query(HotelRoom).filter(HotelRoom.id == room_id).first()
        if not room:
            raise NotFoundError("hotel room", room_id)
        return room

    def create_room(self, description: str, price: float, max_person_count: int) -> HotelRoom:
        """Create a new room."""
        room = HotelRoom(description=description, price=price, max_person_count=max_person_count)
        self.db.add(room)
        self.db.commit()
        self.db.refresh(room)
        return room

    def list_party_rooms(self, party_id: int) -> List[HotelRoom]:
        """Rooms reserved by a party, ordered by id."""
        return (
            self.db.query(HotelRoom)
            .join(party_hotel_rooms, party_hotel_rooms.c.hotel_room_id == HotelRoom.id)
            .filter(party_hotel_rooms.c.party_id == party_id)
            .order_by(HotelRoom.id.asc())
            .all()
        )

    def reserve(self, party: Party, room_id: int) -> HotelRoom:
        """Reserve a room for a party.

        The party must fit into the room when its size is known.
        """
        room = self.get_room(room_id)

        if (
            party.max_person_count is not None
            and room.max_person_count is not None
            and party.max_person_count > room.max_person_count
        ):
            raise ValidationError(
                f"Hotel room {room_id} sleeps {room.max_person_count}, "
                f"party has {party.max_person_count} guests",
                field="maxPersonCount",
            )

        existing = self.db.execute(
            select(party_hotel_rooms).where(
                party_hotel_rooms.c.party_id == party.id,
                party_hotel_rooms.c.hotel_room_id == room_id,
            )
        ).first()
        if existing:
            raise ConflictError(f"Hotel room {room_id} is already reserved by your party")

        try:
            self.db.execute(
                insert(party_hotel_rooms).values(party_id=party.id, hotel_room_id=room_id)
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Hotel room {room_id} is already reserved by your party")

        logger.info(f"Party {party.id} reserved hotel room {room_id}")
        return room

    def release(self, party: Party, room_id: int) -> None:
        """Cancel a party's reservation."""
        result = self.db.execute(
            delete(party_hotel_rooms).where(
                party_hotel_rooms.c.party_id == party.id,
                party_hotel_rooms.c.hotel_room_id == room_id,
            )
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError("hotel room reservation", room_id)
        self.db.commit()
        logger.info(f"Party {party.id} released hotel room {room_id}")
