"""Hotel room schemas."""
from typing import Optional

from wedding.schemas.common import CamelModel


class HotelRoomResponse(CamelModel):
    """Hotel room."""
    id: int
    description: Optional[str] = None
    price: Optional[float] = None
    max_person_count: Optional[int] = None
