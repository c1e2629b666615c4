from datetime import datetime
from typing import List, Optional

import attrs


@attrs.define
class Room:
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    bookings: List['Booking'] = attrs.field(factory=list)

    @property
    def occupancy(self) -> int:
        return len(self.bookings)

    @property
    def vacancies(self) -> int:
        return self.capacity - self.occupancy

    def is_full(self) -> bool:
        # Occupancy never exceeds capacity, so equality means no vacancy
        return self.capacity == self.occupancy


@attrs.define
class Booking:
    id: int
    user_id: int
    room_id: int
    room: Optional[Room] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
