from abc import ABC, abstractmethod
from typing import Optional

from src.service.booking.domain.entity.booking_entity import Booking, Room


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def find_booking_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        """The user's booking with its Room embedded"""
        pass

    @abstractmethod
    async def find_room_with_bookings(
        self, *, room_id: int, for_update: bool = False
    ) -> Optional[Room]:
        """
        The room with its current bookings.

        for_update=True locks the room row until the surrounding transaction
        ends; only meaningful inside a Unit of Work.
        """
        pass
