from abc import ABC, abstractmethod

from src.service.booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    """Repository interface for booking write operations (Unit of Work only)"""

    @abstractmethod
    async def create_booking(self, *, room_id: int, user_id: int) -> Booking:
        pass

    @abstractmethod
    async def update_booking_room(self, *, booking_id: int, room_id: int) -> Booking:
        pass
