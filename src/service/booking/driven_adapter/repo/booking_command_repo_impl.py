"""
Booking Command Repository Implementation

Write side of the booking store. Runs on the Unit of Work session; the
caller commits.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.driven_adapter.model.booking_model import BookingModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            room_id=db_booking.room_id,
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    @Logger.io
    async def create_booking(self, *, room_id: int, user_id: int) -> Booking:
        db_booking = BookingModel(room_id=room_id, user_id=user_id)
        self.session.add(db_booking)
        try:
            await self.session.flush()
        except IntegrityError as e:
            # user_id is unique on booking
            raise ConflictError(f'User {user_id} already has a booking') from e
        # Load server-side defaults (id, timestamps)
        await self.session.refresh(db_booking)

        return self._to_entity(db_booking)

    @Logger.io
    async def update_booking_room(self, *, booking_id: int, room_id: int) -> Booking:
        db_booking = await self.session.get(BookingModel, booking_id)
        if db_booking is None:
            raise NotFoundError(f'Booking {booking_id} not found')

        db_booking.room_id = room_id
        await self.session.flush()
        await self.session.refresh(db_booking)

        return self._to_entity(db_booking)
