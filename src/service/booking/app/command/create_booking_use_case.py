"""
Create Booking Use Case

Books a room for a user holding a paid, in-person ticket that includes the
hotel. The vacancy check and the insert run in one Unit of Work with the
room row locked, so concurrent requests cannot overfill a room.
"""

import time
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.booking.domain.booking_error import BookingError
from src.service.booking.domain.entity.booking_entity import Booking


class CreateBookingUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork, metrics: BookingMetrics) -> None:
        self.uow = uow
        self.metrics = metrics
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls(uow=uow, metrics=metrics)

    @Logger.io
    async def create_booking(self, *, room_id: Optional[int], user_id: int) -> Booking:
        """
        Create a booking for `user_id` in `room_id`.

        Checks run in this order: room id present, ticket grants a hotel
        stay, room exists, room has a vacancy.

        Raises:
            BookingError: ROOM_ID_REQUIRED, NOT_FOUND or ROOM_FULL
        """
        start = time.perf_counter()
        result = 'error'
        try:
            with self.tracer.start_as_current_span(
                'use_case.create_booking',
                attributes={'user.id': user_id, 'booking.room_id': room_id or 0},
            ):
                booking = await self._create_booking(room_id=room_id, user_id=user_id)
                result = 'success'
                return booking
        except BookingError as e:
            result = e.kind.value
            raise
        finally:
            self.metrics.record_booking_request(
                operation='create', result=result, duration=time.perf_counter() - start
            )

    async def _create_booking(self, *, room_id: Optional[int], user_id: int) -> Booking:
        if not room_id:
            raise BookingError.room_id_required()

        async with self.uow:
            ticket = await self.uow.ticket_query_repo.find_ticket_by_user_id(user_id=user_id)
            if not ticket or not ticket.grants_hotel_stay():
                raise BookingError.not_found('No paid ticket with hotel for user')

            room = await self.uow.booking_query_repo.find_room_with_bookings(
                room_id=room_id, for_update=True
            )
            if not room:
                raise BookingError.not_found('Room not found')
            if room.is_full():
                raise BookingError.room_full()

            booking = await self.uow.booking_command_repo.create_booking(
                room_id=room_id, user_id=user_id
            )
            await self.uow.commit()

        Logger.base.info(f'🏨 [BOOKING] User {user_id} booked room {room_id} (booking={booking.id})')
        return booking
