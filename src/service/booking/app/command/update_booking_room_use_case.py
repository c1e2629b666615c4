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


class UpdateBookingRoomUseCase:
    """
    Move a user's existing booking to another room.

    The target room is row-locked before its bookings are counted. If the
    booking already sits in the target room it counts toward occupancy.
    """

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
    async def update_booking(
        self, *, room_id: Optional[int], booking_id: Optional[int], user_id: int
    ) -> Booking:
        start = time.perf_counter()
        result = 'error'
        try:
            with self.tracer.start_as_current_span(
                'use_case.update_booking_room',
                attributes={
                    'user.id': user_id,
                    'booking.id': booking_id or 0,
                    'booking.room_id': room_id or 0,
                },
            ):
                booking = await self._update_booking(
                    room_id=room_id, booking_id=booking_id, user_id=user_id
                )
                result = 'success'
                return booking
        except BookingError as e:
            result = e.kind.value
            raise
        finally:
            self.metrics.record_booking_request(
                operation='update', result=result, duration=time.perf_counter() - start
            )

    async def _update_booking(
        self, *, room_id: Optional[int], booking_id: Optional[int], user_id: int
    ) -> Booking:
        if not room_id:
            raise BookingError.room_id_required()

        async with self.uow:
            current = await self.uow.booking_query_repo.find_booking_by_user_id(user_id=user_id)
            if not current:
                raise BookingError.no_active_booking()
            if current.id != booking_id:
                raise BookingError.not_booking_owner()

            room = await self.uow.booking_query_repo.find_room_with_bookings(
                room_id=room_id, for_update=True
            )
            if not room:
                raise BookingError.not_found('Room not found')
            if room.is_full():
                raise BookingError.room_full()

            booking = await self.uow.booking_command_repo.update_booking_room(
                booking_id=current.id, room_id=room_id
            )
            await self.uow.commit()

        Logger.base.info(
            f'🔁 [BOOKING] User {user_id} moved booking {booking_id} '
            f'from room {current.room_id} to room {room_id}'
        )
        return booking
