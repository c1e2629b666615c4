import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.booking.domain.booking_error import BookingError
from src.service.booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo, metrics: BookingMetrics):
        self.booking_query_repo = booking_query_repo
        self.metrics = metrics
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo, metrics=metrics)

    @Logger.io
    async def get_booking_for_user(self, *, user_id: int) -> Booking:
        start = time.perf_counter()
        result = 'error'
        try:
            with self.tracer.start_as_current_span(
                'use_case.get_booking', attributes={'user.id': user_id}
            ):
                booking = await self.booking_query_repo.find_booking_by_user_id(user_id=user_id)
                if not booking:
                    raise BookingError.not_found('Booking not found')

                result = 'success'
                return booking
        except BookingError as e:
            result = e.kind.value
            raise
        finally:
            self.metrics.record_booking_request(
                operation='get', result=result, duration=time.perf_counter() - start
            )
