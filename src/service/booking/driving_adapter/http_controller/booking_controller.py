from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.command.update_booking_room_use_case import (
    UpdateBookingRoomUseCase,
)
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.domain.booking_error import BookingError
from src.service.booking.domain.enum.booking_error_kind import BookingErrorKind
from src.service.booking.driving_adapter.http_controller.auth.session_auth import (
    get_current_user_id,
)
from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingIdResponse,
    BookingResponse,
    BookingRoomRequest,
    RoomResponse,
    coerce_id,
)


# Every booking route requires an authenticated session
router = APIRouter(dependencies=[Depends(get_current_user_id)])
tracer = trace.get_tracer(__name__)

# Status per error kind; kinds not listed fall back per operation
GET_ERROR_STATUS: dict[BookingErrorKind, int] = {
    BookingErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}
CREATE_ERROR_STATUS: dict[BookingErrorKind, int] = {
    BookingErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    BookingErrorKind.ROOM_FULL: status.HTTP_403_FORBIDDEN,
}
UPDATE_ERROR_STATUS: dict[BookingErrorKind, int] = {
    BookingErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    BookingErrorKind.NOT_BOOKING_OWNER: status.HTTP_401_UNAUTHORIZED,
    BookingErrorKind.ROOM_FULL: status.HTTP_403_FORBIDDEN,
    BookingErrorKind.NO_ACTIVE_BOOKING: status.HTTP_403_FORBIDDEN,
}


def to_http_exception(
    error: Exception, status_by_kind: dict[BookingErrorKind, int], fallback: int
) -> HTTPException:
    if isinstance(error, BookingError):
        return HTTPException(
            status_code=status_by_kind.get(error.kind, fallback), detail=error.message
        )
    return HTTPException(status_code=fallback, detail='Booking request failed')


@router.get('')
@Logger.io
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    try:
        booking = await use_case.get_booking_for_user(user_id=user_id)
    except BookingError as e:
        raise to_http_exception(e, GET_ERROR_STATUS, status.HTTP_500_INTERNAL_SERVER_ERROR) from e

    if booking.room is None:
        raise ValueError('Booking room should be loaded with the booking.')

    room = booking.room
    return BookingResponse(
        id=booking.id,
        room=RoomResponse(
            id=room.id,
            name=room.name,
            capacity=room.capacity,
            hotel_id=room.hotel_id,
            created_at=room.created_at,
            updated_at=room.updated_at,
        ),
    )


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def create_booking(
    body: Any = Body(default=None, examples=[{'roomId': 1}]),
    user_id: int = Depends(get_current_user_id),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingIdResponse:
    room_id = BookingRoomRequest.room_id_from_body(body)

    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('user_id', user_id)
        span.set_attribute('room_id', room_id or 0)

        try:
            booking = await use_case.create_booking(room_id=room_id, user_id=user_id)
        except Exception as e:
            # Any failure, store errors included, is a rejected booking
            raise to_http_exception(e, CREATE_ERROR_STATUS, status.HTTP_403_FORBIDDEN) from e

        span.set_attribute('booking.id', booking.id)
        return BookingIdResponse(booking_id=booking.id)


@router.put('/{booking_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_booking(
    booking_id: str,
    body: Any = Body(default=None, examples=[{'roomId': 1}]),
    user_id: int = Depends(get_current_user_id),
    use_case: UpdateBookingRoomUseCase = Depends(UpdateBookingRoomUseCase.depends),
) -> BookingIdResponse:
    room_id = BookingRoomRequest.room_id_from_body(body)
    # An unparseable id matches no booking
    parsed_booking_id = coerce_id(booking_id)

    with tracer.start_as_current_span('controller.update_booking') as span:
        span.set_attribute('user_id', user_id)
        span.set_attribute('booking.id', parsed_booking_id or 0)
        span.set_attribute('room_id', room_id or 0)

        try:
            booking = await use_case.update_booking(
                room_id=room_id, booking_id=parsed_booking_id, user_id=user_id
            )
        except Exception as e:
            raise to_http_exception(e, UPDATE_ERROR_STATUS, status.HTTP_403_FORBIDDEN) from e

        return BookingIdResponse(booking_id=booking.id)
