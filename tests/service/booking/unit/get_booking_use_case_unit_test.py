from unittest.mock import AsyncMock

import pytest

from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.domain.booking_error import BookingError
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.enum.booking_error_kind import BookingErrorKind
from tests.service.booking.unit.booking_factories import make_room


pytestmark = pytest.mark.unit


@pytest.fixture
def booking_query_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def use_case(booking_query_repo, metrics) -> GetBookingUseCase:
    return GetBookingUseCase(booking_query_repo=booking_query_repo, metrics=metrics)


@pytest.mark.asyncio
async def test_returns_booking_with_room(use_case, booking_query_repo, metrics):
    room = make_room(room_id=10)
    booking_query_repo.find_booking_by_user_id.return_value = Booking(
        id=5, user_id=1, room_id=10, room=room
    )

    booking = await use_case.get_booking_for_user(user_id=1)

    assert booking.id == 5
    assert booking.room is room
    booking_query_repo.find_booking_by_user_id.assert_awaited_once_with(user_id=1)
    assert metrics.record_booking_request.call_args.kwargs['result'] == 'success'


@pytest.mark.asyncio
async def test_missing_booking_is_not_found(use_case, booking_query_repo, metrics):
    booking_query_repo.find_booking_by_user_id.return_value = None

    with pytest.raises(BookingError) as exc_info:
        await use_case.get_booking_for_user(user_id=1)

    assert exc_info.value.kind == BookingErrorKind.NOT_FOUND
    assert metrics.record_booking_request.call_args.kwargs['result'] == 'not_found'
