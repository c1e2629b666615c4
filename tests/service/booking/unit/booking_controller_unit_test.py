"""
Unit tests for request coercion and error-to-status mapping of the booking controller
"""

import pytest

from src.service.booking.domain.booking_error import BookingError
from src.service.booking.driving_adapter.http_controller.booking_controller import (
    CREATE_ERROR_STATUS,
    GET_ERROR_STATUS,
    UPDATE_ERROR_STATUS,
    to_http_exception,
)
from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingIdResponse,
    BookingRoomRequest,
    coerce_id,
)


pytestmark = pytest.mark.unit


class TestRoomIdCoercion:
    @pytest.mark.parametrize('raw,expected', [(3, 3), ('12', 12), (4.0, 4)])
    def test_numeric_values_become_room_id(self, raw, expected):
        assert BookingRoomRequest.model_validate({'roomId': raw}).room_id == expected

    @pytest.mark.parametrize('raw', ['abc', '', None, True, [1], {'id': 1}, 1.5])
    def test_other_values_become_missing(self, raw):
        assert BookingRoomRequest.model_validate({'roomId': raw}).room_id is None

    def test_absent_room_id_is_missing(self):
        assert BookingRoomRequest.model_validate({}).room_id is None

    @pytest.mark.parametrize('body', [None, [1], 'x', 5, True])
    def test_body_that_is_not_an_object_has_no_room_id(self, body):
        assert BookingRoomRequest.room_id_from_body(body) is None

    def test_object_body_is_coerced(self):
        assert BookingRoomRequest.room_id_from_body({'roomId': '7'}) == 7


@pytest.mark.parametrize('raw,expected', [('42', 42), ('abc', None), ('', None), ('4.2', None)])
def test_path_booking_id_coercion(raw, expected):
    assert coerce_id(raw) == expected


def test_booking_id_response_uses_camel_case():
    assert BookingIdResponse(booking_id=3).model_dump(by_alias=True) == {'bookingId': 3}


class TestErrorStatusMapping:
    @pytest.mark.parametrize(
        'error,expected',
        [
            (BookingError.not_found('Booking not found'), 404),
            (BookingError.room_full(), 500),
        ],
    )
    def test_get(self, error, expected):
        assert to_http_exception(error, GET_ERROR_STATUS, 500).status_code == expected

    @pytest.mark.parametrize(
        'error,expected',
        [
            (BookingError.not_found('Room not found'), 404),
            (BookingError.room_full(), 403),
            (BookingError.room_id_required(), 403),
            (RuntimeError('unique violation'), 403),
        ],
    )
    def test_create(self, error, expected):
        assert to_http_exception(error, CREATE_ERROR_STATUS, 403).status_code == expected

    @pytest.mark.parametrize(
        'error,expected',
        [
            (BookingError.not_found('Room not found'), 404),
            (BookingError.not_booking_owner(), 401),
            (BookingError.room_full(), 403),
            (BookingError.no_active_booking(), 403),
            (BookingError.room_id_required(), 403),
        ],
    )
    def test_update(self, error, expected):
        assert to_http_exception(error, UPDATE_ERROR_STATUS, 403).status_code == expected

    def test_store_error_detail_is_not_leaked(self):
        exc = to_http_exception(RuntimeError('duplicate key value'), CREATE_ERROR_STATUS, 403)

        assert exc.detail == 'Booking request failed'
