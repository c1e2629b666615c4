"""
Booking Error Kind - tagged reasons a booking request is rejected

The HTTP layer maps each kind to a status code per operation; two kinds may
share a status code while staying distinguishable in logs and tests.
"""

from enum import StrEnum


class BookingErrorKind(StrEnum):
    ROOM_ID_REQUIRED = 'room_id_required'
    NOT_FOUND = 'not_found'
    ROOM_FULL = 'room_full'
    NO_ACTIVE_BOOKING = 'no_active_booking'
    NOT_BOOKING_OWNER = 'not_booking_owner'
