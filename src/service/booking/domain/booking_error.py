from src.platform.exception.exceptions import CustomBaseError
from src.service.booking.domain.enum.booking_error_kind import BookingErrorKind


# Default HTTP status per kind, used when no operation-specific mapping applies
_DEFAULT_STATUS: dict[BookingErrorKind, int] = {
    BookingErrorKind.ROOM_ID_REQUIRED: 403,
    BookingErrorKind.NOT_FOUND: 404,
    BookingErrorKind.ROOM_FULL: 403,
    BookingErrorKind.NO_ACTIVE_BOOKING: 403,
    BookingErrorKind.NOT_BOOKING_OWNER: 401,
}


class BookingError(CustomBaseError):
    def __init__(self, kind: BookingErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message, _DEFAULT_STATUS[kind])

    @classmethod
    def room_id_required(cls) -> 'BookingError':
        return cls(BookingErrorKind.ROOM_ID_REQUIRED, 'Room ID required')

    @classmethod
    def not_found(cls, message: str) -> 'BookingError':
        return cls(BookingErrorKind.NOT_FOUND, message)

    @classmethod
    def room_full(cls) -> 'BookingError':
        return cls(BookingErrorKind.ROOM_FULL, 'NoVacancies')

    @classmethod
    def no_active_booking(cls) -> 'BookingError':
        return cls(BookingErrorKind.NO_ACTIVE_BOOKING, 'User has no booking to change')

    @classmethod
    def not_booking_owner(cls) -> 'BookingError':
        return cls(BookingErrorKind.NOT_BOOKING_OWNER, 'Booking does not belong to user')
