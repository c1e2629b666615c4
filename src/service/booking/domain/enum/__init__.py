"""Booking Domain Enums"""

from src.service.booking.domain.enum.booking_error_kind import BookingErrorKind
from src.service.booking.domain.enum.ticket_status import TicketStatus

__all__ = ['BookingErrorKind', 'TicketStatus']
