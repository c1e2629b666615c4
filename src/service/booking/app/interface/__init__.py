"""Application layer interfaces (Ports)"""

from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.booking.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.booking.app.interface.i_ticket_query_repo import ITicketQueryRepo

__all__ = [
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'ISessionQueryRepo',
    'ITicketQueryRepo',
]
