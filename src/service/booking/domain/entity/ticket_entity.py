from typing import Optional

import attrs

from src.service.booking.domain.enum.ticket_status import TicketStatus


@attrs.define
class TicketType:
    id: int
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool


@attrs.define
class Ticket:
    id: int
    enrollment_id: int
    ticket_type_id: int
    status: TicketStatus
    ticket_type: Optional[TicketType] = None

    @property
    def is_paid(self) -> bool:
        return self.status == TicketStatus.PAID

    @property
    def is_remote(self) -> bool:
        return bool(self.ticket_type and self.ticket_type.is_remote)

    @property
    def includes_hotel(self) -> bool:
        return bool(self.ticket_type and self.ticket_type.includes_hotel)

    def grants_hotel_stay(self) -> bool:
        """A paid, in-person ticket whose type includes the hotel."""
        return self.is_paid and not self.is_remote and self.includes_hotel
