from abc import ABC, abstractmethod
from typing import Optional

from src.service.booking.domain.entity.ticket_entity import Ticket


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def find_ticket_by_user_id(self, *, user_id: int) -> Optional[Ticket]:
        """The ticket of the user's enrollment, with its ticket type"""
        pass
