from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.booking.domain.entity.ticket_entity import Ticket, TicketType
from src.service.booking.domain.enum.ticket_status import TicketStatus
from src.service.booking.driven_adapter.model.enrollment_model import EnrollmentModel
from src.service.booking.driven_adapter.model.ticket_model import TicketModel


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None,
        *,
        session: AsyncSession | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.session = session

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _to_entity(db_ticket: TicketModel) -> Ticket:
        db_type = db_ticket.ticket_type
        return Ticket(
            id=db_ticket.id,
            enrollment_id=db_ticket.enrollment_id,
            ticket_type_id=db_ticket.ticket_type_id,
            status=TicketStatus(db_ticket.status),
            ticket_type=TicketType(
                id=db_type.id,
                name=db_type.name,
                price=db_type.price,
                is_remote=db_type.is_remote,
                includes_hotel=db_type.includes_hotel,
            ),
        )

    @Logger.io
    async def find_ticket_by_user_id(self, *, user_id: int) -> Optional[Ticket]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TicketModel)
                .join(EnrollmentModel, TicketModel.enrollment_id == EnrollmentModel.id)
                .where(EnrollmentModel.user_id == user_id)
            )
            db_ticket = result.scalar_one_or_none()

            if not db_ticket:
                return None

            return self._to_entity(db_ticket)
