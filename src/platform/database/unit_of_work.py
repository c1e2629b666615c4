"""
Unit of Work Pattern - one database session and transaction per use case

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback
- Repositories obtain the shared session through the UoW
- Use cases coordinate several repositories through the UoW
"""

from __future__ import annotations

import abc
from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, AsyncContextManager, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
    from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
    from src.service.booking.app.interface.i_ticket_query_repo import ITicketQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Booking Service

    Usage:
        async with uow:
            room = await uow.booking_query_repo.find_room_with_bookings(room_id=1, for_update=True)
            booking = await uow.booking_command_repo.create_booking(room_id=1, user_id=2)
            await uow.commit()

    Leaving the block without `commit()` rolls the transaction back.
    """

    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo
    ticket_query_repo: ITicketQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    Opens a session from `session_factory` on enter and binds every
    repository to it, so all reads and writes share one transaction.
    """

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self._exit_stack: Optional[AsyncExitStack] = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.ticket_query_repo_impl import (
            TicketQueryRepoImpl,
        )

        self._exit_stack = AsyncExitStack()
        self.session = await self._exit_stack.enter_async_context(self.session_factory())

        # Repositories share the UoW session
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.booking_query_repo = BookingQueryRepoImpl(session=self.session)
        self.ticket_query_repo = TicketQueryRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._exit_stack is not None:
                await self._exit_stack.aclose()
            self._exit_stack = None
            self.session = None

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('Unit of Work is not active')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
