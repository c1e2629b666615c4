from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.booking.domain.entity.booking_entity import Booking, Room
from src.service.booking.driven_adapter.model.booking_model import BookingModel
from src.service.booking.driven_adapter.model.hotel_model import RoomModel


class BookingQueryRepoImpl(IBookingQueryRepo):
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
        """
        Get session for query execution.

        If session is injected (from UoW), yield it directly without context management.
        Otherwise, use session_factory context manager.
        """
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _to_room(db_room: RoomModel, bookings: list[BookingModel] | None = None) -> Room:
        return Room(
            id=db_room.id,
            name=db_room.name,
            capacity=db_room.capacity,
            hotel_id=db_room.hotel_id,
            created_at=db_room.created_at,
            updated_at=db_room.updated_at,
            bookings=[BookingQueryRepoImpl._to_booking(b) for b in bookings or []],
        )

    @staticmethod
    def _to_booking(db_booking: BookingModel, room: Room | None = None) -> Booking:
        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            room_id=db_booking.room_id,
            room=room,
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    @Logger.io
    async def find_booking_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .options(selectinload(BookingModel.room))
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.id)
                .limit(1)
            )
            db_booking = result.scalar_one_or_none()

            if not db_booking:
                return None

            return self._to_booking(db_booking, room=self._to_room(db_booking.room))

    @Logger.io
    async def find_room_with_bookings(
        self, *, room_id: int, for_update: bool = False
    ) -> Optional[Room]:
        async with self._get_session() as session:
            query = (
                select(RoomModel)
                .options(selectinload(RoomModel.bookings))
                .where(RoomModel.id == room_id)
            )
            if for_update:
                # Serializes concurrent vacancy checks on the same room
                query = query.with_for_update(of=RoomModel)
                # Bookings of a room locked earlier in this session may be stale
                query = query.execution_options(populate_existing=True)

            result = await session.execute(query)
            db_room = result.scalar_one_or_none()

            if not db_room:
                return None

            return self._to_room(db_room, bookings=list(db_room.bookings))
