from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.booking.driven_adapter.model.hotel_model import RoomModel


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # One booking per user
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id'), nullable=False, unique=True, index=True
    )
    room_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('room.id'), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    room: Mapped['RoomModel'] = relationship('RoomModel', back_populates='bookings', lazy='raise')
