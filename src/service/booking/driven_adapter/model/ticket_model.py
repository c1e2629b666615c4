from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.booking.driven_adapter.model.enrollment_model import EnrollmentModel


class TicketTypeModel(Base):
    __tablename__ = 'ticket_type'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    is_remote: Mapped[bool] = mapped_column(Boolean, nullable=False)
    includes_hotel: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticket_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('ticket_type.id'), nullable=False
    )
    enrollment_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('enrollment.id'), nullable=False, unique=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    ticket_type: Mapped['TicketTypeModel'] = relationship('TicketTypeModel', lazy='selectin')
    enrollment: Mapped['EnrollmentModel'] = relationship(
        'EnrollmentModel', back_populates='ticket', lazy='raise'
    )
