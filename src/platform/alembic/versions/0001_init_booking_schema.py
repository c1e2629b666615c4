"""init_booking_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

Schema:
- user / session: accounts and bearer-token sessions
- enrollment / ticket_type / ticket: event admission per user
- hotel / room: rooms with a fixed capacity
- booking: one booking per user, pointing at a room
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(*, with_updated_at: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        )
    ]
    if with_updated_at:
        columns.append(
            sa.Column(
                'updated_at',
                sa.DateTime(timezone=True),
                server_default=sa.text('now()'),
                nullable=False,
            )
        )
    return columns


def upgrade() -> None:
    """Create all booking tables."""

    # ========== Accounts ==========

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table(
        'session',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('token', sa.String(), nullable=False),
        *_timestamps(with_updated_at=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_session_user_id'), 'session', ['user_id'])
    op.create_index(op.f('ix_session_token'), 'session', ['token'])

    # ========== Tickets ==========

    op.create_table(
        'enrollment',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_timestamps(with_updated_at=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )

    op.create_table(
        'ticket_type',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('is_remote', sa.Boolean(), nullable=False),
        sa.Column('includes_hotel', sa.Boolean(), nullable=False),
        *_timestamps(with_updated_at=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'ticket',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('ticket_type_id', sa.Integer(), nullable=False),
        sa.Column('enrollment_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['ticket_type_id'], ['ticket_type.id']),
        sa.ForeignKeyConstraint(['enrollment_id'], ['enrollment.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('enrollment_id'),
        sa.CheckConstraint("status IN ('RESERVED', 'PAID')", name='ticket_status_check'),
    )

    # ========== Hotels ==========

    op.create_table(
        'hotel',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=False),
        *_timestamps(with_updated_at=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'room',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('hotel_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['hotel_id'], ['hotel.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('capacity >= 0', name='room_capacity_check'),
    )
    op.create_index(op.f('ix_room_hotel_id'), 'room', ['hotel_id'])

    # ========== Bookings ==========

    op.create_table(
        'booking',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.ForeignKeyConstraint(['room_id'], ['room.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_booking_user_id'), 'booking', ['user_id'], unique=True)
    op.create_index(op.f('ix_booking_room_id'), 'booking', ['room_id'])


def downgrade() -> None:
    """Drop all booking tables."""
    op.drop_index(op.f('ix_booking_room_id'), table_name='booking')
    op.drop_index(op.f('ix_booking_user_id'), table_name='booking')
    op.drop_table('booking')
    op.drop_index(op.f('ix_room_hotel_id'), table_name='room')
    op.drop_table('room')
    op.drop_table('hotel')
    op.drop_table('ticket')
    op.drop_table('ticket_type')
    op.drop_table('enrollment')
    op.drop_index(op.f('ix_session_token'), table_name='session')
    op.drop_index(op.f('ix_session_user_id'), table_name='session')
    op.drop_table('session')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
