"""add_unique_index_for_active_bookings

Revision ID: 8b2e4d6f0a31
Revises: 3f1c9a2b7d10
Create Date: 2026-10-19 10:40:51.602114

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b2e4d6f0a31'
down_revision: Union[str, None] = '3f1c9a2b7d10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # FIRST: cancel duplicate active bookings, keeping the oldest of each slot
    op.execute("""
        UPDATE bookings
        SET status = 'CANCELLED'
        WHERE status <> 'CANCELLED'
        AND EXISTS (
            SELECT 1
            FROM bookings b2
            WHERE b2.turf_id = bookings.turf_id
            AND b2.date = bookings.date
            AND b2.start_time = bookings.start_time
            AND b2.status <> 'CANCELLED'
            AND b2.id < bookings.id
        );
    """)

    # SECOND: partial unique index, only pending/confirmed rows hold a slot.
    # Two players booking the same turf, date and hour at once cannot both win.
    op.execute("""
        CREATE UNIQUE INDEX IF NOT EXISTS uq_active_booking_per_slot
        ON bookings (turf_id, date, start_time)
        WHERE status <> 'CANCELLED';
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP INDEX IF EXISTS uq_active_booking_per_slot;")
