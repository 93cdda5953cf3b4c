"""Create people, rooms and bookings tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the three tables of the booking store.
How:   Bookings reference people and rooms with ON DELETE CASCADE, so
       deleting either removes its bookings. Room names are unique.

Rollback: downgrade() drops all three tables (destructive — all data lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the tables, constraints and indexes; see roombooking/models for docs."""
    op.create_table(
        "people",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False, comment="Surrogate key"),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("phone_number", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "rooms",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False, comment="Surrogate key"),
        sa.Column("name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_rooms_name"),
    )

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False, comment="Surrogate key"),
        sa.Column("person_id", sa.Integer(), nullable=False),
        sa.Column("room_id", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["person_id"], ["people.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["room_id"], ["rooms.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    # Availability query: bookings of one room ordered by start
    op.create_index("idx_bookings_room_start", "bookings", ["room_id", "start_date"])
    op.create_index("idx_bookings_person", "bookings", ["person_id"])


def downgrade() -> None:
    """Drop every table created by upgrade(), children first."""
    op.drop_index("idx_bookings_person", table_name="bookings")
    op.drop_index("idx_bookings_room_start", table_name="bookings")
    op.drop_table("bookings")
    op.drop_table("rooms")
    op.drop_table("people")
