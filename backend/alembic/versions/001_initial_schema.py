"""Initial schema — events, participants, logistics and their link tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("description", sa.String(255), nullable=False, server_default=""),
        sa.Column("start_date", sa.Date, nullable=True),
        sa.Column("end_date", sa.Date, nullable=True),
        sa.Column("cost", sa.Float, nullable=False, server_default="0"),
    )
    op.create_index("ix_events_description", "events", ["description"])
    op.create_index("ix_events_start_date", "events", ["start_date"])

    op.create_table(
        "participants",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("last_name", sa.String(100), nullable=False, server_default=""),
        sa.Column("first_name", sa.String(100), nullable=False, server_default=""),
        sa.Column("role", sa.String(20), nullable=False, server_default="visiteur"),
    )
    op.create_index(
        "ix_participants_full_name", "participants", ["last_name", "first_name"],
    )

    op.create_table(
        "logistics",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("description", sa.String(255), nullable=False, server_default=""),
        sa.Column("reserved", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("unit_price", sa.Float, nullable=False, server_default="0"),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="0"),
    )

    op.create_table(
        "event_participants",
        sa.Column("event_id", sa.Integer, sa.ForeignKey("events.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("participant_id", sa.Integer, sa.ForeignKey("participants.id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "event_logistics",
        sa.Column("event_id", sa.Integer, sa.ForeignKey("events.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("logistics_id", sa.Integer, sa.ForeignKey("logistics.id", ondelete="CASCADE"), primary_key=True, unique=True),
    )


def downgrade() -> None:
    op.drop_table("event_logistics")
    op.drop_table("event_participants")
    op.drop_table("logistics")
    op.drop_index("ix_participants_full_name", table_name="participants")
    op.drop_table("participants")
    op.drop_index("ix_events_start_date", table_name="events")
    op.drop_index("ix_events_description", table_name="events")
    op.drop_table("events")
