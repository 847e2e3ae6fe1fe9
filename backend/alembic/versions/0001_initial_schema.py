"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates the invitations and rsvp_responses tables. The two are joined on
slug values; there is no foreign key between them.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- invitations ---
    op.create_table(
        "invitations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("slug", sa.String(64), nullable=False),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("pronoun", sa.Text, nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("invite_to_party", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_invitations_slug", "invitations", ["slug"], unique=True)

    # --- rsvp_responses ---
    op.create_table(
        "rsvp_responses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("slug", sa.String(64), nullable=False),
        sa.Column("name", sa.Text, nullable=True),
        sa.Column("email", sa.Text, nullable=True),
        sa.Column("phone", sa.Text, nullable=True),
        sa.Column("response", sa.String(8), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_rsvp_responses_slug", "rsvp_responses", ["slug"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_rsvp_responses_slug", table_name="rsvp_responses")
    op.drop_table("rsvp_responses")
    op.drop_index("ix_invitations_slug", table_name="invitations")
    op.drop_table("invitations")
