"""create team and member tables

Revision ID: 3f1c2a9d7b64
Revises:
Create Date: 2026-10-18 09:12:41.507318

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# deal with alembic stuff
# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b64"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "team",
        sa.Column("team_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("team_id", name=op.f("pk_team")),
        comment="Teams members belong to.",
    )
    op.create_table(
        "member",
        sa.Column("member_id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(length=100), nullable=True),
        sa.Column("age", sa.Integer(), server_default="0", nullable=False),
        sa.Column("team_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["team_id"],
            ["team.team_id"],
            name=op.f("fk_member_team_id_team"),
        ),
        sa.PrimaryKeyConstraint("member_id", name=op.f("pk_member")),
        comment="Members; team_id is the owning side of the member/team association.",
    )
    op.create_index(op.f("ix_member_member_team_id"), "member", ["team_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_member_member_team_id"), table_name="member")
    op.drop_table("member")
    op.drop_table("team")
