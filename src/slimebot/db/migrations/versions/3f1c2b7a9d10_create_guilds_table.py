"""Create guilds table

Revision ID: 3f1c2b7a9d10
Revises:
Create Date: 2024-02-25 21:40:18.104392

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c2b7a9d10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "guilds",
        sa.Column("guild_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.PrimaryKeyConstraint("guild_id", name="guilds_pkey"),
    )


def downgrade():
    op.drop_table("guilds")
