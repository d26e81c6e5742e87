"""Create admin_bot_spam_channel table

Revision ID: 8a4e6d2c1b57
Revises: 3f1c2b7a9d10
Create Date: 2024-02-26 05:55:55.312907

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "8a4e6d2c1b57"
down_revision = "3f1c2b7a9d10"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "admin_bot_spam_channel",
        sa.Column("id", sa.Integer(), sa.Identity(), nullable=False),
        sa.Column("channel_id", sa.BigInteger(), nullable=False),
        sa.Column("guild_id", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="admin_bot_spam_channel_pkey"),
        sa.UniqueConstraint("guild_id", name="admin_bot_spam_channel_guild_id_key"),
        sa.ForeignKeyConstraint(
            ["guild_id"], ["guilds.guild_id"], name="fk_guild", ondelete="CASCADE"
        ),
    )


def downgrade():
    op.drop_table("admin_bot_spam_channel")
