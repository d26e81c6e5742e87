"""Widen spam channel IDs back to BIGINT

The persisted schema ends up as BIGINT rather than the INT of the previous
revision: snowflakes do not fit into 32 bits.

Revision ID: e2a8c4f05d91
Revises: 1b7f3a9e6c48
Create Date: 2024-03-09 11:47:05.061378

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "e2a8c4f05d91"
down_revision = "1b7f3a9e6c48"
branch_labels = None
depends_on = None


def upgrade():
    with op.batch_alter_table("admin_bot_spam_channel") as batch_op:
        batch_op.alter_column(
            "channel_id",
            existing_type=sa.Integer(),
            type_=sa.BigInteger(),
            existing_nullable=False,
        )
        batch_op.alter_column(
            "guild_id",
            existing_type=sa.Integer(),
            type_=sa.BigInteger(),
            existing_nullable=False,
        )


def downgrade():
    # Fails on PostgreSQL if any stored ID exceeds 32 bits
    with op.batch_alter_table("admin_bot_spam_channel") as batch_op:
        batch_op.alter_column(
            "channel_id",
            existing_type=sa.BigInteger(),
            type_=sa.Integer(),
            existing_nullable=False,
        )
        batch_op.alter_column(
            "guild_id",
            existing_type=sa.BigInteger(),
            type_=sa.Integer(),
            existing_nullable=False,
        )
