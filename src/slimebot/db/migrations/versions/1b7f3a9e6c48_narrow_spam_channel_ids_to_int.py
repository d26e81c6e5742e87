"""Narrow spam channel IDs to INT

Revision ID: 1b7f3a9e6c48
Revises: c5d91e0f7a23
Create Date: 2024-03-02 14:03:27.918644

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "1b7f3a9e6c48"
down_revision = "c5d91e0f7a23"
branch_labels = None
depends_on = None


def upgrade():
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


def downgrade():
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
