"""Use guild ID as spam channel primary key

Revision ID: c5d91e0f7a23
Revises: 8a4e6d2c1b57
Create Date: 2024-02-26 18:12:40.550213

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "c5d91e0f7a23"
down_revision = "8a4e6d2c1b57"
branch_labels = None
depends_on = None


def upgrade():
    with op.batch_alter_table("admin_bot_spam_channel") as batch_op:
        batch_op.drop_constraint("admin_bot_spam_channel_pkey", type_="primary")
        batch_op.drop_column("id")
        batch_op.create_primary_key("admin_bot_spam_channel_pkey", ["guild_id"])


def downgrade():
    # Existing rows get their ID from the identity on PostgreSQL and from the rowid on SQLite
    with op.batch_alter_table("admin_bot_spam_channel") as batch_op:
        batch_op.drop_constraint("admin_bot_spam_channel_pkey", type_="primary")
        batch_op.add_column(sa.Column("id", sa.Integer(), sa.Identity(), nullable=False))
        batch_op.create_primary_key("admin_bot_spam_channel_pkey", ["id"])
