"""create_users_feeds_feed_follows

Revision ID: 5b2f0c9e1a47
Revises:
Create Date: 2026-10-19 10:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b2f0c9e1a47'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('api_key', sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_api_key', 'users', ['api_key'], unique=True)

    op.create_table(
        'feeds',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('url', sa.String(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('url'),
    )
    op.create_index('ix_feeds_user_id', 'feeds', ['user_id'])

    # One follow per (user, feed) pair
    op.create_table(
        'feed_follows',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('feed_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['feed_id'], ['feeds.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'feed_id', name='uq_feed_follows_user_feed'),
    )
    op.create_index('ix_feed_follows_user_id', 'feed_follows', ['user_id'])
    op.create_index('ix_feed_follows_feed_id', 'feed_follows', ['feed_id'])


def downgrade() -> None:
    op.drop_index('ix_feed_follows_feed_id', table_name='feed_follows')
    op.drop_index('ix_feed_follows_user_id', table_name='feed_follows')
    op.drop_table('feed_follows')

    op.drop_index('ix_feeds_user_id', table_name='feeds')
    op.drop_table('feeds')

    op.drop_index('ix_users_api_key', table_name='users')
    op.drop_table('users')
