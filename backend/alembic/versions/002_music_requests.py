"""Add requested music catalog and per-user request tables

Revision ID: 002_music_requests
Revises: 001_initial_schema
Create Date: 2026-09-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = '002_music_requests'
down_revision: Union[str, None] = '001_initial_schema'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Catalog entries are unique by url within their type
    op.create_table(
        'requested_artists',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('url', sa.String(1000), nullable=False),
        sa.Column('image_url', sa.String(1000)),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('url', name='uq_requested_artists_url'),
    )
    op.create_index('ix_requested_artists_id', 'requested_artists', ['id'])

    op.create_table(
        'requested_albums',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('url', sa.String(1000), nullable=False),
        sa.Column('image_url', sa.String(1000)),
        sa.Column('artist_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['artist_id'], ['requested_artists.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('url', name='uq_requested_albums_url'),
    )
    op.create_index('ix_requested_albums_id', 'requested_albums', ['id'])
    op.create_index('ix_requested_albums_artist_id', 'requested_albums', ['artist_id'])

    op.create_table(
        'requested_songs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('url', sa.String(1000), nullable=False),
        sa.Column('artist_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['artist_id'], ['requested_artists.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('url', name='uq_requested_songs_url'),
    )
    op.create_index('ix_requested_songs_id', 'requested_songs', ['id'])
    op.create_index('ix_requested_songs_artist_id', 'requested_songs', ['artist_id'])

    # Per-user requests; the composite primary key rejects duplicate pairs
    for table, target, target_table in (
        ('user_requested_artists', 'artist_id', 'requested_artists'),
        ('user_requested_albums', 'album_id', 'requested_albums'),
        ('user_requested_songs', 'song_id', 'requested_songs'),
    ):
        op.create_table(
            table,
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column(target, sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint([target], [f'{target_table}.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('user_id', target)
        )
        op.create_index(f'ix_{table}_{target}', table, [target])


def downgrade() -> None:
    for table, target in (
        ('user_requested_songs', 'song_id'),
        ('user_requested_albums', 'album_id'),
        ('user_requested_artists', 'artist_id'),
    ):
        op.drop_index(f'ix_{table}_{target}', table_name=table)
        op.drop_table(table)

    op.drop_index('ix_requested_songs_artist_id', table_name='requested_songs')
    op.drop_index('ix_requested_songs_id', table_name='requested_songs')
    op.drop_table('requested_songs')
    op.drop_index('ix_requested_albums_artist_id', table_name='requested_albums')
    op.drop_index('ix_requested_albums_id', table_name='requested_albums')
    op.drop_table('requested_albums')
    op.drop_index('ix_requested_artists_id', table_name='requested_artists')
    op.drop_table('requested_artists')
