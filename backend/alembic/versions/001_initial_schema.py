"""Initial schema: parties, relations, users, hotel rooms

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-09-12

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Parties table
    op.create_table(
        'parties',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(255), nullable=False),
        sa.Column('max_person_count', sa.Integer()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code', name='uq_parties_code'),
    )
    op.create_index('ix_parties_id', 'parties', ['id'])

    # Relations table (lookup)
    relations = op.create_table(
        'relations',
        sa.Column('key', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint('key')
    )
    op.bulk_insert(relations, [
        {'key': 'bride', 'name': 'Braut'},
        {'key': 'family', 'name': 'Familie'},
        {'key': 'friend', 'name': 'Freund/in'},
        {'key': 'groom', 'name': 'Bräutigam'},
        {'key': 'groomsman', 'name': 'Trauzeuge'},
        {'key': 'plus-one', 'name': 'Begleitung'},
        {'key': 'witness', 'name': 'Trauzeugin'},
    ])

    # Users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255)),
        sa.Column('phone', sa.String(255)),
        sa.Column('accepted', sa.Boolean()),
        sa.Column('hashed_password', sa.String(255)),
        sa.Column('avatar_url', sa.String(1000)),
        sa.Column('scopes', sa.JSON()),
        sa.Column('visible_for_others', sa.Boolean(), default=False),
        sa.Column('party_id', sa.Integer(), nullable=False),
        sa.Column('relation_key', sa.String(255)),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['party_id'], ['parties.id'], onupdate='CASCADE', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['relation_key'], ['relations.key'], onupdate='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', 'party_id', name='uq_user_name_party'),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_party_id', 'users', ['party_id'])

    # Hotel rooms table
    op.create_table(
        'hotel_rooms',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('description', sa.String(1000)),
        sa.Column('price', sa.Numeric(10, 2)),
        sa.Column('max_person_count', sa.Integer()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_hotel_rooms_id', 'hotel_rooms', ['id'])

    # Party hotel rooms (many-to-many)
    op.create_table(
        'party_hotel_rooms',
        sa.Column('party_id', sa.Integer(), nullable=False),
        sa.Column('hotel_room_id', sa.Integer(), nullable=False),
        sa.Column('reserved_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['party_id'], ['parties.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['hotel_room_id'], ['hotel_rooms.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('party_id', 'hotel_room_id')
    )


def downgrade() -> None:
    op.drop_table('party_hotel_rooms')
    op.drop_index('ix_hotel_rooms_id', table_name='hotel_rooms')
    op.drop_table('hotel_rooms')
    op.drop_index('ix_users_party_id', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
    op.drop_table('relations')
    op.drop_index('ix_parties_id', table_name='parties')
    op.drop_table('parties')
