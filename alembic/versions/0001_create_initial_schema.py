"""create initial schema: cities, users, comments, likes, resources, temp_data

Revision ID: 0001
Revises:
Create Date: 2026-10-19 12:00:00.000000+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    ]


def upgrade() -> None:
    # Create cities table
    op.create_table(
        'cities',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column('name', sa.String(length=100), nullable=False, comment='City name (natural key)'),
        sa.Column('country_code', sa.String(length=2), nullable=False, comment='ISO 3166-1 alpha-2 country code'),
        sa.Column('latitude', sa.Float(), nullable=False, comment='Latitude in degrees'),
        sa.Column('longitude', sa.Float(), nullable=False, comment='Longitude in degrees'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_cities_id'), 'cities', ['id'], unique=False)
    op.create_index(op.f('ix_cities_name'), 'cities', ['name'], unique=True)

    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('city_name', sa.String(length=100), nullable=True, comment='Home city'),
        sa.Column('is_admin', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.ForeignKeyConstraint(['city_name'], ['cities.name'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    # Create comments table
    op.create_table(
        'comments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column('comment_text', sa.Text(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False, comment='Author'),
        sa.Column('city_name', sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(['username'], ['users.username'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['city_name'], ['cities.name'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_comments_id'), 'comments', ['id'], unique=False)
    op.create_index(op.f('ix_comments_username'), 'comments', ['username'], unique=False)
    op.create_index(op.f('ix_comments_city_name'), 'comments', ['city_name'], unique=False)
    op.create_index('idx_comment_city_username', 'comments', ['city_name', 'username'], unique=False)

    # Create likes table
    op.create_table(
        'likes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column('comment_id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('from_username', sa.String(length=50), nullable=False),
        sa.ForeignKeyConstraint(['comment_id'], ['comments.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['username'], ['users.username'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['from_username'], ['users.username'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_likes_id'), 'likes', ['id'], unique=False)
    op.create_index(op.f('ix_likes_comment_id'), 'likes', ['comment_id'], unique=False)
    op.create_index(op.f('ix_likes_from_username'), 'likes', ['from_username'], unique=False)

    # Create resources table
    op.create_table(
        'resources',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column('content_title', sa.String(length=255), nullable=False),
        sa.Column('content_url', sa.Text(), nullable=False),
        sa.Column('content_type', sa.String(length=20), nullable=False),
        sa.Column('rating', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_resources_id'), 'resources', ['id'], unique=False)
    op.create_index(op.f('ix_resources_content_type'), 'resources', ['content_type'], unique=False)

    # Create temp_data table
    op.create_table(
        'temp_data',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column('city', sa.String(length=100), nullable=False, comment='City name'),
        sa.Column('curr_temp_cel', sa.Float(), nullable=False),
        sa.Column('curr_temp_far', sa.Float(), nullable=False),
        sa.Column('min_temp_cel', sa.Float(), nullable=False),
        sa.Column('max_temp_cel', sa.Float(), nullable=False),
        sa.Column('min_temp_far', sa.Float(), nullable=False),
        sa.Column('max_temp_far', sa.Float(), nullable=False),
        sa.Column('air_quality', sa.Integer(), nullable=True, comment='OpenWeather AQI (1-5)'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_temp_data_id'), 'temp_data', ['id'], unique=False)
    op.create_index(op.f('ix_temp_data_city'), 'temp_data', ['city'], unique=False)
    op.create_index('idx_temp_data_created_at', 'temp_data', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_temp_data_created_at', table_name='temp_data')
    op.drop_index(op.f('ix_temp_data_city'), table_name='temp_data')
    op.drop_index(op.f('ix_temp_data_id'), table_name='temp_data')
    op.drop_table('temp_data')

    op.drop_index(op.f('ix_resources_content_type'), table_name='resources')
    op.drop_index(op.f('ix_resources_id'), table_name='resources')
    op.drop_table('resources')

    op.drop_index(op.f('ix_likes_from_username'), table_name='likes')
    op.drop_index(op.f('ix_likes_comment_id'), table_name='likes')
    op.drop_index(op.f('ix_likes_id'), table_name='likes')
    op.drop_table('likes')

    op.drop_index('idx_comment_city_username', table_name='comments')
    op.drop_index(op.f('ix_comments_city_name'), table_name='comments')
    op.drop_index(op.f('ix_comments_username'), table_name='comments')
    op.drop_index(op.f('ix_comments_id'), table_name='comments')
    op.drop_table('comments')

    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')

    op.drop_index(op.f('ix_cities_name'), table_name='cities')
    op.drop_index(op.f('ix_cities_id'), table_name='cities')
    op.drop_table('cities')
