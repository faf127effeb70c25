"""initial schema

Revision ID: c3d4e5f6a7b8
Revises:
Create Date: 2026-10-19

Tables:
  hajj_packages, umrah_packages, domestic_packages
      title, price, category + image columns
      umrah/domestic hold at most one row per category (enforced by the record manager)
  custom_pilgrimages, why_choose_us_items, testimonials
      dashboard content with image columns
  users, trips, bookings
      traveler bookings; bookings RESTRICT deletes of their user/trip

Image columns on every dashboard table:
  image_url: Cloudinary secure_url
  public_id: Cloudinary handle, only used to destroy the object
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = 'c3d4e5f6a7b8'
down_revision = None
branch_labels = None
depends_on = None

PACKAGE_TABLES = ('hajj_packages', 'umrah_packages', 'domestic_packages')


def _media_columns() -> list:
    """Columns shared by every dashboard table."""
    return [
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('public_id', sa.String(255), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default='true', nullable=False),
        sa.Column(
            'created_at',
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    for table in PACKAGE_TABLES:
        op.create_table(
            table,
            *_media_columns(),
            sa.Column('title', sa.String(255), nullable=False),
            sa.Column('price', sa.Numeric(12, 2), nullable=False),
            sa.Column('category', sa.String(20), nullable=False),
        )
        op.create_index(f'ix_{table}_category', table, ['category'])
        op.create_index(f'ix_{table}_created_at', table, ['created_at'])

    op.create_table(
        'custom_pilgrimages',
        *_media_columns(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('subtitle1', sa.String(255), nullable=True),
        sa.Column('subtitle2', sa.String(255), nullable=True),
        sa.Column('subtitle3', sa.String(255), nullable=True),
        sa.Column('subtitle4', sa.String(255), nullable=True),
    )
    op.create_index('ix_custom_pilgrimages_created_at', 'custom_pilgrimages', ['created_at'])

    op.create_table(
        'why_choose_us_items',
        *_media_columns(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
    )
    op.create_index('ix_why_choose_us_items_created_at', 'why_choose_us_items', ['created_at'])

    op.create_table(
        'testimonials',
        *_media_columns(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('rating', sa.Float(), nullable=False),
    )
    op.create_index('ix_testimonials_created_at', 'testimonials', ['created_at'])

    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'trips',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('destination', sa.String(255), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('start_date', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column('end_date', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=False),
    )

    op.create_table(
        'bookings',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column(
            'user_id', postgresql.UUID(as_uuid=True),
            sa.ForeignKey('users.id', ondelete='RESTRICT'), nullable=False,
        ),
        sa.Column(
            'trip_id', postgresql.UUID(as_uuid=True),
            sa.ForeignKey('trips.id', ondelete='RESTRICT'), nullable=False,
        ),
        sa.Column('status', sa.String(20), server_default='pending', nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('now()'), nullable=False),
    )
    op.create_index('ix_bookings_user_id', 'bookings', ['user_id'])
    op.create_index('ix_bookings_trip_id', 'bookings', ['trip_id'])


def downgrade() -> None:
    op.drop_table('bookings')
    op.drop_table('trips')
    op.drop_table('users')
    op.drop_table('testimonials')
    op.drop_table('why_choose_us_items')
    op.drop_table('custom_pilgrimages')
    for table in reversed(PACKAGE_TABLES):
        op.drop_table(table)
