"""add tours, services, knowledge and videos

Revision ID: d4e5f6a7b8c9
Revises: c3d4e5f6a7b8
Create Date: 2026-10-19

Tables:
  international_tours + tour_slider_images
      background image columns on the tour, slider gallery as child rows
  umrah_services + umrah_service_images
      hero image columns on the service, gallery as child rows
  knowledge_documents
      PDF stored as a Cloudinary raw resource (file_url, public_id)
  videos
      embed URL only, nothing uploaded

Gallery rows cascade with their parent.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = 'd4e5f6a7b8c9'
down_revision = 'c3d4e5f6a7b8'
branch_labels = None
depends_on = None

# (parent table, gallery table, foreign key column)
GALLERIES = (
    ('international_tours', 'tour_slider_images', 'tour_id'),
    ('umrah_services', 'umrah_service_images', 'service_id'),
)


def _record_columns() -> list:
    return [
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default='true', nullable=False),
        sa.Column(
            'created_at',
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    for parent, gallery, fk in GALLERIES:
        op.create_table(
            parent,
            *_record_columns(),
            sa.Column('image_url', sa.String(500), nullable=True),
            sa.Column('public_id', sa.String(255), nullable=True),
            sa.Column('title', sa.String(255), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
        )
        op.create_index(f'ix_{parent}_created_at', parent, ['created_at'])

        op.create_table(
            gallery,
            sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
            sa.Column(fk, postgresql.UUID(as_uuid=True), nullable=False),
            sa.Column('url', sa.String(500), nullable=False),
            sa.Column('public_id', sa.String(255), nullable=False),
            sa.Column('position', sa.Integer(), server_default='0', nullable=False),
            sa.ForeignKeyConstraint([fk], [f'{parent}.id'], ondelete='CASCADE'),
        )
        op.create_index(f'ix_{gallery}_{fk}', gallery, [fk])

    op.create_table(
        'knowledge_documents',
        *_record_columns(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('file_url', sa.String(500), nullable=True),
        sa.Column('public_id', sa.String(255), nullable=True),
    )
    op.create_index('ix_knowledge_documents_created_at', 'knowledge_documents', ['created_at'])

    op.create_table(
        'videos',
        *_record_columns(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('video_url', sa.String(500), nullable=False),
    )
    op.create_index('ix_videos_created_at', 'videos', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_videos_created_at', table_name='videos')
    op.drop_table('videos')
    op.drop_index('ix_knowledge_documents_created_at', table_name='knowledge_documents')
    op.drop_table('knowledge_documents')
    for parent, gallery, fk in reversed(GALLERIES):
        op.drop_index(f'ix_{gallery}_{fk}', table_name=gallery)
        op.drop_table(gallery)
        op.drop_index(f'ix_{parent}_created_at', table_name=parent)
        op.drop_table(parent)
