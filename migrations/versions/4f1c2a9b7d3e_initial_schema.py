"""initial schema

Revision ID: 4f1c2a9b7d3e
Revises:
Create Date: 2026-10-17 09:12:31.402117

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f1c2a9b7d3e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('provinces',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name_th', sa.String(length=100), nullable=False),
    sa.Column('name_en', sa.String(length=100), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_provinces_name_en'), 'provinces', ['name_en'], unique=False)

    op.create_table('tags',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name_th', sa.String(length=100), nullable=False),
    sa.Column('name_en', sa.String(length=100), nullable=False),
    sa.Column('slug', sa.String(length=120), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.Column('updated_at', sa.DateTime(), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_tags_slug'), 'tags', ['slug'], unique=True)

    op.create_table('classes',
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('name_th', sa.String(length=255), nullable=False),
    sa.Column('name_en', sa.String(length=255), nullable=False),
    sa.Column('description_th', sa.Text(), nullable=True),
    sa.Column('description_en', sa.Text(), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )

    op.create_table('admin_users',
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('email', sa.String(length=255), nullable=False),
    sa.Column('password_hash', sa.String(length=255), nullable=False),
    sa.Column('role', sa.String(length=20), nullable=False),
    sa.Column('is_active', sa.Boolean(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.Column('updated_at', sa.DateTime(), nullable=True),
    sa.CheckConstraint("role IN ('admin','staff')", name='ck_admin_users_role'),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_admin_users_email'), 'admin_users', ['email'], unique=True)
    op.create_index(op.f('ix_admin_users_role'), 'admin_users', ['role'], unique=False)
    op.create_index(op.f('ix_admin_users_is_active'), 'admin_users', ['is_active'], unique=False)

    op.create_table('gyms',
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('name_th', sa.String(length=255), nullable=False),
    sa.Column('name_en', sa.String(length=255), nullable=True),
    sa.Column('description_th', sa.Text(), nullable=True),
    sa.Column('description_en', sa.Text(), nullable=True),
    sa.Column('phone', sa.String(length=50), nullable=True),
    sa.Column('email', sa.String(length=255), nullable=True),
    sa.Column('line_id', sa.String(length=100), nullable=True),
    sa.Column('map_url', sa.Text(), nullable=True),
    sa.Column('youtube_url', sa.Text(), nullable=True),
    sa.Column('province_id', sa.Integer(), nullable=True),
    sa.Column('is_active', sa.Boolean(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.Column('updated_at', sa.DateTime(), nullable=True),
    sa.ForeignKeyConstraint(['province_id'], ['provinces.id'], ondelete='SET NULL'),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_gyms_province_id'), 'gyms', ['province_id'], unique=False)
    op.create_index(op.f('ix_gyms_is_active'), 'gyms', ['is_active'], unique=False)
    op.create_index(op.f('ix_gyms_created_at'), 'gyms', ['created_at'], unique=False)

    op.create_table('gym_images',
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('gym_id', sa.Uuid(), nullable=False),
    sa.Column('image_url', sa.Text(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.ForeignKeyConstraint(['gym_id'], ['gyms.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_gym_images_gym_id'), 'gym_images', ['gym_id'], unique=False)

    op.create_table('trainers',
    sa.Column('id', sa.Uuid(), nullable=False),
    sa.Column('first_name_th', sa.String(length=100), nullable=False),
    sa.Column('last_name_th', sa.String(length=100), nullable=True),
    sa.Column('first_name_en', sa.String(length=100), nullable=False),
    sa.Column('last_name_en', sa.String(length=100), nullable=True),
    sa.Column('bio_th', sa.Text(), nullable=True),
    sa.Column('bio_en', sa.Text(), nullable=True),
    sa.Column('phone', sa.String(length=50), nullable=True),
    sa.Column('email', sa.String(length=255), nullable=True),
    sa.Column('line_id', sa.String(length=100), nullable=True),
    sa.Column('is_freelance', sa.Boolean(), nullable=False),
    sa.Column('gym_id', sa.Uuid(), nullable=True),
    sa.Column('province_id', sa.Integer(), nullable=True),
    sa.Column('exp_year', sa.Integer(), nullable=True),
    sa.Column('is_active', sa.Boolean(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.Column('updated_at', sa.DateTime(), nullable=True),
    sa.CheckConstraint('NOT (is_freelance AND gym_id IS NOT NULL)', name='ck_trainers_freelance_without_gym'),
    sa.ForeignKeyConstraint(['gym_id'], ['gyms.id'], ondelete='SET NULL'),
    sa.ForeignKeyConstraint(['province_id'], ['provinces.id'], ondelete='SET NULL'),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_trainers_is_freelance'), 'trainers', ['is_freelance'], unique=False)
    op.create_index(op.f('ix_trainers_gym_id'), 'trainers', ['gym_id'], unique=False)
    op.create_index(op.f('ix_trainers_province_id'), 'trainers', ['province_id'], unique=False)
    op.create_index(op.f('ix_trainers_is_active'), 'trainers', ['is_active'], unique=False)
    op.create_index(op.f('ix_trainers_created_at'), 'trainers', ['created_at'], unique=False)

    op.create_table('gym_tags',
    sa.Column('gym_id', sa.Uuid(), nullable=False),
    sa.Column('tag_id', sa.Integer(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.ForeignKeyConstraint(['gym_id'], ['gyms.id'], ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['tag_id'], ['tags.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('gym_id', 'tag_id')
    )
    op.create_table('trainer_tags',
    sa.Column('trainer_id', sa.Uuid(), nullable=False),
    sa.Column('tag_id', sa.Integer(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.ForeignKeyConstraint(['tag_id'], ['tags.id'], ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('trainer_id', 'tag_id')
    )
    op.create_table('trainer_classes',
    sa.Column('trainer_id', sa.Uuid(), nullable=False),
    sa.Column('class_id', sa.Uuid(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.ForeignKeyConstraint(['class_id'], ['classes.id'], ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('trainer_id', 'class_id')
    )


def downgrade():
    op.drop_table('trainer_classes')
    op.drop_table('trainer_tags')
    op.drop_table('gym_tags')
    op.drop_table('trainers')
    op.drop_table('gym_images')
    op.drop_table('gyms')
    op.drop_table('admin_users')
    op.drop_table('classes')
    op.drop_table('tags')
    op.drop_table('provinces')
