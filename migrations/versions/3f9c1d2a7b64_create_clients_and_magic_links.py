"""Create client and magic link tables

Revision ID: 3f9c1d2a7b64
Revises: 
Create Date: 2026-10-19 09:12:41.508213

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9c1d2a7b64'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('client',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('company_name', sa.String(255), nullable=False),
        sa.Column('industry', sa.String(100), nullable=True),
        sa.Column('website_url', sa.String(500), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('address', sa.String(500), nullable=True),
        sa.Column('google_maps_url', sa.String(500), nullable=True),
        sa.Column('gbp_location_id', sa.String(100), nullable=True),
        sa.Column('gbp_connected', sa.Boolean(), nullable=True),
        sa.Column('social_links', sa.JSON(), nullable=True),
        sa.Column('operational_contact', sa.JSON(), nullable=True),
        sa.Column('location_type', sa.String(20), nullable=True),
        sa.Column('service_area', sa.Text(), nullable=True),
        sa.Column('operating_hours', sa.JSON(), nullable=True),
        sa.Column('seasonality', sa.Text(), nullable=True),
        sa.Column('logo_url', sa.String(500), nullable=True),
        sa.Column('brand_colors', sa.JSON(), nullable=True),
        sa.Column('authority_signals', sa.JSON(), nullable=True),
        sa.Column('media_gallery', sa.JSON(), nullable=True),
        sa.Column('strategy_profile', sa.JSON(), nullable=True),
        sa.Column('buyer_persona', sa.JSON(), nullable=True),
        sa.Column('tone_of_voice', sa.JSON(), nullable=True),
        sa.Column('review_signature', sa.Text(), nullable=True),
        sa.Column('competitors', sa.JSON(), nullable=True),
        sa.Column('review_incentives', sa.Text(), nullable=True),
        sa.Column('subscription_start_date', sa.Date(), nullable=True),
        sa.Column('subscription_status', sa.String(20), nullable=True),
        sa.Column('monthly_report_day', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('onboarding_status', sa.String(20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('magic_link',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('token', sa.String(36), nullable=False),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('prefilled_data', sa.JSON(), nullable=True),
        sa.Column('used', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('used_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['client_id'], ['client.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_magic_link_token'), 'magic_link', ['token'], unique=True)
    op.create_index(op.f('ix_magic_link_client_id'), 'magic_link', ['client_id'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_magic_link_client_id'), table_name='magic_link')
    op.drop_index(op.f('ix_magic_link_token'), table_name='magic_link')

    op.drop_table('magic_link')
    op.drop_table('client')
