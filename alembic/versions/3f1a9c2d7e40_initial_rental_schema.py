"""Initial rental schema: tenant_profiles, owner_preferences, properties

Revision ID: 3f1a9c2d7e40
Revises:
Create Date: 2025-06-02 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1a9c2d7e40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_NOW = sa.text('(CURRENT_TIMESTAMP)')


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('tenant_profiles',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('first_name', sa.Text(), nullable=False),
        sa.Column('last_name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('phone', sa.Text(), nullable=True),
        sa.Column('date_of_birth', sa.Text(), nullable=True),
        sa.Column('profession', sa.Text(), nullable=True),
        sa.Column('employment_type', sa.Text(), nullable=True),
        sa.Column('company_name', sa.Text(), nullable=True),
        sa.Column('monthly_income', sa.Float(), nullable=True),
        sa.Column('income_interview', sa.Text(), nullable=True),
        sa.Column('income_documents', sa.Text(), nullable=True),
        sa.Column('guarantor_type', sa.Text(), nullable=True),
        sa.Column('guarantor_income', sa.Float(), nullable=True),
        sa.Column('smoking_status', sa.Text(), nullable=True),
        sa.Column('pets', sa.JSON(), nullable=True),
        sa.Column('lifestyle_description', sa.Text(), nullable=True),
        sa.Column('guest_frequency', sa.Text(), nullable=True),
        sa.Column('noise_tolerance', sa.Text(), nullable=True),
        sa.Column('languages', sa.JSON(), nullable=True),
        sa.Column('reason_for_moving', sa.Text(), nullable=True),
        sa.Column('previous_rental_document', sa.Boolean(), nullable=True),
        sa.Column('previous_rental_paying', sa.Boolean(), nullable=True),
        sa.Column('application_status', sa.Text(), nullable=True),
        sa.Column('application_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('interview_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('interview_notes', sa.Text(), nullable=True),
        sa.Column('interview_responses', sa.JSON(), nullable=True),
        sa.Column('communication_preference', sa.Text(), nullable=True),
        sa.Column('scheduling_link_sent', sa.Boolean(), nullable=True),
        sa.Column('scheduling_link_sent_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('tenant_document_id_valid', sa.Boolean(), nullable=True),
        sa.Column('tenant_document_income_valid', sa.Boolean(), nullable=True),
        sa.Column('tenant_document_tax_valid', sa.Boolean(), nullable=True),
        sa.Column('tenant_document_receipt_valid', sa.Boolean(), nullable=True),
        sa.Column('score', sa.Integer(), nullable=True),
        sa.Column('pros', sa.Text(), nullable=True),
        sa.Column('cons', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=_NOW, nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=_NOW, nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('score IS NULL OR (score >= 0 AND score <= 100)', name='ck_tenant_score_range'),
    )

    op.create_table('owner_preferences',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.Text(), nullable=False),
        sa.Column('priorities', sa.JSON(), nullable=True),
        sa.Column('tenant_category', sa.Text(), nullable=True),
        sa.Column('student_field', sa.Text(), nullable=True),
        sa.Column('student_field_preference', sa.Text(), nullable=True),
        sa.Column('professional_sector', sa.Text(), nullable=True),
        sa.Column('professional_sector_preference', sa.Text(), nullable=True),
        sa.Column('min_financial_requirement', sa.Text(), nullable=True),
        sa.Column('financial_requirements', sa.JSON(), nullable=True),
        sa.Column('lease_type', sa.Text(), nullable=True),
        sa.Column('min_stay', sa.Text(), nullable=True),
        sa.Column('acceptances', sa.JSON(), nullable=True),
        sa.Column('lifestyle_matters', sa.JSON(), nullable=True),
        sa.Column('relationship_management', sa.Text(), nullable=True),
        sa.Column('dealbreakers', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=_NOW, nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=_NOW, nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('owner_id', name='uq_owner_preferences_owner_id'),
    )

    op.create_table('properties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('list_id', sa.Text(), nullable=True),
        sa.Column('first_publication_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('expiration_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('index_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', sa.Text(), nullable=True),
        sa.Column('category_id', sa.Text(), nullable=True),
        sa.Column('category_name', sa.Text(), nullable=True),
        sa.Column('subject', sa.Text(), nullable=True),
        sa.Column('body', sa.Text(), nullable=True),
        sa.Column('brand', sa.Text(), nullable=True),
        sa.Column('ad_type', sa.Text(), nullable=True),
        sa.Column('url', sa.Text(), nullable=True),
        sa.Column('price', sa.JSON(), nullable=True),
        sa.Column('price_cents', sa.JSON(), nullable=True),
        sa.Column('owner', sa.JSON(), nullable=True),
        sa.Column('options', sa.JSON(), nullable=True),
        sa.Column('has_phone', sa.Boolean(), nullable=True),
        sa.Column('attributes_listing', sa.JSON(), nullable=True),
        sa.Column('is_boosted', sa.Boolean(), nullable=True),
        sa.Column('similar_data', sa.JSON(), nullable=True),
        sa.Column('counters', sa.JSON(), nullable=True),
        sa.Column('attributes', sa.JSON(), nullable=True),
        sa.Column('country_id', sa.Text(), nullable=True),
        sa.Column('region_id', sa.Text(), nullable=True),
        sa.Column('region_name', sa.Text(), nullable=True),
        sa.Column('department_id', sa.Text(), nullable=True),
        sa.Column('city_label', sa.Text(), nullable=True),
        sa.Column('city', sa.Text(), nullable=True),
        sa.Column('zipcode', sa.Text(), nullable=True),
        sa.Column('lat', sa.Float(), nullable=True),
        sa.Column('lng', sa.Float(), nullable=True),
        sa.Column('source', sa.Text(), nullable=True),
        sa.Column('provider', sa.Text(), nullable=True),
        sa.Column('is_shape', sa.Boolean(), nullable=True),
        sa.Column('images', sa.JSON(), nullable=True),
        sa.Column('nb_images', sa.Integer(), nullable=True),
        sa.Column('thumb_image', sa.Text(), nullable=True),
        sa.Column('search_url', sa.Text(), nullable=True),
        sa.Column('transport', sa.JSON(), nullable=True),
        sa.Column('point_of_interests', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=_NOW, nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=_NOW, nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_properties_list_id', 'properties', ['list_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_properties_list_id', 'properties')
    op.drop_table('properties')
    op.drop_table('owner_preferences')
    op.drop_table('tenant_profiles')
