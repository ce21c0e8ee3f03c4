"""Create product catalog tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column('date_created', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('date_updated', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    ]


def _product_fk() -> sa.Column:
    return sa.Column(
        'product_id', postgresql.UUID(as_uuid=True),
        sa.ForeignKey('product.product_id', ondelete='CASCADE'), nullable=False, index=True,
    )


def upgrade() -> None:
    """Create catalog tables."""
    # Categories and subtypes
    op.create_table(
        'product_category',
        sa.Column('product_category_id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('category_name', sa.String(200), nullable=False),
        sa.Column('category_description', sa.Text(), nullable=True),
        sa.Column('parent_category_id', postgresql.UUID(as_uuid=True),
                  sa.ForeignKey('product_category.product_category_id', ondelete='SET NULL'),
                  nullable=True, index=True),
        sa.Column('level', sa.Integer(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'product_subtype',
        sa.Column('product_subtype_id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('product_category_id', postgresql.UUID(as_uuid=True),
                  sa.ForeignKey('product_category.product_category_id', ondelete='CASCADE'),
                  nullable=False, index=True),
        sa.Column('subtype_name', sa.String(200), nullable=False),
        sa.Column('subtype_description', sa.Text(), nullable=True),
        *_audit_columns(),
    )

    # Subtype names are unique across all categories
    op.create_unique_constraint(
        'uq_product_subtype_name',
        'product_subtype',
        ['subtype_name'],
    )

    # Products and bundles
    op.create_table(
        'product',
        sa.Column('product_id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('tenant_id', postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column('product_subtype_id', postgresql.UUID(as_uuid=True),
                  sa.ForeignKey('product_subtype.product_subtype_id', ondelete='SET NULL'),
                  nullable=True, index=True),
        sa.Column('product_type', sa.String(40), nullable=True),
        sa.Column('product_name', sa.String(300), nullable=False),
        sa.Column('product_code', sa.String(100), nullable=True),
        sa.Column('product_description', sa.Text(), nullable=True),
        sa.Column('product_status', sa.String(40), nullable=True),
        sa.Column('launch_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'product_bundle',
        sa.Column('product_bundle_id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('bundle_name', sa.String(200), nullable=False),
        sa.Column('bundle_description', sa.Text(), nullable=True),
        sa.Column('bundle_status', sa.String(40), nullable=True),
        *_audit_columns(),
    )

    # Product-owned tables
    op.create_table(
        'product_feature',
        sa.Column('product_feature_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('feature_name', sa.String(200), nullable=False),
        sa.Column('feature_description', sa.Text(), nullable=True),
        sa.Column('feature_type', sa.String(40), nullable=True),
        sa.Column('is_mandatory', sa.Boolean(), nullable=False, server_default='false'),
        *_audit_columns(),
    )

    op.create_table(
        'product_version',
        sa.Column('product_version_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('version_number', sa.Integer(), nullable=False),
        sa.Column('version_description', sa.Text(), nullable=True),
        sa.Column('effective_date', sa.DateTime(timezone=True), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'product_localization',
        sa.Column('product_localization_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('language_code', sa.String(20), nullable=False),
        sa.Column('localized_name', sa.String(300), nullable=True),
        sa.Column('localized_description', sa.Text(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'product_relationship',
        sa.Column('product_relationship_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('related_product_id', postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column('relationship_type', sa.String(40), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'product_configuration',
        sa.Column('product_configuration_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('config_type', sa.String(40), nullable=True, index=True),
        sa.Column('config_key', sa.String(200), nullable=False),
        sa.Column('config_value', sa.Text(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'product_documentation_requirement',
        sa.Column('product_doc_requirement_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('doc_type', sa.String(40), nullable=False),
        sa.Column('is_mandatory', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('description', sa.Text(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'product_documentation',
        sa.Column('product_documentation_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('doc_type', sa.String(40), nullable=False),
        sa.Column('document_manager_ref', sa.BigInteger(), nullable=True),
        sa.Column('date_added', sa.DateTime(timezone=True), nullable=True),
        *_audit_columns(),
    )


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_table('product_documentation')
    op.drop_table('product_documentation_requirement')
    op.drop_table('product_configuration')
    op.drop_table('product_relationship')
    op.drop_table('product_localization')
    op.drop_table('product_version')
    op.drop_table('product_feature')
    op.drop_table('product_bundle')
    op.drop_table('product')
    op.drop_table('product_subtype')
    op.drop_table('product_category')
