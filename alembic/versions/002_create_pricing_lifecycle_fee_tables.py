"""Create pricing, lifecycle, limit and fee tables.

Revision ID: 002
Revises: 001
Create Date: 2026-10-20

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
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
    """Create pricing, lifecycle, limit and fee tables."""
    # Lifecycle and limits
    op.create_table(
        'product_lifecycle',
        sa.Column('product_lifecycle_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('lifecycle_status', sa.String(40), nullable=False),
        sa.Column('status_start_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status_end_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('reason', sa.Text(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'product_limit',
        sa.Column('product_limit_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('limit_type', sa.String(40), nullable=False),
        sa.Column('limit_value', sa.Numeric(18, 4), nullable=False),
        sa.Column('limit_unit', sa.String(20), nullable=True),
        sa.Column('time_period', sa.String(40), nullable=True),
        sa.Column('effective_date', sa.Date(), nullable=True),
        sa.Column('expiry_date', sa.Date(), nullable=True),
        *_audit_columns(),
    )

    # Pricing
    op.create_table(
        'product_pricing',
        sa.Column('product_pricing_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('pricing_type', sa.String(40), nullable=False),
        sa.Column('amount_value', sa.Numeric(18, 4), nullable=True),
        sa.Column('amount_unit', sa.String(20), nullable=True),
        sa.Column('pricing_condition', sa.Text(), nullable=True),
        sa.Column('effective_date', sa.Date(), nullable=True),
        sa.Column('expiry_date', sa.Date(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'product_pricing_localization',
        sa.Column('product_pricing_localization_id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            'product_pricing_id', postgresql.UUID(as_uuid=True),
            sa.ForeignKey('product_pricing.product_pricing_id', ondelete='CASCADE'),
            nullable=False, index=True,
        ),
        sa.Column('currency_code', sa.String(3), nullable=False),
        sa.Column('localized_amount_value', sa.Numeric(18, 4), nullable=True),
        *_audit_columns(),
    )

    # Fees; fee structures themselves are defined outside the catalog
    op.create_table(
        'product_fee_structure',
        sa.Column('product_fee_structure_id', postgresql.UUID(as_uuid=True), primary_key=True),
        _product_fk(),
        sa.Column('fee_structure_id', postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column('priority', sa.Integer(), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'fee_component',
        sa.Column('fee_component_id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('fee_structure_id', postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column('component_name', sa.String(200), nullable=False),
        sa.Column('component_description', sa.Text(), nullable=True),
        sa.Column('amount_value', sa.Numeric(18, 4), nullable=True),
        sa.Column('amount_unit', sa.String(20), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        'fee_application_rule',
        sa.Column('fee_application_rule_id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            'fee_component_id', postgresql.UUID(as_uuid=True),
            sa.ForeignKey('fee_component.fee_component_id', ondelete='CASCADE'),
            nullable=False, index=True,
        ),
        sa.Column('rule_description', sa.Text(), nullable=True),
        sa.Column('rule_condition', sa.Text(), nullable=False),
        sa.Column('priority', sa.Integer(), nullable=True),
        sa.Column('effective_date', sa.Date(), nullable=True),
        sa.Column('expiry_date', sa.Date(), nullable=True),
        *_audit_columns(),
    )


def downgrade() -> None:
    """Drop pricing, lifecycle, limit and fee tables."""
    op.drop_table('fee_application_rule')
    op.drop_table('fee_component')
    op.drop_table('product_fee_structure')
    op.drop_table('product_pricing_localization')
    op.drop_table('product_pricing')
    op.drop_table('product_limit')
    op.drop_table('product_lifecycle')
