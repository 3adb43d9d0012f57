"""create partners and partner promo code limits tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:12:31.418223

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'partners',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('number_issued_promo_codes', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'partner_promo_code_limits',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('partner_id', sa.Uuid(), nullable=False),
        sa.Column('limit', sa.Integer(), nullable=False),
        sa.Column('create_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=True),
        sa.Column('cancel_date', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['partner_id'], ['partners.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(
        op.f('ix_partner_promo_code_limits_partner_id'),
        'partner_promo_code_limits',
        ['partner_id'],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f('ix_partner_promo_code_limits_partner_id'), table_name='partner_promo_code_limits')
    op.drop_table('partner_promo_code_limits')
    op.drop_table('partners')
    # ### end Alembic commands ###
