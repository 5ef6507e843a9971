"""Create household, debts and transactions

Revision ID: 5b2e9c1d7a40
Revises:
Create Date: 2026-10-17 10:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel

# revision identifiers, used by Alembic.
revision: str = '5b2e9c1d7a40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        'household',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'debts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('household_id', sa.Uuid(), nullable=False),
        sa.Column('entity', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('balance', sa.Float(), nullable=False),
        sa.Column('monthly_payment', sa.Float(), nullable=False),
        sa.Column('interest_rate', sa.Float(), nullable=True),
        sa.Column('status', sa.Enum('activa', 'pagada', 'morosa', name='debtstatus'), nullable=False, server_default='activa'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['household_id'], ['household.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_debts_household_id'), 'debts', ['household_id'], unique=False)
    op.create_table(
        'transactions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('household_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('tipo', sa.Enum('ingreso', 'gasto', 'deuda', name='transactiontipo'), nullable=False),
        sa.Column('monto', sa.Float(), nullable=False),
        sa.Column('persona', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('metodo', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('nota', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['household_id'], ['household.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_transactions_household_id'), 'transactions', ['household_id'], unique=False)

def downgrade():
    op.drop_index(op.f('ix_transactions_household_id'), table_name='transactions')
    op.drop_table('transactions')
    op.drop_index(op.f('ix_debts_household_id'), table_name='debts')
    op.drop_table('debts')
    op.drop_table('household')
    op.execute('DROP TYPE IF EXISTS transactiontipo')
    op.execute('DROP TYPE IF EXISTS debtstatus')
