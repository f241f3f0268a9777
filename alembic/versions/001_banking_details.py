"""Banking details table

Revision ID: 001_banking_details
Revises:
Create Date: 2026-10-16

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = '001_banking_details'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # iban / full_name hold base64 AES-GCM envelopes: opaque, never indexed
    op.create_table('banking_details',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(255), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('iban', sa.Text(), nullable=False),
        sa.Column('full_name', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_banking_details_user_id', 'banking_details', ['user_id'])


def downgrade() -> None:
    op.drop_index('ix_banking_details_user_id', table_name='banking_details')
    op.drop_table('banking_details')
