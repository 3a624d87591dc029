"""flower colors

Revision ID: 8b2e4d6f1a93
Revises: 3f1c9a2b7d40
Create Date: 2026-10-19 15:40:02.551870

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '8b2e4d6f1a93'
down_revision: Union[str, Sequence[str], None] = '3f1c9a2b7d40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = 'flowershop'


def upgrade() -> None:
    op.create_table(
        'color',
        sa.Column('id', sa.UUID(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('hex_code', sa.String(length=7), nullable=False),
        sa.CheckConstraint("hex_code ~ '^#[0-9a-f]{6}$'", name=op.f('ck_color_color_hex_code_format')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_color')),
        sa.UniqueConstraint('name', name='uq_color_name'),
        schema=SCHEMA,
    )
    op.create_index('ix_color_name_lower', 'color', [sa.text('lower(name)')], unique=False, schema=SCHEMA)

    op.create_table(
        'flower_color',
        sa.Column('flower_id', sa.UUID(), nullable=False),
        sa.Column('color_id', sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(['flower_id'], [f'{SCHEMA}.flower.id'],
                                name=op.f('fk_flower_color_flower_id_flower'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['color_id'], [f'{SCHEMA}.color.id'],
                                name=op.f('fk_flower_color_color_id_color'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('flower_id', 'color_id', name=op.f('pk_flower_color')),
        schema=SCHEMA,
    )
    op.create_index('ix_flower_color_color_id', 'flower_color', ['color_id'], unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_table('flower_color', schema=SCHEMA)
    op.drop_table('color', schema=SCHEMA)
