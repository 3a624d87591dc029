"""initial catalog

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-10-19 09:12:44.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = 'flowershop'


def _service_columns():
    return [
        sa.Column('id', sa.UUID(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
    ]


def _media_table(name: str, owner: str) -> None:
    op.create_table(
        name,
        *_service_columns(),
        sa.Column('media_type', sa.String(length=16), server_default=sa.text("'image'"), nullable=False),
        sa.Column('file_path', sa.Text(), nullable=True),
        sa.Column('file_url', sa.Text(), nullable=True),
        sa.Column('file_name', sa.Text(), nullable=True),
        sa.Column('file_size', sa.BigInteger(), server_default=sa.text('0'), nullable=False),
        sa.Column('content_type', sa.String(length=128), nullable=True),
        sa.Column('display_order', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('is_thumbnail', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column(f'{owner}_id', sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint([f'{owner}_id'], [f'{SCHEMA}.{owner}.id'],
                                name=op.f(f'fk_{name}_{owner}_id_{owner}'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f(f'pk_{name}')),
        schema=SCHEMA,
    )
    op.create_index(f'ix_{name}_{owner}_id', name, [f'{owner}_id'], unique=False, schema=SCHEMA)


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto;")
    op.execute(f'CREATE SCHEMA IF NOT EXISTS "{SCHEMA}";')

    op.create_table(
        'category',
        *_service_columns(),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_category')),
        sa.UniqueConstraint('name', name='uq_category_name'),
        schema=SCHEMA,
    )

    op.create_table(
        'tag',
        *_service_columns(),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_tag')),
        sa.UniqueConstraint('name', name='uq_tag_name'),
        schema=SCHEMA,
    )
    op.create_index('ix_tag_name_lower', 'tag', [sa.text('lower(name)')], unique=False, schema=SCHEMA)

    op.create_table(
        'flower',
        *_service_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('scientific_name', sa.String(length=255), nullable=True),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('in_stock', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('low_stock_threshold', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('is_available', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('category_id', sa.UUID(), nullable=True),
        sa.CheckConstraint('price >= 0', name=op.f('ck_flower_flower_price_nonneg')),
        sa.CheckConstraint('in_stock >= 0', name=op.f('ck_flower_flower_stock_nonneg')),
        sa.ForeignKeyConstraint(['category_id'], [f'{SCHEMA}.category.id'],
                                name=op.f('fk_flower_category_id_category'), ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_flower')),
        schema=SCHEMA,
    )
    op.create_index('ix_flower_category_id', 'flower', ['category_id'], unique=False, schema=SCHEMA)
    op.create_index('ix_flower_name_lower', 'flower', [sa.text('lower(name)')], unique=False, schema=SCHEMA)

    op.create_table(
        'bouquet',
        *_service_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('discount_price', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('featured', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('in_stock', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('category_id', sa.UUID(), nullable=True),
        sa.CheckConstraint('price >= 0', name=op.f('ck_bouquet_bouquet_price_nonneg')),
        sa.ForeignKeyConstraint(['category_id'], [f'{SCHEMA}.category.id'],
                                name=op.f('fk_bouquet_category_id_category'), ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_bouquet')),
        schema=SCHEMA,
    )
    op.create_index('ix_bouquet_category_id', 'bouquet', ['category_id'], unique=False, schema=SCHEMA)
    op.create_index('ix_bouquet_featured', 'bouquet', ['featured'], unique=False, schema=SCHEMA)

    op.create_table(
        'bouquet_flower',
        *_service_columns(),
        sa.Column('bouquet_id', sa.UUID(), nullable=False),
        sa.Column('flower_id', sa.UUID(), nullable=False),
        sa.Column('quantity', sa.Integer(), server_default=sa.text('1'), nullable=False),
        sa.Column('position', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.CheckConstraint('quantity >= 1', name=op.f('ck_bouquet_flower_bouquet_flower_quantity_pos')),
        sa.ForeignKeyConstraint(['bouquet_id'], [f'{SCHEMA}.bouquet.id'],
                                name=op.f('fk_bouquet_flower_bouquet_id_bouquet'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['flower_id'], [f'{SCHEMA}.flower.id'],
                                name=op.f('fk_bouquet_flower_flower_id_flower'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_bouquet_flower')),
        sa.UniqueConstraint('bouquet_id', 'flower_id', name='uq_bouquet_flower_pair'),
        schema=SCHEMA,
    )
    op.create_index('ix_bouquet_flower_bouquet_id', 'bouquet_flower', ['bouquet_id'], unique=False, schema=SCHEMA)
    op.create_index('ix_bouquet_flower_flower_id', 'bouquet_flower', ['flower_id'], unique=False, schema=SCHEMA)

    for owner in ('bouquet', 'flower'):
        link = f'{owner}_tag'
        op.create_table(
            link,
            sa.Column(f'{owner}_id', sa.UUID(), nullable=False),
            sa.Column('tag_id', sa.UUID(), nullable=False),
            sa.ForeignKeyConstraint([f'{owner}_id'], [f'{SCHEMA}.{owner}.id'],
                                    name=op.f(f'fk_{link}_{owner}_id_{owner}'), ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['tag_id'], [f'{SCHEMA}.tag.id'],
                                    name=op.f(f'fk_{link}_tag_id_tag'), ondelete='CASCADE'),
            sa.PrimaryKeyConstraint(f'{owner}_id', 'tag_id', name=op.f(f'pk_{link}')),
            schema=SCHEMA,
        )
        op.create_index(f'ix_{link}_tag_id', link, ['tag_id'], unique=False, schema=SCHEMA)

    _media_table('flower_media', 'flower')
    _media_table('bouquet_media', 'bouquet')
    _media_table('category_media', 'category')


def downgrade() -> None:
    for name in (
        'category_media', 'bouquet_media', 'flower_media',
        'flower_tag', 'bouquet_tag', 'bouquet_flower',
        'bouquet', 'flower', 'tag', 'category',
    ):
        op.drop_table(name, schema=SCHEMA)
