"""Alembic 마이그레이션: Product 테이블 추가"""
from alembic import op
import sqlalchemy as sa

revision = "0001_products"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """상품 테이블 생성"""
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('image', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('price_amount', sa.BigInteger(), nullable=False),
        sa.Column('price_scale', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('price_currency', sa.String(3), nullable=False, server_default='INR'),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('price_amount >= 0', name='ck_products_price_amount_non_negative'),
        sa.CheckConstraint('price_scale >= 0', name='ck_products_price_scale_non_negative'),
        sa.CheckConstraint("price_currency IN ('INR', 'USD')", name='ck_products_price_currency'),
    )

    op.create_index('ix_products_id', 'products', ['id'])


def downgrade():
    """테이블 삭제"""
    op.drop_index('ix_products_id', table_name='products')
    op.drop_table('products')
