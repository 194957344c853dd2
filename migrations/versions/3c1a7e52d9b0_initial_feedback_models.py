"""initial feedback models

Revision ID: 3c1a7e52d9b0
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1a7e52d9b0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('username', sa.String(length=100), nullable=False, unique=True),
            sa.Column('role', sa.String(length=20), nullable=False, server_default='student'),
            sa.Column('attendance_percentage', sa.Float(), nullable=False, server_default='0'),
            sa.Column('created_at', sa.DateTime(), nullable=True),
        )

    if not insp.has_table('feedbacks'):
        op.create_table(
            'feedbacks',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('text', sa.String(length=1000), nullable=False),
            sa.Column('category', sa.String(length=20), nullable=False),
            sa.Column('sentiment_score', sa.Integer(), nullable=False),
            sa.Column('sentiment_label', sa.String(length=10), nullable=False),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
            sa.Column('username', sa.String(length=100), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        )
        op.create_index('ix_feedbacks_category_label', 'feedbacks', ['category', 'sentiment_label'])
        op.create_index('ix_feedbacks_created_at', 'feedbacks', ['created_at'])
        op.create_index('ix_feedbacks_user_id', 'feedbacks', ['user_id'])


def downgrade():
    op.drop_index('ix_feedbacks_user_id', table_name='feedbacks')
    op.drop_index('ix_feedbacks_created_at', table_name='feedbacks')
    op.drop_index('ix_feedbacks_category_label', table_name='feedbacks')
    op.drop_table('feedbacks')
    op.drop_table('users')
