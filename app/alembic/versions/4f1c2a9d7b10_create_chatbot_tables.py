"""create chatbots, users and conversations tables

Revision ID: 4f1c2a9d7b10
Revises:
Create Date: 2025-09-02 10:14:31.512204
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '4f1c2a9d7b10'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'chatbots',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('persona', sa.Text(), nullable=False),
        sa.Column('tarefa', sa.Text(), nullable=False),
        sa.Column('instrucoes', sa.Text(), nullable=False),
        sa.Column('saida', sa.Text(), nullable=False),
        sa.Column('mensagem_inicial', sa.Text(), nullable=True),
        sa.Column('tipo_documento', sa.Enum('documento', 'personalizado', name='tipos_documento'), nullable=False),
        sa.Column('icon', sa.String(100), nullable=True),
        sa.Column('status', sa.String(50), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.current_timestamp()),
    )
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('rank', sa.String(255), nullable=True),
        sa.Column('unit', sa.String(255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.TIMESTAMP(), server_default=sa.func.current_timestamp()),
    )
    op.create_table(
        'conversations',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('chatbot_id', sa.String(36), sa.ForeignKey('chatbots.id', ondelete='SET NULL'), nullable=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('messages', sa.JSON().with_variant(postgresql.JSONB(), 'postgresql'), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.TIMESTAMP(), server_default=sa.func.current_timestamp()),
    )
    op.create_index('ix_conversations_chatbot_id', 'conversations', ['chatbot_id'])
    op.create_index('ix_conversations_user_id', 'conversations', ['user_id'])

def downgrade():
    op.drop_index('ix_conversations_user_id', table_name='conversations')
    op.drop_index('ix_conversations_chatbot_id', table_name='conversations')
    op.drop_table('conversations')
    op.drop_table('users')
    op.drop_table('chatbots')
    sa.Enum(name='tipos_documento').drop(op.get_bind(), checkfirst=True)
