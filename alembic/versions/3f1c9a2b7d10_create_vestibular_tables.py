"""create_vestibular_tables

Creates the selection process, lead, offer and enrollment tables.

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-16 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the four tables."""

    op.create_table(
        'processos_seletivos',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False, index=True),
        sa.Column('nome', sa.String(), nullable=False),
        sa.Column('data_inicio', sa.DateTime(timezone=True), nullable=False),
        sa.Column('data_termino', sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        'leads',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False, index=True),
        sa.Column('nome', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('telefone', sa.String(), nullable=True),
        sa.Column('cpf', sa.String(), nullable=True, index=True),
    )

    op.create_table(
        'ofertas',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False, index=True),
        sa.Column('nome', sa.String(), nullable=False, index=True),
        sa.Column('descricao', sa.Text(), nullable=True),
        sa.Column('vagas_disponiveis', sa.Integer(), nullable=False, server_default='0'),
    )

    # Foreign keys without ON DELETE: removing a referenced row fails while enrollments exist
    op.create_table(
        'inscricoes',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False, index=True),
        sa.Column('numero_inscricao', sa.Integer(), nullable=False),
        sa.Column('data', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(), nullable=True),
        sa.Column('lead_id', sa.Integer(), sa.ForeignKey('leads.id'), nullable=False, index=True),
        sa.Column('processo_seletivo_id', sa.Integer(), sa.ForeignKey('processos_seletivos.id'), nullable=False, index=True),
        sa.Column('oferta_id', sa.Integer(), sa.ForeignKey('ofertas.id'), nullable=False, index=True),
    )


def downgrade() -> None:
    """Drop the four tables."""
    op.drop_table('inscricoes')
    op.drop_table('ofertas')
    op.drop_table('leads')
    op.drop_table('processos_seletivos')
