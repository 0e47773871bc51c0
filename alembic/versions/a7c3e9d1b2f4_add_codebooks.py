"""add_codebooks

Revision ID: a7c3e9d1b2f4
Revises:
Create Date: 2026-10-19 10:00:00.000000

프로젝트, 코드북, 코드북 피처 테이블 생성.
코드북 삭제는 DB 캐스케이드 없이 서비스가 피처를 먼저 삭제.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a7c3e9d1b2f4'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # projects — 코드북 소속 프로젝트
    op.create_table(
        'projects',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # codebooks — 프로젝트 내 이름/순서 고유
    op.create_table(
        'codebooks',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('project_id', sa.Uuid(), sa.ForeignKey('projects.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('ui_name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('codebook_order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('project_id', 'name', name='uq_codebooks_project_name'),
        sa.UniqueConstraint('project_id', 'codebook_order', name='uq_codebooks_project_order'),
    )

    # codebook_features — 코드북 내 이름 고유, 코드북 FK는 캐스케이드 없음
    op.create_table(
        'codebook_features',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('codebook_id', sa.Uuid(), sa.ForeignKey('codebooks.id'), nullable=False),
        sa.Column('project_id', sa.Uuid(), sa.ForeignKey('projects.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('ui_name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.String(255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('codebook_id', 'name', name='uq_codebook_features_codebook_name'),
    )

    # 인덱스 — 프로젝트/코드북 기반 목록 조회 최적화
    op.create_index('ix_codebooks_project_id', 'codebooks', ['project_id'])
    op.create_index('ix_codebook_features_codebook_id', 'codebook_features', ['codebook_id'])
    op.create_index('ix_codebook_features_project_id', 'codebook_features', ['project_id'])


def downgrade() -> None:
    op.drop_index('ix_codebook_features_project_id', table_name='codebook_features')
    op.drop_index('ix_codebook_features_codebook_id', table_name='codebook_features')
    op.drop_index('ix_codebooks_project_id', table_name='codebooks')
    op.drop_table('codebook_features')
    op.drop_table('codebooks')
    op.drop_table('projects')
