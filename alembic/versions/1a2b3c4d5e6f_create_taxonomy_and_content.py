"""create taxonomy and content tables

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2025-10-02 11:08:14.201337

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '1a2b3c4d5e6f'
down_revision = None
branch_labels = None
depends_on = None

difficulty = sa.Enum('EASY', 'MEDIUM', 'HARD', name='difficulty')

def _content_fks():
    return [
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('topic_id', sa.Integer(), sa.ForeignKey('topics.id', ondelete='SET NULL'), nullable=True),
        sa.Column('sub_topic_id', sa.Integer(), sa.ForeignKey('sub_topics.id', ondelete='SET NULL'), nullable=True),
    ]

def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False, server_default='USER'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'topics',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=160), nullable=False),
        sa.Column('slug', sa.String(length=80), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('icon', sa.String(length=32), nullable=False, server_default=''),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index('ix_topics_slug', 'topics', ['slug'], unique=True)

    op.create_table(
        'sub_topics',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('topic_id', sa.Integer(), sa.ForeignKey('topics.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=160), nullable=False),
        sa.Column('slug', sa.String(length=80), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('icon', sa.String(length=32), nullable=False, server_default=''),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.UniqueConstraint('topic_id', 'slug', name='uq_sub_topics_topic_id_slug'),
    )
    op.create_index('ix_sub_topics_topic_id', 'sub_topics', ['topic_id'])
    op.create_index('ix_sub_topics_slug', 'sub_topics', ['slug'])

    op.create_table(
        'blogs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        sa.Column('excerpt', sa.Text(), nullable=False, server_default=''),
        sa.Column('category', sa.String(length=80), nullable=False, server_default=''),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('read_time', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('cover_image', sa.String(length=512), nullable=True),
        sa.Column('published', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        *_content_fks(),
    )

    op.create_table(
        'notes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        sa.Column('category', sa.String(length=80), nullable=False, server_default=''),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        *_content_fks(),
    )

    op.create_table(
        'leetcode_problems',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('difficulty', difficulty, nullable=False, server_default='EASY'),
        sa.Column('category', sa.String(length=80), nullable=False, server_default=''),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('hints', sa.JSON(), nullable=True),
        sa.Column('companies', sa.JSON(), nullable=True),
        sa.Column('follow_up', sa.Text(), nullable=True),
        sa.Column('frequency', sa.Integer(), nullable=True),
        sa.Column('acceptance', sa.Float(), nullable=True),
        sa.Column('is_premium', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('leetcode_url', sa.String(length=512), nullable=True),
        sa.Column('problem_number', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        *_content_fks(),
    )

    for table in ('blogs', 'notes', 'leetcode_problems'):
        for col in ('author_id', 'topic_id', 'sub_topic_id', 'created_at'):
            op.create_index(f'ix_{table}_{col}', table, [col])

    op.create_table(
        'problem_solutions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('problem_id', sa.Integer(), sa.ForeignKey('leetcode_problems.id', ondelete='CASCADE'), nullable=False),
        sa.Column('language', sa.String(length=40), nullable=False),
        sa.Column('code', sa.Text(), nullable=False),
        sa.Column('explanation', sa.Text(), nullable=True),
        sa.Column('time_complexity', sa.String(length=40), nullable=True),
        sa.Column('space_complexity', sa.String(length=40), nullable=True),
        sa.Column('is_optimal', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_problem_solutions_problem_id', 'problem_solutions', ['problem_id'])

    op.create_table(
        'problem_resources',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('problem_id', sa.Integer(), sa.ForeignKey('leetcode_problems.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('url', sa.String(length=512), nullable=False),
        sa.Column('type', sa.String(length=40), nullable=False, server_default='ARTICLE'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_problem_resources_problem_id', 'problem_resources', ['problem_id'])

def downgrade():
    op.drop_table('problem_resources')
    op.drop_table('problem_solutions')
    op.drop_table('leetcode_problems')
    op.drop_table('notes')
    op.drop_table('blogs')
    op.drop_table('sub_topics')
    op.drop_table('topics')
    op.drop_table('users')
    difficulty.drop(op.get_bind(), checkfirst=True)
