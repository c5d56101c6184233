"""users, editor_configs, editor_content

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("uuid", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "editor_configs",
        sa.Column("uuid", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.uuid", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("config_data", sa.JSON(), nullable=False),
        sa.Column("embed_code", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_editor_configs_user_id", "editor_configs", ["user_id"])

    op.create_table(
        "editor_content",
        sa.Column("uuid", sa.Uuid(), primary_key=True),
        sa.Column("config_id", sa.Uuid(), sa.ForeignKey("editor_configs.uuid", ondelete="CASCADE"), nullable=False),
        sa.Column("content_data", sa.JSON(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("config_id", "version", name="uq_editor_content_config_version"),
    )
    op.create_index("ix_editor_content_config_id", "editor_content", ["config_id"])


def downgrade():
    op.drop_index("ix_editor_content_config_id", table_name="editor_content")
    op.drop_table("editor_content")
    op.drop_index("ix_editor_configs_user_id", table_name="editor_configs")
    op.drop_table("editor_configs")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
