"""init
Revision ID: 0001_init
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa

from themekit.core.config import settings

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        settings.users_table,
        sa.Column("ID", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_login", sa.String(length=60), nullable=False),
        sa.Column("user_pass", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("user_nicename", sa.String(length=50), nullable=False, server_default=""),
        sa.Column("user_email", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("user_url", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("user_registered", sa.DateTime(), nullable=False),
        sa.Column("user_status", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("display_name", sa.String(length=250), nullable=False, server_default=""),
    )
    op.create_index(f"ix_{settings.users_table}_user_login", settings.users_table, ["user_login"])
    op.create_index(f"ix_{settings.users_table}_user_nicename", settings.users_table, ["user_nicename"])
    op.create_index(f"ix_{settings.users_table}_user_email", settings.users_table, ["user_email"])

    op.create_table(
        settings.usermeta_table,
        sa.Column("umeta_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey(f"{settings.users_table}.ID"), nullable=False),
        sa.Column("meta_key", sa.String(length=255), nullable=True),
        sa.Column("meta_value", sa.Text(), nullable=True),
    )
    op.create_index(f"ix_{settings.usermeta_table}_user_id", settings.usermeta_table, ["user_id"])
    op.create_index(f"ix_{settings.usermeta_table}_meta_key", settings.usermeta_table, ["meta_key"])

    op.create_table(
        "field_definitions",
        sa.Column("key", sa.String(length=80), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("name", sa.String(length=80), nullable=False),
        sa.Column("label", sa.String(length=200), nullable=False),
        sa.Column("type", sa.String(length=30), nullable=False),
        sa.Column("choices", sa.JSON(), nullable=True),
    )
    op.create_index("ix_field_definitions_name", "field_definitions", ["name"])

def downgrade():
    op.drop_index("ix_field_definitions_name", table_name="field_definitions")
    op.drop_table("field_definitions")
    op.drop_index(f"ix_{settings.usermeta_table}_meta_key", table_name=settings.usermeta_table)
    op.drop_index(f"ix_{settings.usermeta_table}_user_id", table_name=settings.usermeta_table)
    op.drop_table(settings.usermeta_table)
    op.drop_index(f"ix_{settings.users_table}_user_email", table_name=settings.users_table)
    op.drop_index(f"ix_{settings.users_table}_user_nicename", table_name=settings.users_table)
    op.drop_index(f"ix_{settings.users_table}_user_login", table_name=settings.users_table)
    op.drop_table(settings.users_table)
