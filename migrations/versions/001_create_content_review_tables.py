"""Create content review tables

Revision ID: 001_content_review
Revises:
Create Date: 2026-10-19

Assets with embedded lens reviews, append-only comments and the audit log.
"""
import sqlalchemy as sa
from alembic import op

# revision identifiers
revision = "001_content_review"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "content_review_assets",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False, index=True),
        sa.Column("title", sa.String(512), nullable=False),
        sa.Column(
            "asset_type",
            sa.Enum(
                "tiktok_script", "ig_static", "deck_slide", "landing_page", "email", "other",
                name="content_review_asset_type",
            ),
            nullable=False,
        ),
        sa.Column(
            "channel",
            sa.Enum(
                "tiktok", "instagram", "site", "deck", "email", "paid_ads", "other",
                name="content_review_channel",
            ),
            nullable=False,
        ),
        sa.Column("link_or_path", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("created_by", sa.String(256), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column(
            "status",
            sa.Enum(
                "draft", "in_review", "approved", "blocked", "archived",
                name="content_review_asset_status",
            ),
            nullable=False,
            index=True,
        ),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column(
            "risk_level",
            sa.Enum("low", "medium", "high", name="content_review_risk_level"),
            nullable=False,
        ),
        # Lens reviews embedded as JSON
        sa.Column("legal_review", sa.JSON, nullable=False),
        sa.Column("brand_review", sa.JSON, nullable=False),
        sa.Column("ux_review", sa.JSON, nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_content_review_assets_user_updated",
        "content_review_assets",
        ["user_id", "updated_at"],
    )

    op.create_table(
        "content_review_comments",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column(
            "asset_id",
            sa.String(128),
            sa.ForeignKey("content_review_assets.id"),
            nullable=False,
            index=True,
        ),
        sa.Column("user_id", sa.String(128), nullable=False, index=True),
        sa.Column("author", sa.String(256), nullable=True),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_content_review_comments_asset_created",
        "content_review_comments",
        ["asset_id", "created_at"],
    )

    op.create_table(
        "content_review_audit_log",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("ts", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now(), index=True),
        sa.Column("actor_id", sa.String(128), nullable=False, index=True),
        sa.Column(
            "action",
            sa.Enum(
                "created", "updated", "status_changed", "commented",
                name="content_review_audit_action",
            ),
            nullable=False,
        ),
        sa.Column("asset_id", sa.String(128), nullable=False),
        sa.Column("before", sa.JSON, nullable=True),
        sa.Column("after", sa.JSON, nullable=True),
        sa.Column("note", sa.Text, nullable=True),
    )
    op.create_index(
        "ix_content_review_audit_asset_ts",
        "content_review_audit_log",
        ["asset_id", "ts"],
    )


def downgrade() -> None:
    op.drop_table("content_review_audit_log")
    op.drop_table("content_review_comments")
    op.drop_table("content_review_assets")

    bind = op.get_bind()
    for name in (
        "content_review_audit_action",
        "content_review_risk_level",
        "content_review_asset_status",
        "content_review_channel",
        "content_review_asset_type",
    ):
        sa.Enum(name=name).drop(bind, checkfirst=True)
