"""
Content Review SQLAlchemy Database Models.

Assets are stored one row per asset. The three lens reviews are embedded as
JSON columns (camelCase keys, matching the dashboard's row shape) rather than
normalized into their own tables. Comments live in a separate append-only
table keyed by asset id.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    String,
    Text,
)
from sqlalchemy.sql import func

from ..review.asset import Asset
from ..review.comment import Comment
from ..review.enums import AssetStatus, AssetType, Channel, RiskLevel
from ..review.lens_review import LensReview
from .base import Base

content_review_asset_status_enum = Enum(
    *[s.value for s in AssetStatus], name="content_review_asset_status"
)
content_review_asset_type_enum = Enum(
    *[t.value for t in AssetType], name="content_review_asset_type"
)
content_review_channel_enum = Enum(
    *[c.value for c in Channel], name="content_review_channel"
)
content_review_risk_level_enum = Enum(
    *[r.value for r in RiskLevel], name="content_review_risk_level"
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo on the way back; stored values are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ContentReviewAssetModel(Base):
    """SQLAlchemy model for content review assets."""

    __tablename__ = "content_review_assets"

    id = Column(String(128), primary_key=True)

    # Owning user (store is user-scoped)
    user_id = Column(String(128), nullable=False, index=True)

    # Content
    title = Column(String(512), nullable=False)
    asset_type = Column(content_review_asset_type_enum, nullable=False)
    channel = Column(content_review_channel_enum, nullable=False)
    link_or_path = Column(Text, nullable=True)
    description = Column(Text, nullable=True)

    # Attribution
    created_by = Column(String(256), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())

    # Workflow
    status = Column(content_review_asset_status_enum, nullable=False, index=True)
    tags = Column(JSON, nullable=False, default=list)
    risk_level = Column(content_review_risk_level_enum, nullable=False)

    # Embedded lens reviews
    legal_review = Column(JSON, nullable=False)
    brand_review = Column(JSON, nullable=False)
    ux_review = Column(JSON, nullable=False)

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (
        Index("ix_content_review_assets_user_updated", "user_id", "updated_at"),
    )


class ContentReviewCommentModel(Base):
    """SQLAlchemy model for asset comments."""

    __tablename__ = "content_review_comments"

    id = Column(String(128), primary_key=True)
    asset_id = Column(
        String(128), ForeignKey("content_review_assets.id"), nullable=False, index=True
    )
    user_id = Column(String(128), nullable=False, index=True)
    author = Column(String(256), nullable=True)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())

    __table_args__ = (
        Index("ix_content_review_comments_asset_created", "asset_id", "created_at"),
    )


def asset_to_row(asset: Asset, user_id: str) -> Dict[str, Any]:
    """Flatten an Asset into column values for ContentReviewAssetModel."""
    return {
        "id": asset.id,
        "user_id": user_id,
        "title": asset.title,
        "asset_type": asset.asset_type.value,
        "channel": asset.channel.value,
        "link_or_path": asset.link_or_path,
        "description": asset.description,
        "created_by": asset.created_by,
        "created_at": asset.created_at,
        "status": asset.status.value,
        "tags": list(asset.tags),
        "risk_level": asset.risk_level.value,
        "legal_review": asset.legal_review.to_json(),
        "brand_review": asset.brand_review.to_json(),
        "ux_review": asset.ux_review.to_json(),
    }


def row_to_asset(row: ContentReviewAssetModel) -> Asset:
    """Rebuild an Asset from a stored row."""
    return Asset(
        id=row.id,
        title=row.title,
        asset_type=row.asset_type,
        channel=row.channel,
        link_or_path=row.link_or_path,
        description=row.description,
        created_by=row.created_by,
        created_at=_as_utc(row.created_at),
        status=row.status,
        tags=row.tags or [],
        risk_level=row.risk_level,
        legal_review=LensReview.from_stored(row.legal_review),
        brand_review=LensReview.from_stored(row.brand_review),
        ux_review=LensReview.from_stored(row.ux_review),
    )


def comment_from_row(row: ContentReviewCommentModel) -> Comment:
    """Rebuild a Comment from a stored row."""
    return Comment(
        id=row.id,
        asset_id=row.asset_id,
        text=row.text,
        author=row.author,
        created_at=_as_utc(row.created_at),
    )
