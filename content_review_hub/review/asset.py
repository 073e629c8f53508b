"""
Asset Schema.

An Asset is the reviewable unit: content metadata, a risk classification and
the three lens reviews it owns. ``status`` is derived from the lens statuses
and the risk level; workflow operations recompute it and nothing else should
assign it.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator, model_validator

from .enums import AssetStatus, AssetType, Channel, ReviewLens, RiskLevel
from .lens_review import LensReview, empty_lens_review
from .primitives import generate_ulid, utc_now

# Asset attribute holding each lens review
LENS_FIELDS: Dict[ReviewLens, str] = {
    ReviewLens.LEGAL_COMPLIANCE: "legal_review",
    ReviewLens.BRAND_ETHICS: "brand_review",
    ReviewLens.UX_SAFETY: "ux_review",
}

_TAG_SPLIT = re.compile(r"[\s,]+")


def _normalize_tags(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = _TAG_SPLIT.split(value)
    tags: List[str] = []
    for tag in value:
        tag = str(tag).strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class Asset(BaseModel):
    """A creative asset moving through the three review lenses."""

    model_config = ConfigDict(extra="forbid")

    # Object identity
    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_ulid, description="Unique identifier"
    )

    # Content metadata
    title: constr(min_length=1, max_length=512) = Field(..., description="Asset title")
    asset_type: AssetType = Field(default=AssetType.OTHER, description="Kind of asset")
    channel: Channel = Field(default=Channel.OTHER, description="Publication channel")
    link_or_path: Optional[str] = Field(None, description="URL or file path")
    description: Optional[str] = Field(None, description="What the asset is")

    # Attribution
    created_by: str = Field(..., description="Display name of the creator")
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation timestamp (UTC)"
    )

    # Workflow
    status: AssetStatus = Field(
        default=AssetStatus.DRAFT, description="Derived overall status"
    )
    tags: List[str] = Field(default_factory=list, description="Free-form tags")
    risk_level: RiskLevel = Field(default=RiskLevel.LOW, description="Risk classification")

    # Owned lens reviews
    legal_review: LensReview = Field(
        default_factory=lambda: empty_lens_review(ReviewLens.LEGAL_COMPLIANCE)
    )
    brand_review: LensReview = Field(
        default_factory=lambda: empty_lens_review(ReviewLens.BRAND_ETHICS)
    )
    ux_review: LensReview = Field(
        default_factory=lambda: empty_lens_review(ReviewLens.UX_SAFETY)
    )

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, value: Any) -> List[str]:
        return _normalize_tags(value)

    @model_validator(mode="after")
    def _lens_slots(self) -> "Asset":
        for lens, field in LENS_FIELDS.items():
            held = getattr(self, field).lens
            if held != lens:
                raise ValueError(f"{field} holds the {held.value} review, expected {lens.value}")
        return self

    def lens_review(self, lens: ReviewLens) -> LensReview:
        """Return the review owned for ``lens``."""
        return getattr(self, LENS_FIELDS[ReviewLens(lens)])

    def lens_reviews(self) -> List[LensReview]:
        """Return the three lens reviews in catalog order."""
        return [self.legal_review, self.brand_review, self.ux_review]


class AssetCreate(BaseModel):
    """Schema for the "add asset" action."""

    model_config = ConfigDict(extra="forbid")

    title: constr(strip_whitespace=True, min_length=1, max_length=512)
    asset_type: AssetType = AssetType.OTHER
    channel: Channel = Channel.OTHER
    description: Optional[str] = None
    link_or_path: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.LOW

    @field_validator("description", "link_or_path", mode="before")
    @classmethod
    def _strip_optional(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, value: Any) -> List[str]:
        return _normalize_tags(value)


def create_new_asset(
    data: AssetCreate,
    created_by: Optional[str] = None,
    asset_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Asset:
    """Build a draft asset with three empty lens reviews."""
    now = now or utc_now()
    return Asset(
        id=asset_id or generate_ulid(),
        title=data.title,
        asset_type=data.asset_type,
        channel=data.channel,
        link_or_path=data.link_or_path,
        description=data.description,
        created_by=created_by or "You",
        created_at=now,
        status=AssetStatus.DRAFT,
        tags=list(data.tags),
        risk_level=data.risk_level,
        legal_review=empty_lens_review(ReviewLens.LEGAL_COMPLIANCE, now=now),
        brand_review=empty_lens_review(ReviewLens.BRAND_ETHICS, now=now),
        ux_review=empty_lens_review(ReviewLens.UX_SAFETY, now=now),
    )
