"""
Content Review Canonical Enums.

These enums define the allowed values for asset and lens fields.
Stored rows and API payloads use the string values.
"""

from enum import Enum


class ReviewLens(str, Enum):
    """Independent review dimensions applied to every asset."""

    LEGAL_COMPLIANCE = "legal_compliance"
    BRAND_ETHICS = "brand_ethics"
    UX_SAFETY = "ux_safety"


class LensStatus(str, Enum):
    """Status of a single lens review."""

    NOT_STARTED = "not_started"
    IN_REVIEW = "in_review"
    CHANGES_REQUESTED = "changes_requested"
    APPROVED = "approved"


class AssetStatus(str, Enum):
    """Overall asset status. Always derived from the lens statuses."""

    DRAFT = "draft"
    IN_REVIEW = "in_review"
    APPROVED = "approved"
    BLOCKED = "blocked"
    ARCHIVED = "archived"


class AssetType(str, Enum):
    """Kinds of creative assets."""

    TIKTOK_SCRIPT = "tiktok_script"
    IG_STATIC = "ig_static"
    DECK_SLIDE = "deck_slide"
    LANDING_PAGE = "landing_page"
    EMAIL = "email"
    OTHER = "other"


class Channel(str, Enum):
    """Where an asset gets published."""

    TIKTOK = "tiktok"
    INSTAGRAM = "instagram"
    SITE = "site"
    DECK = "deck"
    EMAIL = "email"
    PAID_ADS = "paid_ads"
    OTHER = "other"


class RiskLevel(str, Enum):
    """Risk classification. High risk turns a lens objection into a block."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AuditAction(str, Enum):
    """Actions recorded in the audit log."""

    CREATED = "created"
    UPDATED = "updated"
    STATUS_CHANGED = "status_changed"
    COMMENTED = "commented"
