"""
Content review domain.

Pure models and workflow for routing creative assets through the Legal &
Compliance, Brand & Ethics and UX/Safety review lenses. Storage, the HTTP
router and the session adapter live in ``services``, ``routes`` and ``hub``
and are imported from there directly.

Usage:
    from content_review_hub.review import (
        AssetCreate, LensStatus, ReviewLens, create_new_asset, set_lens_status,
    )

    asset = create_new_asset(AssetCreate(title="Launch script"))
    asset = set_lens_status(asset, ReviewLens.LEGAL_COMPLIANCE, LensStatus.IN_REVIEW)
    assert asset.status == "in_review"
"""

from .asset import LENS_FIELDS, Asset, AssetCreate, create_new_asset
from .checklist import (
    LENS_CHECKLISTS,
    ChecklistItem,
    get_checklist,
    get_item,
    required_items,
)
from .comment import Comment, CommentCreate
from .derivation import derive_asset_status, derive_status
from .enums import (
    AssetStatus,
    AssetType,
    AuditAction,
    Channel,
    LensStatus,
    ReviewLens,
    RiskLevel,
)
from .filters import AssetFilter, filter_assets, last_lens_update, sort_by_recent_update
from .identity import Identity
from .lens_review import ChecklistResponse, LensReview, empty_lens_review
from .primitives import generate_ulid, utc_now
from .seed import get_seed_assets
from .workflow import (
    add_comment,
    set_checklist_response,
    set_lens_status,
    set_overall_notes,
)

__all__ = [
    # Enums
    "AssetStatus",
    "AssetType",
    "AuditAction",
    "Channel",
    "LensStatus",
    "ReviewLens",
    "RiskLevel",
    # Catalog
    "LENS_CHECKLISTS",
    "ChecklistItem",
    "get_checklist",
    "get_item",
    "required_items",
    # Models
    "Asset",
    "AssetCreate",
    "ChecklistResponse",
    "Comment",
    "CommentCreate",
    "Identity",
    "LensReview",
    "LENS_FIELDS",
    "create_new_asset",
    "empty_lens_review",
    # Derivation and workflow
    "derive_asset_status",
    "derive_status",
    "add_comment",
    "set_checklist_response",
    "set_lens_status",
    "set_overall_notes",
    # Filtering
    "AssetFilter",
    "filter_assets",
    "last_lens_update",
    "sort_by_recent_update",
    # Seed
    "get_seed_assets",
    # Primitives
    "generate_ulid",
    "utc_now",
]
