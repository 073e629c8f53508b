"""
Demonstration assets for first use.

When a user has no stored assets the hub persists this set so the list view
is never empty. Every seeded status agrees with ``derive_asset_status``.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from .asset import Asset
from .checklist import get_checklist
from .enums import AssetStatus, AssetType, Channel, LensStatus, ReviewLens, RiskLevel
from .lens_review import ChecklistResponse, approved_lens_review, empty_lens_review
from .primitives import generate_ulid, utc_now

SEED_AUTHOR = "Faith"


def get_seed_assets(now: Optional[datetime] = None) -> List[Asset]:
    """Build the six demonstration assets.

    None of them is archived: archived is never derived, so the first lens
    change on such an asset would drop it back to draft.
    """
    now = now or utc_now()
    two_days_ago = now - timedelta(days=2)
    last_week = now - timedelta(days=7)

    legal = ReviewLens.LEGAL_COMPLIANCE
    brand = ReviewLens.BRAND_ETHICS
    ux = ReviewLens.UX_SAFETY

    ux_in_review = empty_lens_review(ux, now=now).model_copy(
        update={
            "status": LensStatus.IN_REVIEW,
            "reviewer_name": "UX",
            "checklist_responses": [
                ChecklistResponse(item_id=item.id, passed=item.id in ("ux-1", "ux-2"))
                for item in get_checklist(ux)
            ],
        }
    )

    legal_changes_requested = empty_lens_review(legal, now=two_days_ago).model_copy(
        update={
            "status": LensStatus.CHANGES_REQUESTED,
            "reviewer_name": "Legal",
            "overall_notes": "Claims need citations.",
            "checklist_responses": [
                ChecklistResponse(item_id=item.id, passed=item.id != "legal-2")
                for item in get_checklist(legal)
            ],
        }
    )

    return [
        Asset(
            id=generate_ulid(),
            title="NovaMirror launch TikTok script",
            asset_type=AssetType.TIKTOK_SCRIPT,
            channel=Channel.TIKTOK,
            description="60s script for launch day TikTok. Focus on shade matching and personalization.",
            link_or_path="https://drive.google.com/script-doc-1",
            created_by=SEED_AUTHOR,
            created_at=last_week,
            status=AssetStatus.IN_REVIEW,
            tags=["launch", "tiktok", "nova"],
            risk_level=RiskLevel.MEDIUM,
            legal_review=approved_lens_review(legal, "Legal", two_days_ago),
            brand_review=approved_lens_review(brand, "Brand", two_days_ago),
            ux_review=ux_in_review,
        ),
        Asset(
            id=generate_ulid(),
            title="IG static: Foundation shade range",
            asset_type=AssetType.IG_STATIC,
            channel=Channel.INSTAGRAM,
            description="Carousel post showing 4.5M shades concept with NovaMirror device.",
            created_by=SEED_AUTHOR,
            created_at=two_days_ago,
            status=AssetStatus.APPROVED,
            tags=["instagram", "shade", "product"],
            risk_level=RiskLevel.LOW,
            legal_review=approved_lens_review(legal, "Legal", two_days_ago),
            brand_review=approved_lens_review(brand, "Brand", two_days_ago),
            ux_review=approved_lens_review(ux, "UX", last_week),
        ),
        Asset(
            id=generate_ulid(),
            title="Investor deck slide: Market size",
            asset_type=AssetType.DECK_SLIDE,
            channel=Channel.DECK,
            description="Slide with TAM/SAM/SOM and source citations.",
            link_or_path="https://figma.com/deck-slide-3",
            created_by=SEED_AUTHOR,
            created_at=two_days_ago,
            status=AssetStatus.DRAFT,
            tags=["investor", "deck", "market"],
            risk_level=RiskLevel.LOW,
            legal_review=empty_lens_review(legal, now=two_days_ago),
            brand_review=empty_lens_review(brand, now=two_days_ago),
            ux_review=empty_lens_review(ux, now=two_days_ago),
        ),
        Asset(
            id=generate_ulid(),
            title="Landing page: How NovaMirror works",
            asset_type=AssetType.LANDING_PAGE,
            channel=Channel.SITE,
            description="Consumer-facing explainer page for scan and shade matching.",
            link_or_path="https://chromarabeauty.com/how-it-works",
            created_by=SEED_AUTHOR,
            created_at=now,
            status=AssetStatus.IN_REVIEW,
            tags=["site", "explainer", "ux"],
            risk_level=RiskLevel.HIGH,
            legal_review=empty_lens_review(legal, now=now).model_copy(
                update={"status": LensStatus.IN_REVIEW}
            ),
            brand_review=empty_lens_review(brand, now=now),
            ux_review=empty_lens_review(ux, now=now).model_copy(
                update={"status": LensStatus.IN_REVIEW}
            ),
        ),
        Asset(
            id=generate_ulid(),
            title="Newsletter: Beta waitlist email",
            asset_type=AssetType.EMAIL,
            channel=Channel.EMAIL,
            description="Email copy for beta waitlist signup confirmation.",
            created_by=SEED_AUTHOR,
            created_at=last_week,
            status=AssetStatus.APPROVED,
            tags=["email", "beta", "waitlist"],
            risk_level=RiskLevel.LOW,
            legal_review=approved_lens_review(legal, "Legal", last_week),
            brand_review=approved_lens_review(brand, "Brand", last_week),
            ux_review=approved_lens_review(ux, "UX", last_week),
        ),
        Asset(
            id=generate_ulid(),
            title="Paid ad: Retargeting creative (claims)",
            asset_type=AssetType.IG_STATIC,
            channel=Channel.PAID_ADS,
            description="Static ad with before/after framing. Needs strict legal review.",
            created_by=SEED_AUTHOR,
            created_at=two_days_ago,
            status=AssetStatus.BLOCKED,
            tags=["paid", "retargeting", "claims"],
            risk_level=RiskLevel.HIGH,
            legal_review=legal_changes_requested,
            brand_review=approved_lens_review(brand, "Brand", two_days_ago),
            ux_review=empty_lens_review(ux, now=two_days_ago),
        ),
    ]
