"""
Review workflow operations.

Each operation takes an Asset and returns a new Asset with one lens mutated,
``last_updated`` stamped on that lens and ``status`` re-derived. The input is
never modified, so callers can diff the two values or drop the new one when
persisting it fails.

No status transition is validated: any lens status can be set from any
other so reviewers can walk back an approval.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

import structlog

from .asset import LENS_FIELDS, Asset
from .checklist import get_item
from .comment import Comment
from .derivation import derive_asset_status
from .enums import LensStatus, ReviewLens
from .primitives import utc_now

logger = structlog.get_logger()

DEFAULT_REVIEWER_NAME = "Reviewer"


def _update_lens(
    asset: Asset,
    lens: ReviewLens,
    now: Optional[datetime] = None,
    **changes: Any,
) -> Asset:
    """Apply ``changes`` to one lens, stamp it and re-derive the asset status."""
    lens = ReviewLens(lens)
    review = asset.lens_review(lens)
    updated_review = review.model_copy(
        deep=True, update={**changes, "last_updated": now or utc_now()}
    )

    updated = asset.model_copy(deep=True, update={LENS_FIELDS[lens]: updated_review})
    return updated.model_copy(update={"status": derive_asset_status(updated)})


def set_lens_status(
    asset: Asset,
    lens: ReviewLens,
    status: LensStatus,
    reviewer_name: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Asset:
    """Set a lens status.

    The existing reviewer name is kept. When the lens has none yet, the
    supplied ``reviewer_name`` is used, falling back to a placeholder.
    """
    review = asset.lens_review(lens)
    updated = _update_lens(
        asset,
        lens,
        now=now,
        status=LensStatus(status),
        reviewer_name=review.reviewer_name or reviewer_name or DEFAULT_REVIEWER_NAME,
    )

    if updated.status != asset.status:
        logger.info(
            "asset_status_derived",
            asset_id=asset.id,
            lens=ReviewLens(lens).value,
            lens_status=LensStatus(status).value,
            old_status=asset.status.value,
            new_status=updated.status.value,
        )
    return updated


def set_checklist_response(
    asset: Asset,
    lens: ReviewLens,
    item_id: str,
    passed: bool,
    notes: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Asset:
    """Record a checklist answer.

    Unknown item ids are ignored and the asset is returned unchanged.
    Checklist answers never change the lens status.
    """
    review = asset.lens_review(lens)
    if get_item(lens, item_id) is None:
        logger.debug(
            "checklist_item_not_found",
            asset_id=asset.id,
            lens=ReviewLens(lens).value,
            item_id=item_id,
        )
        return asset

    responses = [
        response.model_copy(update={"passed": passed, "notes": notes})
        if response.item_id == item_id
        else response.model_copy()
        for response in review.checklist_responses
    ]
    return _update_lens(asset, lens, now=now, checklist_responses=responses)


def set_overall_notes(
    asset: Asset,
    lens: ReviewLens,
    notes: Optional[str],
    now: Optional[datetime] = None,
) -> Asset:
    """Replace the free-text notes of a lens."""
    return _update_lens(asset, lens, now=now, overall_notes=notes)


def add_comment(
    asset_id: str,
    text: str,
    author: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Optional[Comment]:
    """Build a comment for an asset. Returns None for blank text."""
    text = (text or "").strip()
    if not text:
        return None
    return Comment(asset_id=asset_id, text=text, author=author, created_at=now or utc_now())
