"""
Content Review API Routes.

REST endpoints for the review hub. All endpoints are prefixed with
/content-review. The caller's identity comes from the X-User-Id and
X-User-Email headers; requests without one get empty results instead of an
auth error.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from ..db.base import get_db
from .asset import Asset, AssetCreate
from .checklist import get_checklist
from .comment import CommentCreate
from .enums import AssetStatus, AssetType, Channel, LensStatus, ReviewLens, RiskLevel
from .filters import AssetFilter
from .hub import ReviewHub
from .identity import Identity
from .services import PersistenceError, SqlAssetStore

router = APIRouter(prefix="/content-review", tags=["Content Review"])

SKIPPED = {"status": "skipped", "reason": "no identity"}


class LensStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: LensStatus


class ChecklistResponseUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    passed: bool
    notes: Optional[str] = None


class OverallNotesUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    notes: Optional[str] = None


def get_current_identity(
    x_user_id: Optional[str] = Header(None),
    x_user_email: Optional[str] = Header(None),
) -> Optional[Identity]:
    """Identity of the caller, or None when no user header is sent."""
    if not x_user_id or not x_user_id.strip():
        return None
    return Identity(user_id=x_user_id.strip(), email=x_user_email)


def get_hub(
    db: Session = Depends(get_db),
    identity: Optional[Identity] = Depends(get_current_identity),
) -> ReviewHub:
    return ReviewHub(SqlAssetStore(db), identity)


def _asset_body(asset: Asset) -> Dict[str, Any]:
    return asset.model_dump(mode="json")


def _require_asset(hub: ReviewHub, asset_id: str) -> Asset:
    try:
        asset = hub.get_asset(asset_id)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=e.to_dict())
    if asset is None:
        raise HTTPException(status_code=404, detail="Asset not found")
    return asset


def _apply(result_fn) -> Dict[str, Any]:
    try:
        asset = result_fn()
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=e.to_dict())
    return {"status": "success", "asset": _asset_body(asset)}


# =============================================================================
# Checklist Endpoints
# =============================================================================


@router.get("/checklists/{lens}")
def get_lens_checklist(lens: ReviewLens) -> List[Dict[str, Any]]:
    """Get the checklist catalog for a lens."""
    return [item.model_dump(mode="json") for item in get_checklist(lens)]


# =============================================================================
# Asset Endpoints
# =============================================================================


@router.get("/assets")
def list_assets(
    search: Optional[str] = None,
    status: Optional[AssetStatus] = None,
    risk_level: Optional[RiskLevel] = None,
    channel: Optional[Channel] = None,
    asset_type: Optional[AssetType] = None,
    lens_not_approved: Optional[ReviewLens] = None,
    hub: ReviewHub = Depends(get_hub),
) -> List[Dict[str, Any]]:
    """List the caller's assets, seeding demonstration data on first use."""
    criteria = AssetFilter(
        search=search,
        status=status,
        risk_level=risk_level,
        channel=channel,
        asset_type=asset_type,
        lens_not_approved=lens_not_approved,
    )
    try:
        assets = hub.list_assets(criteria)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=e.to_dict())
    return [_asset_body(a) for a in assets]


@router.post("/assets", status_code=201)
def create_asset(
    data: AssetCreate,
    hub: ReviewHub = Depends(get_hub),
) -> Dict[str, Any]:
    """Add a new draft asset."""
    if hub.identity is None:
        return SKIPPED
    return _apply(lambda: hub.create_asset(data))


@router.get("/assets/{asset_id}")
def get_asset(
    asset_id: str,
    hub: ReviewHub = Depends(get_hub),
) -> Dict[str, Any]:
    """Get an asset by ID."""
    if hub.identity is None:
        return SKIPPED
    return _asset_body(_require_asset(hub, asset_id))


@router.put("/assets/{asset_id}/lenses/{lens}/status")
def set_lens_status(
    asset_id: str,
    lens: ReviewLens,
    update: LensStatusUpdate,
    hub: ReviewHub = Depends(get_hub),
) -> Dict[str, Any]:
    """Set a lens status and re-derive the asset status."""
    if hub.identity is None:
        return SKIPPED
    _require_asset(hub, asset_id)
    return _apply(lambda: hub.set_lens_status(asset_id, lens, update.status))


@router.put("/assets/{asset_id}/lenses/{lens}/checklist/{item_id}")
def set_checklist_response(
    asset_id: str,
    lens: ReviewLens,
    item_id: str,
    update: ChecklistResponseUpdate,
    hub: ReviewHub = Depends(get_hub),
) -> Dict[str, Any]:
    """Record a checklist answer. Unknown items leave the asset unchanged."""
    if hub.identity is None:
        return SKIPPED
    _require_asset(hub, asset_id)
    return _apply(
        lambda: hub.set_checklist_response(
            asset_id, lens, item_id, update.passed, update.notes
        )
    )


@router.put("/assets/{asset_id}/lenses/{lens}/notes")
def set_overall_notes(
    asset_id: str,
    lens: ReviewLens,
    update: OverallNotesUpdate,
    hub: ReviewHub = Depends(get_hub),
) -> Dict[str, Any]:
    """Replace the overall notes of a lens."""
    if hub.identity is None:
        return SKIPPED
    _require_asset(hub, asset_id)
    return _apply(lambda: hub.set_overall_notes(asset_id, lens, update.notes))


# =============================================================================
# Comment Endpoints
# =============================================================================


@router.get("/assets/{asset_id}/comments")
def list_comments(
    asset_id: str,
    hub: ReviewHub = Depends(get_hub),
) -> List[Dict[str, Any]]:
    """List comments for an asset, oldest first."""
    if hub.identity is None:
        return []
    _require_asset(hub, asset_id)
    try:
        comments = hub.list_comments(asset_id)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=e.to_dict())
    return [c.model_dump(mode="json") for c in comments]


@router.post("/assets/{asset_id}/comments")
def add_comment(
    asset_id: str,
    data: CommentCreate,
    hub: ReviewHub = Depends(get_hub),
) -> Dict[str, Any]:
    """Append a comment. Blank text is ignored."""
    if hub.identity is None:
        return SKIPPED
    _require_asset(hub, asset_id)
    try:
        comment = hub.add_comment(asset_id, data.text)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=e.to_dict())
    if comment is None:
        return {"status": "skipped", "reason": "empty comment"}
    return {"status": "success", "comment": comment.model_dump(mode="json")}


@router.get("/assets/{asset_id}/history")
def get_asset_history(
    asset_id: str,
    limit: int = Query(100, ge=1, le=1000),
    hub: ReviewHub = Depends(get_hub),
) -> List[Dict[str, Any]]:
    """Audit trail for an asset, newest first."""
    if hub.identity is None:
        return []
    _require_asset(hub, asset_id)
    try:
        return hub.store.asset_history(asset_id, limit=limit)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=e.to_dict())
