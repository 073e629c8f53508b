"""
Asset status derivation.

This module computes an asset's overall status from its three lens statuses
and its risk level. It is a pure function: no DB access, no clock, no
mutation. Workflow operations call it after every lens change.

Derivation Rules (first match wins):
- any lens changes_requested and risk level high -> blocked
- all three lenses approved -> approved
- any lens in_review or changes_requested -> in_review
- otherwise (all lenses not_started) -> keep the current status when it is
  approved or blocked, else draft

A changes_requested on a low or medium risk asset only keeps it in review;
on a high risk asset it blocks publication even if the other lenses signed
off.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .asset import Asset
from .enums import AssetStatus, LensStatus, RiskLevel

# Statuses preserved when every lens is back to not_started
STICKY_STATUSES = frozenset({AssetStatus.APPROVED, AssetStatus.BLOCKED})

# Lens statuses that keep an asset in review
ACTIVE_LENS_STATUSES = frozenset({LensStatus.IN_REVIEW, LensStatus.CHANGES_REQUESTED})


def derive_status(
    lens_statuses: Iterable[LensStatus],
    risk_level: RiskLevel,
    current_status: Optional[AssetStatus] = None,
) -> AssetStatus:
    """
    Derive an asset status from raw lens statuses.

    Args:
        lens_statuses: Status of every lens on the asset
        risk_level: The asset's risk classification
        current_status: The asset's stored status, used only by the
                        sticky fallback

    Returns:
        The derived AssetStatus
    """
    statuses = [LensStatus(s) for s in lens_statuses]
    risk_level = RiskLevel(risk_level)

    if risk_level == RiskLevel.HIGH and LensStatus.CHANGES_REQUESTED in statuses:
        return AssetStatus.BLOCKED

    if statuses and all(s == LensStatus.APPROVED for s in statuses):
        return AssetStatus.APPROVED

    if any(s in ACTIVE_LENS_STATUSES for s in statuses):
        return AssetStatus.IN_REVIEW

    if current_status is not None and AssetStatus(current_status) in STICKY_STATUSES:
        return AssetStatus(current_status)
    return AssetStatus.DRAFT


def derive_asset_status(asset: Asset) -> AssetStatus:
    """Derive the overall status of ``asset`` from its lens reviews."""
    return derive_status(
        (review.status for review in asset.lens_reviews()),
        asset.risk_level,
        asset.status,
    )
