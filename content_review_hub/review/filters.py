"""
In-memory filtering for asset list views.

All predicates combine with AND semantics; an unset predicate matches
everything. Filtering never reorders; use ``sort_by_recent_update`` for the
list view ordering.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from .asset import Asset
from .enums import AssetStatus, AssetType, Channel, LensStatus, ReviewLens, RiskLevel


class AssetFilter(BaseModel):
    """Filter criteria for the asset list."""

    model_config = ConfigDict(extra="forbid")

    search: Optional[str] = None
    status: Optional[AssetStatus] = None
    risk_level: Optional[RiskLevel] = None
    channel: Optional[Channel] = None
    asset_type: Optional[AssetType] = None
    lens_not_approved: Optional[ReviewLens] = None

    def matches(self, asset: Asset) -> bool:
        if self.search:
            query = self.search.lower()
            in_title = query in asset.title.lower()
            in_tags = any(query in tag.lower() for tag in asset.tags)
            if not (in_title or in_tags):
                return False
        if self.status is not None and asset.status != self.status:
            return False
        if self.risk_level is not None and asset.risk_level != self.risk_level:
            return False
        if self.channel is not None and asset.channel != self.channel:
            return False
        if self.asset_type is not None and asset.asset_type != self.asset_type:
            return False
        if self.lens_not_approved is not None:
            if asset.lens_review(self.lens_not_approved).status == LensStatus.APPROVED:
                return False
        return True


def filter_assets(
    assets: Iterable[Asset], criteria: Optional[AssetFilter] = None
) -> List[Asset]:
    """Return the assets matching every set criterion, in input order."""
    if criteria is None:
        return list(assets)
    return [asset for asset in assets if criteria.matches(asset)]


def last_lens_update(asset: Asset) -> datetime:
    """Most recent ``last_updated`` across the asset's three lenses."""
    return max(review.last_updated for review in asset.lens_reviews())


def sort_by_recent_update(assets: Iterable[Asset]) -> List[Asset]:
    """Order assets by most recent lens update, newest first."""
    return sorted(assets, key=last_lens_update, reverse=True)
