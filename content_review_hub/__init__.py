"""
Content Review Hub

Routes creative assets through independent legal, brand and UX review
lenses before publication.
"""

import importlib.metadata

__version__ = importlib.metadata.version("content-review-hub")

from .review import (
    Asset,
    AssetCreate,
    AssetFilter,
    AssetStatus,
    LensStatus,
    ReviewLens,
    RiskLevel,
    derive_asset_status,
)

__all__ = [
    "Asset",
    "AssetCreate",
    "AssetFilter",
    "AssetStatus",
    "LensStatus",
    "ReviewLens",
    "RiskLevel",
    "derive_asset_status",
]
