"""
Review hub adapter.

ReviewHub is the thin layer between callers (HTTP routes, the CLI) and the
pure workflow. It owns the in-memory asset collection for one user, runs a
workflow operation, persists the result and only then replaces its cached
copy. A failed write raises PersistenceError and leaves the cache as it was.

Without an identity every operation is a no-op returning None or an empty
list.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import structlog

from ..config import get_settings
from . import workflow
from .asset import Asset, AssetCreate, create_new_asset
from .comment import Comment
from .enums import LensStatus, ReviewLens
from .filters import AssetFilter, filter_assets, sort_by_recent_update
from .identity import Identity
from .seed import get_seed_assets
from .services import AssetStore

logger = structlog.get_logger()


class ReviewHub:
    """Content review operations for a single user session."""

    def __init__(
        self,
        store: AssetStore,
        identity: Optional[Identity],
        seed_demo_assets: Optional[bool] = None,
    ):
        settings = get_settings()
        self.store = store
        self.identity = identity
        self.seed_demo_assets = (
            settings.seed_demo_assets if seed_demo_assets is None else seed_demo_assets
        )
        self.reviewer_name = (
            identity.display_name(settings.default_reviewer_name) if identity else None
        )
        self.author_name = (
            identity.display_name(settings.default_author_name) if identity else None
        )
        self._assets: Dict[str, Asset] = {}
        self._loaded = False
        self.logger = logger.bind(user_id=identity.user_id if identity else None)

    @property
    def user_id(self) -> Optional[str]:
        return self.identity.user_id if self.identity else None

    def load(self) -> List[Asset]:
        """Load the user's assets, seeding the demonstration set when empty."""
        if self.identity is None:
            return []

        assets = self.store.list_assets(self.user_id)
        if not assets and self.seed_demo_assets:
            seed = get_seed_assets()
            self.store.insert_assets(self.user_id, seed)
            self.logger.info("demo_assets_seeded", count=len(seed))
            assets = seed

        self._assets = {asset.id: asset for asset in assets}
        self._loaded = True
        return list(assets)

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    def list_assets(self, criteria: Optional[AssetFilter] = None) -> List[Asset]:
        """Filtered assets, most recent lens update first."""
        if self.identity is None:
            return []
        self._ensure_loaded()
        return sort_by_recent_update(filter_assets(self._assets.values(), criteria))

    def get_asset(self, asset_id: str) -> Optional[Asset]:
        if self.identity is None:
            return None
        if asset_id in self._assets:
            return self._assets[asset_id]
        asset = self.store.get_asset(self.user_id, asset_id)
        if asset is not None:
            self._assets[asset.id] = asset
        return asset

    def create_asset(self, data: AssetCreate) -> Optional[Asset]:
        """Add a new draft asset."""
        if self.identity is None:
            return None
        asset = create_new_asset(data, created_by=self.author_name)
        self.store.upsert_asset(self.user_id, asset, note="asset added")
        self._assets[asset.id] = asset
        self.logger.info("asset_created", asset_id=asset.id, risk_level=asset.risk_level.value)
        return asset

    def _commit(self, current: Asset, updated: Asset, note: str) -> Asset:
        if updated is current:
            return current
        self.store.upsert_asset(self.user_id, updated, note=note)
        self._assets[updated.id] = updated
        self.logger.info(
            "asset_updated", asset_id=updated.id, note=note, status=updated.status.value
        )
        return updated

    def set_lens_status(
        self, asset_id: str, lens: ReviewLens, status: LensStatus
    ) -> Optional[Asset]:
        asset = self.get_asset(asset_id)
        if asset is None:
            return None
        updated = workflow.set_lens_status(
            asset, lens, status, reviewer_name=self.reviewer_name
        )
        return self._commit(
            asset, updated, f"{ReviewLens(lens).value} status set to {LensStatus(status).value}"
        )

    def set_checklist_response(
        self,
        asset_id: str,
        lens: ReviewLens,
        item_id: str,
        passed: bool,
        notes: Optional[str] = None,
    ) -> Optional[Asset]:
        asset = self.get_asset(asset_id)
        if asset is None:
            return None
        updated = workflow.set_checklist_response(asset, lens, item_id, passed, notes)
        return self._commit(asset, updated, f"{ReviewLens(lens).value} checklist {item_id}")

    def set_overall_notes(
        self, asset_id: str, lens: ReviewLens, notes: Optional[str]
    ) -> Optional[Asset]:
        asset = self.get_asset(asset_id)
        if asset is None:
            return None
        updated = workflow.set_overall_notes(asset, lens, notes)
        return self._commit(asset, updated, f"{ReviewLens(lens).value} notes")

    def add_comment(self, asset_id: str, text: str) -> Optional[Comment]:
        """Append a comment. Blank text is ignored."""
        if self.identity is None:
            return None
        comment = workflow.add_comment(asset_id, text, author=self.author_name)
        if comment is None:
            return None
        return self.store.insert_comment(self.user_id, comment)

    def list_comments(self, asset_id: str) -> List[Comment]:
        if self.identity is None:
            return []
        return self.store.list_comments(asset_id)
