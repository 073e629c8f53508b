"""
Unit tests for the ReviewHub adapter.

A dict-backed store stands in for the database so failures can be injected
per operation.
"""

from typing import Any, Dict, List, Optional

import pytest

from content_review_hub.review import (
    AssetCreate,
    AssetFilter,
    AssetStatus,
    Comment,
    Identity,
    LensStatus,
    ReviewLens,
    RiskLevel,
)
from content_review_hub.review.asset import Asset
from content_review_hub.review.hub import ReviewHub
from content_review_hub.review.services import AssetStore, PersistenceError, SqlAssetStore

LEGAL = ReviewLens.LEGAL_COMPLIANCE


class MemoryStore(AssetStore):
    """AssetStore keeping everything in dicts."""

    def __init__(self):
        self.assets: Dict[str, Dict[str, Asset]] = {}
        self.comments: List[Comment] = []
        self.writes: List[str] = []
        self.fail_writes = False

    def _check(self, operation: str) -> None:
        if self.fail_writes:
            raise PersistenceError(operation, "write refused")
        self.writes.append(operation)

    def list_assets(self, user_id: str) -> List[Asset]:
        return list(self.assets.get(user_id, {}).values())

    def get_asset(self, user_id: str, asset_id: str) -> Optional[Asset]:
        return self.assets.get(user_id, {}).get(asset_id)

    def insert_assets(self, user_id: str, assets: List[Asset]) -> None:
        self._check("insert_assets")
        for asset in assets:
            self.assets.setdefault(user_id, {})[asset.id] = asset

    def upsert_asset(self, user_id: str, asset: Asset, note: Optional[str] = None) -> Asset:
        self._check("upsert_asset")
        self.assets.setdefault(user_id, {})[asset.id] = asset
        return asset

    def insert_comment(self, user_id: str, comment: Comment) -> Comment:
        self._check("insert_comment")
        self.comments.append(comment)
        return comment

    def list_comments(self, asset_id: str) -> List[Comment]:
        return [c for c in self.comments if c.asset_id == asset_id]

    def asset_history(self, asset_id: str, limit: int = 100) -> List[Dict[str, Any]]:
        return []


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def hub(memory_store, identity):
    return ReviewHub(memory_store, identity, seed_demo_assets=False)


def create(hub, title="Launch script", risk=RiskLevel.LOW):
    return hub.create_asset(AssetCreate(title=title, risk_level=risk))


class TestLoading:
    """First-use seeding and loading."""

    def test_seeds_empty_store(self, memory_store, identity):
        hub = ReviewHub(memory_store, identity, seed_demo_assets=True)
        assets = hub.load()
        assert len(assets) == 6
        assert len(memory_store.list_assets(identity.user_id)) == 6
        assert memory_store.writes == ["insert_assets"]

    def test_does_not_reseed(self, memory_store, identity):
        ReviewHub(memory_store, identity, seed_demo_assets=True).load()
        second = ReviewHub(memory_store, identity, seed_demo_assets=True)
        assert len(second.load()) == 6
        assert memory_store.writes == ["insert_assets"]

    def test_seeding_disabled(self, hub):
        assert hub.load() == []

    def test_list_loads_lazily(self, memory_store, identity):
        hub = ReviewHub(memory_store, identity, seed_demo_assets=True)
        assert len(hub.list_assets()) == 6

    def test_list_applies_filter(self, memory_store, identity):
        hub = ReviewHub(memory_store, identity, seed_demo_assets=True)
        blocked = hub.list_assets(AssetFilter(status=AssetStatus.BLOCKED))
        assert [a.status for a in blocked] == [AssetStatus.BLOCKED]


class TestIdentity:
    """Display names come from the identity."""

    def test_names_from_email(self, hub):
        assert hub.reviewer_name == "alex"
        assert hub.author_name == "alex"

    def test_names_default_without_email(self, memory_store):
        hub = ReviewHub(memory_store, Identity(user_id="u-2"), seed_demo_assets=False)
        assert hub.reviewer_name == "Reviewer"
        assert hub.author_name == "You"

    def test_created_by_and_reviewer(self, hub):
        asset = create(hub)
        assert asset.created_by == "alex"
        updated = hub.set_lens_status(asset.id, LEGAL, LensStatus.IN_REVIEW)
        assert updated.legal_review.reviewer_name == "alex"


class TestWithoutIdentity:
    """Every operation is a no-op when nobody is signed in."""

    @pytest.fixture
    def anonymous(self, memory_store):
        return ReviewHub(memory_store, None, seed_demo_assets=True)

    def test_reads_empty(self, anonymous):
        assert anonymous.load() == []
        assert anonymous.list_assets() == []
        assert anonymous.get_asset("anything") is None
        assert anonymous.list_comments("anything") == []

    def test_writes_skipped(self, anonymous, memory_store):
        assert anonymous.create_asset(AssetCreate(title="x")) is None
        assert anonymous.set_lens_status("a", LEGAL, LensStatus.APPROVED) is None
        assert anonymous.set_checklist_response("a", LEGAL, "legal-1", True) is None
        assert anonymous.set_overall_notes("a", LEGAL, "hi") is None
        assert anonymous.add_comment("a", "hi") is None
        assert memory_store.writes == []


class TestOperations:
    """Operations persist, then update the cached collection."""

    def test_create_persists(self, hub, memory_store, identity):
        asset = create(hub)
        assert asset.status == AssetStatus.DRAFT
        assert memory_store.get_asset(identity.user_id, asset.id) == asset
        assert hub.get_asset(asset.id) == asset

    def test_lens_status_round_trip(self, hub, memory_store, identity):
        asset = create(hub, risk=RiskLevel.HIGH)
        updated = hub.set_lens_status(asset.id, LEGAL, LensStatus.CHANGES_REQUESTED)
        assert updated.status == AssetStatus.BLOCKED
        assert memory_store.get_asset(identity.user_id, asset.id).status == AssetStatus.BLOCKED
        assert hub.get_asset(asset.id).status == AssetStatus.BLOCKED

    def test_checklist_and_notes(self, hub):
        asset = create(hub)
        hub.set_checklist_response(asset.id, LEGAL, "legal-1", True, "clean")
        updated = hub.set_overall_notes(asset.id, LEGAL, "All good")
        assert updated.legal_review.response_for("legal-1").passed is True
        assert updated.legal_review.overall_notes == "All good"

    def test_unknown_checklist_item_skips_write(self, hub, memory_store):
        asset = create(hub)
        writes = len(memory_store.writes)
        result = hub.set_checklist_response(asset.id, LEGAL, "legal-42", True)
        assert result is asset
        assert len(memory_store.writes) == writes

    def test_unknown_asset(self, hub):
        assert hub.get_asset("missing") is None
        assert hub.set_lens_status("missing", LEGAL, LensStatus.APPROVED) is None

    def test_comments(self, hub):
        asset = create(hub)
        assert hub.add_comment(asset.id, "   ") is None
        comment = hub.add_comment(asset.id, "Ship it")
        assert comment.author == "alex"
        assert [c.text for c in hub.list_comments(asset.id)] == ["Ship it"]


class TestFailedPersistence:
    """A failed write propagates and leaves the cache untouched."""

    def test_failed_update_keeps_previous_asset(self, hub, memory_store):
        asset = create(hub)
        memory_store.fail_writes = True
        with pytest.raises(PersistenceError):
            hub.set_lens_status(asset.id, LEGAL, LensStatus.APPROVED)
        cached = hub.get_asset(asset.id)
        assert cached == asset
        assert cached.legal_review.status == LensStatus.NOT_STARTED

    def test_failed_create_not_cached(self, hub, memory_store):
        memory_store.fail_writes = True
        with pytest.raises(PersistenceError):
            create(hub)
        assert hub.list_assets() == []

    def test_failed_comment(self, hub, memory_store):
        asset = create(hub)
        memory_store.fail_writes = True
        with pytest.raises(PersistenceError):
            hub.add_comment(asset.id, "hello")
        assert hub.list_comments(asset.id) == []


class TestWithSqlStore:
    """The hub over the real SQL store."""

    def test_seed_then_reload(self, db_session, identity):
        first = ReviewHub(SqlAssetStore(db_session), identity, seed_demo_assets=True)
        seeded = {a.id: a for a in first.list_assets()}

        second = ReviewHub(SqlAssetStore(db_session), identity, seed_demo_assets=True)
        reloaded = {a.id: a for a in second.list_assets()}
        assert reloaded.keys() == seeded.keys()
        for asset_id, asset in seeded.items():
            assert reloaded[asset_id].status == asset.status
            assert reloaded[asset_id].legal_review == asset.legal_review

    def test_users_are_isolated(self, db_session, identity):
        ReviewHub(SqlAssetStore(db_session), identity, seed_demo_assets=True).load()
        other = ReviewHub(
            SqlAssetStore(db_session), Identity(user_id="user-2"), seed_demo_assets=False
        )
        assert other.list_assets() == []
