"""Tests for the command line interface."""

import pytest
from rich.console import Console
from typer.testing import CliRunner

from content_review_hub import cli
from content_review_hub.db.base import Base
from content_review_hub.review import get_seed_assets
from content_review_hub.review.services import SqlAssetStore

runner = CliRunner()


class TestDeriveCommand:
    def test_all_approved(self):
        result = runner.invoke(cli.app, ["derive", "approved", "approved", "approved"])
        assert result.exit_code == 0
        assert result.output.strip() == "approved"

    def test_high_risk_block(self):
        result = runner.invoke(
            cli.app,
            ["derive", "changes_requested", "approved", "approved", "--risk", "high"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "blocked"

    def test_sticky_current_status(self):
        result = runner.invoke(
            cli.app,
            ["derive", "not_started", "not_started", "not_started", "--current", "approved"],
        )
        assert result.output.strip() == "approved"

    def test_rejects_unknown_status(self):
        result = runner.invoke(cli.app, ["derive", "done", "approved", "approved"])
        assert result.exit_code != 0


class TestChecklistCommand:
    def test_lists_items(self):
        result = runner.invoke(cli.app, ["checklist", "brand_ethics"])
        assert result.exit_code == 0
        for i in range(1, 7):
            assert f"brand-{i}" in result.output


class TestAssetsCommand:
    @pytest.fixture(autouse=True)
    def _cli_session(self, monkeypatch, db_session):
        monkeypatch.setattr(cli, "console", Console(width=200))
        monkeypatch.setattr(cli, "get_session_local", lambda: lambda: db_session)
        SqlAssetStore(db_session).insert_assets("user-cli", get_seed_assets())

    def test_lists_stored_assets(self):
        result = runner.invoke(cli.app, ["assets", "--user", "user-cli"])
        assert result.exit_code == 0, result.output
        assert "user-cli" in result.output
        assert "blocked" in result.output

    def test_filter_by_status(self):
        result = runner.invoke(
            cli.app, ["assets", "-u", "user-cli", "--status", "draft"]
        )
        assert result.exit_code == 0, result.output
        assert "blocked" not in result.output

    def test_listing_never_seeds(self, db_session):
        result = runner.invoke(cli.app, ["assets", "-u", "nobody"])
        assert result.exit_code == 0, result.output
        assert "NovaMirror" not in result.output
        assert SqlAssetStore(db_session).list_assets("nobody") == []

    def test_store_failure_exits_nonzero(self, db_session):
        Base.metadata.drop_all(bind=db_session.get_bind())
        result = runner.invoke(cli.app, ["assets", "-u", "user-cli"])
        assert result.exit_code == 1
