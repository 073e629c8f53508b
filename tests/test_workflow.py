"""
Unit tests for the review workflow operations.

Operations are functional: the input asset is never modified.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from content_review_hub.review import (
    Asset,
    AssetCreate,
    AssetStatus,
    AssetType,
    Channel,
    LensStatus,
    ReviewLens,
    RiskLevel,
    add_comment,
    create_new_asset,
    set_checklist_response,
    set_lens_status,
    set_overall_notes,
)
from content_review_hub.review.workflow import DEFAULT_REVIEWER_NAME

LEGAL = ReviewLens.LEGAL_COMPLIANCE
BRAND = ReviewLens.BRAND_ETHICS
UX = ReviewLens.UX_SAFETY

EARLIER = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


def make_asset(risk=RiskLevel.LOW):
    return create_new_asset(
        AssetCreate(title="Launch script", risk_level=risk), created_by="Faith", now=EARLIER
    )


class TestCreateNewAsset:
    """Building assets from the add-asset form."""

    def test_new_asset_defaults(self):
        asset = create_new_asset(AssetCreate(title="  Launch script  "))
        assert asset.title == "Launch script"
        assert asset.status == AssetStatus.DRAFT
        assert asset.asset_type == AssetType.OTHER
        assert asset.channel == Channel.OTHER
        assert asset.risk_level == RiskLevel.LOW
        assert asset.created_by == "You"
        assert asset.id
        for lens in ReviewLens:
            review = asset.lens_review(lens)
            assert review.lens == lens
            assert review.status == LensStatus.NOT_STARTED
            assert len(review.checklist_responses) == 6

    def test_lens_timestamps_match_creation(self):
        asset = make_asset()
        assert asset.created_at == EARLIER
        assert all(r.last_updated == EARLIER for r in asset.lens_reviews())

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            AssetCreate(title="   ")

    def test_blank_optionals_become_none(self):
        data = AssetCreate(title="Deck", description="  ", link_or_path="")
        assert data.description is None
        assert data.link_or_path is None

    def test_tags_from_string(self):
        data = AssetCreate(title="Deck", tags="launch, tiktok  nova,launch")
        assert data.tags == ["launch", "tiktok", "nova"]

    def test_ids_are_unique(self):
        a = create_new_asset(AssetCreate(title="One"))
        b = create_new_asset(AssetCreate(title="Two"))
        assert a.id != b.id


class TestAssetLensSlots:
    """Each review field holds the review for its own lens."""

    def test_rejects_swapped_review(self):
        data = make_asset().model_dump()
        data["legal_review"] = data["ux_review"]
        with pytest.raises(ValidationError, match="legal_review"):
            Asset.model_validate(data)

    def test_round_trips_matching_slots(self):
        asset = make_asset()
        assert Asset.model_validate(asset.model_dump()) == asset

    def test_foreign_item_never_reaches_lens(self):
        updated = set_checklist_response(make_asset(), LEGAL, "ux-1", True)
        assert "ux-1" not in [r.item_id for r in updated.legal_review.checklist_responses]


class TestSetLensStatus:
    """Lens status changes re-derive the asset status."""

    def test_input_not_modified(self):
        asset = make_asset()
        before = asset.model_dump()
        updated = set_lens_status(asset, LEGAL, LensStatus.IN_REVIEW)
        assert asset.model_dump() == before
        assert updated is not asset

    def test_only_target_lens_changes(self):
        asset = make_asset()
        updated = set_lens_status(asset, BRAND, LensStatus.APPROVED)
        assert updated.brand_review.status == LensStatus.APPROVED
        assert updated.legal_review == asset.legal_review
        assert updated.ux_review == asset.ux_review
        unchanged = {"legal_review", "brand_review", "ux_review", "status"}
        assert updated.model_dump(exclude=unchanged) == asset.model_dump(exclude=unchanged)

    def test_stamps_last_updated(self):
        asset = make_asset()
        updated = set_lens_status(asset, UX, LensStatus.IN_REVIEW)
        assert updated.ux_review.last_updated > EARLIER
        assert updated.legal_review.last_updated == EARLIER

    def test_draft_to_in_review(self):
        updated = set_lens_status(make_asset(), LEGAL, LensStatus.IN_REVIEW)
        assert updated.status == AssetStatus.IN_REVIEW

    def test_all_approved(self):
        asset = make_asset()
        for lens in ReviewLens:
            asset = set_lens_status(asset, lens, LensStatus.APPROVED)
        assert asset.status == AssetStatus.APPROVED

    def test_high_risk_objection_blocks(self):
        asset = make_asset(risk=RiskLevel.HIGH)
        asset = set_lens_status(asset, BRAND, LensStatus.APPROVED)
        asset = set_lens_status(asset, UX, LensStatus.APPROVED)
        asset = set_lens_status(asset, LEGAL, LensStatus.CHANGES_REQUESTED)
        assert asset.status == AssetStatus.BLOCKED

    def test_block_lifts_when_objection_resolved(self):
        asset = make_asset(risk=RiskLevel.HIGH)
        asset = set_lens_status(asset, LEGAL, LensStatus.CHANGES_REQUESTED)
        assert asset.status == AssetStatus.BLOCKED
        asset = set_lens_status(asset, LEGAL, LensStatus.IN_REVIEW)
        assert asset.status == AssetStatus.IN_REVIEW

    def test_approval_can_be_walked_back(self):
        asset = make_asset()
        asset = set_lens_status(asset, LEGAL, LensStatus.APPROVED)
        asset = set_lens_status(asset, LEGAL, LensStatus.NOT_STARTED)
        assert asset.legal_review.status == LensStatus.NOT_STARTED

    def test_reset_after_approval_stays_approved(self):
        asset = make_asset()
        for lens in ReviewLens:
            asset = set_lens_status(asset, lens, LensStatus.APPROVED)
        for lens in ReviewLens:
            asset = set_lens_status(asset, lens, LensStatus.NOT_STARTED)
        assert asset.status == AssetStatus.APPROVED

    def test_placeholder_reviewer(self):
        updated = set_lens_status(make_asset(), LEGAL, LensStatus.IN_REVIEW)
        assert updated.legal_review.reviewer_name == DEFAULT_REVIEWER_NAME

    def test_supplied_reviewer(self):
        updated = set_lens_status(
            make_asset(), LEGAL, LensStatus.IN_REVIEW, reviewer_name="alex"
        )
        assert updated.legal_review.reviewer_name == "alex"

    def test_existing_reviewer_kept(self):
        asset = set_lens_status(make_asset(), LEGAL, LensStatus.IN_REVIEW, reviewer_name="alex")
        asset = set_lens_status(asset, LEGAL, LensStatus.APPROVED, reviewer_name="sam")
        assert asset.legal_review.reviewer_name == "alex"

    def test_accepts_raw_values(self):
        updated = set_lens_status(make_asset(), "ux_safety", "in_review")
        assert updated.ux_review.status == LensStatus.IN_REVIEW


class TestSetChecklistResponse:
    """Checklist answers are evidence only."""

    def test_records_answer(self):
        asset = make_asset()
        updated = set_checklist_response(asset, LEGAL, "legal-2", True, "cited")
        response = updated.legal_review.response_for("legal-2")
        assert response.passed is True
        assert response.notes == "cited"
        assert asset.legal_review.response_for("legal-2").passed is False

    def test_other_items_untouched(self):
        updated = set_checklist_response(make_asset(), LEGAL, "legal-2", True)
        others = [r for r in updated.legal_review.checklist_responses if r.item_id != "legal-2"]
        assert len(others) == 5
        assert not any(r.passed for r in others)

    def test_stamps_lens_without_changing_status(self):
        updated = set_checklist_response(make_asset(), UX, "ux-1", True)
        assert updated.ux_review.last_updated > EARLIER
        assert updated.ux_review.status == LensStatus.NOT_STARTED
        assert updated.status == AssetStatus.DRAFT

    def test_all_passed_does_not_approve(self):
        asset = make_asset()
        for i in range(1, 7):
            asset = set_checklist_response(asset, BRAND, f"brand-{i}", True)
        assert asset.brand_review.status == LensStatus.NOT_STARTED
        assert asset.status == AssetStatus.DRAFT

    def test_unknown_item_is_noop(self):
        asset = make_asset()
        before = asset.model_dump()
        result = set_checklist_response(asset, LEGAL, "legal-99", True)
        assert result is asset
        assert result.model_dump() == before

    def test_item_from_other_lens_is_noop(self):
        asset = make_asset()
        assert set_checklist_response(asset, LEGAL, "ux-1", True) is asset

    def test_input_not_modified(self):
        asset = make_asset()
        before = asset.model_dump()
        updated = set_checklist_response(asset, UX, "ux-2", True, "checked")
        assert asset.model_dump() == before
        assert updated is not asset

    def test_only_target_lens_changes(self):
        asset = make_asset()
        updated = set_checklist_response(asset, UX, "ux-2", True)
        assert updated.legal_review == asset.legal_review
        assert updated.brand_review == asset.brand_review
        assert updated.model_dump(exclude={"ux_review"}) == asset.model_dump(exclude={"ux_review"})


class TestSetOverallNotes:
    def test_replaces_notes(self):
        asset = set_overall_notes(make_asset(), BRAND, "Tone is off")
        asset = set_overall_notes(asset, BRAND, "Fixed")
        assert asset.brand_review.overall_notes == "Fixed"
        assert asset.brand_review.last_updated > EARLIER
        assert asset.status == AssetStatus.DRAFT

    def test_clears_notes(self):
        asset = set_overall_notes(make_asset(), BRAND, "Tone is off")
        assert set_overall_notes(asset, BRAND, None).brand_review.overall_notes is None

    def test_input_not_modified(self):
        asset = make_asset()
        before = asset.model_dump()
        updated = set_overall_notes(asset, LEGAL, "Needs a disclaimer")
        assert asset.model_dump() == before
        assert asset.legal_review.overall_notes is None
        assert updated is not asset

    def test_only_target_lens_changes(self):
        asset = make_asset()
        updated = set_overall_notes(asset, LEGAL, "Needs a disclaimer")
        assert updated.legal_review.overall_notes == "Needs a disclaimer"
        assert updated.model_dump(exclude={"legal_review"}) == asset.model_dump(
            exclude={"legal_review"}
        )
        assert updated.legal_review.checklist_responses == asset.legal_review.checklist_responses


class TestAddComment:
    def test_builds_comment(self):
        comment = add_comment("asset-1", "  Looks good  ", author="alex")
        assert comment.asset_id == "asset-1"
        assert comment.text == "Looks good"
        assert comment.author == "alex"
        assert comment.id

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
    def test_blank_text_ignored(self, text):
        assert add_comment("asset-1", text) is None

    def test_uses_supplied_time(self):
        now = EARLIER + timedelta(hours=1)
        assert add_comment("asset-1", "hi", now=now).created_at == now
