"""
Lens review records.

A LensReview is the per-asset, per-lens record: status, reviewer, checklist
responses and free-text notes. It is embedded in the asset row as JSON, so
serialized keys use camelCase (``reviewerName``, ``checklistResponses``) to
stay compatible with rows written by the dashboard.

Responses always mirror the lens catalog: one per item, in catalog order.
Missing items are filled in unchecked; foreign or duplicate item ids are
rejected. Stored rows go through ``LensReview.from_stored``, which first drops
responses for items no longer in the catalog.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .checklist import get_checklist
from .enums import LensStatus, ReviewLens
from .primitives import utc_now

logger = structlog.get_logger()


class ChecklistResponse(BaseModel):
    """A reviewer's answer to one checklist item."""

    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True
    )

    item_id: str = Field(..., description="Id of the ChecklistItem answered")
    passed: bool = Field(False, description="Whether the item is satisfied")
    notes: Optional[str] = Field(None, description="Optional reviewer notes")


class LensReview(BaseModel):
    """Review state for a single lens of an asset."""

    model_config = ConfigDict(
        extra="forbid", alias_generator=to_camel, populate_by_name=True
    )

    lens: ReviewLens = Field(..., description="Lens under review (fixed)")
    status: LensStatus = Field(
        default=LensStatus.NOT_STARTED, description="Lens review status"
    )
    reviewer_name: Optional[str] = Field(None, description="Who reviewed the lens")
    last_updated: datetime = Field(
        default_factory=utc_now, description="Last mutation timestamp (UTC)"
    )
    checklist_responses: List[ChecklistResponse] = Field(
        default_factory=list, description="One response per catalog item"
    )
    overall_notes: Optional[str] = Field(None, description="Free-text lens notes")

    @model_validator(mode="after")
    def _match_catalog(self) -> "LensReview":
        catalog = [item.id for item in get_checklist(self.lens)]
        by_id: Dict[str, ChecklistResponse] = {}
        for response in self.checklist_responses:
            if response.item_id not in catalog:
                raise ValueError(
                    f"checklist item {response.item_id!r} is not part of the {self.lens.value} checklist"
                )
            if response.item_id in by_id:
                raise ValueError(f"duplicate response for checklist item {response.item_id!r}")
            by_id[response.item_id] = response
        self.checklist_responses = [
            by_id.get(item_id) or ChecklistResponse(item_id=item_id) for item_id in catalog
        ]
        return self

    @classmethod
    def from_stored(cls, data: Dict[str, Any]) -> "LensReview":
        """Load an embedded row, dropping responses for retired or repeated items."""
        data = dict(data)
        lens = ReviewLens(data["lens"])
        key = "checklistResponses" if "checklistResponses" in data else "checklist_responses"
        known = {item.id for item in get_checklist(lens)}

        kept: List[Any] = []
        seen = set()
        for response in data.get(key) or []:
            item_id = response.get("itemId", response.get("item_id"))
            if item_id in known and item_id not in seen:
                seen.add(item_id)
                kept.append(response)

        dropped = len(data.get(key) or []) - len(kept)
        if dropped:
            logger.info("stale_checklist_responses_dropped", lens=lens.value, count=dropped)
        data[key] = kept
        return cls.model_validate(data)

    def response_for(self, item_id: str) -> Optional[ChecklistResponse]:
        for response in self.checklist_responses:
            if response.item_id == item_id:
                return response
        return None

    def to_json(self) -> dict:
        """Serialize to the embedded row shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def empty_lens_review(lens: ReviewLens, now: Optional[datetime] = None) -> LensReview:
    """Build a fresh lens review with one unchecked response per catalog item."""
    return LensReview(
        lens=lens,
        status=LensStatus.NOT_STARTED,
        last_updated=now or utc_now(),
        checklist_responses=[
            ChecklistResponse(item_id=item.id, passed=False)
            for item in get_checklist(lens)
        ],
    )


def approved_lens_review(
    lens: ReviewLens,
    reviewer_name: str,
    last_updated: datetime,
    overall_notes: Optional[str] = None,
) -> LensReview:
    """Build an approved lens review with every item checked."""
    review = empty_lens_review(lens, now=last_updated)
    return review.model_copy(
        update={
            "status": LensStatus.APPROVED,
            "reviewer_name": reviewer_name,
            "overall_notes": overall_notes,
            "checklist_responses": [
                response.model_copy(update={"passed": True})
                for response in review.checklist_responses
            ],
        }
    )
