"""
Lens checklist catalog.

Each lens has a fixed, ordered list of checklist items. Reviewers tick items
off as evidence before setting the lens status; the items themselves never
gate the derived asset status.

Adding or removing items is a deployment-time change: edit the lists in
LENS_CHECKLISTS below. Stored lens reviews drop responses for removed
items and gain unchecked responses for new ones the next time they load.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, constr

from .enums import ReviewLens


class ChecklistItem(BaseModel):
    """A catalog-defined yes/no question within a lens."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: constr(min_length=1, max_length=64) = Field(..., description="Unique item id")
    lens: ReviewLens = Field(..., description="Lens this item belongs to")
    label: str = Field(..., description="Short question shown to reviewers")
    description: str = Field(..., description="Longer guidance for the item")
    required: bool = Field(True, description="Whether the item is mandatory")


def _items(lens: ReviewLens, *rows: Tuple[str, str, str, bool]) -> Tuple[ChecklistItem, ...]:
    return tuple(
        ChecklistItem(id=item_id, lens=lens, label=label, description=description, required=required)
        for item_id, label, description, required in rows
    )


LENS_CHECKLISTS: Dict[ReviewLens, Tuple[ChecklistItem, ...]] = {
    ReviewLens.LEGAL_COMPLIANCE: _items(
        ReviewLens.LEGAL_COMPLIANCE,
        (
            "legal-1",
            "No unauthorized third party logos, packaging, or IP",
            "Ensure no use of competitor or unlicensed IP.",
            True,
        ),
        (
            "legal-2",
            "All performance or result claims are supportable and not exaggerated",
            "Claims must be backed by data or clear disclaimers.",
            True,
        ),
        (
            "legal-3",
            "No mention of medical outcomes or drug-like claims",
            "Avoid anything that could be construed as a drug or medical claim.",
            True,
        ),
        (
            "legal-4",
            "Privacy and data handling language matches current policy",
            "Scans and personal data must align with privacy policy.",
            True,
        ),
        (
            "legal-5",
            "Regulatory language (FTC, FDA) considered where applicable",
            "Ad claims and beauty product language must comply.",
            True,
        ),
        (
            "legal-6",
            "No implied endorsements or testimonials without consent",
            "Testimonials and endorsements must have proper consent.",
            True,
        ),
    ),
    ReviewLens.BRAND_ETHICS: _items(
        ReviewLens.BRAND_ETHICS,
        (
            "brand-1",
            "Tone matches Chromara brand voice: cinematic, intelligent, emotionally grounded",
            "Voice should feel premium and thoughtful.",
            True,
        ),
        (
            "brand-2",
            "No body shaming or appearance-based judgment",
            "Content should not judge or shame any body type.",
            True,
        ),
        (
            "brand-3",
            "No appropriation of cultures, communities, or identities",
            "Avoid cultural appropriation or stereotyping.",
            True,
        ),
        (
            "brand-4",
            "No exploitative or fear-based framing",
            "Do not use fear or manipulation to sell.",
            True,
        ),
        (
            "brand-5",
            "Representation is inclusive and authentic",
            "Diversity should feel genuine, not tokenized.",
            True,
        ),
        (
            "brand-6",
            "Aligned with Chromara values and mission",
            "Content should support our mission and values.",
            True,
        ),
    ),
    ReviewLens.UX_SAFETY: _items(
        ReviewLens.UX_SAFETY,
        (
            "ux-1",
            "Consumer can clearly understand what NovaMirror is and what it does",
            "No confusion about product or technology.",
            True,
        ),
        (
            "ux-2",
            "No content that could mislead about how data, scans, or shade matching works",
            "Accuracy of technical and data claims.",
            True,
        ),
        (
            "ux-3",
            "No suggestions that override consumer safety, hygiene, or dermatologist advice",
            "Do not contradict health or safety guidance.",
            True,
        ),
        (
            "ux-4",
            "Clarity of CTA and next steps",
            "User knows what to do next without confusion.",
            False,
        ),
        (
            "ux-5",
            "No misuse or misinterpretation risk",
            "Content cannot be read in a harmful or wrong way.",
            True,
        ),
        (
            "ux-6",
            "Accessibility and comprehension considered",
            "Readable and understandable for target audience.",
            False,
        ),
    ),
}


def get_checklist(lens: ReviewLens) -> List[ChecklistItem]:
    """Return the ordered checklist for a lens."""
    return list(LENS_CHECKLISTS[ReviewLens(lens)])


def get_item(lens: ReviewLens, item_id: str) -> Optional[ChecklistItem]:
    """Look up a checklist item by id within a lens."""
    for item in LENS_CHECKLISTS[ReviewLens(lens)]:
        if item.id == item_id:
            return item
    return None


def required_items(lens: ReviewLens) -> List[ChecklistItem]:
    """Return only the mandatory items of a lens."""
    return [item for item in LENS_CHECKLISTS[ReviewLens(lens)] if item.required]
