"""
Comment Schema.

Comments are an append-only audit trail attached to an asset by id. They are
never edited and have no effect on lens or asset status.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, constr

from .primitives import generate_ulid, utc_now


class Comment(BaseModel):
    """A free-form comment on an asset."""

    model_config = ConfigDict(extra="forbid")

    id: constr(min_length=1, max_length=128) = Field(
        default_factory=generate_ulid, description="Unique identifier"
    )
    asset_id: constr(min_length=1, max_length=128) = Field(
        ..., description="Asset the comment is attached to"
    )
    text: constr(min_length=1) = Field(..., description="Comment body")
    author: Optional[str] = Field(None, description="Who wrote the comment")
    created_at: datetime = Field(
        default_factory=utc_now, description="Creation timestamp (UTC)"
    )


class CommentCreate(BaseModel):
    """Schema for posting a comment. Blank text is accepted and ignored."""

    model_config = ConfigDict(extra="forbid")

    text: str = ""
