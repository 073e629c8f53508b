"""
Asset audit log table.

One row per recorded change to an asset: creation, lens mutation, derived
status change or appended comment. Snapshots are the JSON dump of the Asset
(or Comment) at that point.
"""

from datetime import timezone
from typing import Any, Dict

from sqlalchemy import JSON, Column, DateTime, Enum, Index, String, Text
from sqlalchemy.sql import func

from ..review.enums import AuditAction
from .base import Base

audit_action_enum = Enum(
    *[a.value for a in AuditAction],
    name="content_review_audit_action",
)


class AuditLogModel(Base):
    """A single entry in an asset's history."""

    __tablename__ = "content_review_audit_log"

    id = Column(String(36), primary_key=True)
    ts = Column(DateTime(timezone=True), nullable=False, default=func.now(), index=True)

    # Identity that made the change
    actor_id = Column(String(128), nullable=False, index=True)
    action = Column(audit_action_enum, nullable=False)
    asset_id = Column(String(128), nullable=False)

    before = Column(JSON, nullable=True)
    after = Column(JSON, nullable=True)
    note = Column(Text, nullable=True)

    __table_args__ = (Index("ix_content_review_audit_asset_ts", "asset_id", "ts"),)

    def to_dict(self) -> Dict[str, Any]:
        ts = self.ts
        if ts is not None and ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return {
            "id": self.id,
            "ts": ts.isoformat() if ts else None,
            "actor_id": self.actor_id,
            "action": self.action,
            "asset_id": self.asset_id,
            "before": self.before,
            "after": self.after,
            "note": self.note,
        }
