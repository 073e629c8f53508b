"""
Asset history recording.

Entries are added to the caller's session and never committed here, so each
one lands in the same transaction as the write it describes and disappears
with it on rollback.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from ..review.enums import AuditAction
from ..review.primitives import generate_ulid, utc_now
from .audit_models import AuditLogModel


class AuditService:
    """Records and reads asset history.

    Usage:
        audit = AuditService(db_session)
        audit.log_create(asset.id, snapshot, actor_id=user_id)
        db_session.commit()
    """

    def __init__(self, db: Session):
        self.db = db

    def _log(
        self,
        action: AuditAction,
        asset_id: str,
        actor_id: str,
        before: Optional[Dict[str, Any]] = None,
        after: Optional[Dict[str, Any]] = None,
        note: Optional[str] = None,
    ) -> AuditLogModel:
        entry = AuditLogModel(
            id=generate_ulid(),
            ts=utc_now(),
            actor_id=actor_id,
            action=action.value,
            asset_id=asset_id,
            before=before,
            after=after,
            note=note,
        )
        self.db.add(entry)
        return entry

    def log_create(
        self,
        asset_id: str,
        after: Dict[str, Any],
        actor_id: str,
        note: Optional[str] = None,
    ) -> AuditLogModel:
        """Record a newly stored asset.

        Args:
            asset_id: ID of the asset
            after: Snapshot of the asset as stored
            actor_id: User id of the acting identity
            note: Optional human-readable note

        Returns:
            The pending AuditLogModel
        """
        return self._log(AuditAction.CREATED, asset_id, actor_id, after=after, note=note)

    def log_update(
        self,
        asset_id: str,
        before: Dict[str, Any],
        after: Dict[str, Any],
        actor_id: str,
        note: Optional[str] = None,
    ) -> AuditLogModel:
        """Record an overwrite with before/after snapshots."""
        return self._log(
            AuditAction.UPDATED, asset_id, actor_id, before=before, after=after, note=note
        )

    def log_status_change(
        self,
        asset_id: str,
        old_status: str,
        new_status: str,
        actor_id: str,
        note: Optional[str] = None,
    ) -> AuditLogModel:
        """Record a change of the derived asset status."""
        return self._log(
            AuditAction.STATUS_CHANGED,
            asset_id,
            actor_id,
            before={"status": old_status},
            after={"status": new_status},
            note=note,
        )

    def log_comment(
        self, asset_id: str, comment: Dict[str, Any], actor_id: str
    ) -> AuditLogModel:
        return self._log(AuditAction.COMMENTED, asset_id, actor_id, after=comment)

    def get_asset_history(self, asset_id: str, limit: int = 100) -> List[AuditLogModel]:
        """Entries for an asset, newest first."""
        return (
            self.db.query(AuditLogModel)
            .filter(AuditLogModel.asset_id == asset_id)
            .order_by(desc(AuditLogModel.ts), desc(AuditLogModel.id))
            .limit(limit)
            .all()
        )
