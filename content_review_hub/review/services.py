"""
Content Review Storage Service.

User-scoped record store for assets and comments. Assets are upserted by id
with their lens reviews embedded; comments are append-only. Every write is
a single transaction that also carries its audit entries.

Concurrent writers are not reconciled: the last upsert of an asset wins.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import structlog
from sqlalchemy import asc, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db.audit_service import AuditService
from ..db.models import (
    ContentReviewAssetModel,
    ContentReviewCommentModel,
    asset_to_row,
    comment_from_row,
    row_to_asset,
)
from .asset import Asset
from .comment import Comment
from .primitives import utc_now

logger = structlog.get_logger()


class PersistenceError(Exception):
    """Raised when the store could not complete a read or write."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        self.message = f"Content review store failed during {operation}: {detail}"
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": "PERSISTENCE_FAILED",
            "operation": self.operation,
            "message": self.message,
        }


class AssetStore(ABC):
    """Abstract storage collaborator used by the review hub."""

    @abstractmethod
    def list_assets(self, user_id: str) -> List[Asset]:
        """List a user's assets, most recently updated first."""
        pass

    @abstractmethod
    def get_asset(self, user_id: str, asset_id: str) -> Optional[Asset]:
        """Get one of a user's assets by id."""
        pass

    @abstractmethod
    def insert_assets(self, user_id: str, assets: List[Asset]) -> None:
        """Insert several new assets."""
        pass

    @abstractmethod
    def upsert_asset(self, user_id: str, asset: Asset, note: Optional[str] = None) -> Asset:
        """Insert or overwrite an asset by id."""
        pass

    @abstractmethod
    def insert_comment(self, user_id: str, comment: Comment) -> Comment:
        """Append a comment and return it as stored."""
        pass

    @abstractmethod
    def list_comments(self, asset_id: str) -> List[Comment]:
        """List an asset's comments, oldest first."""
        pass

    @abstractmethod
    def asset_history(self, asset_id: str, limit: int = 100) -> List[Dict[str, Any]]:
        """Audit entries for an asset, newest first."""
        pass


def _snapshot(asset: Asset) -> Dict[str, Any]:
    return asset.model_dump(mode="json")


class SqlAssetStore(AssetStore):
    """SQLAlchemy implementation of AssetStore."""

    def __init__(self, db: Session, audit: Optional[AuditService] = None):
        self.db = db
        self.audit = audit or AuditService(db)

    def _fail(self, operation: str, exc: SQLAlchemyError, **context: Any) -> PersistenceError:
        self.db.rollback()
        logger.error("store_operation_failed", operation=operation, error=str(exc), **context)
        return PersistenceError(operation, str(exc))

    def _get_row(self, user_id: str, asset_id: str) -> Optional[ContentReviewAssetModel]:
        return (
            self.db.query(ContentReviewAssetModel)
            .filter(
                ContentReviewAssetModel.id == asset_id,
                ContentReviewAssetModel.user_id == user_id,
            )
            .first()
        )

    def list_assets(self, user_id: str) -> List[Asset]:
        """List a user's assets, most recently updated first."""
        try:
            rows = (
                self.db.query(ContentReviewAssetModel)
                .filter(ContentReviewAssetModel.user_id == user_id)
                .order_by(desc(ContentReviewAssetModel.updated_at))
                .all()
            )
        except SQLAlchemyError as e:
            raise self._fail("list_assets", e, user_id=user_id) from e
        return [row_to_asset(row) for row in rows]

    def get_asset(self, user_id: str, asset_id: str) -> Optional[Asset]:
        """Get one of a user's assets by id."""
        try:
            row = self._get_row(user_id, asset_id)
        except SQLAlchemyError as e:
            raise self._fail("get_asset", e, user_id=user_id, asset_id=asset_id) from e
        return row_to_asset(row) if row else None

    def insert_assets(self, user_id: str, assets: List[Asset]) -> None:
        """Insert several new assets in one transaction."""
        now = utc_now()
        try:
            for asset in assets:
                self.db.add(ContentReviewAssetModel(**asset_to_row(asset, user_id), updated_at=now))
                self.audit.log_create(asset.id, _snapshot(asset), actor_id=user_id)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("insert_assets", e, user_id=user_id, count=len(assets)) from e

    def upsert_asset(self, user_id: str, asset: Asset, note: Optional[str] = None) -> Asset:
        """Insert or overwrite an asset by id.

        A derived status change is logged as its own audit entry next to the
        update entry.
        """
        try:
            row = self._get_row(user_id, asset.id)
            values = asset_to_row(asset, user_id)
            if row is None:
                self.db.add(ContentReviewAssetModel(**values, updated_at=utc_now()))
                self.audit.log_create(asset.id, _snapshot(asset), actor_id=user_id, note=note)
            else:
                before = row_to_asset(row)
                for key, value in values.items():
                    setattr(row, key, value)
                row.updated_at = utc_now()
                self.audit.log_update(
                    asset.id,
                    before=_snapshot(before),
                    after=_snapshot(asset),
                    actor_id=user_id,
                    note=note,
                )
                if before.status != asset.status:
                    self.audit.log_status_change(
                        asset.id,
                        old_status=before.status.value,
                        new_status=asset.status.value,
                        actor_id=user_id,
                        note=note,
                    )
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("upsert_asset", e, user_id=user_id, asset_id=asset.id) from e
        return asset

    def insert_comment(self, user_id: str, comment: Comment) -> Comment:
        """Append a comment and return it as stored."""
        try:
            row = ContentReviewCommentModel(
                id=comment.id,
                asset_id=comment.asset_id,
                user_id=user_id,
                author=comment.author,
                text=comment.text,
                created_at=comment.created_at,
            )
            self.db.add(row)
            self.audit.log_comment(
                comment.asset_id, comment.model_dump(mode="json"), actor_id=user_id
            )
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            raise self._fail(
                "insert_comment", e, user_id=user_id, asset_id=comment.asset_id
            ) from e
        return comment_from_row(row)

    def list_comments(self, asset_id: str) -> List[Comment]:
        """List an asset's comments, oldest first."""
        try:
            rows = (
                self.db.query(ContentReviewCommentModel)
                .filter(ContentReviewCommentModel.asset_id == asset_id)
                .order_by(
                    asc(ContentReviewCommentModel.created_at),
                    asc(ContentReviewCommentModel.id),
                )
                .all()
            )
        except SQLAlchemyError as e:
            raise self._fail("list_comments", e, asset_id=asset_id) from e
        return [comment_from_row(row) for row in rows]

    def asset_history(self, asset_id: str, limit: int = 100) -> List[Dict[str, Any]]:
        """Audit entries for an asset, newest first."""
        try:
            entries = self.audit.get_asset_history(asset_id, limit=limit)
        except SQLAlchemyError as e:
            raise self._fail("asset_history", e, asset_id=asset_id) from e
        return [entry.to_dict() for entry in entries]
