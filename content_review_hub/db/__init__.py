"""
Database package for the Content Review Hub.
"""

from .audit_models import AuditLogModel
from .base import Base, get_db, get_engine, init_database
from .models import (
    ContentReviewAssetModel,
    ContentReviewCommentModel,
    asset_to_row,
    row_to_asset,
)

__all__ = [
    "Base",
    "get_db",
    "get_engine",
    "init_database",
    "AuditLogModel",
    "ContentReviewAssetModel",
    "ContentReviewCommentModel",
    "asset_to_row",
    "row_to_asset",
]
