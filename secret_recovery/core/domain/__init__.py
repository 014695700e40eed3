"""
Domain models and value objects.

Contains Point, PointSet and the share document models.
"""

from secret_recovery.core.domain.point import Point
from secret_recovery.core.domain.point_set import PointSet
from secret_recovery.core.domain.share_document import (
    ShareDocument,
    ShareEntry,
    ShareKeys,
)

__all__ = [
    # Point model
    "Point",
    # PointSet model
    "PointSet",
    # Share document models
    "ShareDocument",
    "ShareEntry",
    "ShareKeys",
]
