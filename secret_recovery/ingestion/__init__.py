"""Ingestion — JSON документ с долями → упорядоченный PointSet."""

from .loader import load_document, parse_share_document, points_from_document

__all__ = [
    "load_document",
    "parse_share_document",
    "points_from_document",
]
