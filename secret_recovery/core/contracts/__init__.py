"""
Contract Validation Module

Валидация входных JSON документов против JSON Schema контрактов.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    ShareDocumentValidator,
    validate_share_document,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ShareDocumentValidator",
    # Functions
    "validate_share_document",
]
