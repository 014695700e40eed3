"""
Loader — Разбор JSON документа с долями в упорядоченный PointSet

Этапы:
1. Разбор JSON текста (пустой ввод → None)
2. Проверка контракта share_document.json (jsonschema)
3. Построение ShareDocument (pydantic)
4. Декодирование значений (base 2..36) и сортировка по x

Несовпадение keys.n с числом долей не является ошибкой: восстановление
идёт по первым k точкам, о расхождении пишется WARNING.
"""

import json
import logging
from typing import Any, Dict

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from secret_recovery.core.contracts import ShareDocumentValidator
from secret_recovery.core.domain import PointSet, ShareDocument
from secret_recovery.core.errors import ShareDocumentError

logger = logging.getLogger(__name__)


def load_document(text: str) -> Dict[str, Any] | None:
    """
    Разбор JSON текста.

    Returns:
        dict документа или None для пустого ввода

    Raises:
        ShareDocumentError: невалидный JSON или верхний уровень не объект
    """
    text = text.strip()
    if not text:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ShareDocumentError(f"Malformed JSON: {e}") from e
    if not isinstance(data, dict):
        raise ShareDocumentError(f"Share document must be a JSON object, got {type(data).__name__}")
    return data


def parse_share_document(data: Dict[str, Any]) -> ShareDocument:
    """
    Проверка контракта и построение модели документа.

    Raises:
        ShareDocumentError: нарушение JSON Schema или pydantic валидации
    """
    try:
        ShareDocumentValidator().validate(data)
    except SchemaValidationError as e:
        path = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise ShareDocumentError(f"Contract violation at {path}: {e.message}") from e

    try:
        return ShareDocument.model_validate(data)
    except ValidationError as e:
        raise ShareDocumentError(f"Invalid share document: {e}") from e


def points_from_document(data: Dict[str, Any]) -> PointSet:
    """
    Документ → PointSet (точки отсортированы по x).

    Raises:
        ShareDocumentError: невалидный документ
        InvalidDigitError, DigitOutOfRangeError: невалидное значение доли
    """
    document = parse_share_document(data)

    if not document.declared_count_matches():
        logger.warning(
            "Declared share count n=%d differs from %d provided shares; "
            "using the first k=%d by ascending x",
            document.keys.n,
            len(document.shares),
            document.threshold,
        )

    point_set = PointSet(threshold=document.threshold, points=tuple(document.to_points()))
    logger.debug(
        "Loaded %d points, threshold k=%d", len(point_set.points), point_set.threshold
    )
    return point_set
