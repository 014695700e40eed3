"""
Тесты для доменных моделей: Point, PointSet, ShareDocument

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Сортировку точек и выбор первых k
4. Разбор документа с долями
"""

import pytest
from pydantic import ValidationError

from secret_recovery.core.domain import Point, PointSet, ShareDocument, ShareEntry, ShareKeys
from secret_recovery.core.errors import (
    DigitOutOfRangeError,
    InsufficientPointsError,
    ZeroDenominatorError,
)


# =============================================================================
# POINT
# =============================================================================


class TestPoint:
    """Тесты для модели Point"""

    def test_create(self) -> None:
        p = Point(x=1, y=2**200)
        assert p.as_pair() == (1, 2**200)

    def test_frozen(self) -> None:
        p = Point(x=1, y=2)
        with pytest.raises(ValidationError):
            p.x = 5

    def test_strict_int(self) -> None:
        """float и str не принимаются"""
        with pytest.raises(ValidationError):
            Point(x=1.0, y=2)
        with pytest.raises(ValidationError):
            Point(x="1", y=2)

    def test_equality(self) -> None:
        assert Point(x=1, y=2) == Point(x=1, y=2)


# =============================================================================
# POINT SET
# =============================================================================


class TestPointSet:
    """Тесты для модели PointSet"""

    @pytest.fixture
    def unsorted_set(self) -> PointSet:
        return PointSet(
            threshold=3,
            points=(Point(x=5, y=70), Point(x=2, y=19), Point(x=3, y=32), Point(x=1, y=10)),
        )

    def test_points_sorted_by_x(self, unsorted_set: PointSet) -> None:
        assert [p.x for p in unsorted_set.points] == [1, 2, 3, 5]

    def test_selected_first_k(self, unsorted_set: PointSet) -> None:
        assert [p.x for p in unsorted_set.selected()] == [1, 2, 3]

    def test_degree(self, unsorted_set: PointSet) -> None:
        assert unsorted_set.degree == 2

    def test_reconstruct_secret(self, unsorted_set: PointSet) -> None:
        """f(x) = 2x² + 3x + 5; точка x=5 неверна, но не выбирается"""
        assert unsorted_set.reconstruct_secret() == 5

    def test_insufficient(self) -> None:
        ps = PointSet(threshold=3, points=(Point(x=1, y=1),))
        assert not ps.is_sufficient()
        with pytest.raises(InsufficientPointsError):
            ps.selected()
        with pytest.raises(InsufficientPointsError):
            ps.reconstruct_secret()

    def test_duplicate_x_detected(self) -> None:
        ps = PointSet(threshold=2, points=(Point(x=1, y=1), Point(x=1, y=2)))
        with pytest.raises(ZeroDenominatorError):
            ps.reconstruct_secret()

    def test_threshold_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PointSet(threshold=0, points=())

    def test_frozen(self, unsorted_set: PointSet) -> None:
        with pytest.raises(ValidationError):
            unsorted_set.threshold = 1


# =============================================================================
# SHARE DOCUMENT
# =============================================================================


class TestShareEntry:
    """Тесты для модели ShareEntry"""

    def test_string_base(self) -> None:
        entry = ShareEntry(base="16", value="ff")
        assert entry.base == 16
        assert entry.to_point(3) == Point(x=3, y=255)

    def test_int_base(self) -> None:
        assert ShareEntry(base=2, value="111").to_point(1).y == 7

    @pytest.mark.parametrize("base", ["1", "37", "0", 40, "x"])
    def test_invalid_base(self, base) -> None:
        with pytest.raises(ValidationError):
            ShareEntry(base=base, value="1")

    def test_value_out_of_range(self) -> None:
        with pytest.raises(DigitOutOfRangeError):
            ShareEntry(base="8", value="9").to_point(1)


class TestShareDocument:
    """Тесты для модели ShareDocument"""

    @pytest.fixture
    def raw_document(self) -> dict:
        return {
            "keys": {"n": 4, "k": 3},
            "1": {"base": "10", "value": "4"},
            "2": {"base": "2", "value": "111"},
            "3": {"base": "10", "value": "12"},
            "6": {"base": "4", "value": "213"},
        }

    def test_split_labels(self, raw_document: dict) -> None:
        doc = ShareDocument.model_validate(raw_document)
        assert doc.keys == ShareKeys(n=4, k=3)
        assert [x for x, _ in doc.shares] == [1, 2, 3, 6]
        assert doc.threshold == 3
        assert doc.declared_count_matches()

    def test_to_points(self, raw_document: dict) -> None:
        doc = ShareDocument.model_validate(raw_document)
        points = {p.x: p.y for p in doc.to_points()}
        assert points == {1: 4, 2: 7, 3: 12, 6: 39}

    def test_count_mismatch(self, raw_document: dict) -> None:
        raw_document["keys"]["n"] = 10
        assert not ShareDocument.model_validate(raw_document).declared_count_matches()

    def test_non_integer_label(self, raw_document: dict) -> None:
        raw_document["abc"] = {"base": "10", "value": "1"}
        with pytest.raises(ValidationError, match="share label must be an integer"):
            ShareDocument.model_validate(raw_document)

    def test_duplicate_label_kept(self, raw_document: dict) -> None:
        """'1' и '01' дают одинаковый x; обе доли сохраняются"""
        raw_document["01"] = {"base": "10", "value": "1"}
        doc = ShareDocument.model_validate(raw_document)
        assert [x for x, _ in doc.shares] == [1, 2, 3, 6, 1]
        assert not doc.declared_count_matches()

    def test_missing_keys(self) -> None:
        with pytest.raises(ValidationError):
            ShareDocument.model_validate({"1": {"base": "10", "value": "1"}})
