"""
Lagrange — Точная интерполяция значения f(0)

Для рабочего набора P = points[:k] (точки уже отсортированы по x):

    w_i(0) = Π_{j≠i} (0 - x_j) / (x_i - x_j)
    f(0)   = Σ_i y_i * w_i(0)

Вся арифметика — int и Fraction, без float.
Числитель и знаменатель базисного веса сокращаются на gcd после каждого
умножения, чтобы ограничить рост промежуточных чисел при больших k.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Совпадающие x среди P → den == 0 → ZeroDenominatorError
2. Не-целая сумма → NonIntegerResultError (точки не на целочисленном полиноме)
3. Детерминированность: результат зависит только от входа
"""

import logging
from typing import Sequence

from secret_recovery.config import InterpolationConfig
from secret_recovery.core.errors import InsufficientPointsError
from secret_recovery.core.math.fraction import Fraction, gcd

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = InterpolationConfig()


def basis_weight_at_zero(
    xs: Sequence[int], i: int, reduce: bool = True
) -> tuple[int, int]:
    """
    Базисный вес Лагранжа w_i(0) в виде пары (num, den).

    Args:
        xs: x-координаты рабочего набора
        i: Индекс точки, для которой считается вес
        reduce: Сокращать num/den на gcd после каждого шага

    Returns:
        (num, den) такие, что w_i(0) = num / den. den == 0 при совпадающих x.

    Examples:
        >>> basis_weight_at_zero([1, 2, 3], 0)
        (3, 1)
    """
    xi = xs[i]
    num = 1
    den = 1
    for j, xj in enumerate(xs):
        if j == i:
            continue
        num *= -xj
        den *= xi - xj
        if reduce:
            g = gcd(num, den)
            if g > 1:
                num //= g
                den //= g
    return num, den


def reconstruct_at_zero(
    points: Sequence[tuple[int, int]],
    k: int,
    config: InterpolationConfig | None = None,
) -> int:
    """
    Восстановление свободного члена f(0) по первым k точкам.

    Args:
        points: Пары (x, y), отсортированные по возрастанию x
        k: Порог (количество используемых точек), k >= 1
        config: Конфигурация интерполяции (default: InterpolationConfig())

    Returns:
        Точное целое значение f(0)

    Raises:
        InsufficientPointsError: если k < 1 или len(points) < k
        ZeroDenominatorError: совпадающие x среди первых k точек
        NonIntegerResultError: сумма не является целым числом

    Examples:
        >>> reconstruct_at_zero([(1, 10), (2, 19), (3, 32)], 3)
        5
    """
    config = config or _DEFAULT_CONFIG
    if k < 1 or len(points) < k:
        raise InsufficientPointsError(max(k, 1), len(points))

    selected = points[:k]
    xs = [x for x, _ in selected]
    logger.debug("Interpolating at x=0 with k=%d, xs=%s", k, xs)

    total = Fraction.from_int(0)
    for i, (_, yi) in enumerate(selected):
        num, den = basis_weight_at_zero(xs, i, reduce=config.reduce_intermediate)
        total = total.add(Fraction(yi * num, den))

    return total.to_exact_integer()
