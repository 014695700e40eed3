"""Общие fixtures для тестов."""

import random

import pytest


def poly_eval(coeffs: list[int], x: int) -> int:
    """Значение полинома (коэффициенты от младшего к старшему) по схеме Горнера."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


@pytest.fixture
def rng() -> random.Random:
    """Детерминированный RNG для воспроизводимых тестов."""
    return random.Random(42)


@pytest.fixture
def quadratic_points() -> list[tuple[int, int]]:
    """Пять точек f(x) = 2x² + 3x + 5."""
    return [(x, poly_eval([5, 3, 2], x)) for x in range(1, 6)]


@pytest.fixture
def evaluate():
    """Функция вычисления полинома для property-тестов."""
    return poly_eval
