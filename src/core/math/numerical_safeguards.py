"""
Numerical Safeguards — Float Primitives for Geometry

Модуль содержит численные примитивы, на которых построены векторные операции:
- Проверка конечности float (NaN/Inf детекция)
- Проверка "настоящего" вещественного числа (bool не считается числом)
- Деление по правилам IEEE-754 (±inf / NaN вместо ZeroDivisionError)
- min/max с распространением NaN
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление никогда не бросает исключение: x/0 → ±inf, 0/0 → NaN
2. Точное сравнение и сравнение с толерантностью разделены явно
3. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_real_number(value: Any) -> bool:
    """
    Проверка, является ли объект вещественным числом.

    bool формально является int в Python, но как компонента вектора
    или скаляр не имеет смысла и отвергается.

    Examples:
        >>> is_real_number(1.5)
        True
        >>> is_real_number(3)
        True
        >>> is_real_number(True)
        False
        >>> is_real_number("1.5")
        False
    """
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_numeric_scalar(value: Any) -> bool:
    """
    Проверка, может ли объект быть скаляром для broadcast (v → (v, v, v)).

    Шире is_real_number: принимает любые numbers.Number, включая
    decimal.Decimal, кроме bool и complex.

    Examples:
        >>> from decimal import Decimal
        >>> is_numeric_scalar(Decimal("1.5"))
        True
        >>> is_numeric_scalar(1 + 2j)
        False
        >>> is_numeric_scalar(False)
        False
    """
    return isinstance(value, numbers.Number) and not isinstance(value, (bool, complex))


# =============================================================================
# ДЕЛЕНИЕ IEEE-754
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    Python бросает ZeroDivisionError при делении float на 0.0; векторная
    алгебра вместо этого распространяет ±inf / NaN, как это делает
    арифметика с плавающей точкой.

    Правила при denominator == 0:
        - numerator == 0 или NaN → NaN
        - иначе → inf со знаком sign(numerator) * sign(denominator)
          (знак нуля учитывается: 1 / -0.0 → -inf)

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Результат деления (может быть inf или NaN)

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator):
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def ieee_min(a: float, b: float) -> float:
    """
    Минимум с распространением NaN (IEEE-754 minimum).

    Встроенный min() возвращает первый аргумент, если сравнение с NaN
    ложно, поэтому результат зависит от порядка аргументов.

    Examples:
        >>> ieee_min(1.0, 2.0)
        1.0
        >>> math.isnan(ieee_min(1.0, math.nan))
        True
        >>> math.isnan(ieee_min(math.nan, 1.0))
        True
    """
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return min(a, b)


def ieee_max(a: float, b: float) -> float:
    """Максимум с распространением NaN (см. ieee_min)."""
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return max(a, b)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Обёртка над math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
