"""
Vector3 — Immutable 3D vector value object

Immutable Pydantic модель точки или направления в трёхмерном пространстве.
Базовый геометрический примитив для CSG-операций.

Два пути создания:
- Валидирующий (of / from_* / Vector3(x=..., y=...)): для внешних данных,
  каждая компонента проверяется на конечность
- Быстрый (create): без валидации, для внутренних вычислений над уже
  валидными векторами

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидирующее создание никогда не возвращает вектор с NaN/Inf
2. Компоненты не изменяются после создания (ImmutableViolation)
3. Все алгебраические операции возвращают новый экземпляр
4. Деление на ноль и нормализация нулевого вектора дают NaN/Inf (IEEE-754)
"""

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, Protocol, runtime_checkable

from pydantic import (
    BaseModel,
    Field,
    FiniteFloat,
    ValidationError,
    field_validator,
    model_validator,
)

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ieee_divide,
    ieee_max,
    ieee_min,
    is_close,
    is_numeric_scalar,
    is_real_number,
    validate_non_negative,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Невалидные аргументы векторной операции.

    Возникает при:
    - неподдерживаемой форме входных данных при создании
    - неверном количестве элементов последовательности
    - компоненте, не являющейся конечным числом
    - операнде неверного типа (не Vector3 / не скаляр)
    """


class ImmutableViolation(AttributeError):
    """Попытка изменить или удалить атрибут immutable вектора."""


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class VectorTolerance:
    """Толерантности для приближённого сравнения векторов.

    Используется в Vector3.almost_equals. Точное сравнение (equals)
    толерантность не использует.
    """

    # Относительная толерантность на компоненту
    rel_tol: float = EPS_FLOAT_COMPARE_REL

    # Абсолютная толерантность на компоненту
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        validate_non_negative(self.rel_tol, "rel_tol")
        validate_non_negative(self.abs_tol, "abs_tol")


DEFAULT_TOLERANCE: Final[VectorTolerance] = VectorTolerance()


# =============================================================================
# COLLABORATORS
# =============================================================================


@runtime_checkable
class Matrix4x4Like(Protocol):
    """
    Матрица 4x4, умеющая умножать вектор-строку слева.

    Вектор интерпретируется как строка 1x3 (row-vector convention).
    """

    def left_multiply_1x3_vector(self, vector: "Vector3") -> "Vector3": ...


# =============================================================================
# VECTOR3 MODEL
# =============================================================================


class Vector3(BaseModel):
    """
    Трёхмерный вектор.

    Immutable модель (frozen=True): любые "изменения" создают новый
    экземпляр через быстрый путь create().

    Vector3(...) принимает те же позиционные формы, что и of(),
    либо именованные компоненты x=, y=[, z=] (но не смесь).

    Examples:
        >>> Vector3.of(1, 2, 3)
        Vector3(x=1.0, y=2.0, z=3.0)
        >>> Vector3.of([1, 2])
        Vector3(x=1.0, y=2.0, z=0.0)
        >>> Vector3.of({"x": 1, "y": 2, "z": 3})
        Vector3(x=1.0, y=2.0, z=3.0)
        >>> Vector3(1, 2)
        Vector3(x=1.0, y=2.0, z=0.0)
        >>> Vector3.of(5)
        Vector3(x=5.0, y=5.0, z=5.0)
    """

    x: FiniteFloat = Field(..., description="Компонента X")
    y: FiniteFloat = Field(..., description="Компонента Y")
    z: FiniteFloat = Field(0.0, description="Компонента Z (default: 0)")

    # revalidate_instances: копия через of(vector) повторно проверяет компоненты
    model_config = {"frozen": True, "revalidate_instances": "always"}

    def __init__(self, *args: Any, **data: Any) -> None:
        if args:
            if data:
                raise InvalidArgument(
                    "Vector3() takes positional or keyword components, not both"
                )
            data = _data_from_positional(args)
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _invalid_argument(data, exc) from exc

    # -------------------------------------------------------------------------
    # Shape resolution
    # -------------------------------------------------------------------------

    @model_validator(mode="before")
    @classmethod
    def resolve_shape(cls, data: Any) -> Any:
        """
        Приведение поддерживаемых форм входа к dict {x, y, z}.

        Поддерживаются: mapping (x/y[/z] или _x/_y[/_z]), последовательность
        из 2 или 3 элементов, скаляр (broadcast), объект с атрибутами x/y[/z].
        Экземпляры Vector3 сюда приходят уже как dict своих полей
        (revalidate_instances="always").
        """
        if isinstance(data, Mapping):
            return _components_from_mapping(data)

        if isinstance(data, str) or is_numeric_scalar(data):
            return {"x": data, "y": data, "z": data}

        if isinstance(data, Sequence) and not isinstance(data, (bytes, bytearray)):
            if len(data) not in (2, 3):
                raise ValueError(
                    f"sequence must have 2 or 3 elements, got {len(data)}"
                )
            z = data[2] if len(data) == 3 else 0.0
            return {"x": data[0], "y": data[1], "z": z}

        if hasattr(data, "x") and hasattr(data, "y"):
            return {"x": data.x, "y": data.y, "z": getattr(data, "z", 0.0)}

        raise ValueError(f"unsupported input of type {type(data).__name__}")

    @field_validator("x", "y", "z", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        """bool не является допустимой компонентой (True/False → 1/0 запрещено)."""
        if isinstance(v, bool):
            raise ValueError("boolean is not a valid vector component")
        return v

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, *args: Any) -> "Vector3":
        """
        Валидирующее создание вектора из любой поддерживаемой формы.

        Args:
            *args: (x, y, z) | (x, y) | (vector | sequence | mapping | scalar)

        Returns:
            Новый Vector3 с конечными компонентами

        Raises:
            InvalidArgument: Неподдерживаемая форма или невалидная компонента
        """
        if len(args) == 3:
            return cls.from_components(*args)
        if len(args) == 2:
            return cls.from_components(args[0], args[1])
        if len(args) == 1:
            return cls._validated(args[0])

        raise InvalidArgument(
            f"Vector3.of() takes 1, 2 or 3 arguments, got {len(args)}"
        )

    @classmethod
    def from_components(cls, x: Any, y: Any, z: Any = 0.0) -> "Vector3":
        """Валидирующее создание из отдельных компонент (z по умолчанию 0)."""
        return cls._validated({"x": x, "y": y, "z": z})

    @classmethod
    def from_sequence(cls, values: Sequence[Any]) -> "Vector3":
        """
        Валидирующее создание из последовательности [x, y] или [x, y, z].

        Raises:
            InvalidArgument: Не последовательность или длина не 2/3
        """
        if isinstance(values, (str, bytes, bytearray)) or not isinstance(
            values, Sequence
        ):
            raise InvalidArgument(
                f"Vector3.from_sequence() expects a sequence, got {type(values).__name__}"
            )
        return cls._validated(values)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Vector3":
        """
        Валидирующее создание из mapping с ключами x/y[/z].

        Ключи _x/_y[/_z] также принимаются (legacy-формат сериализованных
        векторов).
        """
        if not isinstance(values, Mapping):
            raise InvalidArgument(
                f"Vector3.from_mapping() expects a mapping, got {type(values).__name__}"
            )
        return cls._validated(values)

    @classmethod
    def from_scalar(cls, value: Any) -> "Vector3":
        """Валидирующее создание (value, value, value)."""
        return cls._validated({"x": value, "y": value, "z": value})

    @classmethod
    def create(cls, x: float, y: float, z: float) -> "Vector3":
        """
        Быстрое создание без валидации.

        Компоненты сохраняются как есть. Только для уже валидных данных:
        внешний ввод должен идти через of() / from_*().
        """
        return cls.model_construct(x=x, y=y, z=z)

    @classmethod
    def _validated(cls, data: Any) -> "Vector3":
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise _invalid_argument(data, exc) from exc

    # -------------------------------------------------------------------------
    # Immutability
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutableViolation(f"Vector3 is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise ImmutableViolation(f"Vector3 is immutable: cannot delete '{name}'")

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def clone(self) -> "Vector3":
        return Vector3.create(self.x, self.y, self.z)

    def negated(self) -> "Vector3":
        return Vector3.create(-self.x, -self.y, -self.z)

    def abs(self) -> "Vector3":
        return Vector3.create(abs(self.x), abs(self.y), abs(self.z))

    def plus(self, other: "Vector3") -> "Vector3":
        other = _require_vector(other, "plus")
        return Vector3.create(self.x + other.x, self.y + other.y, self.z + other.z)

    def minus(self, other: "Vector3") -> "Vector3":
        other = _require_vector(other, "minus")
        return Vector3.create(self.x - other.x, self.y - other.y, self.z - other.z)

    def times(self, scalar: float) -> "Vector3":
        scalar = _require_scalar(scalar, "times")
        return Vector3.create(self.x * scalar, self.y * scalar, self.z * scalar)

    def divided_by(self, scalar: float) -> "Vector3":
        """
        Деление на скаляр.

        Деление на ноль не бросает исключение: компоненты становятся
        ±inf или NaN по правилам IEEE-754.
        """
        scalar = _require_scalar(scalar, "divided_by")
        return Vector3.create(
            ieee_divide(self.x, scalar),
            ieee_divide(self.y, scalar),
            ieee_divide(self.z, scalar),
        )

    def dot(self, other: "Vector3") -> float:
        other = _require_vector(other, "dot")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        other = _require_vector(other, "cross")
        return Vector3.create(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit(self) -> "Vector3":
        """Единичный вектор того же направления (NaN для нулевого вектора)."""
        return self.divided_by(self.length())

    def lerp(self, target: "Vector3", t: float) -> "Vector3":
        """
        Линейная интерполяция: self + (target - self) * t.

        t = 0 → self, t = 1 → target. t вне [0, 1] экстраполирует.
        """
        target = _require_vector(target, "lerp")
        return self.plus(target.minus(self).times(t))

    def distance_to(self, other: "Vector3") -> float:
        return self.minus(other).length()

    def distance_to_squared(self, other: "Vector3") -> float:
        return self.minus(other).length_squared()

    def equals(self, other: "Vector3") -> bool:
        """Точное покомпонентное равенство (без epsilon)."""
        other = _require_vector(other, "equals")
        return self.x == other.x and self.y == other.y and self.z == other.z

    def almost_equals(
        self, other: "Vector3", tolerance: VectorTolerance | None = None
    ) -> bool:
        """
        Покомпонентное сравнение с толерантностью.

        Args:
            other: Второй вектор
            tolerance: Толерантности (default: DEFAULT_TOLERANCE)

        Returns:
            True если все три компоненты близки
        """
        other = _require_vector(other, "almost_equals")
        tol = tolerance or DEFAULT_TOLERANCE
        return all(
            is_close(a, b, rel_tol=tol.rel_tol, abs_tol=tol.abs_tol)
            for a, b in zip(self.to_tuple(), other.to_tuple())
        )

    def min(self, other: "Vector3") -> "Vector3":
        """Покомпонентный минимум; NaN в любом из векторов даёт NaN."""
        other = _require_vector(other, "min")
        return Vector3.create(
            ieee_min(self.x, other.x),
            ieee_min(self.y, other.y),
            ieee_min(self.z, other.z),
        )

    def max(self, other: "Vector3") -> "Vector3":
        other = _require_vector(other, "max")
        return Vector3.create(
            ieee_max(self.x, other.x),
            ieee_max(self.y, other.y),
            ieee_max(self.z, other.z),
        )

    def random_non_parallel_vector(self) -> "Vector3":
        """
        Координатная ось, гарантированно не параллельная вектору.

        Выбирается ось наименьшей по модулю компоненты (при равенстве:
        x, затем y, затем z). Используется как затравка для построения
        ортогонального базиса через cross().
        """
        a = self.abs()
        if a.x <= a.y and a.x <= a.z:
            return Vector3.create(1.0, 0.0, 0.0)
        if a.y <= a.x and a.y <= a.z:
            return Vector3.create(0.0, 1.0, 0.0)
        return Vector3.create(0.0, 0.0, 1.0)

    def multiply4x4(self, matrix: Matrix4x4Like) -> "Vector3":
        """
        Умножение вектора-строки на матрицу 4x4 справа.

        Вся матричная логика находится в самой матрице.

        Raises:
            InvalidArgument: Объект не реализует left_multiply_1x3_vector
        """
        if not isinstance(matrix, Matrix4x4Like):
            raise InvalidArgument(
                f"multiply4x4() expects a 4x4 matrix, got {type(matrix).__name__}"
            )
        return matrix.left_multiply_1x3_vector(self)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any) -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> "Vector3":
        return self.negated()

    def __mul__(self, scalar: Any) -> "Vector3":
        if not is_real_number(scalar):
            return NotImplemented
        return self.times(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Any) -> "Vector3":
        if not is_real_number(scalar):
            return NotImplemented
        return self.divided_by(scalar)


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[Vector3] = Vector3.create(0.0, 0.0, 0.0)
UNIT_X: Final[Vector3] = Vector3.create(1.0, 0.0, 0.0)
UNIT_Y: Final[Vector3] = Vector3.create(0.0, 1.0, 0.0)
UNIT_Z: Final[Vector3] = Vector3.create(0.0, 0.0, 1.0)


# =============================================================================
# HELPERS
# =============================================================================


def _components_from_mapping(data: Mapping[str, Any]) -> dict[str, Any]:
    if "x" in data and "y" in data:
        return {"x": data["x"], "y": data["y"], "z": data.get("z", 0.0)}

    # legacy: ключи внутреннего представления
    if "_x" in data and "_y" in data:
        return {"x": data["_x"], "y": data["_y"], "z": data.get("_z", 0.0)}

    raise ValueError("mapping must define 'x' and 'y' (or '_x' and '_y')")


def _data_from_positional(args: tuple[Any, ...]) -> dict[str, Any]:
    if len(args) == 3:
        return {"x": args[0], "y": args[1], "z": args[2]}
    if len(args) == 2:
        return {"x": args[0], "y": args[1]}
    if len(args) == 1:
        return Vector3._validated(args[0]).model_dump()

    raise InvalidArgument(
        f"Vector3() takes 1, 2 or 3 positional arguments, got {len(args)}"
    )


def _invalid_argument(data: Any, exc: ValidationError) -> InvalidArgument:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'input'}: {err['msg']}"
        for err in exc.errors()
    )
    logger.debug("Rejected Vector3 input %r: %s", data, details)
    return InvalidArgument(f"Invalid Vector3 arguments: {details}")


def _require_vector(value: Any, operation: str) -> Vector3:
    if not isinstance(value, Vector3):
        raise InvalidArgument(
            f"{operation}() expects a Vector3, got {type(value).__name__}"
        )
    return value


def _require_scalar(value: Any, operation: str) -> float:
    if not is_real_number(value):
        raise InvalidArgument(
            f"{operation}() expects a real number, got {type(value).__name__}"
        )
    try:
        return float(value)
    except OverflowError as exc:
        raise InvalidArgument(
            f"{operation}() scalar is out of float range: {value!r:.40}"
        ) from exc
