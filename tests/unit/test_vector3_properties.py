"""
Property-тесты для Vector3 (hypothesis)

Проверяет алгебраические инварианты на случайных конечных векторах:
1. Точность создания (быстрый и валидирующий пути)
2. clone / negated / lerp / distance
3. Ортогональность векторного произведения
4. Единичная длина unit()
5. Неизменяемость
"""

import hypothesis as hyp
import pytest
from hypothesis import strategies as st

from src.core.domain import ZERO, ImmutableViolation, Vector3

# Ограничение модуля компоненты (произведения компонент конечны)
COMPONENT_LIMIT = 1e3

gen_component = st.floats(
    min_value=-COMPONENT_LIMIT,
    max_value=COMPONENT_LIMIT,
    allow_nan=False,
    allow_infinity=False,
)

gen_integral_component = st.integers(min_value=-10**6, max_value=10**6).map(float)


def gen_vector(components: st.SearchStrategy = gen_component) -> st.SearchStrategy:
    return st.tuples(components, components, components).map(lambda xyz: Vector3.of(*xyz))


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestConstructionProperties:
    """Свойства создания"""

    @hyp.given(x=gen_component, y=gen_component, z=gen_component)
    def test_fast_construction_keeps_values(self, x: float, y: float, z: float) -> None:
        """create → x/y/z возвращают переданные значения"""
        v = Vector3.create(x, y, z)
        assert (v.x, v.y, v.z) == (x, y, z)

    @hyp.given(x=gen_component, y=gen_component, z=gen_component)
    def test_validating_construction_keeps_values(self, x: float, y: float, z: float) -> None:
        """of(x, y, z) не изменяет конечные значения"""
        assert Vector3.of(x, y, z).to_tuple() == (x, y, z)

    @hyp.given(x=gen_component, y=gen_component)
    def test_pair_sequence_sets_zero_z(self, x: float, y: float) -> None:
        """Последовательность из 2 элементов → z = 0"""
        assert Vector3.of([x, y]).z == 0.0

    @hyp.given(value=gen_component)
    def test_scalar_broadcast(self, value: float) -> None:
        """Скаляр v → (v, v, v)"""
        assert Vector3.of(value).to_tuple() == (value, value, value)


# =============================================================================
# АЛГЕБРА
# =============================================================================


class TestAlgebraProperties:
    """Алгебраические инварианты"""

    @hyp.given(v=gen_vector())
    def test_clone_equals_and_is_distinct(self, v: Vector3) -> None:
        clone = v.clone()
        assert v.equals(clone)
        assert clone is not v

    @hyp.given(v=gen_vector())
    def test_plus_negated_is_zero(self, v: Vector3) -> None:
        assert v.plus(v.negated()).equals(ZERO)

    @hyp.given(a=gen_vector(), b=gen_vector())
    def test_cross_orthogonal_to_inputs(self, a: Vector3, b: Vector3) -> None:
        """a × b ортогонален a и b (в пределах ошибки округления)"""
        c = a.cross(b)
        tol = 1e-9 * (a.length() * a.length() * b.length() + a.length() * b.length() * b.length()) + 1e-12
        assert abs(c.dot(a)) <= tol
        assert abs(c.dot(b)) <= tol

    @hyp.given(v=gen_vector())
    def test_unit_has_length_one(self, v: Vector3) -> None:
        hyp.assume(v.length_squared() > 1e-12)
        assert v.unit().length() == pytest.approx(1.0, rel=1e-9)

    @hyp.given(a=gen_vector(), b=gen_vector())
    def test_lerp_at_zero_is_start(self, a: Vector3, b: Vector3) -> None:
        assert a.lerp(b, 0).equals(a)

    @hyp.given(a=gen_vector(), b=gen_vector())
    def test_lerp_at_one_is_target(self, a: Vector3, b: Vector3) -> None:
        """lerp(b, 1) ≈ b (a + (b - a) в общем случае округляется)"""
        assert a.lerp(b, 1).distance_to(b) <= 1e-9 * (a.length() + b.length())

    @hyp.given(a=gen_vector(gen_integral_component), b=gen_vector(gen_integral_component))
    def test_lerp_at_one_is_target_exactly_for_integral_vectors(
        self, a: Vector3, b: Vector3
    ) -> None:
        assert a.lerp(b, 1).equals(b)

    @hyp.given(a=gen_vector(), b=gen_vector())
    def test_distance_squared_matches_minus(self, a: Vector3, b: Vector3) -> None:
        assert a.distance_to_squared(b) == a.minus(b).length_squared()

    @hyp.given(v=gen_vector())
    def test_random_non_parallel_vector_is_axis_of_smallest_component(self, v: Vector3) -> None:
        seed = v.random_non_parallel_vector()
        components = [abs(c) for c in v.to_tuple()]
        expected_axis = components.index(min(components))

        assert seed.to_tuple() == tuple(1.0 if i == expected_axis else 0.0 for i in range(3))

        if not v.equals(ZERO):
            assert any(c != 0 for c in v.cross(seed).to_tuple())


# =============================================================================
# IMMUTABILITY
# =============================================================================


class TestImmutabilityProperties:
    """Неизменяемость для любых векторов"""

    @hyp.given(v=gen_vector(), component=st.sampled_from(["x", "y", "z"]), value=gen_component)
    def test_set_component_always_fails(self, v: Vector3, component: str, value: float) -> None:
        before = v.to_tuple()
        with pytest.raises(ImmutableViolation):
            setattr(v, component, value)
        assert v.to_tuple() == before
