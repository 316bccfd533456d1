"""Tests for Vector3."""

import math

import pytest

from raymond.core.errors import DegenerateVectorError
from raymond.core.vector import Vector3


class TestVector3:

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, -5, 6)
        assert a + b == Vector3(5, -3, 9)
        assert a - b == Vector3(-3, 7, -3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a / 2 == Vector3(0.5, 1, 1.5)
        assert -a == Vector3(-1, -2, -3)
        assert a.add(b) == a + b
        assert a.subtract(b) == a - b
        assert a.scale(3) == a * 3

    def test_operations_do_not_mutate(self):
        a = Vector3(1, 2, 3)
        a + Vector3(1, 1, 1)
        a.unit()
        assert a == Vector3(1, 2, 3)

    def test_dot_and_length(self):
        assert Vector3(1, 2, 3).dot(Vector3(4, -5, 6)) == 12
        assert Vector3(3, 4, 0).length() == 5
        assert Vector3(0, 0, 0).length() == 0

    @pytest.mark.parametrize("v", [
        Vector3(1, 0, 0),
        Vector3(3, 4, 12),
        Vector3(-1e-3, 2e-3, 5e-4),
        Vector3(1e6, -2e6, 3e6),
        Vector3(0.1, 0.2, 0.3),
    ])
    def test_unit_has_length_one(self, v):
        assert v.unit().length() == pytest.approx(1.0, abs=1e-9)

    def test_unit_keeps_direction(self):
        u = Vector3(0, 3, 4).unit()
        assert u.x == 0
        assert u.y == pytest.approx(0.6)
        assert u.z == pytest.approx(0.8)

    def test_unit_of_zero_vector_raises(self):
        with pytest.raises(DegenerateVectorError, match="degenerate direction"):
            Vector3(0, 0, 0).unit()

    def test_degenerate_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Vector3(0, 0, 0).unit()

    def test_iteration_and_repr(self):
        assert list(Vector3(1, 2, 3)) == [1.0, 2.0, 3.0]
        assert repr(Vector3(1, 2, 3)) == "Vector3(1.0, 2.0, 3.0)"
        assert math.isclose(sum(Vector3(0.5, 0.25, 0.25)), 1.0)
