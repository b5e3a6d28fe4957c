"""Tests for the cone frustum resolver."""
import math

import pytest

from platcalc.core.errors import CalculationError, DegenerateCone, InvalidInput
from platcalc.core.models import ConeInput


class TestReferenceCone:
    """D=200, d=100, H=150."""

    def test_slant_height(self, cone) -> None:
        res = cone.resolve(200, 100, 150)
        assert res.slant_height == pytest.approx(math.sqrt(50 ** 2 + 150 ** 2))
        assert res.slant_height == pytest.approx(158.11, abs=0.01)

    def test_radii(self, cone) -> None:
        res = cone.resolve(200, 100, 150)
        assert res.outer_radius == pytest.approx(316.23, abs=0.01)
        assert res.inner_radius == pytest.approx(158.11, abs=0.01)

    def test_arc_angle(self, cone) -> None:
        res = cone.resolve(200, 100, 150)
        assert res.arc_angle == pytest.approx(113.8, abs=0.1)

    def test_arc_length_matches_base_circumference(self, cone) -> None:
        res = cone.resolve(200, 100, 150)
        arc = math.radians(res.arc_angle) * res.outer_radius
        assert arc == pytest.approx(math.pi * 200)

    def test_resolve_input_record(self, cone) -> None:
        assert cone.resolve_input(ConeInput(200, 100, 150)) == cone.resolve(200, 100, 150)


class TestProperties:
    @pytest.mark.parametrize("a,b,h", [
        (200, 100, 150),
        (50, 400, 20),
        (1000, 999, 5),
        (10.5, 3.25, 100),
    ])
    def test_order_independent(self, cone, a, b, h) -> None:
        assert cone.resolve(a, b, h) == cone.resolve(b, a, h)

    @pytest.mark.parametrize("a,b,h", [
        (200, 100, 150),
        (50, 400, 20),
        (1000, 999, 5),
    ])
    def test_radius_difference_is_slant(self, cone, a, b, h) -> None:
        res = cone.resolve(a, b, h)
        assert res.outer_radius - res.inner_radius == pytest.approx(res.slant_height)
        assert res.outer_radius > res.inner_radius > 0
        assert 0 < res.arc_angle <= 360

    def test_flat_ring_approaches_full_circle(self, cone) -> None:
        # Altura mínima: o setor quase fecha 360°
        res = cone.resolve(200, 100, 1e-6)
        assert res.arc_angle == pytest.approx(360, abs=1e-3)


class TestFailures:
    def test_near_equal_diameters_is_cylinder(self, cone) -> None:
        with pytest.raises(DegenerateCone):
            cone.resolve(100.05, 100, 150)

    def test_just_outside_tolerance_is_a_cone(self, cone) -> None:
        res = cone.resolve(100.2, 100, 150)
        assert res.outer_radius > res.inner_radius

    @pytest.mark.parametrize("args", [
        (0, 100, 150),
        (200, -100, 150),
        (200, 100, 0),
        (float('inf'), 100, 150),
    ])
    def test_non_positive(self, cone, args) -> None:
        with pytest.raises(InvalidInput):
            cone.resolve(*args)

    def test_errors_are_value_errors(self, cone) -> None:
        with pytest.raises(ValueError):
            cone.resolve(100, 100, 100)
        assert issubclass(DegenerateCone, CalculationError)
