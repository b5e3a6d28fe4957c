"""Tests for UnitManager."""
import math

import pytest

from platcalc.core.units import UnitManager


class TestUnitManager:
    def test_to_base(self) -> None:
        assert UnitManager.convert(1, 'in', 'length_to_mm') == pytest.approx(25.4)
        assert UnitManager.convert(2, 'm', 'length_to_mm') == pytest.approx(2000)

    def test_reverse(self) -> None:
        assert UnitManager.convert(304.8, 'ft', 'length_to_mm', reverse=True) == pytest.approx(1)

    def test_angles(self) -> None:
        assert UnitManager.convert(math.pi, 'rad', 'angle_to_deg') == pytest.approx(180)

    def test_unknown_unit(self) -> None:
        with pytest.raises(KeyError):
            UnitManager.convert(1, 'yd', 'length_to_mm')

    def test_unknown_category(self) -> None:
        with pytest.raises(KeyError):
            UnitManager.convert(1, 'mm', 'pressure_to_mpa')

    def test_units_for(self) -> None:
        assert UnitManager.units_for('angle_to_deg') == ['deg', 'rad']
