"""Tests for the folded profile resolver."""
import pytest

from platcalc.config import DEFAULT_INPUTS
from platcalc.core.errors import InvalidInput
from platcalc.core.models import ProfileLeg


class TestProfile:
    def test_l_profile(self, profile) -> None:
        res = profile.resolve([ProfileLeg(100, 0), ProfileLeg(50, 90)])
        assert res.developed_width == 150
        assert res.points[0] == (0.0, 0.0)
        assert res.points[1] == pytest.approx((100.0, 0.0))
        assert res.points[2] == pytest.approx((100.0, 50.0))
        assert res.width == pytest.approx(100)
        assert res.height == pytest.approx(50)
        assert res.bend_count == 1
        assert res.area_m2 is None

    def test_first_angle_ignored(self, profile) -> None:
        a = profile.resolve([ProfileLeg(100, 0), ProfileLeg(50, 90)])
        b = profile.resolve([ProfileLeg(100, 45), ProfileLeg(50, 90)])
        assert a.points == b.points

    def test_area(self, profile) -> None:
        res = profile.resolve([ProfileLeg(100, 0), ProfileLeg(50, 90)], profile_length=2000)
        assert res.area_m2 == pytest.approx(0.3)

    def test_default_window_flashing(self, profile) -> None:
        legs = [ProfileLeg(length, angle) for length, angle in DEFAULT_INPUTS['profile']['legs']]
        res = profile.resolve(legs)
        assert res.developed_width == pytest.approx(155)
        assert len(res.points) == 5
        assert res.bend_count == 3

    def test_straight_legs_have_no_bends(self, profile) -> None:
        res = profile.resolve([ProfileLeg(10, 0), ProfileLeg(20, 0)])
        assert res.bend_count == 0
        assert res.height == pytest.approx(0)


class TestProfileFailures:
    def test_empty(self, profile) -> None:
        with pytest.raises(InvalidInput):
            profile.resolve([])

    def test_negative_length(self, profile) -> None:
        with pytest.raises(InvalidInput):
            profile.resolve([ProfileLeg(-1, 0)])

    def test_nan_angle(self, profile) -> None:
        with pytest.raises(InvalidInput):
            profile.resolve([ProfileLeg(10, 0), ProfileLeg(10, float('nan'))])

    def test_non_positive_length_for_area(self, profile) -> None:
        with pytest.raises(InvalidInput):
            profile.resolve([ProfileLeg(10, 0)], profile_length=0)
