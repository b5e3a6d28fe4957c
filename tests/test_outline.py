"""Tests for flat-pattern outlines."""
import numpy as np
import pytest

from platcalc.core.models import ProfileLeg
from platcalc.core.outline import (
    annular_sector,
    cone_outline,
    profile_outline,
    segment_outline,
    square_to_round_outline,
)


class TestAnnularSector:
    def test_closed(self) -> None:
        x, y = annular_sector(300, 150, 120, steps=30)
        assert x[0] == pytest.approx(x[-1])
        assert y[0] == pytest.approx(y[-1])
        assert len(x) == 1 + 2 * 31

    def test_points_on_radii(self) -> None:
        x, y = annular_sector(300, 150, 120, steps=30)
        r = np.hypot(x, y)
        assert np.allclose(r[1:32], 300)
        assert np.allclose(r[32:], 150)

    def test_symmetric_about_negative_y(self) -> None:
        x, y = annular_sector(300, 150, 90, steps=30)
        assert x[1] == pytest.approx(-x[31])
        assert np.all(y[1:32] < 0)


class TestResultOutlines:
    def test_cone(self, cone) -> None:
        res = cone.resolve(200, 100, 150)
        x, y = cone_outline(res)
        assert np.hypot(x, y).max() == pytest.approx(res.outer_radius)

    def test_square_to_round(self, square_to_round) -> None:
        res = square_to_round.resolve(200, 200, 100, 150)
        x, y = square_to_round_outline(res)
        assert np.hypot(x, y).min() == pytest.approx(res.inner_arc_radius)

    def test_segment(self, segment_bend) -> None:
        res = segment_bend.resolve(100, 150, 90, 3)
        x, y = segment_outline(res)
        assert len(x) == 25 + 3
        assert (x[-1], y[-1]) == (x[0], y[0])
        assert y.max() == pytest.approx(res.max_height)
        assert x.max() == pytest.approx(res.circumference)

    def test_profile(self, profile) -> None:
        res = profile.resolve([ProfileLeg(100, 0), ProfileLeg(50, 90)])
        x, y = profile_outline(res)
        assert list(x) == pytest.approx([0, 100, 100])
        assert list(y) == pytest.approx([0, 0, 50])
