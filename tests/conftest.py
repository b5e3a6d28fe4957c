"""
Pytest configuration for PlatCalc tests.

Adds the project root to sys.path so `import platcalc` works without an
editable install, and provides shared resolver fixtures.
"""
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from platcalc.core.solvers.cone_frustum import ConeFrustumResolver
from platcalc.core.solvers.profile import ProfileResolver
from platcalc.core.solvers.segment_bend import SegmentBendResolver
from platcalc.core.solvers.square_to_round import SquareToRoundResolver


@pytest.fixture
def square_to_round() -> SquareToRoundResolver:
    return SquareToRoundResolver()


@pytest.fixture
def cone() -> ConeFrustumResolver:
    return ConeFrustumResolver()


@pytest.fixture
def segment_bend() -> SegmentBendResolver:
    return SegmentBendResolver()


@pytest.fixture
def profile() -> ProfileResolver:
    return ProfileResolver()
