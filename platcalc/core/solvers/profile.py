# platcalc/core/solvers/profile.py
import logging
import math
from typing import Optional, Sequence

import numpy as np

from platcalc.core.errors import InvalidInput
from platcalc.core.inputs import require_positive
from platcalc.core.models import ProfileLeg, ProfileResult

logger = logging.getLogger(__name__)


class ProfileResolver:
    """
    Perfil dobrado (rufos, pingadeiras): lista de abas com comprimento e
    ângulo de dobra relativo à aba anterior. Largura desenvolvida sem
    desconto de dobra.
    """

    @staticmethod
    def trace(legs: Sequence[ProfileLeg]) -> np.ndarray:
        # O ângulo da primeira aba é ignorado: ela define a direção 0°
        turns = np.array([0.0] + [leg.angle for leg in legs[1:]])
        headings = np.radians(np.cumsum(turns))
        lengths = np.array([leg.length for leg in legs])

        steps = np.column_stack((lengths * np.cos(headings), lengths * np.sin(headings)))
        return np.vstack((np.zeros((1, 2)), np.cumsum(steps, axis=0)))

    def resolve(self, legs: Sequence[ProfileLeg], profile_length: Optional[float] = None) -> ProfileResult:
        if not legs:
            raise InvalidInput("A profile needs at least one leg")
        for i, leg in enumerate(legs, start=1):
            if not math.isfinite(leg.length) or leg.length < 0:
                raise InvalidInput(f"leg {i}: length must be zero or positive")
            if not math.isfinite(leg.angle):
                raise InvalidInput(f"leg {i}: angle must be a number")
        if profile_length is not None:
            profile_length = require_positive(profile_length, "profile length")

        points = self.trace(legs)
        developed_width = float(sum(leg.length for leg in legs))
        extent = points.max(axis=0) - points.min(axis=0)
        bend_count = sum(1 for leg in legs[1:] if leg.angle != 0)

        area_m2 = None
        if profile_length is not None:
            area_m2 = developed_width * profile_length / 1e6

        logger.debug("Profile: %d legs, developed width %.2f mm", len(legs), developed_width)
        return ProfileResult(
            developed_width=developed_width,
            points=tuple((float(x), float(y)) for x, y in points),
            width=float(extent[0]),
            height=float(extent[1]),
            bend_count=bend_count,
            area_m2=area_m2,
        )
