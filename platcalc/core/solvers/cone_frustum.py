# platcalc/core/solvers/cone_frustum.py
import logging
import math

from platcalc.config import CYLINDER_TOLERANCE_MM
from platcalc.core.errors import DegenerateCone
from platcalc.core.inputs import require_positive
from platcalc.core.models import ConeInput, ConeResult

logger = logging.getLogger(__name__)


class ConeFrustumResolver:
    """Planificação de tronco de cone: setor de coroa circular."""

    def resolve(self, large_dia: float, small_dia: float, height: float) -> ConeResult:
        large_dia = require_positive(large_dia, "large diameter")
        small_dia = require_positive(small_dia, "small diameter")
        height = require_positive(height, "height")

        if abs(large_dia - small_dia) < CYLINDER_TOLERANCE_MM:
            raise DegenerateCone("The diameters are equal. This is a cylinder (use pipe development).")

        # Ordem dos argumentos não importa
        D = max(large_dia, small_dia)
        d = min(large_dia, small_dia)

        slant_height = math.sqrt(((D - d) / 2) ** 2 + height ** 2)
        # Semelhança de triângulos até o vértice: R / (D/2) = r / (d/2), R - r = S
        outer_radius = (slant_height * D) / (D - d)
        inner_radius = outer_radius - slant_height
        # Arco em R igual à circunferência da base (pi * D)
        arc_angle = 360 * (D / (2 * outer_radius))

        logger.debug("Cone D=%s d=%s h=%s -> R=%.4f r=%.4f angle=%.4f",
                     D, d, height, outer_radius, inner_radius, arc_angle)
        return ConeResult(
            outer_radius=outer_radius,
            inner_radius=inner_radius,
            arc_angle=arc_angle,
            slant_height=slant_height,
        )

    def resolve_input(self, data: ConeInput) -> ConeResult:
        return self.resolve(data.large_dia, data.small_dia, data.height)
