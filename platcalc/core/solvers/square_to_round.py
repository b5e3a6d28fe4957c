# platcalc/core/solvers/square_to_round.py
import logging
import math

import numpy as np

from platcalc.core.errors import InvalidGeometry, InvalidInput, UnsupportedGeometry
from platcalc.core.inputs import require_positive
from platcalc.core.models import SquareToRoundInput, SquareToRoundResult

logger = logging.getLogger(__name__)


class SquareToRoundResolver:
    """
    Transição quadrado-redondo simétrica: calcula 1/4 da planificação por
    triangulação (comprimentos verdadeiros). Só base quadrada; base
    retangular exigiria triangulação completa.
    """

    @staticmethod
    def true_lengths(w: float, r: float, h: float):
        # l1: meio do lado da base -> tangente do círculo do topo
        l1 = math.sqrt(h ** 2 + (w - r) ** 2)
        # l2: canto da base -> ponto do círculo a 45°
        l2 = math.sqrt(h ** 2 + w ** 2 + r ** 2)
        return l1, l2

    @staticmethod
    def law_of_cosines_angle(outer_radius: float, top_diameter: float) -> float:
        """Triângulo isósceles: dois lados = raio externo, base = 1/4 da circunferência do topo."""
        top_arc_length = (math.pi * top_diameter) / 4
        cos_angle = (2 * outer_radius ** 2 - top_arc_length ** 2) / (2 * outer_radius ** 2)
        with np.errstate(invalid='ignore'):
            return float(np.degrees(np.arccos(cos_angle)))

    @staticmethod
    def apex_angle(w: float, r: float, l1: float) -> float:
        """Ângulo pelo vértice do cone equivalente (triângulos semelhantes)."""
        with np.errstate(invalid='ignore', divide='ignore'):
            apex_height = np.divide(r * l1, w - r)
            return float(np.degrees(2 * np.arcsin(w / (apex_height + l1))))

    def resolve(self, base_width: float, base_depth: float, top_diameter: float,
                height: float) -> SquareToRoundResult:
        base_width = require_positive(base_width, "base width")
        base_depth = require_positive(base_depth, "base depth")
        top_diameter = require_positive(top_diameter, "top diameter")
        height = require_positive(height, "height")

        if base_width != base_depth:
            raise UnsupportedGeometry(
                "Only square bases are supported (width = depth). "
                "Rectangular-to-round needs full triangulation."
            )
        if top_diameter >= base_width:
            raise InvalidInput("The top diameter must be smaller than the base width and depth.")

        w = base_width / 2
        r = top_diameter / 2
        h = height
        logger.debug("Square-to-round: w=%s r=%s h=%s", w, r, h)

        l1, l2 = self.true_lengths(w, r, h)
        outer_arc_radius = l2
        # Altura do triângulo de canto desenvolvido
        inner_arc_radius = math.sqrt(l2 ** 2 - w ** 2)
        chord_length = 2 * w
        pattern_height = outer_arc_radius - inner_arc_radius

        arc_angle = self.law_of_cosines_angle(outer_arc_radius, top_diameter)
        if math.isnan(arc_angle):
            logger.warning("Law of cosines gave NaN, falling back to apex derivation")
            arc_angle = self.apex_angle(w, r, l1)

        if math.isnan(arc_angle):
            raise InvalidGeometry("Could not compute the arc angle for these dimensions. Check the measurements.")

        logger.debug("Square-to-round: R=%.4f r=%.4f angle=%.4f", outer_arc_radius, inner_arc_radius, arc_angle)
        return SquareToRoundResult(
            pattern_height=pattern_height,
            outer_arc_radius=outer_arc_radius,
            inner_arc_radius=inner_arc_radius,
            chord_length=chord_length,
            arc_angle=arc_angle,
        )

    def resolve_input(self, data: SquareToRoundInput) -> SquareToRoundResult:
        return self.resolve(data.base_width, data.base_depth, data.top_diameter, data.height)
