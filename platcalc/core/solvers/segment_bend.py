# platcalc/core/solvers/segment_bend.py
import logging
import math
import numbers

from platcalc.config import CURVE_STEPS
from platcalc.core.errors import InvalidInput
from platcalc.core.inputs import require_positive
from platcalc.core.models import CutProfile, SegmentBendInput, SegmentBendResult

logger = logging.getLogger(__name__)


class SegmentBendResolver:
    """
    Curva segmentada (gomos). O ângulo total é distribuído em 2*(N-1) cortes:
    os gomos das pontas são meios-gomos, os do meio são gomos inteiros.
    """

    def __init__(self, steps: int = CURVE_STEPS):
        if isinstance(steps, bool) or not isinstance(steps, numbers.Integral) or steps < 1:
            raise InvalidInput("Curve resolution must be a whole number of at least 1 step.")
        self.steps = int(steps)

    @staticmethod
    def cut_angle(angle: float, segments: int) -> float:
        number_of_joints = segments - 1
        return angle / (2 * number_of_joints)

    def resolve(self, diameter: float, radius: float, angle: float, segments: int) -> SegmentBendResult:
        diameter = require_positive(diameter, "diameter")
        radius = require_positive(radius, "radius")
        angle = require_positive(angle, "angle")
        if isinstance(segments, bool) or not isinstance(segments, numbers.Integral):
            if not (isinstance(segments, float) and segments.is_integer()):
                raise InvalidInput("Segments must be a whole number.")
        if segments < 2:
            raise InvalidInput("Invalid values. Segments must be at least 2.")

        circumference = diameter * math.pi
        cut_angle_deg = self.cut_angle(angle, int(segments))
        cut_angle_rad = math.radians(cut_angle_deg)

        # Desvio do plano de corte em relação à linha neutra, na parede externa
        amplitude = (diameter / 2) * math.tan(cut_angle_rad)
        # Altura do gomo inteiro medida na linha de centro
        segment_center_height = 2 * radius * math.tan(cut_angle_rad)

        max_height = segment_center_height + 2 * amplitude  # costas
        min_height = segment_center_height - 2 * amplitude  # garganta

        logger.debug("Segment bend: cut=%.3f° H=%.4f max=%.4f min=%.4f",
                     cut_angle_deg, segment_center_height, max_height, min_height)
        if min_height < 0:
            logger.warning("Bend radius %.1f is tight for diameter %.1f: throat height is negative",
                           radius, diameter)

        return SegmentBendResult(
            cut_angle=cut_angle_deg,
            segment_angle=cut_angle_deg * 2,
            middle_height=segment_center_height,
            max_height=max_height,
            min_height=min_height,
            circumference=circumference,
            coordinates=CutProfile(
                circumference=circumference,
                center_height=segment_center_height,
                amplitude=amplitude,
                steps=self.steps,
            ),
        )

    def resolve_input(self, data: SegmentBendInput) -> SegmentBendResult:
        return self.resolve(data.diameter, data.radius, data.angle, data.segments)
