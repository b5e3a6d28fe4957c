# platcalc/core/outline.py
"""Contornos fechados das planificações, em mm, como arrays numpy (x, y)."""
import math
from typing import Tuple

import numpy as np

from platcalc.config import ARC_STEPS
from platcalc.core.models import ConeResult, ProfileResult, SegmentBendResult, SquareToRoundResult

Outline = Tuple[np.ndarray, np.ndarray]


def annular_sector(outer: float, inner: float, angle_deg: float, steps: int = ARC_STEPS) -> Outline:
    """
    Setor de coroa com vértice na origem, simétrico em torno do eixo -Y.
    Caminho: início interno -> início externo -> arco externo -> fim interno -> arco interno de volta.
    """
    half = math.radians(angle_deg) / 2
    start = -math.pi / 2 - half
    end = -math.pi / 2 + half

    theta_out = np.linspace(start, end, steps + 1)
    theta_in = theta_out[::-1]

    inner_x = inner * np.cos(theta_in)
    inner_y = inner * np.sin(theta_in)

    # O arco interno termina no ponto inicial: laço fechado
    x = np.concatenate([inner_x[-1:], outer * np.cos(theta_out), inner_x])
    y = np.concatenate([inner_y[-1:], outer * np.sin(theta_out), inner_y])
    return x, y


def cone_outline(res: ConeResult, steps: int = ARC_STEPS) -> Outline:
    return annular_sector(res.outer_radius, res.inner_radius, res.arc_angle, steps)


def square_to_round_outline(res: SquareToRoundResult, steps: int = ARC_STEPS) -> Outline:
    return annular_sector(res.outer_arc_radius, res.inner_arc_radius, res.arc_angle, steps)


def segment_outline(res: SegmentBendResult) -> Outline:
    """Gomo do meio desenrolado sobre a linha de base, fechado."""
    curve_x, curve_y = res.coordinates.as_arrays()
    x = np.concatenate([curve_x, [res.circumference, 0.0, curve_x[0]]])
    y = np.concatenate([curve_y, [0.0, 0.0, curve_y[0]]])
    return x, y


def profile_outline(res: ProfileResult) -> Outline:
    pts = np.array(res.points)
    return pts[:, 0], pts[:, 1]
