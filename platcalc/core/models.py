# platcalc/core/models.py
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union, overload

import numpy as np


@dataclass(frozen=True)
class SquareToRoundInput:
    base_width: float
    base_depth: float
    top_diameter: float
    height: float


@dataclass(frozen=True)
class SquareToRoundResult:
    pattern_height: float
    outer_arc_radius: float
    inner_arc_radius: float
    chord_length: float
    arc_angle: float


@dataclass(frozen=True)
class ConeInput:
    large_dia: float
    small_dia: float
    height: float


@dataclass(frozen=True)
class ConeResult:
    outer_radius: float
    inner_radius: float
    arc_angle: float
    slant_height: float


@dataclass(frozen=True)
class SegmentBendInput:
    diameter: float
    radius: float
    angle: float
    segments: int


@dataclass(frozen=True)
class CurvePoint:
    x: float
    y: float
    angle: float


@dataclass(frozen=True)
class CutProfile(Sequence):
    """
    Perfil senoidal de corte do segmento do meio, desenrolado.
    As amostras são calculadas sob demanda; iterar de novo recomeça do zero.
    """
    circumference: float
    center_height: float
    amplitude: float
    steps: int

    def __len__(self) -> int:
        return self.steps + 1

    @overload
    def __getitem__(self, index: int) -> CurvePoint: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[CurvePoint, ...]: ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return tuple(self._sample(i) for i in range(*index.indices(len(self))))
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("CutProfile index out of range")
        return self._sample(index)

    def __iter__(self) -> Iterator[CurvePoint]:
        for i in range(len(self)):
            yield self._sample(i)

    def _sample(self, i: int) -> CurvePoint:
        theta_deg = (360 / self.steps) * i
        theta_rad = math.radians(theta_deg)
        x = (self.circumference / self.steps) * i
        # 0° = costas (geratriz mais longa), 180° = garganta (mais curta)
        y = self.center_height + 2 * self.amplitude * math.cos(theta_rad)
        return CurvePoint(x=x, y=y, angle=theta_deg)

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        xs = np.array([p.x for p in self])
        ys = np.array([p.y for p in self])
        return xs, ys


@dataclass(frozen=True)
class SegmentBendResult:
    cut_angle: float
    segment_angle: float
    middle_height: float
    max_height: float
    min_height: float
    circumference: float
    coordinates: CutProfile


@dataclass(frozen=True)
class ProfileLeg:
    length: float
    angle: float


@dataclass(frozen=True)
class ProfileResult:
    developed_width: float
    points: Tuple[Tuple[float, float], ...]
    width: float
    height: float
    bend_count: int
    area_m2: Optional[float] = None
