# platcalc/core/inputs.py
"""
Validação na fronteira: textos/números crus do formulário viram registros
tipados antes de chegar aos solvers. Qualquer falha vira InvalidInput.
"""
import math
import numbers
from typing import Any, Iterable, List, Tuple

from platcalc.core.errors import InvalidInput
from platcalc.core.models import ConeInput, ProfileLeg, SegmentBendInput, SquareToRoundInput
from platcalc.core.units import UnitManager


def parse_number(raw: Any, field: str) -> float:
    """Aceita int/float ou texto com ponto ou vírgula decimal ("12,5")."""
    if isinstance(raw, bool):
        raise InvalidInput(f"{field}: expected a number, got {raw!r}")
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip().replace(',', '.')
        try:
            value = float(text)
        except ValueError:
            raise InvalidInput(f"{field}: '{raw}' is not a number") from None
    else:
        raise InvalidInput(f"{field}: expected a number, got {type(raw).__name__}")

    if not math.isfinite(value):
        raise InvalidInput(f"{field}: value must be finite")
    return value


def parse_length(raw: Any, field: str, unit: str = 'mm') -> float:
    value = parse_number(raw, field)
    try:
        return UnitManager.convert(value, unit, 'length_to_mm')
    except KeyError as e:
        raise InvalidInput(str(e.args[0])) from None


def parse_positive_length(raw: Any, field: str, unit: str = 'mm') -> float:
    value = parse_length(raw, field, unit)
    if value <= 0:
        raise InvalidInput(f"{field}: all dimensions must be positive")
    return value


def parse_count(raw: Any, field: str) -> int:
    value = parse_number(raw, field)
    if not value.is_integer():
        raise InvalidInput(f"{field}: must be a whole number")
    return int(value)


def parse_square_to_round(base_width: Any, base_depth: Any, top_diameter: Any,
                          height: Any, unit: str = 'mm') -> SquareToRoundInput:
    w = parse_positive_length(base_width, "base width", unit)
    d = parse_positive_length(base_depth, "base depth", unit)
    dia = parse_positive_length(top_diameter, "top diameter", unit)
    h = parse_positive_length(height, "height", unit)
    if dia >= w or dia >= d:
        raise InvalidInput("The top diameter must be smaller than the base width and depth.")
    return SquareToRoundInput(base_width=w, base_depth=d, top_diameter=dia, height=h)


def parse_cone(large_dia: Any, small_dia: Any, height: Any, unit: str = 'mm') -> ConeInput:
    return ConeInput(
        large_dia=parse_positive_length(large_dia, "large diameter", unit),
        small_dia=parse_positive_length(small_dia, "small diameter", unit),
        height=parse_positive_length(height, "height", unit),
    )


def parse_segment_bend(diameter: Any, radius: Any, angle: Any, segments: Any,
                       unit: str = 'mm', angle_unit: str = 'deg') -> SegmentBendInput:
    try:
        ang = UnitManager.convert(parse_number(angle, "angle"), angle_unit, 'angle_to_deg')
    except KeyError as e:
        raise InvalidInput(str(e.args[0])) from None
    if ang <= 0:
        raise InvalidInput("angle: bend angle must be positive")
    count = parse_count(segments, "segments")
    if count < 2:
        raise InvalidInput("segments: a segment bend needs at least 2 segments")
    return SegmentBendInput(
        diameter=parse_positive_length(diameter, "diameter", unit),
        radius=parse_positive_length(radius, "radius", unit),
        angle=ang,
        segments=count,
    )


def parse_profile_legs(legs: Iterable[Tuple[Any, Any]], unit: str = 'mm') -> List[ProfileLeg]:
    parsed = []
    for i, (length, angle) in enumerate(legs, start=1):
        leg_length = parse_length(length, f"leg {i} length", unit)
        if leg_length < 0:
            raise InvalidInput(f"leg {i} length: must not be negative")
        parsed.append(ProfileLeg(length=leg_length, angle=parse_number(angle, f"leg {i} angle")))
    if not parsed:
        raise InvalidInput("A profile needs at least one leg")
    return parsed


def parse_leg_spec(text: str) -> Tuple[str, str]:
    """'100@90' -> ('100', '90'); sem '@' o ângulo é 0."""
    length, sep, angle = text.partition('@')
    if not length.strip():
        raise InvalidInput(f"Invalid leg '{text}', expected LENGTH@ANGLE")
    return length, (angle if sep else '0')


def require_positive(value: Any, field: str) -> float:
    """Guarda dos solvers: número finito e maior que zero."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(f"{field}: expected a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidInput(f"{field}: all dimensions must be positive numbers")
    return float(value)
