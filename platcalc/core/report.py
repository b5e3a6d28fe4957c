# platcalc/core/report.py
from functools import singledispatch

from platcalc.core.models import ConeResult, ProfileResult, SegmentBendResult, SquareToRoundResult


@singledispatch
def format_report(res) -> str:
    raise TypeError(f"No report for {type(res).__name__}")


@format_report.register
def _(res: SquareToRoundResult) -> str:
    return (
        "--- SQUARE TO ROUND (1/4 PATTERN) ---\n\n"
        f"Pattern Height:     {res.pattern_height:.2f} mm\n"
        f"Outer Arc Radius:   {res.outer_arc_radius:.2f} mm\n"
        f"Inner Arc Radius:   {res.inner_arc_radius:.2f} mm\n"
        f"Chord Length:       {res.chord_length:.2f} mm\n"
        f"Arc Angle:          {res.arc_angle:.2f}°\n"
    )


@format_report.register
def _(res: ConeResult) -> str:
    return (
        "--- CONE FRUSTUM ---\n\n"
        f"Outer Radius (R):   {res.outer_radius:.2f} mm\n"
        f"Inner Radius (r):   {res.inner_radius:.2f} mm\n"
        f"Slant Height (S):   {res.slant_height:.2f} mm\n"
        f"Arc Angle (α):      {res.arc_angle:.2f}°\n"
    )


@format_report.register
def _(res: SegmentBendResult) -> str:
    lines = [
        "--- SEGMENT BEND (MIDDLE SEGMENT) ---\n",
        f"Cut Angle:          {res.cut_angle:.2f}°",
        f"Segment Angle:      {res.segment_angle:.2f}°",
        f"Center Height:      {res.middle_height:.2f} mm",
        f"Back Height (max):  {res.max_height:.2f} mm",
        f"Throat Height (min): {res.min_height:.2f} mm",
        f"Circumference:      {res.circumference:.2f} mm",
        "",
        "ORDINATES:",
        f"{'Angle':>7}  {'X (mm)':>10}  {'Y (mm)':>10}",
    ]
    for pt in res.coordinates:
        lines.append(f"{pt.angle:>6.0f}°  {pt.x:>10.2f}  {pt.y:>10.2f}")
    return "\n".join(lines) + "\n"


@format_report.register
def _(res: ProfileResult) -> str:
    report = (
        "--- FOLDED PROFILE ---\n\n"
        f"Developed Width:    {res.developed_width:.2f} mm\n"
        f"Bends:              {res.bend_count}\n"
        f"Bounding Box:       {res.width:.2f} x {res.height:.2f} mm\n"
    )
    if res.area_m2 is not None:
        report += f"Sheet Area:         {res.area_m2:.3f} m²\n"
    return report
