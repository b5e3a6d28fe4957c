# platcalc/ui/cli.py
import argparse
import logging
import sys
from typing import Optional, Sequence

from platcalc.config import CURRENT_VERSION, DEFAULT_INPUTS, SHEET_COLORS
from platcalc.core.errors import CalculationError
from platcalc.core.inputs import (
    parse_cone,
    parse_leg_spec,
    parse_number,
    parse_profile_legs,
    parse_segment_bend,
    parse_square_to_round,
)
from platcalc.core.outline import cone_outline, profile_outline, segment_outline, square_to_round_outline
from platcalc.core.report import format_report
from platcalc.core.solvers.cone_frustum import ConeFrustumResolver
from platcalc.core.solvers.profile import ProfileResolver
from platcalc.core.solvers.segment_bend import SegmentBendResolver
from platcalc.core.solvers.square_to_round import SquareToRoundResolver
from platcalc.core.units import UnitManager
from platcalc.export.csv_writer import export_csv
from platcalc.export.dxf_writer import export_dxf
from platcalc.ui.plot import render_preview

logger = logging.getLogger(__name__)


def _run_square_to_round(args):
    data = parse_square_to_round(args.base_width, args.base_depth, args.top_diameter, args.height, args.unit)
    res = SquareToRoundResolver().resolve_input(data)
    info = f"R = {res.outer_arc_radius:.1f}\nr = {res.inner_arc_radius:.1f}\nα = {res.arc_angle:.2f}°"
    return res, square_to_round_outline(res), "Square to Round (1/4 pattern)", info, None


def _run_cone(args):
    data = parse_cone(args.large_dia, args.small_dia, args.height, args.unit)
    res = ConeFrustumResolver().resolve_input(data)
    info = f"R = {res.outer_radius:.1f}\nr = {res.inner_radius:.1f}\nα = {res.arc_angle:.2f}°"
    return res, cone_outline(res), "Cone Frustum", info, None


def _run_segment_bend(args):
    data = parse_segment_bend(args.diameter, args.radius, args.angle, args.segments, args.unit, args.angle_unit)
    res = SegmentBendResolver().resolve_input(data)
    info = f"Cut = {res.cut_angle:.2f}°\nMax = {res.max_height:.1f}\nMin = {res.min_height:.1f}"
    reference = ((0.0, res.middle_height), (res.circumference, res.middle_height))
    return res, segment_outline(res), "Segment Bend (middle segment)", info, reference


def _run_profile(args):
    raw_legs = [parse_leg_spec(text) for text in args.legs] if args.legs else DEFAULT_INPUTS['profile']['legs']
    legs = parse_profile_legs(raw_legs, args.unit)
    length = None
    if args.length is not None:
        length = UnitManager.convert(parse_number(args.length, "profile length"), args.unit, 'length_to_mm')
    res = ProfileResolver().resolve(legs, length)
    return res, profile_outline(res), "Folded Profile", f"Width = {res.developed_width:.1f}", None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="platcalc",
        description="Flat-pattern calculator for sheet-metal transitions, cones and segment bends.",
    )
    parser.add_argument("--version", action="version", version=f"PlatCalc {CURRENT_VERSION}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--unit", default="mm", choices=UnitManager.units_for('length_to_mm'),
                        help="Unit of the input lengths (default: mm)")
    common.add_argument("--dxf", help="Write the cutting template to a DXF file")
    common.add_argument("--csv", help="Write the outline points to a CSV file")
    common.add_argument("--png", help="Render a preview image (PNG/SVG/PDF)")
    common.add_argument("--decimal-comma", action="store_true", help="Use ',' as decimal separator in CSV")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="calculator", required=True)

    d = DEFAULT_INPUTS['square_to_round']
    p = sub.add_parser("square-to-round", parents=[common], help="Square-to-round transition")
    p.add_argument("--base-width", default=str(d['base_width']))
    p.add_argument("--base-depth", default=str(d['base_depth']))
    p.add_argument("--top-diameter", default=str(d['top_diameter']))
    p.add_argument("--height", default=str(d['height']))
    p.set_defaults(run=_run_square_to_round)

    d = DEFAULT_INPUTS['cone']
    p = sub.add_parser("cone", parents=[common], help="Cone frustum")
    p.add_argument("--large-dia", default=str(d['large_dia']))
    p.add_argument("--small-dia", default=str(d['small_dia']))
    p.add_argument("--height", default=str(d['height']))
    p.set_defaults(run=_run_cone)

    d = DEFAULT_INPUTS['segment_bend']
    p = sub.add_parser("segment-bend", parents=[common], help="Segmented (lobster-back) pipe bend")
    p.add_argument("--diameter", default=str(d['diameter']))
    p.add_argument("--radius", default=str(d['radius']))
    p.add_argument("--angle", default=str(d['angle']), help="Total bend angle in degrees")
    p.add_argument("--segments", default=str(d['segments']))
    p.add_argument("--angle-unit", default="deg", choices=UnitManager.units_for('angle_to_deg'))
    p.set_defaults(run=_run_segment_bend)

    p = sub.add_parser("profile", parents=[common], help="Folded flashing profile")
    p.add_argument("legs", nargs="*", help="Legs as LENGTH@ANGLE, e.g. 15 100@100 30@90")
    p.add_argument("--length", help="Profile length, for the sheet area")
    p.add_argument("--color", choices=list(SHEET_COLORS), default="Black (015)")
    p.set_defaults(run=_run_profile)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        res, (xs, ys), title, info, reference = args.run(args)
        print(format_report(res))

        color = SHEET_COLORS[args.color] if args.calculator == "profile" else '#d97706'
        closed = args.calculator != "profile"
        if args.dxf:
            written = export_dxf(xs, ys, args.dxf, closed=closed, reference_line=reference)
            print(f"DXF exported: {args.dxf} ({written} points, mm)")
        if args.csv:
            export_csv(xs, ys, args.csv, decimal=',' if args.decimal_comma else '.')
            print(f"CSV exported: {args.csv}")
        if args.png:
            render_preview(xs, ys, args.png, title, annotations=info, color=color, fill=closed)
            print(f"Preview written: {args.png}")
    except CalculationError as e:
        logger.debug("Calculation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0
