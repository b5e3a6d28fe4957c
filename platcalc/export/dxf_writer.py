# platcalc/export/dxf_writer.py
import logging
from typing import List, Optional, Sequence, Tuple

import ezdxf
from ezdxf import units

from platcalc.config import DXF_MIN_POINT_DISTANCE_MM
from platcalc.core.errors import ExportError

logger = logging.getLogger(__name__)


def optimize_points(xs: Sequence[float], ys: Sequence[float],
                    min_dist: float = DXF_MIN_POINT_DISTANCE_MM) -> List[Tuple[float, float]]:
    """
    Remove pontos muito próximos (< min_dist). O primeiro e o último ponto
    são sempre mantidos.
    """
    if len(xs) == 0:
        return []

    optimized = [(float(xs[0]), float(ys[0]))]
    last_x, last_y = optimized[0]
    min_dist_sq = min_dist ** 2

    for x, y in zip(xs[1:], ys[1:]):
        dist_sq = (x - last_x) ** 2 + (y - last_y) ** 2
        if dist_sq > min_dist_sq:
            optimized.append((float(x), float(y)))
            last_x, last_y = x, y

    final_pt = (float(xs[-1]), float(ys[-1]))
    if optimized[-1] != final_pt:
        optimized.append(final_pt)
    return optimized


def export_dxf(xs: Sequence[float], ys: Sequence[float], filename: str,
               layer: str = 'PATTERN', closed: bool = True,
               reference_line: Optional[Tuple[Tuple[float, float], Tuple[float, float]]] = None) -> int:
    """
    Gera um DXF de gabarito de corte em mm (LWPOLYLINE única numa camada).
    Retorna o número de pontos gravados.
    """
    points = optimize_points(xs, ys)
    if len(points) < 2:
        raise ExportError("Nothing to export: the outline has fewer than 2 points.")

    # Contorno fechado: o ezdxf fecha o último segmento sozinho
    if closed and len(points) > 2 and points[-1] == points[0]:
        points = points[:-1]

    logger.info("DXF optimization: reduced %d points to %d points", len(xs), len(points))

    doc = ezdxf.new('R2010')
    doc.header['$INSUNITS'] = units.MM
    msp = doc.modelspace()

    doc.layers.new(name=layer, dxfattribs={'color': 4})
    msp.add_lwpolyline(points, dxfattribs={'layer': layer}, close=closed)

    if reference_line is not None:
        if 'REFERENCE' not in doc.layers:
            doc.layers.new(name='REFERENCE', dxfattribs={'color': 1})
        msp.add_line(reference_line[0], reference_line[1], dxfattribs={'layer': 'REFERENCE'})

    try:
        doc.saveas(filename)
    except OSError as e:
        raise ExportError(f"Failed to write DXF file '{filename}': {e}") from e

    logger.info("DXF written to %s (%d points)", filename, len(points))
    return len(points)
