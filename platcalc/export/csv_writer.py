# platcalc/export/csv_writer.py
import logging
from typing import Sequence

from platcalc.core.errors import ExportError

logger = logging.getLogger(__name__)


def export_csv(xs: Sequence[float], ys: Sequence[float], filename: str, decimal: str = '.') -> int:
    """
    Exporta os pontos em mm. decimal=',' usa ';' como separador de colunas
    (padrão de planilhas europeias).
    """
    if decimal not in ('.', ','):
        raise ExportError(f"Unsupported decimal separator: {decimal!r}")

    col_sep = "," if decimal == '.' else ";"
    try:
        with open(filename, 'w', encoding='utf-8', newline='') as f:
            f.write(f"X_mm{col_sep}Y_mm\n")
            for x, y in zip(xs, ys):
                x_str = f"{x:.6f}"
                y_str = f"{y:.6f}"
                if decimal == ',':
                    x_str = x_str.replace('.', ',')
                    y_str = y_str.replace('.', ',')
                f.write(f"{x_str}{col_sep}{y_str}\n")
    except OSError as e:
        raise ExportError(f"Failed to write CSV file '{filename}': {e}") from e

    logger.info("CSV written to %s (%d points)", filename, len(xs))
    return len(xs)
