# platcalc/ui/plot.py
import logging
from typing import Optional, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from platcalc.core.errors import ExportError

logger = logging.getLogger(__name__)


def render_preview(xs: Sequence[float], ys: Sequence[float], filename: str, title: str,
                   annotations: Optional[str] = None, color: str = '#d97706',
                   fill: bool = True) -> None:
    """Desenha o contorno da planificação e salva a imagem (PNG/SVG/PDF pela extensão)."""
    if len(xs) < 2:
        raise ExportError("Nothing to draw: the outline has fewer than 2 points.")

    fig, ax = plt.subplots(figsize=(6, 5), dpi=100)
    try:
        fig.subplots_adjust(top=0.92, bottom=0.10, left=0.12, right=0.95)
        ax.grid(True, linestyle='--', alpha=0.3)
        ax.set_title(title, fontsize=11, weight='bold', pad=10)
        ax.set_xlabel("X (mm)")
        ax.set_ylabel("Y (mm)")

        ax.plot(xs, ys, color=color, linewidth=2.0)
        if fill:
            ax.fill(xs, ys, color=color, alpha=0.15)

        if annotations:
            ax.text(0.02, 0.04, annotations,
                    transform=ax.transAxes,
                    ha='left', va='bottom',
                    fontsize=9, fontfamily='monospace', weight='bold',
                    bbox=dict(boxstyle="round,pad=0.4", fc="white", ec="#444", alpha=0.9))

        ax.set_aspect('equal')
        fig.savefig(filename)
    except (OSError, ValueError) as e:
        # ValueError: extensão que o matplotlib não sabe gravar
        raise ExportError(f"Failed to write preview '{filename}': {e}") from e
    finally:
        plt.close(fig)

    logger.info("Preview written to %s", filename)
