# src/withholding_extractor/config.py
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import Optional

log = logging.getLogger(__name__)

# Umbrales por defecto de la página 1; la página 2 es una rejilla más densa.
DEFAULT_ROW_GAP = 5.0
DEFAULT_CELL_GAP = 30.0
SECOND_PAGE_ROW_GAP = 3.0
SECOND_PAGE_CELL_GAP = 25.0


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        log.warning("Valor inválido para %s=%r; se usa %s.", name, raw, default)
        return default


@dataclass(frozen=True)
class PageThresholds:
    """Umbrales de reconstrucción de una página (en puntos PDF)."""
    row_gap: float = DEFAULT_ROW_GAP
    cell_gap: float = DEFAULT_CELL_GAP


@dataclass(frozen=True)
class ExtractionSettings:
    first_page: PageThresholds = field(default_factory=PageThresholds)
    second_page: PageThresholds = field(
        default_factory=lambda: PageThresholds(SECOND_PAGE_ROW_GAP, SECOND_PAGE_CELL_GAP)
    )

    @classmethod
    def from_env(cls, base: Optional["ExtractionSettings"] = None) -> "ExtractionSettings":
        """Permite ajustar los umbrales sin tocar código (WHT_PAGE{1,2}_{ROW,CELL}_GAP)."""
        base = base or cls()
        return cls(
            first_page=PageThresholds(
                row_gap=_env_float("WHT_PAGE1_ROW_GAP", base.first_page.row_gap),
                cell_gap=_env_float("WHT_PAGE1_CELL_GAP", base.first_page.cell_gap),
            ),
            second_page=PageThresholds(
                row_gap=_env_float("WHT_PAGE2_ROW_GAP", base.second_page.row_gap),
                cell_gap=_env_float("WHT_PAGE2_CELL_GAP", base.second_page.cell_gap),
            ),
        )
