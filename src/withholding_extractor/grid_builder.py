# src/withholding_extractor/grid_builder.py
from __future__ import annotations
import logging
from typing import Sequence
import numpy as np

from .config import DEFAULT_CELL_GAP, DEFAULT_ROW_GAP
from .rows import group_words_into_rows
from .structures import Row, Table, Word

log = logging.getLogger(__name__)

def merge_row_cells(row: Sequence[Word], cell_gap_threshold: float = DEFAULT_CELL_GAP) -> Row:
    """Fusiona las palabras de una fila en celdas, de izquierda a derecha.

    Dos palabras consecutivas quedan en la misma celda si la distancia entre sus
    X es menor que `cell_gap_threshold`; el texto se une con un solo espacio.
    """
    if not row:
        return []

    ordered = sorted(row, key=lambda w: w.x)
    xs = np.array([w.x for w in ordered], dtype=float)

    cuts = np.where(np.diff(xs) >= cell_gap_threshold)[0] + 1
    bounds = [0, *cuts.tolist(), len(ordered)]
    return [" ".join(w.text for w in ordered[start:end]) for start, end in zip(bounds, bounds[1:])]

def reconstruct(words: Sequence[Word],
                row_gap_threshold: float = DEFAULT_ROW_GAP,
                cell_gap_threshold: float = DEFAULT_CELL_GAP
                ) -> Table:
    """
    Convierte las palabras posicionadas de una página en una tabla
    (filas de arriba hacia abajo, celdas de izquierda a derecha).
    """
    if not words:
        return []

    rows = group_words_into_rows(words, row_gap_threshold=row_gap_threshold)
    table = [merge_row_cells(r, cell_gap_threshold=cell_gap_threshold) for r in rows]
    log.debug("Tabla reconstruida: %d palabras -> %d filas (row_gap=%s, cell_gap=%s).",
              len(words), len(table), row_gap_threshold, cell_gap_threshold)
    return table
