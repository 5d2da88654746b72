# src/withholding_extractor/rows.py
from __future__ import annotations
from typing import List, Sequence
import numpy as np

from .structures import Word

def group_words_into_rows(words: Sequence[Word],
                          row_gap_threshold: float = 5.0
                          ) -> List[List[Word]]:
    """Agrupa palabras en filas recorriendo la página de arriba hacia abajo.

    Las palabras se ordenan por Y descendente (en coordenadas PDF la parte
    superior de la página tiene la Y mayor). Se abre una fila nueva cada vez que
    la diferencia de Y con la palabra anterior supera `row_gap_threshold`.
    El orden original se conserva entre palabras con la misma Y.
    """
    if not words:
        return []

    ordered = sorted(words, key=lambda w: w.y, reverse=True)
    ys = np.array([w.y for w in ordered], dtype=float)

    # Índices donde empieza una fila nueva
    breaks = np.where(np.abs(np.diff(ys)) > row_gap_threshold)[0] + 1
    bounds = [0, *breaks.tolist(), len(ordered)]
    return [ordered[start:end] for start, end in zip(bounds, bounds[1:])]
