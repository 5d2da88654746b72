# src/withholding_extractor/anchors.py
"""Búsqueda de filas/celdas por palabra clave sobre una tabla ya limpiada.

Todas las búsquedas devuelven None (o una lista vacía) cuando el ancla no existe;
quien llama decide el valor por defecto.
"""
from __future__ import annotations
from decimal import Decimal
from typing import Callable, Iterable, List, Optional, Sequence

from .cleaners import parse_amount
from .structures import Row, Table

CellPredicate = Callable[[str], bool]

def contains_any(keywords: Sequence[str]) -> CellPredicate:
    return lambda cell: any(kw in cell for kw in keywords)

def equals_any(keywords: Sequence[str]) -> CellPredicate:
    return lambda cell: cell in keywords

def find_cell_index(row: Row, predicate: CellPredicate, start: int = 0) -> Optional[int]:
    for i in range(start, len(row)):
        if predicate(row[i]):
            return i
    return None

def find_row_index(table: Table, predicate: CellPredicate) -> Optional[int]:
    """Índice de la primera fila con alguna celda que cumple `predicate`."""
    for i, row in enumerate(table):
        if any(predicate(cell) for cell in row):
            return i
    return None

def find_keyword_row(table: Table, keywords: Sequence[str]) -> Optional[int]:
    return find_row_index(table, contains_any(keywords))

def cells_after(row: Row, predicate: CellPredicate) -> List[str]:
    """Celdas a la derecha de la primera celda que cumple `predicate`."""
    idx = find_cell_index(row, predicate)
    if idx is None:
        return []
    return list(row[idx + 1:])

def skip_blank(cells: Iterable[str]) -> List[str]:
    cells = list(cells)
    i = 0
    while i < len(cells) and not cells[i]:
        i += 1
    return cells[i:]

def first_amount(cells: Iterable[str]) -> Optional[Decimal]:
    for cell in cells:
        value = parse_amount(cell)
        if value is not None:
            return value
    return None

def sum_window(cells: Iterable[str], width: int = 3) -> Decimal:
    """Suma las `width` celdas siguientes tras saltar las vacías iniciales.

    Son columnas parciales (p.ej. 소득세 / 지방소득세 / 농어촌특별세) que se suman;
    una celda no numérica dentro de la ventana cuenta como 0.
    """
    total = Decimal(0)
    for cell in skip_blank(cells)[:width]:
        value = parse_amount(cell)
        if value is not None:
            total += value
    return total

def amount_after_label(row: Row, labels: Sequence[str]) -> Optional[Decimal]:
    """Primer importe a la derecha de una celda exactamente igual a una etiqueta."""
    return first_amount(cells_after(row, equals_any(labels)))
