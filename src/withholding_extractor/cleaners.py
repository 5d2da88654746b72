# src/withholding_extractor/cleaners.py
from __future__ import annotations
import re
from decimal import Decimal
from typing import Optional

from .structures import Table

_WHITESPACE_RE = re.compile(r"\s+")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
# 1234 / 1,234,000 / -12.5 (sin exponentes ni paréntesis)
_AMOUNT_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")

# Caracteres con los que el emisor enmascara datos personales
MASK_CHARS = ("*", "●")

def clean_cell_text(text: str) -> str:
    """Elimina todos los espacios de la celda (no solo los extremos).

    Cada emisor separa las palabras de forma distinta ("근 무 기 간" vs "근무기간").
    """
    return _WHITESPACE_RE.sub("", text or "")

def process_grid_data(grid: Table) -> Table:
    """Aplica `clean_cell_text` a toda la rejilla."""
    return [[clean_cell_text(cell) for cell in row] for row in grid]

def digits_only(text: str) -> str:
    return _NON_DIGIT_RE.sub("", text or "")

def is_masked(text: str) -> bool:
    return any(ch in (text or "") for ch in MASK_CHARS)

def parse_amount(text: str) -> Optional[Decimal]:
    """Convierte un importe ("1,234,000") a Decimal; None si la celda no es numérica."""
    if text is None:
        return None
    s = text.strip().replace(",", "")
    if not _AMOUNT_RE.match(s):
        return None
    return Decimal(s)
