# src/withholding_extractor/structures.py
from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Dict, List

Row = List[str]
Table = List[Row]

@dataclass(frozen=True)
class Word:
    """Palabra posicionada de una página: x = borde izquierdo, y = borde inferior."""
    text: str
    x: float
    y: float

@dataclass(frozen=True)
class EmployeeRecord:
    """Datos del empleado extraídos de un 원천징수영수증."""
    name: str
    national_id_prefix: str
    reference_year: int
    pre_deduction_salary: int
    withheld_tax: int

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)
