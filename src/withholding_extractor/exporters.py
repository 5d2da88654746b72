# src/withholding_extractor/exporters.py
from __future__ import annotations
from pathlib import Path
from typing import Iterable, List
import csv

from .structures import EmployeeRecord, Table

RECORD_HEADER = ["name", "national_id_prefix", "reference_year", "pre_deduction_salary", "withheld_tax"]

def rows_to_csv(rows: Table, header: List[str], csv_path: str) -> None:
    Path(csv_path).parent.mkdir(parents=True, exist_ok=True)
    with open(csv_path, "w", encoding="utf-8-sig", newline="") as f:
        w = csv.writer(f)
        if header:
            w.writerow(header)
        w.writerows(rows)

def records_to_csv(records: Iterable[EmployeeRecord], csv_path: str) -> None:
    """Un registro por fila; utf-8-sig para que Excel abra bien los nombres en coreano."""
    rows = [[str(r.to_dict()[k]) for k in RECORD_HEADER] for r in records]
    rows_to_csv(rows, RECORD_HEADER, csv_path)
