from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from .config import ExtractionSettings
from .exporters import rows_to_csv
from .extractor import ExtractionTrace
from .grid_builder import reconstruct
from .keywords import SourceVariant
from .parser import parse_pdf_pages
from .registry import get_ruleset
from .structures import EmployeeRecord, Table

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _dump_tables(pdf_path: PathLike, dump_dir: PathLike, first: Table, second: Table) -> None:
    stem = Path(pdf_path).stem
    for page, table in ((1, first), (2, second)):
        out = Path(dump_dir) / f"{stem}.p{page}.csv"
        rows_to_csv(table, [], str(out))
        log.info("Tabla de la página %d escrita en: %s", page, out)


def load_receipt_tables(pdf_path: PathLike,
                        settings: Optional[ExtractionSettings] = None
                        ) -> Tuple[Table, Table]:
    """Lee las páginas 1 y 2 del PDF y las reconstruye como tablas."""
    settings = settings or ExtractionSettings.from_env()
    log.info("Leyendo palabras de: %s", pdf_path)
    pages = parse_pdf_pages(pdf_path, [1, 2])

    p1, p2 = settings.first_page, settings.second_page
    first = reconstruct(pages[1], row_gap_threshold=p1.row_gap, cell_gap_threshold=p1.cell_gap)
    second = reconstruct(pages[2], row_gap_threshold=p2.row_gap, cell_gap_threshold=p2.cell_gap)
    log.info("Tablas reconstruidas: página 1 = %d filas, página 2 = %d filas.", len(first), len(second))
    return first, second


def _prepare(pdf_path: PathLike,
             year: Optional[int],
             settings: Optional[ExtractionSettings],
             dump_dir: Optional[PathLike]):
    ruleset = get_ruleset(year)
    settings = settings or ExtractionSettings.from_env(ruleset.settings)
    first, second = load_receipt_tables(pdf_path, settings)
    if dump_dir:
        _dump_tables(pdf_path, dump_dir, first, second)
    return ruleset, first, second


def extract_employee_data(
    pdf_path: PathLike,
    *,
    variant: SourceVariant = SourceVariant.UNSPECIFIED,
    relax_validation: bool = False,
    year: Optional[int] = None,
    settings: Optional[ExtractionSettings] = None,
    current_year: Optional[int] = None,
    dump_dir: Optional[PathLike] = None,
) -> EmployeeRecord:
    """
    Orquesta la extracción completa de un 원천징수영수증:
    PDF -> palabras -> tablas (páginas 1 y 2) -> `EmployeeRecord`.

    Lanza `InvalidDocumentError`, `RedactedDataError` o `WrongTaxYearError`
    salvo en modo diagnóstico (`relax_validation=True`).
    """
    ruleset, first, second = _prepare(pdf_path, year, settings, dump_dir)
    extractor = ruleset.build(variant, current_year=current_year)
    record = extractor.extract(first, second, relax_validation=relax_validation)
    log.info("Datos extraídos de %s (reglas %s).", pdf_path, ruleset.name)
    return record


def inspect_pdf(
    pdf_path: PathLike,
    *,
    variant: SourceVariant = SourceVariant.UNSPECIFIED,
    year: Optional[int] = None,
    settings: Optional[ExtractionSettings] = None,
    current_year: Optional[int] = None,
    dump_dir: Optional[PathLike] = None,
) -> ExtractionTrace:
    """Igual que `extract_employee_data` pero devuelve los valores intermedios sin validar."""
    ruleset, first, second = _prepare(pdf_path, year, settings, dump_dir)
    return ruleset.build(variant, current_year=current_year).inspect(first, second)
