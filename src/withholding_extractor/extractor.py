# src/withholding_extractor/extractor.py
"""
Extracción de los datos del empleado a partir de las dos tablas reconstruidas
de un 근로소득 원천징수영수증 (página 1: identidad e ingresos; página 2:
pensiones y seguros).

Los campos se localizan por anclas de texto (ver `keywords.py`), nunca por
coordenadas: la posición absoluta cambia según el sistema que emitió el PDF.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Tuple

from . import anchors
from .cleaners import digits_only, is_masked, process_grid_data
from .errors import ExtractionError, InvalidDocumentError, RedactedDataError, WrongTaxYearError
from .keywords import AnchorRole, KeywordTable, SourceVariant, keyword_table
from .structures import EmployeeRecord, Table

log = logging.getLogger(__name__)

ID_PREFIX_LEN = 7
RESIDENT_NUMBER_LEN = 13
# Se conservan los caracteres de máscara para poder detectar datos ocultos
_NON_ID_RE = re.compile(r"[^0-9*●]")


@dataclass(frozen=True)
class DeductionRule:
    """Dónde leer el 대상금액 de una partida, relativo a la fila del ancla.

    `row_offsets` se prueban en orden: -1 es la fila anterior, 0 la propia fila.
    """
    role: AnchorRole
    row_offsets: Tuple[int, ...]


# El importe aparece encima o en la misma fila de la etiqueta según la partida.
# Es una particularidad de los formatos observados, no una regla general.
DEDUCTION_RULES: Tuple[DeductionRule, ...] = (
    DeductionRule(AnchorRole.NATIONAL_PENSION, (-1,)),
    DeductionRule(AnchorRole.PUBLIC_OFFICIAL_PENSION, (-1, 0)),
    DeductionRule(AnchorRole.MILITARY_PENSION, (-1, 0)),
    DeductionRule(AnchorRole.PRIVATE_SCHOOL_PENSION, (-1, 0)),
    DeductionRule(AnchorRole.POSTAL_PENSION, (-1,)),
    DeductionRule(AnchorRole.HEALTH_INSURANCE, (0,)),
    DeductionRule(AnchorRole.EMPLOYMENT_INSURANCE, (-1,)),
)


@dataclass
class ExtractionTrace:
    """Valores intermedios de una extracción (lo que se inspecciona en modo diagnóstico)."""
    name: str = ""
    national_id_prefix: str = ""
    reference_year: int = 0
    total_income: Decimal = Decimal(0)
    untaxed_income: Decimal = Decimal(0)
    prior_withholding: Decimal = Decimal(0)
    withheld_tax: int = 0
    deductions: Dict[str, Decimal] = field(default_factory=dict)
    issues: List[str] = field(default_factory=list)

    @property
    def total_deductions(self) -> Decimal:
        return sum(self.deductions.values(), Decimal(0))

    @property
    def pre_deduction_salary(self) -> int:
        gross = self.total_income + self.untaxed_income - self.prior_withholding - self.total_deductions
        return int(round(gross))

    def to_record(self) -> EmployeeRecord:
        return EmployeeRecord(
            name=self.name,
            national_id_prefix=self.national_id_prefix,
            reference_year=self.reference_year,
            pre_deduction_salary=self.pre_deduction_salary,
            withheld_tax=self.withheld_tax,
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "national_id_prefix": self.national_id_prefix,
            "reference_year": self.reference_year,
            "total_income": str(self.total_income),
            "untaxed_income": str(self.untaxed_income),
            "prior_withholding": str(self.prior_withholding),
            "withheld_tax": self.withheld_tax,
            "deductions": {k: str(v) for k, v in self.deductions.items()},
            "pre_deduction_salary": self.pre_deduction_salary,
            "issues": list(self.issues),
        }


def _text_after(text: str, labels: Sequence[str]) -> Optional[str]:
    """Texto a continuación de la primera etiqueta encontrada (las más largas primero)."""
    for label in sorted(labels, key=len, reverse=True):
        pos = text.find(label)
        if pos >= 0:
            return text[pos + len(label):]
    return None


def _find_marker(text: str, markers: Sequence[str], start: int = 0) -> Optional[Tuple[int, str]]:
    """Posición y grafía del primer marcador encontrado a partir de `start`."""
    found = [(text.find(m, start), m) for m in markers]
    found = [(p, m) for p, m in found if p >= 0]
    return min(found) if found else None


class FieldExtractor:
    """Extrae un `EmployeeRecord` de las tablas de las páginas 1 y 2."""

    def __init__(self,
                 variant: SourceVariant = SourceVariant.UNSPECIFIED,
                 *,
                 deduction_rules: Sequence[DeductionRule] = DEDUCTION_RULES,
                 current_year: Optional[int] = None) -> None:
        self.variant = SourceVariant(variant)
        self.keywords: KeywordTable = dict(keyword_table(self.variant))
        self.deduction_rules = tuple(deduction_rules)
        self.current_year = current_year

    def _kw(self, role: AnchorRole) -> Tuple[str, ...]:
        return self.keywords[role]

    # --- Página 1 -----------------------------------------------------------

    def _identity(self, table: Table) -> Tuple[str, str]:
        name_markers = self._kw(AnchorRole.NAME_MARKER)
        id_markers = self._kw(AnchorRole.ID_MARKER)

        idx = None
        for i, row in enumerate(table):
            if any(anchors.contains_any(name_markers)(c) for c in row) and \
               any(anchors.contains_any(id_markers)(c) for c in row):
                idx = i
                break
        if idx is None:
            log.debug("No se encontró la fila ⑥/⑦.")
            return "", ""

        text = "".join(table[idx])
        name_pos, _ = _find_marker(text, name_markers)
        id_match = _find_marker(text, id_markers, start=name_pos) or _find_marker(text, id_markers)
        id_pos, id_marker = id_match

        name_region = text[name_pos:id_pos] if id_pos > name_pos else text[name_pos:]
        name = _text_after(name_region, self._kw(AnchorRole.NAME_LABEL)) or ""

        id_chars = _NON_ID_RE.sub("", text[id_pos + len(id_marker):])
        if len(id_chars) > RESIDENT_NUMBER_LEN:
            id_chars = id_chars[-RESIDENT_NUMBER_LEN:]
        return name, id_chars[:ID_PREFIX_LEN]

    def _reference_year(self, table: Table) -> int:
        keywords = self._kw(AnchorRole.WORK_PERIOD)
        idx = anchors.find_keyword_row(table, keywords)
        if idx is None:
            log.debug("No se encontró la fila de 근무기간.")
            return 0
        after = _text_after("".join(table[idx]), keywords) or ""
        digits = digits_only(after)
        return int(digits[:4]) if len(digits) >= 4 else 0

    def _total_income(self, table: Table) -> Decimal:
        markers = self._kw(AnchorRole.TOTAL_MARKER)
        labels = self._kw(AnchorRole.TOTAL_LABEL)

        def is_total(cell: str) -> bool:
            return cell in labels or (any(m in cell for m in markers) and any(lb in cell for lb in labels))

        idx = anchors.find_row_index(table, is_total)
        if idx is None:
            return Decimal(0)
        return anchors.first_amount(anchors.cells_after(table[idx], is_total)) or Decimal(0)

    def _amount_after_keyword(self, table: Table, role: AnchorRole) -> Decimal:
        keywords = self._kw(role)
        idx = anchors.find_keyword_row(table, keywords)
        if idx is None:
            return Decimal(0)
        return anchors.first_amount(anchors.cells_after(table[idx], anchors.contains_any(keywords))) or Decimal(0)

    def _window_after_keyword(self, table: Table, role: AnchorRole) -> Decimal:
        keywords = self._kw(role)
        idx = anchors.find_keyword_row(table, keywords)
        if idx is None:
            return Decimal(0)
        return anchors.sum_window(anchors.cells_after(table[idx], anchors.contains_any(keywords)))

    # --- Página 2 -----------------------------------------------------------

    def _deduction(self, table: Table, rule: DeductionRule) -> Decimal:
        idx = anchors.find_keyword_row(table, self._kw(rule.role))
        if idx is None:
            return Decimal(0)
        labels = self._kw(AnchorRole.TARGET_AMOUNT)
        for offset in rule.row_offsets:
            j = idx + offset
            if not 0 <= j < len(table):
                continue
            value = anchors.amount_after_label(table[j], labels)
            if value is not None:
                return value
        return Decimal(0)

    # --- API ------------------------------------------------------------------

    def inspect(self, first_page_table: Table, second_page_table: Table) -> ExtractionTrace:
        """Calcula todos los valores intermedios sin validar."""
        first = process_grid_data(first_page_table)
        second = process_grid_data(second_page_table)

        if log.isEnabledFor(logging.DEBUG):
            for row in first:
                log.debug("p1 | %s", "|".join(row))
            for row in second:
                log.debug("p2 | %s", "|".join(row))

        trace = ExtractionTrace()
        trace.name, trace.national_id_prefix = self._identity(first)
        trace.reference_year = self._reference_year(first)
        trace.total_income = self._total_income(first)
        trace.untaxed_income = self._amount_after_keyword(first, AnchorRole.UNTAXED_INCOME)
        trace.prior_withholding = self._window_after_keyword(first, AnchorRole.CURRENT_WORKPLACE)
        trace.withheld_tax = int(self._window_after_keyword(first, AnchorRole.WITHHELD_TAX))
        for rule in self.deduction_rules:
            trace.deductions[rule.role.value] = self._deduction(second, rule)

        trace.issues = [str(err) for err in self.validate(trace)]
        log.debug("Valores intermedios: %s", trace.to_dict())
        return trace

    def validate(self, trace: ExtractionTrace) -> List[ExtractionError]:
        """Lista de problemas en el orden en que se reportan (el primero es el que se lanza)."""
        issues: List[ExtractionError] = []
        name, uid = trace.name, trace.national_id_prefix

        if not name or not uid:
            issues.append(InvalidDocumentError())
        elif is_masked(name) or is_masked(uid):
            issues.append(RedactedDataError())
        elif len(uid) != ID_PREFIX_LEN or not uid.isdigit():
            issues.append(InvalidDocumentError(f"주민등록번호 앞 7자리를 읽을 수 없습니다: {uid!r}"))

        year = trace.reference_year
        expected = (self.current_year or datetime.now().year) - 1
        if year == 0:
            issues.append(InvalidDocumentError())
        elif year != expected:
            issues.append(WrongTaxYearError(year, expected))
        return issues

    def extract(self,
                first_page_table: Table,
                second_page_table: Table,
                relax_validation: bool = False) -> EmployeeRecord:
        trace = self.inspect(first_page_table, second_page_table)
        if not relax_validation:
            issues = self.validate(trace)
            if issues:
                raise issues[0]
        else:
            for issue in trace.issues:
                log.warning("Validación omitida (modo diagnóstico): %s", issue)
        return trace.to_record()


def extract(first_page_table: Table,
            second_page_table: Table,
            variant: SourceVariant = SourceVariant.UNSPECIFIED,
            relax_validation: bool = False,
            *,
            current_year: Optional[int] = None) -> EmployeeRecord:
    return FieldExtractor(variant, current_year=current_year).extract(
        first_page_table, second_page_table, relax_validation=relax_validation
    )
