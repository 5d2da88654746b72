# src/withholding_extractor/registry.py
"""Selección de reglas de extracción por año de formato del recibo."""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .config import ExtractionSettings
from .extractor import DEDUCTION_RULES, DeductionRule, FieldExtractor
from .keywords import SourceVariant

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class ExtractionRuleset:
    name: str
    settings: ExtractionSettings = field(default_factory=ExtractionSettings)
    deduction_rules: Tuple[DeductionRule, ...] = DEDUCTION_RULES

    def build(self,
              variant: SourceVariant = SourceVariant.UNSPECIFIED,
              current_year: Optional[int] = None) -> FieldExtractor:
        return FieldExtractor(variant, deduction_rules=self.deduction_rules, current_year=current_year)

RULESET_2024 = ExtractionRuleset(name="2024")

_RULESETS: Dict[int, ExtractionRuleset] = {
    2024: RULESET_2024,
}
DEFAULT_RULESET = RULESET_2024

def register_ruleset(year: int, ruleset: ExtractionRuleset) -> None:
    _RULESETS[year] = ruleset

def get_ruleset(year: Optional[int] = None) -> ExtractionRuleset:
    """Reglas para el formato de `year`; si no hay unas específicas, las de por defecto."""
    if year is None:
        return DEFAULT_RULESET
    ruleset = _RULESETS.get(year)
    if ruleset is None:
        log.info("Sin reglas específicas para %s; se usan las de %s.", year, DEFAULT_RULESET.name)
        return DEFAULT_RULESET
    return ruleset

def get_extractor(year: Optional[int] = None,
                  variant: SourceVariant = SourceVariant.UNSPECIFIED,
                  current_year: Optional[int] = None) -> FieldExtractor:
    return get_ruleset(year).build(variant, current_year=current_year)
