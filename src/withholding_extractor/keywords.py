# src/withholding_extractor/keywords.py
"""
Tabla de anclas (palabras clave) por variante de emisor.

Cada campo del 원천징수영수증 se localiza por contención de una palabra clave y no
por coordenadas fijas. Los emisores escriben algunas etiquetas de forma distinta,
así que cada rol admite varias grafías. Para soportar un formato nuevo basta con
añadir una entrada en `VARIANT_KEYWORDS`.
"""
from __future__ import annotations
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


class SourceVariant(str, Enum):
    """Sistema emisor del PDF. Solo afecta a las grafías aceptadas."""
    UNSPECIFIED = "unspecified"
    VARIANT_A = "a"
    VARIANT_B = "b"
    VARIANT_C = "c"
    OTHER = "other"


class AnchorRole(str, Enum):
    NAME_MARKER = "name_marker"
    ID_MARKER = "id_marker"
    NAME_LABEL = "name_label"
    WORK_PERIOD = "work_period"
    TOTAL_MARKER = "total_marker"
    TOTAL_LABEL = "total_label"
    UNTAXED_INCOME = "untaxed_income"
    CURRENT_WORKPLACE = "current_workplace"
    WITHHELD_TAX = "withheld_tax"
    TARGET_AMOUNT = "target_amount"
    NATIONAL_PENSION = "national_pension"
    PUBLIC_OFFICIAL_PENSION = "public_official_pension"
    MILITARY_PENSION = "military_pension"
    PRIVATE_SCHOOL_PENSION = "private_school_pension"
    POSTAL_PENSION = "postal_pension"
    HEALTH_INSURANCE = "health_insurance"
    EMPLOYMENT_INSURANCE = "employment_insurance"


KeywordTable = Dict[AnchorRole, Tuple[str, ...]]

BASE_KEYWORDS: KeywordTable = {
    AnchorRole.NAME_MARKER: ("⑥", "(6)"),
    AnchorRole.ID_MARKER: ("⑦", "(7)"),
    AnchorRole.NAME_LABEL: ("성명",),
    AnchorRole.WORK_PERIOD: ("근무기간",),
    AnchorRole.TOTAL_MARKER: ("16", "⑯"),
    AnchorRole.TOTAL_LABEL: ("계",),
    AnchorRole.UNTAXED_INCOME: ("비과세소득",),
    AnchorRole.CURRENT_WORKPLACE: ("주(현)근무지",),
    AnchorRole.WITHHELD_TAX: ("징수세액",),
    AnchorRole.TARGET_AMOUNT: ("대상금액",),
    AnchorRole.NATIONAL_PENSION: ("국민연금보험료",),
    AnchorRole.PUBLIC_OFFICIAL_PENSION: ("공무원",),
    AnchorRole.MILITARY_PENSION: ("군인연금",),
    AnchorRole.PRIVATE_SCHOOL_PENSION: ("사립학교",),
    AnchorRole.POSTAL_PENSION: ("별정우체국",),
    AnchorRole.HEALTH_INSURANCE: ("건강보험료",),
    AnchorRole.EMPLOYMENT_INSURANCE: ("고용보험료",),
}

# Grafías adicionales observadas por emisor (se suman a BASE_KEYWORDS)
VARIANT_KEYWORDS: Dict[SourceVariant, KeywordTable] = {
    SourceVariant.VARIANT_A: {
        AnchorRole.NATIONAL_PENSION: ("국민연금",),
        AnchorRole.HEALTH_INSURANCE: ("건강보험",),
        AnchorRole.EMPLOYMENT_INSURANCE: ("고용보험",),
    },
    SourceVariant.VARIANT_B: {
        AnchorRole.CURRENT_WORKPLACE: ("주(현)", "주현근무지"),
        AnchorRole.UNTAXED_INCOME: ("비과세",),
    },
    SourceVariant.VARIANT_C: {
        AnchorRole.NAME_LABEL: ("성명(상호)", "이름"),
        AnchorRole.WORK_PERIOD: ("귀속연도",),
        AnchorRole.WITHHELD_TAX: ("차감징수",),
    },
}


@lru_cache(maxsize=None)
def keyword_table(variant: SourceVariant = SourceVariant.UNSPECIFIED) -> Mapping[AnchorRole, Tuple[str, ...]]:
    """Devuelve la tabla completa de grafías para `variant`.

    `OTHER` (emisor desconocido) acepta la unión de todas las variantes conocidas.
    """
    variant = SourceVariant(variant)
    if variant is SourceVariant.OTHER:
        extras = list(VARIANT_KEYWORDS.values())
    else:
        extras = [VARIANT_KEYWORDS.get(variant, {})]

    table: KeywordTable = {}
    for role, base in BASE_KEYWORDS.items():
        spellings = list(base)
        for extra in extras:
            for kw in extra.get(role, ()):
                if kw not in spellings:
                    spellings.append(kw)
        table[role] = tuple(spellings)
    # Compartida por la caché: solo lectura
    return MappingProxyType(table)


def keywords_for(variant: SourceVariant, role: AnchorRole) -> Tuple[str, ...]:
    return keyword_table(variant)[role]
