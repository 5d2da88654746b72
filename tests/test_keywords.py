"""발급 시스템별 키워드 표 테스트"""

import pytest

from withholding_extractor.keywords import (
    BASE_KEYWORDS,
    VARIANT_KEYWORDS,
    AnchorRole,
    SourceVariant,
    keyword_table,
    keywords_for,
)


class TestKeywordTable:

    def test_unspecified_is_base(self):
        assert keyword_table(SourceVariant.UNSPECIFIED) == BASE_KEYWORDS

    def test_every_role_present_for_every_variant(self):
        for variant in SourceVariant:
            assert set(keyword_table(variant)) == set(AnchorRole)

    def test_marker_glyph_variants(self):
        assert keywords_for(SourceVariant.UNSPECIFIED, AnchorRole.NAME_MARKER) == ("⑥", "(6)")
        assert keywords_for(SourceVariant.UNSPECIFIED, AnchorRole.ID_MARKER) == ("⑦", "(7)")

    def test_variant_extends_base(self):
        spellings = keywords_for(SourceVariant.VARIANT_A, AnchorRole.HEALTH_INSURANCE)
        assert spellings[0] == "건강보험료"
        assert "건강보험" in spellings

    def test_other_is_union_of_variants(self):
        other = keyword_table(SourceVariant.OTHER)
        for extra in VARIANT_KEYWORDS.values():
            for role, spellings in extra.items():
                assert set(spellings) <= set(other[role])

    def test_no_duplicates(self):
        for variant in SourceVariant:
            for spellings in keyword_table(variant).values():
                assert len(spellings) == len(set(spellings))

    def test_accepts_string_value(self):
        assert keyword_table("b") == keyword_table(SourceVariant.VARIANT_B)

    def test_cached_table_is_read_only(self):
        table = keyword_table(SourceVariant.VARIANT_A)
        with pytest.raises(TypeError):
            table[AnchorRole.WORK_PERIOD] = ("귀속연도",)
        assert keyword_table(SourceVariant.VARIANT_A)[AnchorRole.WORK_PERIOD] == ("근무기간",)
