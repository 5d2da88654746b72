"""연도별 추출 규칙 선택 테스트"""

import pytest

from withholding_extractor import registry
from withholding_extractor.extractor import DeductionRule
from withholding_extractor.keywords import AnchorRole, SourceVariant


class TestRegistry:

    def test_default(self):
        assert registry.get_ruleset() is registry.DEFAULT_RULESET
        assert registry.get_ruleset(2024) is registry.RULESET_2024

    def test_unknown_year_falls_back(self):
        assert registry.get_ruleset(1999) is registry.DEFAULT_RULESET

    def test_get_extractor(self):
        ex = registry.get_extractor(2024, SourceVariant.VARIANT_B, current_year=2025)
        assert ex.variant is SourceVariant.VARIANT_B
        assert ex.current_year == 2025

    def test_register_ruleset(self, monkeypatch):
        monkeypatch.setattr(registry, "_RULESETS", dict(registry._RULESETS))
        rules = (DeductionRule(AnchorRole.HEALTH_INSURANCE, (0,)),)
        custom = registry.ExtractionRuleset(name="2030", deduction_rules=rules)
        registry.register_ruleset(2030, custom)
        assert registry.get_ruleset(2030) is custom
        assert registry.get_extractor(2030).deduction_rules == rules
