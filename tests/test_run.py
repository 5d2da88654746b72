"""CLI 임계값 설정 테스트"""

import argparse
import importlib.util
from pathlib import Path

import pytest

from withholding_extractor import registry
from withholding_extractor.config import ExtractionSettings, PageThresholds

RUN_PATH = Path(__file__).resolve().parent.parent / "run.py"


@pytest.fixture
def run_module():
    spec = importlib.util.spec_from_file_location("wht_run", RUN_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def custom_ruleset(monkeypatch):
    for name in ("WHT_PAGE1_ROW_GAP", "WHT_PAGE1_CELL_GAP", "WHT_PAGE2_ROW_GAP", "WHT_PAGE2_CELL_GAP"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(registry, "_RULESETS", dict(registry._RULESETS))
    settings = ExtractionSettings(first_page=PageThresholds(6.0, 35.0), second_page=PageThresholds(2.0, 40.0))
    registry.register_ruleset(2031, registry.ExtractionRuleset(name="2031", settings=settings))
    return settings


def _args(**overrides):
    values = dict(year=2031, p1_row_gap=None, p1_cell_gap=None, p2_row_gap=None, p2_cell_gap=None)
    values.update(overrides)
    return argparse.Namespace(**values)


class TestSettingsFromArgs:

    def test_uses_ruleset_thresholds(self, run_module, custom_ruleset):
        assert run_module._settings_from_args(_args()) == custom_ruleset

    def test_flags_override_ruleset(self, run_module, custom_ruleset):
        settings = run_module._settings_from_args(_args(p2_row_gap=4.5))
        assert settings.second_page == PageThresholds(4.5, 40.0)
        assert settings.first_page == custom_ruleset.first_page

    def test_default_ruleset_without_year(self, run_module, custom_ruleset):
        assert run_module._settings_from_args(_args(year=None)) == ExtractionSettings()
