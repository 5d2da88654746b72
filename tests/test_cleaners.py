"""셀 정규화 / 금액 파싱 테스트"""

from decimal import Decimal

import pytest

from withholding_extractor.cleaners import (
    clean_cell_text,
    digits_only,
    is_masked,
    parse_amount,
    process_grid_data,
)


class TestCleanCellText:

    def test_removes_inner_whitespace(self):
        assert clean_cell_text("근 무 기 간") == "근무기간"
        assert clean_cell_text(" ⑥ 성\t명\n") == "⑥성명"

    def test_ideographic_space(self):
        assert clean_cell_text("주(현)　근무지") == "주(현)근무지"

    def test_none_and_empty(self):
        assert clean_cell_text("") == ""
        assert clean_cell_text(None) == ""

    def test_process_grid_returns_new_table(self):
        grid = [["a b", " c "], []]
        assert process_grid_data(grid) == [["ab", "c"], []]
        assert grid == [["a b", " c "], []]


class TestParseAmount:

    @pytest.mark.parametrize("text,expected", [
        ("1,234,000", Decimal("1234000")),
        ("0", Decimal("0")),
        ("-20,000", Decimal("-20000")),
        ("12.50", Decimal("12.50")),
        (" 42 ", Decimal("42")),
    ])
    def test_numeric(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "대상금액", "-", "1e5", "NaN", "Infinity", "12원", None])
    def test_not_numeric(self, text):
        assert parse_amount(text) is None


class TestDigitsAndMasks:

    def test_digits_only_ignores_circled_numbers(self):
        assert digits_only("⑦주민등록번호900101-1234567") == "9001011234567"

    def test_is_masked(self):
        assert is_masked("홍*동")
        assert is_masked("900101-●●●●●●●")
        assert not is_masked("홍길동")
        assert not is_masked("")
