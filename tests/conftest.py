"""테스트 픽스처: 원천징수영수증 1·2페이지 표"""

from typing import List, Sequence

import pytest

from withholding_extractor.structures import Word

CURRENT_YEAR = 2025


def words_from_table(table: Sequence[Sequence[str]], top: float = 800.0,
                     row_step: float = 20.0, col_step: float = 100.0) -> List[Word]:
    """표의 각 셀을 하나의 Word로 배치 (위에서 아래, 왼쪽에서 오른쪽)"""
    words = []
    for r, row in enumerate(table):
        for c, cell in enumerate(row):
            if cell:
                words.append(Word(text=cell, x=20.0 + c * col_step, y=top - r * row_step))
    return words


@pytest.fixture
def first_page_table():
    """1페이지: 인적사항 / 근무처별 소득 / 세액"""
    return [
        ["근로소득 원천징수영수증"],
        ["⑥ 성 명", "홍길동", "⑦ 주민등록번호", "900101-1234567"],
        ["⑪ 근무기간", "2024.01.01~2024.12.31"],
        ["⑯ 계", "50,000,000"],
        ["비과세소득", "1,200,000"],
        ["주(현)근무지", "", "300,000", "30,000", "0"],
        ["차감징수세액", "", "1,500,000", "150,000", "0"],
    ]


@pytest.fixture
def second_page_table():
    """2페이지: 연금보험료 / 건강·고용보험료"""
    return [
        ["구분", "대상금액", "2,000,000"],
        ["국민연금보험료", "공제금액", "2,000,000"],
        ["대상금액", "999"],
        ["건강보험료", "대상금액", "1,500,000"],
        ["대상금액", "300,000"],
        ["고용보험료", "공제금액", "300,000"],
    ]


@pytest.fixture
def current_year():
    return CURRENT_YEAR
