# src/withholding_extractor/errors.py
from __future__ import annotations


class ExtractionError(Exception):
    """Error base de la extracción de datos del empleado."""


class InvalidDocumentError(ExtractionError):
    """El PDF no tiene la estructura esperada de un 원천징수영수증."""

    def __init__(self, message: str = "잘못된 파일입니다.") -> None:
        super().__init__(message)


class RedactedDataError(ExtractionError):
    """El emisor ocultó el nombre o el número de registro."""

    def __init__(self, message: str = "이름이나 주민번호가 가려져 직원 정보를 알 수 없습니다.") -> None:
        super().__init__(message)


class WrongTaxYearError(ExtractionError):
    def __init__(self, year: int, expected: int) -> None:
        super().__init__(f"작년 기준년도의 원천징수영수증이 아닙니다. (año {year}, se esperaba {expected})")
        self.year = year
        self.expected = expected
