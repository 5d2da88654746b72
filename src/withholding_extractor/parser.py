# src/withholding_extractor/parser.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

import pdfplumber

from .errors import InvalidDocumentError
from .structures import Word

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

def _page_words(page) -> List[Word]:
    """
    Convierte las palabras de pdfplumber (origen arriba-izquierda) a `Word`
    con X = borde izquierdo e Y = borde inferior en coordenadas PDF.
    """
    height = float(page.height)
    words: List[Word] = []
    for w in page.extract_words():
        text = (w.get("text") or "").strip()
        if not text:
            continue
        words.append(Word(text=text, x=float(w["x0"]), y=height - float(w["bottom"])))
    return words

def parse_pdf_pages(pdf_path: PathLike, page_numbers: Sequence[int]) -> Dict[int, List[Word]]:
    """
    Extrae las palabras de varias páginas (numeradas desde 1) abriendo el PDF una sola vez.
    El documento se cierra antes de devolver.
    """
    result: Dict[int, List[Word]] = {}
    with pdfplumber.open(pdf_path) as pdf:
        n_pages = len(pdf.pages)
        for number in page_numbers:
            if number < 1 or number > n_pages:
                raise InvalidDocumentError(f"잘못된 파일입니다. (página {number} de {n_pages})")
            result[number] = _page_words(pdf.pages[number - 1])
            log.debug("Página %d: %d palabras.", number, len(result[number]))
    return result

def parse_pdf_words(pdf_path: PathLike, page_number: int = 1) -> List[Word]:
    return parse_pdf_pages(pdf_path, [page_number])[page_number]
