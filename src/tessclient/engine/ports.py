"""
@file ports.py
@brief Porta verso il motore OCR nativo.
@ingroup engine_module

@details
Superficie modellata su tesseract::TessBaseAPI.
Una istanza è una sessione viva del motore, modificata sul posto.
"""

from __future__ import annotations
from typing import Optional, Protocol


class TessBaseAPI(Protocol):
    """@brief Operazioni richieste ad una sessione del motore."""
    def init(self, datapath: Optional[str], language: Optional[str], configfile: Optional[str]) -> int: ...

    def set_image(self, path: str) -> None: ...

    def set_variable(self, name: str, value: str) -> bool: ...

    def set_page_seg_mode(self, mode: int) -> None: ...

    def utf8_text(self) -> str: ...

    def hocr_text(self) -> str: ...

    def version(self) -> str: ...

    def end(self) -> None: ...
