"""
@file handle.py
@brief Handle con stato Open/Closed attorno ad una sessione del motore.
@ingroup engine_module

@details
L'handle possiede in esclusiva una istanza TessBaseAPI:
- create() la acquisisce (non fallisce in modo osservabile)
- release() la libera una sola volta
- qualsiasi operazione dopo release() solleva UseAfterRelease
"""

from __future__ import annotations
import logging
from typing import Callable, Optional

from tessclient.engine.ports import TessBaseAPI
from tessclient.engine.pytesseract_api import PytesseractAPI
from tessclient.errors import UseAfterRelease

logger = logging.getLogger(__name__)

EngineFactory = Callable[[], TessBaseAPI]


class EngineHandle:
    """@brief Riferimento ad una sessione viva del motore."""

    def __init__(self, api: TessBaseAPI):
        self._api = api
        self._closed = False

    @classmethod
    def create(cls, factory: Optional[EngineFactory] = None) -> "EngineHandle":
        """
        @brief Acquisisce una nuova sessione del motore.
        @param factory Costruttore alternativo di TessBaseAPI (default PytesseractAPI).
        @return EngineHandle in stato Open.
        """
        api = (factory or PytesseractAPI)()
        logger.debug("engine handle acquired")
        return cls(api)

    @property
    def closed(self) -> bool:
        return self._closed

    def _open_api(self, operation: str) -> TessBaseAPI:
        if self._closed:
            raise UseAfterRelease(operation)
        return self._api

    def release(self) -> None:
        """
        @brief Libera la sessione.
        @throws UseAfterRelease Se l'handle è già stato rilasciato.
        """
        api = self._open_api("release")
        self._closed = True
        api.end()
        logger.debug("engine handle released")

    def init(self, datapath: Optional[str], language: Optional[str], configfile: Optional[str]) -> int:
        return self._open_api("init").init(datapath, language, configfile)

    def set_image(self, path: str) -> None:
        self._open_api("set image").set_image(path)

    def set_variable(self, name: str, value: str) -> bool:
        return self._open_api("set variable").set_variable(name, value)

    def set_page_seg_mode(self, mode: int) -> None:
        self._open_api("set page segmentation mode").set_page_seg_mode(mode)

    def utf8_text(self) -> str:
        return self._open_api("extract text").utf8_text()

    def hocr_text(self) -> str:
        return self._open_api("extract hOCR").hocr_text()

    def version(self) -> str:
        return self._open_api("query version").version()

    def __enter__(self) -> "EngineHandle":
        return self

    def __exit__(self, *exc) -> None:
        if not self._closed:
            self.release()


def version(factory: Optional[EngineFactory] = None) -> str:
    """
    @brief Versione di Tesseract tramite un handle effimero.
    @param factory Costruttore alternativo di TessBaseAPI.
    @return Stringa di versione del motore.
    @note Non richiede alcun Client: l'handle viene creato e rilasciato qui.
    """
    with EngineHandle.create(factory) as handle:
        return handle.version()
