"""
@file client.py
@brief Client: builder di argomenti per tesseract::TessBaseAPI.
@ingroup core_module

@details
Un Client accoppia un EngineHandle ed un ConfigurationState.
Il chiamante DEVE chiamare close() una volta (oppure usare `with`).

Esempio:
    with Client() as client:
        text = client.set_image("scan.png").set_language("eng", "ita").text()
"""

from __future__ import annotations
import os
from typing import Optional

from tessclient.domain.models import ConfigurationState, PageSegMode
from tessclient.engine.handle import EngineFactory, EngineHandle
from tessclient.errors import ConfigFileError, UseAfterRelease
from tessclient.ocr.extractor import extract_markup, extract_text


class Client:
    """@brief Handle del motore + configurazione pendente, con setter concatenabili."""

    def __init__(self, factory: Optional[EngineFactory] = None):
        self.handle = EngineHandle.create(factory)
        self.state = ConfigurationState()

    def _check_open(self, operation: str) -> None:
        if self.handle.closed:
            raise UseAfterRelease(operation)

    def close(self) -> None:
        """
        @brief Libera l'handle del motore.
        @throws UseAfterRelease Se il client è già stato chiuso.
        """
        self.handle.release()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc) -> None:
        if not self.handle.closed:
            self.close()

    def set_image(self, image_path: str) -> "Client":
        """@brief Path dell'immagine; nessun controllo di esistenza qui."""
        self._check_open("set image")
        self.state.image_path = image_path
        return self

    def set_language(self, *langs: str) -> "Client":
        """@brief Lingue da riconoscere; nessuna = default del motore ("eng")."""
        self._check_open("set language")
        self.state.languages = list(langs)
        return self

    def set_whitelist(self, whitelist: str) -> "Client":
        return self.set_variable("tessedit_char_whitelist", whitelist)

    def set_variable(self, key: str, value: str) -> "Client":
        """@brief Variabile applicata in prepare(); l'ultima scrittura vince."""
        self._check_open("set variable")
        self.state.variables[key] = value
        return self

    def set_page_seg_mode(self, mode: int | PageSegMode) -> "Client":
        self._check_open("set page segmentation mode")
        self.state.page_seg_mode = int(mode)
        return self

    def set_tessdata_prefix(self, prefix: Optional[str]) -> "Client":
        self._check_open("set tessdata prefix")
        self.state.tessdata_prefix = prefix
        return self

    def set_trim(self, trim: bool) -> "Client":
        self._check_open("set trim")
        self.state.trim = trim
        return self

    def set_config_file(self, path: str) -> None:
        """
        @brief Imposta il file di configurazione di Tesseract.
        @param path Path di un file esistente.
        @throws ConfigFileError Se il path non esiste o è una directory (stato invariato).
        """
        self._check_open("set config file")
        if not os.path.exists(path):
            raise ConfigFileError(path, "config file not found")
        if os.path.isdir(path):
            raise ConfigFileError(path, "the specified config file path seems to be a directory")
        self.state.config_file_path = path

    def text(self) -> str:
        """@brief Inizializza, prepara ed esegue OCR; restituisce il testo."""
        self._check_open("extract text")
        return extract_text(self)

    def html(self) -> str:
        """@brief Come text(), ma restituisce hOCR. See https://en.wikipedia.org/wiki/HOCR"""
        self._check_open("extract hOCR")
        return extract_markup(self)
