"""
@file pytesseract_api.py
@brief Sessione Tesseract basata su pytesseract.
@ingroup engine_module

@details
Implementa la porta TessBaseAPI:
- init() verifica le lingue e registra file di configurazione e tessdata
- i set_* accumulano la riga di comando usata dalla prossima estrazione
- utf8_text()/hocr_text() eseguono l'eseguibile tesseract
"""

from __future__ import annotations
import logging
import shlex
import subprocess
from functools import lru_cache
from typing import Dict, FrozenSet, List, Optional

import pytesseract

from tessclient.domain.settings import EngineSettings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _known_parameters(tesseract_cmd: str) -> FrozenSet[str]:
    """@brief Nomi accettati da SetVariable (`tesseract --print-parameters`), in cache per eseguibile."""
    try:
        proc = subprocess.run(
            [tesseract_cmd, "--print-parameters"],
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError:
        raise pytesseract.TesseractNotFoundError()
    names = set()
    for line in proc.stdout.splitlines():
        parts = line.split(None, 1)
        # salta l'intestazione "Tesseract parameters:"
        if len(parts) == 2 and not line.endswith(":"):
            names.add(parts[0])
    return frozenset(names)


class PytesseractAPI:
    """@brief Sessione del motore: stato in memoria, OCR eseguito da pytesseract."""

    def __init__(self, settings: Optional[EngineSettings] = None):
        self.settings = settings or EngineSettings.from_env()
        if self.settings.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.settings.tesseract_cmd
        self._reset()

    def _reset(self) -> None:
        self._datapath: Optional[str] = None
        self._lang: Optional[str] = None
        self._configfile: Optional[str] = None
        self._image: str = ""
        self._variables: Dict[str, str] = {}
        self._psm: Optional[int] = None

    def _datapath_args(self, datapath: Optional[str]) -> List[str]:
        return ["--tessdata-dir", datapath] if datapath else []

    def _config(self) -> str:
        args = self._datapath_args(self._datapath)
        if self._psm is not None:
            args += ["--psm", str(self._psm)]
        for key, value in self._variables.items():
            args += ["-c", f"{key}={value}"]
        # i file di configurazione sono posizionali, dopo le opzioni
        if self._configfile:
            args.append(self._configfile)
        return " ".join(shlex.quote(a) for a in args)

    def init(self, datapath: Optional[str], language: Optional[str], configfile: Optional[str]) -> int:
        datapath = datapath or self.settings.tessdata_prefix
        self._reset()
        if language:
            dir_config = " ".join(shlex.quote(a) for a in self._datapath_args(datapath))
            available = set(pytesseract.get_languages(config=dir_config))
            missing = [lang for lang in language.split("+") if lang not in available]
            if missing:
                logger.error(f"Tesseract init failed, missing traineddata: {', '.join(missing)}")
                return -1
        self._datapath = datapath
        self._lang = language
        self._configfile = configfile
        return 0

    def set_image(self, path: str) -> None:
        self._image = path

    def set_variable(self, name: str, value: str) -> bool:
        if name not in _known_parameters(pytesseract.pytesseract.tesseract_cmd):
            return False
        self._variables[name] = value
        return True

    def set_page_seg_mode(self, mode: int) -> None:
        self._psm = mode

    def utf8_text(self) -> str:
        out = pytesseract.image_to_string(self._image, lang=self._lang, config=self._config())
        # la CLI chiude ogni pagina con il separatore "\f", UTF8Text no
        return out[:-1] if out.endswith("\f") else out

    def hocr_text(self) -> str:
        hocr = pytesseract.image_to_pdf_or_hocr(
            self._image, lang=self._lang, config=self._config(), extension="hocr"
        )
        return hocr.decode("utf-8")

    def version(self) -> str:
        return str(pytesseract.get_tesseract_version())

    def end(self) -> None:
        self._reset()
