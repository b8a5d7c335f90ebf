"""
@file settings.py
@brief Configurazione del motore letta dall'ambiente.
@ingroup domain_module

@details
Variabili riconosciute:
- TESSERACT_CMD: path dell'eseguibile tesseract usato da pytesseract
- TESSDATA_PREFIX: directory dei file traineddata (default del motore se assente)
"""

from __future__ import annotations
import os
from typing import Mapping, Optional
from pydantic import BaseModel


class EngineSettings(BaseModel):
    """@brief Impostazioni di processo per il motore Tesseract."""
    tesseract_cmd: Optional[str] = None
    tessdata_prefix: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        """
        @brief Costruisce le impostazioni dalle variabili d'ambiente.
        @param environ Mapping alternativo a os.environ (utile nei test).
        @return EngineSettings; i valori vuoti sono trattati come assenti.
        """
        env = os.environ if environ is None else environ
        return cls(
            tesseract_cmd=env.get("TESSERACT_CMD") or None,
            tessdata_prefix=env.get("TESSDATA_PREFIX") or None,
        )
