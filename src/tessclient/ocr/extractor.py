"""
@file extractor.py
@brief Esecuzione OCR: commit in due fasi e lettura dell'output.
@ingroup ocr_module

@details
Ogni estrazione riesegue initialize + prepare da zero, così il chiamante può
modificare la configurazione del Client e rieseguire.
Un risultato vuoto ("") non è distinguibile da "nessun testo trovato".
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from tessclient.ocr.initializer import initialize
from tessclient.ocr.preparer import prepare

if TYPE_CHECKING:
    from tessclient.client import Client


def _commit(client: "Client") -> None:
    state = client.state
    initialize(client.handle, state.languages, state.config_file_path, state.tessdata_prefix)
    prepare(client.handle, state)


def extract_text(client: "Client") -> str:
    """
    @brief Testo riconosciuto (UTF-8).
    @param client Client configurato e non rilasciato.
    @return Testo; con trim attivo senza newline in testa/coda.
    """
    _commit(client)
    out = client.handle.utf8_text()
    if client.state.trim:
        out = out.strip("\n")
    return out


def extract_markup(client: "Client") -> str:
    """
    @brief Output hOCR (HTML con coordinate), mai trimmato.
    @param client Client configurato e non rilasciato.
    @return Documento hOCR come stringa.
    """
    _commit(client)
    return client.handle.hocr_text()
