"""
@file errors.py
@brief Gerarchia delle eccezioni del client.
@ingroup core_module

@details
Ogni errore viene sollevato al chiamante immediato; nessuno viene assorbito.
Gli errori d'ambiente di pytesseract (binario assente, crash) non sono
rimappati e si propagano invariati.
"""

from __future__ import annotations
from typing import List, Tuple


class TessClientError(Exception):
    """@brief Base per tutti gli errori del client."""


class ConfigFileError(TessClientError):
    """@brief Il file di configurazione non esiste o è una directory."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class InitializationError(TessClientError):
    """@brief Init del motore terminato con codice diverso da zero."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"failed to initialize TessBaseAPI with code {code}")


class VariableBindError(TessClientError):
    """
    @brief Una o più variabili sono state rifiutate dal motore.
    @details
    key/value riportano la prima coppia fallita; failures le contiene tutte.
    """

    def __init__(self, failures: List[Tuple[str, str]]):
        self.failures = list(failures)
        self.key, self.value = self.failures[0]
        pairs = ", ".join(f"key({k}):value({v})" for k, v in self.failures)
        super().__init__(f"failed to set variable with {pairs}")


class UseAfterRelease(TessClientError):
    """@brief Operazione richiesta su un handle già rilasciato."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"engine handle already released, cannot {operation}")
