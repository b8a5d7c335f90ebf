"""
@file preparer.py
@brief Seconda fase di commit: immagine, variabili, page segmentation mode.
@ingroup ocr_module

@details
Deve essere invocata dopo initialize() sullo stesso handle.
"""

from __future__ import annotations
import logging

from tessclient.domain.models import ConfigurationState
from tessclient.engine.handle import EngineHandle
from tessclient.errors import VariableBindError

logger = logging.getLogger(__name__)


def prepare(handle: EngineHandle, state: ConfigurationState) -> None:
    """
    @brief Applica immagine, variabili e PSM all'handle inizializzato.
    @param handle Handle aperto e inizializzato.
    @param state Stato di configurazione (solo lettura).
    @return None

    @throws VariableBindError Con tutte le coppie rifiutate dal motore.
    @note
    - image_path viene passato anche se vuoto
    - tutte le variabili vengono tentate prima di segnalare l'errore
    - page_seg_mode non viene validato: il range è responsabilità del motore
    """
    handle.set_image(state.image_path)

    failures = []
    for key, value in state.variables.items():
        if not handle.set_variable(key, value):
            failures.append((key, value))
    if failures:
        raise VariableBindError(failures)

    if state.page_seg_mode is not None:
        handle.set_page_seg_mode(int(state.page_seg_mode))
    logger.debug(f"prepared image={state.image_path!r} variables={len(state.variables)} psm={state.page_seg_mode}")
