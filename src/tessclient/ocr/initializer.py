"""
@file initializer.py
@brief Prima fase di commit: lingua, file di configurazione, tessdata.
@ingroup ocr_module
"""

from __future__ import annotations
import logging
import os
from typing import List, Optional

from tessclient.engine.handle import EngineHandle
from tessclient.errors import InitializationError

logger = logging.getLogger(__name__)


def initialize(
    handle: EngineHandle,
    languages: List[str],
    config_file_path: Optional[str],
    tessdata_prefix: Optional[str] = None,
) -> None:
    """
    @brief Inizializza il motore con lingue e file di configurazione.
    @param handle Handle aperto (anche già inizializzato: le impostazioni vengono riapplicate).
    @param languages Lingue in ordine; vuota = default del motore.
    @param config_file_path Path del file di configurazione, opzionale.
    @param tessdata_prefix Directory traineddata, None = default del motore.
    @return None

    @throws InitializationError Se il motore restituisce un codice diverso da zero.
    @note
    Il file di configurazione viene ricontrollato qui: se nel frattempo è sparito
    si prosegue senza, senza errore.
    """
    language = "+".join(languages) if languages else None

    configfile = None
    if config_file_path:
        if os.path.exists(config_file_path):
            configfile = config_file_path
        else:
            # TODO: decide whether a vanished config file should raise ConfigFileError instead
            logger.warning(f"config file {config_file_path} no longer exists, initializing without it")

    logger.debug(f"init language={language} configfile={configfile} datapath={tessdata_prefix}")
    code = handle.init(tessdata_prefix, language, configfile)
    if code != 0:
        raise InitializationError(code)
