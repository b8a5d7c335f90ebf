"""
@file models.py
@brief Stato di configurazione pendente e modalità di layout.
@ingroup domain_module

@details
ConfigurationState accumula le impostazioni tramite il builder del Client.
Viene letto (mai modificato) dalle due fasi di commit: initialize e prepare.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class PageSegMode(IntEnum):
    """
    @brief Page Segmentation Mode di Tesseract.
    @note Il valore viene inoltrato al motore come intero, senza interpretazione.
    """
    OSD_ONLY = 0
    AUTO_OSD = 1
    AUTO_ONLY = 2
    AUTO = 3
    SINGLE_COLUMN = 4
    SINGLE_BLOCK_VERT_TEXT = 5
    SINGLE_BLOCK = 6
    SINGLE_LINE = 7
    SINGLE_WORD = 8
    CIRCLE_WORD = 9
    SINGLE_CHAR = 10
    SPARSE_TEXT = 11
    SPARSE_TEXT_OSD = 12
    RAW_LINE = 13


class ConfigurationState(BaseModel):
    """
    @brief Impostazioni in attesa di commit sul motore.
    @details
    - languages vuota: lingua di default del motore ("eng")
    - variables: chiavi uniche, l'ultima scrittura vince
    - page_seg_mode: intero opaco, nessun controllo di range
    - config_file_path: verificato di nuovo al momento dell'uso
    - trim: rimuove i newline in testa/coda dal testo estratto
    """
    model_config = ConfigDict(validate_assignment=True)

    image_path: str = ""
    languages: List[str] = Field(default_factory=list)
    variables: Dict[str, str] = Field(default_factory=dict)
    page_seg_mode: Optional[int] = None
    config_file_path: Optional[str] = None
    tessdata_prefix: Optional[str] = None
    trim: bool = True

