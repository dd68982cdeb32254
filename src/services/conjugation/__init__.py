"""
Conjugation data package - static tables for the verb engine.

Usage:
    from services.conjugation import GODAN_ROWS, ICHIDAN_EXCEPTIONS
"""

from .data import (
    CLASS_LABELS,
    FORM_LABELS,
    GODAN_ROWS,
    ICHIDAN_EXCEPTIONS,
    ICHIDAN_PRE_RU,
    ICHIDAN_SUFFIXES,
    KANJI_NORMALIZATION,
    KURU_FORMS,
    ONBIN_SUFFIXES,
    SURU_SUFFIXES,
)

__all__ = [
    "CLASS_LABELS",
    "FORM_LABELS",
    "GODAN_ROWS",
    "ICHIDAN_EXCEPTIONS",
    "ICHIDAN_PRE_RU",
    "ICHIDAN_SUFFIXES",
    "KANJI_NORMALIZATION",
    "KURU_FORMS",
    "ONBIN_SUFFIXES",
    "SURU_SUFFIXES",
]
