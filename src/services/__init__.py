"""Katsuyo services module."""

__version__ = "0.1.0"

from .errors import (
    ConjugationError,
    InvalidInput,
    MalformedIchidanVerb,
    MalformedSuruVerb,
    UnknownGodanEnding,
)
from .kana import (
    KanaConversion,
    convert_kana,
    hiragana_to_katakana,
    is_hiragana,
    is_kana,
    is_katakana,
    katakana_to_hiragana,
)
from .verb import (
    GodanStem,
    VerbClass,
    VerbForm,
    causative_form,
    classify,
    conditional_form,
    conjugate,
    conjugate_all,
    conjunctive_form,
    continuative_form,
    godan_stem,
    ichidan_stem,
    imperative_form,
    negative_form,
    normalize,
    onbin_suffixes,
    passive_form,
    past_form,
    potential_form,
    suru_stem,
    volitional_form,
)

__all__ = [
    # Errors
    "ConjugationError",
    "InvalidInput",
    "MalformedIchidanVerb",
    "MalformedSuruVerb",
    "UnknownGodanEnding",
    # Kana
    "KanaConversion",
    "convert_kana",
    "hiragana_to_katakana",
    "is_hiragana",
    "is_kana",
    "is_katakana",
    "katakana_to_hiragana",
    # Verb conjugation
    "GodanStem",
    "VerbClass",
    "VerbForm",
    "causative_form",
    "classify",
    "conditional_form",
    "conjugate",
    "conjugate_all",
    "conjunctive_form",
    "continuative_form",
    "godan_stem",
    "ichidan_stem",
    "imperative_form",
    "negative_form",
    "normalize",
    "onbin_suffixes",
    "passive_form",
    "past_form",
    "potential_form",
    "suru_stem",
    "volitional_form",
]
