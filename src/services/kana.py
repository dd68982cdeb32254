"""Hiragana/katakana detection and conversion."""

import re
from dataclasses import dataclass
from typing import Literal

import jaconv

_HIRAGANA_RE = re.compile("[\u3040-\u309F]")
_KATAKANA_RE = re.compile("[\u30A0-\u30FF]")
_ALL_HIRAGANA_RE = re.compile("[\u3040-\u309F]+")
_ALL_KATAKANA_RE = re.compile("[\u30A0-\u30FF]+")

Script = Literal["hiragana", "katakana", "mixed", "none"]


@dataclass(frozen=True, slots=True)
class KanaConversion:
    """Result of converting a piece of text between kana scripts."""

    text: str
    script: Script
    hiragana: str | None = None
    katakana: str | None = None


def is_hiragana(text: str) -> bool:
    """Check if text is non-empty and hiragana only."""
    return _ALL_HIRAGANA_RE.fullmatch(text) is not None


def is_katakana(text: str) -> bool:
    """Check if text is non-empty and katakana only."""
    return _ALL_KATAKANA_RE.fullmatch(text) is not None


def is_kana(text: str) -> bool:
    return is_hiragana(text) or is_katakana(text)


def hiragana_to_katakana(text: str) -> str:
    return jaconv.hira2kata(text)


def katakana_to_hiragana(text: str) -> str:
    return jaconv.kata2hira(text)


def convert_kana(text: str) -> KanaConversion:
    """Convert text to both kana scripts and report which script it used.

    Pure hiragana only gets a katakana rendering and vice versa. Mixed text
    gets whichever renderings apply; text without kana gets none.
    """
    if is_hiragana(text):
        return KanaConversion(text, "hiragana", katakana=hiragana_to_katakana(text))
    if is_katakana(text):
        return KanaConversion(text, "katakana", hiragana=katakana_to_hiragana(text))

    has_hiragana = _HIRAGANA_RE.search(text) is not None
    has_katakana = _KATAKANA_RE.search(text) is not None
    if not has_hiragana and not has_katakana:
        return KanaConversion(text, "none")

    return KanaConversion(
        text,
        "mixed",
        hiragana=katakana_to_hiragana(text) if has_katakana else None,
        katakana=hiragana_to_katakana(text) if has_hiragana else None,
    )
