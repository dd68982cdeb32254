#!/usr/bin/env python3
"""Tests for kana detection and conversion."""

from services.kana import (
    convert_kana,
    hiragana_to_katakana,
    is_hiragana,
    is_kana,
    is_katakana,
    katakana_to_hiragana,
)


def test_detection():
    assert is_hiragana("あいうえお")
    assert not is_hiragana("アイウエオ")
    assert not is_hiragana("")
    assert is_katakana("カタカナ")
    assert not is_katakana("かたかな")
    assert is_kana("ひらがな")
    assert is_kana("カタカナ")
    assert not is_kana("ひらがなカタカナ")
    assert not is_kana("日本語")


def test_hiragana_to_katakana():
    assert hiragana_to_katakana("あいうえお") == "アイウエオ"
    assert hiragana_to_katakana("がぎぐげご") == "ガギグゲゴ"
    assert hiragana_to_katakana("ぱぴぷぺぽ") == "パピプペポ"
    assert hiragana_to_katakana("きゃきゅきょ") == "キャキュキョ"


def test_katakana_to_hiragana():
    assert katakana_to_hiragana("カタカナ") == "かたかな"
    assert katakana_to_hiragana("ジャ") == "じゃ"


def test_non_kana_passes_through():
    assert hiragana_to_katakana("日本ご") == "日本ゴ"
    assert katakana_to_hiragana("abc") == "abc"


def test_convert_hiragana():
    result = convert_kana("あいうえお")
    assert result.script == "hiragana"
    assert result.katakana == "アイウエオ"
    assert result.hiragana is None


def test_convert_katakana():
    result = convert_kana("カタカナ")
    assert result.script == "katakana"
    assert result.hiragana == "かたかな"
    assert result.katakana is None


def test_convert_mixed():
    result = convert_kana("ひらがなカタカナ")
    assert result.script == "mixed"
    assert result.hiragana == "ひらがなかたかな"
    assert result.katakana == "ヒラガナカタカナ"


def test_convert_mixed_with_kanji():
    result = convert_kana("漢字とカナ")
    assert result.script == "mixed"
    assert result.katakana == "漢字トカナ"
    assert result.hiragana == "漢字とかな"


def test_convert_without_kana():
    result = convert_kana("abc")
    assert result.script == "none"
    assert result.hiragana is None
    assert result.katakana is None


if __name__ == "__main__":
    for text in ["あいうえお", "カタカナ", "ひらがなカタカナ", "abc"]:
        print(convert_kana(text))
