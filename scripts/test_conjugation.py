#!/usr/bin/env python3
"""Tests for the ten verb forms across all four conjugation classes.

Covers the godan 音便 rules for て/た forms, including the 行く exception.
"""

import pytest

from services.conjugation.data import (
    GODAN_ROWS,
    ICHIDAN_SUFFIXES,
    KURU_FORMS,
    SURU_SUFFIXES,
)
from services.verb import (
    VerbForm,
    causative_form,
    conditional_form,
    conjugate,
    conjugate_all,
    conjunctive_form,
    continuative_form,
    imperative_form,
    negative_form,
    onbin_suffixes,
    passive_form,
    past_form,
    potential_form,
    volitional_form,
)

# verb -> forms in VerbForm order
FULL_TABLES = {
    "かく": ["かき", "かいて", "かいた", "かかない", "かけば", "かけ", "かける", "かかれる", "かかせる", "かこう"],
    "いく": ["いき", "いって", "いった", "いかない", "いけば", "いけ", "いける", "いかれる", "いかせる", "いこう"],
    "はなす": ["はなし", "はなして", "はなした", "はなさない", "はなせば", "はなせ", "はなせる", "はなされる", "はなさせる", "はなそう"],
    "たつ": ["たち", "たって", "たった", "たたない", "たてば", "たて", "たてる", "たたれる", "たたせる", "たとう"],
    "よむ": ["よみ", "よんで", "よんだ", "よまない", "よめば", "よめ", "よめる", "よまれる", "よませる", "よもう"],
    "あう": ["あい", "あって", "あった", "あわない", "あえば", "あえ", "あえる", "あわれる", "あわせる", "あおう"],
    "たべる": ["たべ", "たべて", "たべた", "たべない", "たべれば", "たべろ", "たべられる", "たべられる", "たべさせる", "たべよう"],
    "みる": ["み", "みて", "みた", "みない", "みれば", "みろ", "みられる", "みられる", "みさせる", "みよう"],
    "する": ["し", "して", "した", "しない", "すれば", "しろ", "できる", "される", "させる", "しよう"],
    "べんきょうする": [
        "べんきょうし", "べんきょうして", "べんきょうした", "べんきょうしない", "べんきょうすれば",
        "べんきょうしろ", "べんきょうできる", "べんきょうされる", "べんきょうさせる", "べんきょうしよう",
    ],
    "くる": ["き", "きて", "きた", "こない", "くれば", "こい", "こられる", "こられる", "こさせる", "こよう"],
}

ONBIN_GROUPS = {
    ("って", "った"),
    ("んで", "んだ"),
    ("いて", "いた"),
    ("いで", "いだ"),
    ("して", "した"),
    ("て", "た"),
}


@pytest.mark.parametrize("verb", list(FULL_TABLES))
def test_full_table(verb):
    expected = dict(zip(VerbForm, FULL_TABLES[verb]))
    assert conjugate_all(verb) == expected


def test_conjugate_all_keeps_display_order():
    assert list(conjugate_all("かく")) == list(VerbForm)


def test_kaku_scenario():
    assert continuative_form("かく") == "かき"
    assert conjunctive_form("かく") == "かいて"
    assert past_form("かく") == "かいた"
    assert negative_form("かく") == "かかない"
    assert conditional_form("かく") == "かけば"
    assert imperative_form("かく") == "かけ"
    assert potential_form("かく") == "かける"
    assert passive_form("かく") == "かかれる"
    assert causative_form("かく") == "かかせる"
    assert volitional_form("かく") == "かこう"


class TestOnbin:
    """て/た sound changes for godan verbs."""

    def test_gemination(self):
        assert conjunctive_form("あう") == "あって"
        assert conjunctive_form("たつ") == "たって"
        assert past_form("かえる") == "かえった"

    def test_nasalization(self):
        assert conjunctive_form("よむ") == "よんで"
        assert conjunctive_form("あそぶ") == "あそんで"
        assert past_form("しぬ") == "しんだ"

    def test_i_onbin(self):
        assert conjunctive_form("かく") == "かいて"
        assert conjunctive_form("およぐ") == "およいで"
        assert past_form("およぐ") == "およいだ"

    def test_su(self):
        assert conjunctive_form("はなす") == "はなして"
        assert past_form("はなす") == "はなした"

    def test_iku_override(self):
        assert conjunctive_form("いく") == "いって"
        assert past_form("いく") == "いった"
        assert conjunctive_form("行く") == "いって"
        assert past_form("行く") == "いった"

    def test_iku_override_is_exact_match(self):
        # ~いく compounds fall back to the regular く rule
        assert conjunctive_form("ひいく") == "ひいいて"

    def test_unlisted_ending_takes_plain_suffix(self):
        assert onbin_suffixes("たまふ", "ふ") == ("て", "た")
        assert conjunctive_form("たまふ") == "たまて"

    @pytest.mark.parametrize("ending", list(GODAN_ROWS))
    def test_te_and_ta_share_group(self, ending):
        verb = "あ" + ending
        te = conjunctive_form(verb)[1:]
        ta = past_form(verb)[1:]
        assert (te, ta) in ONBIN_GROUPS


class TestIrregular:
    def test_suru_potential_is_suppletive(self):
        assert potential_form("する") == "できる"
        assert passive_form("する") == "される"

    def test_kuru(self):
        assert negative_form("くる") == "こない"
        assert imperative_form("くる") == "こい"

    def test_kanji_kuru_is_normalized(self):
        assert negative_form("来る") == "こない"
        assert conjunctive_form("来る") == "きて"


class TestFormTables:
    """Fixed endings come from the per-form tables."""

    @pytest.mark.parametrize("table", [ICHIDAN_SUFFIXES, SURU_SUFFIXES, KURU_FORMS])
    def test_every_form_has_an_entry(self, table):
        assert set(table) == {form.name for form in VerbForm}

    @pytest.mark.parametrize("form", list(VerbForm))
    def test_forms_follow_tables(self, form):
        assert conjugate("くる", form) == KURU_FORMS[form.name]
        assert conjugate("する", form) == SURU_SUFFIXES[form.name]
        assert conjugate("りょこうする", form) == "りょこう" + SURU_SUFFIXES[form.name]
        assert conjugate("たべる", form) == "たべ" + ICHIDAN_SUFFIXES[form.name]


def test_ichidan_scenario():
    assert continuative_form("たべる") == "たべ"
    assert conjunctive_form("たべる") == "たべて"
    assert potential_form("たべる") == "たべられる"
    assert volitional_form("たべる") == "たべよう"


def test_kanji_stems_pass_through():
    assert conjunctive_form("食べる") == "食べて"
    assert negative_form("書く") == "書かない"


def test_conjugate_accepts_form_values():
    assert conjugate("かく", "conjunctive") == "かいて"
    assert conjugate("かえる", VerbForm.CONJUNCTIVE) == "かえって"


def main():
    """Print the full table for a few verbs."""
    for verb in ("書く", "行く", "食べる", "する", "来る", "かえる"):
        print(f"\n{verb}:")
        for form, surface in conjugate_all(verb).items():
            print(f"  {form.label}: {surface}")


if __name__ == "__main__":
    main()
