"""Static lexical data for verb classification and conjugation.

Everything here is read-only and shared process-wide. The exception list
and the normalization map are hand-curated lexical facts: extend them here,
not in the classification code.
"""

from types import MappingProxyType


# Godan lookup table for verb conjugation
# Base -> (あ段, い段, う段, え段, お段)
GODAN_ROWS = MappingProxyType({
    "う": ("わ", "い", "う", "え", "お"),
    "く": ("か", "き", "く", "け", "こ"),
    "ぐ": ("が", "ぎ", "ぐ", "げ", "ご"),
    "す": ("さ", "し", "す", "せ", "そ"),
    "つ": ("た", "ち", "つ", "て", "と"),
    "ぬ": ("な", "に", "ぬ", "ね", "の"),
    "ふ": ("は", "ひ", "ふ", "へ", "ほ"),
    "ぶ": ("ば", "び", "ぶ", "べ", "ぼ"),
    "む": ("ま", "み", "む", "め", "も"),
    "る": ("ら", "り", "る", "れ", "ろ"),
})

# Vowel grade indices into a GODAN_ROWS row
A_GRADE = 0
I_GRADE = 1
U_GRADE = 2
E_GRADE = 3
O_GRADE = 4


# Kanji spellings with a canonical kana form
KANJI_NORMALIZATION = MappingProxyType({
    "行く": "いく",
    "来る": "くる",
})


KURU = "くる"
SURU = "する"
ICHIDAN_ENDING = "る"

# Mora allowed immediately before a final る for an ichidan candidate
ICHIDAN_PRE_RU = frozenset({
    # い段
    "き", "し", "ち", "に", "ひ", "み", "り", "ぎ", "じ", "ぢ", "び", "ぴ",
    # え段
    "け", "せ", "て", "ね", "へ", "め", "れ", "げ", "ぜ", "で", "べ", "ぺ",
})

# Godan verbs that look like ichidan (帰る, 走る, 知る, ...).
# ねる (寝る) is ichidan and deliberately absent.
ICHIDAN_EXCEPTIONS = frozenset({
    "かえる", "はしる", "しる", "きる", "はいる", "いる", "へる",
    "かぎる", "ける", "まいる", "まじる", "にぎる", "ちる", "てる",
    "しげる", "あせる", "すべる", "しゃべる", "かじる", "しめる", "みなぎる",
})


# Te/Ta form sound changes (音便)
# final char -> (te, ta)
ONBIN_SUFFIXES = MappingProxyType({
    "う": ("って", "った"),  # gemination
    "つ": ("って", "った"),
    "る": ("って", "った"),
    "む": ("んで", "んだ"),  # nasalization
    "ぶ": ("んで", "んだ"),
    "ぬ": ("んで", "んだ"),
    "く": ("いて", "いた"),
    "ぐ": ("いで", "いだ"),
    "す": ("して", "した"),
})

ONBIN_DEFAULT = ("て", "た")

# 行く uses 促音便 instead of イ音便
IKU = "いく"
IKU_SUFFIXES = ("って", "った")


# Fixed endings per form, keyed by VerbForm member name.
# Ichidan and suru endings attach to the stem; kuru forms are whole words.
ICHIDAN_SUFFIXES = MappingProxyType({
    "CONTINUATIVE": "",
    "CONJUNCTIVE": "て",
    "PAST": "た",
    "NEGATIVE": "ない",
    "CONDITIONAL": "れば",
    "IMPERATIVE": "ろ",
    "POTENTIAL": "られる",
    "PASSIVE": "られる",
    "CAUSATIVE": "させる",
    "VOLITIONAL": "よう",
})

SURU_SUFFIXES = MappingProxyType({
    "CONTINUATIVE": "し",
    "CONJUNCTIVE": "して",
    "PAST": "した",
    "NEGATIVE": "しない",
    "CONDITIONAL": "すれば",
    "IMPERATIVE": "しろ",
    "POTENTIAL": "できる",  # suppletive
    "PASSIVE": "される",
    "CAUSATIVE": "させる",
    "VOLITIONAL": "しよう",
})

KURU_FORMS = MappingProxyType({
    "CONTINUATIVE": "き",
    "CONJUNCTIVE": "きて",
    "PAST": "きた",
    "NEGATIVE": "こない",
    "CONDITIONAL": "くれば",
    "IMPERATIVE": "こい",
    "POTENTIAL": "こられる",
    "PASSIVE": "こられる",
    "CAUSATIVE": "こさせる",
    "VOLITIONAL": "こよう",
})


# Display labels, keyed by enum member name: (japanese, english)
CLASS_LABELS = MappingProxyType({
    "GODAN": ("五段", "godan (consonant-stem)"),
    "ICHIDAN": ("一段", "ichidan (vowel-stem)"),
    "SURU": ("サ変", "suru irregular"),
    "KURU": ("カ変", "kuru irregular"),
})

FORM_LABELS = MappingProxyType({
    "CONTINUATIVE": ("ます形", "continuative (masu stem)"),
    "CONJUNCTIVE": ("て形", "conjunctive (te form)"),
    "PAST": ("た形", "simple past"),
    "NEGATIVE": ("ない形", "negative"),
    "CONDITIONAL": ("ば形", "conditional"),
    "IMPERATIVE": ("命令形", "imperative"),
    "POTENTIAL": ("可能形", "potential"),
    "PASSIVE": ("受身形", "passive"),
    "CAUSATIVE": ("使役形", "causative"),
    "VOLITIONAL": ("意向形", "volitional"),
})
