"""Japanese verb classification and conjugation.

Supports:
- Type I (godan/五段) verbs: かく, のむ, いく, etc.
- Type II (ichidan/一段) verbs: たべる, みる, etc.
- Irregular verbs: する (and ~する compounds), くる/来る

Every form function classifies its input from scratch, extracts the stem
for that class and applies the suffix rule for the requested form. Nothing
is cached and no state is shared between calls.

Examples:
    >>> classify("たべる")
    <VerbClass.ICHIDAN: 'ichidan'>
    >>> conjugate("かく", VerbForm.CONJUNCTIVE)
    'かいて'
"""

import logging
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Callable, assert_never

from services.conjugation.data import (
    A_GRADE,
    CLASS_LABELS,
    E_GRADE,
    FORM_LABELS,
    GODAN_ROWS,
    I_GRADE,
    ICHIDAN_ENDING,
    ICHIDAN_EXCEPTIONS,
    ICHIDAN_PRE_RU,
    ICHIDAN_SUFFIXES,
    IKU,
    IKU_SUFFIXES,
    KANJI_NORMALIZATION,
    KURU,
    KURU_FORMS,
    O_GRADE,
    ONBIN_DEFAULT,
    ONBIN_SUFFIXES,
    SURU,
    SURU_SUFFIXES,
)
from services.errors import (
    InvalidInput,
    MalformedIchidanVerb,
    MalformedSuruVerb,
    UnknownGodanEnding,
)

logger = logging.getLogger(__name__)


class VerbClass(StrEnum):
    """Verb conjugation classes."""

    GODAN = auto()    # 五段 (consonant stem)
    ICHIDAN = auto()  # 一段 (vowel stem)
    SURU = auto()     # サ変
    KURU = auto()     # カ変

    @property
    def label(self) -> str:
        return CLASS_LABELS[self.name][0]

    @property
    def english(self) -> str:
        return CLASS_LABELS[self.name][1]


class VerbForm(StrEnum):
    """The ten generated verb forms, in display order."""

    CONTINUATIVE = auto()  # 連用形 (masu stem)
    CONJUNCTIVE = auto()   # て形
    PAST = auto()          # た形
    NEGATIVE = auto()      # 未然形 + ない
    CONDITIONAL = auto()   # 仮定形 + ば
    IMPERATIVE = auto()    # 命令形
    POTENTIAL = auto()     # 可能形
    PASSIVE = auto()       # 受身形
    CAUSATIVE = auto()     # 使役形
    VOLITIONAL = auto()    # 意向形

    @property
    def label(self) -> str:
        return FORM_LABELS[self.name][0]

    @property
    def english(self) -> str:
        return FORM_LABELS[self.name][1]


@dataclass(frozen=True, slots=True)
class GodanStem:
    """Invariant part of a godan verb plus its dictionary-form ending."""

    stem: str
    ending: str

    def grade(self, index: int) -> str:
        """Stem followed by the ending shifted to the given vowel grade."""
        return self.stem + GODAN_ROWS[self.ending][index]


# ============================================================================
# Normalizer / Classifier
# ============================================================================


def normalize(verb: str) -> str:
    """Map a known kanji spelling to kana; anything else is returned as is."""
    return KANJI_NORMALIZATION.get(verb, verb)


def classify(verb: str) -> VerbClass:
    """Determine the conjugation class of a dictionary-form verb.

    Precedence: くる, then する and ~する compounds, then the structural
    ichidan test (る preceded by an い段/え段 mora) minus the exception
    list, and godan for everything else.

    Raises:
        InvalidInput: If the verb is empty
    """
    if not verb:
        raise InvalidInput()

    normalized = normalize(verb)

    if normalized == KURU:
        return VerbClass.KURU

    if normalized == SURU or normalized.endswith(SURU):
        return VerbClass.SURU

    if normalized.endswith(ICHIDAN_ENDING) and len(normalized) >= 2:
        if normalized[-2] in ICHIDAN_PRE_RU:
            if normalized not in ICHIDAN_EXCEPTIONS:
                return VerbClass.ICHIDAN
            logger.debug("%s is a listed godan exception", normalized)

    return VerbClass.GODAN


# ============================================================================
# Stem Extractor
# ============================================================================


def godan_stem(verb: str) -> GodanStem:
    """Split a godan verb into stem and final mora.

    Raises:
        UnknownGodanEnding: If the final mora has no conjugation row
    """
    normalized = normalize(verb)
    ending = normalized[-1]
    if ending not in GODAN_ROWS:
        raise UnknownGodanEnding(ending)
    return GodanStem(stem=normalized[:-1], ending=ending)


def ichidan_stem(verb: str) -> str:
    """Remove the final る of an ichidan verb."""
    if not verb.endswith(ICHIDAN_ENDING):
        raise MalformedIchidanVerb(verb)
    return verb[:-1]


def suru_stem(verb: str) -> str:
    """Return the noun part of a ~する compound ("" for する itself)."""
    if verb == SURU:
        return ""
    if verb.endswith(SURU):
        return verb[:-len(SURU)]
    raise MalformedSuruVerb(verb)


def onbin_suffixes(verb: str, ending: str) -> tuple[str, str]:
    """Select the (te, ta) suffix pair for a godan ending.

    いく is the only godan verb whose く takes 促音便 instead of イ音便.
    """
    if normalize(verb) == IKU:
        return IKU_SUFFIXES
    return ONBIN_SUFFIXES.get(ending, ONBIN_DEFAULT)


# ============================================================================
# Form Generator
# ============================================================================


def continuative_form(verb: str) -> str:
    """ます形 (連用形): かく -> かき, たべる -> たべ."""
    match classify(verb):
        case VerbClass.GODAN:
            return godan_stem(verb).grade(I_GRADE)
        case VerbClass.ICHIDAN:
            return ichidan_stem(verb) + ICHIDAN_SUFFIXES[VerbForm.CONTINUATIVE.name]
        case VerbClass.SURU:
            return suru_stem(verb) + SURU_SUFFIXES[VerbForm.CONTINUATIVE.name]
        case VerbClass.KURU:
            return KURU_FORMS[VerbForm.CONTINUATIVE.name]
        case unreachable:
            assert_never(unreachable)


def conjunctive_form(verb: str) -> str:
    """て形: かく -> かいて, いく -> いって."""
    match classify(verb):
        case VerbClass.GODAN:
            parts = godan_stem(verb)
            te, _ = onbin_suffixes(verb, parts.ending)
            return parts.stem + te
        case VerbClass.ICHIDAN:
            return ichidan_stem(verb) + ICHIDAN_SUFFIXES[VerbForm.CONJUNCTIVE.name]
        case VerbClass.SURU:
            return suru_stem(verb) + SURU_SUFFIXES[VerbForm.CONJUNCTIVE.name]
        case VerbClass.KURU:
            return KURU_FORMS[VerbForm.CONJUNCTIVE.name]
        case unreachable:
            assert_never(unreachable)


def past_form(verb: str) -> str:
    """た形: かく -> かいた, よむ -> よんだ."""
    match classify(verb):
        case VerbClass.GODAN:
            parts = godan_stem(verb)
            _, ta = onbin_suffixes(verb, parts.ending)
            return parts.stem + ta
        case VerbClass.ICHIDAN:
            return ichidan_stem(verb) + ICHIDAN_SUFFIXES[VerbForm.PAST.name]
        case VerbClass.SURU:
            return suru_stem(verb) + SURU_SUFFIXES[VerbForm.PAST.name]
        case VerbClass.KURU:
            return KURU_FORMS[VerbForm.PAST.name]
        case unreachable:
            assert_never(unreachable)


def negative_form(verb: str) -> str:
    match classify(verb):
        case VerbClass.GODAN:
            return godan_stem(verb).grade(A_GRADE) + "ない"
        case VerbClass.ICHIDAN:
            return ichidan_stem(verb) + ICHIDAN_SUFFIXES[VerbForm.NEGATIVE.name]
        case VerbClass.SURU:
            return suru_stem(verb) + SURU_SUFFIXES[VerbForm.NEGATIVE.name]
        case VerbClass.KURU:
            return KURU_FORMS[VerbForm.NEGATIVE.name]
        case unreachable:
            assert_never(unreachable)


def conditional_form(verb: str) -> str:
    match classify(verb):
        case VerbClass.GODAN:
            return godan_stem(verb).grade(E_GRADE) + "ば"
        case VerbClass.ICHIDAN:
            return ichidan_stem(verb) + ICHIDAN_SUFFIXES[VerbForm.CONDITIONAL.name]
        case VerbClass.SURU:
            return suru_stem(verb) + SURU_SUFFIXES[VerbForm.CONDITIONAL.name]
        case VerbClass.KURU:
            return KURU_FORMS[VerbForm.CONDITIONAL.name]
        case unreachable:
            assert_never(unreachable)


def imperative_form(verb: str) -> str:
    match classify(verb):
        case VerbClass.GODAN:
            return godan_stem(verb).grade(E_GRADE)
        case VerbClass.ICHIDAN:
            return ichidan_stem(verb) + ICHIDAN_SUFFIXES[VerbForm.IMPERATIVE.name]
        case VerbClass.SURU:
            return suru_stem(verb) + SURU_SUFFIXES[VerbForm.IMPERATIVE.name]
        case VerbClass.KURU:
            return KURU_FORMS[VerbForm.IMPERATIVE.name]
        case unreachable:
            assert_never(unreachable)


def potential_form(verb: str) -> str:
    """可能形. する has the suppletive できる rather than a suffix."""
    match classify(verb):
        case VerbClass.GODAN:
            return godan_stem(verb).grade(E_GRADE) + "る"
        case VerbClass.ICHIDAN:
            return ichidan_stem(verb) + ICHIDAN_SUFFIXES[VerbForm.POTENTIAL.name]
        case VerbClass.SURU:
            return suru_stem(verb) + SURU_SUFFIXES[VerbForm.POTENTIAL.name]
        case VerbClass.KURU:
            return KURU_FORMS[VerbForm.POTENTIAL.name]
        case unreachable:
            assert_never(unreachable)


def passive_form(verb: str) -> str:
    match classify(verb):
        case VerbClass.GODAN:
            return godan_stem(verb).grade(A_GRADE) + "れる"
        case VerbClass.ICHIDAN:
            return ichidan_stem(verb) + ICHIDAN_SUFFIXES[VerbForm.PASSIVE.name]
        case VerbClass.SURU:
            return suru_stem(verb) + SURU_SUFFIXES[VerbForm.PASSIVE.name]
        case VerbClass.KURU:
            return KURU_FORMS[VerbForm.PASSIVE.name]
        case unreachable:
            assert_never(unreachable)


def causative_form(verb: str) -> str:
    match classify(verb):
        case VerbClass.GODAN:
            return godan_stem(verb).grade(A_GRADE) + "せる"
        case VerbClass.ICHIDAN:
            return ichidan_stem(verb) + ICHIDAN_SUFFIXES[VerbForm.CAUSATIVE.name]
        case VerbClass.SURU:
            return suru_stem(verb) + SURU_SUFFIXES[VerbForm.CAUSATIVE.name]
        case VerbClass.KURU:
            return KURU_FORMS[VerbForm.CAUSATIVE.name]
        case unreachable:
            assert_never(unreachable)


def volitional_form(verb: str) -> str:
    match classify(verb):
        case VerbClass.GODAN:
            return godan_stem(verb).grade(O_GRADE) + "う"
        case VerbClass.ICHIDAN:
            return ichidan_stem(verb) + ICHIDAN_SUFFIXES[VerbForm.VOLITIONAL.name]
        case VerbClass.SURU:
            return suru_stem(verb) + SURU_SUFFIXES[VerbForm.VOLITIONAL.name]
        case VerbClass.KURU:
            return KURU_FORMS[VerbForm.VOLITIONAL.name]
        case unreachable:
            assert_never(unreachable)


_FORM_FUNCTIONS: dict[VerbForm, Callable[[str], str]] = {
    VerbForm.CONTINUATIVE: continuative_form,
    VerbForm.CONJUNCTIVE: conjunctive_form,
    VerbForm.PAST: past_form,
    VerbForm.NEGATIVE: negative_form,
    VerbForm.CONDITIONAL: conditional_form,
    VerbForm.IMPERATIVE: imperative_form,
    VerbForm.POTENTIAL: potential_form,
    VerbForm.PASSIVE: passive_form,
    VerbForm.CAUSATIVE: causative_form,
    VerbForm.VOLITIONAL: volitional_form,
}


def conjugate(verb: str, form: VerbForm) -> str:
    """Conjugate a dictionary-form verb into a single form.

    Args:
        verb: Dictionary form of the verb
        form: Target form

    Returns:
        The conjugated surface string

    Raises:
        ConjugationError: Any classification or stem extraction failure,
            unchanged
    """
    return _FORM_FUNCTIONS[VerbForm(form)](verb)


def conjugate_all(verb: str) -> dict[VerbForm, str]:
    """All ten forms of a verb, in display order."""
    return {form: conjugate(verb, form) for form in VerbForm}
