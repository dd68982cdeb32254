"""Service layer: run the engine and shape results for the API and shell."""

import logging

from models import (
    ClassifyResponse,
    ConjugatedForm,
    ConjugateResponse,
    KanaResponse,
)
from services.errors import ConjugationError
from services.kana import convert_kana
from services.verb import VerbForm, classify, conjugate, normalize

logger = logging.getLogger(__name__)


def classify_word(verb: str) -> ClassifyResponse:
    """Classify a dictionary-form verb."""
    verb_class = classify(verb)
    logger.info("Classified %s as %s", verb, verb_class)
    return ClassifyResponse(
        verb=verb,
        normalized=normalize(verb),
        verb_class=verb_class,
        label=verb_class.label,
        english=verb_class.english,
    )


def conjugate_word(verb: str, requested_forms: list[VerbForm] | None = None) -> ConjugateResponse:
    """Generate conjugations from a dictionary form.

    All ten forms are produced unless specific ones are requested; the
    result always follows display order. Engine errors are logged and
    re-raised unchanged.
    """
    try:
        verb_class = classify(verb)
        wanted = set(requested_forms) if requested_forms else set(VerbForm)
        forms = [
            ConjugatedForm(
                form=form,
                label=form.label,
                english=form.english,
                surface=conjugate(verb, form),
            )
            for form in VerbForm
            if form in wanted
        ]
    except ConjugationError as e:
        logger.warning("Conjugation of %r failed: %s", verb, e)
        raise

    logger.info("Conjugated %s (%s) into %d forms", verb, verb_class, len(forms))
    return ConjugateResponse(
        verb=verb,
        verb_class=verb_class,
        label=verb_class.label,
        conjugations={f.form: f.surface for f in forms},
        forms=forms,
    )


def convert_text(text: str) -> KanaResponse:
    """Convert text between hiragana and katakana."""
    result = convert_kana(text)
    return KanaResponse(
        text=result.text,
        script=result.script,
        hiragana=result.hiragana,
        katakana=result.katakana,
    )
