"""Pydantic models for Katsuyo API requests and responses."""

from pydantic import BaseModel, Field

from services.kana import Script
from services.verb import VerbClass, VerbForm


# ============================================================================
# Request Models
# ============================================================================


class ClassifyRequest(BaseModel):
    """Request body for verb classification."""
    verb: str = Field(..., min_length=1, max_length=50, description="Dictionary form")


class ConjugateRequest(BaseModel):
    """Request body for conjugation."""
    verb: str = Field(..., min_length=1, max_length=50, description="Dictionary form")
    forms: list[VerbForm] | None = Field(None, description="Specific forms to generate (optional)")


class KanaRequest(BaseModel):
    """Request body for kana conversion."""
    text: str = Field(..., min_length=1, max_length=1000, description="Text to convert")


# ============================================================================
# Response Models
# ============================================================================


class ClassifyResponse(BaseModel):
    """Response for /classify."""
    verb: str = Field(..., description="Input verb")
    normalized: str = Field(..., description="Verb after kanji normalization")
    verb_class: VerbClass = Field(..., description="Conjugation class")
    label: str = Field(..., description="Japanese class name")
    english: str = Field(..., description="English class name")


class ConjugatedForm(BaseModel):
    """Single generated form."""
    form: VerbForm
    label: str = Field(..., description="Japanese form name, e.g. て形")
    english: str = Field(..., description="English form name")
    surface: str = Field(..., description="Conjugated word")


class ConjugateResponse(BaseModel):
    """Response for /conjugate."""
    verb: str = Field(..., description="Dictionary form")
    verb_class: VerbClass = Field(..., description="Conjugation class")
    label: str = Field(..., description="Japanese class name")
    conjugations: dict[VerbForm, str] = Field(..., description="Form -> conjugated word")
    forms: list[ConjugatedForm] = Field(default_factory=list, description="Forms with labels, in display order")


class KanaResponse(BaseModel):
    """Response for /kana."""
    text: str
    script: Script = Field(..., description="hiragana, katakana, mixed or none")
    hiragana: str | None = Field(None, description="Hiragana rendering, if any kana")
    katakana: str | None = Field(None, description="Katakana rendering, if any kana")
