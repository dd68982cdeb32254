"""Katsuyo FastAPI application - Japanese verb conjugation API."""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from logger import setup_logging
from models import (
    ClassifyRequest,
    ClassifyResponse,
    ConjugateRequest,
    ConjugateResponse,
    KanaRequest,
    KanaResponse,
)
from services import __version__
from services.analysis import classify_word, conjugate_word, convert_text

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Katsuyo API",
    description="""Japanese verb classification and conjugation API.

## Features
- **Classification**: godan, ichidan, suru or kuru from the dictionary form
- **Conjugation**: ten canonical forms, including 音便 for godan verbs
- **Kana**: hiragana/katakana conversion

## Endpoints
- `/classify` - Conjugation class of a verb
- `/conjugate` - Generate conjugations from dictionary form
- `/kana` - Convert between kana scripts
""",
    version=__version__,
)


# ============================================================================
# Middleware
# ============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "katsuyo", "version": __version__}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Detailed health check."""
    return {"status": "healthy", "version": __version__}


# ============================================================================
# Conjugation Endpoints
# ============================================================================


@app.post("/classify", response_model=ClassifyResponse, tags=["Conjugation"])
async def classify_endpoint(request: ClassifyRequest) -> ClassifyResponse:
    """Return the conjugation class of a dictionary-form verb."""
    try:
        return classify_word(request.verb)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        logger.exception("Classification of %r failed", request.verb)
        raise HTTPException(status_code=500, detail=f"Classification failed: {e!s}") from e


@app.post("/conjugate", response_model=ConjugateResponse, tags=["Conjugation"])
async def conjugate_endpoint(request: ConjugateRequest) -> ConjugateResponse:
    """
    Generate conjugations from a dictionary form.

    Specify which forms you want, or get all ten.
    """
    try:
        return conjugate_word(request.verb, request.forms)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        logger.exception("Conjugation of %r failed", request.verb)
        raise HTTPException(status_code=500, detail=f"Conjugation failed: {e!s}") from e


# ============================================================================
# Kana Endpoints
# ============================================================================


@app.post("/kana", response_model=KanaResponse, tags=["Kana"])
async def kana_endpoint(request: KanaRequest) -> KanaResponse:
    """Convert text between hiragana and katakana."""
    return convert_text(request.text)


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
