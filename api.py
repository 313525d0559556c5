"""
Number Speller — FastAPI Server
===============================

HTTP interface to the spelling pipeline.

Endpoints:
    POST /spell             Spell a number given in the request body
    GET  /spell/{number}    Spell a number given in the path
    GET  /constraints       What a valid number looks like
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from number_speller import __version__
from number_speller.config import load_settings
from number_speller.exceptions import InvalidNumber, SpellError
from number_speller.models import GroupSpelling, SpellReport
from number_speller.pipeline import SpellPipeline
from number_speller.validators import number_constraints

load_dotenv()


# ─── Application Lifespan ───────────────────────────────────────────

_pipeline: SpellPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the pipeline from SPELL_* settings on startup."""
    global _pipeline  # noqa: PLW0603
    _pipeline = SpellPipeline(load_settings())
    yield
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Speller API",
    description=(
        "Spells non-negative integers of up to 101 digits in English words "
        "and in a words-and-digits mix, using US short-scale names."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class SpellRequest(BaseModel):
    """Request body for the /spell endpoint."""

    number: str = Field(
        ...,
        description="Digits of the number to spell; commas are allowed as separators.",
        json_schema_extra={"example": "1,000,020"},
    )


class GroupOut(GroupSpelling):
    """API-facing group breakdown (inherits all fields from GroupSpelling)."""


class SpellResponse(BaseModel):
    """Spelling report returned by the API."""

    number_in_digits: str
    number_in_words: str
    number_in_words_and_digits: str
    number_length: int
    verified: bool
    groups: list[GroupOut]

    model_config = {"json_schema_extra": {"example": {
        "number_in_digits": "1001",
        "number_in_words": "one thousand one ",
        "number_in_words_and_digits": "1 thousand 1 ",
        "number_length": 4,
        "verified": True,
        "groups": [
            {"digits": "001", "value": 1, "words": "one", "scale_index": 1, "scale_name": "thousand"},
            {"digits": "001", "value": 1, "words": "one", "scale_index": 0, "scale_name": ""},
        ],
    }}}


class ConstraintsResponse(BaseModel):
    max_digits: int
    constraints: str


class HealthResponse(BaseModel):
    status: str
    version: str
    max_digits: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> SpellPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


def _build_response(report: SpellReport) -> SpellResponse:
    """Convert the internal SpellReport to the API response schema."""
    return SpellResponse(
        number_in_digits=report.number_in_digits,
        number_in_words=report.number_in_words,
        number_in_words_and_digits=report.number_in_words_and_digits,
        number_length=report.number_length,
        verified=report.verified,
        groups=[GroupOut.model_validate(g, from_attributes=True) for g in report.groups],
    )


def _spell(number: str) -> SpellResponse:
    """Run the pipeline, mapping spelling errors to HTTP errors."""
    pipeline = _get_pipeline()
    try:
        report = pipeline.run(number)
    except InvalidNumber as e:
        raise HTTPException(
            status_code=422,
            detail={"code": e.code, "message": e.message, "details": e.details},
        )
    except SpellError as e:
        raise HTTPException(status_code=500, detail={"code": e.code, "message": e.message})
    return _build_response(report)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/spell",
    summary="Spell a number",
    tags=["Spelling"],
    responses={
        422: {"description": "Not a valid number"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
def spell_number(request: SpellRequest) -> SpellResponse:
    """Spell the number in the request body.

    Returns:
    - **number_in_words**: e.g. `"one thousand one "`
    - **number_in_words_and_digits**: e.g. `"1 thousand 1 "`
    - **groups**: per 3-digit group breakdown, most significant first
    """
    return _spell(request.number)


@app.get(
    "/spell/{number}",
    summary="Spell a number given in the path",
    tags=["Spelling"],
    responses={
        422: {"description": "Not a valid number"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
def spell_number_path(number: str) -> SpellResponse:
    return _spell(number)


@app.get("/constraints", summary="Input constraints", tags=["Spelling"])
def constraints() -> ConstraintsResponse:
    """Describes what the API accepts as a number."""
    pipeline = _get_pipeline()
    max_digits = pipeline.settings.max_digits
    return ConstraintsResponse(max_digits=max_digits, constraints=number_constraints(max_digits))


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    pipeline = _get_pipeline()
    return HealthResponse(
        status="healthy",
        version=__version__,
        max_digits=pipeline.settings.max_digits,
    )
