"""FastAPI application exposing the formatter over HTTP.

WHY: Editors, bots and pipelines that are not written in Python still want
reflowed text. A small JSON API lets them send text plus settings and get
back the formatted result and the words that had to be split.

HOW: Every request builds its own FormatterConfig (environment defaults
overlaid with the request's ``config`` object) and a fresh TextFormatter,
so requests never share a split-word log. Validation failures from
FormatterConfig or the tag generator become 422 responses.

RULES:
- All endpoints have OpenAPI descriptions and a consistent ErrorResponse
- Invalid settings -> 422 with the validation message
- A fresh engine per request; no state survives between requests
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from text_reflow import __version__
from text_reflow.config import (
    ENV_BODY_INDENT,
    ENV_COLUMNS,
    ENV_FIRST_INDENT,
    ENV_TABSTOP,
    LOG_LEVEL,
    SERVER_HOST,
    SERVER_PORT,
)
from text_reflow.formatter import PARAGRAPH_SEPARATOR, TextFormatter
from text_reflow.models import FormatterConfig
from text_reflow.server.models import (
    CenterRequest,
    ErrorResponse,
    FormatRequest,
    FormatResponse,
    HealthResponse,
    ParagraphsRequest,
    SplitWordInfo,
)
from text_reflow.tags import make_tags

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Text Reflow API",
    description=(
        "Reflow plain text into fixed-width lines with margins, indentation, "
        "left/right/fill/justify alignment, sentence spacing and word "
        "splitting. Submit text with optional settings and receive the "
        "formatted text together with every word that was split."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

_INVALID_CONFIG = {422: {"model": ErrorResponse, "description": "Invalid formatter settings"}}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_formatter(settings: Optional[Dict[str, Any]], **extra: Any) -> TextFormatter:
    """Create a formatter from env defaults overlaid with request settings.

    Raises:
        HTTPException: 422 if the settings do not validate.
    """
    merged: Dict[str, Any] = {
        "columns": ENV_COLUMNS,
        "first_indent": ENV_FIRST_INDENT,
        "body_indent": ENV_BODY_INDENT,
        "tabstop": ENV_TABSTOP,
    }
    merged.update(settings or {})
    merged.update(extra)
    try:
        config = FormatterConfig.model_validate(merged)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        )
    return TextFormatter(config)


def _response(formatter: TextFormatter, text: str) -> FormatResponse:
    return FormatResponse(
        text=text,
        split_words=[
            SplitWordInfo(word=s.word, first=s.first, rest=s.rest)
            for s in formatter.split_words
        ],
    )


# ---------------------------------------------------------------------------
# Endpoints: Formatting
# ---------------------------------------------------------------------------


@app.post(
    "/format",
    response_model=FormatResponse,
    tags=["formatting"],
    summary="Format a single paragraph",
    description=(
        "Treats the whole text as one paragraph. An optional tag is placed "
        "in the first line's indent, or on its own line if it does not fit."
    ),
    responses=_INVALID_CONFIG,
)
async def format_paragraph(request: FormatRequest) -> FormatResponse:
    formatter = _build_formatter(request.config)
    result = formatter.format(request.text, tag=request.tag)
    logger.info(
        "Formatted paragraph: %d chars in, %d lines out, %d splits",
        len(request.text), result.count("\n"), len(formatter.split_words),
    )
    return _response(formatter, result)


@app.post(
    "/paragraphs",
    response_model=FormatResponse,
    tags=["formatting"],
    summary="Format every paragraph of a document",
    description=(
        "Splits the text on blank lines and formats each paragraph. With "
        "tag_style set, paragraphs are numbered in order."
    ),
    responses=_INVALID_CONFIG,
)
async def format_paragraphs(request: ParagraphsRequest) -> FormatResponse:
    extra: Dict[str, Any] = {}
    if request.tag_style:
        count = len(re.split(PARAGRAPH_SEPARATOR, request.text))
        try:
            tags = make_tags(request.tag_style, count, template=request.tag_template)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc))
        extra = {"tag_paragraph": True, "tag_text": tags}

    formatter = _build_formatter(request.config, **extra)
    result = formatter.paragraphs(request.text)
    logger.info(
        "Formatted document: %d chars in, %d lines out, %d splits",
        len(request.text), result.count("\n") + 1 if result else 0,
        len(formatter.split_words),
    )
    return _response(formatter, result)


@app.post(
    "/center",
    response_model=FormatResponse,
    tags=["formatting"],
    summary="Center lines",
    description="Centers each line between the margins. Blank lines stay blank.",
    responses=_INVALID_CONFIG,
)
async def center_lines(request: CenterRequest) -> FormatResponse:
    formatter = _build_formatter(request.config)
    result = formatter.center(request.text)
    logger.info("Centered %d lines", result.count("\n"))
    return _response(formatter, result)


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the text-reflow-api console script."""
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL or "INFO",
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("Starting Text Reflow API on %s:%d", SERVER_HOST, SERVER_PORT)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
