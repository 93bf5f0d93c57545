"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own request model; the formatting endpoints
share one response model carrying the text and the split-word records.
Formatter settings travel as a plain JSON object and are validated by
FormatterConfig inside the endpoint, so a bad setting is reported with
the formatter's own message.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- ``config`` keys are FormatterConfig field names; unknown keys are ignored
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class FormatRequest(BaseModel):
    """Body of POST /format: one paragraph and its settings."""

    text: str = Field(description="Paragraph to format. Whitespace runs separate words.")
    config: Optional[Dict[str, Any]] = Field(
        default=None,
        description="FormatterConfig fields (columns, format_style, hard_margins, ...).",
    )
    tag: Optional[str] = Field(
        default=None,
        description="Tag placed before the paragraph, e.g. '1.'.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "The quick brown fox jumps over the lazy dog.",
                "config": {"columns": 20, "first_indent": 0, "format_style": "justify"},
            }
        ]
    }}


class ParagraphsRequest(BaseModel):
    """Body of POST /paragraphs: a document split on blank lines."""

    text: str = Field(description="Text whose paragraphs are separated by blank lines.")
    config: Optional[Dict[str, Any]] = Field(
        default=None,
        description="FormatterConfig fields (columns, format_style, hard_margins, ...).",
    )
    tag_style: Optional[str] = Field(
        default=None,
        description="Number every paragraph: number, alpha, ALPHA, roman or ROMAN.",
    )
    tag_template: str = Field(
        default="{}.",
        description="Template for generated tags; '{}' is replaced by the label.",
    )


class CenterRequest(BaseModel):
    """Body of POST /center."""

    text: str = Field(description="Lines to center; blank lines stay blank.")
    config: Optional[Dict[str, Any]] = Field(
        default=None,
        description="FormatterConfig fields; columns, margins and tabstop apply.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class SplitWordInfo(BaseModel):
    """A word that was divided across a line boundary."""

    word: str = Field(description="The word before splitting.")
    first: str = Field(description="Part kept on the earlier line, including any mark.")
    rest: Optional[str] = Field(default=None, description="Part carried to the next line.")


class FormatResponse(BaseModel):
    """Formatted text plus the words that had to be split."""

    text: str = Field(description="The formatted text.")
    split_words: List[SplitWordInfo] = Field(
        default_factory=list,
        description="Words divided while formatting, in order.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "The  quick  brown\nfox jumps over the\nlazy dog.\n",
                "split_words": [],
            }
        ]
    }}


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: Any = Field(description="Human-readable error description or validation errors.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
