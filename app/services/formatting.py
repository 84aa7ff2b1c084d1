"""Display helpers for summary consumers."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence, Union

from app.core.config import settings
from app.schemas.domain import DatesSource, PartiesSource
from app.services.date_parsing import parse_calendar_date

NOT_AVAILABLE = "Not available"
INVALID_DATE = "Invalid date"

# Kept apart: the two enums share the "text-derived" value.
PARTIES_SOURCE_LABELS = {
    PartiesSource.explicit: "Provided with the merge result",
    PartiesSource.text_derived: "Extracted from contract text",
    PartiesSource.summary_derived: "Extracted from contract summary",
}
DATES_SOURCE_LABELS = {
    DatesSource.log_derived: "Extracted from document incorporation log",
    DatesSource.text_derived: "Extracted from contract text (end date assumes a one-year term)",
}

_DISCLAIMER_HEADER = (
    "***\n\nAI-Generated Output: This document is a product of AI analysis "
    "and a compilation of the following source documents:\n\n"
)
_DISCLAIMER_FOOTER = (
    "\nIt serves as a tool for review and understanding, "
    "not as an official or executed legal instrument.\n\n***"
)


def format_date(value: Union[date, str, None], fmt: Optional[str] = None) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    if isinstance(value, str):
        parsed = parse_calendar_date(value)
        if parsed is None:
            return INVALID_DATE
        value = parsed
    return value.strftime(fmt or settings.DATE_DISPLAY_FORMAT)


def format_date_range(start: Union[date, str, None], end: Union[date, str, None]) -> str:
    fmt = settings.DATE_RANGE_FORMAT
    return f"{format_date(start, fmt)} – {format_date(end, fmt)}"


def source_label(source: Union[PartiesSource, DatesSource, None]) -> Optional[str]:
    """Human label for a provenance tag; each tag has its own label."""
    if isinstance(source, PartiesSource):
        return PARTIES_SOURCE_LABELS[source]
    if isinstance(source, DatesSource):
        return DATES_SOURCE_LABELS[source]
    return None


def build_disclaimer(document_incorporation_log: Sequence[str]) -> str:
    """AI-output disclaimer listing the numbered source documents."""
    if document_incorporation_log:
        listing = "".join(
            f"{index}. {entry}\n" for index, entry in enumerate(document_incorporation_log, start=1)
        )
    else:
        listing = "• No source documents specified\n"
    return _DISCLAIMER_HEADER + listing + _DISCLAIMER_FOOTER


__all__ = [
    "DATES_SOURCE_LABELS",
    "INVALID_DATE",
    "NOT_AVAILABLE",
    "PARTIES_SOURCE_LABELS",
    "build_disclaimer",
    "format_date",
    "format_date_range",
    "source_label",
]
