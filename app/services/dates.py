"""Effective date range extraction.

Two strategies, first success wins:

1. log-derived: every parseable date in the document incorporation log;
   the range spans the earliest to the latest of them.
2. text-derived: the first drafting-idiom date found in the final contract
   text. The contract term is not detected; the end date is the start date
   plus one calendar year, kept as a fixed placeholder so that consumers
   see stable values across releases.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from app.schemas.domain import DatesSource, MergeResult
from app.services.date_parsing import parse_calendar_date
from app.services.incorporation import parse_incorporation_entry
from app.services.patterns import TextPattern, first_success

logger = logging.getLogger(__name__)

PLACEHOLDER_TERM = relativedelta(years=1)

_MONTH = r"\b(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?"
_MONTH_DAY_YEAR = rf"{_MONTH}\s+\d{{1,2}}(?:st|nd|rd|th)?,?\s+\d{{4}}"
_DATE = (
    rf"(?:{_MONTH_DAY_YEAR}"
    rf"|\d{{1,2}}(?:st|nd|rd|th)?\s+{_MONTH},?\s+\d{{4}}"
    r"|\d{4}-\d{1,2}-\d{1,2}"
    r"|\d{1,2}/\d{1,2}/\d{4})"
)

DATE_PATTERNS: tuple[TextPattern, ...] = (
    TextPattern(
        "entered-into-on",
        re.compile(rf"entered\s+into\s+(?:on|as\s+of)\s+({_DATE})", re.IGNORECASE),
    ),
    TextPattern(
        "effective",
        re.compile(
            rf"effective\s+(?:date\s*(?:is|of|:)?\s*)?(?:as\s+of\s+|on\s+)?({_DATE})",
            re.IGNORECASE,
        ),
    ),
    TextPattern(
        "dated",
        re.compile(rf"dated\s+(?:as\s+of\s+)?({_DATE})", re.IGNORECASE),
    ),
    TextPattern(
        "this-agreement",
        re.compile(rf"this\s+agreement.{{0,300}}?({_MONTH_DAY_YEAR})", re.IGNORECASE),
    ),
)


@dataclass(frozen=True, slots=True)
class ExtractedDates:
    """Effective date range with its provenance. start <= end always holds."""

    effective_start: date
    effective_end: date
    source: DatesSource


def _dates_from_log(merge_result: MergeResult) -> Optional[ExtractedDates]:
    found: set[date] = set()
    for raw in merge_result.document_incorporation_log:
        entry = parse_incorporation_entry(raw)
        if entry is None:
            continue
        parsed = parse_calendar_date(entry.date_text)
        if parsed is not None:
            found.add(parsed)

    if not found:
        return None
    ordered = sorted(found)
    return ExtractedDates(
        effective_start=ordered[0],
        effective_end=ordered[-1],
        source=DatesSource.log_derived,
    )


def _date_from_captures(captures: tuple[str, ...]) -> Optional[date]:
    return parse_calendar_date(captures[0])


def _dates_from_text(merge_result: MergeResult) -> Optional[ExtractedDates]:
    hit = first_success(DATE_PATTERNS, merge_result.final_contract, _date_from_captures)
    if hit is None:
        return None
    pattern, start = hit
    try:
        end = start + PLACEHOLDER_TERM
    except (ValueError, OverflowError):
        logger.debug("No placeholder end date for %s", start)
        return None
    logger.debug("Contract date matched pattern %s", pattern.name)
    return ExtractedDates(effective_start=start, effective_end=end, source=DatesSource.text_derived)


def extract_dates(merge_result: MergeResult) -> Optional[ExtractedDates]:
    """Derive the effective date range, or None when nothing parses."""
    return _dates_from_log(merge_result) or _dates_from_text(merge_result)


__all__ = ["DATE_PATTERNS", "ExtractedDates", "PLACEHOLDER_TERM", "extract_dates"]
