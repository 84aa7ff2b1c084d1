"""Calendar date parsing for free-text date fragments."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as dateparser

logger = logging.getLogger(__name__)

# dateutil fills missing components from ``default``. Parsing with two
# defaults that differ in every component exposes fragments that lack a
# year, month or day, so nothing is ever filled from the current clock.
_PROBE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))
# Two-digit years make bare number runs ("1 2 3", "10/11/12") ambiguous.
_FOUR_DIGIT_YEAR = re.compile(r"(?<!\d)\d{4}(?!\d)")


def parse_calendar_date(text: str) -> Optional[date]:
    """Parse a complete calendar date (year, month and day) from ``text``.

    The year must be written with four digits. Returns None for blank,
    malformed or incomplete fragments.
    """
    fragment = text.strip()
    if not _FOUR_DIGIT_YEAR.search(fragment):
        return None

    try:
        first, second = (dateparser.parse(fragment, default=d) for d in _PROBE_DEFAULTS)
    except (ValueError, OverflowError) as e:
        logger.debug("Unparseable date fragment %r: %s", fragment, e)
        return None

    if first.date() != second.date():
        logger.debug("Incomplete date fragment %r", fragment)
        return None
    return first.date()


__all__ = ["parse_calendar_date"]
