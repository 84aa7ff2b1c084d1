"""Document incorporation log parsing.

Log entries are produced upstream in the form
``"<filename> (<role>, <date-text>)"``, e.g.
``"amend1.pdf (amendment, June 15, 2023)"``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from app.schemas.api import TimelineItem
from app.schemas.domain import MergeResult
from app.services.date_parsing import parse_calendar_date

# Trailing parenthesised group: role up to the first comma, date after it.
_ENTRY_PATTERN = re.compile(r"^(?P<filename>.*?)\s*\((?P<role>[^(),]*),\s*(?P<date>[^()]+?)\)\s*$")


@dataclass(frozen=True, slots=True)
class IncorporationEntry:
    filename: str
    role: str
    date_text: str


def parse_incorporation_entry(entry: str) -> Optional[IncorporationEntry]:
    """Split a log entry into filename, role and date text, or None."""
    match = _ENTRY_PATTERN.match(entry.strip())
    if match is None:
        return None
    return IncorporationEntry(
        filename=match.group("filename").strip(),
        role=match.group("role").strip(),
        date_text=match.group("date").strip(),
    )


def build_timeline(merge_result: MergeResult) -> list[TimelineItem]:
    """One timeline item per parseable log entry, in log order."""
    items: list[TimelineItem] = []
    for raw in merge_result.document_incorporation_log:
        entry = parse_incorporation_entry(raw)
        if entry is None:
            continue
        items.append(
            TimelineItem(
                title=entry.filename,
                role=entry.role,
                kind="base" if entry.role.lower() == "base" else "amendment",
                date=parse_calendar_date(entry.date_text),
                date_text=entry.date_text,
            )
        )
    return items


__all__ = ["IncorporationEntry", "build_timeline", "parse_incorporation_entry"]
