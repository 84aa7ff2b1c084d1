"""Clause change log analysis: tallies, section grouping and statistics."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Optional

from app.schemas.api import ContractStats, SectionChanges
from app.schemas.domain import ChangeType, ClauseChange, MergeResult

UNSPECIFIED_SECTION = "Unspecified"

_MAIN_SECTION_PATTERNS = (
    re.compile(r"^(Section\s+\d+)", re.IGNORECASE),
    re.compile(r"^(Article\s+\d+)", re.IGNORECASE),
    re.compile(r"^(Chapter\s+\d+)", re.IGNORECASE),
    re.compile(r"^(Part\s+\d+)", re.IGNORECASE),
    re.compile(r"^(\d+\.)"),
    re.compile(r"^([A-Z]+\.)"),
)
_BEFORE_SEPARATOR = re.compile(r"^([^:\-]+)")
_FIRST_NUMBER = re.compile(r"(\d+)")

# Highest priority first.
_AGGREGATION_ORDER = (ChangeType.deleted, ChangeType.modified)


def tally_change_types(changes: Iterable[ClauseChange]) -> dict[ChangeType, int]:
    """Count entries per known change type; unknown labels are ignored."""
    counts = Counter(c.known_type for c in changes if c.known_type is not None)
    return {change_type: counts.get(change_type, 0) for change_type in ChangeType}


def main_section_identifier(section: Optional[str]) -> str:
    """Main section of a clause reference ("Section 2" for "Section 2.1: Term")."""
    if not section or not section.strip():
        return UNSPECIFIED_SECTION
    section = section.strip()
    for pattern in _MAIN_SECTION_PATTERNS:
        match = pattern.match(section)
        if match:
            return match.group(1).strip()
    match = _BEFORE_SEPARATOR.match(section)
    return match.group(1).strip() if match else section


def aggregate_change_type(changes: Iterable[ClauseChange]) -> ChangeType:
    """deleted beats modified beats added."""
    present = {c.known_type for c in changes}
    for change_type in _AGGREGATION_ORDER:
        if change_type in present:
            return change_type
    return ChangeType.added


def _section_sort_key(section_id: str) -> tuple[bool, int]:
    match = _FIRST_NUMBER.search(section_id)
    if match is None:
        return (True, 0)
    return (False, int(match.group(1)))


def group_clause_changes(merge_result: MergeResult) -> list[SectionChanges]:
    """Group clause changes by main section, numbered sections first."""
    grouped: dict[str, list[ClauseChange]] = {}
    for change in merge_result.clause_change_log:
        grouped.setdefault(main_section_identifier(change.section), []).append(change)

    return [
        SectionChanges(
            section_id=section_id,
            changes=changes,
            aggregated_change_type=aggregate_change_type(changes),
        )
        for section_id, changes in sorted(grouped.items(), key=lambda kv: _section_sort_key(kv[0]))
    ]


def compute_stats(merge_result: MergeResult) -> ContractStats:
    bullets = sum(len(a.changes) for a in merge_result.amendment_summaries)
    return ContractStats(
        total_clauses=len(merge_result.clause_change_log),
        amendments_applied=len(merge_result.amendment_summaries),
        changes_detected=bullets + len(merge_result.clause_change_log),
        documents_incorporated=len(merge_result.document_incorporation_log),
        change_type_counts=tally_change_types(merge_result.clause_change_log),
    )


__all__ = [
    "UNSPECIFIED_SECTION",
    "aggregate_change_type",
    "compute_stats",
    "group_clause_changes",
    "main_section_identifier",
    "tally_change_types",
]
