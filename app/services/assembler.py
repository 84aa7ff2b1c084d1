"""Summary assembly: runs the extractors and tags each field with its source.

Pure functions of the merge result. Nothing is cached or mutated, so calls
for different merge results need no coordination.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from app.core.config import settings
from app.schemas.api import ContractReport
from app.schemas.domain import ContractSummary, MergeResult, PartiesSource
from app.services.clause_changes import compute_stats, group_clause_changes
from app.services.dates import extract_dates
from app.services.formatting import build_disclaimer, format_date_range, source_label
from app.services.incorporation import build_timeline
from app.services.narrative import synthesize_narrative
from app.services.parties import explicit_parties, extract_parties

logger = logging.getLogger(__name__)

MergeResultLike = Union[MergeResult, Mapping[str, Any]]


def _as_merge_result(merge_result: MergeResultLike) -> MergeResult:
    if isinstance(merge_result, MergeResult):
        return merge_result
    # Structurally invalid input raises pydantic.ValidationError here.
    return MergeResult.model_validate(merge_result)


def build_summary(merge_result: MergeResultLike) -> ContractSummary:
    """Build the display-ready summary for one merge result.

    Explicit ``parties`` on the merge result take precedence over anything
    inferred from text. Fields that cannot be derived are left absent
    together with their source tag.
    """
    result = _as_merge_result(merge_result)

    parties = explicit_parties(result)
    parties_source = PartiesSource.explicit if parties is not None else None
    if parties is None:
        extracted_parties = extract_parties(result)
        if extracted_parties is not None:
            parties = extracted_parties.parties
            parties_source = extracted_parties.source

    dates = extract_dates(result)
    narrative = synthesize_narrative(result)

    logger.debug(
        "Summary built: parties=%s dates=%s",
        parties_source.value if parties_source else None,
        dates.source.value if dates else None,
    )

    return ContractSummary(
        parties=parties,
        parties_source=parties_source,
        effective_start=dates.effective_start if dates else None,
        effective_end=dates.effective_end if dates else None,
        dates_source=dates.source if dates else None,
        narrative=narrative,
    )


def build_report(merge_result: MergeResultLike) -> ContractReport:
    """Summary plus statistics, grouped clause changes, timeline and disclaimer."""
    result = _as_merge_result(merge_result)
    summary = build_summary(result)
    timeline = build_timeline(result)

    return ContractReport(
        summary=summary,
        parties_label=source_label(summary.parties_source),
        dates_label=source_label(summary.dates_source),
        date_range=format_date_range(summary.effective_start, summary.effective_end),
        stats=compute_stats(result),
        sections=group_clause_changes(result),
        timeline=timeline[: settings.TIMELINE_PREVIEW_LIMIT],
        timeline_total=len(timeline),
        disclaimer=build_disclaimer(result.document_incorporation_log),
    )


__all__ = ["MergeResultLike", "build_report", "build_summary"]
