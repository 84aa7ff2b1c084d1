"""Narrative synthesis for the contract summary."""

from __future__ import annotations

from app.schemas.domain import AmendmentSummary, ChangeType, MergeResult
from app.services.clause_changes import tally_change_types

NO_ANALYSIS_SENTINEL = "No contract analysis available."
KEY_CHANGES_HEADING = "Key Changes and Amendments:"

# (change type, singular phrase, plural phrase), in output order.
_CHANGE_PHRASES = (
    (ChangeType.added, "new clause added", "new clauses added"),
    (ChangeType.modified, "clause modified", "clauses modified"),
    (ChangeType.deleted, "clause deleted", "clauses deleted"),
)


def _amendments_section(amendments: list[AmendmentSummary]) -> str:
    lines = [KEY_CHANGES_HEADING]
    for amendment in amendments:
        lines.append(f"- {amendment.document}")
        if not amendment.changes:
            lines.append("  • No changes recorded")
        lines.extend(f"  • {change}" for change in amendment.changes)
    return "\n".join(lines)


def _clause_counts_line(merge_result: MergeResult) -> str | None:
    counts = tally_change_types(merge_result.clause_change_log)
    parts = [
        f"{counts[change_type]} {singular if counts[change_type] == 1 else plural}"
        for change_type, singular, plural in _CHANGE_PHRASES
        if counts[change_type]
    ]
    if not parts:
        return None
    return f"Clause changes: {', '.join(parts)}."


def _incorporation_sentence(count: int) -> str:
    noun = "document" if count == 1 else "documents"
    return (
        f"This unified contract incorporates {count} {noun}, "
        "merged in the chronological order in which they apply."
    )


def synthesize_narrative(merge_result: MergeResult) -> str:
    """Human-readable narrative of the merged contract.

    An AI-authored ``final_summary`` is returned verbatim. Otherwise the
    narrative is built from the base summary, the amendment change bullets,
    the clause change counts and the number of incorporated documents, in
    that fixed order.
    """
    if merge_result.final_summary and merge_result.final_summary.strip():
        return merge_result.final_summary

    base = (merge_result.base_summary or "").strip()
    blocks = [base or NO_ANALYSIS_SENTINEL]

    if merge_result.amendment_summaries:
        blocks.append(_amendments_section(merge_result.amendment_summaries))

    counts_line = _clause_counts_line(merge_result)
    if counts_line:
        blocks.append(counts_line)

    if merge_result.document_incorporation_log:
        blocks.append(_incorporation_sentence(len(merge_result.document_incorporation_log)))

    return "\n\n".join(blocks)


__all__ = ["KEY_CHANGES_HEADING", "NO_ANALYSIS_SENTINEL", "synthesize_narrative"]
