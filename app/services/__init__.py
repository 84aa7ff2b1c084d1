"""Contract summary extraction services."""

from app.services.assembler import build_report, build_summary
from app.services.dates import ExtractedDates, extract_dates
from app.services.narrative import NO_ANALYSIS_SENTINEL, synthesize_narrative
from app.services.parties import ExtractedParties, extract_parties

__all__ = [
    "ExtractedDates",
    "ExtractedParties",
    "NO_ANALYSIS_SENTINEL",
    "build_report",
    "build_summary",
    "extract_dates",
    "extract_parties",
    "synthesize_narrative",
]
