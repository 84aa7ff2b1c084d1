"""Contract summary endpoints."""

import logging

from fastapi import APIRouter

from app.schemas.api import ContractReport
from app.schemas.domain import ContractSummary, MergeResult
from app.services import build_report, build_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/summaries", tags=["summaries"])


@router.post("", response_model=ContractSummary)
def create_summary(merge_result: MergeResult):
    """Derive parties, effective dates and narrative from a merge result."""
    summary = build_summary(merge_result)
    logger.info(
        "Built summary (parties=%s, dates=%s)",
        summary.parties_source.value if summary.parties_source else "absent",
        summary.dates_source.value if summary.dates_source else "absent",
    )
    return summary


@router.post("/report", response_model=ContractReport)
def create_report(merge_result: MergeResult):
    """Summary plus stats, grouped clause changes, timeline and disclaimer."""
    return build_report(merge_result)
