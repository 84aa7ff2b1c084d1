"""Domain schemas for contract summaries."""

from app.schemas.domain import (
    AmendmentSummary,
    ChangeType,
    ClauseChange,
    ContractSummary,
    DatesSource,
    MergeResult,
    PartiesSource,
)

__all__ = [
    "AmendmentSummary",
    "ChangeType",
    "ClauseChange",
    "ContractSummary",
    "DatesSource",
    "MergeResult",
    "PartiesSource",
]
