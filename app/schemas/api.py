"""API response models for summary endpoints."""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.domain import ChangeType, ClauseChange, ContractSummary


class TimelineItem(BaseModel):
    """A document from the incorporation log."""

    model_config = ConfigDict(frozen=True)

    title: str
    role: str
    kind: Literal["base", "amendment"]
    date: Optional[datetime.date] = None
    date_text: str


class SectionChanges(BaseModel):
    """Clause changes grouped under one main section."""

    model_config = ConfigDict(frozen=True)

    section_id: str
    changes: list[ClauseChange]
    aggregated_change_type: ChangeType


class ContractStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_clauses: int
    amendments_applied: int
    changes_detected: int
    documents_incorporated: int
    change_type_counts: dict[ChangeType, int]


class ContractReport(BaseModel):
    """Summary plus the supporting views rendered next to it."""

    model_config = ConfigDict(frozen=True)

    summary: ContractSummary
    parties_label: Optional[str] = None
    dates_label: Optional[str] = None
    date_range: str
    stats: ContractStats
    sections: list[SectionChanges]
    timeline: list[TimelineItem]
    timeline_total: int
    disclaimer: str
