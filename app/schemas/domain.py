"""Domain models for merge results and contract summaries."""

import enum
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ChangeType(str, enum.Enum):
    added = "added"
    modified = "modified"
    deleted = "deleted"


class PartiesSource(str, enum.Enum):
    """Where the party names came from, in decreasing order of trust."""

    explicit = "explicit"
    text_derived = "text-derived"
    summary_derived = "summary-derived"


class DatesSource(str, enum.Enum):
    """Where the effective date range came from."""

    log_derived = "log-derived"
    text_derived = "text-derived"


class AmendmentSummary(BaseModel):
    """Changes introduced by a single amendment or ancillary document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    document: str
    role: Optional[str] = None
    changes: list[str] = Field(default_factory=list)

    @field_validator("changes", mode="before")
    @classmethod
    def _null_changes(cls, value: Any) -> Any:
        return [] if value is None else value


class ClauseChange(BaseModel):
    """One entry of the clause change log.

    Any ``change_type`` label is accepted; only :class:`ChangeType` values
    are counted.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    change_type: Optional[str] = None
    section: Optional[str] = None
    old_text: Optional[str] = None
    new_text: Optional[str] = None
    summary: Optional[str] = None

    @property
    def known_type(self) -> Optional[ChangeType]:
        try:
            return ChangeType((self.change_type or "").strip().lower())
        except ValueError:
            return None


class MergeResult(BaseModel):
    """Output of the upstream document merge/analysis step.

    Read-only input. Fields that the producer omitted or sent as null are
    normalized to ``None`` (text) or an empty list (sequences).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    final_contract: Optional[str] = None
    final_summary: Optional[str] = None
    base_summary: Optional[str] = None
    amendment_summaries: list[AmendmentSummary] = Field(default_factory=list)
    clause_change_log: list[ClauseChange] = Field(default_factory=list)
    document_incorporation_log: list[str] = Field(default_factory=list)
    parties: Optional[list[str]] = None

    @field_validator(
        "amendment_summaries",
        "clause_change_log",
        "document_incorporation_log",
        mode="before",
    )
    @classmethod
    def _null_sequences(cls, value: Any) -> Any:
        return [] if value is None else value


class ContractSummary(BaseModel):
    """Display-ready summary of a merged contract.

    Each derived group is either complete (value plus source tag) or
    entirely absent.
    """

    model_config = ConfigDict(frozen=True)

    parties: Optional[tuple[str, ...]] = None
    parties_source: Optional[PartiesSource] = None
    effective_start: Optional[date] = None
    effective_end: Optional[date] = None
    dates_source: Optional[DatesSource] = None
    narrative: str

    @model_validator(mode="after")
    def _check_groups(self) -> "ContractSummary":
        if (self.parties is None) != (self.parties_source is None):
            raise ValueError("parties and parties_source must be set together")
        date_fields = (self.effective_start, self.effective_end, self.dates_source)
        if any(f is None for f in date_fields) and any(f is not None for f in date_fields):
            raise ValueError("effective dates and dates_source must be set together")
        if self.effective_start is not None and self.effective_start > self.effective_end:
            raise ValueError("effective_start must not be after effective_end")
        return self
