"""Tests for domain schemas."""

from datetime import date

import pytest
from pydantic import ValidationError

from app.schemas.domain import (
    ChangeType,
    ClauseChange,
    ContractSummary,
    DatesSource,
    MergeResult,
    PartiesSource,
)


class TestMergeResult:
    """Tests for MergeResult normalization."""

    def test_null_sequences_become_empty(self):
        result = MergeResult.model_validate(
            {
                "amendment_summaries": None,
                "clause_change_log": None,
                "document_incorporation_log": None,
            }
        )

        assert result.amendment_summaries == []
        assert result.clause_change_log == []
        assert result.document_incorporation_log == []
        assert result.parties is None

    def test_is_read_only(self, merge_result):
        with pytest.raises(ValidationError):
            merge_result.final_contract = "changed"

    def test_wrong_shape_is_rejected(self):
        with pytest.raises(ValidationError):
            MergeResult.model_validate({"amendment_summaries": "not a list"})


class TestClauseChange:
    """Tests for ClauseChange.known_type."""

    def test_known_type(self):
        assert ClauseChange(change_type="Modified").known_type == ChangeType.modified

    def test_unknown_type(self):
        assert ClauseChange(change_type="renamed").known_type is None


class TestContractSummary:
    """Field groups are all-or-nothing."""

    def test_complete_summary(self):
        summary = ContractSummary(
            parties=("Acme Corp", "Beta LLC"),
            parties_source=PartiesSource.explicit,
            effective_start=date(2023, 1, 1),
            effective_end=date(2023, 6, 15),
            dates_source=DatesSource.log_derived,
            narrative="Base.",
        )

        assert summary.model_dump(mode="json")["parties_source"] == "explicit"
        assert summary.model_dump(mode="json")["dates_source"] == "log-derived"

    def test_parties_without_source(self):
        with pytest.raises(ValidationError):
            ContractSummary(parties=("Acme Corp", "Beta LLC"), narrative="x")

    def test_partial_dates(self):
        with pytest.raises(ValidationError):
            ContractSummary(effective_start=date(2023, 1, 1), dates_source=DatesSource.log_derived, narrative="x")

    def test_start_after_end(self):
        with pytest.raises(ValidationError):
            ContractSummary(
                effective_start=date(2024, 1, 1),
                effective_end=date(2023, 1, 1),
                dates_source=DatesSource.text_derived,
                narrative="x",
            )
