"""Tests for contracting party extraction."""

import time

import pytest

from app.schemas.domain import MergeResult, PartiesSource
from app.services.parties import (
    ExtractedParties,
    explicit_parties,
    extract_parties,
    normalize_party_name,
)


class TestNormalizePartyName:
    """Tests for normalize_party_name."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("  The Acme Corp,  ", "Acme Corp"),
            ('"Beta LLC".', "Beta LLC"),
            ("Acme, Inc.", "Acme Inc."),
            ("Widget Co.", "Widget Co."),
            ("Northwind\n  Traders;", "Northwind Traders"),
            ("Omega Partners.", "Omega Partners"),
            ("the Regents of Example University", "Regents of Example University"),
        ],
    )
    def test_normalization(self, raw, expected):
        assert normalize_party_name(raw) == expected


class TestContractTextPatterns:
    """Tests for the cascade over final_contract."""

    def test_between_client_and_provider(self, merge_result):
        assert extract_parties(merge_result) == ExtractedParties(
            parties=("Acme Corp", "Beta LLC"),
            source=PartiesSource.text_derived,
        )

    def test_generic_between_and(self):
        result = MergeResult(
            final_contract=(
                "This Master Services Agreement is made by and between "
                "Northwind Traders and Contoso Ltd., effective upon signature."
            )
        )

        parties = extract_parties(result)

        assert parties.parties == ("Northwind Traders", "Contoso Ltd.")
        assert parties.source == PartiesSource.text_derived

    def test_generic_between_strips_article(self):
        result = MergeResult(
            final_contract="Agreement between the Regents of Example University and Widget Co., dated below."
        )

        assert extract_parties(result).parties == ("Regents of Example University", "Widget Co.")

    def test_entered_into_by(self):
        result = MergeResult(
            final_contract="This agreement is entered into by Alpha Inc. and Omega Partners, on the date below."
        )

        assert extract_parties(result).parties == ("Alpha Inc.", "Omega Partners")

    def test_role_annotated_relaxed_order(self):
        result = MergeResult(
            final_contract='Acme Holdings ("Customer") hereby agrees with Zenith Labs ("Contractor") as follows.'
        )

        assert extract_parties(result).parties == ("Acme Holdings", "Zenith Labs")

    def test_names_do_not_span_lines(self):
        result = MergeResult(
            final_contract='Nothing between us.\nAcme Corp (the "Client") and Beta LLC (the "Provider") agree.'
        )

        assert extract_parties(result).parties == ("Acme Corp", "Beta LLC")

    def test_short_names_are_rejected(self):
        result = MergeResult(final_contract="Disputes between A and B, if any, go to arbitration.")

        assert extract_parties(result) is None


class TestSummaryFallback:
    """Tests for the cascade over base_summary."""

    def test_base_summary_between(self):
        result = MergeResult(
            base_summary="A consulting agreement between Gamma Group and Delta Works, covering data services."
        )

        assert extract_parties(result) == ExtractedParties(
            parties=("Gamma Group", "Delta Works"),
            source=PartiesSource.summary_derived,
        )

    def test_contract_text_takes_priority_over_summary(self, merge_result_data):
        merge_result_data["base_summary"] = "An agreement between Gamma Group and Delta Works, as amended."
        result = MergeResult.model_validate(merge_result_data)

        assert extract_parties(result).source == PartiesSource.text_derived

    def test_summary_used_when_contract_has_no_parties(self):
        result = MergeResult(
            final_contract="The Services are described in Exhibit A.",
            base_summary="Services agreement between Gamma Group and Delta Works.",
        )

        parties = extract_parties(result)

        assert parties.parties == ("Gamma Group", "Delta Works")
        assert parties.source == PartiesSource.summary_derived


class TestNoParties:
    """Absence is the only failure mode."""

    def test_empty_merge_result(self, empty_merge_result):
        assert extract_parties(empty_merge_result) is None

    def test_text_without_party_phrases(self):
        result = MergeResult(final_contract="No parties here.", base_summary="Nothing to see.")

        assert extract_parties(result) is None


class TestExplicitParties:
    """Tests for explicit_parties."""

    def test_explicit_names_are_returned_in_order(self):
        result = MergeResult(parties=["Acme Corp", "Beta LLC"])

        assert explicit_parties(result) == ("Acme Corp", "Beta LLC")

    def test_blank_names_are_dropped(self):
        result = MergeResult(parties=["  ", " Solo Corp "])

        assert explicit_parties(result) == ("Solo Corp",)

    @pytest.mark.parametrize("parties", [None, [], ["", "   "]])
    def test_no_usable_names(self, parties):
        assert explicit_parties(MergeResult(parties=parties)) is None


class TestLongContractText:
    """Extraction time grows linearly with the contract text."""

    @pytest.mark.parametrize(
        "sentence",
        [
            "IN NO EVENT SHALL EITHER PARTY BE LIABLE FOR ANY INDIRECT, INCIDENTAL, SPECIAL OR "
            "CONSEQUENTIAL DAMAGES, LOST PROFITS OR LOSS OF DATA ARISING OUT OF THIS AGREEMENT "
            "EVEN IF ADVISED OF THEIR POSSIBILITY. ",
            "Each Party Shall Keep All Confidential Information Of The Other Party Secret "
            "For Five Years After Termination Of This Agreement. ",
            "ANY DISPUTE BETWEEN THE PARTIES SHALL BE RESOLVED BY BINDING ARBITRATION IN THE "
            "COUNTY OF ORIGIN. ",
        ],
    )
    def test_long_capitalized_paragraph(self, sentence):
        paragraph = sentence * (50_000 // len(sentence) + 1)
        result = MergeResult(final_contract="Services are provided as described.\n" + paragraph)

        started = time.perf_counter()
        parties = extract_parties(result)
        elapsed = time.perf_counter() - started

        assert parties is None
        assert elapsed < 2.0

    def test_parties_found_after_long_paragraph(self):
        sentence = "IN NO EVENT SHALL EITHER PARTY BE LIABLE FOR LOST PROFITS. "
        text = sentence * 1000 + '\nAcme Holdings ("Customer") hereby agrees with Zenith Labs ("Contractor").'

        assert extract_parties(MergeResult(final_contract=text)).parties == ("Acme Holdings", "Zenith Labs")
