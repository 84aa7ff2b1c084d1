"""Pytest configuration and fixtures."""

import pytest

from app.schemas.domain import MergeResult

FINAL_CONTRACT = (
    "MASTER SERVICES AGREEMENT\n"
    "This Agreement is entered into on March 3, 2022, by and between "
    'Acme Corp (the "Client") and Beta LLC (the "Provider").\n'
    "1. Services. Provider shall deliver the services described in Exhibit A.\n"
    "7. Liability. Liability of either party is capped at the fees paid.\n"
)


@pytest.fixture
def merge_result_data():
    """Raw merge result as produced by the upstream merge step."""
    return {
        "final_contract": FINAL_CONTRACT,
        "base_summary": "Base text.",
        "amendment_summaries": [
            {
                "document": "amend1.pdf",
                "role": "amendment",
                "changes": ["Added liability cap"],
            }
        ],
        "clause_change_log": [
            {
                "section": "Section 7.2: Liability Cap",
                "change_type": "added",
                "old_text": "",
                "new_text": "Liability is capped at the fees paid.",
                "summary": "New liability cap",
            },
            {
                "section": "Section 3.1: Fees",
                "change_type": "modified",
                "old_text": "Fees are due in 60 days.",
                "new_text": "Fees are due in 30 days.",
                "summary": "Shorter payment window",
            },
        ],
        "document_incorporation_log": [
            "base.pdf (base, January 1, 2023)",
            "amend1.pdf (amendment, June 15, 2023)",
        ],
    }


@pytest.fixture
def merge_result(merge_result_data):
    """Validated merge result."""
    return MergeResult.model_validate(merge_result_data)


@pytest.fixture
def empty_merge_result():
    """Merge result with nothing to extract."""
    return MergeResult()
