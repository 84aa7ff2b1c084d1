"""Contracting party extraction.

Explicit party lists on the merge result are authoritative; the assembler
checks :func:`explicit_parties` before falling back to
:func:`extract_parties`, which runs regex cascades over the final contract
text and then over the base summary.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from app.schemas.domain import MergeResult, PartiesSource
from app.services.patterns import TextPattern, first_success, named_groups

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 3

# Upper bounds on every free-text span keep each match attempt short, so a
# cascade stays linear in the length of the contract.
_MAX_NAME_CHARS = 150
_MAX_ROLE_CHARS = 80
_MAX_GAP_CHARS = 200

_CLIENT_ROLE = rf"\([^)\n]{{0,{_MAX_ROLE_CHARS}}}?(?i:client|customer)[^)\n]{{0,{_MAX_ROLE_CHARS}}}\)"
_PROVIDER_ROLE = rf"\([^)\n]{{0,{_MAX_ROLE_CHARS}}}?(?i:provider|company|contractor)[^)\n]{{0,{_MAX_ROLE_CHARS}}}\)"
_OPTIONAL_ROLE = rf"(?:\s*\([^)\n]{{0,{_MAX_ROLE_CHARS}}}\))?"
_WORD = r"(?>[A-Z0-9][\w&.'-]*)"
# Up to six capitalized words on one line, e.g. "Acme Holdings, Inc." or "Bank of Nowhere".
_PROPER_NAME = rf"\b{_WORD}(?:,?[ \t]+(?:(?:of|de|du|la|&)[ \t]+)?{_WORD}){{0,5}}"
# Name text on a single line, up to the opening parenthesis of a role.
_ROLE_NAME = rf'([^("\n]{{1,{_MAX_NAME_CHARS}}})'
_LIST_NAME = rf"([^,\n]{{1,{_MAX_NAME_CHARS}}}?)"
# A party list ends at a comma, semicolon, newline, sentence end or end of text.
_BOUNDARY = r"(?=[,;\n]|\.(?:\s|$)|$)"

_BETWEEN_AND = (
    rf"between\s+{_LIST_NAME}{_OPTIONAL_ROLE}\s*(?:,\s*)?and\s+{_LIST_NAME}{_OPTIONAL_ROLE}{_BOUNDARY}"
)

CONTRACT_PATTERNS: tuple[TextPattern, ...] = (
    TextPattern(
        "between-client-and-provider",
        re.compile(
            rf"between\s+{_ROLE_NAME}{_CLIENT_ROLE}\s*,?\s*and\s+{_ROLE_NAME}{_PROVIDER_ROLE}",
            re.IGNORECASE,
        ),
    ),
    TextPattern("between-and", re.compile(_BETWEEN_AND, re.IGNORECASE)),
    TextPattern(
        "entered-into-by",
        re.compile(
            rf"entered\s+into\s+by\s+{_LIST_NAME}{_OPTIONAL_ROLE}\s*(?:,\s*)?and\s+{_LIST_NAME}"
            rf"{_OPTIONAL_ROLE}{_BOUNDARY}",
            re.IGNORECASE,
        ),
    ),
    TextPattern(
        "client-agrees-with-provider",
        re.compile(
            rf"(?P<client>{_PROPER_NAME})\s*{_CLIENT_ROLE}.{{0,{_MAX_GAP_CHARS}}}?"
            rf"\b(?i:agrees?\s+with|and)\s+(?:the\s+)?"
            rf"(?P<provider>{_PROPER_NAME})\s*{_PROVIDER_ROLE}"
        ),
        named_groups("client", "provider"),
    ),
)

SUMMARY_PATTERNS: tuple[TextPattern, ...] = (
    TextPattern("between-and", re.compile(_BETWEEN_AND, re.IGNORECASE)),
    TextPattern(
        "agreement-between",
        re.compile(
            rf"agreement.{{0,{_MAX_GAP_CHARS}}}?between\s+{_LIST_NAME}\s*and\s+{_LIST_NAME}{_BOUNDARY}",
            re.IGNORECASE,
        ),
    ),
)

_LEADING_ARTICLE = re.compile(r"""^[\s"'“‘]*(?:the\s+)?""", re.IGNORECASE)
_TRAILING_PUNCT = re.compile(r"""[\s,;:!?"'“”‘’()\[\]-]+$""")
_ABBREVIATION_END = re.compile(r"\b(?:inc|llc|corp|ltd|co|plc)\.$", re.IGNORECASE)
_CORPORATE_SUFFIX = re.compile(r",?\s*\b(inc|llc|corp|ltd|co|plc)(\.?)$", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class ExtractedParties:
    """Two or more party names with their provenance."""

    parties: tuple[str, ...]
    source: PartiesSource


def _strip_trailing(name: str) -> str:
    while True:
        stripped = _TRAILING_PUNCT.sub("", name)
        if stripped.endswith(".") and not _ABBREVIATION_END.search(stripped):
            stripped = stripped[:-1]
        if stripped == name:
            return name
        name = stripped


def normalize_party_name(raw: str) -> str:
    """Strip a leading definite article and trailing punctuation.

    A trailing period that belongs to a corporate suffix ("Inc.") is kept,
    and "Acme, Inc." becomes "Acme Inc.".
    """
    name = " ".join(raw.split())
    name = _LEADING_ARTICLE.sub("", name)
    name = _strip_trailing(name)
    suffix = _CORPORATE_SUFFIX.search(name)
    if suffix:
        name = f"{name[: suffix.start()]} {suffix.group(1)}{suffix.group(2)}"
    return name.strip()


def _accept_pair(captures: tuple[str, ...]) -> Optional[tuple[str, ...]]:
    names = tuple(normalize_party_name(c) for c in captures[:2])
    if len(names) == 2 and all(len(n) >= MIN_NAME_LENGTH for n in names):
        return names
    return None


def explicit_parties(merge_result: MergeResult) -> Optional[tuple[str, ...]]:
    """Non-blank names from ``merge_result.parties``, or None if there are none."""
    if not merge_result.parties:
        return None
    names = tuple(p.strip() for p in merge_result.parties if p and p.strip())
    return names or None


def extract_parties(merge_result: MergeResult) -> Optional[ExtractedParties]:
    """Derive the two contracting parties from free text, or None."""
    cascades = (
        (CONTRACT_PATTERNS, merge_result.final_contract, PartiesSource.text_derived),
        (SUMMARY_PATTERNS, merge_result.base_summary, PartiesSource.summary_derived),
    )
    for patterns, text, source in cascades:
        hit = first_success(patterns, text, _accept_pair)
        if hit is not None:
            pattern, names = hit
            logger.debug("Parties matched pattern %s (%s)", pattern.name, source.value)
            return ExtractedParties(parties=names, source=source)
    return None


__all__ = [
    "CONTRACT_PATTERNS",
    "ExtractedParties",
    "SUMMARY_PATTERNS",
    "explicit_parties",
    "extract_parties",
    "normalize_party_name",
]
