"""Ordered regex cascades with first-success-wins evaluation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")


def _all_groups(match: re.Match[str]) -> tuple[str, ...]:
    return tuple(g or "" for g in match.groups())


def named_groups(*names: str) -> Callable[[re.Match[str]], tuple[str, ...]]:
    """Extractor returning the given named groups, in that order."""

    def extract(match: re.Match[str]) -> tuple[str, ...]:
        return tuple(match.group(name) or "" for name in names)

    return extract


@dataclass(frozen=True, slots=True)
class TextPattern:
    """A named regex plus the function that turns its match into captures."""

    name: str
    regex: re.Pattern[str]
    extract: Callable[[re.Match[str]], tuple[str, ...]] = field(default=_all_groups)

    def search(self, text: str) -> Optional[tuple[str, ...]]:
        """Captures of the first match in ``text``, or None."""
        match = self.regex.search(text)
        if match is None:
            return None
        return self.extract(match)


def first_success(
    patterns: Iterable[TextPattern],
    text: Optional[str],
    accept: Callable[[tuple[str, ...]], Optional[T]],
) -> Optional[tuple[TextPattern, T]]:
    """Run ``patterns`` in order against ``text``.

    For each pattern that matches, ``accept`` converts the captures into a
    value or rejects them with None. The first accepted value wins; a
    rejected match moves on to the next pattern.
    """
    if not text:
        return None
    for pattern in patterns:
        captures = pattern.search(text)
        if captures is None:
            continue
        value = accept(captures)
        if value is not None:
            return pattern, value
    return None


__all__ = ["TextPattern", "first_success", "named_groups"]
