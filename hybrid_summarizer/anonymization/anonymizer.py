"""Deterministic, pattern-based PII anonymizer.

Processing flow:
1. Compile the ordered category registry once, at construction.
2. Fold the registry over an accumulator {text, artifacts, counter}:
   a. Find every match of the category pattern in the current text.
   b. Replace matches rightmost first so earlier offsets stay valid.
   c. Give each match a placeholder "[<CATEGORY>_<n>]" from the shared counter.
3. Return anonymized text + artifacts (the restoration map).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import reduce

from hybrid_summarizer.anonymization.models import (
    AnonymizationResult,
    Artifact,
    PiiCategory,
)
from hybrid_summarizer.anonymization.registry import PII_CATEGORIES
from hybrid_summarizer.config.exceptions import ConfigurationError
from hybrid_summarizer.logging.logger import Log


@dataclass(frozen=True)
class _Pass:
    """Accumulator threaded through the category fold."""

    text: str
    artifacts: tuple[Artifact, ...]
    counter: int


class Anonymizer:
    """Replaces PII with unique bracketed placeholders.

    Heuristic only: the patterns target US-style identifiers and are not
    guaranteed to find every PII occurrence.
    """

    def __init__(self, categories: tuple[PiiCategory, ...] | None = PII_CATEGORIES) -> None:
        if not categories:
            raise ConfigurationError("PII category registry is empty")
        self._categories = tuple(categories)
        self._compiled = [self._compile(category) for category in self._categories]

    @property
    def categories(self) -> tuple[PiiCategory, ...]:
        return self._categories

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def anonymize(self, text: str) -> AnonymizationResult:
        """Replace PII in *text* with labeled placeholders.

        Returns:
            AnonymizationResult with the anonymized text and one artifact
            per replacement, in replacement order.
        """
        if not text:
            return AnonymizationResult(anonymized_text="", artifacts=[])

        final = reduce(
            self._apply_category,
            zip(self._categories, self._compiled),
            _Pass(text=text, artifacts=(), counter=1),
        )

        Log.info(f"Anonymized: {len(final.artifacts)} PII entities replaced")
        return AnonymizationResult(
            anonymized_text=final.text,
            artifacts=list(final.artifacts),
        )

    # ------------------------------------------------------------------
    # Registry compilation
    # ------------------------------------------------------------------

    @staticmethod
    def _compile(category: PiiCategory) -> re.Pattern[str]:
        if not category.name or not category.pattern:
            raise ConfigurationError(f"PII category {category!r} has no name or pattern")
        flags = re.IGNORECASE if category.ignore_case else 0
        try:
            compiled = re.compile(category.pattern, flags)
        except re.error as exc:
            raise ConfigurationError(
                f"Invalid pattern for PII category {category.name}: {exc}"
            ) from exc
        if category.group > compiled.groups:
            raise ConfigurationError(
                f"PII category {category.name} replaces group {category.group}, "
                f"but its pattern has only {compiled.groups}"
            )
        return compiled

    # ------------------------------------------------------------------
    # One category pass
    # ------------------------------------------------------------------

    @staticmethod
    def _apply_category(
        state: _Pass,
        entry: tuple[PiiCategory, re.Pattern[str]],
    ) -> _Pass:
        category, pattern = entry
        spans = Anonymizer._find_spans(pattern, state.text, category.group)
        if not spans:
            return state

        text = state.text
        counter = state.counter
        artifacts = list(state.artifacts)
        for start, end in reversed(spans):
            placeholder = f"[{category.name}_{counter}]"
            counter += 1
            artifacts.append(
                Artifact(
                    type=category.name,
                    original=text[start:end],
                    replacement=placeholder,
                )
            )
            text = text[:start] + placeholder + text[end:]

        Log.debug(f"PII category {category.name}: {len(spans)} matches")
        return _Pass(text=text, artifacts=tuple(artifacts), counter=counter)

    @staticmethod
    def _find_spans(pattern: re.Pattern[str], text: str, group: int) -> list[tuple[int, int]]:
        """Spans of *group* for every match, left to right, never overlapping.

        For group 0 this is plain ``finditer``. Otherwise the rest of the
        match is context only: the scan restarts one character after each
        match start, so a label swallowed by the previous replaced span can
        still introduce the next one.
        """
        if group == 0:
            return [m.span() for m in pattern.finditer(text)]

        spans: list[tuple[int, int]] = []
        last_end = 0
        m = pattern.search(text)
        while m is not None:
            start, end = m.span(group)
            if start != -1 and start >= last_end and end > start:
                spans.append((start, end))
                last_end = end
            m = pattern.search(text, m.start() + 1)
        return spans
