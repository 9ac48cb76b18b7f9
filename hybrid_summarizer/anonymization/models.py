from dataclasses import dataclass, field

PlaceholderMap = dict[str, str]


@dataclass(frozen=True)
class PiiCategory:
    """One entry of the ordered PII pattern registry."""

    name: str  # placeholder prefix, e.g. "SSN"
    pattern: str
    label: str  # human-readable name used in reports
    ignore_case: bool = False
    group: int = 0  # regex group whose span is replaced


@dataclass(frozen=True)
class Artifact:
    """Single PII replacement record."""

    type: str  # category name, e.g. "PHONE", "EMAIL"
    original: str  # original PII text
    replacement: str  # placeholder used in anonymized text, e.g. "[PHONE_1]"


@dataclass
class AnonymizationResult:
    """Output of the anonymizer step."""

    anonymized_text: str
    artifacts: list[Artifact] = field(default_factory=list)

    @property
    def placeholder_map(self) -> PlaceholderMap:
        """Placeholder -> original text, in replacement order."""
        return {a.replacement: a.original for a in self.artifacts}

    def counts_by_category(self, categories: tuple[PiiCategory, ...]) -> dict[str, int]:
        """Count replacements per category label, in registry order."""
        counts: dict[str, int] = {}
        for category in categories:
            found = sum(1 for a in self.artifacts if a.type == category.name)
            if found:
                counts[category.label] = counts.get(category.label, 0) + found
        return counts
