"""Ordered PII category registry.

Order matters: each category runs against the text left by the previous
ones, so a span claimed earlier is never seen by a later pattern.
"""

from hybrid_summarizer.anonymization.models import PiiCategory

_MONTHS = (
    "January|February|March|April|May|June|July|August|September|October"
    "|November|December"
)
_STREET_SUFFIXES = (
    "Street|St|Avenue|Ave|Lane|Ln|Drive|Dr|Road|Rd|Boulevard|Blvd|Court|Ct"
    "|Way|Place|Pl"
)
_NAME_LABELS = "Name|Patient|Contact|Physician|Doctor|Therapist|Educator"

PII_CATEGORIES: tuple[PiiCategory, ...] = (
    PiiCategory(
        name="SSN",
        pattern=r"\b\d{3}-\d{2}-\d{4}\b",
        label="Social Security Numbers",
    ),
    PiiCategory(
        name="PHONE",
        pattern=r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b",
        label="Phone Numbers",
    ),
    PiiCategory(
        name="EMAIL",
        pattern=r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b",
        label="Email Addresses",
    ),
    PiiCategory(
        name="DATE",
        pattern=rf"\b(?:{_MONTHS})\s+\d{{1,2}},?\s+\d{{4}}\b",
        label="Dates",
    ),
    PiiCategory(
        name="ADDRESS",
        pattern=(
            rf"\b\d+\s+[A-Za-z]+\s+(?:{_STREET_SUFFIXES})[,.]?\s*"
            r"(?:Apartment|Apt|Suite|Ste|Unit|#)?\s*\d*[A-Za-z]?\b"
        ),
        label="Addresses",
    ),
    PiiCategory(
        name="POLICY_NUM",
        pattern=r"\b[A-Z]{2,4}[-#]?\d{5,}[-]?[A-Z]{0,2}\b",
        label="Policy/Account Numbers",
    ),
    PiiCategory(
        name="PERSON_TITLE",
        pattern=r"\b(?:Dr\.|Mr\.|Mrs\.|Ms\.)\s+[A-Z][a-z]+\s+[A-Z][a-z]+\b",
        label="Person Names",
    ),
    PiiCategory(
        name="PERSON_NAME",
        pattern=rf"(?:{_NAME_LABELS}):\s*([A-Z][a-z]+(?:\s+[A-Z][a-z]+)+)",
        label="Person Names",
        group=1,
    ),
    PiiCategory(
        name="AGE",
        pattern=r"\bage\s+\d{1,3}\b",
        label="Ages",
        ignore_case=True,
    ),
    PiiCategory(
        name="LOCATION",
        pattern=r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?,\s*[A-Z]{2}\s+\d{5}(?:-\d{4})?\b",
        label="Locations",
    ),
)
