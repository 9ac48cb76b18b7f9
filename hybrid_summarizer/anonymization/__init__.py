from hybrid_summarizer.anonymization.anonymizer import Anonymizer
from hybrid_summarizer.anonymization.models import AnonymizationResult, Artifact, PiiCategory
from hybrid_summarizer.anonymization.registry import PII_CATEGORIES
from hybrid_summarizer.anonymization.restorer import restore

__all__ = [
    "PII_CATEGORIES",
    "AnonymizationResult",
    "Anonymizer",
    "Artifact",
    "PiiCategory",
    "restore",
]
