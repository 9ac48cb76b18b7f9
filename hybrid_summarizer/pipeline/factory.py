from hybrid_summarizer.anonymization.anonymizer import Anonymizer
from hybrid_summarizer.backends.factory import BackendRole, ChatClientFactory
from hybrid_summarizer.config.settings import Settings
from hybrid_summarizer.pipeline.base import BaseSummarizer
from hybrid_summarizer.pipeline.blocked import PrivacyBlockedSummarizer
from hybrid_summarizer.pipeline.chunked import ChunkedHybridSummarizer
from hybrid_summarizer.pipeline.models import SummarizerMode
from hybrid_summarizer.pipeline.plain import PlainSummarizer
from hybrid_summarizer.pipeline.privacy import PrivacyHybridSummarizer


class SummarizerFactory:
    """Creates the summarizer for one execution mode."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        mode: SummarizerMode | None = None,
    ) -> BaseSummarizer:
        """Build the summarizer for *mode* (defaults to ``settings.summarizer_mode``)."""
        if mode is None:
            mode = cls._resolve_mode(settings.summarizer_mode)

        if mode is SummarizerMode.BLOCKED:
            return PrivacyBlockedSummarizer()
        if mode is SummarizerMode.PLAIN:
            role = cls._resolve_role(settings.plain_backend)
            return PlainSummarizer(
                ChatClientFactory.create(settings, role),
                name=f"{role.value.capitalize()} AI",
                benchmark_interval=settings.benchmark_interval,
            )
        if mode is SummarizerMode.CHUNKED_HYBRID:
            return ChunkedHybridSummarizer(
                ChatClientFactory.create(settings, BackendRole.LOCAL),
                ChatClientFactory.create(settings, BackendRole.CLOUD),
                words_per_chunk=settings.chunk_words,
                benchmark_interval=settings.benchmark_interval,
            )
        return PrivacyHybridSummarizer(
            ChatClientFactory.create(settings, BackendRole.CLOUD),
            anonymizer=Anonymizer(),
            preview_chars=settings.anonymized_preview_chars,
            benchmark_interval=settings.benchmark_interval,
        )

    @staticmethod
    def _resolve_mode(value: str) -> SummarizerMode:
        try:
            return SummarizerMode(value.lower())
        except ValueError:
            supported = [m.value for m in SummarizerMode]
            raise ValueError(
                f"Unknown summarizer mode '{value}'. Choose from: {supported}"
            ) from None

    @staticmethod
    def _resolve_role(value: str) -> BackendRole:
        try:
            return BackendRole(value.lower())
        except ValueError:
            supported = [r.value for r in BackendRole]
            raise ValueError(
                f"Unknown plain_backend '{value}'. Choose from: {supported}"
            ) from None
