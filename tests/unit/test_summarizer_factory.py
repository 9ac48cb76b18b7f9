"""Tests for SummarizerFactory."""

from collections.abc import Callable

import pytest

from hybrid_summarizer.config.settings import Settings
from hybrid_summarizer.pipeline.base import BaseSummarizer
from hybrid_summarizer.pipeline.blocked import PrivacyBlockedSummarizer
from hybrid_summarizer.pipeline.chunked import ChunkedHybridSummarizer
from hybrid_summarizer.pipeline.factory import SummarizerFactory
from hybrid_summarizer.pipeline.models import SummarizerMode
from hybrid_summarizer.pipeline.plain import PlainSummarizer
from hybrid_summarizer.pipeline.privacy import PrivacyHybridSummarizer


def _example_settings(**kwargs: object) -> Settings:
    return Settings(local_provider="example", cloud_provider="example", **kwargs)


class TestSummarizerFactory:
    def test_default_mode_is_privacy_hybrid(self) -> None:
        summarizer = SummarizerFactory.create(_example_settings())
        assert isinstance(summarizer, BaseSummarizer)
        assert isinstance(summarizer, PrivacyHybridSummarizer)

    def test_plain_local(self) -> None:
        summarizer = SummarizerFactory.create(
            _example_settings(summarizer_mode="plain", plain_backend="local")
        )
        assert isinstance(summarizer, PlainSummarizer)
        assert summarizer.name == "Local AI"

    def test_plain_cloud(self) -> None:
        summarizer = SummarizerFactory.create(
            _example_settings(summarizer_mode="PLAIN", plain_backend="cloud")
        )
        assert summarizer.name == "Cloud AI"

    def test_chunked_hybrid(self) -> None:
        summarizer = SummarizerFactory.create(_example_settings(summarizer_mode="chunked_hybrid"))
        assert isinstance(summarizer, ChunkedHybridSummarizer)

    def test_chunked_hybrid_uses_chunk_words(self, words: Callable[[int], str]) -> None:
        summarizer = SummarizerFactory.create(
            _example_settings(summarizer_mode="chunked_hybrid", chunk_words=200)
        )
        fragments = list(summarizer.summarize_streaming(words(450)))
        assert fragments[0] == "Phase 1: Summarizing 3 chunks locally...\n\n"

    def test_blocked(self) -> None:
        summarizer = SummarizerFactory.create(_example_settings(summarizer_mode="blocked"))
        assert isinstance(summarizer, PrivacyBlockedSummarizer)

    def test_explicit_mode_overrides_settings(self) -> None:
        summarizer = SummarizerFactory.create(
            _example_settings(summarizer_mode="plain"), SummarizerMode.BLOCKED
        )
        assert isinstance(summarizer, PrivacyBlockedSummarizer)

    def test_unknown_mode_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown summarizer mode 'turbo'"):
            SummarizerFactory.create(_example_settings(summarizer_mode="turbo"))

    def test_unknown_plain_backend_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown plain_backend 'edge'"):
            SummarizerFactory.create(
                _example_settings(summarizer_mode="plain", plain_backend="edge")
            )
