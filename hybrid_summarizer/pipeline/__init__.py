from hybrid_summarizer.pipeline.base import BackendSummarizer, BaseSummarizer
from hybrid_summarizer.pipeline.blocked import PrivacyBlockedSummarizer
from hybrid_summarizer.pipeline.chunked import ChunkedHybridSummarizer
from hybrid_summarizer.pipeline.factory import SummarizerFactory
from hybrid_summarizer.pipeline.models import PipelineState, SummarizationResult, SummarizerMode
from hybrid_summarizer.pipeline.plain import PlainSummarizer
from hybrid_summarizer.pipeline.privacy import PrivacyHybridSummarizer
from hybrid_summarizer.pipeline.stream import SummaryStream

__all__ = [
    "BackendSummarizer",
    "BaseSummarizer",
    "ChunkedHybridSummarizer",
    "PipelineState",
    "PlainSummarizer",
    "PrivacyBlockedSummarizer",
    "PrivacyHybridSummarizer",
    "SummarizationResult",
    "SummarizerFactory",
    "SummarizerMode",
    "SummaryStream",
]
