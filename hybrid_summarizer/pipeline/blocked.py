from collections.abc import Generator

from hybrid_summarizer.benchmark.tracker import BenchmarkRecorder
from hybrid_summarizer.concurrency.cancellation import CancellationToken
from hybrid_summarizer.logging.logger import Log
from hybrid_summarizer.pipeline.base import BaseSummarizer
from hybrid_summarizer.pipeline.context import RunContext
from hybrid_summarizer.pipeline.models import PipelineState

BLOCKED_MESSAGE = (
    "BLOCKED: Privacy Protection Active\n\n"
    "This text contains personally identifiable information (PII) that cannot be "
    "sent to cloud services.\n\n"
    "Use Hybrid mode to safely summarize PII-containing documents."
)

_BLOCKED_FRAGMENTS: tuple[str, ...] = (
    "BLOCKED: Privacy Protection Active\n\n",
    "This text contains personally identifiable information (PII) that cannot be "
    "sent to cloud services.\n\n",
    "Detected PII categories:\n",
    "- Social Security Numbers\n",
    "- Medical Record Numbers\n",
    "- Home Addresses\n",
    "- Phone Numbers\n",
    "- Email Addresses\n",
    "- Insurance Policy Numbers\n",
    "- Family Member Information\n\n",
    "Why this matters:\n",
    "Sending health records to cloud AI services could violate HIPAA regulations ",
    "and expose sensitive patient data to third parties.\n\n",
    "Solution: Use the Hybrid (Privacy) mode, which anonymizes PII locally before ",
    "sending to the cloud, then restores the original identifiers in the final summary.",
)


class PrivacyBlockedSummarizer(BaseSummarizer):
    """Refuses to send identifiable text to a cloud backend.

    Never contacts a backend: every request, empty or not, gets the fixed
    explanation and ends FAILED with :data:`BLOCKED_MESSAGE`.
    """

    name = "Cloud AI (Privacy Mode)"
    description = "Blocked - Cannot send PII to cloud services"
    error_prefix = "Cloud AI (Privacy Mode)"

    def is_available(self) -> bool:
        return True

    def _drive(
        self,
        context: RunContext,
        recorder: BenchmarkRecorder,
        cancellation: CancellationToken,
    ) -> Generator[str, None, None]:
        Log.warning(f"{self.name}: refusing to send text to a cloud backend")
        context.error_message = BLOCKED_MESSAGE
        context.transition(PipelineState.FAILED)
        recorder.finish_without_work()
        yield from _BLOCKED_FRAGMENTS
