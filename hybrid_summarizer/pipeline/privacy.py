"""Privacy hybrid mode: anonymize locally, process in the cloud, restore locally.

Phase 1 replaces PII with placeholders before anything leaves the host.
Phase 2 sends only the anonymized text to the cloud backend.
Phase 3 restores the original values into the accumulated cloud output and
emits it as one block; restoring per fragment could split a placeholder
across fragment boundaries.
"""

from collections.abc import Generator
from dataclasses import dataclass

from hybrid_summarizer.anonymization.anonymizer import Anonymizer
from hybrid_summarizer.anonymization.restorer import restore
from hybrid_summarizer.backends.client_base import BaseChatClient
from hybrid_summarizer.benchmark.tracker import DEFAULT_CHECKPOINT_INTERVAL, BenchmarkRecorder
from hybrid_summarizer.chunking.chunker import count_words
from hybrid_summarizer.concurrency.cancellation import CancellationToken
from hybrid_summarizer.logging.logger import Log
from hybrid_summarizer.pipeline.base import BackendSummarizer
from hybrid_summarizer.pipeline.context import RunContext
from hybrid_summarizer.pipeline.models import PipelineState
from hybrid_summarizer.pipeline.prompt_loader import load_prompt_template

QUESTION_MARKER = "QUESTION:"
RECORD_MARKER = "HEALTH_RECORD:"
SECTION_SEPARATOR = "---"
DEFAULT_PREVIEW_CHARS = 500
_RULE = "-----------------------------\n"


@dataclass(frozen=True)
class PrivacyRequest:
    """Input split into the record to anonymize and an optional question."""

    record: str
    question: str | None = None

    @classmethod
    def parse(cls, text: str) -> "PrivacyRequest":
        """Recognize ``QUESTION: ...\\n---\\nHEALTH_RECORD: ...`` input.

        Anything else is treated as a record to summarize.
        """
        if QUESTION_MARKER in text and SECTION_SEPARATOR in text:
            question_part, record_part = text.split(SECTION_SEPARATOR, 1)
            return cls(
                record=record_part.replace(RECORD_MARKER, "").strip(),
                question=question_part.replace(QUESTION_MARKER, "").strip(),
            )
        return cls(record=text)


class PrivacyHybridSummarizer(BackendSummarizer):
    name = "Hybrid AI (Privacy)"
    description = "Local anonymizes -> Cloud summarizes -> Local restores PII"
    error_prefix = "Privacy Hybrid AI error"

    def __init__(
        self,
        cloud_client: BaseChatClient,
        *,
        anonymizer: Anonymizer | None = None,
        preview_chars: int = DEFAULT_PREVIEW_CHARS,
        benchmark_interval: int = DEFAULT_CHECKPOINT_INTERVAL,
    ) -> None:
        super().__init__(benchmark_interval=benchmark_interval)
        self._cloud = cloud_client
        self._anonymizer = anonymizer if anonymizer is not None else Anonymizer()
        self._preview_chars = preview_chars
        self._summary_template = load_prompt_template("privacy_summary")
        self._question_template = load_prompt_template("privacy_question")

    def _backends(self) -> list[BaseChatClient]:
        return [self._cloud]

    def _input_word_count(self, text: str) -> int:
        return count_words(PrivacyRequest.parse(text).record)

    def _run(
        self,
        context: RunContext,
        recorder: BenchmarkRecorder,
        cancellation: CancellationToken,
    ) -> Generator[str, None, None]:
        request = PrivacyRequest.parse(context.input_text)

        # Phase 1: anonymize on this host
        context.transition(PipelineState.ANONYMIZE_OR_CHUNK)
        yield "Phase 1: Anonymizing PII locally...\n\n"
        anonymization = self._anonymizer.anonymize(request.record)
        context.placeholder_map = anonymization.placeholder_map
        counts = anonymization.counts_by_category(self._anonymizer.categories)
        yield from self._report(counts, len(context.placeholder_map))
        yield "Anonymized text preview:\n"
        yield _RULE
        yield self._preview(anonymization.anonymized_text) + "\n"
        yield _RULE + "\n"

        # Phase 2: cloud sees placeholders only
        context.transition(PipelineState.REMOTE_CALL)
        if request.question is not None:
            yield "Phase 2: Cloud AI answering question (with network context)...\n\n"
            prompt = self._question_template.format(
                text=anonymization.anonymized_text, question=request.question
            )
        else:
            yield "Phase 2: Cloud AI summarizing anonymized text...\n\n"
            prompt = self._summary_template.format(text=anonymization.anonymized_text)
        yield from self._forward(
            self._cloud, prompt, context, recorder, cancellation, context.output
        )

        # Phase 3: restore, never on a cancelled run
        cancellation.raise_if_cancelled()
        context.transition(PipelineState.RESTORE_OR_FINALIZE)
        context.final_text = restore(context.output_so_far, context.placeholder_map)
        Log.info(f"{self.name}: restored {len(context.placeholder_map)} placeholders")

        label = "Final answer" if request.question is not None else "Final summary"
        yield "\n\nPhase 3: Restoring original PII values...\n\n"
        yield f"{label} with restored PII:\n\n"
        yield _RULE
        yield context.final_text
        yield "\n" + _RULE

    @staticmethod
    def _report(counts: dict[str, int], total: int) -> Generator[str, None, None]:
        yield f"Found and anonymized {total} PII items:\n"
        for label, count in counts.items():
            yield f"  - {label}: {count} items\n"
        yield "\n"

    def _preview(self, text: str) -> str:
        if len(text) > self._preview_chars:
            return text[: self._preview_chars] + "..."
        return text
