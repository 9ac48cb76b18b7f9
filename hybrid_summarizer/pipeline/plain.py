from collections.abc import Generator

from hybrid_summarizer.backends.client_base import BaseChatClient
from hybrid_summarizer.benchmark.tracker import DEFAULT_CHECKPOINT_INTERVAL, BenchmarkRecorder
from hybrid_summarizer.concurrency.cancellation import CancellationToken
from hybrid_summarizer.pipeline.base import BackendSummarizer
from hybrid_summarizer.pipeline.context import RunContext
from hybrid_summarizer.pipeline.models import PipelineState
from hybrid_summarizer.pipeline.prompt_loader import load_prompt_template


class PlainSummarizer(BackendSummarizer):
    """Single backend, single streaming call."""

    name = "Single Backend AI"
    description = "One backend summarizes the whole text in a single call"
    error_prefix = "AI error"

    def __init__(
        self,
        client: BaseChatClient,
        *,
        name: str | None = None,
        benchmark_interval: int = DEFAULT_CHECKPOINT_INTERVAL,
    ) -> None:
        super().__init__(benchmark_interval=benchmark_interval)
        self._client = client
        if name is not None:
            self.name = name
        self._template = load_prompt_template("plain_summary")

    def _backends(self) -> list[BaseChatClient]:
        return [self._client]

    def _run(
        self,
        context: RunContext,
        recorder: BenchmarkRecorder,
        cancellation: CancellationToken,
    ) -> Generator[str, None, None]:
        context.transition(PipelineState.REMOTE_CALL)
        prompt = self._template.format(text=context.input_text)
        yield from self._forward(
            self._client, prompt, context, recorder, cancellation, context.output
        )

        context.transition(PipelineState.RESTORE_OR_FINALIZE)
        context.final_text = context.output_so_far
