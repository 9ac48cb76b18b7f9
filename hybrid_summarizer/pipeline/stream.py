from collections.abc import Generator, Iterator
from types import TracebackType

from hybrid_summarizer.benchmark.models import BenchmarkSnapshot
from hybrid_summarizer.benchmark.tracker import BenchmarkRecorder
from hybrid_summarizer.pipeline.context import RunContext
from hybrid_summarizer.pipeline.models import PipelineState, SummarizationResult

CANCELLED_MESSAGE = "Summarization cancelled"


class SummaryStream:
    """Single-use iterable of output fragments for one pipeline run.

    Failures and cancellation end the iteration early instead of raising;
    inspect :attr:`state`, :attr:`error_message` or :meth:`result` once the
    loop is over. A caller that stops early must :meth:`close` the stream
    (or use it as a context manager) so the run ends CANCELLED and the
    backend stream is released.
    """

    def __init__(
        self,
        context: RunContext,
        recorder: BenchmarkRecorder,
        fragments: Generator[str, None, None],
    ) -> None:
        self._context = context
        self._recorder = recorder
        self._fragments = fragments
        self._consumed = False

    def __iter__(self) -> Iterator[str]:
        if self._consumed:
            raise RuntimeError("SummaryStream is not restartable")
        self._consumed = True
        return self._fragments

    def close(self) -> None:
        """Stop the run. A run that has not finished ends CANCELLED."""
        self._consumed = True
        self._fragments.close()
        if not self._context.state.is_terminal:
            self._context.transition(PipelineState.CANCELLED)

    def __enter__(self) -> "SummaryStream":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def state(self) -> PipelineState:
        return self._context.state

    @property
    def text(self) -> str:
        """Final result text (restored summary, synthesis, or plain output)."""
        return self._context.final_text

    @property
    def error_message(self) -> str:
        return self._context.error_message

    @property
    def succeeded(self) -> bool:
        return self._context.state is PipelineState.COMPLETED

    @property
    def cancelled(self) -> bool:
        return self._context.state is PipelineState.CANCELLED

    @property
    def benchmark(self) -> BenchmarkSnapshot:
        return self._recorder.final or BenchmarkSnapshot.zero()

    def result(self) -> SummarizationResult:
        """Aggregate the finished run into one value.

        Raises:
            RuntimeError: if the stream has not reached a terminal state.
        """
        state = self._context.state
        if state is PipelineState.COMPLETED:
            return SummarizationResult(text=self.text, benchmark=self.benchmark)
        if state is PipelineState.CANCELLED:
            return SummarizationResult.error(CANCELLED_MESSAGE, cancelled=True)
        if state is PipelineState.FAILED:
            return SummarizationResult.error(self.error_message)
        raise RuntimeError(f"Run has not finished (state: {state.value})")
