from abc import ABC, abstractmethod
from collections.abc import Generator
from contextlib import closing

from hybrid_summarizer.backends.client_base import BaseChatClient
from hybrid_summarizer.backends.exceptions import BackendError, BackendUnavailableError
from hybrid_summarizer.benchmark.tracker import (
    DEFAULT_CHECKPOINT_INTERVAL,
    BenchmarkRecorder,
    BenchmarkSink,
)
from hybrid_summarizer.chunking.chunker import count_words
from hybrid_summarizer.concurrency.cancellation import (
    CancellationToken,
    OperationCancelledError,
    ensure_token,
)
from hybrid_summarizer.logging.logger import Log
from hybrid_summarizer.pipeline.context import RunContext
from hybrid_summarizer.pipeline.models import PipelineState, SummarizationResult
from hybrid_summarizer.pipeline.stream import SummaryStream


class BaseSummarizer(ABC):
    """Public contract shared by every summarization mode.

    A run is a generator produced by :meth:`_drive`; this class wraps it in
    a :class:`SummaryStream` and offers the draining :meth:`summarize`.
    """

    name: str
    description: str
    error_prefix: str

    def __init__(self, *, benchmark_interval: int = DEFAULT_CHECKPOINT_INTERVAL) -> None:
        self._benchmark_interval = benchmark_interval

    @abstractmethod
    def is_available(self) -> bool:
        """Cheap readiness check; must not raise."""

    def summarize_streaming(
        self,
        text: str,
        on_benchmark_update: BenchmarkSink | None = None,
        cancellation: CancellationToken | None = None,
    ) -> SummaryStream:
        """Start a run; nothing happens until the returned stream is iterated."""
        context = RunContext(run_name=self.name, input_text=text)
        recorder = BenchmarkRecorder(
            self._input_word_count(text),
            sink=on_benchmark_update,
            interval=self._benchmark_interval,
        )
        fragments = self._drive(context, recorder, ensure_token(cancellation))
        return SummaryStream(context, recorder, fragments)

    def summarize(
        self,
        text: str,
        cancellation: CancellationToken | None = None,
    ) -> SummarizationResult:
        """Drain a streaming run and aggregate it. Never raises."""
        try:
            with self.summarize_streaming(text, cancellation=cancellation) as stream:
                for _fragment in stream:
                    pass
            return stream.result()
        except Exception as exc:
            Log.error(f"{self.name}: unexpected error: {exc}")
            return SummarizationResult.error(f"{self.error_prefix}: {exc}")

    def _input_word_count(self, text: str) -> int:
        return count_words(text)

    @abstractmethod
    def _drive(
        self,
        context: RunContext,
        recorder: BenchmarkRecorder,
        cancellation: CancellationToken,
    ) -> Generator[str, None, None]:
        """Yield the run's output fragments and leave *context* terminal."""


class BackendSummarizer(BaseSummarizer):
    """Run driver for modes that call text-completion backends.

    Subclasses implement :meth:`_run`, a generator that moves the
    :class:`RunContext` through its phases and yields output fragments.
    The driver owns empty-input handling, the availability check, benchmark
    start/finish and the mapping of cancellation and backend errors onto
    terminal states.
    """

    def is_available(self) -> bool:
        """True when every backend this mode calls reports available."""
        try:
            return all(client.is_available() for client in self._backends())
        except Exception as exc:
            Log.warning(f"{self.name}: availability check failed: {exc}")
            return False

    # ------------------------------------------------------------------
    # Mode hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _backends(self) -> list[BaseChatClient]:
        """Backends this mode contacts."""

    @abstractmethod
    def _run(
        self,
        context: RunContext,
        recorder: BenchmarkRecorder,
        cancellation: CancellationToken,
    ) -> Generator[str, None, None]:
        """Yield output fragments; leave the context in RESTORE_OR_FINALIZE."""

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------

    def _drive(
        self,
        context: RunContext,
        recorder: BenchmarkRecorder,
        cancellation: CancellationToken,
    ) -> Generator[str, None, None]:
        if not context.input_text.strip():
            Log.info(f"{self.name}: empty input, nothing to summarize")
            context.transition(PipelineState.COMPLETED)
            recorder.finish_without_work()
            return

        recorder.start()
        try:
            cancellation.raise_if_cancelled()
            if not self.is_available():
                raise BackendUnavailableError(f"{self.name} backends are not available")
            with closing(self._run(context, recorder, cancellation)) as fragments:
                for fragment in fragments:
                    yield fragment
                    cancellation.raise_if_cancelled()
            context.transition(PipelineState.COMPLETED)
            final = recorder.finish(context.final_text)
            Log.info(f"{self.name}: completed in {final.total_time_ms} ms")
        except OperationCancelledError:
            self._cancel(context)
        except GeneratorExit:
            # The caller stopped iterating.
            self._cancel(context)
            raise
        except BackendError as exc:
            self._fail(context, exc)
        except Exception as exc:
            Log.exception(f"{self.name}: unexpected pipeline error")
            self._fail(context, exc)

    def _cancel(self, context: RunContext) -> None:
        if not context.state.is_terminal:
            context.transition(PipelineState.CANCELLED)
            Log.warning(f"{self.name}: run cancelled")

    def _fail(self, context: RunContext, exc: Exception) -> None:
        context.error_message = f"{self.error_prefix}: {exc}"
        if not context.state.is_terminal:
            context.transition(PipelineState.FAILED)
        Log.error(f"{self.name}: run failed: {exc}")

    # ------------------------------------------------------------------
    # Helpers for mode implementations
    # ------------------------------------------------------------------

    @staticmethod
    def _forward(
        client: BaseChatClient,
        prompt: str,
        context: RunContext,
        recorder: BenchmarkRecorder,
        cancellation: CancellationToken,
        buffer: list[str],
    ) -> Generator[str, None, None]:
        """Stream *prompt* through *client*, appending fragments to *buffer*.

        Checkpoints measure everything the run's backends have produced so
        far, across phases, not just *buffer*.
        """
        cancellation.raise_if_cancelled()
        with closing(client.complete_streaming(prompt, cancellation)) as fragments:
            for fragment in fragments:
                buffer.append(fragment)
                context.streamed.append(fragment)
                recorder.observe(fragment, context.streamed_text)
                yield fragment
