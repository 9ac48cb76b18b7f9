"""Throughput, latency and memory figures computed as output arrives."""

import time
import tracemalloc
from collections.abc import Callable

from hybrid_summarizer.benchmark.models import BenchmarkSnapshot
from hybrid_summarizer.chunking.chunker import count_words

TOKENS_PER_WORD = 1.3
DEFAULT_CHECKPOINT_INTERVAL = 5

BenchmarkSink = Callable[[BenchmarkSnapshot], None]


def estimate_token_count(text: str) -> int:
    """Heuristic token estimate (about 1.3 tokens per word), not a tokenizer."""
    return int(count_words(text) * TOKENS_PER_WORD)


def tokens_per_second(text: str, elapsed_ms: int) -> float:
    if elapsed_ms <= 0:
        return 0.0
    return estimate_token_count(text) / (elapsed_ms / 1000.0)


def current_memory_bytes() -> int:
    """Heap currently traced by tracemalloc, or 0 when tracing is off."""
    if not tracemalloc.is_tracing():
        return 0
    current, _peak = tracemalloc.get_traced_memory()
    return current


class BenchmarkTracker:
    """Stateless snapshot computation invoked at pipeline checkpoints."""

    @staticmethod
    def snapshot(
        elapsed_ms: int,
        first_token_ms: int,
        output_so_far: str,
        memory_before_bytes: int,
        input_word_count: int,
    ) -> BenchmarkSnapshot:
        # Negative deltas are real (a collection ran mid-measurement).
        return BenchmarkSnapshot(
            total_time_ms=elapsed_ms,
            first_token_latency_ms=first_token_ms,
            tokens_per_second=tokens_per_second(output_so_far, elapsed_ms),
            memory_delta_bytes=current_memory_bytes() - memory_before_bytes,
            input_word_count=input_word_count,
            output_word_count=count_words(output_so_far),
            output_token_count=estimate_token_count(output_so_far),
        )


class BenchmarkRecorder:
    """Per-run checkpoint state; owned by exactly one pipeline invocation.

    Emits the zero snapshot on :meth:`start`, one snapshot every
    *interval* observed fragments, and the final snapshot once on
    :meth:`finish`.
    """

    def __init__(
        self,
        input_word_count: int,
        sink: BenchmarkSink | None = None,
        interval: int = DEFAULT_CHECKPOINT_INTERVAL,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if interval < 1:
            raise ValueError(f"Benchmark interval must be positive, got {interval}")
        self._input_word_count = input_word_count
        self._sink = sink
        self._interval = interval
        self._clock = clock
        self._started_at = 0.0
        self._memory_before = 0
        self._first_token_ms: int | None = None
        self._fragment_count = 0
        self._final: BenchmarkSnapshot | None = None

    @property
    def fragment_count(self) -> int:
        return self._fragment_count

    @property
    def first_token_ms(self) -> int:
        return self._first_token_ms or 0

    @property
    def final(self) -> BenchmarkSnapshot | None:
        return self._final

    def start(self) -> None:
        self._memory_before = current_memory_bytes()
        self._started_at = self._clock()
        self._emit(BenchmarkSnapshot.zero())

    def elapsed_ms(self) -> int:
        return int((self._clock() - self._started_at) * 1000)

    def observe(self, fragment: str, output_so_far: Callable[[], str]) -> None:
        """Record one backend fragment; checkpoint on every *interval*-th.

        *output_so_far* is only called when a checkpoint is due.
        """
        if self._first_token_ms is None and fragment:
            self._first_token_ms = self.elapsed_ms()
        self._fragment_count += 1
        if self._fragment_count % self._interval == 0:
            self._emit(self._snapshot(output_so_far()))

    def finish(self, output: str) -> BenchmarkSnapshot:
        """Emit and return the final snapshot. Only the first call emits."""
        if self._final is None:
            self._final = self._snapshot(output)
            self._emit(self._final)
        return self._final

    def finish_without_work(self) -> BenchmarkSnapshot:
        """Report the zero snapshot as final for a run that had nothing to do."""
        if self._final is None:
            self._final = BenchmarkSnapshot.zero()
            self._emit(self._final)
        return self._final

    def _snapshot(self, output: str) -> BenchmarkSnapshot:
        return BenchmarkTracker.snapshot(
            elapsed_ms=self.elapsed_ms(),
            first_token_ms=self.first_token_ms,
            output_so_far=output,
            memory_before_bytes=self._memory_before,
            input_word_count=self._input_word_count,
        )

    def _emit(self, snapshot: BenchmarkSnapshot) -> None:
        if self._sink is not None:
            self._sink(snapshot)
