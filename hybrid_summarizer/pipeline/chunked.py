"""Chunked hybrid mode: local per-chunk summaries, cloud synthesis.

Lets documents larger than the local backend's context window be
summarized: Phase 1 sends bounded chunks to the local backend one at a
time, Phase 2 asks the cloud backend to merge the partial summaries.
"""

from collections.abc import Generator

from hybrid_summarizer.backends.client_base import BaseChatClient
from hybrid_summarizer.benchmark.tracker import DEFAULT_CHECKPOINT_INTERVAL, BenchmarkRecorder
from hybrid_summarizer.chunking.chunker import count_words, split
from hybrid_summarizer.concurrency.cancellation import CancellationToken
from hybrid_summarizer.logging.logger import Log
from hybrid_summarizer.pipeline.base import BackendSummarizer
from hybrid_summarizer.pipeline.context import RunContext
from hybrid_summarizer.pipeline.models import PipelineState
from hybrid_summarizer.pipeline.prompt_loader import load_prompt_template

DEFAULT_WORDS_PER_CHUNK = 500


class ChunkedHybridSummarizer(BackendSummarizer):
    name = "Hybrid AI"
    description = "Local summarizes chunks -> Cloud synthesizes (handles large docs)"
    error_prefix = "Hybrid AI error"

    def __init__(
        self,
        local_client: BaseChatClient,
        cloud_client: BaseChatClient,
        *,
        words_per_chunk: int = DEFAULT_WORDS_PER_CHUNK,
        benchmark_interval: int = DEFAULT_CHECKPOINT_INTERVAL,
    ) -> None:
        super().__init__(benchmark_interval=benchmark_interval)
        if words_per_chunk < 1:
            raise ValueError(f"words_per_chunk must be positive, got {words_per_chunk}")
        self._local = local_client
        self._cloud = cloud_client
        self._words_per_chunk = words_per_chunk
        self._chunk_template = load_prompt_template("chunk_summary")
        self._synthesis_template = load_prompt_template("synthesis")

    def _backends(self) -> list[BaseChatClient]:
        return [self._local, self._cloud]

    def _run(
        self,
        context: RunContext,
        recorder: BenchmarkRecorder,
        cancellation: CancellationToken,
    ) -> Generator[str, None, None]:
        # Phase 1: local backend, one chunk at a time
        context.transition(PipelineState.ANONYMIZE_OR_CHUNK)
        chunks = split(context.input_text, self._words_per_chunk)
        Log.info(f"{self.name}: {len(chunks)} chunks of up to {self._words_per_chunk} words")
        yield f"Phase 1: Summarizing {len(chunks)} chunks locally...\n\n"

        for index, chunk in enumerate(chunks, start=1):
            yield f"-- Chunk {index}/{len(chunks)} ({count_words(chunk)} words) --\n"
            buffer: list[str] = []
            prompt = self._build_chunk_prompt(chunk, len(chunks))
            yield from self._forward(
                self._local, prompt, context, recorder, cancellation, buffer
            )

            summary = "".join(buffer).strip()
            if summary:
                context.chunk_summaries.append(summary)
            else:
                Log.warning(f"{self.name}: chunk {index} produced an empty summary")
            yield "\n\n"

        # Phase 2: cloud backend merges the partial summaries
        context.transition(PipelineState.REMOTE_CALL)
        yield "Phase 2: Synthesizing final summary in cloud...\n\n"
        prompt = self._build_synthesis_prompt(context.chunk_summaries)
        yield from self._forward(
            self._cloud, prompt, context, recorder, cancellation, context.output
        )

        context.transition(PipelineState.RESTORE_OR_FINALIZE)
        context.final_text = context.output_so_far

    def _build_chunk_prompt(self, chunk: str, total_chunks: int) -> str:
        part_note = "This is one part of a larger document." if total_chunks > 1 else ""
        return self._chunk_template.format(text=chunk, part_note=part_note)

    def _build_synthesis_prompt(self, summaries: list[str]) -> str:
        sections = "\n\n".join(
            f"[Section {index}]: {summary}" for index, summary in enumerate(summaries, start=1)
        )
        return self._synthesis_template.format(sections=sections)
