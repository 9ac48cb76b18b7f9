import sys
import tracemalloc
from pathlib import Path

from hybrid_summarizer.config.settings import Settings
from hybrid_summarizer.logging.logger import Log
from hybrid_summarizer.pipeline.factory import SummarizerFactory


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build summarizer -> stream to stdout."""
    args = sys.argv[1:] if argv is None else argv
    settings = Settings()
    Log.configure(settings.log_level)
    if settings.benchmark_trace_memory:
        tracemalloc.start()

    summarizer = SummarizerFactory.create(settings)
    text = Path(args[0]).read_text(encoding="utf-8") if args else sys.stdin.read()
    Log.info(f"Summarizing with {summarizer.name} ({summarizer.description})")

    with summarizer.summarize_streaming(text) as stream:
        for fragment in stream:
            sys.stdout.write(fragment)
            sys.stdout.flush()
    sys.stdout.write("\n")

    benchmark = stream.benchmark
    Log.info(
        f"Benchmark: total={benchmark.total_time_ms} ms, "
        f"first_token={benchmark.first_token_latency_ms} ms, "
        f"tokens/s={benchmark.tokens_per_second:.1f}, "
        f"memory_delta={benchmark.memory_delta_mb:.2f} MB, "
        f"words in/out={benchmark.input_word_count}/{benchmark.output_word_count}"
    )
    if not stream.succeeded:
        Log.error(f"Run ended {stream.state.value}: {stream.error_message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
