from dataclasses import dataclass


@dataclass(frozen=True)
class BenchmarkSnapshot:
    """Point-in-time performance figures for one pipeline run."""

    total_time_ms: int = 0
    first_token_latency_ms: int = 0
    tokens_per_second: float = 0.0
    memory_delta_bytes: int = 0
    input_word_count: int = 0
    output_word_count: int = 0
    output_token_count: int = 0

    @property
    def memory_delta_mb(self) -> float:
        return self.memory_delta_bytes / (1024.0 * 1024.0)

    @classmethod
    def zero(cls) -> "BenchmarkSnapshot":
        """Snapshot reported before any work has started."""
        return cls()
