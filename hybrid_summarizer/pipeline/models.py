from dataclasses import dataclass, field
from enum import Enum

from hybrid_summarizer.benchmark.models import BenchmarkSnapshot


class SummarizerMode(str, Enum):
    """Execution strategy, selected once when the summarizer is built."""

    PLAIN = "plain"
    CHUNKED_HYBRID = "chunked_hybrid"
    PRIVACY_HYBRID = "privacy_hybrid"
    BLOCKED = "blocked"


class PipelineState(str, Enum):
    NOT_STARTED = "not_started"
    ANONYMIZE_OR_CHUNK = "anonymize_or_chunk"
    REMOTE_CALL = "remote_call"
    RESTORE_OR_FINALIZE = "restore_or_finalize"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset(
    {PipelineState.COMPLETED, PipelineState.CANCELLED, PipelineState.FAILED}
)

ALLOWED_TRANSITIONS: dict[PipelineState, frozenset[PipelineState]] = {
    PipelineState.NOT_STARTED: frozenset(
        {
            PipelineState.ANONYMIZE_OR_CHUNK,
            PipelineState.REMOTE_CALL,
            PipelineState.COMPLETED,
            PipelineState.CANCELLED,
            PipelineState.FAILED,
        }
    ),
    PipelineState.ANONYMIZE_OR_CHUNK: frozenset(
        {PipelineState.REMOTE_CALL, PipelineState.CANCELLED, PipelineState.FAILED}
    ),
    PipelineState.REMOTE_CALL: frozenset(
        {
            PipelineState.RESTORE_OR_FINALIZE,
            PipelineState.CANCELLED,
            PipelineState.FAILED,
        }
    ),
    PipelineState.RESTORE_OR_FINALIZE: frozenset(
        {PipelineState.COMPLETED, PipelineState.CANCELLED, PipelineState.FAILED}
    ),
    PipelineState.COMPLETED: frozenset(),
    PipelineState.CANCELLED: frozenset(),
    PipelineState.FAILED: frozenset(),
}


@dataclass(frozen=True)
class SummarizationResult:
    """Terminal value of a non-streaming summarization call."""

    text: str
    benchmark: BenchmarkSnapshot = field(default_factory=BenchmarkSnapshot.zero)
    success: bool = True
    error_message: str | None = None
    cancelled: bool = False

    @classmethod
    def error(cls, message: str, *, cancelled: bool = False) -> "SummarizationResult":
        return cls(
            text="",
            benchmark=BenchmarkSnapshot.zero(),
            success=False,
            error_message=message,
            cancelled=cancelled,
        )
