from dataclasses import dataclass, field

from hybrid_summarizer.anonymization.models import PlaceholderMap
from hybrid_summarizer.logging.logger import Log
from hybrid_summarizer.pipeline.exceptions import InvalidStateTransitionError
from hybrid_summarizer.pipeline.models import ALLOWED_TRANSITIONS, PipelineState


@dataclass(slots=True)
class RunContext:
    """Mutable state of one pipeline invocation; never shared between runs."""

    run_name: str
    input_text: str
    state: PipelineState = PipelineState.NOT_STARTED
    output: list[str] = field(default_factory=list)
    final_text: str = ""
    chunk_summaries: list[str] = field(default_factory=list)
    streamed: list[str] = field(default_factory=list)  # every backend fragment, all phases
    placeholder_map: PlaceholderMap = field(default_factory=dict)
    error_message: str = ""

    def transition(self, target: PipelineState) -> None:
        if target not in ALLOWED_TRANSITIONS[self.state]:
            raise InvalidStateTransitionError(
                f"{self.run_name}: cannot move from {self.state.value} to {target.value}"
            )
        Log.debug(f"{self.run_name}: {self.state.value} -> {target.value}")
        self.state = target

    @property
    def output_so_far(self) -> str:
        return "".join(self.output)

    def streamed_text(self) -> str:
        return "".join(self.streamed)
