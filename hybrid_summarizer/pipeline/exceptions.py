class PipelineError(Exception):
    """Base exception for pipeline orchestration errors."""


class InvalidStateTransitionError(PipelineError):
    """Raised when a run attempts a transition its state machine forbids."""
