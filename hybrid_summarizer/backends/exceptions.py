class BackendError(Exception):
    """Base exception for text-completion backend failures."""


class BackendUnavailableError(BackendError):
    """Raised when a backend's availability check fails."""


class BackendCallFailedError(BackendError):
    """Raised when a backend call fails, before or during streaming."""
