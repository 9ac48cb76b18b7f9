"""Cooperative cancellation shared between a caller and one pipeline run."""

import threading


class OperationCancelledError(Exception):
    """Raised at a suspension point once cancellation has been requested."""


class CancellationToken:
    """Thread-safe cancellation flag.

    The caller keeps a reference and calls :meth:`cancel` from any thread;
    the pipeline and backend adapters poll it between fragments and before
    every backend call.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise OperationCancelledError if cancellation was requested."""
        if self._event.is_set():
            raise OperationCancelledError("Operation was cancelled")

    @classmethod
    def none(cls) -> "CancellationToken":
        """Return a fresh token nobody else holds, so it never fires."""
        return cls()


def ensure_token(token: CancellationToken | None) -> CancellationToken:
    return token if token is not None else CancellationToken.none()
