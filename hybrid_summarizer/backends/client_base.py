from abc import ABC, abstractmethod
from collections.abc import Generator

from hybrid_summarizer.concurrency.cancellation import CancellationToken


class BaseChatClient(ABC):
    """Contract for text-completion backends (local or cloud).

    Implementations must be stateless and reentrant: one client instance is
    shared by every concurrent pipeline run.
    """

    @abstractmethod
    def complete_once(
        self,
        prompt: str,
        cancellation: CancellationToken | None = None,
    ) -> str:
        """Return the full completion for *prompt*.

        Raises:
            BackendCallFailedError: on any provider failure.
            OperationCancelledError: if *cancellation* fires.
        """

    @abstractmethod
    def complete_streaming(
        self,
        prompt: str,
        cancellation: CancellationToken | None = None,
    ) -> Generator[str, None, None]:
        """Yield the completion for *prompt* fragment by fragment.

        The generator is finite and cannot be restarted; closing it releases
        the underlying connection.

        Raises:
            BackendCallFailedError: on any provider failure, including mid-stream.
            OperationCancelledError: if *cancellation* fires.
        """

    def is_available(self) -> bool:
        """Cheap availability check; must not raise."""
        return True
