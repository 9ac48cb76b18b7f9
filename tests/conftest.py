from collections.abc import Callable, Generator

import pytest

from hybrid_summarizer.backends.client_base import BaseChatClient
from hybrid_summarizer.backends.exceptions import BackendCallFailedError
from hybrid_summarizer.concurrency.cancellation import CancellationToken


class ScriptedChatClient(BaseChatClient):
    """Backend double that streams pre-scripted fragments and records prompts."""

    def __init__(
        self,
        replies: list[list[str]] | None = None,
        *,
        available: bool = True,
        fail_after: int | None = None,
    ) -> None:
        self.replies = list(replies or [["ok"]])
        self.prompts: list[str] = []
        self.available = available
        self.fail_after = fail_after
        self.released = 0  # backend streams finished or closed

    def is_available(self) -> bool:
        return self.available

    def complete_once(
        self,
        prompt: str,
        cancellation: CancellationToken | None = None,
    ) -> str:
        return "".join(self.complete_streaming(prompt, cancellation))

    def complete_streaming(
        self,
        prompt: str,
        cancellation: CancellationToken | None = None,
    ) -> Generator[str, None, None]:
        self.prompts.append(prompt)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        return self._stream(reply)

    def _stream(self, reply: list[str]) -> Generator[str, None, None]:
        try:
            for index, fragment in enumerate(reply):
                if self.fail_after is not None and index >= self.fail_after:
                    raise BackendCallFailedError("connection reset")
                yield fragment
        finally:
            self.released += 1


@pytest.fixture()
def scripted_client() -> Callable[..., ScriptedChatClient]:
    """Factory for scripted backend doubles."""
    return ScriptedChatClient


@pytest.fixture()
def words() -> Callable[[int], str]:
    """Build a text of *n* distinct words."""

    def _make(n: int) -> str:
        return " ".join(f"w{i}" for i in range(n))

    return _make


@pytest.fixture()
def health_record() -> str:
    """Short record with one item of every PII category."""
    return (
        "Patient: Maria Garcia, age 54, SSN 123-45-6789.\n"
        "Lives at 1234 Oak Street, Apt 5B in Portland, OR 97201.\n"
        "Phone (503) 555-0147, email maria.garcia@example.com.\n"
        "Seen by Dr. Sarah Johnson on March 5, 2024.\n"
        "Member ID: BCB-123456789."
    )
