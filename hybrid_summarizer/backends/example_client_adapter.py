"""Example text-completion backend.

Use this module as a reference when implementing new provider adapters.
Implement BaseChatClient and register the provider in ChatClientFactory.
"""

import re
from collections.abc import Generator
from typing import ClassVar

from hybrid_summarizer.backends.client_base import BaseChatClient
from hybrid_summarizer.concurrency.cancellation import CancellationToken, ensure_token


class ExampleChatClient(BaseChatClient):
    """Example backend that streams a fixed summary word by word.

    No network calls. Placeholder tokens found in the prompt are echoed at
    the end of the reply, so the privacy pipeline can be exercised locally.
    Useful for local development, tests, and as a template for real
    provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "The document describes the main points and the recommended next steps."
    )
    _PLACEHOLDER_RE: ClassVar[re.Pattern[str]] = re.compile(r"\[[A-Z_]+_\d+\]")

    def __init__(self, response: str | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

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
        token = ensure_token(cancellation)
        for fragment in self._fragments(prompt):
            token.raise_if_cancelled()
            yield fragment

    def _fragments(self, prompt: str) -> list[str]:
        words = self._response.split()
        placeholders = list(dict.fromkeys(self._PLACEHOLDER_RE.findall(prompt)))
        if placeholders:
            words.append("Mentioned:")
            words.extend(placeholders)
        return [word if i == 0 else f" {word}" for i, word in enumerate(words)]
