from collections.abc import Generator

import httpx
import openai

from hybrid_summarizer.backends.client_base import BaseChatClient
from hybrid_summarizer.backends.exceptions import BackendCallFailedError
from hybrid_summarizer.concurrency.cancellation import CancellationToken, ensure_token


class OpenAIChatClient(BaseChatClient):
    """Text-completion backend built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        temperature: float = 0.2,
        base_url: str | None = None,
        system_prompt: str = "",
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._model = model
        self._temperature = temperature
        self._system_prompt = system_prompt
        self._client = openai.OpenAI(
            # The SDK refuses an empty key; local servers ignore it.
            api_key=api_key or "not-needed",
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def is_available(self) -> bool:
        return bool(self._model) and (bool(self._api_key) or self._base_url is not None)

    def complete_once(
        self,
        prompt: str,
        cancellation: CancellationToken | None = None,
    ) -> str:
        token = ensure_token(cancellation)
        token.raise_if_cancelled()
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                messages=self._messages(prompt),
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise BackendCallFailedError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise BackendCallFailedError(f"AI provider API error: {exc}") from exc
        token.raise_if_cancelled()

        if not response.choices:
            raise BackendCallFailedError("AI returned no choices")
        return response.choices[0].message.content or ""

    def complete_streaming(
        self,
        prompt: str,
        cancellation: CancellationToken | None = None,
    ) -> Generator[str, None, None]:
        token = ensure_token(cancellation)
        token.raise_if_cancelled()
        try:
            stream = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                messages=self._messages(prompt),
                stream=True,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise BackendCallFailedError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise BackendCallFailedError(f"AI provider API error: {exc}") from exc

        try:
            for chunk in stream:
                token.raise_if_cancelled()
                if not chunk.choices:
                    continue
                content = chunk.choices[0].delta.content
                if content is not None:
                    yield content
        except (openai.APIConnectionError, httpx.HTTPError) as exc:
            raise BackendCallFailedError(f"AI provider stream interrupted: {exc}") from exc
        except openai.APIError as exc:
            raise BackendCallFailedError(f"AI provider API error: {exc}") from exc
        finally:
            stream.close()

    def _messages(self, prompt: str) -> list[dict[str, str]]:
        messages = []
        if self._system_prompt:
            messages.append({"role": "system", "content": self._system_prompt})
        messages.append({"role": "user", "content": prompt})
        return messages
