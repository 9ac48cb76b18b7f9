import pytest

from hybrid_summarizer.backends.client_base import BaseChatClient
from hybrid_summarizer.backends.example_client_adapter import ExampleChatClient
from hybrid_summarizer.concurrency.cancellation import (
    CancellationToken,
    OperationCancelledError,
)


class TestExampleChatClient:
    def test_is_base_chat_client(self) -> None:
        assert isinstance(ExampleChatClient(), BaseChatClient)

    def test_is_available(self) -> None:
        assert ExampleChatClient().is_available() is True

    def test_streams_word_by_word(self) -> None:
        client = ExampleChatClient(response="short fixed reply")
        assert list(client.complete_streaming("prompt")) == ["short", " fixed", " reply"]

    def test_complete_once_joins_fragments(self) -> None:
        assert ExampleChatClient().complete_once("prompt") == ExampleChatClient.DEFAULT_RESPONSE

    def test_echoes_placeholders_once(self) -> None:
        client = ExampleChatClient(response="Summary.")
        reply = client.complete_once("Call [PHONE_1], mail [EMAIL_2], again [PHONE_1].")
        assert reply == "Summary. Mentioned: [PHONE_1] [EMAIL_2]"

    def test_ignores_template_placeholder_hint(self) -> None:
        client = ExampleChatClient(response="Summary.")
        assert client.complete_once("placeholders such as [CATEGORY_N]") == "Summary."

    def test_cancelled_token_stops_stream(self) -> None:
        token = CancellationToken()
        token.cancel()
        with pytest.raises(OperationCancelledError):
            list(ExampleChatClient().complete_streaming("prompt", token))
