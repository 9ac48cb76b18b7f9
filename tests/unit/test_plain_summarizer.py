"""Tests for the single-backend summarizer and the shared run driver."""

from collections.abc import Callable

from hybrid_summarizer.benchmark.models import BenchmarkSnapshot
from hybrid_summarizer.concurrency.cancellation import CancellationToken
from hybrid_summarizer.pipeline.models import PipelineState
from hybrid_summarizer.pipeline.plain import PlainSummarizer
from hybrid_summarizer.pipeline.stream import CANCELLED_MESSAGE


class TestPlainSummarizerSuccess:
    def test_streams_backend_fragments(self, scripted_client: Callable) -> None:
        client = scripted_client([["Sum", "mary", " text"]])
        stream = PlainSummarizer(client).summarize_streaming("Some long article.")
        assert list(stream) == ["Sum", "mary", " text"]
        assert stream.state is PipelineState.COMPLETED
        assert stream.text == "Summary text"

    def test_prompt_contains_input(self, scripted_client: Callable) -> None:
        client = scripted_client()
        PlainSummarizer(client).summarize("Quarterly revenue grew.")
        assert len(client.prompts) == 1
        assert "<document>\nQuarterly revenue grew.\n</document>" in client.prompts[0]

    def test_summarize_returns_result(self, scripted_client: Callable) -> None:
        client = scripted_client([["A", " short", " summary."]])
        result = PlainSummarizer(client).summarize("one two three four")
        assert result.success is True
        assert result.text == "A short summary."
        assert result.benchmark.input_word_count == 4
        assert result.benchmark.output_word_count == 3

    def test_benchmark_sink_gets_start_and_final(self, scripted_client: Callable) -> None:
        seen: list[BenchmarkSnapshot] = []
        client = scripted_client([["a", "b", "c"]])
        stream = PlainSummarizer(client).summarize_streaming("text", seen.append)
        list(stream)
        assert len(seen) == 2
        assert seen[0] == BenchmarkSnapshot.zero()
        assert seen[-1] == stream.benchmark

    def test_checkpoints_during_long_stream(self, scripted_client: Callable) -> None:
        seen: list[BenchmarkSnapshot] = []
        client = scripted_client([[f"w{i} " for i in range(12)]])
        list(PlainSummarizer(client).summarize_streaming("text", seen.append))
        # zero + fragments 5 and 10 + final
        assert len(seen) == 4
        assert seen[1].output_word_count == 5

    def test_custom_name(self, scripted_client: Callable) -> None:
        summarizer = PlainSummarizer(scripted_client(), name="Cloud AI")
        assert summarizer.name == "Cloud AI"
        assert PlainSummarizer(scripted_client()).name == "Single Backend AI"


class TestPlainSummarizerEmptyInput:
    def test_empty_input_completes_without_backend(self, scripted_client: Callable) -> None:
        seen: list[BenchmarkSnapshot] = []
        client = scripted_client()
        stream = PlainSummarizer(client).summarize_streaming("   \n ", seen.append)
        assert list(stream) == []
        assert stream.succeeded is True
        assert stream.text == ""
        assert client.prompts == []
        assert seen == [BenchmarkSnapshot.zero()]


class TestPlainSummarizerFailure:
    def test_mid_stream_failure_ends_failed(self, scripted_client: Callable) -> None:
        client = scripted_client([["Sum", "mary"]], fail_after=1)
        stream = PlainSummarizer(client).summarize_streaming("text")
        assert list(stream) == ["Sum"]
        assert stream.state is PipelineState.FAILED
        assert stream.error_message == "AI error: connection reset"

    def test_summarize_reports_failure(self, scripted_client: Callable) -> None:
        client = scripted_client(fail_after=0)
        result = PlainSummarizer(client).summarize("text")
        assert result.success is False
        assert result.text == ""
        assert result.error_message == "AI error: connection reset"
        assert result.cancelled is False

    def test_unavailable_backend_fails_before_call(self, scripted_client: Callable) -> None:
        client = scripted_client(available=False)
        stream = PlainSummarizer(client).summarize_streaming("text")
        assert list(stream) == []
        assert stream.state is PipelineState.FAILED
        assert "not available" in stream.error_message
        assert client.prompts == []

    def test_failure_has_no_final_benchmark(self, scripted_client: Callable) -> None:
        seen: list[BenchmarkSnapshot] = []
        client = scripted_client(fail_after=0)
        stream = PlainSummarizer(client).summarize_streaming("text", seen.append)
        list(stream)
        assert seen == [BenchmarkSnapshot.zero()]
        assert stream.benchmark == BenchmarkSnapshot.zero()


class TestPlainSummarizerCancellation:
    def test_cancelled_before_start(self, scripted_client: Callable) -> None:
        client = scripted_client()
        token = CancellationToken()
        token.cancel()
        result = PlainSummarizer(client).summarize("text", cancellation=token)
        assert result.success is False
        assert result.cancelled is True
        assert result.error_message == CANCELLED_MESSAGE
        assert client.prompts == []

    def test_cancel_mid_stream_stops_output(self, scripted_client: Callable) -> None:
        client = scripted_client([["a", "b", "c", "d"]])
        token = CancellationToken()
        stream = PlainSummarizer(client).summarize_streaming("text", cancellation=token)
        received = []
        for fragment in stream:
            received.append(fragment)
            if fragment == "b":
                token.cancel()
        assert received == ["a", "b"]
        assert stream.cancelled is True
        assert stream.text == ""

    def test_break_inside_with_block_cancels_run(self, scripted_client: Callable) -> None:
        client = scripted_client([["a", "b", "c"]])
        with PlainSummarizer(client).summarize_streaming("text") as stream:
            for fragment in stream:
                if fragment == "a":
                    break
        assert stream.state is PipelineState.CANCELLED
        assert stream.result().cancelled is True
        assert client.released == 1

    def test_close_after_break_cancels_run(self, scripted_client: Callable) -> None:
        client = scripted_client([["a", "b", "c"]])
        stream = PlainSummarizer(client).summarize_streaming("text")
        for _fragment in stream:
            break
        assert stream.state is PipelineState.REMOTE_CALL
        stream.close()
        assert stream.state is PipelineState.CANCELLED
        assert client.released == 1
