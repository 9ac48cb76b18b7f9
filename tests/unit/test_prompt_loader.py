"""Tests for prompt template loading."""

from pathlib import Path

import pytest

from hybrid_summarizer.config.exceptions import ConfigurationError
from hybrid_summarizer.pipeline.prompt_loader import load_prompt_template


class TestLoadPromptTemplate:
    @pytest.mark.parametrize(
        ("name", "fields"),
        [
            ("plain_summary", ["{text}"]),
            ("chunk_summary", ["{text}", "{part_note}"]),
            ("synthesis", ["{sections}"]),
            ("privacy_summary", ["{text}"]),
            ("privacy_question", ["{text}", "{question}"]),
        ],
    )
    def test_loads_bundled_templates(self, name: str, fields: list[str]) -> None:
        template = load_prompt_template(name)
        for field in fields:
            assert field in template

    def test_bundled_templates_delimit_document(self) -> None:
        template = load_prompt_template("plain_summary")
        assert "<document>" in template
        assert "</document>" in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Hello {text}")
        assert load_prompt_template("custom", custom) == "Hello {text}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ConfigurationError, match="Failed to load prompt template 'gone'"):
            load_prompt_template("gone", Path("/nonexistent/file.txt"))

    def test_unknown_bundled_name_raises_error(self) -> None:
        with pytest.raises(ConfigurationError):
            load_prompt_template("does_not_exist")
