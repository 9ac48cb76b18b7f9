from pathlib import Path

from hybrid_summarizer.config.exceptions import ConfigurationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a prompt template from a file.

    Args:
        name: Template name; resolves to ``prompts/<name>.txt`` when *path*
              is not given.
        path: Explicit path to the template file.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        ConfigurationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{name}.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to load prompt template '{name}': {exc}") from exc
