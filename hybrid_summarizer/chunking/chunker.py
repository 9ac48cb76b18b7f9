"""Word-bounded chunking for context-limited backends."""


def count_words(text: str) -> int:
    """Number of whitespace-delimited words in *text*."""
    return len(text.split())


def split(text: str, max_words_per_chunk: int) -> list[str]:
    """Split *text* into chunks of at most *max_words_per_chunk* words.

    Words are separated by any whitespace run and rejoined with single
    spaces. Only the last chunk may be shorter than the limit.

    Raises:
        ValueError: if *max_words_per_chunk* is less than 1.
    """
    if max_words_per_chunk < 1:
        raise ValueError(
            f"max_words_per_chunk must be positive, got {max_words_per_chunk}"
        )
    words = text.split()
    return [
        " ".join(words[start : start + max_words_per_chunk])
        for start in range(0, len(words), max_words_per_chunk)
    ]
