from hybrid_summarizer.anonymization.models import PlaceholderMap


def restore(text: str, placeholder_map: PlaceholderMap) -> str:
    """Put original values back in place of every placeholder in *text*.

    Placeholders the text no longer contains are skipped; repeated ones are
    all replaced. Newest entries go first because an original value may
    itself contain a placeholder allocated earlier in the same call.
    """
    result = text
    for placeholder, original in reversed(list(placeholder_map.items())):
        result = result.replace(placeholder, original)
    return result
