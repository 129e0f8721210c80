"""Log-friendly text previews."""

__all__ = ["preview"]


def preview(text: str, max_length: int = 50, suffix: str = "...") -> str:
    """
    Shorten text for a log line.

    Unlike a plain truncate, the suffix is appended after max_length
    characters rather than counted within them.

    Example:
        >>> preview("Hello World", 5)
        'Hello...'
        >>> preview("Hi", 5)
        'Hi'
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix
