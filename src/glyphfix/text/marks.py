"""Combining mark detection."""

__all__ = ["COMBINING_MACRON", "COMBINING_RANGES", "is_combining_mark"]

COMBINING_MACRON = "\u0304"

# Inclusive code point ranges
COMBINING_RANGES: tuple[tuple[int, int], ...] = (
    (0x0300, 0x036F),  # Combining Diacritical Marks
    (0x1AB0, 0x1AFF),  # Combining Diacritical Marks Extended
    (0x1DC0, 0x1DFF),  # Combining Diacritical Marks Supplement
    (0x20D0, 0x20FF),  # Combining Diacritical Marks for Symbols
    (0xFE20, 0xFE2F),  # Combining Half Marks
)


def is_combining_mark(text: str) -> bool:
    """Check if text is exactly one character in a combining mark range."""
    if len(text) != 1:
        return False
    if text == COMBINING_MACRON:
        return True
    code_point = ord(text)
    return any(low <= code_point <= high for low, high in COMBINING_RANGES)
