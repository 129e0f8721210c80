"""
Literal <sub> markup to Unicode subscript glyphs - no external dependencies.

Pure functions for rewriting ``<sub>...</sub>`` spans that were rendered as
text instead of markup.
"""

__all__ = [
    "SUBSCRIPT_TABLE",
    "to_subscript",
    "rewrite",
]

import re
from types import MappingProxyType
from typing import Callable, Optional

# Character to subscript glyph (read-only)
SUBSCRIPT_TABLE = MappingProxyType(
    dict(
        zip(
            "0123456789+-=()aehijklmnoprstuvx",
            "₀₁₂₃₄₅₆₇₈₉₊₋₌₍₎ₐₑₕᵢⱼₖₗₘₙₒₚᵣₛₜᵤᵥₓ",
        )
    )
)

_SUBSCRIPT_TRANSLATION = str.maketrans(dict(SUBSCRIPT_TABLE))

# Both tags must be present, with no "<" in between
_SUB_PATTERN = re.compile(r"<sub>([^<]+)</sub>")


def to_subscript(content: str) -> str:
    """
    Map every character of content to its subscript equivalent.

    Args:
        content: Text found between the <sub> tags

    Returns:
        Mapped text, unmapped characters unchanged

    Example:
        >>> to_subscript("a+1")
        'ₐ₊₁'
        >>> to_subscript("bz")
        'bz'
    """
    return content.translate(_SUBSCRIPT_TRANSLATION)


def rewrite(
    text: str,
    on_convert: Optional[Callable[[str, str], None]] = None,
) -> str:
    """
    Replace every literal <sub>CONTENT</sub> span with subscript glyphs.

    Args:
        text: Text possibly containing literal <sub> markup
        on_convert: Optional callback called with (matched span, result)

    Returns:
        Text with each span replaced, or the input itself if none matched

    Example:
        >>> rewrite("H<sub>2</sub>O")
        'H₂O'
        >>> rewrite("<sub>2")
        '<sub>2'
    """
    if "<sub>" not in text:
        return text

    def _replace(match: re.Match) -> str:
        result = to_subscript(match.group(1))
        if on_convert:
            on_convert(match.group(0), result)
        return result

    return _SUB_PATTERN.sub(_replace, text)
