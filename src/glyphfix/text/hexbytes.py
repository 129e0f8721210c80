"""
Escaped UTF-8 byte runs to Unicode text - no external dependencies.

Runs of literal ``<0xHH>`` tokens are decoded as UTF-8 and spliced back into
the text. A run that decodes to a lone combining mark is attached to a
neighbouring base character instead of being left floating, and the result
is NFC-normalized.
"""

__all__ = [
    "DecodeFailure",
    "HexRun",
    "DecodedSpan",
    "find_runs",
    "decode_run",
    "decode",
]

import re
import unicodedata
from dataclasses import dataclass
from typing import Callable, List, Optional

from .marks import COMBINING_MACRON, is_combining_mark

# One or more adjacent tokens; only the hex digits are case-insensitive
_RUN_PATTERN = re.compile(r"(?:<0x[0-9A-Fa-f]{2}>)+")
_TOKEN_PATTERN = re.compile(r"<0x([0-9A-Fa-f]{2})>")

# The upstream encoder emits the combining macron as E2 81 AF (U+206F)
_MACRON_BYTES = b"\xe2\x81\xaf"
_MACRON_REMAP = str.maketrans({"\u206f": COMBINING_MACRON})
_MACRON_FAST_PATH = re.compile(r"<0x[eE]2><0x81><0x[aA][fF]>([xy])")


class DecodeFailure(ValueError):
    """Raised when the bytes of a hex run are not valid UTF-8."""

    def __init__(self, run: "HexRun", reason: str):
        super().__init__(f"Cannot decode {run.literal!r}: {reason}")
        self.run = run


@dataclass(frozen=True)
class HexRun:
    """Maximal run of adjacent <0xHH> tokens in a source text."""

    start: int
    end: int
    literal: str

    @property
    def data(self) -> bytes:
        """Raw byte values, in order."""
        return bytes(int(value, 16) for value in _TOKEN_PATTERN.findall(self.literal))


@dataclass(frozen=True)
class DecodedSpan:
    """Decoded text of a hex run."""

    text: str
    is_combining_mark: bool = False


def find_runs(text: str) -> List[HexRun]:
    """
    Find all maximal hex runs, left to right.

    Args:
        text: Text to scan

    Returns:
        Non-overlapping runs in source order

    Example:
        >>> find_runs("a<0x41><0x42>b<0x43>")
        [HexRun(start=1, end=13, literal='<0x41><0x42>'), HexRun(start=14, end=20, literal='<0x43>')]
    """
    return [
        HexRun(start=match.start(), end=match.end(), literal=match.group(0))
        for match in _RUN_PATTERN.finditer(text)
    ]


def decode_run(run: HexRun) -> DecodedSpan:
    """
    Decode the bytes of a hex run as UTF-8.

    Args:
        run: Hex run to decode

    Returns:
        Decoded span, flagged when it is a single combining mark

    Raises:
        DecodeFailure: If the bytes are not valid UTF-8
    """
    data = run.data
    if data == _MACRON_BYTES:
        decoded = COMBINING_MACRON
    else:
        try:
            decoded = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeFailure(run, e.reason) from e
        decoded = decoded.translate(_MACRON_REMAP)
    return DecodedSpan(text=decoded, is_combining_mark=is_combining_mark(decoded))


def _last_emitted(pieces: List[str]) -> str:
    for piece in reversed(pieces):
        if piece:
            return piece[-1]
    return ""


def decode(
    text: str,
    on_event: Optional[Callable[[str], None]] = None,
) -> str:
    """
    Replace every hex run in text with its decoded characters.

    A run that decodes to a single combining mark takes the next character
    as its base when that character is not whitespace, consuming it.
    Otherwise the mark attaches to the last emitted character, or is
    emitted bare. A run that is not valid UTF-8 is kept as literal text.

    Args:
        text: Text possibly containing <0xHH> runs
        on_event: Optional callback receiving a description of each decision

    Returns:
        Decoded, NFC-normalized text, or the input itself if nothing matched

    Example:
        >>> decode("<0xE2><0x82><0x99>")
        'ₙ'
        >>> decode("<0xFF>")
        '<0xFF>'
    """
    if "<0x" not in text:
        return text

    text, fast_path_hits = _MACRON_FAST_PATH.subn(
        lambda match: match.group(1) + COMBINING_MACRON, text
    )
    if fast_path_hits and on_event:
        on_event(f"Fixed {fast_path_hits} macron sequence(s) on the fast path")

    runs = find_runs(text)
    if not runs and not fast_path_hits:
        return text

    pieces: List[str] = []
    cursor = 0
    for run in runs:
        pieces.append(text[cursor : run.start])
        cursor = run.end

        try:
            span = decode_run(run)
        except DecodeFailure as e:
            if on_event:
                on_event(f"{e}, keeping literal text")
            pieces.append(run.literal)
            continue

        if not span.is_combining_mark:
            pieces.append(span.text)
            continue

        following = text[run.end : run.end + 1]
        previous = _last_emitted(pieces)
        if following and not following.isspace():
            pieces.append(following + span.text)
            cursor = run.end + 1
            direction = f"forward to {following!r}"
        elif previous and not previous.isspace():
            pieces.append(span.text)
            direction = f"backward to {previous!r}"
        else:
            pieces.append(span.text)
            direction = "nowhere, no base character"
        if on_event:
            on_event(f"Attached U+{ord(span.text):04X} {direction}")

    pieces.append(text[cursor:])
    return unicodedata.normalize("NFC", "".join(pieces))
