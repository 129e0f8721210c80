"""
Text repair subpackage - no external dependencies.

Pure functions for rewriting literal <sub> markup and decoding escaped
UTF-8 byte runs.
"""

from glyphfix.text.subscript import (
    SUBSCRIPT_TABLE,
    to_subscript,
    rewrite,
)

from glyphfix.text.hexbytes import (
    DecodeFailure,
    HexRun,
    DecodedSpan,
    find_runs,
    decode_run,
    decode,
)

from glyphfix.text.marks import (
    COMBINING_MACRON,
    is_combining_mark,
)

from glyphfix.text.strings import preview

__all__ = [
    # subscript
    "SUBSCRIPT_TABLE",
    "to_subscript",
    "rewrite",
    # hexbytes
    "DecodeFailure",
    "HexRun",
    "DecodedSpan",
    "find_runs",
    "decode_run",
    "decode",
    # marks
    "COMBINING_MACRON",
    "is_combining_mark",
    # strings
    "preview",
]
