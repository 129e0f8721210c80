"""
glyphfix - Repair literal <sub> markup and escaped UTF-8 bytes in rendered text.

This package is organized into focused modules:

- text/       Pure text repairs (no dependencies)
              - subscript: SUBSCRIPT_TABLE, to_subscript, rewrite
              - hexbytes: find_runs, decode_run, decode, DecodeFailure
              - marks: is_combining_mark, COMBINING_MACRON

- pipeline    Pipeline, normalize (requires loguru)
- config      PipelineConfig
- events      TextChange, TextChangeSource
- cli         glyphfix command (requires fire)

Usage:
    from glyphfix import normalize
    normalize("H<sub>2</sub>O<0xE2><0x82><0x99>")  # 'H₂Oₙ'

    from glyphfix import Pipeline, PipelineConfig
    pipeline = Pipeline(PipelineConfig(verbose=True))
"""

__version__ = "0.0.1"

# Convenience imports from text (no dependencies)
from glyphfix.text import (
    SUBSCRIPT_TABLE,
    to_subscript,
    rewrite,
    DecodeFailure,
    HexRun,
    DecodedSpan,
    find_runs,
    decode_run,
    decode,
    is_combining_mark,
)

from glyphfix.config import PipelineConfig
from glyphfix.events import TextChange, TextChangeSource
from glyphfix.pipeline import Pipeline, normalize

__all__ = [
    "__version__",
    # text.subscript
    "SUBSCRIPT_TABLE",
    "to_subscript",
    "rewrite",
    # text.hexbytes
    "DecodeFailure",
    "HexRun",
    "DecodedSpan",
    "find_runs",
    "decode_run",
    "decode",
    # text.marks
    "is_combining_mark",
    # config
    "PipelineConfig",
    # events
    "TextChange",
    "TextChangeSource",
    # pipeline
    "Pipeline",
    "normalize",
]
