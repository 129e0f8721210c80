"""
Normalization pipeline: <sub> markup, then hex byte runs, then NFC.

Example:
    >>> normalize("H<sub>2</sub>O")
    'H₂O'
    >>> Pipeline(PipelineConfig(verbose=True)).normalize("<0x41>")
    'A'
"""

__all__ = [
    "Pipeline",
    "normalize",
]

import unicodedata
from dataclasses import replace
from typing import Iterable, Iterator, Optional

from loguru import logger

from glyphfix.config import PipelineConfig
from glyphfix.events import TextChange
from glyphfix.text.hexbytes import decode
from glyphfix.text.strings import preview
from glyphfix.text.subscript import rewrite

# Text without any of these is returned untouched
_TRIGGERS = ("<sub>", "<0x")


class Pipeline:
    """
    Repairs literal <sub> markup and escaped UTF-8 bytes in text.

    Instances hold no mutable state and may be shared between callers.

    Example:
        >>> pipeline = Pipeline()
        >>> pipeline.normalize("<0xE2><0x81><0xAF>y")
        'ȳ'
        >>> pipeline.with_verbose(True).config.verbose
        True
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        """
        Initialize pipeline.

        Args:
            config: Pipeline configuration (defaults to quiet, 50 char previews)
        """
        self.config = config or PipelineConfig()

    def __repr__(self) -> str:
        return f"Pipeline({self.config!r})"

    def with_verbose(self, verbose: bool) -> "Pipeline":
        """Return a pipeline with debug logging turned on or off."""
        return Pipeline(replace(self.config, verbose=verbose))

    def _log(self, message: str) -> None:
        if self.config.verbose:
            logger.debug(message)

    def _on_convert(self, match: str, result: str) -> None:
        self._log(f"Converted {match!r} to {result!r}")

    def _preview(self, text: str) -> str:
        return preview(text, self.config.preview_length)

    def replace_in_text(self, text: str) -> str:
        """Rewrite <sub> markup only, leaving hex runs untouched."""
        if not text:
            return text
        return rewrite(text, on_convert=self._on_convert)

    def normalize(self, text: str) -> str:
        """
        Repair all literal <sub> spans and hex byte runs in text.

        Never raises: on an unexpected error the input is returned as is.

        Args:
            text: Text to repair

        Returns:
            Repaired, NFC-normalized text, or the input if nothing to repair
        """
        if not text or not any(trigger in text for trigger in _TRIGGERS):
            return text

        self._log(f"Processing text: {self._preview(text)!r}")
        try:
            result = rewrite(text, on_convert=self._on_convert)
            result = decode(result, on_event=self._log)
            result = unicodedata.normalize("NFC", result)
        except Exception:
            logger.exception(
                f"Normalization failed, keeping original text: {self._preview(text)!r}"
            )
            return text

        if result != text:
            self._log(f"Replacing with: {self._preview(result)!r}")
        return result

    def process(self, changes: Iterable[TextChange]) -> Iterator[TextChange]:
        """
        Normalize a stream of text changes, one at a time.

        Units under script or style elements are skipped, and only units
        whose text actually changed are yielded.

        Args:
            changes: Text changes reported by a watcher

        Yields:
            Changes carrying the repaired text
        """
        observed = 0
        rewritten = 0
        for change in changes:
            observed += 1
            if change.is_skipped():
                continue
            result = self.normalize(change.text)
            if result != change.text:
                rewritten += 1
                yield replace(change, text=result)
        self._log(f"Observed {observed} text change(s), rewrote {rewritten}")


_DEFAULT_PIPELINE = Pipeline()


def normalize(text: str) -> str:
    """Repair text with a default, quiet pipeline."""
    return _DEFAULT_PIPELINE.normalize(text)
