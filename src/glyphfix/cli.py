"""
Command line interface for glyphfix.

Normalizes text given as arguments, files, or standard input:
    glyphfix "H<sub>2</sub>O"
    glyphfix --files notes.txt --in_place
    cat transcript.txt | glyphfix --verbose
"""

__all__ = ["configure_logging", "run", "main"]

import sys
from pathlib import Path
from typing import List, Sequence, Union

import fire
from loguru import logger

from glyphfix.config import PipelineConfig
from glyphfix.pipeline import Pipeline


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, debug level when verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _as_paths(files: Union[str, Sequence[str], None]) -> List[Path]:
    # fire hands over a single value as a scalar, several as a list or tuple
    if files is None:
        return []
    if isinstance(files, (str, Path)):
        return [Path(files)]
    return [Path(str(f)) for f in files]


def _normalize_file(path: Path, pipeline: Pipeline, in_place: bool) -> bool:
    """Normalize one file, returning False if it could not be processed."""
    try:
        original = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {path}: {e}")
        return False

    result = pipeline.normalize(original)

    if not in_place:
        sys.stdout.write(result)
        return True

    if result == original:
        logger.debug(f"No changes in {path}")
        return True

    try:
        path.write_text(result, encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot write {path}: {e}")
        return False
    logger.info(f"Rewrote {path}")
    return True


def run(
    *texts: str,
    files: Union[str, Sequence[str], None] = None,
    in_place: bool = False,
    verbose: bool = False,
    preview_length: int = 50,
) -> None:
    """Repair literal <sub> markup and <0xHH> byte escapes.

    Args:
        texts: Texts to normalize, printed one per line
        files: File path(s) to normalize, read and written as UTF-8
        in_place: Rewrite files instead of printing them
        verbose: Log every conversion to stderr
        preview_length: Characters of text shown in log lines

    With neither texts nor files, standard input is normalized to standard
    output. Exits with status 1 if any file could not be processed.
    """
    configure_logging(verbose)
    pipeline = Pipeline(PipelineConfig(verbose=verbose, preview_length=preview_length))

    paths = _as_paths(files)
    if in_place and not paths:
        logger.warning("--in_place only applies to --files, ignoring it")

    # fire parses numeric-looking arguments, so convert back to text
    for text in texts:
        print(pipeline.normalize(str(text)))

    failures = [path for path in paths if not _normalize_file(path, pipeline, in_place)]

    if not texts and not paths:
        sys.stdout.write(pipeline.normalize(sys.stdin.read()))

    if failures:
        logger.error(f"Failed to process {len(failures)} of {len(paths)} file(s)")
        sys.exit(1)


def main() -> None:
    fire.Fire(run)


if __name__ == "__main__":
    main()
