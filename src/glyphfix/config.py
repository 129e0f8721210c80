"""
Pipeline configuration.

Settings are passed into the pipeline explicitly; there is no global state.
"""

__all__ = ["PipelineConfig"]

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineConfig:
    """Configuration for normalization behavior."""

    verbose: bool = False
    preview_length: int = 50  # Characters of text shown in log lines

    def __post_init__(self):
        if self.preview_length < 0:
            raise ValueError(
                f"preview_length must be non-negative, got {self.preview_length}"
            )
