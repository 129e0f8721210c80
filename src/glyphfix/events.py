"""
Text-change events exchanged with a document watcher.

The watcher (a DOM walker, a mutation observer, a file tailer...) is an
external collaborator. It yields one TextChange per text unit it saw change
and receives corrected TextChange objects back from Pipeline.process.
"""

__all__ = [
    "SKIPPED_TAGS",
    "TextChange",
    "TextChangeSource",
]

from dataclasses import dataclass
from typing import Hashable, Iterator, Optional, Protocol

# Text under these elements is code, not rendered prose
SKIPPED_TAGS = frozenset({"script", "style"})


@dataclass(frozen=True)
class TextChange:
    """One text unit reported by a watcher."""

    key: Hashable
    text: str
    parent_tag: Optional[str] = None

    def is_skipped(self) -> bool:
        """Check if the unit lives under a script or style element."""
        return self.parent_tag is not None and self.parent_tag.lower() in SKIPPED_TAGS


class TextChangeSource(Protocol):
    """Anything that can be iterated for text changes."""

    def __iter__(self) -> Iterator[TextChange]: ...
