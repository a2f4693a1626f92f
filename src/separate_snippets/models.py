"""Data models for snippet scanning, normalization and output."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .constants import DEFAULT_PREFIX, PROVENANCE_HEADER


class DuplicatePolicy(str, Enum):
    """What to do when a snippet name is opened twice in one file."""

    ERROR = "error"  # Fail the run
    OVERWRITE = "overwrite"  # Later snippet replaces the earlier one


@dataclass
class ExtractionConfig:
    """Snippet settings and raw snippets collected from one source file."""

    enabled: bool = False
    prefix: str = DEFAULT_PREFIX
    # Insertion order is the order of first appearance in the file
    snippets: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class NormalizedSnippet:
    """A standalone snippet ready to be written."""

    name: str
    source_file: str
    prefix: str
    lines: tuple[str, ...]

    @property
    def header(self) -> list[str]:
        return [line.format(source_file=self.source_file) for line in PROVENANCE_HEADER]

    @property
    def text(self) -> str:
        """Header and body joined with newlines, without a trailing newline."""
        return "\n".join([*self.header, *self.lines])


@dataclass
class SnippetFile:
    """A generated snippet file."""

    name: str
    path: Path


@dataclass
class SeparationResult:
    """Outcome of separating one source file."""

    source_file: Path
    snippet_dir: Path
    prefix: str
    files: list[SnippetFile]
