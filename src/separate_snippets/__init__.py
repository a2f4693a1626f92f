"""Separate tagged code snippets into standalone documentation files."""

from .exceptions import (
    DuplicateSnippetError,
    MismatchedTagsError,
    SnippetError,
    UnterminatedSnippetError,
)
from .models import DuplicatePolicy, ExtractionConfig, NormalizedSnippet
from .normalizer import normalize
from .scanner import scan

__all__ = [
    "DuplicatePolicy",
    "DuplicateSnippetError",
    "ExtractionConfig",
    "MismatchedTagsError",
    "NormalizedSnippet",
    "SnippetError",
    "UnterminatedSnippetError",
    "normalize",
    "scan",
]
