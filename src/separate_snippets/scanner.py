"""Tag scanner: find the snippet configuration and raw snippets of a file."""

from pathlib import Path

from common.logger import get_logger

from .constants import (
    DEFAULT_PREFIX,
    RE_END_SNIPPET,
    RE_SNIPPETS_PREFIX,
    RE_SNIPPETS_SEPARATION,
    RE_START_SNIPPET,
)
from .exceptions import DuplicateSnippetError, MismatchedTagsError, UnterminatedSnippetError
from .models import DuplicatePolicy, ExtractionConfig

logger = get_logger(__name__)


def is_enabled(lines: list[str]) -> bool:
    """Check whether a file opts into snippet separation."""
    return any(RE_SNIPPETS_SEPARATION.search(line) for line in lines)


def find_prefix(lines: list[str]) -> str:
    """Return the prefix from the first [SNIPPETS_PREFIX ...] comment, or the default."""
    for line in lines:
        match = RE_SNIPPETS_PREFIX.search(line)
        if match:
            return match.group(1)
    return DEFAULT_PREFIX


def collect_snippets(
    lines: list[str],
    file_path: Path | str | None = None,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.ERROR,
) -> dict[str, list[str]]:
    """Collect snippet lines keyed by snippet name.

    Each entry starts with its [START name] line and ends with its
    [END name] line, both included and unmodified.

    Args:
        lines: Raw lines of the source file
        file_path: Source file, used in error messages
        duplicate_policy: Whether a repeated name is an error or replaces
            the earlier snippet

    Returns:
        Mapping of snippet name to raw lines, in order of first appearance

    Raises:
        MismatchedTagsError: An [END] marker does not match the open snippet
        UnterminatedSnippetError: A snippet is still open at end of input
        DuplicateSnippetError: A name is reused under DuplicatePolicy.ERROR
    """
    snippets: dict[str, list[str]] = {}
    current_name = ""
    in_snippet = False

    for line in lines:
        start_match = RE_START_SNIPPET.search(line)
        end_match = RE_END_SNIPPET.search(line)

        if start_match:
            name = start_match.group(1)
            if name in snippets and duplicate_policy == DuplicatePolicy.ERROR:
                raise DuplicateSnippetError(file_path, name)
            if in_snippet:
                logger.warning(
                    f"Snippet {current_name} in {file_path} was not closed before [START {name}]"
                )
            in_snippet = True
            current_name = name
            snippets[name] = []

        if in_snippet:
            snippets[current_name].append(line)

        if end_match:
            name = end_match.group(1)
            if not in_snippet:
                raise MismatchedTagsError(file_path, None, name)
            if name != current_name:
                raise MismatchedTagsError(file_path, current_name, name)
            in_snippet = False

    if in_snippet:
        raise UnterminatedSnippetError(file_path, current_name)

    return snippets


def scan(
    lines: list[str],
    file_path: Path | str | None = None,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.ERROR,
) -> ExtractionConfig:
    """Build the extraction config for one source file.

    Files without the [SNIPPETS_SEPARATION enabled] comment are not scanned
    any further and come back disabled with no snippets.
    """
    if not is_enabled(lines):
        return ExtractionConfig(enabled=False)

    return ExtractionConfig(
        enabled=True,
        prefix=find_prefix(lines),
        snippets=collect_snippets(lines, file_path, duplicate_policy),
    )
