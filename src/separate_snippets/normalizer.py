"""Snippet normalizer: turn raw snippet lines into a standalone file.

A snippet is made standalone by:
  - converting `const { ... } = require(...)` lines into top-level imports
  - adding the prefix to the names in its START/END tags
  - left-aligning all content
  - removing a blank line directly after the leading comments
  - prepending a header that points back to the source file
"""

from pathlib import Path

from .constants import COMMENT_PREFIX, RE_END_SNIPPET, RE_REQUIRE, RE_START_SNIPPET
from .models import NormalizedSnippet


def is_blank(line: str) -> bool:
    return len(line.strip()) == 0


def rewrite_line(line: str, prefix: str) -> str:
    """Rewrite a require statement or a START/END tag; other lines pass through."""
    if RE_REQUIRE.search(line):
        return RE_REQUIRE.sub(r"import {\1} from \2", line, count=1)
    if RE_START_SNIPPET.search(line):
        return RE_START_SNIPPET.sub(lambda m: f"[START {prefix}{m.group(1)}]", line, count=1)
    if RE_END_SNIPPET.search(line):
        return RE_END_SNIPPET.sub(lambda m: f"[END {prefix}{m.group(1)}]", line, count=1)
    return line


def min_indent(lines: list[str]) -> int:
    """Smallest leading-whitespace width among non-blank lines (0 if all blank)."""
    indents = [len(line) - len(line.lstrip()) for line in lines if not is_blank(line)]
    return min(indents, default=0)


def flatten_indentation(lines: list[str]) -> list[str]:
    """Left-align lines while keeping their relative indentation.

    Blank lines become empty strings.
    """
    indent = min_indent(lines)
    return ["" if is_blank(line) else line[indent:] for line in lines]


def drop_leading_blank(lines: list[str]) -> list[str]:
    """Remove the blank line that often follows the opening comments."""
    first_non_comment = next(
        (i for i, line in enumerate(lines) if not line.startswith(COMMENT_PREFIX)), None
    )
    if first_non_comment is None or not is_blank(lines[first_non_comment]):
        return list(lines)
    return lines[:first_non_comment] + lines[first_non_comment + 1 :]


def build_snippet(
    name: str, raw_lines: list[str], source_file: Path | str, prefix: str
) -> NormalizedSnippet:
    """Normalize raw snippet lines into a NormalizedSnippet."""
    rewritten = [rewrite_line(line, prefix) for line in raw_lines]
    body = drop_leading_blank(flatten_indentation(rewritten))
    return NormalizedSnippet(
        name=name,
        source_file=str(source_file),
        prefix=prefix,
        lines=tuple(body),
    )


def normalize(raw_lines: list[str], source_file: Path | str, prefix: str) -> str:
    """Return the full text of the standalone snippet file.

    Args:
        raw_lines: Snippet lines including its START/END tags
        source_file: Source file the snippet was taken from
        prefix: Prefix for the snippet names in the tags (such as modular_)

    Returns:
        Header followed by the normalized body, joined with newlines
    """
    name_match = RE_START_SNIPPET.search(raw_lines[0]) if raw_lines else None
    name = name_match.group(1) if name_match else ""
    return build_snippet(name, raw_lines, source_file, prefix).text
