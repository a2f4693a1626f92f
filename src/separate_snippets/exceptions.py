"""Errors raised while separating snippets."""

from pathlib import Path


class SnippetError(Exception):
    """Base exception for structurally broken snippet markers."""

    def __init__(self, file_path: Path | str | None, message: str):
        self.file_path = file_path
        super().__init__(message)


class MismatchedTagsError(SnippetError):
    """An [END] marker does not close the currently open snippet."""

    def __init__(self, file_path: Path | str | None, expected: str | None, found: str):
        self.expected = expected
        self.found = found
        if expected is None:
            message = f"Found [END {found}] in {file_path} with no open snippet"
        else:
            message = (
                f"Snippet {expected} in {file_path} has unmatched START/END tags "
                f"(expected [END {expected}], found [END {found}])"
            )
        super().__init__(file_path, message)


class UnterminatedSnippetError(SnippetError):
    """End of input was reached while a snippet was still open."""

    def __init__(self, file_path: Path | str | None, name: str):
        self.name = name
        super().__init__(file_path, f"Snippet {name} in {file_path} has no [END {name}] tag")


class DuplicateSnippetError(SnippetError):
    """A snippet name was opened more than once in the same file."""

    def __init__(self, file_path: Path | str | None, name: str):
        self.name = name
        super().__init__(file_path, f"Snippet {name} appears more than once in {file_path}")
