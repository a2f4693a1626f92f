"""Discovery of source files that may contain snippets."""

from pathlib import Path

from common.constants import DEFAULT_EXCLUDE, DEFAULT_EXTENSION, DEFAULT_OUTPUT_DIR


def list_snippet_files(
    root: Path,
    extension: str = DEFAULT_EXTENSION,
    exclude: str = DEFAULT_EXCLUDE,
    output_dir: Path | None = None,
) -> list[Path]:
    """List files under root that should be checked for snippets.

    Args:
        root: Directory to search
        extension: File extension to match, including the dot
        exclude: Path segment (such as node_modules) whose files are skipped
        output_dir: Generated snippets directory, always skipped
            (default: root / "snippets")

    Returns:
        Sorted list of matching file paths
    """
    if output_dir is None:
        output_dir = root / DEFAULT_OUTPUT_DIR
    output_dir = output_dir.resolve()

    files = []
    for path in root.rglob(f"*{extension}"):
        if not path.is_file():
            continue

        rel_parts = path.relative_to(root).parts
        if exclude and exclude in rel_parts:
            continue

        if path.resolve().is_relative_to(output_dir):
            continue

        files.append(path)

    return sorted(files)
