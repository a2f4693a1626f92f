"""
Separate tagged snippets from source files into standalone files.

Scans every source file under a root directory. Files containing a
[SNIPPETS_SEPARATION enabled] comment have each [START name] ... [END name]
region normalized and written to <output-dir>/<file-slug>/<name><ext>.
"""

from pathlib import Path

from common.constants import DEFAULT_EXCLUDE, DEFAULT_EXTENSION, DEFAULT_OUTPUT_DIR
from common.logger import get_logger

from .discovery import list_snippet_files
from .models import DuplicatePolicy, SeparationResult
from .normalizer import build_snippet
from .scanner import scan
from .writer import snippet_dir_for, write_snippets

logger = get_logger(__name__)


def read_lines(file_path: Path) -> list[str]:
    """Read a source file as a list of lines; undecodable bytes become U+FFFD."""
    return file_path.read_text(encoding="utf-8", errors="replace").split("\n")


def process_file(
    file_path: Path,
    root: Path,
    output_dir: Path,
    extension: str = DEFAULT_EXTENSION,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.ERROR,
    dry_run: bool = False,
) -> SeparationResult | None:
    """
    Separate the snippets of a single source file.

    Args:
        file_path: Source file to process
        root: Source root, used for the snippet directory and header path
        output_dir: Output root for generated snippets
        extension: Source extension, also used for generated files
        duplicate_policy: Handling of repeated snippet names
        dry_run: If True, don't write any files

    Returns:
        SeparationResult, or None if the file does not enable separation
    """
    rel_path = file_path.relative_to(root)
    config = scan(read_lines(file_path), rel_path, duplicate_policy)
    if not config.enabled:
        logger.debug(f"Skipping: {rel_path} (separation not enabled)")
        return None

    snippet_dir = snippet_dir_for(file_path, root, output_dir, extension)
    logger.info(f"Processing: {rel_path} --> {snippet_dir} (prefix={config.prefix})")

    source_name = rel_path.as_posix()
    snippets = [
        build_snippet(name, lines, source_name, config.prefix)
        for name, lines in config.snippets.items()
    ]
    files = write_snippets(snippets, snippet_dir, extension, dry_run=dry_run)

    return SeparationResult(
        source_file=file_path,
        snippet_dir=snippet_dir,
        prefix=config.prefix,
        files=files,
    )


def separate_all(
    root: Path,
    output_dir: Path | None = None,
    extension: str = DEFAULT_EXTENSION,
    exclude: str = DEFAULT_EXCLUDE,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.ERROR,
    dry_run: bool = False,
) -> list[SeparationResult]:
    """
    Separate snippets from every source file under root.

    Files are processed one at a time in sorted order. The first snippet
    error aborts the run.

    Returns:
        One SeparationResult per file that enables separation
    """
    if output_dir is None:
        output_dir = root / DEFAULT_OUTPUT_DIR

    results = []
    for file_path in list_snippet_files(root, extension, exclude, output_dir):
        result = process_file(
            file_path,
            root,
            output_dir,
            extension=extension,
            duplicate_policy=duplicate_policy,
            dry_run=dry_run,
        )
        if result is not None:
            results.append(result)

    return results
