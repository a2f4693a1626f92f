"""Output paths and writing of normalized snippet files."""

from pathlib import Path

from common.constants import DEFAULT_EXTENSION
from common.logger import get_logger

from .models import NormalizedSnippet, SnippetFile

logger = get_logger(__name__)


def file_slug(rel_path: Path | str, extension: str = DEFAULT_EXTENSION) -> str:
    """
    Convert a source path into the name of its snippet directory.

    e.g., './admin/auth.setup.js' -> 'admin/auth-setup'

    Args:
        rel_path: Source file path relative to the source root
        extension: Source extension to strip

    Returns:
        Slug with the extension and leading './' removed and dots replaced by hyphens
    """
    slug = Path(rel_path).as_posix() if isinstance(rel_path, Path) else rel_path
    if slug.endswith(extension):
        slug = slug[: -len(extension)]
    if slug.startswith("./"):
        slug = slug[2:]
    return slug.replace(".", "-")


def snippet_dir_for(
    source_file: Path, root: Path, output_dir: Path, extension: str = DEFAULT_EXTENSION
) -> Path:
    """Directory that receives the snippets of one source file."""
    return output_dir / file_slug(source_file.relative_to(root), extension)


def write_snippets(
    snippets: list[NormalizedSnippet],
    snippet_dir: Path,
    extension: str = DEFAULT_EXTENSION,
    dry_run: bool = False,
) -> list[SnippetFile]:
    """
    Write each snippet to <snippet_dir>/<name><extension>.

    Args:
        snippets: Normalized snippets of one source file
        snippet_dir: Target directory, created if missing
        extension: Extension of the generated files
        dry_run: If True, return the planned files without writing

    Returns:
        One SnippetFile per snippet, in input order
    """
    if not dry_run:
        snippet_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for snippet in snippets:
        path = snippet_dir / f"{snippet.name}{extension}"
        if not dry_run:
            path.write_text(snippet.text, encoding="utf-8")
            logger.debug(f"  wrote {path}")
        written.append(SnippetFile(name=snippet.name, path=path))

    return written
