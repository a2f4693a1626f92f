"""Tests for snippet output paths and writing."""

from pathlib import Path

from separate_snippets.normalizer import build_snippet
from separate_snippets.writer import file_slug, snippet_dir_for, write_snippets


def test_file_slug_strips_extension_and_dot_slash():
    assert file_slug("./admin/auth.setup.js") == "admin/auth-setup"


def test_file_slug_from_path():
    assert file_slug(Path("firestore-next/test.firestore.js")) == "firestore-next/test-firestore"


def test_file_slug_custom_extension():
    assert file_slug("src/app.ts", ".ts") == "src/app"


def test_snippet_dir_for(tmp_path):
    source = tmp_path / "auth" / "email.link.js"

    result = snippet_dir_for(source, tmp_path, tmp_path / "snippets")

    assert result == tmp_path / "snippets" / "auth" / "email-link"


def test_write_snippets_creates_files(tmp_path):
    """Test that each snippet is written under its unprefixed name."""
    snippets = [
        build_snippet("greet", ["// [START greet]", "hi();", "// [END greet]"], "app.js", "m_"),
        build_snippet("bye", ["// [START bye]", "bye();", "// [END bye]"], "app.js", "m_"),
    ]
    snippet_dir = tmp_path / "snippets" / "app"

    files = write_snippets(snippets, snippet_dir)

    assert [f.name for f in files] == ["greet", "bye"]
    assert (snippet_dir / "greet.js").read_text(encoding="utf-8") == snippets[0].text
    assert "[START m_bye]" in (snippet_dir / "bye.js").read_text(encoding="utf-8")


def test_write_snippets_existing_directory(tmp_path):
    """Test that an existing output directory is reused."""
    snippet_dir = tmp_path / "out"
    snippet_dir.mkdir()
    snippet = build_snippet("a", ["// [START a]", "// [END a]"], "a.js", "p_")

    write_snippets([snippet], snippet_dir)
    write_snippets([snippet], snippet_dir)

    assert (snippet_dir / "a.js").exists()


def test_write_snippets_dry_run(tmp_path):
    snippet_dir = tmp_path / "out"
    snippet = build_snippet("a", ["// [START a]", "// [END a]"], "a.js", "p_")

    files = write_snippets([snippet], snippet_dir, dry_run=True)

    assert files[0].path == snippet_dir / "a.js"
    assert not snippet_dir.exists()
