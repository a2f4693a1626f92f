"""Tests for the snippet normalizer."""

from separate_snippets.normalizer import (
    build_snippet,
    drop_leading_blank,
    flatten_indentation,
    min_indent,
    normalize,
    rewrite_line,
)

HEADER = [
    "// This snippet file was generated by processing the source file:",
    "// src/app.js",
    "//",
    "// To make edits to the snippets in this file, please edit the source",
    "",
]


def test_normalize_greet_example():
    """Test the full transformation of a small snippet."""
    lines = ["  // [START greet]", "  console.log('hi');", "  // [END greet]"]

    text = normalize(lines, "src/app.js", "modular_")

    assert text.split("\n") == HEADER + [
        "// [START modular_greet]",
        "console.log('hi');",
        "// [END modular_greet]",
    ]


def test_output_has_no_trailing_newline():
    text = normalize(["// [START a]", "x();", "// [END a]"], "app.js", "p_")
    assert not text.endswith("\n")


def test_require_rewritten_to_import():
    """Test that destructured require lines become imports."""
    line = "const { a, b } = require('./m');"

    assert rewrite_line(line, "modular_") == "import { a, b } from './m';"


def test_require_keeps_module_expression_verbatim():
    line = '    const {initializeApp} = require("firebase/app");'

    assert rewrite_line(line, "modular_") == '    import {initializeApp} from "firebase/app";'


def test_multiline_require_passes_through():
    """Test that multi-line requires are left alone."""
    lines = ["const {", "  a,", '} = require("./m");']

    assert [rewrite_line(line, "p_") for line in lines] == lines


def test_non_destructured_require_passes_through():
    line = 'const admin = require("firebase-admin");'
    assert rewrite_line(line, "p_") == line


def test_markers_get_prefix():
    """Test that START/END tag names are prefixed."""
    assert rewrite_line("  // [START auth_init]", "v8_") == "  // [START v8_auth_init]"
    assert rewrite_line("  // [END auth_init ]", "v8_") == "  // [END v8_auth_init]"


def test_different_prefixes_only_change_marker_names():
    """Test that two prefixes differ only in the prefixed marker names."""
    lines = ["  // [START greet]", "    hello();", "  // [END greet]"]

    first = normalize(lines, "app.js", "p1_").split("\n")
    second = normalize(lines, "app.js", "p2_").split("\n")

    diffs = [(a, b) for a, b in zip(first, second) if a != b]
    assert diffs == [
        ("// [START p1_greet]", "// [START p2_greet]"),
        ("// [END p1_greet]", "// [END p2_greet]"),
    ]


def test_flatten_keeps_relative_indentation():
    lines = ["    if (x) {", "      y();", "", "    }"]

    assert flatten_indentation(lines) == ["if (x) {", "  y();", "", "}"]


def test_flatten_blank_lines_become_empty():
    lines = ["  a();", "      ", "  b();"]

    assert flatten_indentation(lines) == ["a();", "", "b();"]


def test_flatten_is_idempotent():
    lines = ["\tfoo();", "\t\tbar();", "   ", "\tbaz();"]

    once = flatten_indentation(lines)

    assert flatten_indentation(once) == once


def test_min_indent_of_all_blank_lines_is_zero():
    assert min_indent(["", "   ", "\t"]) == 0
    assert flatten_indentation(["", "   "]) == ["", ""]


def test_drop_leading_blank_after_comments():
    """Test that a blank line after the opening comments is removed."""
    lines = ["// [START a]", "// note", "", "x();", "", "// [END a]"]

    assert drop_leading_blank(lines) == ["// [START a]", "// note", "x();", "", "// [END a]"]


def test_drop_leading_blank_keeps_code_line():
    lines = ["// [START a]", "x();", "", "// [END a]"]

    assert drop_leading_blank(lines) == lines


def test_drop_leading_blank_all_comments_is_noop():
    lines = ["// [START a]", "// [END a]"]

    assert drop_leading_blank(lines) == lines


def test_blank_after_start_removed_in_normalize():
    lines = [
        "  // [START setup]",
        "",
        "  const { getAuth } = require('firebase/auth');",
        "  const auth = getAuth();",
        "  // [END setup]",
    ]

    body = normalize(lines, "src/app.js", "modular_").split("\n")[len(HEADER) :]

    assert body == [
        "// [START modular_setup]",
        "import { getAuth } from 'firebase/auth';",
        "const auth = getAuth();",
        "// [END modular_setup]",
    ]


def test_build_snippet_fields():
    snippet = build_snippet("greet", ["// [START greet]", "// [END greet]"], "a.js", "x_")

    assert snippet.name == "greet"
    assert snippet.prefix == "x_"
    assert snippet.source_file == "a.js"
    assert snippet.lines == ("// [START x_greet]", "// [END x_greet]")
    assert snippet.header[1] == "// a.js"
