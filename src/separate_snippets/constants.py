"""Marker patterns and fixed strings for snippet separation."""

import re

# Comment which must be included in a file for it to be separated
RE_SNIPPETS_SEPARATION = re.compile(r"\[SNIPPETS_SEPARATION\s+enabled\]")

# Comment controlling the prefix applied to snippet names
RE_SNIPPETS_PREFIX = re.compile(r"\[SNIPPETS_PREFIX\s+([A-Za-z0-9_]+)\]")

# [START name] and [END name] snippet tags
RE_START_SNIPPET = re.compile(r"\[START\s+([A-Za-z_]+)\s*\]")
RE_END_SNIPPET = re.compile(r"\[END\s+([A-Za-z_]+)\s*\]")

# Single-line `const { a, b } = require(...)` statements
RE_REQUIRE = re.compile(r"const {(.+?)} = require\((.+?)\)")

DEFAULT_PREFIX = "modular_"

# Lines starting with this are treated as comments
COMMENT_PREFIX = "//"

PROVENANCE_HEADER = (
    "// This snippet file was generated by processing the source file:",
    "// {source_file}",
    "//",
    "// To make edits to the snippets in this file, please edit the source",
    "",
)
