"""Shared constants for the snippet-separator application.

For environment-based configuration (source root, output directory, etc.), use the env module:
    from common.env import env
    output_dir = env.output_dir()
"""

# Source files scanned for snippets
DEFAULT_EXTENSION = ".js"

# Path segment excluded from discovery (third-party dependencies)
DEFAULT_EXCLUDE = "node_modules"

# Output root for generated snippet files, relative to the source root
DEFAULT_OUTPUT_DIR = "snippets"
