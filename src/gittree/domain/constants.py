from __future__ import annotations

"""
Domain Constants.

Entry type tags and payload keys used by the git "trees" listing format,
plus the process exit codes reported by the CLI.
"""

# -----------------------------------------------------------------------------
# GIT TREE LISTING VOCABULARY
# -----------------------------------------------------------------------------
ENTRY_TYPE_BLOB = "blob"
ENTRY_TYPE_TREE = "tree"

PAYLOAD_TREE_KEY = "tree"
PAYLOAD_TRUNCATED_KEY = "truncated"

PATH_SEPARATOR = "/"

# Sentinel value for --json meaning "read payload from stdin"
STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# EXIT CODES
# -----------------------------------------------------------------------------
EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_MISSING_ARGUMENT = 2
EXIT_MALFORMED_JSON = 3
EXIT_WRONG_SHAPE = 4
EXIT_PATH_COLLISION = 5
EXIT_INTERRUPTED = 130
