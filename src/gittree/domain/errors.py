from __future__ import annotations

"""
Tree Build Error Taxonomy.

Every failure of a build is fatal and maps to a dedicated exception type so
callers can tell argument problems from payload and structural problems.
Each class carries the process exit code the CLI reports for it.
"""

from gittree.domain.constants import (
    EXIT_MALFORMED_JSON,
    EXIT_MISSING_ARGUMENT,
    EXIT_PATH_COLLISION,
    EXIT_UNEXPECTED,
    EXIT_WRONG_SHAPE,
)


class TreeBuildError(Exception):
    """Base class for all build failures."""
    exit_code: int = EXIT_UNEXPECTED


class MissingArgumentError(TreeBuildError):
    """The JSON payload argument was absent or had no value."""
    exit_code = EXIT_MISSING_ARGUMENT

    def __init__(self, message: str = "json not provided") -> None:
        super().__init__(message)


class MalformedJSONError(TreeBuildError):
    """The payload could not be decoded as JSON."""
    exit_code = EXIT_MALFORMED_JSON

    def __init__(self, message: str = "failed to parse json") -> None:
        super().__init__(message)


class WrongShapeError(TreeBuildError):
    """The decoded payload lacks the expected 'tree' list or entry fields."""
    exit_code = EXIT_WRONG_SHAPE


class PathCollisionError(TreeBuildError):
    """
    A path segment already used as a file is needed as a directory.

    Attributes:
        path: Full path of the entry being inserted.
        segment: Name of the colliding segment.
    """
    exit_code = EXIT_PATH_COLLISION

    def __init__(self, path: str, segment: str) -> None:
        self.path = path
        self.segment = segment
        super().__init__(
            f"path collision at '{path}': '{segment}' is a file, not a directory"
        )
