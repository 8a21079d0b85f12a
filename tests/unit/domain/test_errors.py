from __future__ import annotations

"""
Unit tests for the error taxonomy and exit code mapping.
"""

import pytest

from gittree.domain.errors import (
    MalformedJSONError,
    MissingArgumentError,
    PathCollisionError,
    TreeBuildError,
    WrongShapeError,
)


@pytest.mark.parametrize("error, code", [
    (MissingArgumentError(), 2),
    (MalformedJSONError(), 3),
    (WrongShapeError("bad"), 4),
    (PathCollisionError("a/b", "a"), 5),
])
def test_exit_codes_are_distinct(error, code):
    assert isinstance(error, TreeBuildError)
    assert error.exit_code == code


def test_default_messages():
    assert str(MissingArgumentError()) == "json not provided"
    assert str(MalformedJSONError()) == "failed to parse json"


def test_collision_message_names_path_and_segment():
    msg = str(PathCollisionError("lib/x/y.py", "x"))

    assert "lib/x/y.py" in msg
    assert "'x'" in msg
