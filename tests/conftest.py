from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared payload fixtures modelled on git "trees" API responses.
"""

import json
import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def git_tree_payload() -> Dict[str, Any]:
    """
    Return a realistic recursive git tree listing.

    Structure:
    README.md
    src/
      app/
        main.py
        util.py
    docs/
    """
    return {
        "sha": "9fb037999f264ba9a7fc6274d15fa3ae2ab98312",
        "truncated": False,
        "tree": [
            {"path": "README.md", "mode": "100644", "type": "blob", "sha": "a1", "size": 30},
            {"path": "src", "mode": "040000", "type": "tree", "sha": "b1"},
            {"path": "src/app", "mode": "040000", "type": "tree", "sha": "b2"},
            {"path": "src/app/main.py", "mode": "100644", "type": "blob", "sha": "a2", "size": 75},
            {"path": "src/app/util.py", "mode": "100644", "type": "blob", "sha": "a3", "size": 12},
            {"path": "docs", "mode": "040000", "type": "tree", "sha": "b3"},
        ],
    }


@pytest.fixture
def git_tree_json(git_tree_payload: Dict[str, Any]) -> str:
    return json.dumps(git_tree_payload)
