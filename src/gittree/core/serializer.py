from __future__ import annotations

"""
Forest Serializer.

Converts the node model into plain JSON-compatible data and renders it as
compact, deterministic JSON text.
"""

import json
import re
from typing import Any, Dict, List

from gittree.domain.tree_models import DirNode, FileNode, Forest, Node

# json.loads joins escaped surrogate pairs, so any surrogate left is unpaired
_LONE_SURROGATE_RX = re.compile("[\ud800-\udfff]")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def forest_to_data(forest: Forest) -> List[Dict[str, Any]]:
    """Convert a forest into nested lists and dicts."""
    return [node_to_data(node) for node in forest]


def node_to_data(node: Node) -> Dict[str, Any]:
    """
    Convert a single node, recursing into directory children.

    Key order is fixed: 'name' first, then 'fullPath' or 'files'.
    """
    if isinstance(node, FileNode):
        return {"name": node.name, "fullPath": node.full_path}
    if isinstance(node, DirNode):
        return {"name": node.name, "files": forest_to_data(node.files)}
    raise TypeError(f"Unsupported node type: {type(node).__name__}")


def dump_forest(forest: Forest) -> str:
    """Render a forest as single-line JSON without extra whitespace."""
    return dump_data(forest_to_data(forest))


def dump_data(data: Any) -> str:
    """
    Render data as compact JSON, escaping lone surrogates as \\uXXXX.

    Other non-ASCII characters are written verbatim, so the text stays
    encodable as UTF-8.
    """
    text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    return _LONE_SURROGATE_RX.sub(_escape_surrogate, text)


def _escape_surrogate(match: re.Match[str]) -> str:
    return f"\\u{ord(match.group()):04x}"
