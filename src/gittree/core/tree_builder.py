from __future__ import annotations

"""
Tree Builder.

Folds a flat list of path-tagged entries into a nested forest mirroring the
directory structure, in a single pass over the input.
"""

import logging
from typing import Iterable, List, Optional

from gittree.domain.constants import ENTRY_TYPE_BLOB, ENTRY_TYPE_TREE, PATH_SEPARATOR
from gittree.domain.errors import PathCollisionError
from gittree.domain.tree_models import DirNode, Entry, FileNode, Forest, Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(entries: Iterable[Entry]) -> Forest:
    """
    Build the nested forest for the given entries.

    Intermediate directories are created on first use and reused by later
    entries. Final segments are always appended fresh: duplicate blob or tree
    entries yield duplicate siblings. Entries whose type is neither 'blob'
    nor 'tree' contribute their intermediate directories only.

    Args:
        entries: Flat listing records, processed in order.

    Returns:
        Forest: Top-level nodes in first-encountered order.

    Raises:
        PathCollisionError: If a segment previously added as a file must be
                            descended into as a directory.
    """
    result: Forest = []

    for entry in entries:
        segments = entry.path.split(PATH_SEPARATOR)
        current = result

        for segment in segments[:-1]:
            current = _descend(current, segment, entry.path)

        _append_leaf(current, segments[-1], entry)

    return result

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _descend(siblings: List[Node], name: str, full_path: str) -> List[Node]:
    """Return the children of the directory 'name', creating it if needed."""
    found = _find_by_name(siblings, name)

    if found is None:
        found = DirNode(name=name)
        siblings.append(found)
    elif isinstance(found, FileNode):
        raise PathCollisionError(full_path, name)

    return found.files


def _append_leaf(siblings: List[Node], name: str, entry: Entry) -> None:
    """Append the node for the final segment of an entry."""
    if entry.type == ENTRY_TYPE_BLOB:
        siblings.append(FileNode(name=name, full_path=entry.path))
    elif entry.type == ENTRY_TYPE_TREE:
        siblings.append(DirNode(name=name))
    else:
        logger.debug(f"Skipping entry '{entry.path}' with unsupported type: {entry.type!r}")


def _find_by_name(siblings: List[Node], name: str) -> Optional[Node]:
    # Linear scan; the first match wins when duplicates exist.
    for node in siblings:
        if node.name == name:
            return node
    return None
