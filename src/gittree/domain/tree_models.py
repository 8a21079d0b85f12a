from __future__ import annotations

"""
File Tree Data Models.

Provides the input record type read from a flat git tree listing and the
recursive node types of the nested structure built from it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

# -----------------------------------------------------------------------------
# INPUT RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Entry:
    """
    One record of a flat tree listing.

    Attributes:
        path: Slash-delimited path relative to the repository root.
        type: Type tag, 'blob' for files and 'tree' for directories.
              Other values are kept as-is and ignored by the builder.
    """
    path: str
    type: Optional[str] = None

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the nested tree.

    Attributes:
        name: Final path segment.
        full_path: The original entry path.
    """
    name: str
    full_path: str


@dataclass
class DirNode:
    """
    Represents a directory; children are kept in first-encountered order.
    """
    name: str
    files: List[Node] = field(default_factory=list)


Node = Union[FileNode, DirNode]
Forest = List[Node]
