from __future__ import annotations

"""
Build Configuration Model.

Typed configuration handed from the interface layer to the build service,
decoupling argument parsing from the tree transformation.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BuildConfig:
    """
    Immutable input for a single tree build.

    Attributes:
        json: Raw JSON payload text, or None when it was not provided.
    """
    json: Optional[str] = None
