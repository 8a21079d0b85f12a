from __future__ import annotations

"""
Tree Build Service.

Runs one complete conversion for a BuildConfig: decode the payload, fold the
entries into a forest and serialize the result.
"""

import logging

from gittree.core.payload import parse_payload
from gittree.core.serializer import dump_forest
from gittree.core.tree_builder import build_tree
from gittree.domain.config import BuildConfig
from gittree.domain.errors import MissingArgumentError

logger = logging.getLogger(__name__)


def run(config: BuildConfig) -> str:
    """
    Convert the payload carried by the configuration into forest JSON.

    Args:
        config: Build input; 'json' must hold the payload text.

    Returns:
        str: Compact JSON array of top-level nodes.

    Raises:
        TreeBuildError: Any subclass, for missing input, bad payloads or
                        path collisions.
    """
    if config.json is None:
        raise MissingArgumentError()

    entries = parse_payload(config.json)
    logger.debug(f"Decoded {len(entries)} tree entries.")

    forest = build_tree(entries)
    logger.debug(f"Built forest with {len(forest)} top-level nodes.")

    return dump_forest(forest)
