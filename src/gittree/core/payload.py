from __future__ import annotations

"""
Payload Decoder.

Decodes the JSON text of a git tree listing into Entry records. Only the
presence of the fields the builder needs is checked.
"""

import json
import logging
from typing import Any, List

from gittree.domain.constants import PAYLOAD_TREE_KEY, PAYLOAD_TRUNCATED_KEY
from gittree.domain.errors import MalformedJSONError, WrongShapeError
from gittree.domain.tree_models import Entry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_payload(text: str) -> List[Entry]:
    """
    Decode a listing payload into its entries.

    Args:
        text: JSON object text holding a 'tree' array of entries.

    Returns:
        List[Entry]: Entries in payload order.

    Raises:
        MalformedJSONError: If the text is not valid JSON.
        WrongShapeError: If the 'tree' array or an entry 'path' is missing.
    """
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        logger.debug(f"JSON decode failure: {e}")
        raise MalformedJSONError() from e

    if not isinstance(payload, dict):
        raise WrongShapeError(
            f"payload must be a JSON object, received {type(payload).__name__}"
        )

    raw_tree = payload.get(PAYLOAD_TREE_KEY)
    if not isinstance(raw_tree, list):
        raise WrongShapeError(f"payload field '{PAYLOAD_TREE_KEY}' must be an array")

    if payload.get(PAYLOAD_TRUNCATED_KEY) is True:
        logger.warning("Tree listing is truncated; the result will be incomplete.")

    return [_to_entry(i, item) for i, item in enumerate(raw_tree)]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _reject_constant(token: str) -> Any:
    """Refuse NaN and Infinity, which are not part of JSON."""
    raise ValueError(f"invalid JSON token: {token}")


def _to_entry(index: int, item: Any) -> Entry:
    """Convert one raw array element into an Entry."""
    if not isinstance(item, dict):
        raise WrongShapeError(f"tree entry #{index} must be an object")

    path = item.get("path")
    if not isinstance(path, str):
        raise WrongShapeError(f"tree entry #{index} has no string 'path'")

    return Entry(path=path, type=item.get("type"))
