"""
Shared helpers for DATEVconnect nodes.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from node_sdk.basenode import NodeOperationError


def normalise_to_objects(value: Any) -> List[Dict[str, Any]]:
    """
    Shape an API payload into a list of JSON objects.

    Lists map element-wise (objects kept, scalars wrapped as
    ``{"value": x}``), an object becomes a one-element list, anything else
    is wrapped. Already-normalised input comes back equal.
    """
    if isinstance(value, list):
        return [
            entry if isinstance(entry, dict) else {"value": entry}
            for entry in value
        ]
    if isinstance(value, dict):
        return [value]
    return [{"value": value}]


def parse_json_parameter(raw: Any, label: str, item_index: Optional[int] = None) -> Any:
    """
    Accept a JSON parameter either as text or as an already-parsed value.

    Raises:
        NodeOperationError: Missing value or text that is not valid JSON.
    """
    if raw is None:
        raise NodeOperationError(f'Parameter "{label}" must be provided.', item_index=item_index)
    if isinstance(raw, str):
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise NodeOperationError(
                f'Parameter "{label}" contains invalid JSON: {e.msg}',
                item_index=item_index,
            ) from e
    return raw


def to_error_message(error: BaseException) -> str:
    """Best human-readable text for an exception."""
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error) or error.__class__.__name__
