"""
Builders for the n8n-style node descriptors published by DATEVconnect nodes.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from datev_connect.credentials import CREDENTIAL_NAME

# (value, display name) pairs
Choices = Sequence[Tuple[str, str]]


def node_description(name: str, display_name: str, description: str) -> Dict[str, Any]:
    return {
        "displayName": display_name,
        "name": name,
        "description": description,
        "group": ["transform"],
        "version": 1,
        "subtitle": '={{$parameter["operation"] + ": " + $parameter["resource"]}}',
        "inputs": ["main"],
        "outputs": ["main"],
        "credentials": [{"name": CREDENTIAL_NAME, "required": True}],
    }


def resource_property(choices: Choices, default: str) -> Dict[str, Any]:
    return {
        "displayName": "Resource",
        "name": "resource",
        "type": "options",
        "noDataExpression": True,
        "options": [{"name": label, "value": value} for value, label in choices],
        "default": default,
    }


def operation_property(resource: str, choices: Choices, default: Optional[str] = None) -> Dict[str, Any]:
    values = [value for value, _ in choices]
    return {
        "displayName": "Operation",
        "name": "operation",
        "type": "options",
        "noDataExpression": True,
        "displayOptions": {"show": {"resource": [resource]}},
        "options": [
            {"name": label, "value": value, "action": f"{label} ({resource})"}
            for value, label in choices
        ],
        "default": default or ("getAll" if "getAll" in values else values[0]),
    }


def parameter(
    name: str,
    display_name: str,
    show: Dict[str, Iterable[str]],
    type: str = "string",
    default: Any = "",
    required: bool = False,
    description: Optional[str] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """A parameter shown for the given resource/operation combinations."""
    prop: Dict[str, Any] = {
        "displayName": display_name,
        "name": name,
        "type": type,
        "default": default,
        "required": required,
        "displayOptions": {"show": {key: list(values) for key, values in show.items()}},
    }
    if description:
        prop["description"] = description
    prop.update(extra)
    return prop


def json_parameter(name: str, display_name: str, show: Dict[str, Iterable[str]], description: str) -> Dict[str, Any]:
    return parameter(name, display_name, show, type="json", default="{}", required=True, description=description)


def list_parameters(show: Dict[str, Iterable[str]]) -> List[Dict[str, Any]]:
    """Limit/skip paging parameters."""
    return [
        parameter(
            "top", "Limit", show, type="number", default=100,
            description="Maximum number of records to return",
            typeOptions={"minValue": 1},
        ),
        parameter(
            "skip", "Skip", show, type="number", default=0,
            description="Number of records to skip",
            typeOptions={"minValue": 0},
        ),
    ]
