"""
Node Items - Data structures flowing through workflows.

Each input item carries JSON data; each output record carries JSON data
plus a ``pairedItem`` reference back to the input item that produced it.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .basenode import NodeExecutionData


class PairedItem(BaseModel):
    """
    Reference to the source item that produced this item.

    Used for tracking data lineage through workflows.
    """
    model_config = ConfigDict(extra="forbid")

    item: int = Field(..., description="Index of source item", ge=0)


class NodeItem(BaseModel):
    """
    A single data item flowing through a workflow.

    Example:
        item = NodeItem(json_data={"clientId": "1"})
        item = NodeItem(json_data={"error": "boom"}, paired_item=PairedItem(item=2))
    """
    model_config = ConfigDict(extra="forbid")

    json_data: Dict[str, Any] = Field(default_factory=dict, description="JSON data")
    paired_item: Optional[PairedItem] = Field(
        None,
        description="Reference to source item"
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NodeItem":
        """Create NodeItem from a host item (``{"json": ...}``) or a bare dict."""
        if "json" in data and isinstance(data["json"], dict):
            return cls(json_data=data["json"])
        return cls(json_data=data)

    def to_execution_data(self) -> NodeExecutionData:
        """Render in the host's output record format."""
        record: NodeExecutionData = {"json": self.json_data}
        if self.paired_item is not None:
            record["pairedItem"] = {"item": self.paired_item.item}
        return record


def paired_records(
    values: Iterable[Dict[str, Any]],
    item_index: int,
) -> List[NodeExecutionData]:
    """Wrap JSON objects as output records paired with ``item_index``."""
    return [
        NodeItem(json_data=value, paired_item=PairedItem(item=item_index)).to_execution_data()
        for value in values
    ]


def error_record(message: str, item_index: int) -> NodeExecutionData:
    """Build the record emitted for a failed item under continue-on-fail."""
    return NodeItem(
        json_data={"error": message},
        paired_item=PairedItem(item=item_index),
    ).to_execution_data()


__all__ = [
    "PairedItem",
    "NodeItem",
    "paired_records",
    "error_record",
]
