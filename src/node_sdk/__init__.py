"""
Node SDK - host-facing contract for workflow nodes.

This package provides:
- BaseNode / NodeExecutionContext: node base class and runtime context
- NodeExecutionData, NodeItem: item and output record shapes
- NodeOperationError / NodeApiError: errors surfaced to the host
"""

from .basenode import (
    BaseNode,
    NodeApiError,
    NodeCredential,
    NodeExecutionContext,
    NodeExecutionData,
    NodeOperationError,
    NodeParameter,
    NodeParameterType,
)
from .items import NodeItem, PairedItem, error_record, paired_records

__all__ = [
    "BaseNode",
    "NodeExecutionContext",
    "NodeExecutionData",
    "NodeParameter",
    "NodeCredential",
    "NodeParameterType",
    "NodeOperationError",
    "NodeApiError",
    "NodeItem",
    "PairedItem",
    "paired_records",
    "error_record",
]
