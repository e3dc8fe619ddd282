"""
BaseResourceHandler - shared parameter extraction, dispatch and error
handling for the per-resource handlers of both DATEVconnect nodes.

A handler is created per input item. Subclasses declare ``resource`` and
an ``operations`` table mapping operation names to method names; each
method calls exactly one endpoint wrapper and returns its payload.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from datev_connect.logging import get_logger
from datev_connect.transport import AuthContext
from node_sdk.basenode import BaseNode, NodeApiError, NodeExecutionData, NodeOperationError
from node_sdk.items import error_record, paired_records

from .utils import normalise_to_objects, parse_json_parameter, to_error_message

DEFAULT_TOP = 100


class BaseResourceHandler:
    """Dispatch one item's operation to the matching endpoint wrapper."""

    resource: str = ""
    operations: Dict[str, str] = {}

    def __init__(self, node: BaseNode, item_index: int) -> None:
        self.node = node
        self.item_index = item_index
        self.logger = get_logger(
            __name__, node_type=node.type, resource=self.resource, item_index=item_index,
        )

    # ==== Dispatch ====

    def execute(
        self,
        operation: str,
        context: AuthContext,
        return_data: List[NodeExecutionData],
    ) -> None:
        """
        Run ``operation`` and append its output records to ``return_data``.

        Raises:
            NodeOperationError: Unsupported operation or bad parameters
            NodeApiError: API failure while continue-on-fail is off
        """
        method_name = self.operations.get(operation)
        if method_name is None:
            raise NodeOperationError(
                f'The operation "{operation}" is not supported for resource "{self.resource}".',
                node=self.node,
                item_index=self.item_index,
            )
        handler: Callable[[Any], Any] = getattr(self, method_name)

        self.logger.debug("Dispatching %s.%s", self.resource, operation, extra={"operation": operation})
        try:
            payload = handler(context)
        except NodeOperationError:
            raise
        except Exception as error:
            self.handle_error(error, return_data)
            return
        self.send_success(return_data, payload)

    def send_success(self, return_data: List[NodeExecutionData], payload: Any) -> None:
        """
        Append one record per object in the payload; no body means success.

        An empty list still yields one empty record so the item stays paired.
        """
        if payload is None:
            payload = {"success": True}
        objects = normalise_to_objects(payload) or [{}]
        return_data.extend(paired_records(objects, self.item_index))

    def handle_error(self, error: Exception, return_data: List[NodeExecutionData]) -> None:
        """Record the error under continue-on-fail, otherwise raise NodeApiError."""
        message = to_error_message(error)
        if self.node.continue_on_fail:
            self.logger.warning("Item failed, continuing: %s", message)
            return_data.append(error_record(message, self.item_index))
            return
        raise NodeApiError(
            message,
            node=self.node,
            item_index=self.item_index,
            status_code=getattr(error, "status_code", None),
            response_body=getattr(error, "response_body", None),
        ) from error

    # ==== Parameter helpers ====

    def get_parameter(self, name: str, default: Any = None) -> Any:
        return self.node.get_node_parameter(name, self.item_index, default)

    def get_optional_string(self, name: str) -> Optional[str]:
        """Parameter as stripped text; blank counts as unset."""
        value = self.get_parameter(name)
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    def get_required_string(self, name: str) -> str:
        value = self.get_optional_string(name)
        if value is None:
            raise NodeOperationError(
                f'Parameter "{name}" is required.',
                node=self.node,
                item_index=self.item_index,
            )
        return value

    def get_number_parameter(self, name: str, default: Optional[int] = None) -> Optional[int]:
        """Parameter as a whole number; unset or blank returns ``default``."""
        value = self.get_parameter(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            return default
        if isinstance(value, bool):
            raise NodeOperationError(
                f'Parameter "{name}" must be a number.', node=self.node, item_index=self.item_index,
            )
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise NodeOperationError(
                f'Parameter "{name}" must be a number.', node=self.node, item_index=self.item_index,
            ) from e
        if not number.is_integer():
            raise NodeOperationError(
                f'Parameter "{name}" must be a whole number.', node=self.node, item_index=self.item_index,
            )
        return int(number)

    def get_json_parameter(self, name: str, label: str) -> Any:
        return parse_json_parameter(self.get_parameter(name), label, self.item_index)

    def build_query_params(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Collect list query options.

        ``top`` defaults to 100 and is kept when positive, ``skip`` only when
        positive; ``expand="all"`` is sent as ``*``.
        """
        query: Dict[str, Any] = {}

        top = self.get_number_parameter("top", DEFAULT_TOP)
        if top is not None and top > 0:
            query["top"] = top
        skip = self.get_number_parameter("skip", 0)
        if skip is not None and skip > 0:
            query["skip"] = skip

        for name in ("select", "filter"):
            value = self.get_optional_string(name)
            if value is not None:
                query[name] = value

        expand = self.get_optional_string("expand")
        if expand is not None:
            query["expand"] = "*" if expand == "all" else expand

        if extra:
            query.update(extra)
        return query
