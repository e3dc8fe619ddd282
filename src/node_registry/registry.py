"""
Node Registry - Central registry for node discovery and instantiation.

Node packs are registered either directly (register_pack) or found via
the ``node_sdk.nodepacks`` entry-point group.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import Dict, Iterator, List, Optional, Type, TYPE_CHECKING

from .models import NodeDefinition, NodePackManifest


if TYPE_CHECKING:
    from node_sdk.basenode import BaseNode, NodeExecutionContext


logger = logging.getLogger(__name__)

# Entry point group for node packs
NODE_PACK_ENTRY_POINT = "node_sdk.nodepacks"


class NodeRegistry:
    """
    Central registry for discovering and instantiating nodes.

    Usage:
        registry = NodeRegistry()
        registry.discover_entry_points()

        node = registry.create_node("datevConnect.masterData", context)
        output = node.execute()
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, NodeDefinition] = {}
        self._node_classes: Dict[str, Type["BaseNode"]] = {}
        self._packs: Dict[str, NodePackManifest] = {}
        self._discovered = False

    def register_node(
        self,
        node_class: Type["BaseNode"],
        node_type: Optional[str] = None,
    ) -> NodeDefinition:
        """
        Register a node class.

        Args:
            node_class: BaseNode subclass
            node_type: Override node type (uses class.type if not provided)
        """
        if node_type is None:
            node_type = node_class.type

        definition = NodeDefinition.from_node_class(node_class)
        definition.node_type = node_type

        self._nodes[node_type] = definition
        self._node_classes[node_type] = node_class

        logger.debug("Registered node: %s", node_type)
        return definition

    def register_pack(
        self,
        manifest: NodePackManifest,
        node_classes: Dict[str, Type["BaseNode"]],
    ) -> None:
        """Register a node pack with its nodes."""
        self._packs[manifest.name] = manifest

        for node_type, node_class in node_classes.items():
            definition = self.register_node(node_class, node_type)
            definition.node_pack = manifest.name

        logger.info("Registered pack '%s' with %d nodes", manifest.name, len(node_classes))

    def discover_entry_points(self, force: bool = False) -> int:
        """
        Discover node packs via entry points.

        Entry points are declared in pyproject.toml:

            [project.entry-points."node_sdk.nodepacks"]
            datev_connect = "nodepacks.datev_connect:register_nodes"

        The entry point returns ``(manifest, node_classes)``. A pack that
        fails to load is logged and skipped so the others stay usable.

        Returns:
            Number of packs discovered
        """
        if self._discovered and not force:
            return len(self._packs)

        count = 0
        for ep in entry_points(group=NODE_PACK_ENTRY_POINT):
            try:
                manifest, node_classes = ep.load()()
            except Exception as e:
                logger.error("Failed to load node pack '%s': %s", ep.name, e)
                continue
            self.register_pack(manifest, node_classes)
            count += 1
            logger.info("Discovered node pack: %s", ep.name)

        self._discovered = True
        return count

    def get_node(self, node_type: str) -> Optional[NodeDefinition]:
        """Get node definition by type."""
        return self._nodes.get(node_type)

    def get_node_class(self, node_type: str) -> Optional[Type["BaseNode"]]:
        """Get node class by type."""
        return self._node_classes.get(node_type)

    def create_node(
        self,
        node_type: str,
        context: Optional["NodeExecutionContext"] = None,
    ) -> Optional["BaseNode"]:
        """
        Create a node instance, optionally bound to an execution context.

        Returns:
            Node instance or None if not found
        """
        node_class = self.get_node_class(node_type)
        if node_class is None:
            return None
        node = node_class()
        if context is not None:
            node.set_context(context)
        return node

    def list_nodes(self) -> List[NodeDefinition]:
        """List all registered nodes."""
        return list(self._nodes.values())

    def list_packs(self) -> List[NodePackManifest]:
        """List all registered packs."""
        return list(self._packs.values())

    def list_node_types(self) -> List[str]:
        """List all registered node types."""
        return list(self._nodes.keys())

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeDefinition]:
        return iter(self._nodes.values())

    def __contains__(self, node_type: str) -> bool:
        return node_type in self._nodes


_global_registry: Optional[NodeRegistry] = None


def get_global_registry() -> NodeRegistry:
    """Get the global node registry (lazy initialized)."""
    global _global_registry
    if _global_registry is None:
        _global_registry = NodeRegistry()
    return _global_registry


__all__ = [
    "NodeRegistry",
    "get_global_registry",
    "NODE_PACK_ENTRY_POINT",
]
