"""Tests for node registration and discovery."""
from unittest.mock import MagicMock, patch

from node_registry import NODE_PACK_ENTRY_POINT, NodeRegistry, get_global_registry
from node_sdk.basenode import NodeExecutionContext
from nodepacks.datev_connect import MANIFEST, NODE_CLASSES, AccountingNode, MasterDataNode, register_nodes


class TestManifest:
    """Test the pack manifest."""

    def test_register_nodes(self):
        manifest, node_classes = register_nodes()

        assert manifest is MANIFEST
        assert set(node_classes) == {"datevConnect.masterData", "datevConnect.accounting"}
        assert manifest.nodes == list(NODE_CLASSES)
        assert manifest.credentials[0].name == "datevConnectApi"


class TestNodeRegistry:
    """Test NodeRegistry."""

    def test_register_pack(self):
        registry = NodeRegistry()
        registry.register_pack(MANIFEST, NODE_CLASSES)

        assert len(registry) == 2
        assert "datevConnect.accounting" in registry
        definition = registry.get_node("datevConnect.masterData")
        assert definition.display_name == "DATEVconnect: Master Data"
        assert definition.node_pack == "datev-connect"
        assert definition.credentials == [{"name": "datevConnectApi", "required": True}]
        assert definition.node_class.endswith("MasterDataNode")
        assert registry.list_packs() == [MANIFEST]

    def test_create_node_binds_context(self):
        registry = NodeRegistry()
        registry.register_node(AccountingNode)
        context = NodeExecutionContext(parameters={}, credentials={}, input_data=[], continue_on_fail=True)

        node = registry.create_node("datevConnect.accounting", context)

        assert isinstance(node, AccountingNode)
        assert node.continue_on_fail is True
        assert registry.create_node("unknown") is None

    def test_discover_entry_points(self):
        ep = MagicMock()
        ep.name = "datev_connect"
        ep.load.return_value = register_nodes

        with patch("node_registry.registry.entry_points", return_value=[ep]) as mock_eps:
            registry = NodeRegistry()
            assert registry.discover_entry_points() == 1
            # Cached until forced
            assert registry.discover_entry_points() == 1

        mock_eps.assert_called_once_with(group=NODE_PACK_ENTRY_POINT)
        assert registry.get_node_class("datevConnect.masterData") is MasterDataNode

    def test_broken_pack_is_skipped(self):
        broken = MagicMock()
        broken.name = "broken"
        broken.load.side_effect = ImportError("no module")
        good = MagicMock()
        good.name = "datev_connect"
        good.load.return_value = register_nodes

        with patch("node_registry.registry.entry_points", return_value=[broken, good]):
            registry = NodeRegistry()
            assert registry.discover_entry_points() == 1

        assert registry.list_node_types() == list(NODE_CLASSES)

    def test_global_registry_is_shared(self):
        assert get_global_registry() is get_global_registry()
