"""
DATEVconnect Node Pack Manifest - Registration function for entry-points.
"""

from datev_connect import __version__
from datev_connect.credentials import DatevConnectApiCredential
from node_registry.models import NodePackManifest

from .accounting import AccountingNode
from .master_data import MasterDataNode


# Node classes by type
NODE_CLASSES = {
    MasterDataNode.type: MasterDataNode,
    AccountingNode.type: AccountingNode,
}


MANIFEST = NodePackManifest(
    name="datev-connect",
    version=__version__,
    description="DATEVconnect master data and accounting nodes",
    author="datev-connect-nodes",
    license="MIT",
    nodes=list(NODE_CLASSES),
    credentials=[DatevConnectApiCredential.definition()],
    entry_point="nodepacks.datev_connect",
)


def register_nodes():
    """
    Entry point function for node pack discovery.

    Returns tuple of (manifest, node_classes).
    """
    return MANIFEST, NODE_CLASSES


__all__ = [
    "MANIFEST",
    "NODE_CLASSES",
    "register_nodes",
]
