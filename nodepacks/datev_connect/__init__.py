"""
DATEVconnect Node Pack - workflow nodes for the DATEVconnect REST APIs.

This pack provides:
- MasterDataNode: clients, addressees, employees and reference data
- AccountingNode: ledgers, postings, business partners, cost accounting

Both nodes authenticate once per execution and process items sequentially.
"""

from .accounting import AccountingNode
from .manifest import MANIFEST, NODE_CLASSES, register_nodes
from .master_data import MasterDataNode

__all__ = [
    "AccountingNode",
    "MasterDataNode",
    "MANIFEST",
    "NODE_CLASSES",
    "register_nodes",
]
