"""DATEVconnect Master Data node."""

from .node import MasterDataNode

__all__ = ["MasterDataNode"]
