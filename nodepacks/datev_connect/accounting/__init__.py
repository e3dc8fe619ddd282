"""DATEVconnect Accounting node."""

from .node import AccountingNode

__all__ = ["AccountingNode"]
