"""
DATEVconnect Master Data node.
"""

from __future__ import annotations

from ..node import DatevConnectNode
from .description import DESCRIPTION, PROPERTIES
from .handlers import RESOURCE_HANDLERS


class MasterDataNode(DatevConnectNode):
    """
    Master Data - clients, addressees, employees and DATEV reference data.

    Every item needs only the bearer token; identifiers are read by the
    resource handlers themselves.
    """

    type = "datevConnect.masterData"
    version = 1

    description = DESCRIPTION
    properties = PROPERTIES

    resource_handlers = RESOURCE_HANDLERS
