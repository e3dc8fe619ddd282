"""
DATEVconnect Accounting node.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Optional

from datev_connect.transport import AuthContext, RequestContext
from node_sdk.basenode import NodeOperationError

from ..node import DatevConnectNode
from .description import DESCRIPTION, PROPERTIES
from .handlers import RESOURCE_HANDLERS


class AccountingNode(DatevConnectNode):
    """
    Accounting - ledgers, postings, business partners and cost accounting.

    Almost everything lives below a client and a fiscal year, so both ids
    are resolved per item before the handler runs:

    - clientId is required except for client/getAll
    - fiscalYearId is required except for resource client and fiscalYear/getAll
    """

    type = "datevConnect.accounting"
    version = 1

    description = DESCRIPTION
    properties = PROPERTIES

    resource_handlers = RESOURCE_HANDLERS

    def build_context(
        self,
        auth: AuthContext,
        resource: str,
        operation: str,
        item_index: int,
    ) -> RequestContext:
        client_id = self._optional_id("clientId", item_index)
        fiscal_year_id = self._optional_id("fiscalYearId", item_index)

        needs_client = not (resource == "client" and operation == "getAll")
        needs_fiscal_year = resource != "client" and not (resource == "fiscalYear" and operation == "getAll")

        if needs_client and client_id is None:
            raise NodeOperationError(
                "clientId is required for this operation", node=self, item_index=item_index,
            )
        if needs_fiscal_year and fiscal_year_id is None:
            raise NodeOperationError(
                "fiscalYearId is required for this operation", node=self, item_index=item_index,
            )

        shared = {field.name: getattr(auth, field.name) for field in fields(AuthContext)}
        return RequestContext(**shared, client_id=client_id, fiscal_year_id=fiscal_year_id)

    def _optional_id(self, name: str, item_index: int) -> Optional[str]:
        value = self.get_node_parameter(name, item_index)
        if value is None or not str(value).strip():
            return None
        return str(value).strip()
