"""
Resource handlers for the DATEVconnect Accounting node.

Handlers receive a RequestContext whose client and fiscal-year ids were
resolved by the node; list operations share build_query_params().
"""

from __future__ import annotations

from typing import Any, List

from datev_connect import accounting as api
from datev_connect.transport import RequestContext
from node_sdk.basenode import NodeExecutionData, NodeOperationError

from ..base import BaseResourceHandler


class AccountingResourceHandler(BaseResourceHandler):
    """Accounting handlers address entities below a client and fiscal year."""

    def ids(self, ctx: RequestContext) -> tuple:
        return ctx.client_id, ctx.fiscal_year_id

    def item_query(self) -> dict:
        """select/expand for single-entity reads."""
        query = self.build_query_params()
        return {key: query[key] for key in ("select", "expand") if key in query}


class ClientResourceHandler(AccountingResourceHandler):
    resource = "client"
    operations = {"getAll": "get_all", "get": "get"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_clients(ctx, self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_client(ctx, ctx.client_id, self.item_query())


class FiscalYearResourceHandler(AccountingResourceHandler):
    resource = "fiscalYear"
    operations = {"getAll": "get_all", "get": "get"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_fiscal_years(ctx, ctx.client_id, self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_fiscal_year(ctx, *self.ids(ctx), self.item_query())


class AccountsReceivableResourceHandler(AccountingResourceHandler):
    resource = "accountsReceivable"
    operations = {"getAll": "get_all", "get": "get", "getCondensed": "get_condensed"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_accounts_receivable(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_account_receivable(
            ctx, *self.ids(ctx), self.get_required_string("accountsReceivableId"), self.item_query(),
        )

    def get_condensed(self, ctx: RequestContext) -> Any:
        return api.fetch_accounts_receivable_condensed(ctx, *self.ids(ctx), self.build_query_params())


class AccountsPayableResourceHandler(AccountingResourceHandler):
    resource = "accountsPayable"
    operations = {"getAll": "get_all", "get": "get", "getCondensed": "get_condensed"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_accounts_payable(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_account_payable(
            ctx, *self.ids(ctx), self.get_required_string("accountsPayableId"), self.item_query(),
        )

    def get_condensed(self, ctx: RequestContext) -> Any:
        return api.fetch_accounts_payable_condensed(ctx, *self.ids(ctx), self.build_query_params())


class AccountPostingResourceHandler(AccountingResourceHandler):
    resource = "accountPosting"
    operations = {"getAll": "get_all", "get": "get"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_account_postings(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_account_posting(
            ctx, *self.ids(ctx), self.get_required_string("accountPostingId"), self.item_query(),
        )


class AccountingSequenceResourceHandler(AccountingResourceHandler):
    resource = "accountingSequence"
    operations = {
        "create": "create",
        "getAll": "get_all",
        "get": "get",
        "getAccountingRecords": "get_accounting_records",
        "getAccountingRecord": "get_accounting_record",
    }

    def create(self, ctx: RequestContext) -> Any:
        sequence = self.get_json_parameter("accountingSequenceData", "Accounting Sequence Data")
        return api.create_accounting_sequence(ctx, *self.ids(ctx), sequence)

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_accounting_sequences(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_accounting_sequence(
            ctx, *self.ids(ctx), self.get_required_string("accountingSequenceId"), self.item_query(),
        )

    def get_accounting_records(self, ctx: RequestContext) -> Any:
        return api.fetch_accounting_records(
            ctx, *self.ids(ctx), self.get_required_string("accountingSequenceId"), self.build_query_params(),
        )

    def get_accounting_record(self, ctx: RequestContext) -> Any:
        return api.fetch_accounting_record(
            ctx,
            *self.ids(ctx),
            self.get_required_string("accountingSequenceId"),
            self.get_required_string("accountingRecordId"),
            self.item_query(),
        )


class PostingProposalsResourceHandler(AccountingResourceHandler):
    resource = "postingProposals"
    operations = {
        "getRulesIncoming": "get_rules_incoming",
        "getRulesOutgoing": "get_rules_outgoing",
        "getRulesCashRegister": "get_rules_cash_register",
        "getRuleIncoming": "get_rule_incoming",
        "getRuleOutgoing": "get_rule_outgoing",
        "getRuleCashRegister": "get_rule_cash_register",
        "batchIncoming": "batch_incoming",
        "batchOutgoing": "batch_outgoing",
        "batchCashRegister": "batch_cash_register",
    }

    def _rules(self, ctx: RequestContext, kind: str) -> Any:
        return api.fetch_posting_proposal_rules(ctx, *self.ids(ctx), kind, self.build_query_params())

    def _rule(self, ctx: RequestContext, kind: str) -> Any:
        return api.fetch_posting_proposal_rule(
            ctx, *self.ids(ctx), kind, self.get_required_string("postingProposalRuleId"), self.item_query(),
        )

    def _batch(self, ctx: RequestContext, kind: str) -> Any:
        proposals = self.get_json_parameter("postingProposalData", "Posting Proposal Data")
        return api.create_posting_proposal_batch(ctx, *self.ids(ctx), kind, proposals)

    def get_rules_incoming(self, ctx: RequestContext) -> Any:
        return self._rules(ctx, "incoming")

    def get_rules_outgoing(self, ctx: RequestContext) -> Any:
        return self._rules(ctx, "outgoing")

    def get_rules_cash_register(self, ctx: RequestContext) -> Any:
        return self._rules(ctx, "cashRegister")

    def get_rule_incoming(self, ctx: RequestContext) -> Any:
        return self._rule(ctx, "incoming")

    def get_rule_outgoing(self, ctx: RequestContext) -> Any:
        return self._rule(ctx, "outgoing")

    def get_rule_cash_register(self, ctx: RequestContext) -> Any:
        return self._rule(ctx, "cashRegister")

    def batch_incoming(self, ctx: RequestContext) -> Any:
        return self._batch(ctx, "incoming")

    def batch_outgoing(self, ctx: RequestContext) -> Any:
        return self._batch(ctx, "outgoing")

    def batch_cash_register(self, ctx: RequestContext) -> Any:
        return self._batch(ctx, "cashRegister")


class AccountingSumsAndBalancesResourceHandler(AccountingResourceHandler):
    resource = "accountingSumsAndBalances"
    operations = {"getAll": "get_all", "get": "get"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_accounting_sums_and_balances(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_accounting_sum_and_balance(
            ctx, *self.ids(ctx), self.get_required_string("accountingSumsAndBalancesId"), self.item_query(),
        )


class BusinessPartnersResourceHandler(AccountingResourceHandler):
    resource = "businessPartners"
    operations = {
        "getDebitors": "get_debitors",
        "getDebitor": "get_debitor",
        "createDebitor": "create_debitor",
        "updateDebitor": "update_debitor",
        "getNextAvailableDebitor": "get_next_available_debitor",
        "getCreditors": "get_creditors",
        "getCreditor": "get_creditor",
        "createCreditor": "create_creditor",
        "updateCreditor": "update_creditor",
        "getNextAvailableCreditor": "get_next_available_creditor",
    }

    def execute(
        self,
        operation: str,
        context: RequestContext,
        return_data: List[NodeExecutionData],
    ) -> None:
        if operation in self.operations and not (context.client_id and context.fiscal_year_id):
            raise NodeOperationError(
                "Client ID and Fiscal Year ID are required for business partner operations",
                node=self.node,
                item_index=self.item_index,
            )
        super().execute(operation, context, return_data)

    def _next_available_query(self) -> dict:
        start_at = self.get_number_parameter("startAt")
        return {"start-at": start_at} if start_at is not None else {}

    def get_debitors(self, ctx: RequestContext) -> Any:
        return api.fetch_debitors(ctx, *self.ids(ctx), self.build_query_params())

    def get_debitor(self, ctx: RequestContext) -> Any:
        return api.fetch_debitor(ctx, *self.ids(ctx), self.get_required_string("debitorId"), self.item_query())

    def create_debitor(self, ctx: RequestContext) -> Any:
        return api.create_debitor(ctx, *self.ids(ctx), self.get_json_parameter("debitorData", "Debitor Data"))

    def update_debitor(self, ctx: RequestContext) -> Any:
        debitor_id = self.get_required_string("debitorId")
        debitor = self.get_json_parameter("debitorData", "Debitor Data")
        return api.update_debitor(ctx, *self.ids(ctx), debitor_id, debitor)

    def get_next_available_debitor(self, ctx: RequestContext) -> Any:
        return api.fetch_next_available_debitor(ctx, *self.ids(ctx), self._next_available_query())

    def get_creditors(self, ctx: RequestContext) -> Any:
        return api.fetch_creditors(ctx, *self.ids(ctx), self.build_query_params())

    def get_creditor(self, ctx: RequestContext) -> Any:
        return api.fetch_creditor(ctx, *self.ids(ctx), self.get_required_string("creditorId"), self.item_query())

    def create_creditor(self, ctx: RequestContext) -> Any:
        return api.create_creditor(ctx, *self.ids(ctx), self.get_json_parameter("creditorData", "Creditor Data"))

    def update_creditor(self, ctx: RequestContext) -> Any:
        creditor_id = self.get_required_string("creditorId")
        creditor = self.get_json_parameter("creditorData", "Creditor Data")
        return api.update_creditor(ctx, *self.ids(ctx), creditor_id, creditor)

    def get_next_available_creditor(self, ctx: RequestContext) -> Any:
        return api.fetch_next_available_creditor(ctx, *self.ids(ctx), self._next_available_query())


class GeneralLedgerAccountsResourceHandler(AccountingResourceHandler):
    resource = "generalLedgerAccounts"
    operations = {"getAll": "get_all", "get": "get", "getUtilized": "get_utilized"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_general_ledger_accounts(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_general_ledger_account(
            ctx, *self.ids(ctx), self.get_required_string("generalLedgerAccountId"), self.item_query(),
        )

    def get_utilized(self, ctx: RequestContext) -> Any:
        return api.fetch_utilized_general_ledger_accounts(ctx, *self.ids(ctx), self.build_query_params())


class TermsOfPaymentResourceHandler(AccountingResourceHandler):
    resource = "termsOfPayment"
    operations = {"getAll": "get_all", "get": "get", "create": "create", "update": "update"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_terms_of_payment(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_term_of_payment(
            ctx, *self.ids(ctx), self.get_required_string("termsOfPaymentId"), self.item_query(),
        )

    def create(self, ctx: RequestContext) -> Any:
        terms = self.get_json_parameter("termsOfPaymentData", "Terms of Payment Data")
        return api.create_term_of_payment(ctx, *self.ids(ctx), terms)

    def update(self, ctx: RequestContext) -> Any:
        terms_id = self.get_required_string("termsOfPaymentId")
        terms = self.get_json_parameter("termsOfPaymentData", "Terms of Payment Data")
        return api.update_term_of_payment(ctx, *self.ids(ctx), terms_id, terms)


class StocktakingDataResourceHandler(AccountingResourceHandler):
    resource = "stocktakingData"
    operations = {"getAll": "get_all", "get": "get", "update": "update"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_stocktaking_data(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_stocktaking_record(
            ctx, *self.ids(ctx), self.get_required_string("stocktakingDataId"), self.item_query(),
        )

    def update(self, ctx: RequestContext) -> Any:
        record_id = self.get_required_string("stocktakingDataId")
        record = self.get_json_parameter("stocktakingData", "Stocktaking Data")
        return api.update_stocktaking_record(ctx, *self.ids(ctx), record_id, record)


class CostSystemsResourceHandler(AccountingResourceHandler):
    resource = "costSystems"
    operations = {"getAll": "get_all", "get": "get"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_cost_systems(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_cost_system(
            ctx, *self.ids(ctx), self.get_required_string("costSystemId"), self.item_query(),
        )


class CostCentersUnitsResourceHandler(AccountingResourceHandler):
    resource = "costCentersUnits"
    operations = {"getAll": "get_all", "get": "get"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_cost_centers(
            ctx, *self.ids(ctx), self.get_required_string("costSystemId"), self.build_query_params(),
        )

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_cost_center(
            ctx,
            *self.ids(ctx),
            self.get_required_string("costSystemId"),
            self.get_required_string("costCenterUnitId"),
            self.item_query(),
        )


class CostCenterPropertiesResourceHandler(AccountingResourceHandler):
    resource = "costCenterProperties"
    operations = {"getAll": "get_all", "get": "get"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_cost_center_properties(
            ctx, *self.ids(ctx), self.get_required_string("costSystemId"), self.build_query_params(),
        )

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_cost_center_property(
            ctx,
            *self.ids(ctx),
            self.get_required_string("costSystemId"),
            self.get_required_string("costCenterPropertyId"),
            self.item_query(),
        )


class InternalCostServicesResourceHandler(AccountingResourceHandler):
    resource = "internalCostServices"
    operations = {"create": "create"}

    def create(self, ctx: RequestContext) -> Any:
        cost_system_id = self.get_required_string("costSystemId")
        service = self.get_json_parameter("internalCostServiceData", "Internal Cost Service Data")
        return api.create_internal_cost_service(ctx, *self.ids(ctx), cost_system_id, service)


class CostSequencesResourceHandler(AccountingResourceHandler):
    resource = "costSequences"
    operations = {
        "getAll": "get_all",
        "get": "get",
        "create": "create",
        "getCostAccountingRecords": "get_cost_accounting_records",
    }

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_cost_sequences(
            ctx, *self.ids(ctx), self.get_required_string("costSystemId"), self.build_query_params(),
        )

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_cost_sequence(
            ctx,
            *self.ids(ctx),
            self.get_required_string("costSystemId"),
            self.get_required_string("costSequenceId"),
            self.item_query(),
        )

    def create(self, ctx: RequestContext) -> Any:
        cost_system_id = self.get_required_string("costSystemId")
        cost_sequence_id = self.get_required_string("costSequenceId")
        records = self.get_json_parameter("costSequenceData", "Cost Sequence Data")
        return api.create_cost_accounting_records(ctx, *self.ids(ctx), cost_system_id, cost_sequence_id, records)

    def get_cost_accounting_records(self, ctx: RequestContext) -> Any:
        return api.fetch_cost_accounting_records(
            ctx,
            *self.ids(ctx),
            self.get_required_string("costSystemId"),
            self.get_required_string("costSequenceId"),
            self.build_query_params(),
        )


class AccountingStatisticsResourceHandler(AccountingResourceHandler):
    resource = "accountingStatistics"
    operations = {"getAll": "get_all"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_accounting_statistics(ctx, *self.ids(ctx), self.build_query_params())


class AccountingTransactionKeysResourceHandler(AccountingResourceHandler):
    resource = "accountingTransactionKeys"
    operations = {"getAll": "get_all", "get": "get"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_accounting_transaction_keys(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_accounting_transaction_key(
            ctx, *self.ids(ctx), self.get_required_string("accountingTransactionKeyId"), self.item_query(),
        )


class VariousAddressesResourceHandler(AccountingResourceHandler):
    resource = "variousAddresses"
    operations = {"getAll": "get_all", "get": "get", "create": "create"}

    def get_all(self, ctx: RequestContext) -> Any:
        return api.fetch_various_addresses(ctx, *self.ids(ctx), self.build_query_params())

    def get(self, ctx: RequestContext) -> Any:
        return api.fetch_various_address(
            ctx, *self.ids(ctx), self.get_required_string("variousAddressId"), self.item_query(),
        )

    def create(self, ctx: RequestContext) -> Any:
        address = self.get_json_parameter("variousAddressData", "Various Address Data")
        return api.create_various_address(ctx, *self.ids(ctx), address)


RESOURCE_HANDLERS = {
    handler.resource: handler
    for handler in (
        ClientResourceHandler,
        FiscalYearResourceHandler,
        AccountsReceivableResourceHandler,
        AccountsPayableResourceHandler,
        AccountPostingResourceHandler,
        AccountingSequenceResourceHandler,
        PostingProposalsResourceHandler,
        AccountingSumsAndBalancesResourceHandler,
        BusinessPartnersResourceHandler,
        GeneralLedgerAccountsResourceHandler,
        TermsOfPaymentResourceHandler,
        StocktakingDataResourceHandler,
        CostSystemsResourceHandler,
        CostCentersUnitsResourceHandler,
        CostCenterPropertiesResourceHandler,
        InternalCostServicesResourceHandler,
        CostSequencesResourceHandler,
        AccountingStatisticsResourceHandler,
        AccountingTransactionKeysResourceHandler,
        VariousAddressesResourceHandler,
    )
}
