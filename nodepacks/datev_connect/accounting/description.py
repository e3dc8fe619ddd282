"""
Descriptor for the DATEVconnect Accounting node.
"""

from __future__ import annotations

from typing import Dict, List

from ..description import (
    json_parameter,
    list_parameters,
    node_description,
    operation_property,
    parameter,
    resource_property,
)

DESCRIPTION = node_description(
    "accounting",
    "DATEVconnect: Accounting",
    "Read and post DATEV accounting data per client and fiscal year",
)

RESOURCES = [
    ("client", "Client"),
    ("fiscalYear", "Fiscal Year"),
    ("accountsReceivable", "Accounts Receivable"),
    ("accountsPayable", "Accounts Payable"),
    ("accountPosting", "Account Posting"),
    ("accountingSequence", "Accounting Sequence"),
    ("postingProposals", "Posting Proposals"),
    ("accountingSumsAndBalances", "Accounting Sums and Balances"),
    ("businessPartners", "Business Partners"),
    ("generalLedgerAccounts", "General Ledger Accounts"),
    ("termsOfPayment", "Terms of Payment"),
    ("stocktakingData", "Stocktaking Data"),
    ("costSystems", "Cost Systems"),
    ("costCentersUnits", "Cost Centers/Units"),
    ("costCenterProperties", "Cost Center Properties"),
    ("internalCostServices", "Internal Cost Services"),
    ("costSequences", "Cost Sequences"),
    ("accountingStatistics", "Accounting Statistics"),
    ("accountingTransactionKeys", "Accounting Transaction Keys"),
    ("variousAddresses", "Various Addresses"),
]

_GET = [("getAll", "Get Many"), ("get", "Get")]

OPERATIONS = {
    "client": _GET,
    "fiscalYear": _GET,
    "accountsReceivable": _GET + [("getCondensed", "Get Condensed")],
    "accountsPayable": _GET + [("getCondensed", "Get Condensed")],
    "accountPosting": _GET,
    "accountingSequence": [
        ("create", "Create"),
        ("getAll", "Get Many"),
        ("get", "Get"),
        ("getAccountingRecords", "Get Accounting Records"),
        ("getAccountingRecord", "Get Accounting Record"),
    ],
    "postingProposals": [
        ("getRulesIncoming", "Get Incoming Rules"),
        ("getRulesOutgoing", "Get Outgoing Rules"),
        ("getRulesCashRegister", "Get Cash Register Rules"),
        ("getRuleIncoming", "Get Incoming Rule"),
        ("getRuleOutgoing", "Get Outgoing Rule"),
        ("getRuleCashRegister", "Get Cash Register Rule"),
        ("batchIncoming", "Batch Incoming"),
        ("batchOutgoing", "Batch Outgoing"),
        ("batchCashRegister", "Batch Cash Register"),
    ],
    "accountingSumsAndBalances": _GET,
    "businessPartners": [
        ("getDebitors", "Get Debitors"),
        ("getDebitor", "Get Debitor"),
        ("createDebitor", "Create Debitor"),
        ("updateDebitor", "Update Debitor"),
        ("getNextAvailableDebitor", "Get Next Available Debitor"),
        ("getCreditors", "Get Creditors"),
        ("getCreditor", "Get Creditor"),
        ("createCreditor", "Create Creditor"),
        ("updateCreditor", "Update Creditor"),
        ("getNextAvailableCreditor", "Get Next Available Creditor"),
    ],
    "generalLedgerAccounts": _GET + [("getUtilized", "Get Utilized")],
    "termsOfPayment": _GET + [("create", "Create"), ("update", "Update")],
    "stocktakingData": _GET + [("update", "Update")],
    "costSystems": _GET,
    "costCentersUnits": _GET,
    "costCenterProperties": _GET,
    "internalCostServices": [("create", "Create")],
    "costSequences": _GET + [("create", "Create"), ("getCostAccountingRecords", "Get Cost Accounting Records")],
    "accountingStatistics": [("getAll", "Get Many")],
    "accountingTransactionKeys": _GET,
    "variousAddresses": _GET + [("create", "Create")],
}

LIST_OPERATIONS = [
    "getAll", "getCondensed", "getAccountingRecords", "getRulesIncoming", "getRulesOutgoing",
    "getRulesCashRegister", "getDebitors", "getCreditors", "getUtilized", "getCostAccountingRecords",
]

# Resources below a fiscal year; fiscalYear/getAll is excluded separately
_FISCAL_YEAR_RESOURCES = [value for value, _ in RESOURCES if value not in ("client", "fiscalYear")]
_COST_SYSTEM_RESOURCES = ["costCentersUnits", "costCenterProperties", "internalCostServices", "costSequences"]


def _id_parameter(name: str, display_name: str, resource: str, operations: List[str]) -> Dict:
    return parameter(name, display_name, {"resource": [resource], "operation": operations}, required=True)


def _build_parameters() -> list:
    all_resources = [value for value, _ in RESOURCES]
    params = [resource_property(RESOURCES, "client")]
    params.extend(operation_property(resource, choices) for resource, choices in OPERATIONS.items())
    params.extend([
        parameter(
            "clientId", "Client ID",
            {"resource": [r for r in all_resources if r != "client"]},
            required=True,
        ),
        parameter("clientId", "Client ID", {"resource": ["client"], "operation": ["get"]}, required=True),
        parameter("fiscalYearId", "Fiscal Year ID", {"resource": _FISCAL_YEAR_RESOURCES}, required=True),
        parameter("fiscalYearId", "Fiscal Year ID", {"resource": ["fiscalYear"], "operation": ["get"]}, required=True),
        parameter("costSystemId", "Cost System ID", {"resource": _COST_SYSTEM_RESOURCES}, required=True),
        parameter("costSystemId", "Cost System ID", {"resource": ["costSystems"], "operation": ["get"]}, required=True),
    ])
    params.extend(list_parameters({"operation": LIST_OPERATIONS}))
    params.extend([
        parameter("select", "Select Fields", {"resource": all_resources},
                  description="Comma-separated list of fields to return"),
        parameter("filter", "Filter", {"operation": LIST_OPERATIONS}, description="OData-style filter expression"),
        parameter("expand", "Expand", {"resource": all_resources},
                  description='Related entities to embed; "all" expands everything'),
        _id_parameter("accountsReceivableId", "Accounts Receivable ID", "accountsReceivable", ["get"]),
        _id_parameter("accountsPayableId", "Accounts Payable ID", "accountsPayable", ["get"]),
        _id_parameter("accountPostingId", "Account Posting ID", "accountPosting", ["get"]),
        _id_parameter(
            "accountingSequenceId", "Accounting Sequence ID", "accountingSequence",
            ["get", "getAccountingRecords", "getAccountingRecord"],
        ),
        _id_parameter("accountingRecordId", "Accounting Record ID", "accountingSequence", ["getAccountingRecord"]),
        json_parameter(
            "accountingSequenceData", "Accounting Sequence Data",
            {"resource": ["accountingSequence"], "operation": ["create"]},
            "Accounting sequence with its accounting records as JSON",
        ),
        _id_parameter(
            "postingProposalRuleId", "Rule ID", "postingProposals",
            ["getRuleIncoming", "getRuleOutgoing", "getRuleCashRegister"],
        ),
        json_parameter(
            "postingProposalData", "Posting Proposal Data",
            {"resource": ["postingProposals"], "operation": ["batchIncoming", "batchOutgoing", "batchCashRegister"]},
            "Posting proposals batch as JSON",
        ),
        _id_parameter(
            "accountingSumsAndBalancesId", "Sums and Balances ID", "accountingSumsAndBalances", ["get"],
        ),
        _id_parameter("debitorId", "Debitor ID", "businessPartners", ["getDebitor", "updateDebitor"]),
        json_parameter(
            "debitorData", "Debitor Data",
            {"resource": ["businessPartners"], "operation": ["createDebitor", "updateDebitor"]},
            "Debitor payload as JSON",
        ),
        _id_parameter("creditorId", "Creditor ID", "businessPartners", ["getCreditor", "updateCreditor"]),
        json_parameter(
            "creditorData", "Creditor Data",
            {"resource": ["businessPartners"], "operation": ["createCreditor", "updateCreditor"]},
            "Creditor payload as JSON",
        ),
        parameter(
            "startAt", "Start At",
            {"resource": ["businessPartners"], "operation": ["getNextAvailableDebitor", "getNextAvailableCreditor"]},
            type="number", default=None,
            description="Lowest account number to consider",
        ),
        _id_parameter("generalLedgerAccountId", "General Ledger Account ID", "generalLedgerAccounts", ["get"]),
        _id_parameter("termsOfPaymentId", "Terms of Payment ID", "termsOfPayment", ["get", "update"]),
        json_parameter(
            "termsOfPaymentData", "Terms of Payment Data",
            {"resource": ["termsOfPayment"], "operation": ["create", "update"]},
            "Terms of payment payload as JSON",
        ),
        _id_parameter("stocktakingDataId", "Stocktaking Data ID", "stocktakingData", ["get", "update"]),
        json_parameter(
            "stocktakingData", "Stocktaking Data",
            {"resource": ["stocktakingData"], "operation": ["update"]},
            "Stocktaking record payload as JSON",
        ),
        _id_parameter("costCenterUnitId", "Cost Center/Unit ID", "costCentersUnits", ["get"]),
        _id_parameter("costCenterPropertyId", "Cost Center Property ID", "costCenterProperties", ["get"]),
        json_parameter(
            "internalCostServiceData", "Internal Cost Service Data",
            {"resource": ["internalCostServices"], "operation": ["create"]},
            "Internal cost service payload as JSON",
        ),
        _id_parameter(
            "costSequenceId", "Cost Sequence ID", "costSequences", ["get", "create", "getCostAccountingRecords"],
        ),
        json_parameter(
            "costSequenceData", "Cost Sequence Data",
            {"resource": ["costSequences"], "operation": ["create"]},
            "Cost accounting records as JSON",
        ),
        _id_parameter(
            "accountingTransactionKeyId", "Transaction Key ID", "accountingTransactionKeys", ["get"],
        ),
        _id_parameter("variousAddressId", "Various Address ID", "variousAddresses", ["get"]),
        json_parameter(
            "variousAddressData", "Various Address Data",
            {"resource": ["variousAddresses"], "operation": ["create"]},
            "Various address payload as JSON",
        ),
    ])
    return params


PROPERTIES = {
    "parameters": _build_parameters(),
    "credentials": DESCRIPTION["credentials"],
}
