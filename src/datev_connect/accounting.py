"""
Accounting endpoint wrappers (``datevconnect/accounting/v1``).

Convention: ``wrapper(auth, *ids, query_or_body)``. Identifiers come
first in path order (client, fiscal year, then the entity ids), the query
dict or JSON body last. Each wrapper forwards only the query keys its
endpoint understands; value ranges are not enforced here.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

from .transport import (
    AuthContext,
    JsonObject,
    Query,
    fetch_payload,
    quote_segment,
    send_request,
)

BASE_PATH = "datevconnect/accounting/v1"

LIST_QUERY_KEYS = ("top", "skip", "select", "filter", "expand")
ITEM_QUERY_KEYS = ("select", "expand")
NEXT_AVAILABLE_QUERY_KEYS = ("start-at",)

# Posting proposal rule/batch flavours, keyed by operation suffix
POSTING_PROPOSAL_KINDS = {
    "incoming": "incoming",
    "outgoing": "outgoing",
    "cashRegister": "cash-register",
}

Payload = Union[JsonObject, List[Any]]


def _pick(query: Optional[Query], keys: Sequence[str]) -> JsonObject:
    return {key: query[key] for key in keys if query and query.get(key) is not None}


def _client_path(client_id: str, *segments: Any) -> str:
    parts = [BASE_PATH, "clients", quote_segment(client_id)]
    parts.extend(str(segment) for segment in segments)
    return "/".join(parts)


def _fiscal_year_path(client_id: str, fiscal_year_id: str, *segments: Any) -> str:
    return _client_path(client_id, "fiscal-years", quote_segment(fiscal_year_id), *segments)


def _cost_system_path(client_id: str, fiscal_year_id: str, cost_system_id: str, *segments: Any) -> str:
    return _fiscal_year_path(
        client_id, fiscal_year_id, "cost-systems", quote_segment(cost_system_id), *segments,
    )


def _posting_proposal_kind(kind: str) -> str:
    try:
        return POSTING_PROPOSAL_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown posting proposal kind: {kind}") from None


# ==============================================================================
# Clients and fiscal years
# ==============================================================================

def fetch_clients(auth: AuthContext, query: Optional[Query] = None) -> Payload:
    return fetch_payload(auth, f"{BASE_PATH}/clients", "clients", _pick(query, LIST_QUERY_KEYS))


def fetch_client(auth: AuthContext, client_id: str, query: Optional[Query] = None) -> Payload:
    return fetch_payload(auth, _client_path(client_id), "client", _pick(query, ITEM_QUERY_KEYS))


def fetch_fiscal_years(auth: AuthContext, client_id: str, query: Optional[Query] = None) -> Payload:
    return fetch_payload(
        auth, _client_path(client_id, "fiscal-years"), "fiscal years", _pick(query, LIST_QUERY_KEYS),
    )


def fetch_fiscal_year(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth, _fiscal_year_path(client_id, fiscal_year_id), "fiscal year", _pick(query, ITEM_QUERY_KEYS),
    )


# ==============================================================================
# Open items: accounts receivable / payable
# ==============================================================================

def fetch_accounts_receivable(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "accounts-receivable"),
        "accounts receivable",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_accounts_receivable_condensed(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "accounts-receivable", "condensed"),
        "condensed accounts receivable",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_account_receivable(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    account_receivable_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(
            client_id, fiscal_year_id, "accounts-receivable", quote_segment(account_receivable_id),
        ),
        "account receivable",
        _pick(query, ITEM_QUERY_KEYS),
    )


def fetch_accounts_payable(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "accounts-payable"),
        "accounts payable",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_accounts_payable_condensed(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "accounts-payable", "condensed"),
        "condensed accounts payable",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_account_payable(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    account_payable_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(
            client_id, fiscal_year_id, "accounts-payable", quote_segment(account_payable_id),
        ),
        "account payable",
        _pick(query, ITEM_QUERY_KEYS),
    )


# ==============================================================================
# Postings and accounting sequences
# ==============================================================================

def fetch_account_postings(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "account-postings"),
        "account postings",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_account_posting(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    account_posting_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "account-postings", quote_segment(account_posting_id)),
        "account posting",
        _pick(query, ITEM_QUERY_KEYS),
    )


def create_accounting_sequence(
    auth: AuthContext, client_id: str, fiscal_year_id: str, accounting_sequence: Any,
) -> Optional[Payload]:
    """Submit a batch of accounting records for processing."""
    return send_request(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "accounting-sequences"),
        method="POST",
        body=accounting_sequence,
    )


def fetch_accounting_sequences(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "accounting-sequences-processed"),
        "accounting sequences",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_accounting_sequence(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    accounting_sequence_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(
            client_id,
            fiscal_year_id,
            "accounting-sequences-processed",
            quote_segment(accounting_sequence_id),
        ),
        "accounting sequence",
        _pick(query, ITEM_QUERY_KEYS),
    )


def fetch_accounting_records(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    accounting_sequence_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(
            client_id,
            fiscal_year_id,
            "accounting-sequences-processed",
            quote_segment(accounting_sequence_id),
            "accounting-records",
        ),
        "accounting records",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_accounting_record(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    accounting_sequence_id: str,
    accounting_record_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(
            client_id,
            fiscal_year_id,
            "accounting-sequences-processed",
            quote_segment(accounting_sequence_id),
            "accounting-records",
            quote_segment(accounting_record_id),
        ),
        "accounting record",
        _pick(query, ITEM_QUERY_KEYS),
    )


# ==============================================================================
# Posting proposals
# ==============================================================================

def fetch_posting_proposal_rules(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    kind: str,
    query: Optional[Query] = None,
) -> Payload:
    """List posting proposal rules; ``kind`` is incoming, outgoing or cashRegister."""
    segment = f"posting-proposal-rules-{_posting_proposal_kind(kind)}"
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, segment),
        "posting proposal rules",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_posting_proposal_rule(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    kind: str,
    rule_id: str,
    query: Optional[Query] = None,
) -> Payload:
    segment = f"posting-proposal-rules-{_posting_proposal_kind(kind)}"
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, segment, quote_segment(rule_id)),
        "posting proposal rule",
        _pick(query, ITEM_QUERY_KEYS),
    )


def create_posting_proposal_batch(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    kind: str,
    posting_proposals: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _fiscal_year_path(
            client_id, fiscal_year_id, "posting-proposals", f"batch-{_posting_proposal_kind(kind)}",
        ),
        method="POST",
        body=posting_proposals,
    )


# ==============================================================================
# Sums and balances
# ==============================================================================

def fetch_accounting_sums_and_balances(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "accounting-sums-and-balances"),
        "accounting sums and balances",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_accounting_sum_and_balance(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    sums_and_balances_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(
            client_id, fiscal_year_id, "accounting-sums-and-balances", quote_segment(sums_and_balances_id),
        ),
        "accounting sums and balances entry",
        _pick(query, ITEM_QUERY_KEYS),
    )


# ==============================================================================
# Business partners: debitors and creditors
# ==============================================================================

def _fetch_partners(
    auth: AuthContext, client_id: str, fiscal_year_id: str, segment: str, query: Optional[Query],
) -> Payload:
    return fetch_payload(
        auth, _fiscal_year_path(client_id, fiscal_year_id, segment), segment, _pick(query, LIST_QUERY_KEYS),
    )


def _fetch_partner(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    segment: str,
    partner_id: str,
    query: Optional[Query],
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, segment, quote_segment(partner_id)),
        segment[:-1],
        _pick(query, ITEM_QUERY_KEYS),
    )


def _fetch_next_available(
    auth: AuthContext, client_id: str, fiscal_year_id: str, segment: str, query: Optional[Query],
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, segment, "next-available"),
        f"next available {segment[:-1]} number",
        _pick(query, NEXT_AVAILABLE_QUERY_KEYS),
    )


def fetch_debitors(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return _fetch_partners(auth, client_id, fiscal_year_id, "debitors", query)


def fetch_debitor(
    auth: AuthContext, client_id: str, fiscal_year_id: str, debitor_id: str, query: Optional[Query] = None,
) -> Payload:
    return _fetch_partner(auth, client_id, fiscal_year_id, "debitors", debitor_id, query)


def create_debitor(
    auth: AuthContext, client_id: str, fiscal_year_id: str, debitor: Any,
) -> Optional[Payload]:
    return send_request(
        auth, _fiscal_year_path(client_id, fiscal_year_id, "debitors"), method="POST", body=debitor,
    )


def update_debitor(
    auth: AuthContext, client_id: str, fiscal_year_id: str, debitor_id: str, debitor: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "debitors", quote_segment(debitor_id)),
        method="PUT",
        body=debitor,
    )


def fetch_next_available_debitor(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    """Next free debitor account number; honours ``start-at``."""
    return _fetch_next_available(auth, client_id, fiscal_year_id, "debitors", query)


def fetch_creditors(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return _fetch_partners(auth, client_id, fiscal_year_id, "creditors", query)


def fetch_creditor(
    auth: AuthContext, client_id: str, fiscal_year_id: str, creditor_id: str, query: Optional[Query] = None,
) -> Payload:
    return _fetch_partner(auth, client_id, fiscal_year_id, "creditors", creditor_id, query)


def create_creditor(
    auth: AuthContext, client_id: str, fiscal_year_id: str, creditor: Any,
) -> Optional[Payload]:
    return send_request(
        auth, _fiscal_year_path(client_id, fiscal_year_id, "creditors"), method="POST", body=creditor,
    )


def update_creditor(
    auth: AuthContext, client_id: str, fiscal_year_id: str, creditor_id: str, creditor: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "creditors", quote_segment(creditor_id)),
        method="PUT",
        body=creditor,
    )


def fetch_next_available_creditor(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    """Next free creditor account number; honours ``start-at``."""
    return _fetch_next_available(auth, client_id, fiscal_year_id, "creditors", query)


# ==============================================================================
# General ledger accounts
# ==============================================================================

def fetch_general_ledger_accounts(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "general-ledger-accounts"),
        "general ledger accounts",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_general_ledger_account(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    general_ledger_account_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(
            client_id, fiscal_year_id, "general-ledger-accounts", quote_segment(general_ledger_account_id),
        ),
        "general ledger account",
        _pick(query, ITEM_QUERY_KEYS),
    )


def fetch_utilized_general_ledger_accounts(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "general-ledger-accounts", "utilized"),
        "utilized general ledger accounts",
        _pick(query, LIST_QUERY_KEYS),
    )


# ==============================================================================
# Terms of payment
# ==============================================================================

def fetch_terms_of_payment(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "terms-of-payment"),
        "terms of payment",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_term_of_payment(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    terms_of_payment_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "terms-of-payment", quote_segment(terms_of_payment_id)),
        "term of payment",
        _pick(query, ITEM_QUERY_KEYS),
    )


def create_term_of_payment(
    auth: AuthContext, client_id: str, fiscal_year_id: str, term_of_payment: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "terms-of-payment"),
        method="POST",
        body=term_of_payment,
    )


def update_term_of_payment(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    terms_of_payment_id: str,
    term_of_payment: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "terms-of-payment", quote_segment(terms_of_payment_id)),
        method="PUT",
        body=term_of_payment,
    )


# ==============================================================================
# Stocktaking data
# ==============================================================================

def fetch_stocktaking_data(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "stocktaking-data"),
        "stocktaking data",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_stocktaking_record(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    stocktaking_data_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "stocktaking-data", quote_segment(stocktaking_data_id)),
        "stocktaking record",
        _pick(query, ITEM_QUERY_KEYS),
    )


def update_stocktaking_record(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    stocktaking_data_id: str,
    stocktaking_record: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "stocktaking-data", quote_segment(stocktaking_data_id)),
        method="PUT",
        body=stocktaking_record,
    )


# ==============================================================================
# Cost accounting
# ==============================================================================

def fetch_cost_systems(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "cost-systems"),
        "cost systems",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_cost_system(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    cost_system_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _cost_system_path(client_id, fiscal_year_id, cost_system_id),
        "cost system",
        _pick(query, ITEM_QUERY_KEYS),
    )


def fetch_cost_centers(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    cost_system_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _cost_system_path(client_id, fiscal_year_id, cost_system_id, "cost-centers"),
        "cost centers",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_cost_center(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    cost_system_id: str,
    cost_center_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _cost_system_path(
            client_id, fiscal_year_id, cost_system_id, "cost-centers", quote_segment(cost_center_id),
        ),
        "cost center",
        _pick(query, ITEM_QUERY_KEYS),
    )


def fetch_cost_center_properties(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    cost_system_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _cost_system_path(client_id, fiscal_year_id, cost_system_id, "cost-center-properties"),
        "cost center properties",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_cost_center_property(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    cost_system_id: str,
    cost_center_property_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _cost_system_path(
            client_id,
            fiscal_year_id,
            cost_system_id,
            "cost-center-properties",
            quote_segment(cost_center_property_id),
        ),
        "cost center property",
        _pick(query, ITEM_QUERY_KEYS),
    )


def create_internal_cost_service(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    cost_system_id: str,
    internal_cost_service: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _cost_system_path(client_id, fiscal_year_id, cost_system_id, "internal-cost-services"),
        method="POST",
        body=internal_cost_service,
    )


def fetch_cost_sequences(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    cost_system_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _cost_system_path(client_id, fiscal_year_id, cost_system_id, "cost-sequences"),
        "cost sequences",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_cost_sequence(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    cost_system_id: str,
    cost_sequence_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _cost_system_path(
            client_id, fiscal_year_id, cost_system_id, "cost-sequences", quote_segment(cost_sequence_id),
        ),
        "cost sequence",
        _pick(query, ITEM_QUERY_KEYS),
    )


def fetch_cost_accounting_records(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    cost_system_id: str,
    cost_sequence_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _cost_system_path(
            client_id,
            fiscal_year_id,
            cost_system_id,
            "cost-sequences",
            quote_segment(cost_sequence_id),
            "cost-accounting-records",
        ),
        "cost accounting records",
        _pick(query, LIST_QUERY_KEYS),
    )


def create_cost_accounting_records(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    cost_system_id: str,
    cost_sequence_id: str,
    cost_accounting_records: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _cost_system_path(
            client_id,
            fiscal_year_id,
            cost_system_id,
            "cost-sequences",
            quote_segment(cost_sequence_id),
            "cost-accounting-records",
        ),
        method="POST",
        body=cost_accounting_records,
    )


# ==============================================================================
# Statistics, transaction keys, various addresses
# ==============================================================================

def fetch_accounting_statistics(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "accounting-statistics"),
        "accounting statistics",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_accounting_transaction_keys(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "accounting-transaction-keys"),
        "accounting transaction keys",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_accounting_transaction_key(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    transaction_key_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(
            client_id, fiscal_year_id, "accounting-transaction-keys", quote_segment(transaction_key_id),
        ),
        "accounting transaction key",
        _pick(query, ITEM_QUERY_KEYS),
    )


def fetch_various_addresses(
    auth: AuthContext, client_id: str, fiscal_year_id: str, query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "various-addresses"),
        "various addresses",
        _pick(query, LIST_QUERY_KEYS),
    )


def fetch_various_address(
    auth: AuthContext,
    client_id: str,
    fiscal_year_id: str,
    various_address_id: str,
    query: Optional[Query] = None,
) -> Payload:
    return fetch_payload(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "various-addresses", quote_segment(various_address_id)),
        "various address",
        _pick(query, ITEM_QUERY_KEYS),
    )


def create_various_address(
    auth: AuthContext, client_id: str, fiscal_year_id: str, various_address: Any,
) -> Optional[Payload]:
    return send_request(
        auth,
        _fiscal_year_path(client_id, fiscal_year_id, "various-addresses"),
        method="POST",
        body=various_address,
    )
