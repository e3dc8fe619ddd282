"""Tests for the accounting endpoint wrappers."""
import pytest

from datev_connect import accounting

BASE = "https://datev.example.com/datevconnect/accounting/v1"
FY = f"{BASE}/clients/1000/fiscal-years/2024"


def sent(session):
    """Method, URL and keyword arguments of the last request."""
    args, kwargs = session.request.call_args
    return args[0], args[1], kwargs


class TestClientsAndFiscalYears:
    """Test client and fiscal year wrappers."""

    def test_fetch_clients_picks_list_keys(self, auth, session):
        """Only list query keys reach the API."""
        accounting.fetch_clients(auth, {"top": 100, "skip": None, "expand": "*", "unknown": "x"})

        _, url, kwargs = sent(session)
        assert url == f"{BASE}/clients"
        assert kwargs["params"] == {"top": "100", "expand": "*"}

    def test_fetch_fiscal_year_item_keys(self, auth, session):
        """Single reads forward select and expand only."""
        accounting.fetch_fiscal_year(auth, "1000", "2024", {"top": 5, "select": "id"})

        _, url, kwargs = sent(session)
        assert url == FY
        assert kwargs["params"] == {"select": "id"}

    def test_identifiers_are_quoted(self, auth, session):
        accounting.fetch_fiscal_years(auth, "10/00")

        assert sent(session)[1] == f"{BASE}/clients/10%2F00/fiscal-years"


class TestFiscalYearResources:
    """Test wrappers below a fiscal year."""

    def test_condensed_accounts_receivable(self, auth, session):
        accounting.fetch_accounts_receivable_condensed(auth, "1000", "2024")

        assert sent(session)[1] == f"{FY}/accounts-receivable/condensed"

    def test_create_accounting_sequence(self, auth, session):
        """Accounting sequences are posted as JSON."""
        body = {"accounting_records": [{"amount": 10}]}
        accounting.create_accounting_sequence(auth, "1000", "2024", body)

        method, url, kwargs = sent(session)
        assert method == "POST"
        assert url == f"{FY}/accounting-sequences"
        assert kwargs["json"] == body

    def test_accounting_record_path(self, auth, session):
        accounting.fetch_accounting_record(auth, "1000", "2024", "seq-1", "rec-2")

        assert sent(session)[1] == f"{FY}/accounting-sequences-processed/seq-1/accounting-records/rec-2"

    @pytest.mark.parametrize("kind,segment", [
        ("incoming", "incoming"),
        ("outgoing", "outgoing"),
        ("cashRegister", "cash-register"),
    ])
    def test_posting_proposal_rules(self, auth, session, kind, segment):
        """Each proposal kind has its own rules collection."""
        accounting.fetch_posting_proposal_rules(auth, "1000", "2024", kind)

        assert sent(session)[1] == f"{FY}/posting-proposal-rules-{segment}"

    def test_posting_proposal_batch(self, auth, session):
        accounting.create_posting_proposal_batch(auth, "1000", "2024", "cashRegister", [{"id": 1}])

        method, url, _ = sent(session)
        assert method == "POST"
        assert url == f"{FY}/posting-proposals/batch-cash-register"

    def test_unknown_posting_proposal_kind(self, auth):
        with pytest.raises(ValueError, match="Unknown posting proposal kind"):
            accounting.fetch_posting_proposal_rules(auth, "1000", "2024", "sideways")

    def test_next_available_debitor_start_at(self, auth, session):
        """Only start-at is forwarded for next-available lookups."""
        accounting.fetch_next_available_debitor(auth, "1000", "2024", {"start-at": 10000, "top": 1})

        _, url, kwargs = sent(session)
        assert url == f"{FY}/debitors/next-available"
        assert kwargs["params"] == {"start-at": "10000"}

    def test_update_creditor(self, auth, session):
        accounting.update_creditor(auth, "1000", "2024", "70001", {"name": "Lieferant"})

        method, url, kwargs = sent(session)
        assert method == "PUT"
        assert url == f"{FY}/creditors/70001"
        assert kwargs["json"] == {"name": "Lieferant"}


class TestCostAccounting:
    """Test cost system wrappers."""

    def test_cost_centers_path(self, auth, session):
        accounting.fetch_cost_centers(auth, "1000", "2024", "1", {"top": 50})

        _, url, kwargs = sent(session)
        assert url == f"{FY}/cost-systems/1/cost-centers"
        assert kwargs["params"] == {"top": "50"}

    def test_create_cost_accounting_records(self, auth, session):
        accounting.create_cost_accounting_records(auth, "1000", "2024", "1", "seq-9", [{"amount": 1}])

        method, url, _ = sent(session)
        assert method == "POST"
        assert url == f"{FY}/cost-systems/1/cost-sequences/seq-9/cost-accounting-records"

    def test_accounting_statistics(self, auth, session):
        accounting.fetch_accounting_statistics(auth, "1000", "2024")

        assert sent(session)[1] == f"{FY}/accounting-statistics"
