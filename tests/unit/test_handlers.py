"""Tests for resource handler dispatch, parameters and error policy."""
from unittest.mock import patch

import pytest

from datev_connect.errors import DatevConnectRequestError
from node_sdk.basenode import NodeApiError, NodeExecutionContext, NodeOperationError
from nodepacks.datev_connect.accounting import AccountingNode
from nodepacks.datev_connect.accounting.handlers import (
    BusinessPartnersResourceHandler,
    ClientResourceHandler as AccountingClientHandler,
    CostSequencesResourceHandler,
    PostingProposalsResourceHandler,
)
from nodepacks.datev_connect.master_data import MasterDataNode
from nodepacks.datev_connect.master_data.handlers import (
    AddresseeResourceHandler,
    BankResourceHandler,
    ClientResourceHandler,
    LegalFormResourceHandler,
)


def make_node(node_class, parameters, continue_on_fail=False):
    """Node bound to a context with one input item."""
    node = node_class()
    node.set_context(NodeExecutionContext(
        parameters=parameters,
        credentials={},
        input_data=[{"json": {}}],
        continue_on_fail=continue_on_fail,
    ))
    return node


class TestMasterDataHandlers:
    """Test master-data handlers."""

    @patch("datev_connect.master_data.fetch_clients")
    def test_get_all_defaults(self, mock_fetch, auth, sample_clients):
        """Lists default to top 100 and skip 0."""
        mock_fetch.return_value = sample_clients
        node = make_node(MasterDataNode, {})
        return_data = []

        ClientResourceHandler(node, 0).execute("getAll", auth, return_data)

        mock_fetch.assert_called_once_with(auth, top=100, skip=0, select=None, filter=None)
        assert return_data == [
            {"json": sample_clients[0], "pairedItem": {"item": 0}},
            {"json": sample_clients[1], "pairedItem": {"item": 0}},
        ]

    @patch("datev_connect.master_data.create_client")
    def test_create_parses_json_and_max_number(self, mock_create, auth):
        """Client data is parsed and maxNumber 0 is forwarded."""
        mock_create.return_value = {"id": "c-9"}
        node = make_node(MasterDataNode, {"clientData": '{"name": "Neu"}', "maxNumber": 0})
        return_data = []

        ClientResourceHandler(node, 0).execute("create", auth, return_data)

        mock_create.assert_called_once_with(auth, {"name": "Neu"}, max_number=0)
        assert return_data == [{"json": {"id": "c-9"}, "pairedItem": {"item": 0}}]

    @patch("datev_connect.master_data.update_client")
    def test_update_without_body_reports_success(self, mock_update, auth):
        """An update answered with 204 yields a success record."""
        mock_update.return_value = None
        node = make_node(MasterDataNode, {"clientId": " c-1 ", "clientData": {"name": "Neu"}})
        return_data = []

        ClientResourceHandler(node, 0).execute("update", auth, return_data)

        mock_update.assert_called_once_with(auth, "c-1", {"name": "Neu"})
        assert return_data == [{"json": {"success": True}, "pairedItem": {"item": 0}}]

    @patch("datev_connect.master_data.fetch_next_free_client_number")
    def test_next_free_number(self, mock_fetch, auth):
        """start defaults to 1; a range of 0 is still sent."""
        mock_fetch.return_value = 10005
        node = make_node(MasterDataNode, {"range": 0})
        return_data = []

        ClientResourceHandler(node, 0).execute("getNextFreeNumber", auth, return_data)

        mock_fetch.assert_called_once_with(auth, start=1, range=0)
        assert return_data == [{"json": {"value": 10005}, "pairedItem": {"item": 0}}]

    @patch("datev_connect.master_data.fetch_banks")
    def test_empty_list_yields_placeholder_record(self, mock_fetch, auth):
        """An empty result still leaves one record paired to the item."""
        mock_fetch.return_value = []
        node = make_node(MasterDataNode, {})
        return_data = []

        BankResourceHandler(node, 3).execute("getAll", auth, return_data)

        assert return_data == [{"json": {}, "pairedItem": {"item": 3}}]

    @pytest.mark.parametrize("name,value", [("top", 2.5), ("skip", "7.25"), ("range", 0.5), ("maxNumber", "1e-1")])
    def test_fractional_numbers_rejected(self, auth, name, value):
        node = make_node(MasterDataNode, {name: value}, continue_on_fail=True)

        with pytest.raises(NodeOperationError) as exc_info:
            ClientResourceHandler(node, 0).get_number_parameter(name)

        assert exc_info.value.message == f'Parameter "{name}" must be a whole number.'

    @pytest.mark.parametrize("value,expected", [(25, 25), ("40", 40), (50.0, 50), (" 0 ", 0)])
    def test_whole_numbers_accepted(self, auth, value, expected):
        node = make_node(MasterDataNode, {"top": value})

        assert ClientResourceHandler(node, 0).get_number_parameter("top") == expected

    def test_non_numeric_rejected(self, auth):
        node = make_node(MasterDataNode, {"start": "abc"})

        with pytest.raises(NodeOperationError, match='Parameter "start" must be a number.'):
            ClientResourceHandler(node, 0).get_number_parameter("start")

    @patch("datev_connect.master_data.fetch_legal_forms")
    def test_legal_forms_national_right(self, mock_fetch, auth):
        mock_fetch.return_value = []
        node = make_node(MasterDataNode, {"nationalRight": "german"})

        LegalFormResourceHandler(node, 0).execute("getAll", auth, [])

        mock_fetch.assert_called_once_with(auth, select=None, national_right="german")

    @patch("datev_connect.master_data.fetch_addressee")
    def test_missing_identifier(self, mock_fetch, auth):
        """A blank id is a configuration error and never reaches the API."""
        node = make_node(MasterDataNode, {"addresseeId": "  "}, continue_on_fail=True)

        with pytest.raises(NodeOperationError) as exc_info:
            AddresseeResourceHandler(node, 0).execute("get", auth, [])

        assert exc_info.value.message == 'Parameter "addresseeId" is required.'
        mock_fetch.assert_not_called()

    def test_invalid_json_propagates_under_continue_on_fail(self, auth):
        node = make_node(MasterDataNode, {"addresseeData": "{oops"}, continue_on_fail=True)

        with pytest.raises(NodeOperationError, match='"Addressee Data" contains invalid JSON'):
            AddresseeResourceHandler(node, 0).execute("create", auth, [])

    def test_unsupported_operation(self, auth):
        node = make_node(MasterDataNode, {})

        with pytest.raises(NodeOperationError) as exc_info:
            ClientResourceHandler(node, 2).execute("delete", auth, [])

        assert exc_info.value.message == 'The operation "delete" is not supported for resource "client".'
        assert exc_info.value.item_index == 2


class TestErrorPolicy:
    """Test handle_error under both continue-on-fail settings."""

    @patch("datev_connect.master_data.fetch_clients")
    def test_continue_on_fail_records_error(self, mock_fetch, auth):
        """The failed item becomes an error record and nothing is raised."""
        mock_fetch.side_effect = RuntimeError("API Error")
        node = make_node(MasterDataNode, {}, continue_on_fail=True)
        return_data = [{"json": {"id": "earlier"}, "pairedItem": {"item": 0}}]

        ClientResourceHandler(node, 1).execute("getAll", auth, return_data)

        assert return_data[-1] == {"json": {"error": "API Error"}, "pairedItem": {"item": 1}}
        assert len(return_data) == 2

    @patch("datev_connect.master_data.fetch_clients")
    def test_api_error_raised_without_continue_on_fail(self, mock_fetch, auth):
        """Request failures become NodeApiError tagged with the item."""
        cause = DatevConnectRequestError(
            "DATEVconnect request failed (403 Forbidden): No access",
            status_code=403,
            response_body={"message": "No access"},
        )
        mock_fetch.side_effect = cause
        node = make_node(MasterDataNode, {})

        with pytest.raises(NodeApiError) as exc_info:
            ClientResourceHandler(node, 0).execute("getAll", auth, [])

        error = exc_info.value
        assert error.message == "DATEVconnect request failed (403 Forbidden): No access"
        assert error.status_code == 403
        assert error.response_body == {"message": "No access"}
        assert error.item_index == 0
        assert error.__cause__ is cause


class TestAccountingHandlers:
    """Test accounting handlers."""

    @patch("datev_connect.accounting.fetch_clients")
    def test_client_list_default_query(self, mock_fetch, request_context):
        """Accounting lists send top 100 and omit a zero skip."""
        mock_fetch.return_value = [{"id": "1000"}]
        node = make_node(AccountingNode, {"skip": 0})

        AccountingClientHandler(node, 0).execute("getAll", request_context, [])

        mock_fetch.assert_called_once_with(request_context, {"top": 100})

    @patch("datev_connect.accounting.fetch_clients")
    def test_list_query_options(self, mock_fetch, request_context):
        """Positive skip is kept and expand "all" becomes "*"."""
        mock_fetch.return_value = []
        node = make_node(AccountingNode, {"top": 25, "skip": 50, "expand": "all", "filter": "x"})

        AccountingClientHandler(node, 0).execute("getAll", request_context, [])

        mock_fetch.assert_called_once_with(
            request_context, {"top": 25, "skip": 50, "filter": "x", "expand": "*"},
        )

    @patch("datev_connect.accounting.fetch_posting_proposal_rules")
    def test_posting_proposal_kind(self, mock_fetch, request_context):
        mock_fetch.return_value = []
        node = make_node(AccountingNode, {})

        PostingProposalsResourceHandler(node, 0).execute("getRulesCashRegister", request_context, [])

        mock_fetch.assert_called_once_with(request_context, "1000", "2024", "cashRegister", {"top": 100})

    @patch("datev_connect.accounting.fetch_next_available_debitor")
    def test_next_available_start_at(self, mock_fetch, request_context):
        mock_fetch.return_value = {"number": 10000}
        node = make_node(AccountingNode, {"startAt": 10000})

        BusinessPartnersResourceHandler(node, 0).execute("getNextAvailableDebitor", request_context, [])

        mock_fetch.assert_called_once_with(request_context, "1000", "2024", {"start-at": 10000})

    def test_business_partners_need_client_and_fiscal_year(self, request_context):
        """Business partner operations check both ids before dispatch."""
        context = request_context.__class__(
            host=request_context.host,
            token=request_context.token,
            client_instance_id=request_context.client_instance_id,
            client_id="1000",
        )
        node = make_node(AccountingNode, {})

        with pytest.raises(NodeOperationError) as exc_info:
            BusinessPartnersResourceHandler(node, 0).execute("getDebitors", context, [])

        assert exc_info.value.message == (
            "Client ID and Fiscal Year ID are required for business partner operations"
        )

    @patch("datev_connect.accounting.create_cost_accounting_records")
    def test_cost_sequence_create(self, mock_create, request_context):
        mock_create.return_value = None
        node = make_node(AccountingNode, {
            "costSystemId": "1",
            "costSequenceId": "seq-9",
            "costSequenceData": '[{"amount": 1}]',
        })
        return_data = []

        CostSequencesResourceHandler(node, 0).execute("create", request_context, return_data)

        mock_create.assert_called_once_with(request_context, "1000", "2024", "1", "seq-9", [{"amount": 1}])
        assert return_data == [{"json": {"success": True}, "pairedItem": {"item": 0}}]
