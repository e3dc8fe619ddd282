"""Tests for nodepack helpers and item records."""
import pytest

from datev_connect.errors import DatevConnectRequestError
from node_sdk.basenode import NodeOperationError
from node_sdk.items import NodeItem, error_record, paired_records
from nodepacks.datev_connect.utils import normalise_to_objects, parse_json_parameter, to_error_message


class TestNormaliseToObjects:
    """Test payload shaping."""

    def test_object_becomes_single_record(self):
        assert normalise_to_objects({"id": 1}) == [{"id": 1}]

    def test_list_keeps_objects_and_wraps_scalars(self):
        assert normalise_to_objects([{"id": 1}, 2, "x"]) == [{"id": 1}, {"value": 2}, {"value": "x"}]

    def test_scalar_is_wrapped(self):
        assert normalise_to_objects(10005) == [{"value": 10005}]
        assert normalise_to_objects(None) == [{"value": None}]

    def test_empty_list_maps_to_empty_list(self):
        """Element-wise mapping; the handler adds the placeholder record."""
        assert normalise_to_objects([]) == []

    def test_normalising_twice_is_stable(self):
        """Already-normalised input comes back equal."""
        once = normalise_to_objects([{"id": 1}, 2])

        assert normalise_to_objects(once) == once


class TestParseJsonParameter:
    """Test JSON parameter parsing."""

    def test_text_is_parsed(self):
        assert parse_json_parameter('{"name": "Neu", "tags": [1, 2]}', "Client Data") == {
            "name": "Neu",
            "tags": [1, 2],
        }

    def test_parsed_value_passes_through(self):
        value = [{"id": "k"}]

        assert parse_json_parameter(value, "Client Categories") is value

    def test_missing_value(self):
        with pytest.raises(NodeOperationError) as exc_info:
            parse_json_parameter(None, "Client Data", item_index=3)

        assert exc_info.value.message == 'Parameter "Client Data" must be provided.'
        assert exc_info.value.item_index == 3

    def test_invalid_json(self):
        with pytest.raises(NodeOperationError) as exc_info:
            parse_json_parameter("{broken", "Employee Data")

        assert exc_info.value.message.startswith('Parameter "Employee Data" contains invalid JSON: ')


class TestRecords:
    """Test output record construction."""

    def test_paired_records(self):
        records = paired_records([{"id": 1}, {"id": 2}], item_index=4)

        assert records == [
            {"json": {"id": 1}, "pairedItem": {"item": 4}},
            {"json": {"id": 2}, "pairedItem": {"item": 4}},
        ]

    def test_error_record(self):
        assert error_record("API Error", 1) == {"json": {"error": "API Error"}, "pairedItem": {"item": 1}}

    def test_node_item_from_host_item(self):
        """Host items carry their data under "json"."""
        assert NodeItem.from_dict({"json": {"a": 1}}).json_data == {"a": 1}
        assert NodeItem.from_dict({"a": 1}).json_data == {"a": 1}

    def test_to_error_message_prefers_message_attribute(self):
        assert to_error_message(DatevConnectRequestError("DATEVconnect request failed (500)")) == (
            "DATEVconnect request failed (500)"
        )
        assert to_error_message(RuntimeError("boom")) == "boom"
        assert to_error_message(KeyError()) == "KeyError"
