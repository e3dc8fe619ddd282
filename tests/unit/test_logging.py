"""Tests for structured logging."""
import json
import logging

from datev_connect.logging import (
    CustomJsonFormatter,
    NodeContextFilter,
    get_logger,
    with_node_context,
)


def make_record(**extra):
    record = logging.LogRecord("datev_connect.test", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestWithNodeContext:
    """Test with_node_context."""

    def test_keeps_item_index_zero(self):
        assert with_node_context(node_type="datevConnect.accounting", item_index=0) == {
            "node_type": "datevConnect.accounting",
            "item_index": 0,
        }

    def test_passes_extra_fields(self):
        assert with_node_context(resource="client", records=3) == {"resource": "client", "records": 3}


class TestFormatter:
    """Test CustomJsonFormatter."""

    def test_context_fields_rendered(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = make_record(node_type="datevConnect.masterData", item_index=0)
        NodeContextFilter().filter(record)

        output = json.loads(formatter.format(record))

        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["logger"] == "datev_connect.test"
        assert output["node_type"] == "datevConnect.masterData"
        assert output["item_index"] == 0
        assert "resource" not in output


class TestLoggerAdapter:
    """Test NodeLoggerAdapter."""

    def test_merges_bound_and_call_context(self, caplog):
        logger = get_logger("datev_connect.test", node_type="datevConnect.accounting", item_index=1)

        with caplog.at_level(logging.DEBUG, logger="datev_connect.test"):
            logger.info("dispatch", extra={"operation": "getAll"})

        record = caplog.records[-1]
        assert record.node_type == "datevConnect.accounting"
        assert record.item_index == 1
        assert record.operation == "getAll"
