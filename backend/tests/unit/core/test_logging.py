"""Unit tests for the contextual logger and formatters."""

import json
import logging

from elitescope.core.logging import ContextualLogger, _DimensionFormatter, _JsonFormatter


def _record(message: str = "hello", **dimensions) -> logging.LogRecord:
    record = logging.LogRecord("elitescope", logging.INFO, __file__, 1, message, None, None)
    record.dimensions = dimensions
    return record


class TestContextualLogger:
    def test_with_context_merges_and_drops_none(self):
        base = ContextualLogger(logging.getLogger("elitescope.test"), {"request_id": "r1"})

        child = base.with_context(user_id=5, user_role=None)

        assert child.dimensions == {"request_id": "r1", "user_id": 5}
        assert base.dimensions == {"request_id": "r1"}

    def test_with_prefix_stacks(self):
        base = ContextualLogger(logging.getLogger("elitescope.test"))

        child = base.with_prefix("[audit] ").with_prefix("[x] ")
        msg, kwargs = child.process("done", {})

        assert msg == "[audit] [x] done"
        assert kwargs["extra"]["dimensions"] == {}

    def test_process_attaches_dimensions(self):
        adapter = ContextualLogger(logging.getLogger("elitescope.test"), {"a": 1})

        _, kwargs = adapter.process("msg", {"extra": {"dimensions": {"b": 2}}})

        assert kwargs["extra"]["dimensions"] == {"a": 1, "b": 2}


class TestFormatters:
    def test_dimension_formatter_appends_sorted_pairs(self):
        formatter = _DimensionFormatter("%(message)s")

        assert formatter.format(_record(b=2, a=1)) == "hello [a=1 b=2]"
        assert formatter.format(_record()) == "hello"

    def test_json_formatter(self):
        payload = json.loads(_JsonFormatter().format(_record(request_id="r1")))

        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["request_id"] == "r1"
