"""
Tests for the stock handlers and the logging module bridges
"""

import logging
from unittest.mock import MagicMock

import pytest

from callback_filter_handler.config import FilterHandlerConfig, set_default_config
from callback_filter_handler.filtering import MessageFilter
from callback_filter_handler.handlers import (
    CallbackFilterHandler,
    DispatchingHandler,
    Handler,
    InMemoryHandler,
    StdlibHandler,
    create_filter_handler,
)
from callback_filter_handler.levels import Level
from callback_filter_handler.processors import UidProcessor
from callback_filter_handler.record import LogRecord


def get_record(level=Level.WARNING, message="test", context=None):
    return LogRecord.create(level, message, context, channel="test")


class TestInMemoryHandler:
    def test_records_handled_entries(self):
        handler = InMemoryHandler()
        handler.handle(get_record(Level.INFO, "first"))
        handler.handle(get_record(Level.ERROR, "second"))

        assert [r.message for r in handler.records] == ["first", "second"]
        assert handler.has_records(Level.INFO)
        assert handler.has_records("error")
        assert not handler.has_records(Level.WARNING)
        assert handler.has_record_that_contains("sec", Level.ERROR)
        assert not handler.has_record_that_contains("sec", Level.INFO)

    def test_respects_level(self):
        handler = InMemoryHandler(level=Level.ERROR)

        assert handler.handle(get_record(Level.INFO)) is False
        assert handler.records == []

    def test_bubble(self):
        assert InMemoryHandler().handle(get_record()) is False
        assert InMemoryHandler(bubble=False).handle(get_record()) is True

    def test_has_only_records_that_contain(self):
        handler = InMemoryHandler()
        handler.handle_batch([get_record(Level.INFO, "information")])

        assert handler.has_only_records_that_contain("information", Level.INFO)

        handler.handle(get_record(Level.WARNING, "information"))
        assert not handler.has_only_records_that_contain("information", Level.INFO)

    def test_has_only_records_matching(self):
        handler = InMemoryHandler()
        handler.handle(get_record(Level.WARNING, "a"))
        handler.handle(get_record(Level.WARNING, "b"))

        assert handler.has_only_records_matching(level=Level.WARNING)
        assert not handler.has_only_records_matching(message="a")
        assert not handler.has_only_records_matching(missing_field=1)

    def test_reset_clears_records_and_processors(self):
        uid = UidProcessor()
        handler = InMemoryHandler()
        handler.push_processor(uid)
        handler.handle(get_record())
        first_uid = handler.records[0].extra["uid"]

        assert handler.supports_reset() is True
        handler.reset()

        assert handler.records == []
        assert not handler.has_records(Level.WARNING)
        assert uid.uid != first_uid

    def test_base_handler_has_no_reset_support(self):
        class NullHandler(Handler):
            def is_handling(self, record):
                return True

            def handle(self, record):
                return False

            def handle_batch(self, records):
                pass

        handler = NullHandler()
        assert handler.supports_reset() is False
        handler.reset()
        handler.close()


class TestStdlibHandler:
    def test_emits_through_logger(self, caplog):
        handler = StdlibHandler("bridge.emit")
        record = LogRecord.create(
            Level.NOTICE, "user signed in", {"user_id": "u1", "skipped": None}, channel="auth"
        ).with_extra(uid="abc")

        with caplog.at_level(logging.DEBUG, logger="bridge.emit"):
            assert handler.handle(record) is False

        assert len(caplog.records) == 1
        emitted = caplog.records[0]
        assert emitted.getMessage() == "user signed in"
        assert emitted.levelno == 25
        assert emitted.ctx_user_id == "u1"
        assert emitted.ctx_uid == "abc"
        assert emitted.channel == "auth"
        assert not hasattr(emitted, "ctx_skipped")

    def test_level_gate(self, caplog):
        handler = StdlibHandler(logging.getLogger("bridge.gate"), level="error", bubble=False)

        with caplog.at_level(logging.DEBUG, logger="bridge.gate"):
            assert handler.handle(get_record(Level.WARNING)) is False
            assert handler.handle(get_record(Level.ERROR)) is True

        assert [r.levelno for r in caplog.records] == [logging.ERROR]


class TestDispatchingHandler:
    def setup_method(self):
        self.logger = logging.getLogger("bridge.dispatch")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

    def teardown_method(self):
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

    def test_filters_stdlib_records(self):
        memory = InMemoryHandler()
        filter_handler = CallbackFilterHandler(memory, [MessageFilter("keep")], "info")
        self.logger.addHandler(DispatchingHandler(filter_handler))

        self.logger.warning("keep this", extra={"ctx_user_id": "u1"})
        self.logger.warning("drop this")
        self.logger.debug("keep, but too low")

        assert [r.message for r in memory.records] == ["keep this"]
        record = memory.records[0]
        assert record.level is Level.WARNING
        assert record.channel == "bridge.dispatch"
        assert record.context == {"user_id": "u1"}

    def test_errors_go_to_handle_error(self):
        failing = MagicMock(spec=Handler)
        failing.handle.side_effect = RuntimeError("sink down")
        dispatching = DispatchingHandler(failing)
        dispatching.handleError = MagicMock()

        stdlib_record = logging.LogRecord(
            name="bridge.dispatch",
            level=logging.ERROR,
            pathname="",
            lineno=0,
            msg="error",
            args=(),
            exc_info=None,
        )
        dispatching.emit(stdlib_record)

        dispatching.handleError.assert_called_once_with(stdlib_record)

    def test_close_closes_wrapped_handler(self):
        wrapped = MagicMock(spec=Handler)
        DispatchingHandler(wrapped).close()

        wrapped.close.assert_called_once()


class TestCreateFilterHandler:
    def teardown_method(self):
        set_default_config(None)

    def test_uses_given_config(self):
        memory = InMemoryHandler()
        handler = create_filter_handler(
            memory, [], FilterHandlerConfig(level="warning", bubble=False)
        )

        assert isinstance(handler, CallbackFilterHandler)
        assert handler.level is Level.WARNING
        assert handler.bubble is False
        assert handler.get_handler() is memory

    def test_uses_default_config(self, monkeypatch):
        monkeypatch.setenv("CALLBACK_FILTER_LEVEL", "error")
        monkeypatch.setenv("CALLBACK_FILTER_BUBBLE", "false")
        set_default_config(None)

        handler = create_filter_handler(lambda record, owner: InMemoryHandler(), [])

        assert handler.level is Level.ERROR
        assert handler.bubble is False
        assert handler.is_resolved is False

    def test_invalid_level_in_config(self):
        with pytest.raises(ValueError):
            FilterHandlerConfig(level="loud")


def test_in_memory_handler_batch_uses_base_implementation():
    assert "handle_batch" not in InMemoryHandler.__dict__

    handler = InMemoryHandler(level=Level.INFO)
    handler.handle_batch([get_record(Level.DEBUG, "low"), get_record(Level.ERROR, "high")])

    assert [r.message for r in handler.records] == ["high"]
