import sys
import os
import logging

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notepad.logging_setup import SESSION_ID, EnsureSessionFilter, SessionAdapter


def test_filter_adds_session():
    record = logging.LogRecord("notepad", logging.INFO, __file__, 1, "msg", None, None)
    assert EnsureSessionFilter().filter(record)
    assert record.session == SESSION_ID


def test_adapter_injects_session():
    adapter = SessionAdapter(logging.getLogger("notepad.test"), {})
    _, kwargs = adapter.process("msg", {})
    assert kwargs["extra"]["session"] == SESSION_ID
