"""
Unit tests for the support helpers.

Core claims:
    - NoTraceException is printed as a single line without traceback; other
      exceptions go to the original excepthook
    - DeltaTimeFormatter reports the time since its reference time
    - trace restores its indentation when the traced function raises
"""

import io
import logging
import time

import pytest

from folnf.support import excepthook
from folnf.support.excepthook import NoTraceException, handler
from folnf.support.logging import DeltaTimeFormatter, Timer
from folnf.support.tracing import trace


class TestExcepthook:

    def test_handler(self):
        stream = io.StringIO()
        handler(NoTraceException('budget exhausted'), None, stream)
        assert stream.getvalue() == 'NoTraceException: budget exhausted\n'

    def test_no_trace(self, capsys):
        exc = NoTraceException('expected RPAREN, found EOF')
        excepthook.excepthook(NoTraceException, exc, None)
        assert capsys.readouterr().err == 'NoTraceException: expected RPAREN, found EOF\n'

    def test_other_exceptions_delegate(self, monkeypatch):
        calls = []
        monkeypatch.setattr(excepthook, 'sys_excepthook', lambda *args: calls.append(args))
        exc = KeyError('x')
        excepthook.excepthook(KeyError, exc, None)
        assert calls == [(KeyError, exc, None)]


class TestDeltaTimeFormatter:

    def test_delta(self):
        formatter = DeltaTimeFormatter('%(delta)s %(message)s')
        formatter.set_reference_time(time.time() - 3)
        record = logging.LogRecord('folnf', logging.INFO, __file__, 1, 'step', None, None)
        delta, message = formatter.format(record).split()
        assert delta.startswith('0:00:0')
        assert 2.0 <= float(delta.split(':')[-1]) < 60.0
        assert message == 'step'

    def test_reference_time(self):
        formatter = DeltaTimeFormatter()
        formatter.set_reference_time(1000.0)
        assert formatter.get_reference_time() == pytest.approx(1000.0)


class TestTimer:

    def test_reset(self):
        timer = Timer()
        time.sleep(0.01)
        assert timer.get() >= 0.005
        timer.reset()
        assert timer.get() < 0.01


class TestTrace:

    def test_output(self):
        stream = io.StringIO()

        @trace(stream=stream)
        def double(n):
            return 2 * n

        assert double(21) == 42
        name = double.__qualname__
        assert stream.getvalue() == f"--> {name}(21)\n<-- {name} == 42\n\n"

    def test_indent_restored(self):
        stream = io.StringIO()

        @trace(stream=stream)
        def fail():
            raise ValueError('fail')

        indent = trace.cur_indent
        with pytest.raises(ValueError):
            fail()
        assert trace.cur_indent == indent
