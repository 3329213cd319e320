import sys
from typing import Any, Optional
from types import TracebackType


class NoTraceException(Exception):
    """An exception that prints an error message and exits without a
    traceback. All errors caused by user input derive from this class:
    invalid characters, syntax errors, and formulas whose normal forms grow
    beyond the configured rewrite budget. Those are normal situations during
    interactive use, and a short message is more helpful than a stack.

    >>> import io
    >>> stream = io.StringIO()
    >>> handler(NoTraceException('expected RPAREN, found EOF'), None, stream)
    >>> stream.getvalue()
    'NoTraceException: expected RPAREN, found EOF\\n'
    """
    pass


def handler(exc: NoTraceException, tb: Optional[TracebackType], stream=None) -> None:
    if stream is None:
        stream = sys.stderr
    print(f'{type(exc).__name__}: {exc}', file=stream, flush=True)


# Python shell

def excepthook(exc_type: type[BaseException], exc: BaseException, tb: Optional[TracebackType]):
    if isinstance(exc, NoTraceException):
        handler(exc, tb)
    else:
        sys_excepthook(exc_type, exc, tb)


# To be executed at import:

sys_excepthook = sys.excepthook
sys.excepthook = excepthook


# IPython:

def ipy_custom_exec(ipy: Any, exc_type: type[NoTraceException],
                    exc: NoTraceException, tb: TracebackType, tb_offset=None):
    handler(exc, tb)


# To be executed at import:

import IPython  # noqa: E402

ipy = IPython.get_ipython()

if ipy is not None:
    ipy.set_custom_exc((NoTraceException,), ipy_custom_exec)
