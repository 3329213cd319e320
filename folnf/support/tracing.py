# Inspired by code suggested by Vincent Fenet,
# https://stackoverflow.com/q/8315389/

import reprlib
import sys
from functools import wraps


class trace(object):
    """Implements a decorator @trace(...) for recursive passes that should be
    traced. Parenthesis must be used also when there are no arguments. Long
    arguments, typically formulas, are abbreviated to `max_length`
    characters.

    >>> import sys
    >>> @trace(stream=sys.stdout)
    ... def depth(n):
    ...     return 0 if n == 0 else depth(n - 1) + 1
    >>> depth(1)
    --> depth(1)
      --> depth(0)
      <-- depth == 0
    <BLANKLINE>
    <-- depth == 1
    <BLANKLINE>
    1
    """

    cur_indent = 0

    def __init__(self, stream=sys.stdout, indent_step=2, show_ret=True,
                 max_length=80):
        self.indent_step = indent_step
        self.show_ret = show_ret
        self.stream = stream
        self._repr = reprlib.Repr()
        self._repr.maxother = max_length
        self._repr.maxstring = max_length

    def __call__(self, fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            indent = ' ' * trace.cur_indent
            L = [self._format(a) for a in args]
            L.extend(f'{a}={self._format(b)}' for a, b in kwargs.items())
            call = f'{fn.__qualname__}({", ".join(L)})'
            self.stream.write(f'{indent}--> {call}\n')
            trace.cur_indent += self.indent_step
            try:
                ret = fn(*args, **kwargs)
            finally:
                trace.cur_indent -= self.indent_step
            if self.show_ret:
                self.stream.write(f'{indent}<-- {fn.__qualname__} == {self._format(ret)}\n\n')
            return ret
        return wrapper

    def _format(self, obj) -> str:
        return self._repr.repr(obj)
