"""Assertions.

This is the small subset of assertion checks that time zone values
need.  Like the ``assert`` statement, it is for stating program states,
but you cannot turn it off.

Examples:
>>> from g1.timezones.assertions import ASSERT
>>> ASSERT.not_empty(name)
"""

__all__ = [
    'ASSERT',
    'Assertions',
]

import builtins
import operator
from functools import partialmethod


def _is_integral(x):
    # bool is an int subclass, but ``True`` is never a valid offset.
    return builtins.isinstance(x, int) and not builtins.isinstance(x, bool)


class Assertions:
    """Assertions.

    By convention, all assertion methods return the first argument on
    success.  Messages are ``{}``-formatted.
    """

    def __init__(self, make_exc):
        self._make_exc = make_exc

    def __call__(self, cond, message, *args):
        if not cond:
            raise self._make_exc(message.format(*args), cond)
        return cond

    def _assert_1(self, predicate, arg, *, message):
        if not predicate(arg):
            raise self._make_exc(message.format(arg), arg)
        return arg

    not_empty = partialmethod(
        _assert_1, bool, message='expect non-empty value, not {!r}'
    )
    integral = partialmethod(
        _assert_1, _is_integral, message='expect integral value, not {!r}'
    )

    def _assert_2(self, predicate, actual, expect, *, message):
        if not predicate(actual, expect):
            raise self._make_exc(
                message.format(actual, expect), actual, expect
            )
        return actual

    isinstance = partialmethod(
        _assert_2,
        builtins.isinstance,
        message='expect {1}-typed value, not {0!r}',
    )
    less_or_equal = partialmethod(
        _assert_2, operator.le, message='expect x <= {1!r}, not {0!r}'
    )


ASSERT = Assertions(lambda message, *_: AssertionError(message))
