"""Parse fixed-offset time zone designators.

Accepted forms (matched against the whole input):

* ``Z``.
* ``UTC``, optionally followed by a sign and a 1- or 2-digit hour, like
  ``UTC+6`` or ``UTC-12``.
* A sign and a 2-digit hour, like ``+05``.
* An optional sign (which may be prefixed by ``UTC``), a 2-digit hour,
  and then either ``:MM`` optionally followed by ``:SS``, or ``MM``,
  like ``15:45:21``, ``-1330``, or ``UTC+05:30``.

Minute and second fields are any two digits; they are not range
checked.  The resulting name is built from the parsed numbers, and so
``+0530`` and ``+05:30`` are both named ``UTC+05:30``.
"""

__all__ = [
    'UnrecognizedTimeZone',
    'parse_fixed_offset',
]

import logging
import re

from .assertions import ASSERT

LOG = logging.getLogger(__name__)

# Name of the zero offset denoted by the literal ``Z`` (ISO 8601).
ZULU = 'Z'


class UnrecognizedTimeZone(ValueError):

    def __init__(self, text):
        super().__init__('unrecognized time zone: %s' % text)
        self.text = text


# ``UTC`` prefix is allowed only when a sign follows.
_UTC_PREFIX = r'(?:UTC(?=[+-]))?'

# Tried in order; the first full match wins.  Every pattern captures
# ``hour`` before ``minute`` and ``minute`` before ``second``, and a
# later field is never captured without the earlier one.
_PATTERNS = (
    (
        'utc',
        re.compile(r'UTC(?:(?P<sign>[+-])(?P<hour>[0-9]{1,2}))?'),
    ),
    (
        'hour',
        re.compile(r'(?P<sign>[+-])(?P<hour>[0-9]{2})'),
    ),
    (
        'colon',
        re.compile(
            _UTC_PREFIX +
            r'(?P<sign>[+-])?(?P<hour>[0-9]{2})'
            r':(?P<minute>[0-9]{2})(?::(?P<second>[0-9]{2}))?'
        ),
    ),
    (
        'compact',
        re.compile(
            _UTC_PREFIX +
            r'(?P<sign>[+-])?(?P<hour>[0-9]{2})(?P<minute>[0-9]{2})'
        ),
    ),
)


def _match(text):
    for kind, pattern in _PATTERNS:
        match = pattern.fullmatch(text)
        if match:
            return kind, match
    return None, None


def _to_int(digits):
    return 0 if digits is None else int(digits, 10)


def parse_fixed_offset(text):
    """Parse a designator into its canonical name and offset seconds.

    The name is ``Z`` for the literal ``Z``, ``UTC`` for any other zero
    offset, and ``UTC±HH:MM[:SS]`` otherwise.
    """
    ASSERT.isinstance(text, str)

    if text == ZULU:
        return ZULU, 0

    kind, match = _match(text)
    if match is None:
        LOG.debug('unrecognized time zone: %r', text)
        raise UnrecognizedTimeZone(text)

    sign = '-' if match['sign'] == '-' else '+'
    coefficient = -1 if sign == '-' else 1
    hour = _to_int(match['hour'])
    # Only the last two patterns define minute and second groups.
    groups = match.groupdict()
    minute = _to_int(groups.get('minute'))
    second = _to_int(groups.get('second'))

    if hour == 0 and minute == 0 and second == 0:
        name = 'UTC'
    elif second == 0:
        name = 'UTC%s%02d:%02d' % (sign, hour, minute)
    else:
        name = 'UTC%s%02d:%02d:%02d' % (sign, hour, minute, second)

    offset = coefficient * (hour * 3600 + minute * 60 + second)
    LOG.debug('parse %r as %s pattern: %s %d', text, kind, name, offset)
    return name, offset
