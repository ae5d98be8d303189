"""Time zones of a constant offset for all of time.

Fixed time zones are ordered chronologically rather than numerically:
``a < b`` if and only if ``b.offset < a.offset``.  That is, 10:00 in
UTC-05:00 is an earlier moment than 10:00 in UTC-08:00, and so UTC-05:00
sorts before UTC-08:00.  Zones of equal offsets are neither less nor
greater than each other regardless of their names, although ``==``
tells them apart when their names differ.
"""

__all__ = [
    'FixedTimeZone',
    'MAX_NAME_LENGTH',
    'UTC_ZERO',
    'compare',
]

import datetime

from .assertions import ASSERT
from .offsets import UtcOffset
from .parsers import ZULU, parse_fixed_offset

# Names are stored in at most this many bytes of UTF-8.
MAX_NAME_LENGTH = 15


def _check_name(name):
    ASSERT.isinstance(name, str)
    ASSERT.not_empty(name)
    ASSERT.less_or_equal(len(name.encode('utf-8')), MAX_NAME_LENGTH)
    return name


class FixedTimeZone(datetime.tzinfo):
    """A ``tzinfo`` with a constant offset.

    It may be constructed in three ways:

    * ``FixedTimeZone(name, utc_offset)`` where ``utc_offset`` is a
      ``UtcOffset``.
    * ``FixedTimeZone(name, utc_offset, dst_offset=0)`` where offsets are
      seconds (int) or ``timedelta``.
    * ``FixedTimeZone(text)``, which parses ``text`` like ``UTC+6``,
      ``-1330``, or ``15:45:21``, and names the zone after the parsed
      offset, like ``UTC+06:00``, ``UTC-13:30``, or ``UTC+15:45:21``.
      It raises ``UnrecognizedTimeZone`` when ``text`` is malformed.

    NOTE: ``datetime`` only accepts offsets strictly within 24 hours;
    a zone of a larger offset can be constructed and compared, but not
    attached to a ``datetime`` object.
    """

    def __init__(self, name, utc_offset=None, dst_offset=0):
        super().__init__()
        if utc_offset is None:
            name, utc_offset = parse_fixed_offset(name)
        if isinstance(utc_offset, UtcOffset):
            ASSERT(
                not dst_offset,
                'expect dst_offset not given with UtcOffset, not {!r}',
                dst_offset,
            )
            offset = utc_offset
        else:
            offset = UtcOffset(utc_offset, dst_offset)
        self._name = _check_name(name)
        self._offset = offset

    @classmethod
    def parse(cls, text):
        """Parse ``text``; return ``UTC_ZERO`` itself for ``Z``."""
        if text == ZULU:
            return UTC_ZERO
        return cls(text)

    @property
    def name(self):
        return self._name

    @property
    def offset(self):
        return self._offset

    def rename(self, name):
        """Return a new zone of the same offset under ``name``."""
        return FixedTimeZone(name, self._offset)

    #
    # datetime.tzinfo interface.
    #

    def utcoffset(self, dt):
        del dt  # Unused.
        return self._offset.to_timedelta()

    def dst(self, dt):
        del dt  # Unused.
        return self._offset.dst_timedelta()

    def tzname(self, dt):
        del dt  # Unused.
        return self._name

    #
    # Value semantics.
    #

    def __reduce__(self):
        return type(self), (self._name, self._offset)

    def __eq__(self, other):
        if not isinstance(other, FixedTimeZone):
            return NotImplemented
        return self._name == other._name and self._offset == other._offset

    def __hash__(self):
        return hash((self._name, self._offset))

    def __str__(self):
        return self._name

    def __repr__(self):
        return '%s(%r, %r)' % (type(self).__name__, self._name, self._offset)

    #
    # Chronological ordering; note the reversed operands.
    #

    def __lt__(self, other):
        if not isinstance(other, FixedTimeZone):
            return NotImplemented
        return other._offset < self._offset

    def __le__(self, other):
        if not isinstance(other, FixedTimeZone):
            return NotImplemented
        return other._offset <= self._offset

    def __gt__(self, other):
        if not isinstance(other, FixedTimeZone):
            return NotImplemented
        return other._offset > self._offset

    def __ge__(self, other):
        if not isinstance(other, FixedTimeZone):
            return NotImplemented
        return other._offset >= self._offset


def compare(a, b):
    """Compare chronologically; return -1, 0, or 1.

    This is usable with ``functools.cmp_to_key``.
    """
    ASSERT.isinstance(a, FixedTimeZone)
    ASSERT.isinstance(b, FixedTimeZone)
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


# https://en.wikipedia.org/wiki/ISO_8601#Coordinated_Universal_Time_(UTC)
UTC_ZERO = FixedTimeZone(ZULU, 0)
