"""UTC offsets.

A ``UtcOffset`` is a standard component plus a daylight saving
component, both in whole seconds.  Offsets are ordered by their total
value, but equality is component-wise: ``UtcOffset(3600, 0)`` and
``UtcOffset(0, 3600)`` are neither equal nor one less than the other.
"""

__all__ = [
    'UtcOffset',
    'to_seconds',
]

import dataclasses
import datetime

from .assertions import ASSERT

_ONE_SECOND = datetime.timedelta(seconds=1)


def to_seconds(offset):
    """Convert an int or a timedelta of whole seconds to int."""
    if isinstance(offset, datetime.timedelta):
        seconds, remainder = divmod(offset, _ONE_SECOND)
        ASSERT(
            not remainder,
            'expect offset of whole seconds, not {!r}',
            offset,
        )
        return seconds
    return ASSERT.integral(offset)


@dataclasses.dataclass(frozen=True)
class UtcOffset:
    std: int = 0
    dst: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'std', to_seconds(self.std))
        object.__setattr__(self, 'dst', to_seconds(self.dst))

    @property
    def value(self):
        return self.std + self.dst

    def to_timedelta(self):
        return datetime.timedelta(seconds=self.value)

    def std_timedelta(self):
        return datetime.timedelta(seconds=self.std)

    def dst_timedelta(self):
        return datetime.timedelta(seconds=self.dst)

    def __lt__(self, other):
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other):
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self.value >= other.value

    def __str__(self):
        sign = '-' if self.value < 0 else '+'
        minutes, second = divmod(abs(self.value), 60)
        hour, minute = divmod(minutes, 60)
        if second:
            return '%s%02d:%02d:%02d' % (sign, hour, minute, second)
        return '%s%02d:%02d' % (sign, hour, minute)
