"""Fixed-offset time zones.

Examples:
>>> from g1.timezones.fixed import FixedTimeZone
>>> FixedTimeZone('-1330')
FixedTimeZone('UTC-13:30', UtcOffset(std=-48600, dst=0))
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
