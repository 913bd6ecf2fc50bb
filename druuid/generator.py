"""
Druuid - date-relative unique IDs that fit into a 64-bit integer.

The high-order bits hold milliseconds since an epoch and the low 23 bits
hold entropy, so ids sort by creation time yet still differ within the
same millisecond. Shifting the epoch forward with an offset keeps the
numbers smaller for systems that never need older dates.
"""

import math
from datetime import datetime, timedelta, timezone

from druuid.base36 import encode
from druuid.internal.logging import get_logger
from druuid.utils.entropy import uniform
from druuid.utils.timestamp import now_seconds

# 41 bits of milliseconds, the rest is entropy
TIMESTAMP_BITS = 41
ENTROPY_BITS = 64 - TIMESTAMP_BITS
ENTROPY_MOD = 1 << ENTROPY_BITS
ENTROPY_SCALE = 10 ** 16
MAX_DRUUID = (1 << 64) - 1

SECONDS_PER_DAY = 86400
UNIX_EPOCH = datetime(1970, 1, 1)


def gregorian_seconds(dt):
    """Seconds from 0001-01-01T00:00:00 to dt on the proleptic Gregorian calendar.

    Naive datetimes are taken as UTC; aware ones are converted first.
    Sub-second precision is dropped.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    days = dt.toordinal() - 1
    return days * SECONDS_PER_DAY + dt.hour * 3600 + dt.minute * 60 + dt.second


def from_gregorian_seconds(seconds):
    """Inverse of gregorian_seconds, as a naive UTC datetime."""
    days, remainder = divmod(seconds, SECONDS_PER_DAY)
    return datetime.fromordinal(days + 1) + timedelta(seconds=remainder)


EPOCH_SECONDS = gregorian_seconds(UNIX_EPOCH)


def _round(value):
    """Round half away from zero."""
    if isinstance(value, int):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return whole if value >= 0 else -whole


def epoch_offset(dt):
    """Offset in seconds between the Unix epoch and dt.

    Pass the result to gen() and decode_timestamp() to anchor ids at dt.
    """
    return gregorian_seconds(dt) - EPOCH_SECONDS


def gen_from_values(epoch_offset, rand, ts):
    """Deterministically build a druuid.

    epoch_offset: seconds added to the Unix epoch.
    rand: uniform sample in [0, 1).
    ts: seconds since the Unix epoch.

    A timestamp wider than 41 bits is not an error; the result is simply
    larger than 64 bits. A timestamp before the epoch offset gives a
    negative id, which encode() rejects.
    """
    ms = _round((ts - epoch_offset) * 1000)
    entropy = _round(rand * ENTROPY_SCALE)
    druuid = (ms << ENTROPY_BITS) | (entropy % ENTROPY_MOD)
    if druuid > MAX_DRUUID:
        get_logger().warn("druuid exceeds 64 bits", druuid=druuid, epoch_offset=epoch_offset)
    return druuid


def gen(epoch_offset=0, clock=None, rand=None):
    """Generate a druuid for the current time.

    clock returns seconds since the Unix epoch, rand a uniform sample;
    both default to the system sources.
    """
    clock = clock or now_seconds
    rand = rand or uniform
    return gen_from_values(epoch_offset, rand(), clock())


def decode_timestamp(druuid, epoch_offset=0):
    """Recover the creation time of a druuid, to the nearest second.

    Use the same epoch_offset the id was generated with.
    """
    ms = druuid >> ENTROPY_BITS
    seconds = _round(ms / 1000) + epoch_offset + EPOCH_SECONDS
    return from_gregorian_seconds(seconds)


class Generator:
    """Druuid source bound to one epoch offset and its clock and random providers."""

    __slots__ = ("epoch_offset", "clock", "rand")

    def __init__(self, epoch_offset=0, clock=None, rand=None):
        self.epoch_offset = epoch_offset
        self.clock = clock or now_seconds
        self.rand = rand or uniform
        get_logger().debug("druuid generator ready", epoch_offset=epoch_offset)

    @classmethod
    def from_epoch(cls, epoch, **kwargs):
        return cls(epoch_offset(epoch), **kwargs)

    @classmethod
    def from_config(cls, config, **kwargs):
        return cls(config.druuid.epoch_offset, **kwargs)

    def gen(self):
        return gen_from_values(self.epoch_offset, self.rand(), self.clock())

    def gen_encoded(self):
        return encode(self.gen())

    def decode_timestamp(self, druuid):
        return decode_timestamp(druuid, self.epoch_offset)

    def __repr__(self):
        return f"Generator(epoch_offset={self.epoch_offset})"
