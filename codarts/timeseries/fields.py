'''
Fields specific to the TS format.
'''
import struct
import time

import numpy as np

from .. import fields
from ..byteorder import HOST
from ..samples import SAMPLE_DTYPE
from .enum import MAC_EPOCH_OFFSET


UNSET = 'unset'


class MacTimestampField(fields.StructField):
    '''Unsigned seconds since 1904-01-01 00:00:00 on the wire, seconds since
    1970-01-01 00:00:00 in the textual representation.

    The value zero means the timestamp was never set.'''

    def __init__(self, **kw):
        super().__init__('I', **kw)

    @property
    def unix_time(self):
        return self.value - MAC_EPOCH_OFFSET if self.value else None

    def to_text(self) -> str:
        if not self.value:
            return UNSET

        t = self.unix_time
        return '%d (NB: seconds since 1970) (%s)' % (t, time.asctime(time.gmtime(t)))

    def from_text(self, text: str) -> None:
        tokens = text.split()
        if not tokens:
            raise ValueError('empty timestamp')

        if tokens[0] == UNSET:
            self.value = 0
            return

        value = int(tokens[0]) + MAC_EPOCH_OFFSET
        try:
            struct.pack(self.get_format(), value)
        except struct.error as e:
            raise ValueError(f'timestamp {tokens[0]} is out of range') from e

        self.value = value


class SampleArrayField(fields.Field):
    '''Array of (I, Q) couples of 16 bits signed integers.

    When unpacked the value is a read-only numpy array that refers directly to
    the memory of the stream, with the wire byte order as dtype.'''

    UNIT = 2 * np.dtype(SAMPLE_DTYPE).itemsize

    def __repr__(self):
        return '<%s(n=%d)>' % (self.__class__.__name__, len(self))

    def __len__(self):
        return self.value.shape[0]

    def value_from_default(self):
        return np.zeros((0, 2), dtype=SAMPLE_DTYPE)

    def _set_value(self, value) -> None:
        value = np.asarray(value)
        if value.size and not np.issubdtype(value.dtype, np.integer):
            raise ValueError(f'samples must be integers, not {value.dtype}')

        super()._set_value(value.reshape(-1, 2))

    def _get_size(self):
        return len(self) * self.UNIT

    def pack(self, order=HOST) -> bytes:
        return np.ascontiguousarray(self.value).astype(order.wire_dtype(SAMPLE_DTYPE)).tobytes()

    def unpack(self, stream, order=HOST):
        raw = stream.read_all()
        n = len(raw) // self.UNIT
        if len(raw) % self.UNIT:
            self.logger.warning('ignoring %d trailing bytes after %d samples', len(raw) % self.UNIT, n)

        if n == 0:
            self.init()
            return

        self.value = np.frombuffer(raw, dtype=order.wire_dtype(SAMPLE_DTYPE), count=2 * n)
