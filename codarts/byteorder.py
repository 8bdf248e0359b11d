'''
# Byte order

The TS format is big-endian by definition, so each multi-byte value read from
or written to the wire must be swapped when the host is little-endian.

The host order is detected once (see HOST) and then passed around explicitly
as the ``order`` argument of the pack()/unpack() calls, so that tests can
simulate a big-endian host.
'''
import logging
import sys

import numpy as np
from bitstring import BitArray


logger = logging.getLogger(__name__)

SWAP_WIDTHS = (2, 4, 8)


class ByteOrder(object):
    '''Immutable description of the host byte order.'''
    __slots__ = ('_little',)

    def __init__(self, little_endian: bool):
        object.__setattr__(self, '_little', little_endian)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __repr__(self):
        return f'<{self.__class__.__name__}({"little" if self._little else "big"})>'

    def __eq__(self, other):
        return isinstance(other, ByteOrder) and other._little == self._little

    def __hash__(self):
        return hash(self._little)

    @classmethod
    def detect(cls) -> 'ByteOrder':
        logger.debug('host is %s endian', sys.byteorder)
        return cls(sys.byteorder == 'little')

    @property
    def little_endian(self) -> bool:
        return self._little

    @staticmethod
    def swap(raw: bytes, width: int) -> bytes:
        '''Reverse each unit of ``width`` bytes contained in ``raw``.'''
        if width not in SWAP_WIDTHS:
            raise ValueError(f'cannot swap values {width} bytes wide')

        if len(raw) % width:
            raise ValueError(f'{len(raw)} bytes are not a multiple of {width}')

        bits = BitArray(bytes(raw))
        bits.byteswap(width)

        return bits.bytes

    def fixup(self, raw: bytes, width: int) -> bytes:
        '''Convert between wire (big-endian) and host order.

        The operation is its own inverse so it's used in both directions.'''
        if not self._little:
            return bytes(raw)

        return self.swap(raw, width)

    def wire_dtype(self, dtype) -> np.dtype:
        '''numpy dtype for bulk values as they are on the wire.'''
        return np.dtype(dtype).newbyteorder('>')


HOST = ByteOrder.detect()
