'''
This module contains the constant values used throughout the TS format.

Note: the tags are four characters codes, the binary value on the wire is the
big-endian integer having the ASCII codes as bytes.
'''
from enum import Enum


class BlockTag(Enum):
    AQLV = b'AQLV'
    HEAD = b'HEAD'
    SIGN = b'sign'
    MCDA = b'mcda'
    CNST = b'cnst'
    SWEP = b'swep'
    FBIN = b'fbin'
    BODY = b'BODY'
    GTAG = b'gtag'
    ATAG = b'atag'
    INDX = b'indx'
    SCAL = b'scal'
    ALVL = b'alvl'
    END  = b'END '

    def __str__(self):
        return self.value.decode('ascii')


CONTAINERS = frozenset((
    BlockTag.AQLV,
    BlockTag.HEAD,
    BlockTag.BODY,
    BlockTag.END,
))

# tag + size
HEADER_SIZE = 8

SIZE_DESCRIPTION = 64
SIZE_OWNERNAME   = 64
SIZE_COMMENT     = 64

# seconds between 1904-01-01 00:00:00 (Mac epoch) and 1970-01-01 00:00:00
MAC_EPOCH_OFFSET = 2082844800

BINFORMAT_CVIQ = b'cviq'

# separator between key and value in the textual representation
SEPARATOR = ':'
