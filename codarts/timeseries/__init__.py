'''
# Time Series file

    from codarts.timeseries import unpack_file, dumps

    print(dumps(unpack_file('/path/to/file.ts')))

and the other way around

    from codarts.timeseries import generate

    with open('/path/to/file.txt', encoding='latin-1') as f:
        data = generate(f)
'''
import logging

from ..byteorder import HOST
from .block import Block, BlockHeader, TimeSeries
from .blocks import lookup, resolve, type2block
from .context import Context
from .decoder import unpack, unpack_file
from .encoder import pack, pack_file
from .enum import BlockTag, CONTAINERS
from .layout import relayout, validate
from .text import dump, dumps, load, loads


logger = logging.getLogger(__name__)


def generate(lines, order=HOST) -> bytes:
    '''From the textual representation to the bytes of the file.'''
    timeseries = load(lines)
    relayout(timeseries)
    validate(timeseries)

    return pack(timeseries, order=order)
