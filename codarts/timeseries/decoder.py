'''
Binary to tree.

The file is loaded in memory and the blocks are parsed recursively: the
containers are followed by the blocks they enclose, the leaves keep a view
into the buffer (nothing is copied) together with their unpacked data.
'''
import logging

from ..byteorder import HOST
from ..enum import Compliant
from ..exceptions import UnpackException, MagicException
from ..streams import Stream
from ..utils import hexdump
from .block import Block, BlockHeader, TimeSeries
from .blocks import lookup, resolve
from .enum import BlockTag, HEADER_SIZE


logger = logging.getLogger(__name__)

# the containers that can be found inside another one, at the top level
# there is no restriction
NESTING = {
    BlockTag.AQLV: (BlockTag.HEAD, BlockTag.BODY),
}


def check_nesting(tag, chain):
    if not chain:
        return

    parent = resolve(chain[-1])
    if tag not in NESTING.get(parent, ()):
        raise UnpackException(chain=chain + [str(tag)], message=f"container '{tag}' cannot be inside '{parent}'")


def check_header(stream, order=HOST):
    '''The first block must be AQLV.'''
    stream.save()
    header = BlockHeader(stream.read(HEADER_SIZE), order=order)
    stream.restore()

    tag = resolve(header.tag.value)
    if tag != BlockTag.AQLV:
        raise MagicException(chain=[], message=f'bad header key {tag}')


def unpack_blocks(stream, timeseries, order=HOST, compliant=Compliant.MAGIC, chain=None):
    chain = chain or []

    while stream.remaining() > 0:
        offset = stream.tell()
        if stream.remaining() < HEADER_SIZE:
            raise UnpackException(
                chain=list(chain),
                message=f'{stream.remaining()} bytes at offset {offset} are too few for a block header')

        header = BlockHeader(stream.read(HEADER_SIZE), order=order)

        try:
            payload_class = lookup(header.tag.value)
        except UnpackException as e:
            e.chain[:0] = chain
            raise

        tag = resolve(header.tag.value)
        size = header.length.value

        if size > stream.remaining():
            if compliant & Compliant.SIZE:
                raise UnpackException(
                    chain=chain + [str(tag)],
                    message=f'size is {size} but only {stream.remaining()} bytes remain')

            logger.warning('block \'%s\' size truncated from %d to %d bytes', tag, size, stream.remaining())
            logger.debug('header at offset %d:\n%s', offset, hexdump(header.pack(order=order)))
            timeseries.truncated.append((tag, size, stream.remaining()))
            size = stream.remaining()

        view = stream.read(size)
        block = Block(tag, size=size)
        timeseries.append(block)

        logger.debug('%s%s at offset %d with size %d', '  ' * len(chain), tag, offset, size)

        if payload_class.container:
            check_nesting(tag, chain)
            unpack_blocks(Stream(view), timeseries, order=order, compliant=compliant, chain=chain + [str(tag)])
            continue

        try:
            block.data = payload_class.from_wire(view, order=order)
        except UnpackException as e:
            e.chain[:0] = chain + [str(tag)]
            raise

        block.raw = view

    return timeseries


def unpack(data, order=HOST, compliant=Compliant.MAGIC) -> TimeSeries:
    '''Decode the whole buffer (bytes, bytearray, memoryview or a Stream).

    Any error aborts the decoding, no partial result is returned.'''
    stream = data if isinstance(data, Stream) else Stream(data)

    if compliant & Compliant.MAGIC and stream.remaining() > HEADER_SIZE:
        check_header(stream, order=order)

    timeseries = TimeSeries(buffer=stream.view)

    return unpack_blocks(stream, timeseries, order=order, compliant=compliant)


def unpack_file(path, order=HOST, compliant=Compliant.MAGIC) -> TimeSeries:
    logger.debug('reading \'%s\'', path)
    return unpack(Stream(path), order=order, compliant=compliant)
