'''
Tree to binary.

The blocks are written in their order: the containers write only their
header, since their content are the blocks that follow them. The sizes of the
containers must be already correct (see layout.relayout()).
'''
import logging

from ..byteorder import HOST
from ..exceptions import LayoutException
from ..streams import Stream


logger = logging.getLogger(__name__)


def pack(timeseries, order=HOST) -> bytes:
    stream = Stream.writer()

    for block in timeseries:
        raw = block.pack(order=order)

        if not block.container and len(raw) != block.size + 8:
            raise LayoutException(
                chain=[str(block.tag)],
                message=f'size is {block.size} but the data is {len(raw) - 8} bytes')

        logger.debug('packing %r at offset %d', block, stream.tell())
        stream.write(raw)

    return stream.getvalue()


def pack_file(timeseries, path, order=HOST):
    data = pack(timeseries, order=order)

    logger.debug('writing %d bytes to \'%s\'', len(data), path)
    with open(path, 'wb') as f:
        f.write(data)

    return len(data)
