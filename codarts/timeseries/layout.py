'''
Sizes of the containers.

The size of a container is known only after all the blocks it encloses are
known, so when a file is built from text the sizes are calculated at the end:

    BODY = sum(8 + size) for the blocks between BODY and END
    HEAD = sum(8 + size) for the blocks between HEAD and BODY (or END)
    AQLV = 8 + HEAD + 8 + BODY
'''
import logging

from ..exceptions import LayoutException, MissingMarkerException
from .enum import BlockTag, HEADER_SIZE


logger = logging.getLogger(__name__)


def region_size(timeseries, start, stops) -> int:
    inside = False
    size = 0
    for block in timeseries:
        if block.tag in stops:
            inside = False
        if inside:
            size += HEADER_SIZE + block.size
        if block.tag == start:
            inside = True

    return size


def body_size(timeseries) -> int:
    return region_size(timeseries, BlockTag.BODY, (BlockTag.END,))


def head_size(timeseries) -> int:
    return region_size(timeseries, BlockTag.HEAD, (BlockTag.BODY, BlockTag.END))


def _marker(timeseries, tag):
    block = timeseries.find(tag)
    if block is None:
        raise MissingMarkerException(chain=[], message=f"cannot find block '{tag}'")

    return block


def relayout(timeseries):
    '''Write the sizes of BODY, HEAD and AQLV into their blocks.'''
    aqlv = _marker(timeseries, BlockTag.AQLV)
    head = _marker(timeseries, BlockTag.HEAD)
    body = _marker(timeseries, BlockTag.BODY)

    body.size = body_size(timeseries)
    head.size = head_size(timeseries)
    aqlv.size = HEADER_SIZE + head.size + HEADER_SIZE + body.size

    logger.debug('relayout: AQLV=%d HEAD=%d BODY=%d', aqlv.size, head.size, body.size)

    return aqlv.size, head.size, body.size


def validate(timeseries):
    '''Check the blocks are in the order AQLV, HEAD, leaves, BODY, leaves, END.'''
    tags = [_.tag for _ in timeseries]

    for tag in (BlockTag.AQLV, BlockTag.HEAD, BlockTag.BODY, BlockTag.END):
        count = tags.count(tag)
        if count == 0:
            raise MissingMarkerException(chain=[], message=f"cannot find block '{tag}'")
        if count > 1:
            raise LayoutException(chain=[str(tag)], message=f'found {count} times')

    expected = [BlockTag.AQLV, BlockTag.HEAD]
    markers = [_ for _ in tags if _ in (BlockTag.AQLV, BlockTag.HEAD, BlockTag.BODY, BlockTag.END)]
    if markers != expected + [BlockTag.BODY, BlockTag.END] or tags[:2] != expected:
        raise LayoutException(chain=[], message='blocks must be in the order AQLV, HEAD, ..., BODY, ..., END')

    if tags[-1] != BlockTag.END:
        raise LayoutException(chain=[], message=f"block '{tags[-1]}' after END")
