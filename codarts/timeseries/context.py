import logging
from collections import Counter

from .enum import BlockTag


logger = logging.getLogger(__name__)


class Context(object):
    '''State shared between the blocks while a single file is dumped or generated.

    The alvl blocks depend on the sample type set by a previous fbin block and
    on the scale factors set by a previous scal block; the index of the sweep
    is only used to give some context in the error messages.

    It keeps also a summary of what has been seen.'''

    def __init__(self):
        self.sample_type = None
        self.scale_i = 0.0
        self.scale_q = 0.0
        self.index = None
        self.min_index = None
        self.max_index = None
        self.counts = Counter()
        self.count_samples = 0

    def __repr__(self):
        return '<%s(type=%r, scales=%r, index=%r)>' % (
            self.__class__.__name__,
            self.sample_type,
            self.scales,
            self.index,
        )

    @property
    def scales(self):
        return (self.scale_i, self.scale_q)

    def set_scales(self, scale_i, scale_q):
        self.scale_i = scale_i
        self.scale_q = scale_q

    def set_index(self, index):
        self.index = index
        self.min_index = index if self.min_index is None else min(self.min_index, index)
        self.max_index = index if self.max_index is None else max(self.max_index, index)

    def count(self, tag: BlockTag):
        self.counts[tag] += 1

    def add_samples(self, n):
        self.count_samples += n

    def summary(self) -> str:
        blocks = ' '.join('%s=%d' % (tag, self.counts[tag]) for tag in BlockTag if self.counts[tag])
        msg = '%d blocks (%s), %d samples' % (sum(self.counts.values()), blocks, self.count_samples)
        if self.min_index is not None:
            msg += ', sweep index %d..%d' % (self.min_index, self.max_index)

        return msg
