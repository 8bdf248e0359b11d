import logging
from typing import Dict, List, Optional

from ..core import Chunk
from .. import fields
from ..byteorder import HOST
from ..exceptions import UnknownBlockException
from .enum import BlockTag, CONTAINERS
from .blocks import lookup, resolve


logger = logging.getLogger(__name__)


class BlockHeader(Chunk):
    '''The tag is a four characters code, the length doesn't include the header itself.'''
    tag  = fields.FourCCField()
    length = fields.StructField('I')


class Block(object):
    '''A block of the file: for the leaves "data" is the unpacked payload and
    "raw" (when decoded from a file) the view of its bytes into the original
    buffer; the containers have neither.'''

    def __init__(self, tag, size=0, data=None, raw=None):
        self.header = BlockHeader()
        self.tag = tag
        self.size = size
        self.data = data
        self.raw = raw

    def __repr__(self):
        return '<%s(%s, size=%d)>' % (self.__class__.__name__, self.tag, self.size)

    @property
    def tag(self) -> BlockTag:
        return BlockTag(self.header.tag.value)

    @tag.setter
    def tag(self, value):
        self.header.tag.value = resolve(value).value

    @property
    def size(self) -> int:
        return self.header.length.value

    @size.setter
    def size(self, value):
        self.header.length.value = value

    @property
    def container(self) -> bool:
        return self.tag in CONTAINERS

    def pack(self, order=HOST) -> bytes:
        payload = self.data.pack(order=order) if self.data is not None else b''

        return self.header.pack(order=order) + payload

    def to_lines(self, context) -> List[str]:
        lines = [str(self.tag)]
        if self.data is not None:
            lines.extend(self.data.dump(context))

        return lines

    @classmethod
    def from_text(cls, section, context) -> 'Block':
        try:
            payload_class = lookup(section.tag)
        except UnknownBlockException as e:
            raise UnknownBlockException(e.tag, line=section.line) from None

        tag = resolve(section.tag)
        if payload_class.container:
            logger.debug('container %s at line %d', tag, section.line)
            return cls(tag)

        data = payload_class.from_text(section, context)

        return cls(tag, size=data.size, data=data)


class TimeSeries(object):
    '''The whole file as the ordered sequence of its blocks.

    When decoded from a binary file it keeps a reference to the buffer
    the leaves point into, so that it stays alive as long as the blocks do.'''

    def __init__(self, blocks=None, buffer=None):
        self.blocks: List[Block] = list(blocks or [])
        self.buffer = buffer
        # (tag, declared size, actual size) of the blocks clamped while decoding
        self.truncated = []

    def __repr__(self):
        return '<%s(%d blocks)>' % (self.__class__.__name__, len(self.blocks))

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self):
        return len(self.blocks)

    def __getitem__(self, item):
        return self.blocks[item]

    def append(self, block: Block):
        self.blocks.append(block)

    def find(self, tag) -> Optional[Block]:
        tag = resolve(tag)
        for block in self.blocks:
            if block.tag == tag:
                return block

        return None

    def findall(self, tag) -> List[Block]:
        tag = resolve(tag)
        return [_ for _ in self.blocks if _.tag == tag]

    def sections(self) -> Dict[BlockTag, List[Block]]:
        '''Group the leaves under the last container marker seen before them'''
        result = {}
        current = None
        for block in self.blocks:
            if block.container:
                current = block.tag
                result.setdefault(current, [])
                continue

            result.setdefault(current, []).append(block)

        return result
