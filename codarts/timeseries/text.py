'''
Tree to text and back.

The textual representation has a section for each block: a line with the tag
followed by a "key:value" line for each parameter; the sections are separated
by a blank line, e.g.

    fbin
    format:cviq
    type:fix2

    scal
    scalar_one:1.00000000000000000000
    scalar_two:1.00000000000000000000

A line without the separator always starts a new block, so the parameters of a
block can be in any order but they cannot be interleaved with another block.
'''
import io
import logging
from typing import Iterable, Iterator, List, Tuple

from ..exceptions import ParameterException
from .block import Block, TimeSeries
from .context import Context
from .enum import BlockTag, SEPARATOR


logger = logging.getLogger(__name__)


class Section(object):
    '''The lines of a single block, the first line number is the one of the tag.'''

    def __init__(self, header: str, line: int):
        self.tag = header[:4].ljust(4)
        self.line = line
        self.entries: List[Tuple[str, str, int]] = []

    def __repr__(self):
        return '<%s(%r, line=%d, %d entries)>' % (self.__class__.__name__, self.tag, self.line, len(self.entries))

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def add(self, key: str, value: str, line: int):
        self.entries.append((key, value, line))

    def get(self, name: str) -> Tuple[str, int]:
        '''Value and line number of the first entry with the given key'''
        for key, value, line in self.entries:
            if key == name:
                return value, line

        raise ParameterException(self.tag, name, self.line)


class Tokenizer(object):
    '''Split lines into sections.'''

    def __init__(self, lines: Iterable[str]):
        self.lines = lines
        self.count = 0

    def __iter__(self) -> Iterator[Section]:
        section = None
        for line in self.lines:
            self.count += 1
            line = line.rstrip('\r\n')

            if not line.strip():
                if section is not None:
                    yield section
                section = None
                continue

            if SEPARATOR not in line:
                if section is not None:
                    yield section
                section = Section(line, self.count)
                continue

            if section is None:
                logger.debug('skipping line %d outside of any block: %r', self.count, line)
                continue

            key, _, value = line.partition(SEPARATOR)
            section.add(key.strip(), value, self.count)

        if section is not None:
            yield section


def load(lines: Iterable[str], context=None) -> TimeSeries:
    '''Build the blocks from their textual representation.

    The sizes of the containers are left to zero, see layout.relayout().'''
    context = context if context is not None else Context()
    timeseries = TimeSeries()
    tokenizer = Tokenizer(lines)

    for section in tokenizer:
        logger.debug('block %r', section)
        block = Block.from_text(section, context)
        context.count(block.tag)
        timeseries.append(block)

    logger.info('read %d lines: %s', tokenizer.count, context.summary())

    return timeseries


def loads(text: str, context=None) -> TimeSeries:
    return load(io.StringIO(text), context=context)


def dump(timeseries: TimeSeries, out, header_only=False, context=None) -> Context:
    '''Write the textual representation of the blocks into out.

    With header_only the dump stops when BODY is reached.'''
    context = context if context is not None else Context()

    for block in timeseries:
        if header_only and block.tag == BlockTag.BODY:
            break

        context.count(block.tag)
        for line in block.to_lines(context):
            out.write(line + '\n')

        if block.tag != BlockTag.END:
            out.write('\n')

    logger.info('dumped %s', context.summary())

    return context


def dumps(timeseries: TimeSeries, header_only=False, context=None) -> str:
    out = io.StringIO()
    dump(timeseries, out, header_only=header_only, context=context)

    return out.getvalue()
