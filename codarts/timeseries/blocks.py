'''
# Blocks of a CODAR SeaSonde Time Series file

A TS file is a sequence of blocks, each one composed of an 8 bytes header
(a four characters tag and the size of the data that follows) and the data.

Four tags are containers: their data is the sequence of the blocks they
enclose and the blocks are flattened in the file like

    AQLV
      HEAD
        sign mcda cnst swep fbin gtag atag indx scal
      BODY
        alvl alvl ...
    END

All the other tags are leaves with a fixed layout, except alvl that contains
a variable number of (I, Q) samples.

Every type of block is a class having four capabilities:

 1. from_wire(): build the data from the bytes of the file
 2. from_text(): build the data from the lines of its textual representation
 3. dump(): generate the lines of its textual representation
 4. pack(): generate the bytes of the file

Dumping and generating share a Context since the alvl blocks need the sample
type and the scale factors found in fbin and scal.
'''
import logging

import numpy as np

from ..core import Chunk
from .. import fields
from ..byteorder import HOST
from ..samples import descale, quantize
from ..exceptions import (
    UnknownBlockException,
    TruncatedBlockException,
    ParameterException,
    SampleCountException,
)
from .enum import (
    BlockTag,
    SIZE_DESCRIPTION,
    SIZE_OWNERNAME,
    SIZE_COMMENT,
    BINFORMAT_CVIQ,
)
from .fields import MacTimestampField, SampleArrayField


logger = logging.getLogger(__name__)


class Payload(Chunk):
    '''Base class for the data of the blocks.'''
    tag = None
    container = False
    # if None the size of the fields is used
    minimum_size = None

    @classmethod
    def from_wire(cls, view, order=HOST):
        needed = cls.minimum_size if cls.minimum_size is not None else cls.wire_size()
        if len(view) < needed:
            raise TruncatedBlockException(chain=[], message=f'block is truncated ({len(view)} bytes instead of {needed})')

        if cls.minimum_size is None and len(view) > needed:
            logger.debug('%s: ignoring %d bytes after the fields', cls.tag, len(view) - needed)

        return cls(view, order=order)

    @classmethod
    def from_text(cls, section, context):
        payload = cls()
        payload.load(section)
        payload.remember(context)

        return payload

    def load(self, section):
        for name, field in self.get_fields():
            text, line = section.get(name)
            try:
                field.from_text(text)
            except ValueError as e:
                raise ParameterException(section.tag, name, line, reason='cannot parse parameter') from e

    def dump(self, context):
        self.remember(context)

        return self.to_lines()

    def remember(self, context):
        '''Hook to update the context with what the following blocks need'''
        pass


class Container(Payload):
    '''The container markers have no data: they are represented
    by the blocks that follow them.'''
    container = True


class SignData(Payload):
    tag = BlockTag.SIGN

    version     = fields.FourCCField()
    filetype    = fields.FourCCField()
    sitecode    = fields.FourCCField()
    userflags   = fields.StructField('I', formatter='%x', base=16)
    description = fields.StringField(SIZE_DESCRIPTION)
    ownername   = fields.StringField(SIZE_OWNERNAME)
    comment     = fields.StringField(SIZE_COMMENT)


class McdaData(Payload):
    '''Timestamp of the first sweep.'''
    tag = BlockTag.MCDA

    timestamp = MacTimestampField()


class CnstData(Payload):
    tag = BlockTag.CNST

    nchannels   = fields.StructField('i')  # normally 3
    nsweeps     = fields.StructField('i')  # normally 32
    nsamples    = fields.StructField('i')  # normally 2048
    iqindicator = fields.StructField('i')  # 2 for IQ


class SwepData(Payload):
    '''Frequencies are in Hertz.'''
    tag = BlockTag.SWEP

    samplespersweep = fields.StructField('i')
    sweepstart      = fields.StructField('d')
    sweepbandwidth  = fields.StructField('d')
    sweeprate       = fields.StructField('d')
    rangeoffset     = fields.StructField('i')  # not used


class FbinData(Payload):
    '''Binary format of the samples in the alvl blocks.'''
    tag = BlockTag.FBIN

    format = fields.FourCCField(default=BINFORMAT_CVIQ)
    type   = fields.FourCCField()

    def remember(self, context):
        context.sample_type = self.type.value


class GtagData(Payload):
    tag = BlockTag.GTAG

    gtag = fields.StructField('I')


class AtagData(Payload):
    tag = BlockTag.ATAG

    atag = fields.StructField('I')


class IndxData(Payload):
    '''Index of the sweep.'''
    tag = BlockTag.INDX

    index = fields.StructField('I')

    def remember(self, context):
        context.set_index(self.index.value)


class ScalData(Payload):
    '''Scale factors for the I and Q samples.'''
    tag = BlockTag.SCAL

    scalar_one = fields.StructField('d')
    scalar_two = fields.StructField('d')

    def remember(self, context):
        context.set_scales(self.scalar_one.value, self.scalar_two.value)


class AlvlData(Payload):
    '''Samples, as pairs of lines "i:<value>" and "q:<value>" in the
    textual representation where the values are descaled.'''
    tag = BlockTag.ALVL
    minimum_size = SampleArrayField.UNIT

    samples = SampleArrayField()

    def dump(self, context):
        physical = descale(self.samples.value, context.sample_type, context.scales, index=context.index)
        context.add_samples(len(self.samples))

        lines = []
        for i, q in physical:
            lines.append('i:%.20f' % i)
            lines.append('q:%.20f' % q)

        return lines

    @staticmethod
    def _read_sample(section, entry, name):
        key, text, line = entry
        if key != name:
            raise ParameterException(section.tag, name, line, reason=f"found '{key}' instead of parameter")
        try:
            return float(text)
        except ValueError as e:
            raise ParameterException(section.tag, name, line, reason='cannot parse parameter') from e

    @classmethod
    def from_text(cls, section, context):
        entries = list(section)
        if not entries or len(entries) % 2:
            raise SampleCountException(
                [section.tag],
                f'cannot deal with {len(entries)} lines in block starting at line {section.line}')

        physical = np.empty((len(entries) // 2, 2), dtype=np.float64)
        for n in range(physical.shape[0]):
            physical[n, 0] = cls._read_sample(section, entries[2 * n], 'i')
            physical[n, 1] = cls._read_sample(section, entries[2 * n + 1], 'q')

        payload = cls()
        payload.samples.value = quantize(physical, context.sample_type, context.scales, index=context.index)
        context.add_samples(len(payload.samples))

        return payload


type2block = {
    BlockTag.AQLV: Container,
    BlockTag.HEAD: Container,
    BlockTag.BODY: Container,
    BlockTag.END:  Container,
}
type2block.update({
    _.tag: _ for _ in (
        SignData,
        McdaData,
        CnstData,
        SwepData,
        FbinData,
        GtagData,
        AtagData,
        IndxData,
        ScalData,
        AlvlData,
    )
})


def resolve(tag) -> BlockTag:
    '''Convert bytes (or str) into a known tag, failing for anything else.'''
    if isinstance(tag, BlockTag):
        return tag

    raw = tag.encode('latin-1') if isinstance(tag, str) else bytes(tag)
    # the trailing spaces are optional, e.g. 'END'
    raw = raw.ljust(4, b' ')
    try:
        return BlockTag(raw)
    except ValueError:
        raise UnknownBlockException(raw) from None


def lookup(tag) -> type:
    return type2block[resolve(tag)]
