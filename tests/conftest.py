import struct

import pytest


MAC_EPOCH_OFFSET = 2082844800
UNIX_TIME = 1600000000

SCALE_I = 3.0
SCALE_Q = 5.0
STORED = [(16383, -16384), (0, 0), (32767, 16000)]


def block(tag, payload=b'', size=None):
    '''A raw block, by default with the size of its payload.'''
    return struct.pack('>4sI', tag, len(payload) if size is None else size) + payload


def container_file(head, body, end=True):
    '''Wrap the raw blocks as they appear in a TS file.'''
    head = b''.join(head)
    body = b''.join(body)

    return (
        block(b'AQLV', size=16 + len(head) + len(body))
        + block(b'HEAD', size=len(head)) + head
        + block(b'BODY', size=len(body)) + body
        + (block(b'END ') if end else b'')
    )


def sign_payload():
    return struct.pack(
        '>4s4s4sI64s64s64s',
        b'1   ', b'TS  ', b'SITE', 0xff,
        b'a description', b'an owner', b'a comment')


def head_blocks(sample_type=b'fix2'):
    return [
        block(b'sign', sign_payload()),
        block(b'mcda', struct.pack('>I', UNIX_TIME + MAC_EPOCH_OFFSET)),
        block(b'cnst', struct.pack('>4i', 3, 32, 2048, 2)),
        block(b'swep', struct.pack('>idddi', 2048, 4800000.0, -25734.0, 2.0, 0)),
        block(b'fbin', b'cviq' + sample_type),
    ]


def body_blocks(stored=STORED, scales=(SCALE_I, SCALE_Q)):
    samples = struct.pack('>%dh' % (2 * len(stored)), *[_ for pair in stored for _ in pair])
    return [
        block(b'indx', struct.pack('>I', 7)),
        block(b'scal', struct.pack('>dd', *scales)),
        block(b'alvl', samples),
    ]


@pytest.fixture
def ts_bytes():
    '''A complete file with a single sweep.'''
    return container_file(head_blocks(), body_blocks())


@pytest.fixture
def ts_text():
    return '''AQLV

HEAD

sign
version:1
filetype:TS
sitecode:SITE
userflags:ff
description:a description
ownername:an owner
comment:a comment

mcda
timestamp:1600000000

cnst
nchannels:3
nsweeps:32
nsamples:2048
iqindicator:2

swep
samplespersweep:2048
sweepstart:4800000.0
sweepbandwidth:-25734.0
sweeprate:2.0
rangeoffset:0

fbin
format:cviq
type:fix2

BODY

indx
index:7

scal
scalar_one:3.0
scalar_two:5.0

alvl
i:1.49995422223578
q:-2.50007629627369
i:0
q:0
i:3.0
q:2.44148075807977

END
'''
