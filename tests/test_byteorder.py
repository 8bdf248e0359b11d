import sys

import numpy as np
import pytest

from codarts.byteorder import ByteOrder, HOST


def test_host_detection():
    assert HOST.little_endian == (sys.byteorder == 'little')
    assert ByteOrder.detect() == HOST


def test_swap():
    assert ByteOrder.swap(b'\x01\x02', 2) == b'\x02\x01'
    assert ByteOrder.swap(b'\x01\x02\x03\x04', 4) == b'\x04\x03\x02\x01'
    assert ByteOrder.swap(b'\x01\x02\x03\x04', 2) == b'\x02\x01\x04\x03'
    assert ByteOrder.swap(bytes(range(8)), 8) == bytes(reversed(range(8)))


def test_swap_wrong_width():
    with pytest.raises(ValueError):
        ByteOrder.swap(b'\x01\x02\x03', 3)

    with pytest.raises(ValueError):
        ByteOrder.swap(b'\x01\x02\x03', 2)


def test_fixup():
    """Only a little-endian host needs to swap the wire values."""
    little = ByteOrder(True)
    big = ByteOrder(False)

    assert little.fixup(b'\xca\xfe\xba\xbe', 4) == b'\xbe\xba\xfe\xca'
    assert big.fixup(b'\xca\xfe\xba\xbe', 4) == b'\xca\xfe\xba\xbe'
    # it is its own inverse
    assert little.fixup(little.fixup(b'\x01\x02', 2), 2) == b'\x01\x02'


def test_immutable():
    with pytest.raises(AttributeError):
        HOST._little = not HOST.little_endian


def test_wire_dtype():
    dtype = HOST.wire_dtype(np.int16)

    assert dtype.byteorder == '>'
    assert np.frombuffer(b'\x00\x01\xff\xfe', dtype=dtype).tolist() == [1, -2]


def test_swap_views():
    """The values read from a stream are memoryview slices."""
    view = memoryview(b'\x00\x01\x02\x03\x04\x05')[2:]

    assert ByteOrder.swap(view, 4) == b'\x05\x04\x03\x02'
    assert ByteOrder(True).fixup(view[:2], 2) == b'\x03\x02'
