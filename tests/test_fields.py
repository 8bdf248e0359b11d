import pytest

from codarts.exceptions import UnpackException
from codarts.fields import StructField, StringField, FourCCField
from codarts.streams import Stream
from codarts.timeseries.fields import MacTimestampField, SampleArrayField


def test_structfield_wire_is_big_endian():
    field = StructField('I')

    assert field.size == 4
    assert field.value == 0
    assert field.pack() == b'\x00\x00\x00\x00'

    field.value = 0xcafe

    assert field.pack() == b'\x00\x00\xca\xfe'


def test_structfield_unpack():
    field = StructField('i')
    field.unpack(Stream(b'\xff\xff\xff\xfe'))

    assert field.value == -2

    field = StructField('d')
    field.unpack(Stream(b'\x40\x08\x00\x00\x00\x00\x00\x00'))

    assert field.value == 3.0


def test_structfield_unpack_short():
    field = StructField('I', name='count')

    with pytest.raises(UnpackException) as e:
        field.unpack(Stream(b'\x00\x01'))

    assert e.value.chain == ['count']


def test_structfield_text():
    field = StructField('d', default=2.0)

    assert field.to_text() == '2.00000000000000000000'

    field.from_text(' 4800000.5 ')

    assert field.value == 4800000.5

    field = StructField('I', formatter='%x', base=16)
    field.from_text('ff')

    assert field.value == 0xff
    assert field.to_text() == 'ff'


def test_structfield_text_out_of_range():
    field = StructField('I')

    with pytest.raises(ValueError):
        field.from_text('-1')

    with pytest.raises(ValueError):
        field.from_text('kebab')


def test_stringfield():
    field = StringField(0x10)

    assert field.size == 0x10
    assert field.pack() == b'\x00' * field.size

    with pytest.raises(ValueError):
        field.value = b'a' * 0x11

    field.value = b'kebab'

    assert field.value == b'kebab' + b'\x00' * 11
    assert field.to_text() == 'kebab'


def test_stringfield_text_stops_at_nul():
    field = StringField(8)
    field.unpack(Stream(b'abc\x00def\x00'))

    assert field.to_text() == 'abc'

    field.from_text('\xe8')

    assert field.value == b'\xe8' + b'\x00' * 7


def test_fourccfield():
    field = FourCCField()

    field.from_text('TS')

    assert field.value == b'TS  '
    assert field.to_text() == 'TS  '

    field.from_text('toolong')

    assert field.value == b'tool'


def test_mac_timestamp():
    field = MacTimestampField()

    assert field.to_text() == 'unset'
    assert field.unix_time is None

    field.from_text('0')

    assert field.value == 2082844800
    assert field.to_text() == '0 (NB: seconds since 1970) (Thu Jan  1 00:00:00 1970)'

    field.from_text('unset')

    assert field.value == 0


def test_mac_timestamp_round_trip():
    field = MacTimestampField()
    field.from_text('1600000000 (NB: seconds since 1970) (Sun Sep 13 12:26:40 2020)')

    assert field.unix_time == 1600000000
    assert field.to_text().startswith('1600000000 ')


def test_mac_timestamp_out_of_range():
    field = MacTimestampField()

    with pytest.raises(ValueError):
        field.from_text('%d' % (2 ** 32))


def test_sample_array():
    field = SampleArrayField()

    assert len(field) == 0
    assert field.size == 0

    field.unpack(Stream(b'\x00\x01\xff\xff\x7f\xff\x80\x00'))

    assert len(field) == 2
    assert field.size == 8
    assert field.value.tolist() == [[1, -1], [32767, -32768]]
    assert field.pack() == b'\x00\x01\xff\xff\x7f\xff\x80\x00'


def test_sample_array_rejects_floats():
    field = SampleArrayField()

    with pytest.raises(ValueError):
        field.value = [1.5, 2.0]
