"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable without need for relayouting.

Each field knows two representations of its value: the binary one used on the
wire (pack()/unpack()) and the textual one used in the dump (to_text()/from_text()).
"""
import logging
import struct

from .byteorder import HOST
from .meta import FieldBase
from .exceptions import UnpackException


TEXT_ENCODING = 'latin-1'


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, father=None, default=None):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.father = father
        self.default = default

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def _get_value(self):
        return self._value

    def _set_value(self, value) -> None:
        self._value = value

    value = property(
        fget=lambda self: self._get_value(),
        fset=lambda self, value: self._set_value(value))

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def pack(self, order=HOST) -> bytes:
        raise NotImplementedError('you need to implement this in the subclass')

    def unpack(self, stream, order=HOST):
        raise NotImplementedError('you need to implement this in the subclass')

    def to_text(self) -> str:
        return str(self.value)

    def from_text(self, text: str) -> None:
        raise NotImplementedError(f"method {self.__class__.__name__}.from_text() not implemented")

    def _read(self, stream, size):
        raw = stream.read(size)
        if len(raw) != size:
            raise UnpackException(
                chain=[self.name] if self.name else [],
                message=f'needed {size} bytes, found {len(raw)}')

        return raw


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    numbers to/from bytes.

    The struct format is always used with the native order and standard size ("=")
    and the conversion from/to the wire order is delegated to the ByteOrder passed
    to pack()/unpack().
    """

    def __init__(self, format, default=0, formatter=None, base=10, **kw):
        self.format = format
        self.formatter = formatter or ('%.20f' if format in 'fd' else '%d')
        self.base = base
        super().__init__(default=default, **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.formatter % self.value)

    def get_format(self):
        return '=%s' % self.format

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _to_wire(self, raw, order):
        '''the values are big-endian on the wire, the swap is symmetric
        so this works in both the directions'''
        return order.fixup(raw, self.size)

    def pack(self, order=HOST) -> bytes:
        try:
            raw = struct.pack(self.get_format(), self.value)
        except struct.error as e:
            raise ValueError(f"field '{self.name}' cannot pack {self.value!r}: {e}") from e

        return self._to_wire(raw, order)

    def unpack(self, stream, order=HOST):
        raw = self._read(stream, self.size)
        self.value = struct.unpack(self.get_format(), self._to_wire(raw, order))[0]

        self.logger.debug('unpacked %s=%r', self.name, self.value)

    def to_text(self) -> str:
        return self.formatter % self.value

    def from_text(self, text: str) -> None:
        text = text.strip()
        if self.format in 'fd':
            self.value = float(text)
            return

        value = int(text, self.base)
        try:
            struct.pack(self.get_format(), value)
        except struct.error as e:
            raise ValueError(f'{value} does not fit into {self.size} bytes') from e

        self.value = value


class StringField(Field):
    """Represent a contiguous chunk of bytes with fixed length.

    Like a C string its textual representation stops at the first NUL byte;
    shorter values are padded with NUL bytes."""

    padding = b'\x00'

    def __init__(self, n, **kw):
        self.length = n
        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def __len__(self):
        return self.length

    def value_from_default(self):
        return self.padding * self.length if not self.default else self.default

    def _get_size(self):
        return self.length

    def _set_value(self, value) -> None:
        value = bytes(value)
        if len(value) > self.length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self.length} bytes)')

        super()._set_value(value.ljust(self.length, self.padding))

    def pack(self, order=HOST) -> bytes:
        return self.value

    def unpack(self, stream, order=HOST):
        self.value = self._read(stream, self.length)

    def to_text(self) -> str:
        return self.value.split(b'\x00')[0].decode(TEXT_ENCODING)

    def from_text(self, text: str) -> None:
        self.value = text.encode(TEXT_ENCODING)


class FourCCField(StringField):
    """Four characters code: they are printable so they are kept as bytes
    and there is no byte order to take care of."""

    padding = b' '

    def __init__(self, **kw):
        super().__init__(4, **kw)

    def to_text(self) -> str:
        return self.value.decode(TEXT_ENCODING)

    def from_text(self, text: str) -> None:
        text = text.rstrip('\r\n')
        if not text:
            raise ValueError('empty four characters code')

        self.value = text[:self.length].encode(TEXT_ENCODING)
