"""
Core module for the abstraction of a fixed layout record

"""
from typing import Tuple, List, Dict

from .byteorder import HOST
from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import UnpackException


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: it's an ordered
    collection of fields, declared as class attributes like

        class Example(Chunk):
            count = fields.StructField('i')
            label = fields.StringField(0x10)

    Each instance gets its own copy of the fields.

    If some data is passed with the constructor the chunk is unpacked from it
    straight away.
    """

    def __init__(self, data=None, order=HOST, **kwargs):
        super().__init__(**kwargs)

        # now we have setup all the fields necessary and we can unpack if
        # some data is passed with the constructor
        if data is not None:
            stream = data if isinstance(data, Stream) else Stream(data)
            self.logger.debug('unpacking \'%s\' from %s' % (self.__class__.__name__, stream))
            self.unpack(stream, order=order)

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def init(self):
        for _, field in self.get_fields():
            field.init()

    def _get_value(self) -> Dict[str, object]:
        return {name: field.value for name, field in self.get_fields()}

    def _set_value(self, value) -> None:
        for name, field_value in value.items():
            if name not in self._meta.fields:
                raise AttributeError(f"'{self.__class__.__name__}' has no field named '{name}'")
            getattr(self, name).value = field_value

    def _get_size(self):
        '''the size parameter MUST not be set but MUST be derived from the fields'''
        size = 0
        for _, field in self.get_fields():
            size += field.size

        return size

    @classmethod
    def wire_size(cls) -> int:
        return sum(getattr(cls, _).size for _ in cls._meta.fields)

    def pack(self, order=HOST) -> bytes:
        value = []
        for field_name, field_instance in self.get_fields():
            self.logger.debug('packing %s.%s' % (self.__class__.__name__, field_name))
            value.append(field_instance.pack(order=order))

        return b''.join(value)

    def unpack(self, stream, order=HOST):
        for field_name, field in self.get_fields():
            self.logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, stream.tell()))

            try:
                field.unpack(stream, order=order)
            except UnpackException as e:
                if not e.chain or e.chain[0] != field_name:
                    e.chain.insert(0, field_name)
                raise

    def to_lines(self) -> List[str]:
        '''The textual representation, one "name:value" line for each field.'''
        return ['%s:%s' % (name, field.to_text()) for name, field in self.get_fields()]
