'''
Declarative layouts: a chunk lists its fields as class attributes

    class ScalData(Chunk):
        scalar_one = StructField('d')
        scalar_two = StructField('d')

and the metaclass records their names, in the order they are on the wire,
into ``_meta.fields``. The class attribute becomes a descriptor that hands
to every instance its own copy of the declared field.
'''
import copy
import logging


logger = logging.getLogger(__name__)


class FieldDescriptor(object):
    '''Per-instance access to a declared field; on the class it returns the
    declared field itself, useful to inspect the layout (e.g. its size).'''

    def __init__(self, prototype, name):
        self.prototype = prototype
        self.prototype.name = name

    @property
    def name(self):
        return self.prototype.name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self.prototype

        fields = instance.__dict__
        if self.name not in fields:
            fields[self.name] = self.prototype.create(father=instance)

        return fields[self.name]

    def __set__(self, instance, value):
        '''assigning to the attribute sets the value of the field'''
        self.__get__(instance).value = value


class FieldBase(object):

    def contribute_to_chunk(self, cls, name):
        # a field cannot hide an attribute, "size" and "value" for example
        if hasattr(cls, name):
            raise AttributeError(f"field '{name}' hides an attribute of class {cls.__name__}")

        setattr(cls, name, FieldDescriptor(self, name))

    def create(self, father):
        instance = copy.deepcopy(self)
        instance.father = father

        return instance


class Meta(object):
    '''Layout of a chunk'''

    def __init__(self, fields=None):
        self.fields = list(fields or [])


class MetaChunk(type):

    def __new__(mcs, name, bases, attrs):
        declared = [(_, value) for _, value in attrs.items() if isinstance(value, FieldBase)]
        others = {_: value for _, value in attrs.items() if not isinstance(value, FieldBase)}

        new_cls = super().__new__(mcs, name, bases, others)

        # the fields of the parents come first
        inherited = []
        for base in bases:
            for field_name in getattr(base, '_meta', Meta()).fields:
                if field_name not in inherited:
                    inherited.append(field_name)
        new_cls._meta = Meta(inherited)

        for field_name, field in declared:
            new_cls.add_field(field_name, field)

        return new_cls

    def add_field(cls, name, field):
        logger.debug('%s.%s is %r', cls.__name__, name, field)
        field.contribute_to_chunk(cls, name)
        cls._meta.fields.append(name)
