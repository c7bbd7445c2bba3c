"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable from a stream.

The field instances are declared at class level in a Chunk and they are shared
between all the records of that class: they describe how to encode and decode a
value, the values themselves live in the records.
"""
import logging
import struct
from typing import Dict

from .meta import FieldBase, Endianess
from .properties import Dependency
from .exceptions import (
    PNGStashException,
    UnpackException,
    InvalidHeaderException,
    TruncatedException,
)


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, default=None, endianess=Endianess.LITTLE_ENDIAN, is_magic=False):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.default = default
        self.endianess = endianess
        self.is_magic = is_magic

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.name)

    def value_from_default(self):
        return self.default

    def to_python(self, value):
        '''Normalize a value passed by the user when a record is built'''
        return value

    def view(self, value):
        '''What is returned accessing the field from a record'''
        return value

    def get_dependencies(self) -> Dict[str, Dependency]:
        """Return the dictionary containing as key the attribute depending on another field"""
        instance_dict = self.__dict__
        return {_k: _v for _k, _v in instance_dict.items() if isinstance(_v, Dependency)}

    def size_of(self, value) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.size_of() not implemented")

    def pack(self, value) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.pack() not implemented")

    def unpack(self, stream, instance):
        '''Read the value from the stream, the instance is the record we are
        unpacking and it's used to resolve the dependencies.'''
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack() not implemented")

    def update(self, instance):
        '''This is used to update the value derived from other fields before packing'''
        pass

    def validate(self, instance):
        '''Called just after the field has been unpacked'''
        pass


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def get_format(self):
        if self.endianess in (Endianess.BIG_ENDIAN, Endianess.NETWORK):
            prefix = '>'
        elif self.endianess == Endianess.NATIVE:
            prefix = '='
        else:
            prefix = '<'

        return '%s%s' % (prefix, self.format)

    def to_python(self, value):
        if not isinstance(value, int):
            raise TypeError(f"field '{self.name}' accepts only integers, not {value.__class__.__name__}")

        return value

    def size_of(self, value=None):
        return struct.calcsize(self.get_format())

    def pack(self, value):
        try:
            return struct.pack(self.get_format(), value)
        except struct.error as e:
            raise ValueError(f"value {value!r} doesn't fit into field '{self.name}': {e}")

    def unpack(self, stream, instance):
        raw = stream.read_exactly(self.size_of())

        try:
            return struct.unpack(self.get_format(), raw)[0]
        except struct.error as e:
            self.logger.error(e)
            raise UnpackException(msg=str(e))


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    Its length can be fixed or can depend on another field

        data = StringField(Dependency('.length'))

    If "is_magic" is set, the default is the only value accepted when unpacking.
    """

    def __init__(self, n=None, **kw):
        if n is None and kw.get('default') is None:
            raise ValueError("StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s, length=%r)>' % (self.__class__.__name__, self.name, self.length)

    def value_from_default(self):
        if self.default is not None:
            return self.default

        return b'\x00' * self.length if isinstance(self.length, int) else b''

    def to_python(self, value):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"field '{self.name}' accepts only bytes, not {value.__class__.__name__}")

        value = bytes(value)

        if isinstance(self.length, int) and len(value) != self.length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self.length} bytes)')

        return value

    def size_of(self, value):
        return len(value)

    def pack(self, value):
        return value

    def get_length(self, instance):
        if isinstance(self.length, Dependency):
            return self.length.resolve(instance)

        return self.length

    def unpack(self, stream, instance):
        length = self.get_length(instance)

        try:
            return stream.read_exactly(length)
        except TruncatedException as e:
            if not self.is_magic:
                raise
            raise InvalidHeaderException(msg=f'not enough data for the magic: {e.msg}')

    def validate(self, instance):
        if not self.is_magic:
            return

        value = instance._get_value(self.name)

        if value != self.default:
            self.logger.warning('the magic doesn\'t correspond')
            raise InvalidHeaderException(msg=f'expected magic {self.default!r}, found {value!r}')


class ArrayField(Field):
    '''Un/Pack an array of Chunks.

    The elements are unpacked one after the other until the stream is exhausted:
    a partial element at the end is an error like any other failure of its
    unpacking. Accessing the field gives back a read-only view (a tuple).
    '''

    def __init__(self, element_cls, **kw):
        self.element_cls = element_cls
        super().__init__(**kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name}, {self.element_cls.__name__})>'

    def value_from_default(self):
        return []

    def to_python(self, value):
        return list(value)

    def view(self, value):
        return tuple(value)

    def size_of(self, value):
        return sum(element.size for element in value)

    def pack(self, value):
        return b''.join(element.raw for element in value)

    def unpack(self, stream, instance):
        elements = []
        while not stream.at_end():
            self.logger.debug('unpacking element #%d of \'%s\' at offset %d' % (len(elements), self.name, stream.tell()))
            try:
                element = self.element_cls.from_stream(stream)
            except PNGStashException as e:
                e.chain.append(str(len(elements)))
                raise

            elements.append(element)

        return elements
