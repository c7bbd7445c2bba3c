"""
Core module for the abstraction of a file format

"""
import logging
from typing import Tuple, List

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import PNGStashException


logger = logging.getLogger(__name__)


class Chunk(metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: a subclass
    declares its fields as class attributes, in the order they appear in the
    binary representation

        class TLV(Chunk):
            type   = fields.StructField('I')
            length = fields.StructField('I')
            data   = fields.StringField(Dependency('.length'))

    An instance is a record: it's created passing the values by name (the fields
    depending on other ones are derived) or unpacking it from a stream. After that
    the values are read-only.
    """

    def __init__(self, **kwargs):
        unknown = [_ for _ in kwargs if _ not in self._meta.fields]
        if unknown:
            raise TypeError(f'{self.__class__.__name__} has no field(s) named {", ".join(unknown)}')

        for field_name, field in self.get_fields():
            value = kwargs[field_name] if field_name in kwargs else field.value_from_default()
            self._set_value(field_name, field.to_python(value))

        self.relayout()

    @classmethod
    def from_stream(cls, stream):
        '''Build a record reading it from the actual offset of the stream.'''
        instance = cls.__new__(cls)
        instance.unpack(stream)

        return instance

    @classmethod
    def decode(cls, data):
        '''Build a record from a buffer of bytes (use from_stream() for anything else).'''
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f'{cls.__name__}.decode() needs bytes, not {data.__class__.__name__}')

        return cls.from_stream(Stream(data))

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, field) for each field.'''
        return [(_, getattr(self.__class__, _)) for _ in self.get_ordered_fields_name()]

    def _get_value(self, name):
        return self.__dict__[name]

    def _set_value(self, name, value):
        self.__dict__[name] = value

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(getattr(self, field_name))))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name in self._meta.fields:
            msg += '%s: %s\n' % (field_name, repr(getattr(self, field_name)))
        return msg

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented

        return all(self._get_value(_) == other._get_value(_) for _ in self._meta.fields)

    @property
    def size(self):
        '''the size MUST be derived from the fields'''
        size = 0
        for field_name, field in self.get_fields():
            size += field.size_of(self._get_value(field_name))

        return size

    @property
    def raw(self):
        return self.pack()

    def encode(self) -> bytes:
        return self.pack()

    def relayout(self):
        '''This method triggers the negotiation between fields: the fields whose
        value depends on the others (sizes, checksums) are recalculated.'''
        for field_name, field in self.get_fields():
            value = self._get_value(field_name)
            for attribute, dependency in field.get_dependencies().items():
                logger.debug('relayouting %s.%s (%s)' % (self.__class__.__name__, field_name, attribute))
                dependency.resolve_and_set(self, field.size_of(value))

        for field_name, field in self.get_fields():
            field.update(self)

    def pack(self):
        '''Encode the record into its binary representation.'''
        stream = Stream(b'')

        for field_name, field in self.get_fields():
            logger.debug('packing %s.%s' % (self.__class__.__name__, field_name))
            stream.write(field.pack(self._get_value(field_name)))

        return stream.getvalue()

    def unpack(self, stream):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        The fields are read in order, each one starting where the previous ended
        and checked as soon as it's read, so that the error reported is the first
        one encountered. When something goes wrong the name of the field is appended
        to the chain of the exception.
        '''
        for field_name, field in self.get_fields():
            logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, stream.tell()))

            try:
                self._set_value(field_name, field.unpack(stream, self))
                field.validate(self)
            except PNGStashException as e:
                e.chain.append(field_name)
                raise
