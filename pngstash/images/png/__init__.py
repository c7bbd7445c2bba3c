'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html> and
is available a full test-suite with a lot of PNG images covering all
the possible cases at <http://www.schaik.com/pngsuite/>.

Here we are interested only in the container: a magic followed by a list of
chunks, each one with a type, a payload and a checksum. The payloads are never
interpreted, so it's possible to hide a message inside a file adding a chunk
with a private type that the decoders are going to ignore.
'''
import logging
import string

from bitstring import Bits

from ...core import Chunk
from ... import (
    fields,
)
from ...meta import Endianess
from ...properties import Dependency
from ...common import crc
from ...streams import Stream
from ...exceptions import (
    InvalidTypeNameException,
    InvalidEncodingException,
    ChunkNotFoundException,
)


logger = logging.getLogger(__name__)


PNG_MAGIC = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


class ChunkType(object):
    '''The four bytes identifying the kind of a chunk.

    The type codes are restricted to consist of uppercase and lowercase ASCII letters
    and the case of each letter (i.e. the bit in position 5, value 32) gives
    a property of the chunk

     1. ancillary bit (first byte): 0 means critical, i.e. necessary to display the image
     2. private bit (second byte): 0 means public, i.e. part of the specification
     3. reserved bit (third byte): must be 0 in files conforming to this version of PNG
     4. safe-to-copy bit (fourth byte): 1 means that the chunk can be copied by an editor
        that doesn't recognize it even if the image data has been modified

    See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.

    A type read from a file is taken as it is: use is_valid() to check it follows the rules.
    '''
    SIZE = 4
    PROPERTY_BIT = 2  # bit with value 32 counting from the most significant

    def __init__(self, raw: bytes):
        if len(raw) != self.SIZE:
            raise ValueError(f'a chunk type must be {self.SIZE} bytes, not {len(raw)}')

        self._raw = bytes(raw)
        self._bits = Bits(self._raw)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "ChunkType":
        return cls(raw)

    @classmethod
    def from_name(cls, name: str) -> "ChunkType":
        if not isinstance(name, str) or len(name) != cls.SIZE or not all(_ in string.ascii_letters for _ in name):
            raise InvalidTypeNameException(msg=f'{name!r} is not a valid chunk type: it must be {cls.SIZE} ASCII letters')

        return cls(name.encode('ascii'))

    @property
    def bytes(self) -> bytes:
        return self._raw

    def _property_bit(self, index: int) -> bool:
        return self._bits[index * 8 + self.PROPERTY_BIT]

    def is_critical(self) -> bool:
        return not self._property_bit(0)

    def is_public(self) -> bool:
        return not self._property_bit(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._property_bit(2)

    def is_safe_to_copy(self) -> bool:
        return self._property_bit(3)

    def is_valid(self) -> bool:
        return all(chr(_) in string.ascii_letters for _ in self._raw) and self.is_reserved_bit_valid()

    def __str__(self):
        return self._raw.decode('latin1')

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._raw!r})>'

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)


class ChunkTypeField(fields.StringField):
    '''Four bytes unpacked as a ChunkType'''

    def __init__(self, **kw):
        super().__init__(ChunkType.SIZE, **kw)

    def value_from_default(self):
        return self.default

    def to_python(self, value):
        if isinstance(value, ChunkType):
            return value
        if isinstance(value, str):
            return ChunkType.from_name(value)

        return ChunkType.from_bytes(super().to_python(value))

    def size_of(self, value):
        return ChunkType.SIZE

    def pack(self, value):
        return value.bytes

    def unpack(self, stream, instance):
        return ChunkType.from_bytes(super().unpack(stream, instance))


class PNGChunk(Chunk):
    '''This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each field is intended big-endian.

    The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.

    # Critical chunks

     1. IHDR: contains image's width, height, bit depth, color type, compression method, filter method and interlace method
     2. PLTE: contains the palette data
     3. IDAT: contains the actual image data (compressed)
     4. IEND: is the terminator chunk

    A chunk is built from its type and its data, the length and the crc follow

        >>> chunk = PNGChunk('RuSt', b'This is where your secret message will be!')
        >>> chunk.length, chunk.crc
        (42, 2882656334)
    '''
    length = fields.StructField('I', endianess=Endianess.BIG_ENDIAN)
    type   = ChunkTypeField()
    data   = fields.StringField(Dependency('.length'))
    crc    = crc.CRCField(['type', 'data'], endianess=Endianess.NETWORK)

    def __init__(self, chunk_type, data):
        if isinstance(data, str):
            data = data.encode('utf-8')

        super().__init__(type=chunk_type, data=data)

    @property
    def chunk_type(self) -> ChunkType:
        return self.type

    def data_as_string(self) -> str:
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidEncodingException(msg=f'data of chunk {self.type} is not valid UTF-8: {e}')

    def __str__(self):
        return 'Chunk {length: %d, type: %s, data: %d bytes, crc: 0x%08x}' % (
            self.length,
            self.type,
            len(self.data),
            self.crc,
        )


class PNGFile(Chunk):
    '''The file is the magic followed by the chunks, there is no
    padding between them and nothing after the last one.

    Chunks can be added and removed by type, the order is preserved and it's
    the one used when packing the file. No rule about the order of the chunks
    (like IHDR first and IEND last) is enforced.
    '''
    STANDARD_HEADER = PNG_MAGIC

    header = fields.StringField(8, default=PNG_MAGIC, is_magic=True)
    chunks = fields.ArrayField(PNGChunk)

    def __init__(self, chunks=None):
        super().__init__(chunks=chunks if chunks is not None else [])

    @classmethod
    def from_chunks(cls, chunks) -> "PNGFile":
        '''The chunks are trusted as they are'''
        return cls(chunks)

    @classmethod
    def from_path(cls, path) -> "PNGFile":
        logger.debug('decoding PNG from \'%s\'' % path)
        return cls.from_stream(Stream(path))

    def __iter__(self):
        return iter(self.chunks)

    def chunk_by_type(self, name: str):
        '''Returns the first chunk with the given type or None.'''
        for chunk in self._get_value('chunks'):
            if str(chunk.type) == name:
                return chunk

        return None

    def append_chunk(self, chunk: PNGChunk):
        logger.debug('appending %s' % chunk)
        self._get_value('chunks').append(chunk)

    def remove_chunk(self, name: str) -> PNGChunk:
        '''Removes the first chunk with the given type and returns it.'''
        chunks = self._get_value('chunks')

        for idx, chunk in enumerate(chunks):
            if str(chunk.type) == name:
                logger.debug('removing chunk #%d %s' % (idx, chunk))
                return chunks.pop(idx)

        raise ChunkNotFoundException(msg=f'no chunk with type {name!r}')

    def __str__(self):
        msg = 'PNG {\n'
        for idx, chunk in enumerate(self.chunks):
            msg += '  [%02d] %s\n' % (idx, chunk)
        msg += '}'

        return msg
