import io
import logging

from .exceptions import TruncatedException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/path objects to
    uniform their properties: everything is loaded in memory and
    accessed like a normal file object with a cursor.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is not something we can stream from' % self._type.__name__)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return '<%s(%s, offset=%d)>' % (self.__class__.__name__, self._type.__name__, self.tell())

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        with open(self.obj, 'rb') as f:
            self.obj = io.BytesIO(f.read())

    def init_PosixPath(self):
        self.obj = str(self.obj)
        self.init_str()

    def init_WindowsPath(self):
        self.init_PosixPath()

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

        return self

    def __len__(self):
        return len(self.obj.getbuffer())

    @property
    def remaining(self):
        return len(self) - self.tell()

    def at_end(self):
        return self.remaining <= 0

    def read_exactly(self, size):
        '''Read exactly "size" bytes or fail without moving the cursor.'''
        if size < 0:
            raise ValueError('cannot read %d bytes' % size)

        if size > self.remaining:
            raise TruncatedException(
                msg='needed %d bytes at offset %d but only %d are available' % (size, self.tell(), self.remaining))

        return self.obj.read(size)

    def read_all(self):
        '''Returns all the data from the cursor to the end of the stream.'''
        return self.obj.read()

    def write(self, data):
        return self.obj.write(data)

