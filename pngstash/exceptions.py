class PNGStashException(Exception):
    '''Base class to extend in order to throw exception in pngstash.

    It takes as optional argument the chain of the layers that caused
    the exception, innermost first, so that a failure deep into a file
    can be reported as "chunks.2.crc".
    '''

    def __init__(self, msg=None, chain=None):
        self.msg = msg
        self.chain = chain if chain is not None else []
        super().__init__(msg)

    @property
    def path(self):
        return '.'.join(self.chain[::-1])

    def __str__(self):
        msg = self.msg or self.__class__.__name__
        if not self.chain:
            return msg

        return f'{msg} (at {self.path})'


class UnpackException(PNGStashException):
    '''Something went wrong decoding a binary stream.'''
    pass


class InvalidHeaderException(UnpackException):
    '''The magic at the start of the stream is missing or wrong.'''
    pass


class TruncatedException(UnpackException):
    '''The stream ended before a field could be read completely, or
    there is data left after the last complete element.'''
    pass


class ChecksumMismatchException(UnpackException):
    pass


class InvalidTypeNameException(PNGStashException, ValueError):
    pass


class InvalidEncodingException(PNGStashException, ValueError):
    pass


class ChunkNotFoundException(PNGStashException, KeyError):
    pass
