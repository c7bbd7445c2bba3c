'''
The operations available from the command line: each one works on a file
path, the PNG is read completely in memory, modified and written back.
'''
import logging
from pathlib import Path

from .images.png import PNGFile, PNGChunk, ChunkType
from .exceptions import ChunkNotFoundException


logger = logging.getLogger(__name__)


def load(path) -> PNGFile:
    return PNGFile.from_path(path)


def save(png: PNGFile, path):
    data = png.encode()
    logger.debug(f'writing {len(data)} bytes to \'{path}\'')
    with open(path, 'wb') as f:
        f.write(data)


def encode(path, chunk_type, message, output=None) -> PNGChunk:
    '''Append a chunk with the message to the file. If the file doesn't exist
    we start from a PNG without chunks.'''
    path = Path(path)

    if path.exists():
        png = load(path)
    else:
        logger.info(f'\'{path}\' doesn\'t exist, starting from an empty PNG')
        png = PNGFile()

    chunk = PNGChunk(ChunkType.from_name(chunk_type), message)
    png.append_chunk(chunk)

    save(png, output if output is not None else path)

    return chunk


def decode(path, chunk_type) -> str:
    '''Returns the message contained into the first chunk of the given type.'''
    png = load(path)

    chunk = png.chunk_by_type(chunk_type)

    if chunk is None:
        raise ChunkNotFoundException(msg=f'no chunk with type {chunk_type!r} in \'{path}\'')

    return chunk.data_as_string()


def remove(path, chunk_type) -> PNGChunk:
    png = load(path)

    chunk = png.remove_chunk(chunk_type)

    save(png, path)

    return chunk


def print_chunks(path) -> str:
    return str(load(path))
