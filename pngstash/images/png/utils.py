import logging

from . import ChunkType, PNGChunk


logger = logging.getLogger(__name__)


def chunk_from_strings(chunk_type, data):
    '''Build a chunk carrying a text message, the type must be a valid name.'''
    logger.debug(f'building chunk {chunk_type!r} with {len(data)} characters')
    return PNGChunk(ChunkType.from_name(chunk_type), data.encode('utf-8'))


def get_chunks_by_name(chunks, name):
    '''All the chunks with the given type, in the order they appear.'''
    return list(filter(lambda x: str(x.type) == name, chunks))

