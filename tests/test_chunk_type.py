import pytest

from pngstash.exceptions import InvalidTypeNameException
from pngstash.images.png import ChunkType


def test_chunk_type_from_bytes():
    expected = bytes([82, 117, 83, 116])
    actual = ChunkType.from_bytes(bytes([82, 117, 83, 116]))

    assert actual.bytes == expected


def test_chunk_type_from_name():
    expected = ChunkType.from_bytes(bytes([82, 117, 83, 116]))
    actual = ChunkType.from_name('RuSt')

    assert actual == expected
    assert hash(actual) == hash(expected)
    assert str(actual) == 'RuSt'


@pytest.mark.parametrize('name', [
    'Ru1t',
    'RuS',
    'RuStt',
    '',
    'Ru t',
    'RüSt',  # letter but not ASCII
])
def test_chunk_type_from_invalid_name(name):
    with pytest.raises(InvalidTypeNameException):
        ChunkType.from_name(name)


def test_chunk_type_invalid_name_is_value_error():
    with pytest.raises(ValueError):
        ChunkType.from_name('1234')


def test_chunk_type_from_bytes_wrong_size():
    with pytest.raises(ValueError):
        ChunkType.from_bytes(b'RuStt')


def test_chunk_type_is_critical():
    assert ChunkType.from_name('RuSt').is_critical()
    assert not ChunkType.from_name('ruSt').is_critical()


def test_chunk_type_is_public():
    assert ChunkType.from_name('RUSt').is_public()
    assert not ChunkType.from_name('RuSt').is_public()


def test_chunk_type_is_reserved_bit_valid():
    assert ChunkType.from_name('RuSt').is_reserved_bit_valid()
    assert not ChunkType.from_name('Rust').is_reserved_bit_valid()


def test_chunk_type_is_safe_to_copy():
    assert ChunkType.from_name('RuSt').is_safe_to_copy()
    assert not ChunkType.from_name('RuST').is_safe_to_copy()


def test_chunk_type_is_valid():
    assert ChunkType.from_name('RuSt').is_valid()
    assert not ChunkType.from_name('Rust').is_valid()


def test_chunk_type_from_bytes_is_not_validated():
    """Types read from a file are accepted as they are, only is_valid() tells"""
    chunk_type = ChunkType.from_bytes(b'Ru1t')

    assert chunk_type.bytes == b'Ru1t'
    assert str(chunk_type) == 'Ru1t'
    assert not chunk_type.is_valid()


def test_chunk_type_not_ascii_renders():
    chunk_type = ChunkType.from_bytes(b'\x00\xff\x10A')

    assert len(str(chunk_type)) == 4
    assert not chunk_type.is_valid()


def test_chunk_type_standard_types():
    ihdr = ChunkType.from_name('IHDR')
    text = ChunkType.from_name('tEXt')

    assert ihdr.is_critical() and ihdr.is_public() and not ihdr.is_safe_to_copy()
    assert not text.is_critical() and text.is_public() and text.is_safe_to_copy()


def test_chunk_type_equality():
    assert ChunkType.from_name('RuSt') != ChunkType.from_name('Rust')
    assert ChunkType.from_name('RuSt') != 'RuSt'
    assert len({ChunkType.from_name('RuSt'), ChunkType.from_bytes(b'RuSt')}) == 1


@pytest.mark.parametrize('raw', [
    b'RuSt',
    b'rUsT',
    bytes([0x20, 0x00, 0x20, 0x20]),
    b'\x00\xff\x10A',
])
def test_chunk_type_property_bits(raw):
    """The property bits are the fifth bit (value 32) of each byte."""
    chunk_type = ChunkType.from_bytes(raw)

    assert [chunk_type._property_bit(_) for _ in range(4)] == [bool(_ & 0x20) for _ in raw]
    assert chunk_type.is_critical() == (not raw[0] & 0x20)
    assert chunk_type.is_public() == (not raw[1] & 0x20)
    assert chunk_type.is_reserved_bit_valid() == (not raw[2] & 0x20)
    assert chunk_type.is_safe_to_copy() == bool(raw[3] & 0x20)
