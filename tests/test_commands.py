import pytest
from PIL import Image

from pngstash import commands
from pngstash.exceptions import (
    ChunkNotFoundException,
    InvalidHeaderException,
    InvalidTypeNameException,
)
from pngstash.images.png import PNGFile, PNG_MAGIC


def test_encode_decode(png_path):
    chunk = commands.encode(png_path, 'ruSt', 'This is a secret message')

    assert chunk.data == b'This is a secret message'
    assert commands.decode(png_path, 'ruSt') == 'This is a secret message'
    assert PNGFile.from_path(png_path).chunks[-1] == chunk

    with Image.open(png_path) as image:
        assert image.size == (5, 5)


def test_encode_output(png_path, png_bytes, tmp_path):
    output = tmp_path / 'output.png'

    commands.encode(png_path, 'ruSt', 'message', output=output)

    assert png_path.read_bytes() == png_bytes
    assert commands.decode(output, 'ruSt') == 'message'


def test_encode_missing_file(tmp_path):
    path = tmp_path / 'new.png'

    chunk = commands.encode(path, 'ruSt', 'hello')

    assert path.read_bytes() == PNG_MAGIC + chunk.encode()


def test_encode_invalid_type(png_path, png_bytes):
    with pytest.raises(InvalidTypeNameException):
        commands.encode(png_path, 'ru5t', 'message')

    assert png_path.read_bytes() == png_bytes


def test_encode_not_a_png(tmp_path):
    path = tmp_path / 'file.txt'
    path.write_bytes(b'just some text')

    with pytest.raises(InvalidHeaderException):
        commands.encode(path, 'ruSt', 'message')

    assert path.read_bytes() == b'just some text'


def test_decode_missing_chunk(png_path):
    with pytest.raises(ChunkNotFoundException):
        commands.decode(png_path, 'ruSt')


def test_remove(png_path, png_bytes):
    commands.encode(png_path, 'ruSt', 'first')
    commands.encode(png_path, 'ruSt', 'second')

    removed = commands.remove(png_path, 'ruSt')

    assert removed.data_as_string() == 'first'
    assert commands.decode(png_path, 'ruSt') == 'second'

    commands.remove(png_path, 'ruSt')

    assert png_path.read_bytes() == png_bytes

    with pytest.raises(ChunkNotFoundException):
        commands.remove(png_path, 'ruSt')

    assert png_path.read_bytes() == png_bytes


def test_print_chunks(png_path):
    commands.encode(png_path, 'ruSt', 'message')

    listing = commands.print_chunks(png_path)

    assert 'type: IHDR' in listing
    assert 'type: ruSt, data: 7 bytes' in listing
