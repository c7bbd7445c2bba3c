import io
from pathlib import Path

import pytest
from PIL import Image

from pngstash.images.png.utils import chunk_from_strings


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def testing_chunks():
    return [
        chunk_from_strings('FrSt', 'I am the first chunk'),
        chunk_from_strings('miDl', 'I am another chunk'),
        chunk_from_strings('LASt', 'I am the last chunk'),
    ]


@pytest.fixture
def png_bytes():
    """A real 5x5 red image as encoded by Pillow"""
    image = Image.new('RGB', (5, 5), color='red')
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')

    return buffer.getvalue()


@pytest.fixture
def png_path(tmp_path, png_bytes):
    path = tmp_path / 'red.png'
    path.write_bytes(png_bytes)

    return path
