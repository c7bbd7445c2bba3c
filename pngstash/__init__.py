"""
# pngstash: hide messages into PNG files.

A PNG file is a magic followed by a list of chunks, each one with a length,
a four-letter type, a payload and a CRC; decoders skip the chunks whose type
they don't know, so a chunk with a private type can carry any message without
altering the image.

The formats are described declaratively (see core.Chunk and fields) and two
basic operations are defined for them and their sub components:

 1. unpack(): reading the binary data and build a high-level representation
    of that. Each component starts at the actual offset of the stream and
    knows how many bytes needs to read to finalize the representation.
    Everything is checked while reading: an error aborts the whole operation.

 2. pack(): encode the high-level representation into binary data.

The records obtained are read-only, with the exception of the list of chunks
of a PNGFile that can be modified only with PNGFile.append_chunk() and
PNGFile.remove_chunk().
"""
