'''
We are implementing fields to handle CRC calculation.
'''

from .. import fields
from ..exceptions import ChecksumMismatchException

from zlib import crc32


class CRCField(fields.StructField):
    """standard CRC methods with pre and post conditioning, as defined by ISO 3309 [ISO-3309]
    or ITU-T V.42 [ITU-V42]. The CRC polynomial employed is

      x^32+x^26+x^23+x^22+x^16+x^12+x^11+x^10+x^8+x^7+x^5+x^4+x^2+x+1

    The 32-bit CRC register is initialized to all 1's, and then the data from each byte is processed
    from the least significant bit (1) to the most significant bit (128). After all the data bytes are processed,
    the CRC register is inverted (its ones complement is taken). This value is transmitted (stored in the file)
    MSB first.

    For the purpose of separating into bytes and ordering, the least significant bit of the 32-bit CRC is defined to
    be the coefficient of the x^31 term.

    See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.

    The value is computed over the raw encoding of the fields listed, in that order, and
    it's checked as soon as the field is unpacked.
    """

    def __init__(self, fields, *args, **kwargs):
        super().__init__('I', *args, **kwargs)
        self.fields = fields

    def calculate(self, instance):
        value = b''
        for field_name in self.fields:
            field = getattr(instance.__class__, field_name)
            value += field.pack(instance._get_value(field_name))

        return crc32(value)

    def update(self, instance):
        instance._set_value(self.name, self.calculate(instance))

    def validate(self, instance):
        stored = instance._get_value(self.name)
        calculated = self.calculate(instance)

        if stored != calculated:
            self.logger.warning('crc mismatch: stored 0x%08x, calculated 0x%08x' % (stored, calculated))
            raise ChecksumMismatchException(
                msg='stored crc 0x%08x differs from the calculated 0x%08x' % (stored, calculated))
