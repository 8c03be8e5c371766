""" Conversion between integers and the fixed-width, big-endian length
    fields found in a chunk header. Both directions work on an 8-byte
    (unsigned 64-bit) intermediate, so the same two functions serve the
    1-byte short length and the 4-byte long length.
"""

_WIDTH = 8
_MASK = (1 << (_WIDTH * 8)) - 1


def bytes_to_int(data):
    """ Interpret *data* as a big-endian unsigned integer. Only the last
        eight bytes are significant; any leading bytes beyond that are
        ignored. Shorter inputs behave as if left-padded with zeros.
    """

    data = bytes(data)

    if len(data) > _WIDTH:
        data = data[-_WIDTH:]

    return int.from_bytes(data, 'big')


def int_to_bytes(value, width):
    """ Return exactly *width* bytes holding *value* in big-endian order.
        Widths of eight or more are left-padded with zeros; narrower widths
        keep only the least significant *width* bytes, discarding the rest.
    """

    value = int(value)
    width = int(width)

    if value < 0:
        raise ValueError('length fields are unsigned: ' + repr(value))

    if width < 0:
        raise ValueError('width must be non-negative: ' + repr(width))

    packed = (value & _MASK).to_bytes(_WIDTH, 'big')

    if width >= _WIDTH:
        return bytes(width - _WIDTH) + packed

    return packed[_WIDTH - width:]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
