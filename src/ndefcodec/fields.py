""" Wire constants for the chunk header.

    Keep these in one place to avoid magic numbers in the codec.
"""

import enum


class TypeNameFormat(enum.IntEnum):
    """ The 3-bit classifier describing how the type field of a record
        should be interpreted.
    """

    EMPTY = 0
    WELL_KNOWN = 1
    MEDIA_TYPE = 2
    ABSOLUTE_URI = 3
    EXTERNAL = 4
    UNKNOWN = 5
    UNCHANGED = 6
    RESERVED = 7


# Bit positions within the first byte of every chunk.

MB = 0x80
ME = 0x40
CF = 0x20
SR = 0x10
IL = 0x08
TNF_MASK = 0x07

# Field widths, in bytes.

SHORT_LENGTH = 1
LONG_LENGTH = 4

# Largest values the fixed-width fields can hold.

MAX_SHORT_PAYLOAD = 0xFF
MAX_PAYLOAD = 0xFFFFFFFF
MAX_TYPE = 0xFF
MAX_ID = 0xFF


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
