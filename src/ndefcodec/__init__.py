""" Encoder and decoder for tag-payload exchange messages: a byte buffer
    holds one or more records, each of which may be split across several
    chunks on the wire. Decoding reassembles the chunks; encoding always
    writes one chunk per record.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Wire-level components.

from . import errors
from . import fields
from . import length
from . import chunk
from . import validate

# Higher level components built on the above.

from . import config
from . import payload
from . import record
from . import message

# Primary public-facing interfaces.

from .fields import TypeNameFormat
from .record import Record
from .message import Message, decode, encode

__version__ = '0.1.0'

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
