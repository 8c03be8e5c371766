""" Serialization of a single physical chunk.

    Layout:
        [flags|tnf][type length][payload length: 1 or 4][id length?]
        [type][id?][payload]

    No cross-field validation happens here; the caller is responsible for
    keeping the declared lengths consistent with the byte fields. See
    :func:`ndefcodec.validate.check_chunk` for an explicit content check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from . import fields
from .errors import TruncatedInput
from .length import bytes_to_int, int_to_bytes


logger = logging.getLogger(__name__)


@dataclass
class Chunk:

    message_begin: bool = False
    message_end: bool = False
    chunk_flag: bool = False
    short_record: bool = False
    id_length_present: bool = False
    tnf: int = fields.TypeNameFormat.EMPTY
    type_length: int = 0
    payload_length: int = 0
    id_length: int = 0
    type: bytes = b''
    id: bytes = b''
    payload: bytes = b''

    def flags(self) -> int:
        """ Pack the boolean flags and the type name format into the first
            header byte.
        """

        byte = 0

        if self.message_begin:
            byte |= fields.MB
        if self.message_end:
            byte |= fields.ME
        if self.chunk_flag:
            byte |= fields.CF
        if self.short_record:
            byte |= fields.SR
        if self.id_length_present:
            byte |= fields.IL

        byte |= int(self.tnf) & fields.TNF_MASK
        return byte


# end of class Chunk



class _Reader:
    """ Bounds-checked cursor over an input buffer. Every read either
        returns exactly the requested number of bytes or raises
        :class:`TruncatedInput`.
    """

    def __init__(self, buffer, offset=0):
        self.buffer = buffer
        self.start = offset
        self.offset = offset


    @property
    def consumed(self):
        return self.offset - self.start


    def take(self, count, what):

        end = self.offset + count

        if end > len(self.buffer):
            remaining = len(self.buffer) - self.offset
            error = 'truncated %s: need %d bytes, %d remain' % (what, count, remaining)
            raise TruncatedInput(error, self.consumed)

        data = bytes(self.buffer[self.offset:end])
        self.offset = end
        return data


    def byte(self, what):
        return self.take(1, what)[0]


# end of class _Reader



def encode(chunk: Chunk) -> bytes:
    """ Serialize a :class:`Chunk` to bytes.
    """

    parts = [bytes((chunk.flags(), chunk.type_length & 0xFF))]

    if chunk.short_record:
        parts.append(int_to_bytes(chunk.payload_length, fields.SHORT_LENGTH))
    else:
        parts.append(int_to_bytes(chunk.payload_length, fields.LONG_LENGTH))

    if chunk.id_length_present:
        parts.append(bytes((chunk.id_length & 0xFF,)))

    if chunk.type_length > 0:
        parts.append(chunk.type)

    if chunk.id_length_present and chunk.id_length > 0:
        parts.append(chunk.id)

    parts.append(chunk.payload)
    return b''.join(parts)


def decode(buffer, offset: int = 0) -> Tuple[Chunk, int]:
    """ Parse one chunk starting at *offset* within *buffer*. Any trailing
        bytes after the chunk are left alone. Return a tuple of the
        :class:`Chunk` and the number of bytes it occupied; raise
        :class:`TruncatedInput` if the buffer ends early.
    """

    reader = _Reader(buffer, offset)
    chunk = Chunk()

    first = reader.byte('header')
    chunk.message_begin = bool(first & fields.MB)
    chunk.message_end = bool(first & fields.ME)
    chunk.chunk_flag = bool(first & fields.CF)
    chunk.short_record = bool(first & fields.SR)
    chunk.id_length_present = bool(first & fields.IL)
    chunk.tnf = fields.TypeNameFormat(first & fields.TNF_MASK)

    chunk.type_length = reader.byte('type length')

    if chunk.short_record:
        width = fields.SHORT_LENGTH
    else:
        width = fields.LONG_LENGTH

    chunk.payload_length = bytes_to_int(reader.take(width, 'payload length'))

    if chunk.id_length_present:
        chunk.id_length = reader.byte('id length')

    chunk.type = reader.take(chunk.type_length, 'type')

    if chunk.id_length_present:
        chunk.id = reader.take(chunk.id_length, 'id')

    chunk.payload = reader.take(chunk.payload_length, 'payload')

    logger.debug("decoded chunk at offset %d: %d bytes, flags 0x%02x",
                 offset, reader.consumed, first)

    return chunk, reader.consumed


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
