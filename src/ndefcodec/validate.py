""" Rules governing which chunk sequences may be assembled into a single
    logical record, plus an optional content check for individual chunks.
"""

from . import errors
from .fields import TypeNameFormat


def validate(chunks):
    """ Check an ordered sequence of chunks against the assembly rules,
        raising the :class:`ndefcodec.errors.ChunkSequenceError` subclass
        for the first rule violated. The rules are evaluated in a fixed
        order; for the rules concerning the middle of the sequence the
        whole sequence is scanned before moving on to the next rule.
    """

    chunks = list(chunks)

    if len(chunks) == 0:
        raise errors.NoChunks('no chunks to assemble')

    first = chunks[0]
    last = chunks[-1]

    if not first.message_begin:
        raise errors.MissingMessageBegin('first chunk must have the message begin flag set')

    if len(chunks) == 1 and first.chunk_flag:
        raise errors.SingleChunkCannotBeChunked('a single chunk cannot have the chunk flag set')

    if not last.message_end:
        raise errors.MissingMessageEnd('last chunk must have the message end flag set')

    if first.chunk_flag and last.chunk_flag:
        raise errors.LastCannotBeChunked('last chunk cannot have the chunk flag set')

    if len(chunks) == 1:
        return

    for chunk in chunks[:-1]:
        if not chunk.chunk_flag:
            raise errors.MissingChunkFlag('all chunks but the last must have the chunk flag set')

    following = chunks[1:]

    for chunk in following:
        if chunk.id_length_present:
            raise errors.UnexpectedIDFlag('only the first chunk may carry an id')

    for chunk in following:
        if chunk.type_length > 0:
            raise errors.UnexpectedTypeLength('only the first chunk may carry a type')

    for chunk in following:
        if chunk.tnf != TypeNameFormat.UNCHANGED:
            raise errors.UnexpectedTNF('chunks after the first must use the unchanged type name format')


def check_chunk(chunk):
    """ Verify the contents of a single chunk: declared lengths must match
        the fields they describe, and the type name format must agree with
        the presence of a type. Raise :class:`ndefcodec.errors.InvalidChunk`
        on the first problem found.
    """

    if chunk.type_length != len(chunk.type):
        raise errors.InvalidChunk('type length %d does not match %d type bytes' % (chunk.type_length, len(chunk.type)))

    if chunk.payload_length != len(chunk.payload):
        raise errors.InvalidChunk('payload length %d does not match %d payload bytes' % (chunk.payload_length, len(chunk.payload)))

    if chunk.id_length_present:
        if chunk.id_length != len(chunk.id):
            raise errors.InvalidChunk('id length %d does not match %d id bytes' % (chunk.id_length, len(chunk.id)))
    elif chunk.id:
        raise errors.InvalidChunk('id bytes present without the id length flag')

    if chunk.short_record and chunk.payload_length > 0xFF:
        raise errors.InvalidChunk('short record payload exceeds 255 bytes')

    tnf = chunk.tnf

    if tnf == TypeNameFormat.RESERVED:
        raise errors.InvalidChunk('reserved type name format')

    if tnf == TypeNameFormat.EMPTY:
        if chunk.type_length or chunk.id_length or chunk.payload_length:
            raise errors.InvalidChunk('empty type name format with non-empty fields')

    if tnf in (TypeNameFormat.UNKNOWN, TypeNameFormat.UNCHANGED):
        if chunk.type_length:
            raise errors.InvalidChunk('type present for type name format ' + TypeNameFormat(tnf).name)

    if tnf in (TypeNameFormat.WELL_KNOWN, TypeNameFormat.EXTERNAL):
        for byte in chunk.type:
            if byte < 0x20 or byte > 0x7E:
                raise errors.InvalidChunk('type must be printable ASCII: ' + repr(chunk.type))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
