""" Exceptions raised by the codec. Everything derives from
    :class:`NDEFError`, which is itself a :class:`ValueError`.
"""


class NDEFError(ValueError):
    """ Base class for all codec errors. The *consumed* attribute records
        how many bytes of the input were successfully processed before the
        failure; it is zero when the error did not come from decoding.
    """

    def __init__(self, message, consumed=0):
        ValueError.__init__(self, message)
        self.consumed = consumed


class TruncatedInput(NDEFError):
    """ A declared field extends past the end of the buffer. """


class PayloadTooLarge(NDEFError):
    """ A payload cannot be represented by the 4-byte length field. """


class FieldTooLarge(NDEFError):
    """ A type or id cannot be represented by its 1-byte length field. """


class EmptyMessage(NDEFError):
    """ A message must contain at least one record to be encoded. """


class InvalidChunk(NDEFError):
    """ A chunk is well formed on the wire but its contents are not legal,
        for example a reserved type name format.
    """


class ChunkSequenceError(NDEFError):
    """ Base class for violations of the chunk assembly rules. """


class NoChunks(ChunkSequenceError):
    pass


class MissingMessageBegin(ChunkSequenceError):
    pass


class SingleChunkCannotBeChunked(ChunkSequenceError):
    pass


class MissingMessageEnd(ChunkSequenceError):
    pass


class LastCannotBeChunked(ChunkSequenceError):
    pass


class MissingChunkFlag(ChunkSequenceError):
    pass


class UnexpectedIDFlag(ChunkSequenceError):
    pass


class UnexpectedTypeLength(ChunkSequenceError):
    pass


class UnexpectedTNF(ChunkSequenceError):
    pass


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
