""" The message layer: an ordered list of records, and the state machine
    that turns a byte buffer into one by decoding chunks until the buffer
    is exhausted.
"""

import enum
import logging

from . import chunk as chunks
from . import config
from . import payload as payloads
from .errors import EmptyMessage, NDEFError, TruncatedInput
from .record import Assembler, Record
from .validate import check_chunk, validate


logger = logging.getLogger(__name__)


class Message:
    """ An ordered sequence of one or more :class:`ndefcodec.record.Record`
        instances. The order is significant: it is the order the records
        appear on the wire. A :class:`Message` owns its record list; the
        list passed to the constructor is copied.
    """

    def __init__(self, records=None):

        if records is None:
            records = ()

        self.records = list(records)


    @classmethod
    def single(cls, tnf, type, payload, id=None, registry=None):
        """ Build a one-record message. If *payload* is bytes it is handed to
            the payload interpreter registered for *tnf* and *type* in
            *registry*; otherwise it is used as-is.
        """

        if isinstance(payload, (bytes, bytearray, memoryview)):
            if registry is None:
                registry = payloads.default
            payload = registry.make(tnf, type, bytes(payload))

        return cls((Record(tnf, type, payload, id),))


    def __bytes__(self):
        return encode(self)


    def __eq__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        return self.records == other.records


    def __getitem__(self, index):
        return self.records[index]


    def __iter__(self):
        return iter(self.records)


    def __len__(self):
        return len(self.records)


    def __repr__(self):
        return 'Message(' + repr(self.records) + ')'


    def append(self, record):
        self.records.append(record)


# end of class Message



class State(enum.Enum):
    READING_CHUNK = 'ReadingChunk'
    RECORD_BOUNDARY = 'RecordBoundary'
    DONE = 'Done'
    ERROR = 'Error'



class Decoder:
    """ Drive repeated chunk decoding over a buffer. After :func:`decode`
        returns or raises, *state* holds the terminal state and *consumed*
        the number of bytes processed, which on failure is the count of
        bytes read before the error.

        :ivar strict: If True, every chunk is also run through
            :func:`ndefcodec.validate.check_chunk`.
    """

    def __init__(self, registry=None, strict=None):

        self.assembler = Assembler(registry)
        self.strict = config.strict(strict)
        self.state = State.READING_CHUNK
        self.consumed = 0


    def decode(self, buffer):
        """ Decode every record in *buffer* and return the resulting
            :class:`Message`. A failure raises an
            :class:`ndefcodec.errors.NDEFError` whose *consumed* attribute
            matches this decoder's *consumed* count; no partial message is
            returned.
        """

        self.state = State.READING_CHUNK
        self.consumed = 0

        try:
            message = self._run(buffer)
        except NDEFError as error:
            self.state = State.ERROR
            error.consumed = self.consumed
            logger.debug("decode failed after %d bytes: %s", self.consumed, error)
            raise
        except Exception as error:
            self.state = State.ERROR
            logger.debug("decode failed after %d bytes: %r", self.consumed, error)
            raise

        return message


    def _run(self, buffer):

        size = len(buffer)
        message = Message()
        group = list()

        if size == 0:
            raise TruncatedInput('no bytes to decode')

        while self.state != State.DONE:

            if self.state == State.READING_CHUNK:

                if self.consumed >= size:
                    raise TruncatedInput('buffer ended inside a chunked record')

                chunk, length = chunks.decode(buffer, self.consumed)
                self.consumed += length

                if self.strict:
                    check_chunk(chunk)

                group.append(chunk)

                if chunk.message_end:
                    self.state = State.RECORD_BOUNDARY

            elif self.state == State.RECORD_BOUNDARY:

                validate(group)
                record = self.assembler.assemble(group)
                message.append(record)

                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("record %d complete: %d chunk(s), %d payload bytes",
                                 len(message), len(group), len(record.payload_bytes))

                group = list()

                if self.consumed < size:
                    self.state = State.READING_CHUNK
                else:
                    self.state = State.DONE

        return message


# end of class Decoder



def decode(buffer, registry=None, strict=None):
    """ Decode *buffer* into a :class:`Message`. See :class:`Decoder`.
    """

    return Decoder(registry, strict).decode(buffer)


def encode(message, registry=None, strict=None):
    """ Serialize *message* to bytes. Each record becomes exactly one chunk,
        regardless of how it was chunked when it was decoded. The *registry*
        and *strict* arguments mean the same as for :func:`decode`.
    """

    if len(message) == 0:
        raise EmptyMessage('cannot encode a message with no records')

    strict = config.strict(strict)
    assembler = Assembler(registry)
    parts = list()

    for record in message:
        chunk = assembler.disassemble(record)

        if strict:
            check_chunk(chunk)

        parts.append(chunks.encode(chunk))

    return b''.join(parts)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
