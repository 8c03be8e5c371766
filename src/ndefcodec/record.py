""" Logical records, and the translation between a record and the chunks
    that carry it on the wire.
"""

from . import fields
from . import payload as payloads
from .chunk import Chunk
from .errors import FieldTooLarge, PayloadTooLarge
from .fields import TypeNameFormat


class Record:
    """ A :class:`Record` is the de-chunked unit visible to callers. The
        *type* and *id* are kept as bytes; a ``str`` is accepted and
        encoded as UTF-8. An *id* of None means the record carries no id
        field at all, which is distinct from an empty id.

        :ivar payload: A :class:`ndefcodec.payload.PayloadCodec` instance
            interpreting the record contents.
    """

    def __init__(self, tnf, type=b'', payload=None, id=None):

        self.tnf = TypeNameFormat(tnf)
        self.type = _as_bytes(type)
        self.id = None if id is None else _as_bytes(id)

        if payload is None:
            payload = payloads.GenericPayload()
        elif isinstance(payload, str):
            payload = payloads.GenericPayload(payload.encode('utf-8'))
        elif isinstance(payload, (bytes, bytearray, memoryview)):
            payload = payloads.GenericPayload(payload)
        elif not isinstance(payload, payloads.PayloadCodec):
            raise ValueError('payload must be bytes, str or a PayloadCodec: ' + repr(payload))

        self.payload = payload


    def __eq__(self, other):

        if not isinstance(other, Record):
            return NotImplemented

        return (self.tnf == other.tnf and self.type == other.type and
                self.id == other.id and self.payload_bytes == other.payload_bytes)


    def __repr__(self):
        return 'Record(tnf=%s, type=%r, id=%r, payload=%r)' % (self.tnf.name, self.type, self.id, self.payload)


    @property
    def payload_bytes(self):
        """ The serialized payload, as it would appear on the wire.
        """

        return self.payload.marshal()


# end of class Record



class Assembler:
    """ Merge validated chunk groups into :class:`Record` instances and
        split records back into chunks. The *registry* selects the payload
        interpreter for each assembled record; it defaults to
        :data:`ndefcodec.payload.default`.
    """

    def __init__(self, registry=None):

        if registry is None:
            registry = payloads.default

        self.registry = registry


    def assemble(self, chunks):
        """ Build a :class:`Record` from a chunk group that has already
            passed :func:`ndefcodec.validate.validate`. The type name format,
            type and id come from the first chunk; the payload is the
            concatenation of every chunk payload, in order.
        """

        first = chunks[0]

        if first.id_length_present:
            id = first.id
        else:
            id = None

        data = b''.join(chunk.payload for chunk in chunks)
        payload = self.registry.make(first.tnf, first.type, data)

        return Record(first.tnf, first.type, payload, id)


    def disassemble(self, record):
        """ Return the single :class:`ndefcodec.chunk.Chunk` representing
            *record*. Re-encoding never produces more than one chunk per
            record; the short length form is used whenever the payload
            fits in it.
        """

        data = record.payload_bytes
        size = len(data)

        if size > fields.MAX_PAYLOAD:
            raise PayloadTooLarge('payload of %d bytes exceeds the 4-byte length field' % (size))

        if len(record.type) > fields.MAX_TYPE:
            raise FieldTooLarge('type of %d bytes exceeds the 1-byte length field' % (len(record.type)))

        chunk = Chunk()
        chunk.message_begin = True
        chunk.message_end = True
        chunk.chunk_flag = False
        chunk.short_record = size <= fields.MAX_SHORT_PAYLOAD
        chunk.tnf = record.tnf
        chunk.type = record.type
        chunk.type_length = len(record.type)
        chunk.payload = data
        chunk.payload_length = size

        if record.id is not None:
            if len(record.id) > fields.MAX_ID:
                raise FieldTooLarge('id of %d bytes exceeds the 1-byte length field' % (len(record.id)))

            chunk.id_length_present = True
            chunk.id = record.id
            chunk.id_length = len(record.id)

        return chunk


# end of class Assembler



def _as_bytes(value):

    try:
        return value.encode('utf-8')
    except AttributeError:
        return bytes(value)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
