from .base import PayloadCodec


class GenericPayload(PayloadCodec):
    """ Opaque storage for payloads with no registered interpreter. The
        bytes are kept verbatim and returned unchanged on :func:`marshal`.
    """

    printable = False

    def __init__(self, data=b''):
        self.data = bytes(data)


    def __str__(self):
        return '<Non standard type: contents not printable>'


    def marshal(self):
        return self.data


    def unmarshal(self, data):
        self.data = bytes(data)


    def urn(self):
        return 'urn:nfc:ext:ndefcodec:generic'


# end of class GenericPayload


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
