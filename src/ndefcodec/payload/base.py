""" The contract every payload interpreter honors. The record layer only
    ever talks to payloads through these methods; the interpretation of
    the bytes belongs entirely to the subclass.
"""


class PayloadCodec:
    """ Base class for payload interpreters. Subclasses override
        :func:`marshal` and :func:`unmarshal`, and usually :func:`__str__`
        and :func:`urn`.

        :ivar printable: True if :func:`__str__` yields a meaningful
            rendering of the contents.
    """

    printable = True

    def marshal(self):
        """ Return the serialized payload as bytes.
        """

        raise NotImplementedError('marshal() must be implemented by a subclass')


    def unmarshal(self, data):
        """ Replace the contents of this payload by parsing *data*.
        """

        raise NotImplementedError('unmarshal() must be implemented by a subclass')


    def urn(self):
        """ Return a Uniform Resource Name identifying the payload type.
        """

        raise NotImplementedError('urn() must be implemented by a subclass')


    def __len__(self):
        return len(self.marshal())


    def __eq__(self, other):
        if not isinstance(other, PayloadCodec):
            return NotImplemented
        return type(self) is type(other) and self.marshal() == other.marshal()


    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.marshal())


# end of class PayloadCodec


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
