""" Lookup of payload interpreters by type name format and type. A
    :class:`Registry` is built once and never changes afterwards; it is
    handed to the record and message layers explicitly.
"""

import types

from ..fields import TypeNameFormat
from .generic import GenericPayload


class Registry:
    """ An immutable map from ``(TypeNameFormat, type)`` to a payload codec
        factory. The factory is any callable that takes no arguments and
        returns a :class:`ndefcodec.payload.PayloadCodec`; usually this is
        just the class. The *type* may be given as ``str`` or ``bytes``.
        Lookups that find nothing fall back to *fallback*, which defaults
        to :class:`GenericPayload`.
    """

    def __init__(self, mapping=None, fallback=GenericPayload):

        codecs = dict()

        if mapping:
            for key, factory in mapping.items():
                tnf, type = key
                codecs[_key(tnf, type)] = factory

        self._codecs = types.MappingProxyType(codecs)
        self.fallback = fallback


    def __contains__(self, key):
        tnf, type = key
        return _key(tnf, type) in self._codecs


    def __len__(self):
        return len(self._codecs)


    def __iter__(self):
        return iter(self._codecs)


    def __repr__(self):
        return 'payload.Registry: ' + repr(dict(self._codecs))


    def derive(self, mapping):
        """ Return a new :class:`Registry` with the entries of this one plus
            those in *mapping*, which take precedence. This registry is left
            untouched.
        """

        combined = dict(self._codecs)

        for key, factory in mapping.items():
            tnf, type = key
            combined[_key(tnf, type)] = factory

        return Registry(combined, self.fallback)


    def factory(self, tnf, type):
        """ Return the codec factory registered for *tnf* and *type*, or the
            fallback if there is no such registration.
        """

        try:
            return self._codecs[_key(tnf, type)]
        except KeyError:
            return self.fallback


    def make(self, tnf, type, data):
        """ Instantiate the appropriate codec and unmarshal *data* into it.
        """

        payload = self.factory(tnf, type)()
        payload.unmarshal(data)
        return payload


# end of class Registry



def _key(tnf, type):

    if isinstance(type, (bytes, bytearray)):
        type = bytes(type).decode('utf-8', 'replace')

    return (TypeNameFormat(tnf), type)


default = Registry()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
