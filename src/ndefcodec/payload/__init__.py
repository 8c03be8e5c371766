""" Payload interpreters and the registry that selects among them. Only
    the generic, opaque interpreter lives here; type-specific interpreters
    are registered by the application.
"""

from .base import PayloadCodec
from .generic import GenericPayload
from .registry import Registry, default


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
