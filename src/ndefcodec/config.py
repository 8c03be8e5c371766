""" Runtime settings, read from the environment on demand. Nothing here is
    cached: changing an environment variable takes effect on the next call.

    NDEFCODEC_STRICT
        Run :func:`ndefcodec.validate.check_chunk` on every chunk encoded
        or decoded by the message layer. Accepts 1/0, true/false, yes/no,
        on/off; defaults to off.

    NDEFCODEC_LOGLEVEL
        A :mod:`logging` level name applied to the ``ndefcodec`` logger by
        :func:`apply_logging`.
"""

import logging
import os


STRICT = 'NDEFCODEC_STRICT'
LOGLEVEL = 'NDEFCODEC_LOGLEVEL'

_true = set(('1', 'true', 'yes', 'on'))
_false = set(('0', 'false', 'no', 'off', ''))


def strict(override=None):
    """ Return whether strict chunk checking is enabled. An explicit
        *override* (True or False) takes precedence over the environment.
    """

    if override is not None:
        return bool(override)

    try:
        value = os.environ[STRICT]
    except KeyError:
        return False

    value = value.strip().lower()

    if value in _true:
        return True
    if value in _false:
        return False

    raise ValueError('unrecognized value for %s: %r' % (STRICT, value))


def log_level():
    """ Return the numeric logging level requested by the environment, or
        None if no level was requested.
    """

    try:
        name = os.environ[LOGLEVEL]
    except KeyError:
        return None

    name = name.strip().upper()
    level = logging.getLevelName(name)

    if isinstance(level, int):
        return level

    raise ValueError('unrecognized value for %s: %r' % (LOGLEVEL, name))


def apply_logging():
    """ Set the level of the ``ndefcodec`` logger from the environment. The
        logger is left untouched if no level was requested. Returns the
        level applied, if any.
    """

    level = log_level()

    if level is not None:
        logging.getLogger('ndefcodec').setLevel(level)

    return level


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
