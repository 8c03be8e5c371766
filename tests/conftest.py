import pytest

from ndefcodec.chunk import Chunk
from ndefcodec.fields import TypeNameFormat


@pytest.fixture
def three_chunks():
    """ A valid group of three chunks that assembles to a well known
        'U' record with the payload 0x00 + 'abcd'.
    """

    first = Chunk(message_begin=True, chunk_flag=True, short_record=True,
                  tnf=TypeNameFormat.WELL_KNOWN, type_length=1, type=b'U',
                  payload_length=2, payload=b'\x00a')

    middle = Chunk(chunk_flag=True, short_record=True,
                   tnf=TypeNameFormat.UNCHANGED,
                   payload_length=2, payload=b'bc')

    last = Chunk(message_end=True, short_record=True,
                 tnf=TypeNameFormat.UNCHANGED,
                 payload_length=1, payload=b'd')

    return [first, middle, last]


@pytest.fixture
def single_chunk():
    return Chunk(message_begin=True, message_end=True, short_record=True,
                 id_length_present=True, tnf=TypeNameFormat.EXTERNAL,
                 type_length=4, type=b'test', id_length=3, id=b'#ab',
                 payload_length=3, payload=b'abc')


@pytest.fixture
def strict_environment(monkeypatch):
    monkeypatch.setenv('NDEFCODEC_STRICT', '1')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
