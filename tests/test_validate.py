import pytest

from ndefcodec import errors
from ndefcodec.chunk import Chunk
from ndefcodec.fields import TypeNameFormat
from ndefcodec.validate import check_chunk, validate


bad_sequences = (
    ('empty', [], errors.NoChunks),

    ('first not MB',
        [Chunk(message_begin=False, message_end=True, chunk_flag=True)],
        errors.MissingMessageBegin),

    ('single chunked',
        [Chunk(message_begin=True, message_end=True, chunk_flag=True)],
        errors.SingleChunkCannotBeChunked),

    ('last not ME',
        [Chunk(message_begin=True, message_end=False)],
        errors.MissingMessageEnd),

    ('last chunked',
        [Chunk(message_begin=True, chunk_flag=True),
         Chunk(message_end=True, chunk_flag=True)],
        errors.LastCannotBeChunked),

    ('missing CF',
        [Chunk(message_begin=True),
         Chunk(message_end=True)],
        errors.MissingChunkFlag),

    ('IL on non-first',
        [Chunk(message_begin=True, chunk_flag=True, id_length_present=True, id_length=1, id=b'a'),
         Chunk(message_end=True, id_length_present=True, id_length=1, id=b'a')],
        errors.UnexpectedIDFlag),

    ('type on non-first',
        [Chunk(message_begin=True, chunk_flag=True, type_length=1, type=b'U'),
         Chunk(message_end=True, type_length=1, type=b'U')],
        errors.UnexpectedTypeLength),

    ('TNF on non-first',
        [Chunk(message_begin=True, chunk_flag=True, type_length=1, type=b'U', tnf=TypeNameFormat.EMPTY),
         Chunk(message_end=True, tnf=TypeNameFormat.UNKNOWN)],
        errors.UnexpectedTNF),
)


@pytest.mark.parametrize('name,chunks,expected', bad_sequences, ids=[case[0] for case in bad_sequences])
def test_bad_sequences(name, chunks, expected):

    with pytest.raises(expected) as info:
        validate(chunks)

    # The match must be exact; a more general rule should not have fired.
    assert type(info.value) is expected
    assert isinstance(info.value, errors.ChunkSequenceError)


def test_good_sequence(three_chunks):
    validate(three_chunks)


def test_good_single():
    validate([Chunk(message_begin=True, message_end=True)])


def test_rule_order():
    """ A sequence breaking several of the middle-of-sequence rules reports
        the earliest rule, even if a later chunk is the first offender.
    """

    chunks = [
        Chunk(message_begin=True, chunk_flag=True),
        Chunk(chunk_flag=True, tnf=TypeNameFormat.MEDIA_TYPE),
        Chunk(id_length_present=True, tnf=TypeNameFormat.UNCHANGED),
        Chunk(message_end=True, tnf=TypeNameFormat.UNCHANGED),
    ]

    with pytest.raises(errors.MissingChunkFlag):
        validate(chunks)

    chunks[2].chunk_flag = True

    with pytest.raises(errors.UnexpectedIDFlag):
        validate(chunks)

    chunks[2].id_length_present = False

    with pytest.raises(errors.UnexpectedTNF):
        validate(chunks)


def test_check_good(single_chunk, three_chunks):

    check_chunk(single_chunk)

    for chunk in three_chunks:
        check_chunk(chunk)


bad_chunks = (
    ('reserved', dict(tnf=TypeNameFormat.RESERVED)),
    ('empty with type', dict(tnf=TypeNameFormat.EMPTY, type_length=1, type=b'a')),
    ('unknown with type', dict(tnf=TypeNameFormat.UNKNOWN, type_length=1, type=b'a')),
    ('non-ascii type', dict(tnf=TypeNameFormat.WELL_KNOWN, type_length=3, type='⌘'.encode())),
    ('type length mismatch', dict(tnf=TypeNameFormat.MEDIA_TYPE, type_length=2, type=b'a')),
    ('payload length mismatch', dict(tnf=TypeNameFormat.UNKNOWN, payload_length=2, payload=b'a')),
    ('id without flag', dict(tnf=TypeNameFormat.UNKNOWN, id=b'a')),
    ('id length mismatch', dict(tnf=TypeNameFormat.UNKNOWN, id_length_present=True, id_length=3, id=b'a')),
)


@pytest.mark.parametrize('name,overrides', bad_chunks, ids=[case[0] for case in bad_chunks])
def test_check_bad(name, overrides):

    chunk = Chunk(message_begin=True, message_end=True, short_record=True, **overrides)

    with pytest.raises(errors.InvalidChunk):
        check_chunk(chunk)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
