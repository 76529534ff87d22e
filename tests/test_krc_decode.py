from __future__ import annotations

import zlib

import pytest

from krc2lrc.krc.decode import KRC_KEY, decode, encode, is_krc, xor_krc
from krc2lrc.krc.errors import DecodeError, DecompressionError, EncodingError, MalformedInput

SAMPLE = "[ti:亲爱的，那不是爱情]\n[ar:张韶涵]\n[1000,2000]<0,1000,0>亲<1000,1000,0>爱\n"


def test_key_matches_known_krc_key():
    assert KRC_KEY == b"@Gaw^2tGQ61-\xce\xd2ni"
    assert len(KRC_KEY) == 16


def test_xor_cycles_key():
    assert xor_krc(bytes(17)) == KRC_KEY + KRC_KEY[:1]


def test_xor_is_self_inverse():
    payload = bytes(range(256)) * 3
    assert xor_krc(xor_krc(payload)) == payload


def test_decode_encoded_document():
    data = encode(SAMPLE)
    assert data[:4] == b"krc1"
    assert decode(data) == SAMPLE


def test_decode_ignores_header_content():
    body = encode(SAMPLE)[4:]
    assert decode(b"\x00\x01\x02\x03" + body) == SAMPLE


def test_decode_is_deterministic():
    data = encode(SAMPLE)
    assert decode(data) == decode(data)


@pytest.mark.parametrize("data", [b"", b"k", b"krc"])
def test_short_input_is_malformed(data):
    with pytest.raises(MalformedInput):
        decode(data)


def test_empty_payload_fails_to_inflate():
    with pytest.raises(DecompressionError):
        decode(b"krc1")


def test_garbage_payload_fails_to_inflate():
    with pytest.raises(DecompressionError) as excinfo:
        decode(b"krc1" + b"definitely not zlib data")
    assert isinstance(excinfo.value.__cause__, zlib.error)


def test_truncated_stream_fails_to_inflate():
    data = encode(SAMPLE * 20)
    with pytest.raises(DecompressionError):
        decode(data[: len(data) // 2])


def test_invalid_utf8_is_encoding_error():
    data = b"krc1" + xor_krc(zlib.compress(b"\xff\xfe\xfa"))
    with pytest.raises(EncodingError) as excinfo:
        decode(data)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_errors_share_base_class():
    for exc in (MalformedInput, DecompressionError, EncodingError):
        assert issubclass(exc, DecodeError)
        assert issubclass(exc, ValueError)


def test_is_krc():
    assert is_krc(b"krc18\x00")
    assert not is_krc(b"kr")
    assert not is_krc(b"ID3\x03")


def test_encode_rejects_bad_header():
    with pytest.raises(ValueError):
        encode(SAMPLE, header=b"krc")
