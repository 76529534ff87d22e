from __future__ import annotations

import logging
import zlib

from .errors import DecompressionError, EncodingError, MalformedInput

logger = logging.getLogger(__name__)

KRC_MAGIC = b"krc"
HEADER_LEN = 4
KRC_KEY = bytes([64, 71, 97, 119, 94, 50, 116, 71, 81, 54, 49, 45, 206, 210, 110, 105])


def is_krc(data: bytes) -> bool:
    return data[: len(KRC_MAGIC)] == KRC_MAGIC


def xor_krc(payload: bytes) -> bytes:
    """XOR the post-header payload with the cyclic KRC key (self-inverse)."""
    key_len = len(KRC_KEY)
    return bytes(b ^ KRC_KEY[i % key_len] for i, b in enumerate(payload))


def decode(ciphertext: bytes) -> str:
    """
    Decipher a KRC file body into the raw lyric document.

    The 4-byte header is skipped without inspection; use `is_krc` to
    validate the magic tag first.
    """
    if len(ciphertext) < HEADER_LEN:
        raise MalformedInput(f"KRC data is {len(ciphertext)} bytes, header needs {HEADER_LEN}")

    compressed = xor_krc(ciphertext[HEADER_LEN:])
    try:
        raw = zlib.decompress(compressed)
    except zlib.error as e:
        raise DecompressionError(f"Cannot inflate KRC payload: {e}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(f"KRC document is not valid UTF-8: {e}") from e

    logger.debug("decoded %s bytes into %s chars", len(ciphertext), len(text))
    return text


def encode(document: str, header: bytes = b"krc1") -> bytes:
    if len(header) != HEADER_LEN:
        raise ValueError(f"KRC header must be {HEADER_LEN} bytes, got {len(header)}")
    return header + xor_krc(zlib.compress(document.encode("utf-8")))
