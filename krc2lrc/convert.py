from __future__ import annotations

from krc2lrc.krc.decode import decode
from krc2lrc.krc.markers import strip_word_timing
from krc2lrc.lrc.transcode import transcode

DEFAULT_GAP_THRESHOLD_MS = 500


def krc_text_to_lrc(document: str, gap_threshold_ms: int = DEFAULT_GAP_THRESHOLD_MS) -> str:
    return transcode(strip_word_timing(document), gap_threshold_ms)


def krc_to_lrc(ciphertext: bytes, gap_threshold_ms: int = DEFAULT_GAP_THRESHOLD_MS) -> str:
    """
    KRC file bytes -> LRC text.

    Raises a `DecodeError` subclass when the bytes cannot be deciphered;
    no partial output is ever returned.
    """
    return krc_text_to_lrc(decode(ciphertext), gap_threshold_ms)
