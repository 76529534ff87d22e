from krc2lrc.convert import DEFAULT_GAP_THRESHOLD_MS, krc_text_to_lrc, krc_to_lrc
from krc2lrc.krc.errors import DecodeError, DecompressionError, EncodingError, MalformedInput, NotKrcFile

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_GAP_THRESHOLD_MS",
    "DecodeError",
    "DecompressionError",
    "EncodingError",
    "MalformedInput",
    "NotKrcFile",
    "krc_text_to_lrc",
    "krc_to_lrc",
]
