from __future__ import annotations

import regex

WORD_TIMING_RE = regex.compile(r"<\d+,\d+,\d+>")  # <charStart,charDuration,charIndex>
LINE_TIME_RE = regex.compile(r"\[(\d+),(\d+)\]")  # [startMs,durationMs]


def strip_word_timing(doc: str) -> str:
    """Drop every per-word `<start,duration,index>` annotation, keep the rest verbatim."""
    return WORD_TIMING_RE.sub("", doc)
