from __future__ import annotations


def format_timestamp(ms: int) -> str:
    """
    Milliseconds -> "[mm:ss.cc]".

    Centiseconds are truncated, never rounded: 61234 -> "[01:01.23]".
    Minutes keep growing past 99 ("[100:00.00]").
    """
    if ms < 0:
        raise ValueError(f"Negative timestamp: {ms}")
    m, rem = divmod(ms, 60_000)
    s, ms2 = divmod(rem, 1_000)
    return f"[{m:02d}:{s:02d}.{ms2 // 10:02d}]"
