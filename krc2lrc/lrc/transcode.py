from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from krc2lrc.krc.markers import LINE_TIME_RE

from .format import format_timestamp


@dataclass(frozen=True, slots=True)
class TranscodeStats:
    lines_total: int
    lines_timed: int
    lines_passthrough: int
    fillers_inserted: int


def _iter_lines(doc: str) -> Iterator[str]:
    # split on "\n" only; str.splitlines() would also break on \x1c, \u2028 and friends
    if not doc:
        return
    parts = doc.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def transcode_with_stats(doc: str, gap_threshold_ms: int) -> tuple[str, TranscodeStats]:
    """
    Rewrite leading "[startMs,durationMs]" markers into LRC "[mm:ss.cc]" stamps.

    When the previous timed line ended more than `gap_threshold_ms` before
    the next one starts, a bare timestamp line is inserted at the end of
    the previous line so players blank the display during the pause.
    Lines without a leading marker are copied unchanged.
    """
    out: list[str] = []
    latest_end_ms = 0

    total = 0
    timed = 0
    fillers = 0

    for line in _iter_lines(doc):
        total += 1
        m = LINE_TIME_RE.match(line)
        if m is None:
            out.append(line + "\n")
            continue

        timed += 1
        start_ms = int(m.group(1))
        duration_ms = int(m.group(2))

        if latest_end_ms < start_ms - gap_threshold_ms:
            out.append(format_timestamp(latest_end_ms) + "\n")
            fillers += 1
        latest_end_ms = start_ms + duration_ms

        out.append(format_timestamp(start_ms) + line[m.end() :] + "\n")

    stats = TranscodeStats(
        lines_total=total,
        lines_timed=timed,
        lines_passthrough=total - timed,
        fillers_inserted=fillers,
    )
    return "".join(out), stats


def transcode(doc: str, gap_threshold_ms: int) -> str:
    text, _stats = transcode_with_stats(doc, gap_threshold_ms)
    return text
