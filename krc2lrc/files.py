from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from krc2lrc.krc.decode import decode, is_krc
from krc2lrc.krc.errors import DecodeError, NotKrcFile
from krc2lrc.krc.markers import strip_word_timing
from krc2lrc.lrc.transcode import transcode_with_stats

logger = logging.getLogger(__name__)

KRC_SUFFIX = ".krc"
LRC_SUFFIX = ".lrc"
RAW_SUFFIX = ".krc.lrc"


@dataclass(frozen=True, slots=True)
class FileOutcome:
    source: Path
    output: Path | None = None
    raw_output: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class ConvertStats:
    succeeded: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.succeeded + self.failed

    def add(self, outcome: FileOutcome) -> None:
        if outcome.ok:
            self.succeeded += 1
        else:
            self.failed += 1


def output_stem(path: Path) -> Path:
    name = path.name
    if len(name) > len(KRC_SUFFIX) and name.lower().endswith(KRC_SUFFIX):
        return path.with_name(name[: -len(KRC_SUFFIX)])
    return path


def lrc_path_for(path: Path) -> Path:
    stem = output_stem(path)
    return stem.with_name(stem.name + LRC_SUFFIX)


def raw_path_for(path: Path) -> Path:
    stem = output_stem(path)
    return stem.with_name(stem.name + RAW_SUFFIX)


def read_krc(path: Path) -> bytes:
    data = path.read_bytes()
    if not is_krc(data):
        raise NotKrcFile(f"{path} does not start with the 'krc' tag")
    return data


def _write(path: Path, text: str) -> None:
    # newline="" keeps "\n" line endings on every platform
    path.write_text(text, encoding="utf-8", newline="")


def convert_file(path: Path, *, gap_threshold_ms: int, save_raw: bool = False) -> FileOutcome:
    """
    Convert one KRC file into a sibling .lrc file.

    Decode and I/O errors are logged and returned as a failed outcome so a
    batch can carry on with the next file.
    """
    try:
        document = decode(read_krc(path))
    except (DecodeError, OSError) as e:
        logger.error("Cannot decode %s: %s", path, e)
        return FileOutcome(source=path, error=str(e))

    raw_output: Path | None = None
    try:
        if save_raw:
            raw_output = raw_path_for(path)
            _write(raw_output, document)
        lrc_text, stats = transcode_with_stats(strip_word_timing(document), gap_threshold_ms)
        output = lrc_path_for(path)
        _write(output, lrc_text)
    except OSError as e:
        logger.error("Cannot write lyrics for %s: %s", path, e)
        return FileOutcome(source=path, raw_output=raw_output, error=str(e))

    logger.debug(
        "converted %s -> %s (%s timed lines, %s fillers)", path, output, stats.lines_timed, stats.fillers_inserted
    )
    return FileOutcome(source=path, output=output, raw_output=raw_output)


def iter_krc_files(root: Path, max_depth: int) -> Iterator[Path]:
    """
    Yield the KRC files to convert under `root`.

    A file root is yielded whatever its name. For a directory, `*.krc` files
    are collected down to `max_depth` subdirectory levels (0: only the
    directory itself).
    """
    if max_depth < 0:
        return
    if root.is_file():
        yield root
        return
    if not root.is_dir():
        logger.error("Unsupported file type or missing path: %s", root)
        return

    stack: list[tuple[Path, int]] = [(root, 0)]
    while stack:
        directory, depth = stack.pop()
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.warning("Skipping unreadable directory %s: %s", directory, e)
            continue

        subdirs: list[Path] = []
        for entry in entries:
            if entry.is_file():
                if entry.name.lower().endswith(KRC_SUFFIX):
                    yield entry
            elif entry.is_dir() and depth < max_depth:
                subdirs.append(entry)
        # reversed so subdirectories pop in sorted order
        stack.extend((d, depth + 1) for d in reversed(subdirs))


def convert_path(
    root: Path,
    *,
    gap_threshold_ms: int,
    max_depth: int = 0,
    save_raw: bool = False,
) -> Iterator[FileOutcome]:
    for path in iter_krc_files(root, max_depth):
        yield convert_file(path, gap_threshold_ms=gap_threshold_ms, save_raw=save_raw)
