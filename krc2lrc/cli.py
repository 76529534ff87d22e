from __future__ import annotations

from pathlib import Path

from colorama import Fore, Style, just_fix_windows_console
import typer

from krc2lrc.config import load_config, save_config
from krc2lrc.convert import krc_text_to_lrc
from krc2lrc.files import ConvertStats, convert_path, read_krc
from krc2lrc.krc.decode import decode
from krc2lrc.krc.errors import DecodeError
from krc2lrc.logging_setup import setup_logging

app = typer.Typer(no_args_is_help=True, add_completion=False)


def _ok(msg: str) -> str:
    return f"{Fore.GREEN}OK{Style.RESET_ALL}   {msg}"


def _fail(msg: str) -> str:
    return f"{Fore.RED}FAIL{Style.RESET_ALL} {msg}"


@app.command()
def convert(
    input_path: Path = typer.Option(..., "--input", "-i", help="KRC file or directory"),
    interval_time: int | None = typer.Option(
        None, "--interval-time", "-t", min=0, help="Insert a blank line when lines are more than N ms apart"
    ),
    max_depth: int | None = typer.Option(None, "--max-depth", "-d", min=0, help="Subdirectory levels to descend"),
    raw_krc: bool = typer.Option(False, "--raw-krc", "-r", help="Also save the decoded KRC text as *.krc.lrc"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Convert KRC files to LRC files next to them.
    """
    cfg = load_config()
    if interval_time is not None:
        cfg = cfg.__class__(**{**cfg.__dict__, "interval_time_ms": interval_time})
    if max_depth is not None:
        cfg = cfg.__class__(**{**cfg.__dict__, "max_depth": max_depth})
    if raw_krc:
        cfg = cfg.__class__(**{**cfg.__dict__, "save_raw": True})

    setup_logging(debug)

    stats = ConvertStats()
    for outcome in convert_path(
        input_path,
        gap_threshold_ms=cfg.interval_time_ms,
        max_depth=cfg.max_depth,
        save_raw=cfg.save_raw,
    ):
        stats.add(outcome)
        if outcome.ok:
            typer.echo(_ok(f"{outcome.source.as_posix()} -> {outcome.output.as_posix()}"))
        else:
            typer.echo(_fail(f"{outcome.source.as_posix()}: {outcome.error}"))

    typer.echo(f"{stats.total} files, {stats.succeeded} converted, {stats.failed} failed")
    if stats.failed or not stats.total:
        raise typer.Exit(code=1)


@app.command("decode")
def decode_file(
    krc_path: Path = typer.Argument(..., help="KRC file"),
    raw: bool = typer.Option(False, "--raw/--lrc", help="Print the decoded KRC text instead of LRC"),
    interval_time: int | None = typer.Option(None, "--interval-time", "-t", min=0),
    out: Path | None = typer.Option(None, "--out", help="Output file (default: stdout)"),
):
    """Decode a single KRC file and print it."""
    cfg = load_config()
    gap = cfg.interval_time_ms if interval_time is None else interval_time
    try:
        document = decode(read_krc(krc_path))
    except (DecodeError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    data = document if raw else krc_text_to_lrc(document, gap)
    if out:
        out.write_text(data, encoding="utf-8", newline="")
    else:
        typer.echo(data, nl=False)


@app.command()
def config(
    interval_time: int | None = typer.Option(None, "--interval-time", "-t", min=0),
    max_depth: int | None = typer.Option(None, "--max-depth", "-d", min=0),
    raw_krc: bool | None = typer.Option(None, "--raw-krc/--no-raw-krc"),
):
    """Show or change the saved defaults."""
    values: dict[str, int | bool] = {}
    if interval_time is not None:
        values["interval_time"] = interval_time
    if max_depth is not None:
        values["max_depth"] = max_depth
    if raw_krc is not None:
        values["save_raw"] = raw_krc

    if values:
        path = save_config(**values)
        typer.echo(f"Saved: {path}")

    cfg = load_config()
    typer.echo(f"interval_time={cfg.interval_time_ms}")
    typer.echo(f"max_depth={cfg.max_depth}")
    typer.echo(f"save_raw={cfg.save_raw}")


def main() -> None:
    just_fix_windows_console()
    app()


if __name__ == "__main__":
    main()
