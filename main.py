"""
Compatibility entrypoint.

Prefer running:
  - `krc2lrc convert -i <path>`
or:
  - `python -m krc2lrc convert -i <path>`
"""

from krc2lrc.cli import main as cli_main


def cli() -> None:
    cli_main()


if __name__ == "__main__":
    cli()
