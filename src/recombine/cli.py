"""Command line interface: recombine share documents stored in files."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .engine import compute_constant_term
from .policy import RecombinePolicy, policy

_logger = logging.getLogger(__name__)


class DocumentLoadError(RuntimeError):
    """Raised when a share document cannot be read from disk."""


def read_document(path: str, *, settings: RecombinePolicy = policy) -> str:
    """Return the text of *path*, enforcing the configured size limit."""

    target = Path(path).expanduser()
    try:
        size = target.stat().st_size
        if size > settings.max_document_bytes:
            raise DocumentLoadError(
                f"file exceeds the {settings.max_document_mb} MB limit"
            )
        return target.read_text(encoding=settings.encoding)
    except OSError as exc:
        raise DocumentLoadError(exc.strerror or str(exc)) from exc
    except (UnicodeDecodeError, LookupError) as exc:
        raise DocumentLoadError(str(exc)) from exc


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.option("--raw", is_flag=True, help="Print only the result for each file.")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override RECOMBINE_LOG_LEVEL.",
)
def main(files: tuple[str, ...], raw: bool, log_level: str | None) -> None:
    """Reconstruct the constant term from each share document in FILES."""

    level = logging.getLevelName((log_level or policy.log_level).upper())
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    failed = False
    for filename in files:
        try:
            text = read_document(filename)
        except DocumentLoadError as exc:
            _logger.debug("Could not load %s", filename, exc_info=True)
            click.echo(f"Failed to read file {filename}: {exc}", err=True)
            failed = True
            continue
        result = compute_constant_term(text)
        click.echo(result if raw else f"Result from {filename}: {result}")

    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
