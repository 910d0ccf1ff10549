from __future__ import annotations

from typing import IO, Iterable, Iterator, List

import click

from .core.config import load_settings
from .core.logging import setup_logging
from .core.sampling import default_random_source, sample


def _strip_terminator(line: str) -> str:
    # one "\n" and at most one "\r" before it
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class _LineCounter:
    """Wraps a text stream, yielding lines without their terminator and counting them."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._stream = stream
        self.count = 0

    def __iter__(self) -> Iterator[str]:
        for line in self._stream:
            self.count += 1
            yield _strip_terminator(line)


@click.command()
@click.argument("count", required=False, type=click.IntRange(min=0))
@click.option("--input", "source", type=click.File("r"), default="-", show_default=True, help="Text file to sample lines from")
@click.option("--secure/--no-secure", "secure", default=None, help="Use the OS entropy source (default: RESERVOIR_SECURE_RANDOM)")
def cli(count: int | None, source: IO[str], secure: bool | None) -> None:
    """Print a uniform random sample of COUNT lines read from stdin (default 10)."""
    s = load_settings()
    log = setup_logging("reservoir_sample", settings=s)
    k = count if count is not None else s.sample_size
    use_secure = secure if secure is not None else s.secure_random

    lines = _LineCounter(source)
    chosen: List[str] = sample(default_random_source(secure=use_secure), k, lines)
    for line in chosen:
        click.echo(line)

    log.info(f"lines_read={lines.count} sample_size={k} sampled={len(chosen)} secure={use_secure}")


if __name__ == "__main__":
    cli()
