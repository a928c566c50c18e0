"""CLI command for encoding text with a codebook.

Examples
--------
  huffcodec encode --code a=0 --code b=10 --code c=11 abc
  huffcodec encode --codebook codes.json "hello world"
"""

from __future__ import annotations

from pathlib import Path

import click

from huffcodec.codebook_file import build_codebook
from huffcodec.errors import HuffmanCodecError


@click.command(name="encode")
@click.option(
    "codebook",
    "--codebook",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=False,
    help="JSON file mapping characters to bit strings",
)
@click.option(
    "codes",
    "--code",
    type=str,
    multiple=True,
    help="Inline code as CHAR=BITS (repeatable; overrides --codebook)",
)
@click.argument("text", type=str)
def encode(codebook: Path | None, codes: tuple[str, ...], text: str) -> None:
    """Print the bit string for TEXT."""

    try:
        book = build_codebook(codebook, codes)
        if not book.is_prefix_free():
            click.secho("Warning: codebook is not prefix-free; output may not decode uniquely", fg="yellow", err=True)
        click.echo(str(book.encode(text)))
    except (HuffmanCodecError, ValueError) as e:
        raise click.ClickException(str(e)) from e
