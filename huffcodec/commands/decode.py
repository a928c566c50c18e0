"""CLI command for decoding a bit string with a codebook.

Examples
--------
  huffcodec decode --code a=0 --code b=10 --code c=11 01011
  huffcodec decode --codebook codes.json --lenient 0101101
"""

from __future__ import annotations

from pathlib import Path

import click

from huffcodec.bits import BitSequence
from huffcodec.codebook_file import build_codebook
from huffcodec.errors import HuffmanCodecError, TruncatedInputError
from huffcodec.trie import DecodeTrie


@click.command(name="decode")
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
@click.option(
    "lenient",
    "--lenient",
    is_flag=True,
    help="Drop an incomplete trailing code instead of failing",
)
@click.argument("bits", type=str)
def decode(codebook: Path | None, codes: tuple[str, ...], lenient: bool, bits: str) -> None:
    """Print the text encoded by the 0/1 string BITS."""

    try:
        book = build_codebook(codebook, codes)
        trie = DecodeTrie.from_codebook(book)
        if not trie.is_valid():
            click.secho(
                "Warning: codebook does not form a full prefix code; some inputs cannot be decoded",
                fg="yellow",
                err=True,
            )
        click.echo(trie.decode(BitSequence(bits), strict=not lenient))
    except TruncatedInputError as e:
        raise click.ClickException(f"{e} (decoded so far: {e.decoded!r}; use --lenient to drop the tail)") from e
    except (HuffmanCodecError, ValueError) as e:
        raise click.ClickException(str(e)) from e
