"""CLI command for reporting codebook and decode-trie metadata as JSON."""

from __future__ import annotations

from pathlib import Path
import json

import click

from huffcodec.codebook_file import build_codebook
from huffcodec.errors import HuffmanCodecError
from huffcodec.trie import DecodeTrie


@click.command(name="inspect")
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
def inspect(codebook: Path | None, codes: tuple[str, ...]) -> None:
    """Describe the codebook and whether its decode trie is valid."""

    try:
        book = build_codebook(codebook, codes)
        trie = DecodeTrie.from_codebook(book)
        info = book.to_dict()
        info.update(
            {
                "codes": book.as_mapping(),
                "trie_valid": trie.is_valid(),
                "trie_depth": trie.depth(),
            }
        )
        click.echo(json.dumps(info, indent=2, ensure_ascii=False))
    except (HuffmanCodecError, ValueError) as e:
        raise click.ClickException(str(e)) from e
