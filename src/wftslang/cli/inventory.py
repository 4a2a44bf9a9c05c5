"""wfts inventory: show the phoneme inventory of a language."""

from __future__ import annotations

import json
import sys

import click

from wftslang.errors import UnknownLanguageError
from wftslang.inventory import PhonemeClass
from wftslang.languages import available_languages, get_language


@click.command()
@click.option(
    "--language", "-l",
    required=True,
    help=f"Language code. One of: {', '.join(available_languages())}.",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def inventory(language: str, output_format: str) -> None:
    """Show the phoneme inventory of a language."""
    try:
        lang = get_language(language)
    except UnknownLanguageError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    inv = lang.inventory
    if output_format == "json":
        click.echo(json.dumps(inv.to_dict(), ensure_ascii=False, indent=2))
        return

    click.echo(f"{inv.language_name} ({inv.language})")
    click.echo()
    for phoneme_class in PhonemeClass:
        members = inv.of_class(phoneme_class)
        if not members:
            continue
        spelled = " ".join(f"{p.orthography}/{p.broad_ipa}/" for p in members)
        click.echo(f"{phoneme_class.value.capitalize()} ({len(members)}): {spelled}")
    click.echo(f"Total: {inv.size} phonemes")
