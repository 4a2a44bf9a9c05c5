"""wfts pronounce: broad and narrow pronunciation of words."""

from __future__ import annotations

import json
import sys

import click

from wftslang.errors import PhonologyError
from wftslang.languages import get_language
from wftslang.phonetics import VARIATION_SEPARATOR, pronounce_words
from wftslang.phonology import Word


@click.command()
@click.argument("words", nargs=-1, required=True)
@click.option(
    "--language", "-l",
    required=True,
    help="Language code (star, div).",
)
@click.option(
    "--unstressed",
    is_flag=True,
    default=False,
    help="Do not mark primary stress on word-initial syllables.",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def pronounce_cmd(
    words: tuple[str, ...],
    language: str,
    unstressed: bool,
    output_format: str,
) -> None:
    """Pronounce words written in a language's orthography.

    Each word is shown with its canonical spelling, broad IPA and every
    admissible narrow pronunciation. Several words are also pronounced
    together, letting sounds affect their neighbours across words.

    \b
    Examples:
        wfts pronounce -l div kwaŋ
        wfts pronounce -l star fiŋswrkpéy --format json
    """
    try:
        lang = get_language(language)
        parsed = [Word.parse_str(text, lang) for text in words]
    except PhonologyError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    stressed = not unstressed
    entries = [
        {
            "text": word.to_text(),
            "broad_ipa": word.to_broad_ipa(),
            "narrow": word.narrow_pronunc(stressed=stressed).strings(),
        }
        for word in parsed
    ]
    together = pronounce_words(parsed, stressed=stressed) if len(parsed) > 1 else None

    if output_format == "json":
        data = {"language": lang.code, "words": entries}
        if together is not None:
            data["together"] = together.strings()
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    for entry in entries:
        click.echo(f"{entry['text']}  /{entry['broad_ipa']}/")
        click.echo(f"  [{VARIATION_SEPARATOR.join(entry['narrow'])}]")
    if together is not None:
        click.echo(f"Together: [{together}]")
