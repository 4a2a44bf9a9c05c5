"""wfts inflect: inflection paradigm of a Star class 1 noun."""

from __future__ import annotations

import json
import sys

import click

from wftslang.errors import PhonologyError
from wftslang.morphology import Class1Noun


def _label(inflection) -> str:
    return " ".join(str(g) for g in inflection)


@click.command()
@click.argument("base")
@click.option(
    "--affixes",
    is_flag=True,
    default=False,
    help="Also show the affix realizing each inflection.",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def inflect_cmd(base: str, affixes: bool, output_format: str) -> None:
    """Inflect a Star class 1 noun given its nominative divine singular.

    Identical forms are listed once, with every inflection they realize.

    \b
    Examples:
        wfts inflect kas
        wfts inflect kas --affixes --format json
    """
    try:
        noun = Class1Noun.parse_str(base)
        forms = noun.inflection_map()
    except PhonologyError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    affix_table = Class1Noun.affix_table()

    if output_format == "json":
        data = {
            "base": noun.nom_div_sing.to_text(),
            "forms": [
                {
                    "text": word.to_text(),
                    "broad_ipa": word.to_broad_ipa(),
                    "inflections": [
                        {
                            "case": str(case),
                            "gender": str(gender),
                            "number": str(number),
                            **({"affix": str(affix_table[case, gender, number])} if affixes else {}),
                        }
                        for case, gender, number in inflections
                    ],
                }
                for word, inflections in forms.items()
            ],
        }
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    click.echo(f"Class 1 noun {noun.nom_div_sing.to_text()}: {len(forms)} distinct forms")
    for word, inflections in forms.items():
        click.echo(f"{word.to_text()}  /{word.to_broad_ipa()}/")
        for inflection in inflections:
            line = f"  {_label(inflection)}"
            if affixes:
                line += f"  {affix_table[inflection]}"
            click.echo(line)
