"""Command-line interface for wfts-lang."""

import logging

import click

from wftslang.cli.inflect import inflect_cmd
from wftslang.cli.inventory import inventory
from wftslang.cli.pronounce import pronounce_cmd


@click.group()
@click.version_option(package_name="wfts-lang")
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Log syllabification and inflection steps to stderr.",
)
def main(verbose: bool) -> None:
    """wfts: Phonology of the constructed languages of the world of the stars."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


main.add_command(inventory)
main.add_command(pronounce_cmd, name="pronounce")
main.add_command(inflect_cmd, name="inflect")
