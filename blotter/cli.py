""" CLI utilities for Blotter """

import json
import logging

import click

from .entry import Site, parse_entry
from .errors import BlotterError

LOGGER = logging.getLogger(__name__)


@click.command('blotter', short_help="Parse blog entries")
@click.argument('entries', nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option('--prefix', '-p', 'prefix', default=None,
              help="Prefix to prepend to every entry link")
@click.option('--comment', '-c', 'comment_files', multiple=True,
              type=click.Path(dir_okay=False),
              help="A candidate comment file (may be repeated)")
@click.option('--skip-errors', '-k', 'skip_errors', is_flag=True,
              help="Leave out entries that fail to parse instead of stopping")
@click.option('--verbose', '-v', 'verbose', is_flag=True, help="Show detailed actions")
def main(entries, prefix, comment_files, skip_errors, verbose):
    """ Parses each ENTRY file and prints the results as a JSON array.

    Comment files whose names contain an entry's link name are attached to
    that entry.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    site = Site(prefix=prefix, comment_files=comment_files)

    results = []
    for path in entries:
        try:
            results.append(parse_entry(path, site).to_dict())
        except BlotterError as err:
            if not skip_errors:
                raise click.ClickException(f"{path}: {err}") from err
            LOGGER.warning("Skipping %s: %s", path, err)

    click.echo(json.dumps(results, indent=2))
