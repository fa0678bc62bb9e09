"""gitstream categorize command."""

import click

from gitstream.categorize import categorize as categorize_path
from gitstream.categorize import path_extension


@click.command()
@click.argument("paths", nargs=-1, required=True)
def categorize(paths: tuple[str, ...]) -> None:
    """Print the category assigned to each PATH.

    Output is one ``category<TAB>path`` line per argument.
    """
    for path in paths:
        category = categorize_path(path, path_extension(path))
        click.echo(f"{category.value}\t{path}")
