"""Interface CLI pour reprsize."""

import sys

import click
from rich.console import Console
from rich.markup import escape

from reprsize import __version__
from reprsize.exceptions import InvalidSize
from reprsize.reporter import FORMATS, generate_report
from reprsize.size import Size
from reprsize.units import Units

console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Affichage lisible de tailles en octets."""


def _parse_size(count: str) -> Size:
    """Convertit l'argument COUNT (entier en base 10) en Size."""
    try:
        value = int(count)
    except ValueError:
        raise InvalidSize(count, "entier attendu") from None
    return Size(value)


@cli.command("format")
@click.argument("count")
@click.option(
    "--binary", is_flag=True, default=False,
    help="Unités binaires (KiB, MiB...) au lieu des unités décimales.",
)
@click.option(
    "--unit", "unit_label",
    default=None,
    help="Unité explicite (B, KB, KiB, MB, MiB...).",
)
def format_cmd(count, binary, unit_label):
    """Afficher COUNT octets sous forme lisible."""
    if binary and unit_label:
        console.print("[red]Erreur :[/red] --binary et --unit sont exclusifs.")
        sys.exit(1)

    try:
        size = _parse_size(count)
        if unit_label:
            text = size.repr(Units.from_label(unit_label))
        elif binary:
            text = size.to_si_string()
        else:
            text = size.to_string()
    except ValueError as e:
        console.print(f"[red]Erreur :[/red] {escape(str(e))}")
        sys.exit(1)

    click.echo(text)


@cli.command()
@click.argument("count")
@click.option(
    "--format", "fmt",
    type=click.Choice(FORMATS),
    default="table",
    help="Format du rapport.",
)
@click.option(
    "--output", "-o",
    default=None,
    help="Fichier de sortie (défaut : stdout).",
)
def report(count, fmt, output):
    """Décliner COUNT octets dans toutes les unités."""
    try:
        size = _parse_size(count)
    except InvalidSize as e:
        console.print(f"[red]Erreur :[/red] {escape(str(e))}")
        sys.exit(1)

    content = generate_report(size, fmt=fmt)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        console.print(f"[green]Rapport écrit :[/green] {escape(output)}")
    else:
        click.echo(content)
