"""Reporter — une taille déclinée dans toutes les unités."""

import csv
import json
from io import StringIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from reprsize.size import Size
from reprsize.units import ALL_UNITS

FORMATS = ("table", "json", "csv")


def generate_report(size: Size, fmt: str = "table") -> str:
    """Génère le rapport d'une taille au format demandé."""
    if fmt == "json":
        return _to_json(size)
    if fmt == "csv":
        return _to_csv(size)
    if fmt == "table":
        return _to_table(size)
    raise ValueError(
        f"Format inconnu : {fmt!r} (attendu : {', '.join(FORMATS)})"
    )


def _family_name(unit) -> str:
    return unit.family or "shared"


def _to_table(size: Size) -> str:
    """Rapport formaté pour le terminal avec rich."""
    console = Console(file=StringIO(), force_terminal=True)

    summary = (
        f"[bold]Octets   :[/bold] {size.bytes}\n"
        f"[bold]Décimal  :[/bold] {size.to_string()}\n"
        f"[bold]Binaire  :[/bold] {size.to_si_string()}"
    )
    console.print(Panel(summary, title="Résumé", border_style="blue"))

    table = Table(title="Toutes les unités")
    table.add_column("Unité")
    table.add_column("Famille", style="dim")
    table.add_column("Octets par unité", justify="right")
    table.add_column("Valeur", justify="right")

    for unit in ALL_UNITS:
        table.add_row(
            unit.label,
            _family_name(unit),
            str(unit.bytes),
            size.repr(unit),
        )

    console.print(table)
    return console.file.getvalue()


def _to_json(size: Size) -> str:
    """Sérialise le rapport en JSON."""
    data = {
        "bytes": size.bytes,
        "decimal": size.to_string(),
        "binary": size.to_si_string(),
        "units": {unit.label: size.repr(unit) for unit in ALL_UNITS},
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def _to_csv(size: Size) -> str:
    """Sérialise le rapport en CSV (une ligne par unité)."""
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(["unit", "family", "bytes_per_unit", "value"])
    for unit in ALL_UNITS:
        writer.writerow([
            unit.label,
            _family_name(unit),
            unit.bytes,
            size.repr(unit),
        ])
    return output.getvalue()
