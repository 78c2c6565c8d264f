"""CLI commands for inspecting refrigerants and listing topologies."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from vcrc.core.errors import ConstructionValidationError
from vcrc.core.fluids import InvalidStateError, Refrigerant
from vcrc.cycle.solver import TOPOLOGY_DESCRIPTIONS
from vcrc.utils.units import pressure_from_si, temperature_from_si


@click.group("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Inspect refrigerants and available cycle topologies."""
    pass


@info.command("refrigerant")
@click.argument("name")
@click.pass_context
def info_refrigerant(ctx: click.Context, name: str) -> None:
    """Display critical and triple point data of a refrigerant."""
    console: Console = ctx.obj.get("console", Console())
    try:
        refrigerant = Refrigerant(name)
    except (ConstructionValidationError, InvalidStateError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if refrigerant.is_single_component:
        kind = "single component"
    elif refrigerant.is_azeotropic_blend:
        kind = "azeotropic blend"
    else:
        kind = "zeotropic blend"

    tree = Tree(f"[bold]{refrigerant.name}[/bold] ({kind})")
    critical = tree.add("[cyan]Critical Point[/cyan]")
    t_crit = temperature_from_si(refrigerant.critical_temperature, "degC")
    critical.add(f"Temperature: {t_crit:.2f} °C")
    critical.add(f"Pressure: {pressure_from_si(refrigerant.critical_pressure, 'MPa'):.4f} MPa")

    triple = tree.add("[cyan]Triple Point[/cyan]")
    t_triple = temperature_from_si(refrigerant.triple_temperature, "degC")
    triple.add(f"Temperature: {t_triple:.2f} °C")
    triple.add(f"Pressure: {pressure_from_si(refrigerant.triple_pressure, 'kPa'):.4f} kPa")

    tree.add(f"[cyan]Temperature Glide:[/cyan] {refrigerant.glide:.3f} K")
    console.print(tree)


@info.command("topologies")
@click.pass_context
def info_topologies(ctx: click.Context) -> None:
    """List available cycle topologies."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Available Topologies")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="green")

    for cycle_type, description in TOPOLOGY_DESCRIPTIONS.items():
        table.add_row(cycle_type.value, description)
    console.print(table)
