"""CLI commands for refrigeration cycle analysis."""

from __future__ import annotations

from typing import Any, Callable

import click
import numpy as np
from rich.console import Console
from rich.table import Table

from vcrc.analysis.entropy import EntropyAnalysisResult, entropy_analysis
from vcrc.core.config import CycleConfig, load_cycle_config
from vcrc.core.errors import VCRCError
from vcrc.cycle.base import VCRC
from vcrc.cycle.capabilities import TwoStage
from vcrc.cycle.solver import CycleType, build_cycle_definition, solve_cycle
from vcrc.utils.units import (
    pressure_from_si,
    pressure_to_si,
    ratio_to_fraction,
    specific_energy_from_si,
    specific_entropy_from_si,
    temperature_from_si,
    temperature_to_si,
)

_OPTIONS = [
    click.option(
        "--topology",
        type=click.Choice([t.value for t in CycleType], case_sensitive=False),
        default="simple",
        show_default=True,
        help="Cycle topology.",
    ),
    click.option("--refrigerant", type=str, default="R32", show_default=True, help="Refrigerant."),
    click.option(
        "--te", type=float, default=5.0, show_default=True, help="Evaporating temperature [°C]."
    ),
    click.option("--superheat", type=float, default=8.0, show_default=True, help="Superheat [K]."),
    click.option(
        "--tc", type=float, default=45.0, show_default=True, help="Condensing temperature [°C]."
    ),
    click.option(
        "--subcooling", type=float, default=3.0, show_default=True, help="Subcooling [K]."
    ),
    click.option(
        "--gas-cooler",
        is_flag=True,
        help="Use a gas cooler (transcritical cycle) instead of a condenser.",
    ),
    click.option(
        "--tgc",
        type=float,
        default=40.0,
        show_default=True,
        help="Gas cooler outlet temperature [°C].",
    ),
    click.option(
        "--pgc",
        type=float,
        default=None,
        help="Gas cooler pressure [bar] (defaults to a correlation for R744).",
    ),
    click.option(
        "--eta-c",
        type=float,
        default=80.0,
        show_default=True,
        help="Compressor isentropic efficiency [%].",
    ),
    click.option(
        "--economizer-dt",
        type=float,
        default=5.0,
        show_default=True,
        help="Economizer temperature difference [K].",
    ),
    click.option(
        "--economizer-superheat",
        type=float,
        default=5.0,
        show_default=True,
        help="Economizer superheat [K].",
    ),
    click.option(
        "--recuperator-dt",
        type=float,
        default=5.0,
        show_default=True,
        help="Recuperator temperature difference [K].",
    ),
    click.option(
        "--ejector-eta",
        type=(float, float, float),
        default=(90.0, 90.0, 80.0),
        show_default=True,
        help="Ejector nozzle, suction and diffuser efficiencies [%].",
    ),
    click.option(
        "--indoor", type=float, default=18.0, show_default=True, help="Indoor temperature [°C]."
    ),
    click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True),
        default=None,
        help="Run configuration (JSON); overrides the other options.",
    ),
]


def _cycle_options(func: Callable) -> Callable:
    for option in reversed(_OPTIONS):
        func = option(func)
    return func


def _config_from_options(params: dict[str, Any], outdoor: float) -> CycleConfig:
    if params["config_path"]:
        return load_cycle_config(params["config_path"])
    nozzle, suction, diffuser = params["ejector_eta"]
    return CycleConfig(
        topology=params["topology"],
        refrigerant=params["refrigerant"],
        evaporating_temperature=temperature_to_si(params["te"], "degC"),
        superheat=params["superheat"],
        heat_releaser="gas_cooler" if params["gas_cooler"] else "condenser",
        condensing_temperature=temperature_to_si(params["tc"], "degC"),
        subcooling=params["subcooling"],
        gas_cooler_temperature=temperature_to_si(params["tgc"], "degC"),
        gas_cooler_pressure=(
            pressure_to_si(params["pgc"], "bar") if params["pgc"] is not None else None
        ),
        compressor_efficiency=ratio_to_fraction(params["eta_c"]),
        economizer_temperature_difference=params["economizer_dt"],
        economizer_superheat=params["economizer_superheat"],
        recuperator_temperature_difference=params["recuperator_dt"],
        ejector_nozzle_efficiency=ratio_to_fraction(nozzle),
        ejector_suction_efficiency=ratio_to_fraction(suction),
        ejector_diffuser_efficiency=ratio_to_fraction(diffuser),
        indoor_temperature=temperature_to_si(params["indoor"], "degC"),
        outdoor_temperature=temperature_to_si(outdoor, "degC"),
    )


def _solve(console: Console, config: CycleConfig) -> VCRC:
    try:
        return solve_cycle(build_cycle_definition(config))
    except (VCRCError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)


def _points_table(cycle: VCRC) -> Table:
    table = Table(title="State Points")
    table.add_column("Point", style="cyan")
    table.add_column("T [°C]", justify="right")
    table.add_column("p [bar]", justify="right")
    table.add_column("h [kJ/kg]", justify="right")
    table.add_column("s [kJ/(kg·K)]", justify="right")
    table.add_column("x [%]", justify="right")

    for name, state in cycle.points.items():
        quality = f"{state.quality * 100:.2f}" if state.quality is not None else "—"
        table.add_row(
            name.removeprefix("point_"),
            f"{temperature_from_si(state.temperature, 'degC'):.2f}",
            f"{pressure_from_si(state.pressure, 'bar'):.3f}",
            f"{specific_energy_from_si(state.enthalpy, 'kJ/kg'):.2f}",
            f"{specific_entropy_from_si(state.entropy, 'kJ/(kg*K)'):.4f}",
            quality,
        )
    return table


def _performance_table(cycle: VCRC) -> Table:
    table = Table(title="Cycle Performance")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    table.add_row("Topology", type(cycle).__name__, "—")
    table.add_row("Refrigerant", cycle.refrigerant.name, "—")
    table.add_row(
        "Specific Cooling Capacity",
        f"{specific_energy_from_si(cycle.specific_cooling_capacity, 'kJ/kg'):.2f}",
        "kJ/kg",
    )
    table.add_row(
        "Specific Heating Capacity",
        f"{specific_energy_from_si(cycle.specific_heating_capacity, 'kJ/kg'):.2f}",
        "kJ/kg",
    )
    table.add_row(
        "Specific Work", f"{specific_energy_from_si(cycle.specific_work, 'kJ/kg'):.2f}", "kJ/kg"
    )
    table.add_row(
        "Heat Releaser Mass Flow", f"{cycle.heat_releaser_specific_mass_flow * 100:.2f}", "%"
    )
    if isinstance(cycle, TwoStage):
        table.add_row(
            "Intermediate Pressure",
            f"{pressure_from_si(cycle.intermediate_pressure, 'bar'):.3f}",
            "bar",
        )
    table.add_row("EER", f"{cycle.eer:.3f}", "—")
    table.add_row("COP", f"{cycle.cop:.3f}", "—")
    return table


def _entropy_table(result: EntropyAnalysisResult, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Item", style="cyan")
    table.add_column("Value [%]", style="green", justify="right")

    table.add_row("Thermodynamic Perfection", f"{result.thermodynamic_perfection:.2f}")
    for name, value in result.work_breakdown.items():
        label = name.removesuffix("_ratio").replace("_", " ").capitalize()
        table.add_row(label, f"{value:.2f}")
    table.add_row("Analysis Relative Error", f"{result.analysis_relative_error:.3f}")
    return table


@click.group("cycle")
@click.pass_context
def cycle(ctx: click.Context) -> None:
    """Refrigeration cycle analysis commands."""
    pass


@cycle.command("analyze")
@_cycle_options
@click.option(
    "--outdoor", type=float, default=35.0, show_default=True, help="Outdoor temperature [°C]."
)
@click.pass_context
def analyze_cmd(ctx: click.Context, outdoor: float, **params: Any) -> None:
    """Solve one cycle and run its entropy analysis."""
    console: Console = ctx.obj.get("console", Console())
    config = _config_from_options(params, outdoor)
    solved = _solve(console, config)

    console.print(f"\n[bold]VCRC: Cycle Analysis ({config.topology})[/bold]\n")
    console.print(_points_table(solved))
    console.print(_performance_table(solved))

    try:
        result = solved.entropy_analysis(config.indoor_temperature, config.outdoor_temperature)
    except VCRCError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)
    console.print(_entropy_table(result, "Entropy Analysis"))


@cycle.command("sweep")
@_cycle_options
@click.option(
    "--outdoor-min",
    type=float,
    default=30.0,
    show_default=True,
    help="Lowest outdoor temperature [°C].",
)
@click.option(
    "--outdoor-max",
    type=float,
    default=40.0,
    show_default=True,
    help="Highest outdoor temperature [°C].",
)
@click.option(
    "--steps", type=int, default=3, show_default=True, help="Number of outdoor temperatures."
)
@click.pass_context
def sweep_cmd(
    ctx: click.Context,
    outdoor_min: float,
    outdoor_max: float,
    steps: int,
    **params: Any,
) -> None:
    """Entropy analysis over a range of outdoor temperatures, averaged."""
    console: Console = ctx.obj.get("console", Console())
    if steps < 1:
        console.print("[red]Error:[/red] --steps should be at least 1.")
        raise SystemExit(1)

    config = _config_from_options(params, outdoor_min)
    solved = _solve(console, config)
    outdoor_c = np.linspace(outdoor_min, outdoor_max, steps)
    outdoors = [temperature_to_si(float(t), "degC") for t in outdoor_c]
    indoors = [config.indoor_temperature] * steps

    try:
        results = [solved.entropy_analysis(t_in, t_out) for t_in, t_out in zip(indoors, outdoors)]
        averaged = entropy_analysis([solved] * steps, indoors, outdoors)
    except VCRCError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"\n[bold]VCRC: Outdoor Temperature Sweep ({config.topology})[/bold]\n")
    table = Table(title="Per-Point Results")
    table.add_column("Outdoor [°C]", style="cyan", justify="right")
    table.add_column("Perfection [%]", style="green", justify="right")
    table.add_column("Relative Error [%]", justify="right")
    for t_out, result in zip(outdoor_c, results):
        table.add_row(
            f"{t_out:.2f}",
            f"{result.thermodynamic_perfection:.2f}",
            f"{result.analysis_relative_error:.3f}",
        )
    console.print(table)
    console.print(_entropy_table(averaged, "Averaged Entropy Analysis"))
