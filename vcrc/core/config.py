"""Solver settings and run configuration for VCRC.

``SolverSettings`` holds the numerical knobs of the implicit cycle closures.
``CycleConfig`` describes a single cycle to be solved and analysed, and can
be loaded from a JSON file for use with the CLI.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


# --- Numerical settings ---


@dataclass(frozen=True)
class SolverSettings:
    """Seeds, brackets and tolerances of the iterative closures.

    Ratios (flow ratio, quality) are decimal fractions; pressures in Pa.
    """

    # Ejector flow ratio
    flow_ratio_guess: float = 0.5
    flow_ratio_tolerance: float = 1e-8
    # Zubadan injection quality
    injection_quality_guess: float = 0.8
    injection_quality_tolerance: float = 1e-5
    zubadan_max_pressure_iterations: int = 50
    # Ejector diffuser outlet pressure (ejector + economizer/recuperator families)
    diffuser_pressure_offset: float = 100.0  # Pa above evaporating pressure
    diffuser_pressure_margin: float = 1.0  # Pa inside the bracket ends
    diffuser_pressure_tolerance: float = 10.0  # Pa
    # Bracket margin for fractional unknowns
    fraction_margin: float = 1e-11


DEFAULT_SETTINGS = SolverSettings()


# --- Run configuration ---


@dataclass
class CycleConfig:
    """Input description of one cycle run.

    Temperatures in K, temperature differences in K, pressures in Pa,
    efficiencies as decimal fractions.
    """

    topology: str = "simple"
    refrigerant: str = "R32"

    evaporating_temperature: float = 278.15  # K
    superheat: float = 8.0  # K

    # Heat releaser: a condenser unless a gas cooler is requested
    heat_releaser: str = "condenser"
    condensing_temperature: float = 318.15  # K
    subcooling: float = 3.0  # K
    gas_cooler_temperature: float = 313.15  # K
    gas_cooler_pressure: float | None = None  # Pa

    compressor_efficiency: float = 0.8

    economizer_temperature_difference: float = 5.0  # K
    economizer_superheat: float = 5.0  # K
    recuperator_temperature_difference: float = 5.0  # K
    ejector_nozzle_efficiency: float = 0.9
    ejector_suction_efficiency: float = 0.9
    ejector_diffuser_efficiency: float = 0.8

    indoor_temperature: float = 291.15  # K
    outdoor_temperature: float = 308.15  # K

    extra: dict[str, Any] = field(default_factory=dict)


def load_cycle_config(path: str | Path) -> CycleConfig:
    """Load a run configuration from a JSON file.

    Unknown keys are kept in ``extra`` and logged.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    known = {f.name for f in fields(CycleConfig)} - {"extra"}
    kwargs = {k: v for k, v in data.items() if k in known}
    extra = {k: v for k, v in data.items() if k not in known}
    if extra:
        logger.warning("Ignoring unknown configuration keys in %s: %s", path, sorted(extra))

    logger.info("Loaded cycle configuration from %s", path)
    return CycleConfig(**kwargs, extra=extra)
