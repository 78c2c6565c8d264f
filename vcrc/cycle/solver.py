"""Cycle dispatch for VCRC.

Builds the component specifications of a run and hands them to the
matching topology.

Supported topologies:
- Single-stage: simple, recuperator
- Two-stage: incomplete / complete intercooling, parallel compression,
  economizer (vapour injection, parallel compressor, two-phase injection)
- Ejector: plain, with economizer (three variants), with recuperator
- Mitsubishi Zubadan
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from vcrc.core.config import DEFAULT_SETTINGS, CycleConfig, SolverSettings
from vcrc.cycle.base import VCRC
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.condenser import Condenser
from vcrc.cycle.components.economizer import Economizer, EconomizerWithTPI
from vcrc.cycle.components.ejector import Ejector
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.components.gas_cooler import GasCooler
from vcrc.cycle.components.recuperator import Recuperator
from vcrc.cycle.economizer import (
    VCRCWithEconomizer,
    VCRCWithEconomizerAndPC,
    VCRCWithEconomizerAndTPI,
)
from vcrc.cycle.ejector import (
    VCRCWithEjector,
    VCRCWithEjectorAndEconomizer,
    VCRCWithEjectorAndRecuperator,
    VCRCWithEjectorEconomizerAndPC,
    VCRCWithEjectorEconomizerAndTPI,
)
from vcrc.cycle.intercooling import VCRCWithCIC, VCRCWithIIC
from vcrc.cycle.parallel import VCRCWithPC
from vcrc.cycle.recuperator import VCRCWithRecuperator
from vcrc.cycle.simple import SimpleVCRC
from vcrc.cycle.zubadan import VCRCMitsubishiZubadan

logger = logging.getLogger(__name__)


class CycleType(Enum):
    """Refrigeration cycle topology."""

    SIMPLE = "simple"
    RECUPERATOR = "recuperator"
    IIC = "iic"
    CIC = "cic"
    PARALLEL_COMPRESSION = "pc"
    ECONOMIZER = "economizer"
    ECONOMIZER_PC = "economizer-pc"
    ECONOMIZER_TPI = "economizer-tpi"
    EJECTOR = "ejector"
    EJECTOR_ECONOMIZER = "ejector-economizer"
    EJECTOR_ECONOMIZER_PC = "ejector-economizer-pc"
    EJECTOR_ECONOMIZER_TPI = "ejector-economizer-tpi"
    EJECTOR_RECUPERATOR = "ejector-recuperator"
    MITSUBISHI_ZUBADAN = "zubadan"


TOPOLOGY_DESCRIPTIONS: dict[CycleType, str] = {
    CycleType.SIMPLE: "Simple single-stage cycle",
    CycleType.RECUPERATOR: "Single-stage cycle with a recuperator",
    CycleType.IIC: "Two-stage cycle with incomplete intercooling",
    CycleType.CIC: "Two-stage cycle with complete intercooling",
    CycleType.PARALLEL_COMPRESSION: "Two-stage cycle with parallel compression",
    CycleType.ECONOMIZER: "Two-stage cycle with an economizer",
    CycleType.ECONOMIZER_PC: "Economizer and parallel compression",
    CycleType.ECONOMIZER_TPI: "Economizer and two-phase injection",
    CycleType.EJECTOR: "Ejector as the expansion device",
    CycleType.EJECTOR_ECONOMIZER: "Ejector and economizer",
    CycleType.EJECTOR_ECONOMIZER_PC: "Ejector, economizer and parallel compression",
    CycleType.EJECTOR_ECONOMIZER_TPI: "Ejector, economizer and two-phase injection",
    CycleType.EJECTOR_RECUPERATOR: "Ejector and recuperator",
    CycleType.MITSUBISHI_ZUBADAN: "Mitsubishi Zubadan (recuperator + economizer with TPI)",
}


@dataclass
class CycleDefinition:
    """Definition of a complete refrigeration cycle.

    Temperatures in K, temperature differences in K, pressures in Pa,
    efficiencies as decimal fractions.
    """

    cycle_type: CycleType = CycleType.SIMPLE
    refrigerant: str = "R32"

    # Evaporator
    evaporating_temperature: float = 278.15  # K
    superheat: float = 8.0  # K

    # Heat releaser
    transcritical: bool = False
    condensing_temperature: float = 318.15  # K
    subcooling: float = 3.0  # K
    gas_cooler_temperature: float = 313.15  # K
    gas_cooler_pressure: float | None = None  # Pa

    compressor_efficiency: float = 0.8

    # Auxiliary equipment
    economizer_temperature_difference: float = 5.0  # K
    economizer_superheat: float = 5.0  # K
    recuperator_temperature_difference: float = 5.0  # K
    ejector_nozzle_efficiency: float = 0.9
    ejector_suction_efficiency: float = 0.9
    ejector_diffuser_efficiency: float = 0.8

    settings: SolverSettings = field(default_factory=lambda: DEFAULT_SETTINGS)


def build_cycle_definition(config: CycleConfig) -> CycleDefinition:
    """Translate a run configuration into a cycle definition.

    Raises:
        ValueError: If the topology or heat releaser name is unknown.
    """
    try:
        cycle_type = CycleType(config.topology.lower())
    except ValueError:
        choices = ", ".join(t.value for t in CycleType)
        raise ValueError(
            f"Unknown topology '{config.topology}' (expected one of: {choices})"
        ) from None

    heat_releaser = config.heat_releaser.lower().replace("_", "-")
    if heat_releaser not in ("condenser", "gas-cooler"):
        raise ValueError(f"Unknown heat releaser: {config.heat_releaser}")

    return CycleDefinition(
        cycle_type=cycle_type,
        refrigerant=config.refrigerant,
        evaporating_temperature=config.evaporating_temperature,
        superheat=config.superheat,
        transcritical=heat_releaser == "gas-cooler",
        condensing_temperature=config.condensing_temperature,
        subcooling=config.subcooling,
        gas_cooler_temperature=config.gas_cooler_temperature,
        gas_cooler_pressure=config.gas_cooler_pressure,
        compressor_efficiency=config.compressor_efficiency,
        economizer_temperature_difference=config.economizer_temperature_difference,
        economizer_superheat=config.economizer_superheat,
        recuperator_temperature_difference=config.recuperator_temperature_difference,
        ejector_nozzle_efficiency=config.ejector_nozzle_efficiency,
        ejector_suction_efficiency=config.ejector_suction_efficiency,
        ejector_diffuser_efficiency=config.ejector_diffuser_efficiency,
    )


def _heat_releaser(defn: CycleDefinition) -> HeatReleaser:
    if defn.transcritical:
        return GasCooler(defn.refrigerant, defn.gas_cooler_temperature, defn.gas_cooler_pressure)
    return Condenser(defn.refrigerant, defn.condensing_temperature, defn.subcooling)


def solve_cycle(definition: CycleDefinition) -> VCRC:
    """Build the components and solve the requested topology.

    Args:
        definition: Complete cycle definition.

    Returns:
        The solved (immutable) cycle.

    Raises:
        ConstructionValidationError: If any component or cycle rule fails.
        SolverDivergenceError: If an implicit closure does not converge.
    """
    defn = definition
    logger.info("Solving %s cycle with %s", defn.cycle_type.value, defn.refrigerant)

    evaporator = Evaporator(defn.refrigerant, defn.evaporating_temperature, defn.superheat)
    compressor = Compressor(defn.compressor_efficiency)
    heat_releaser = _heat_releaser(defn)
    settings = defn.settings
    t = defn.cycle_type

    if t in (
        CycleType.ECONOMIZER,
        CycleType.ECONOMIZER_PC,
        CycleType.EJECTOR_ECONOMIZER,
        CycleType.EJECTOR_ECONOMIZER_PC,
    ):
        economizer = Economizer(defn.economizer_temperature_difference, defn.economizer_superheat)
    elif t in (
        CycleType.ECONOMIZER_TPI,
        CycleType.EJECTOR_ECONOMIZER_TPI,
        CycleType.MITSUBISHI_ZUBADAN,
    ):
        economizer = EconomizerWithTPI(defn.economizer_temperature_difference)
    if t in (CycleType.RECUPERATOR, CycleType.EJECTOR_RECUPERATOR):
        recuperator = Recuperator(defn.recuperator_temperature_difference)
    if t.value.startswith("ejector"):
        ejector = Ejector(
            defn.ejector_nozzle_efficiency,
            defn.ejector_suction_efficiency,
            defn.ejector_diffuser_efficiency,
        )

    if t == CycleType.SIMPLE:
        return SimpleVCRC(evaporator, compressor, heat_releaser, settings)
    elif t == CycleType.RECUPERATOR:
        return VCRCWithRecuperator(evaporator, recuperator, compressor, heat_releaser, settings)
    elif t == CycleType.IIC:
        return VCRCWithIIC(evaporator, compressor, heat_releaser, settings)
    elif t == CycleType.CIC:
        return VCRCWithCIC(evaporator, compressor, heat_releaser, settings)
    elif t == CycleType.PARALLEL_COMPRESSION:
        return VCRCWithPC(evaporator, compressor, heat_releaser, settings)
    elif t == CycleType.ECONOMIZER:
        return VCRCWithEconomizer(evaporator, compressor, heat_releaser, economizer, settings)
    elif t == CycleType.ECONOMIZER_PC:
        return VCRCWithEconomizerAndPC(evaporator, compressor, heat_releaser, economizer, settings)
    elif t == CycleType.ECONOMIZER_TPI:
        return VCRCWithEconomizerAndTPI(
            evaporator, compressor, heat_releaser, economizer, settings
        )
    elif t == CycleType.EJECTOR:
        return VCRCWithEjector(evaporator, compressor, heat_releaser, ejector, settings)
    elif t == CycleType.EJECTOR_ECONOMIZER:
        return VCRCWithEjectorAndEconomizer(
            evaporator, compressor, heat_releaser, ejector, economizer, settings
        )
    elif t == CycleType.EJECTOR_ECONOMIZER_PC:
        return VCRCWithEjectorEconomizerAndPC(
            evaporator, compressor, heat_releaser, ejector, economizer, settings
        )
    elif t == CycleType.EJECTOR_ECONOMIZER_TPI:
        return VCRCWithEjectorEconomizerAndTPI(
            evaporator, compressor, heat_releaser, ejector, economizer, settings
        )
    elif t == CycleType.EJECTOR_RECUPERATOR:
        return VCRCWithEjectorAndRecuperator(
            evaporator, recuperator, compressor, heat_releaser, ejector, settings
        )
    elif t == CycleType.MITSUBISHI_ZUBADAN:
        return VCRCMitsubishiZubadan(evaporator, compressor, heat_releaser, economizer, settings)
    else:
        raise ValueError(f"Unknown cycle type: {t}")
