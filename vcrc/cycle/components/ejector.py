"""Two-phase ejector specification and flow solver.

The ejector entrains the low-pressure suction stream with the high-pressure
motive (nozzle) stream.  Both streams expand to a fixed mixing pressure,
mix with the momentum-weighted kinetic energy of the two jets, and the
mixture is recompressed in the diffuser.  The nozzle share of the total mass
flow (the flow ratio) is found from the condition that it equals the vapour
quality at the diffuser outlet, which is what a liquid/vapour separator
downstream of the ejector requires.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from vcrc.core.config import DEFAULT_SETTINGS, SolverSettings
from vcrc.core.errors import SolverDivergenceError
from vcrc.core.fluids import RefrigerantState
from vcrc.core.solvers import find_root_near_guess
from vcrc.cycle.components.base import CycleComponent
from vcrc.utils.constants import EJECTOR_MIXING_PRESSURE_RATIO
from vcrc.utils.validation import ValidationResult, validate_open_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ejector(CycleComponent):
    """Ejector with constant section efficiencies.

    Passing a single efficiency applies it to the nozzle, the suction
    section and the diffuser.

    Args:
        nozzle_efficiency: Nozzle isentropic efficiency [-], in (0, 1).
        suction_efficiency: Suction section isentropic efficiency [-].
        diffuser_efficiency: Diffuser isentropic efficiency [-].
    """

    nozzle_efficiency: float
    suction_efficiency: float | None = None
    diffuser_efficiency: float | None = None

    component_type = "ejector"

    def __post_init__(self) -> None:
        if self.suction_efficiency is None:
            object.__setattr__(self, "suction_efficiency", self.nozzle_efficiency)
        if self.diffuser_efficiency is None:
            object.__setattr__(self, "diffuser_efficiency", self.nozzle_efficiency)

        result = ValidationResult()
        for name, value, label in (
            ("nozzle_efficiency", self.nozzle_efficiency, "the nozzle"),
            ("suction_efficiency", self.suction_efficiency, "the suction section"),
            ("diffuser_efficiency", self.diffuser_efficiency, "the diffuser"),
        ):
            validate_open_range(
                name, value, 0.0, 1.0, result,
                f"Isentropic efficiency of {label} should be in (0;100) %!",
            )
        result.raise_if_invalid()

    def calculate_flows(
        self,
        nozzle_inlet: RefrigerantState,
        suction_inlet: RefrigerantState,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ) -> EjectorFlows:
        """Solve the ejector for the given motive and suction inlet states."""
        return EjectorFlows(self, nozzle_inlet, suction_inlet, settings)

    def summary(self) -> dict[str, Any]:
        return {
            "type": self.component_type,
            "nozzle_efficiency": self.nozzle_efficiency,
            "suction_efficiency": self.suction_efficiency,
            "diffuser_efficiency": self.diffuser_efficiency,
        }


def outlet_speed(inlet: RefrigerantState, outlet: RefrigerantState) -> float:
    """Jet speed [m/s] gained by expanding from *inlet* to *outlet*."""
    return math.sqrt(2.0 * (inlet.enthalpy - outlet.enthalpy))


@dataclass(frozen=True)
class _MixingSolution:
    kinetic_energy: float  # J/kg
    mixing_inlet: RefrigerantState
    diffuser_outlet: RefrigerantState


@dataclass(frozen=True, init=False)
class EjectorFlows:
    """Solved ejector flow field.

    Attributes:
        nozzle_inlet: Motive stream inlet.
        suction_inlet: Suction stream inlet.
        nozzle_outlet: Motive stream at the mixing pressure.
        suction_outlet: Suction stream at the mixing pressure.
        mixing_inlet: Mixed stream at the mixing pressure.
        diffuser_outlet: Ejector outlet.
        flow_ratio: Nozzle mass flow / total mass flow [-].

    Raises:
        ConstructionValidationError: If the inlets use different
            refrigerants or the nozzle pressure is not above the suction
            pressure.
        SolverDivergenceError: If the flow ratio cannot be found.
    """

    nozzle_inlet: RefrigerantState
    suction_inlet: RefrigerantState
    nozzle_outlet: RefrigerantState
    suction_outlet: RefrigerantState
    mixing_inlet: RefrigerantState
    diffuser_outlet: RefrigerantState
    flow_ratio: float
    ejector: Ejector = field(repr=False)

    def __init__(
        self,
        ejector: Ejector,
        nozzle_inlet: RefrigerantState,
        suction_inlet: RefrigerantState,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        result = ValidationResult()
        result.require(
            nozzle_inlet.name == suction_inlet.name,
            "refrigerant",
            "Only one refrigerant should be selected!",
        )
        result.require(
            nozzle_inlet.pressure > suction_inlet.pressure,
            "pressure",
            "Ejector nozzle inlet pressure should be greater than suction inlet pressure!",
        )
        result.raise_if_invalid()

        mixing_pressure = EJECTOR_MIXING_PRESSURE_RATIO * suction_inlet.pressure
        nozzle_outlet = nozzle_inlet.expansion_to(mixing_pressure, ejector.nozzle_efficiency)
        suction_outlet = suction_inlet.expansion_to(mixing_pressure, ejector.suction_efficiency)
        nozzle_speed = outlet_speed(nozzle_inlet, nozzle_outlet)
        suction_speed = outlet_speed(suction_inlet, suction_outlet)
        refrigerant = nozzle_inlet.refrigerant

        def mix(flow_ratio: float) -> _MixingSolution:
            speed = flow_ratio * nozzle_speed + (1.0 - flow_ratio) * suction_speed
            kinetic_energy = speed**2 / 2.0
            mixing_inlet = refrigerant.with_state(
                pressure=mixing_pressure,
                enthalpy=flow_ratio * nozzle_inlet.enthalpy
                + (1.0 - flow_ratio) * suction_inlet.enthalpy
                - kinetic_energy,
            )
            diffuser_pressure = refrigerant.with_state(
                entropy=mixing_inlet.entropy,
                enthalpy=mixing_inlet.enthalpy + ejector.diffuser_efficiency * kinetic_energy,
            ).pressure
            diffuser_outlet = refrigerant.with_state(
                pressure=diffuser_pressure,
                enthalpy=mixing_inlet.enthalpy + kinetic_energy,
            )
            return _MixingSolution(kinetic_energy, mixing_inlet, diffuser_outlet)

        def residual(flow_ratio: float) -> float:
            quality = mix(flow_ratio).diffuser_outlet.quality
            if quality is None:
                raise SolverDivergenceError(
                    "There should be a two-phase refrigerant at the ejector diffuser outlet!"
                )
            return quality - flow_ratio

        margin = settings.fraction_margin
        flow_ratio = find_root_near_guess(
            residual,
            settings.flow_ratio_guess,
            margin,
            1.0 - margin,
            settings.flow_ratio_tolerance,
        )
        solution = mix(flow_ratio)
        logger.debug(
            "Ejector flow ratio %.6f, diffuser outlet %.0f Pa",
            flow_ratio,
            solution.diffuser_outlet.pressure,
        )

        for name, value in (
            ("nozzle_inlet", nozzle_inlet),
            ("suction_inlet", suction_inlet),
            ("nozzle_outlet", nozzle_outlet),
            ("suction_outlet", suction_outlet),
            ("mixing_inlet", solution.mixing_inlet),
            ("diffuser_outlet", solution.diffuser_outlet),
            ("flow_ratio", flow_ratio),
            ("ejector", ejector),
        ):
            object.__setattr__(self, name, value)

    @property
    def mixing_pressure(self) -> float:
        return self.mixing_inlet.pressure
