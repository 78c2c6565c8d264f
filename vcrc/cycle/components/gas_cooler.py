"""Gas cooler specification for transcritical cycles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vcrc.core.fluids import Refrigerant, RefrigerantState
from vcrc.cycle.components.base import HeatReleaser, as_refrigerant
from vcrc.utils.constants import (
    BAR_TO_PA,
    PA_TO_MPA,
    R744_GAS_COOLER_MAX_TEMPERATURE,
    R744_GAS_COOLER_OFFSET,
    R744_GAS_COOLER_SLOPE,
    T_CELSIUS_OFFSET,
)
from vcrc.utils.validation import ValidationResult


def default_r744_pressure(temperature: float) -> float:
    """Optimal-ish R744 gas cooler pressure [Pa] for an outlet temperature [K]."""
    t_c = temperature - T_CELSIUS_OFFSET
    return (R744_GAS_COOLER_SLOPE * t_c + R744_GAS_COOLER_OFFSET) * BAR_TO_PA


@dataclass(frozen=True)
class GasCooler(HeatReleaser):
    """Supercritical heat releaser with a fixed outlet temperature and pressure.

    For R744 below 60 °C the pressure may be omitted; it then follows a
    linear correlation in the outlet temperature.

    Args:
        refrigerant: Refrigerant name or instance.
        temperature: Outlet temperature [K], above the critical temperature.
        pressure: Absolute pressure [Pa], above the critical pressure.

    Raises:
        ConstructionValidationError: If the pressure cannot be defaulted
            or either value is not supercritical.
    """

    refrigerant: Refrigerant
    temperature: float  # K
    pressure: float | None = None  # Pa
    outlet: RefrigerantState = field(init=False, repr=False)

    component_type = "gas_cooler"

    def __post_init__(self) -> None:
        refrigerant = as_refrigerant(self.refrigerant)
        object.__setattr__(self, "refrigerant", refrigerant)

        result = ValidationResult()
        if self.pressure is None:
            result.require(
                refrigerant.name == "R744"
                and self.temperature <= R744_GAS_COOLER_MAX_TEMPERATURE,
                "pressure",
                "It is impossible to automatically calculate the absolute pressure "
                "in the gas cooler! It is necessary to define it.",
            )
            result.raise_if_invalid()
            object.__setattr__(self, "pressure", default_r744_pressure(self.temperature))

        t_crit_c = round(refrigerant.critical_temperature - T_CELSIUS_OFFSET, 2)
        p_crit_mpa = round(refrigerant.critical_pressure * PA_TO_MPA, 2)
        result.require(
            self.temperature > refrigerant.critical_temperature,
            "temperature",
            f"Gas cooler outlet temperature should be greater than {t_crit_c} °C!",
        )
        result.require(
            self.pressure > refrigerant.critical_pressure,
            "pressure",
            f"Gas cooler absolute pressure should be greater than {p_crit_mpa} MPa!",
        )
        result.raise_if_invalid()

        object.__setattr__(
            self,
            "outlet",
            refrigerant.with_state(pressure=self.pressure, temperature=self.temperature),
        )

    def summary(self) -> dict[str, Any]:
        return {
            "type": self.component_type,
            "refrigerant": self.refrigerant.name,
            "temperature_K": self.temperature,
            "pressure_Pa": self.pressure,
        }
