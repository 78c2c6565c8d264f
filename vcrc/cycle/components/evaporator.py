"""Evaporator specification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vcrc.core.fluids import Refrigerant, RefrigerantState
from vcrc.cycle.components.base import MainHeatExchanger, as_refrigerant
from vcrc.utils.constants import MAX_TEMPERATURE_DIFFERENCE, T_CELSIUS_OFFSET
from vcrc.utils.validation import ValidationResult, validate_closed_range, validate_open_range


def saturation_range_message(label: str, refrigerant: Refrigerant) -> str:
    """Message for a saturation temperature outside the triple-critical range."""
    triple = round(refrigerant.triple_temperature - T_CELSIUS_OFFSET, 2)
    critical = round(refrigerant.critical_temperature - T_CELSIUS_OFFSET, 2)
    return f"{label} temperature should be in ({triple};{critical}) °C!"


@dataclass(frozen=True)
class Evaporator(MainHeatExchanger):
    """Evaporator producing superheated vapour.

    Args:
        refrigerant: Refrigerant name or instance.
        temperature: Evaporating (dew point) temperature [K].
        superheat: Superheat at the outlet [K], in [0, 50].
    """

    refrigerant: Refrigerant
    temperature: float  # K
    superheat: float  # K
    pressure: float = field(init=False)  # Pa
    outlet: RefrigerantState = field(init=False, repr=False)

    component_type = "evaporator"

    def __post_init__(self) -> None:
        refrigerant = as_refrigerant(self.refrigerant)
        object.__setattr__(self, "refrigerant", refrigerant)

        result = ValidationResult()
        validate_open_range(
            "temperature",
            self.temperature,
            refrigerant.triple_temperature,
            refrigerant.critical_temperature,
            result,
            saturation_range_message("Evaporating", refrigerant),
        )
        validate_closed_range(
            "superheat",
            self.superheat,
            0.0,
            MAX_TEMPERATURE_DIFFERENCE,
            result,
            "Superheat in the evaporator should be in [0;50] K!",
        )
        result.raise_if_invalid()

        object.__setattr__(
            self, "pressure", refrigerant.dew_point_at(temperature=self.temperature).pressure
        )
        object.__setattr__(
            self,
            "outlet",
            refrigerant.superheated(self.superheat, temperature=self.temperature),
        )

    def summary(self) -> dict[str, Any]:
        return {
            "type": self.component_type,
            "refrigerant": self.refrigerant.name,
            "temperature_K": self.temperature,
            "superheat_K": self.superheat,
            "pressure_Pa": self.pressure,
        }
