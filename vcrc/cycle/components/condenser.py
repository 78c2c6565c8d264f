"""Condenser specification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vcrc.core.fluids import Refrigerant, RefrigerantState
from vcrc.cycle.components.base import HeatReleaser, as_refrigerant
from vcrc.cycle.components.evaporator import saturation_range_message
from vcrc.utils.constants import MAX_TEMPERATURE_DIFFERENCE
from vcrc.utils.validation import ValidationResult, validate_closed_range, validate_open_range


@dataclass(frozen=True)
class Condenser(HeatReleaser):
    """Subcritical heat releaser producing subcooled liquid.

    Args:
        refrigerant: Refrigerant name or instance.
        temperature: Condensing (bubble point) temperature [K].
        subcooling: Subcooling at the outlet [K], in [0, 50].
    """

    refrigerant: Refrigerant
    temperature: float  # K
    subcooling: float  # K
    pressure: float = field(init=False)  # Pa
    outlet: RefrigerantState = field(init=False, repr=False)

    component_type = "condenser"

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
            saturation_range_message("Condensing", refrigerant),
        )
        validate_closed_range(
            "subcooling",
            self.subcooling,
            0.0,
            MAX_TEMPERATURE_DIFFERENCE,
            result,
            "Subcooling in the condenser should be in [0;50] K!",
        )
        result.raise_if_invalid()

        outlet = refrigerant.subcooled(self.subcooling, temperature=self.temperature)
        object.__setattr__(self, "outlet", outlet)
        object.__setattr__(self, "pressure", outlet.pressure)

    def summary(self) -> dict[str, Any]:
        return {
            "type": self.component_type,
            "refrigerant": self.refrigerant.name,
            "temperature_K": self.temperature,
            "subcooling_K": self.subcooling,
            "pressure_Pa": self.pressure,
        }
