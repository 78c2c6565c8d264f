"""Compressor specification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vcrc.cycle.components.base import CycleComponent
from vcrc.utils.validation import ValidationResult, validate_open_range


@dataclass(frozen=True)
class Compressor(CycleComponent):
    """Compressor with a constant isentropic efficiency.

    Args:
        efficiency: Isentropic efficiency [-], in (0, 1).
    """

    efficiency: float

    component_type = "compressor"

    def __post_init__(self) -> None:
        result = ValidationResult()
        validate_open_range(
            "efficiency",
            self.efficiency,
            0.0,
            1.0,
            result,
            "Isentropic efficiency of the compressor should be in (0;100) %!",
        )
        result.raise_if_invalid()

    def summary(self) -> dict[str, Any]:
        return {"type": self.component_type, "efficiency": self.efficiency}
