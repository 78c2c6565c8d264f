"""Recuperator (suction line heat exchanger) specification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vcrc.cycle.components.base import CycleComponent
from vcrc.utils.constants import MAX_TEMPERATURE_DIFFERENCE
from vcrc.utils.validation import ValidationResult, validate_open_range


@dataclass(frozen=True)
class Recuperator(CycleComponent):
    """Counter-flow exchanger between the suction and liquid lines.

    Args:
        temperature_difference: Approach at the 'hot' side [K], in (0, 50).
    """

    temperature_difference: float  # K

    component_type = "recuperator"

    def __post_init__(self) -> None:
        result = ValidationResult()
        validate_open_range(
            "temperature_difference",
            self.temperature_difference,
            0.0,
            MAX_TEMPERATURE_DIFFERENCE,
            result,
            "Temperature difference at the recuperator 'hot' side should be in (0;50) K!",
        )
        result.raise_if_invalid()

    def summary(self) -> dict[str, Any]:
        return {
            "type": self.component_type,
            "temperature_difference_K": self.temperature_difference,
        }
