"""Economizer specifications.

An economizer subcools the main liquid line by evaporating a throttled side
stream at the intermediate pressure.  With two-phase injection (TPI) the
side stream leaves the economizer wet; otherwise it leaves superheated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vcrc.cycle.components.base import CycleComponent
from vcrc.utils.constants import MAX_TEMPERATURE_DIFFERENCE
from vcrc.utils.validation import ValidationResult, validate_closed_range, validate_open_range


@dataclass(frozen=True)
class EconomizerWithTPI(CycleComponent):
    """Economizer with two-phase injection into the compressor.

    Args:
        temperature_difference: Approach at the 'cold' side [K], in (0, 50).
    """

    temperature_difference: float  # K

    component_type = "economizer_tpi"

    def __post_init__(self) -> None:
        result = self._validate()
        result.raise_if_invalid()

    def _validate(self) -> ValidationResult:
        result = ValidationResult()
        validate_open_range(
            "temperature_difference",
            self.temperature_difference,
            0.0,
            MAX_TEMPERATURE_DIFFERENCE,
            result,
            "Temperature difference at the economizer 'cold' side should be in (0;50) K!",
        )
        return result

    def summary(self) -> dict[str, Any]:
        return {
            "type": self.component_type,
            "temperature_difference_K": self.temperature_difference,
        }


@dataclass(frozen=True)
class Economizer(EconomizerWithTPI):
    """Economizer with a superheated side stream.

    Args:
        temperature_difference: Approach at the 'cold' side [K], in (0, 50).
        superheat: Side stream superheat [K], in [0, 50].
    """

    superheat: float  # K

    component_type = "economizer"

    def _validate(self) -> ValidationResult:
        result = super()._validate()
        validate_closed_range(
            "superheat",
            self.superheat,
            0.0,
            MAX_TEMPERATURE_DIFFERENCE,
            result,
            "Superheat in the economizer should be in [0;50] K!",
        )
        return result

    def summary(self) -> dict[str, Any]:
        return {**super().summary(), "superheat_K": self.superheat}
