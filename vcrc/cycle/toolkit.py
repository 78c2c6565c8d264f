"""Shared helpers for the cycle topologies.

Pure functions only: every topology calls what it needs explicitly.
"""

from __future__ import annotations

import math

from vcrc.core.fluids import Refrigerant, RefrigerantState
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.condenser import Condenser
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.utils.validation import ValidationResult


def intermediate_pressure(refrigerant: Refrigerant, low: float, high: float) -> float:
    """Intermediate pressure [Pa] between *low* and *high*.

    The geometric mean of the two pressures; if that is not below the
    critical pressure (transcritical heat releasers), the geometric mean
    of *low* and the critical pressure.
    """
    mean = math.sqrt(low * high)
    if mean < refrigerant.critical_pressure:
        return mean
    return math.sqrt(low * refrigerant.critical_pressure)


def ejector_flow_ratio(quality: float) -> float:
    """Motive / suction mass flow for a separator fed at vapour *quality*."""
    return quality / (1.0 - quality)


def validate_common(evaporator: Evaporator, heat_releaser: HeatReleaser) -> ValidationResult:
    """Rules every cycle shares: one refrigerant, condensing above evaporating."""
    result = ValidationResult()
    result.require(
        evaporator.refrigerant.name == heat_releaser.refrigerant.name,
        "refrigerant",
        "Only one refrigerant should be selected!",
    )
    if isinstance(heat_releaser, Condenser):
        result.require(
            heat_releaser.temperature > evaporator.temperature,
            "temperature",
            "Condensing temperature should be greater than evaporating temperature!",
        )
    return result


def validate_refrigerant_type(refrigerant: Refrigerant) -> ValidationResult:
    """Two-stage and ejector cycles need a single component or an azeotrope."""
    result = ValidationResult()
    result.require(
        refrigerant.is_single_component or refrigerant.is_azeotropic_blend,
        "refrigerant",
        "Refrigerant should be a single component or an azeotropic blend!",
    )
    return result


def validate_without_glide(refrigerant: Refrigerant) -> ValidationResult:
    """Cycles whose closure assumes isothermal phase change."""
    result = ValidationResult()
    result.require(
        not refrigerant.has_glide,
        "refrigerant",
        "Refrigerant should not have a temperature glide!",
    )
    return result


def two_phase_quality(state: RefrigerantState, location: str) -> float:
    """Vapour quality of *state*, which must be two-phase.

    Raises:
        ConstructionValidationError: If the state is single-phase.
    """
    result = ValidationResult()
    result.require(
        state.quality is not None,
        "quality",
        f"There should be a two-phase refrigerant at the {location}!",
    )
    result.raise_if_invalid()
    return state.quality


def validate_economizer_temperatures(
    temperature_difference: float,
    hot_inlet: RefrigerantState,
    injection_inlet: RefrigerantState,
    injection_outlet: RefrigerantState | None = None,
) -> ValidationResult:
    """Temperature ordering across an economizer.

    Args:
        temperature_difference: Economizer approach at the 'cold' side [K].
        hot_inlet: Liquid line inlet (heat releaser side).
        injection_inlet: Throttled injection stream inlet.
        injection_outlet: Superheated injection stream outlet; omitted for
            two-phase injection.
    """
    result = ValidationResult()
    if injection_outlet is not None:
        result.require(
            injection_outlet.temperature < hot_inlet.temperature,
            "economizer",
            "Wrong temperature difference at the economizer 'hot' side!",
        )
    result.require(
        injection_inlet.temperature + temperature_difference < hot_inlet.temperature,
        "economizer",
        "Too high temperature difference at the economizer 'cold' side!",
    )
    return result


def two_phase_injection_enthalpy(
    injection_inlet: RefrigerantState,
    first_stage_discharge: RefrigerantState,
    saturated_vapour: RefrigerantState,
    liquid_inlet: RefrigerantState,
    liquid_outlet: RefrigerantState,
) -> float:
    """Enthalpy [J/kg] of a two-phase injection stream leaving the economizer.

    Follows from the economizer energy balance combined with the condition
    that injecting the stream into the first-stage discharge yields
    saturated vapour.
    """
    desuperheating = first_stage_discharge.enthalpy - saturated_vapour.enthalpy
    subcooling = liquid_inlet.enthalpy - liquid_outlet.enthalpy
    return (
        injection_inlet.enthalpy * desuperheating + saturated_vapour.enthalpy * subcooling
    ) / (desuperheating + subcooling)
