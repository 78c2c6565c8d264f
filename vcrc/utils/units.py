"""Unit conversion utilities for VCRC.

Provides a lightweight unit conversion system built on top of pint,
with convenience functions for common refrigeration quantities.  The
library works in SI internally (K, Pa, J/kg, J/(kg·K)); these helpers
convert at the edges.
"""

from __future__ import annotations

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()
_ureg.formatter.default_format = "~P"  # short pretty format

Q_ = _ureg.Quantity


# --- Convenience conversion functions ---


def pressure_to_si(value: float, unit: str) -> float:
    """Convert pressure value to Pascals.

    Args:
        value: Numeric pressure value.
        unit: Source unit string (e.g. "bar", "psi", "MPa", "atm").

    Returns:
        Pressure in Pa.
    """
    return Q_(value, unit).to("Pa").magnitude


def pressure_from_si(value_pa: float, unit: str) -> float:
    """Convert pressure from Pascals to target unit."""
    return Q_(value_pa, "Pa").to(unit).magnitude


def temperature_to_si(value: float, unit: str) -> float:
    """Convert temperature to Kelvin.

    Args:
        value: Numeric temperature value.
        unit: Source unit string (e.g. "degC", "degF").

    Returns:
        Temperature in K.
    """
    return Q_(value, unit).to("K").magnitude


def temperature_from_si(value_k: float, unit: str) -> float:
    """Convert temperature from Kelvin to target unit."""
    return Q_(value_k, "K").to(unit).magnitude


def specific_energy_from_si(value: float, unit: str) -> float:
    """Convert specific energy (enthalpy, work) from J/kg to target unit."""
    return Q_(value, "J/kg").to(unit).magnitude


def specific_entropy_from_si(value: float, unit: str) -> float:
    """Convert specific entropy from J/(kg·K) to target unit."""
    return Q_(value, "J/(kg*K)").to(unit).magnitude


def ratio_to_fraction(value: float, unit: str = "percent") -> float:
    """Convert a ratio (e.g. an efficiency in percent) to a decimal fraction."""
    return Q_(value, unit).to("dimensionless").magnitude
