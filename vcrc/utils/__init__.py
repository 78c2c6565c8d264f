"""Utility modules for VCRC."""

from vcrc.utils.constants import P_ATM, T_CELSIUS_OFFSET
from vcrc.utils.units import pressure_to_si, temperature_to_si

__all__ = ["P_ATM", "T_CELSIUS_OFFSET", "pressure_to_si", "temperature_to_si"]
