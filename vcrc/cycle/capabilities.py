"""Capability protocols of the cycle topologies.

Topologies advertise their auxiliary equipment structurally; code that
needs, say, "any cycle with an economizer" checks against these protocols
instead of a class hierarchy.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from vcrc.cycle.components.economizer import EconomizerWithTPI
from vcrc.cycle.components.ejector import Ejector, EjectorFlows
from vcrc.cycle.components.recuperator import Recuperator


@runtime_checkable
class TwoStage(Protocol):
    """Cycles with a compressor stage discharging at an intermediate pressure."""

    @property
    def intermediate_pressure(self) -> float: ...

    @property
    def intermediate_specific_mass_flow(self) -> float: ...


@runtime_checkable
class HasEconomizer(Protocol):
    economizer: EconomizerWithTPI


@runtime_checkable
class HasRecuperator(Protocol):
    recuperator: Recuperator


@runtime_checkable
class HasEjector(Protocol):
    ejector: Ejector
    ejector_flows: EjectorFlows
