"""Entropy analysis nodes.

Each node describes one irreversible device of a solved cycle by its
specific mass flows and boundary states, and returns the minimum specific
work [J/kg of evaporator flow] needed to compensate for the entropy it
generates.  Specific mass flows are decimal fractions of the evaporator
mass flow.
"""

from __future__ import annotations

from dataclasses import dataclass

from vcrc.core.fluids import RefrigerantState


@dataclass(frozen=True)
class EvaporatorNode:
    """Evaporator, exchanging heat with the cold source."""

    mass_flow: float
    inlet: RefrigerantState
    outlet: RefrigerantState

    def energy_loss(self, cold_source: float, hot_source: float) -> float:
        return (
            self.mass_flow
            * hot_source
            * (
                (self.outlet.entropy - self.inlet.entropy)
                - (self.outlet.enthalpy - self.inlet.enthalpy) / cold_source
            )
        )


@dataclass(frozen=True)
class HeatReleaserNode:
    """Condenser or gas cooler, rejecting heat to the hot source.

    The inlet is the isentropic compressor discharge: the extra
    superheat of the real discharge is charged to the compressor.
    """

    mass_flow: float
    isentropic_inlet: RefrigerantState
    outlet: RefrigerantState

    def energy_loss(self, hot_source: float) -> float:
        return self.mass_flow * (
            self.isentropic_inlet.enthalpy
            - self.outlet.enthalpy
            - hot_source * (self.isentropic_inlet.entropy - self.outlet.entropy)
        )


@dataclass(frozen=True)
class EVNode:
    """Expansion valve (throttling)."""

    mass_flow: float
    inlet: RefrigerantState
    outlet: RefrigerantState

    def energy_loss(self, hot_source: float) -> float:
        return hot_source * self.mass_flow * (self.outlet.entropy - self.inlet.entropy)


@dataclass(frozen=True)
class MixingNode:
    """Adiabatic junction of two flows."""

    outlet: RefrigerantState
    first_flow: float
    first: RefrigerantState
    second_flow: float
    second: RefrigerantState

    def energy_loss(self, hot_source: float) -> float:
        return hot_source * (
            (self.first_flow + self.second_flow) * self.outlet.entropy
            - (self.first_flow * self.first.entropy + self.second_flow * self.second.entropy)
        )


class EjectorNode(MixingNode):
    """Ejector: the nozzle (first) and suction (second) flows leave mixed."""


@dataclass(frozen=True)
class HeatExchangerNode:
    """Internal two-stream heat exchanger."""

    cold_flow: float
    cold_inlet: RefrigerantState
    cold_outlet: RefrigerantState
    hot_flow: float
    hot_inlet: RefrigerantState
    hot_outlet: RefrigerantState

    def energy_loss(self, hot_source: float) -> float:
        return hot_source * (
            self.cold_flow * (self.cold_outlet.entropy - self.cold_inlet.entropy)
            - self.hot_flow * (self.hot_inlet.entropy - self.hot_outlet.entropy)
        )


class EconomizerNode(HeatExchangerNode):
    """Economizer: cold side is the throttled injection stream."""


class RecuperatorNode(HeatExchangerNode):
    """Recuperator: cold side is the suction line."""
