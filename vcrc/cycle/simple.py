"""Simple single-stage refrigeration cycle."""

from __future__ import annotations

from vcrc.analysis.entropy import EntropyAnalyzer
from vcrc.analysis.nodes import EvaporatorNode, EVNode, HeatReleaserNode
from vcrc.core.config import DEFAULT_SETTINGS, SolverSettings
from vcrc.cycle.base import VCRC
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.evaporator import Evaporator


class SimpleVCRC(VCRC):
    """Evaporator, compressor, heat releaser and one expansion valve.

    Points:
        1. evaporator outlet
        2s/2. compressor discharge (isentropic / real)
        3. heat releaser outlet
        4. expansion valve outlet
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        self.point_1 = evaporator.outlet
        self.point_2s = self.point_1.isentropic_compression_to(heat_releaser.pressure)
        self.point_2 = self.point_1.compression_to(heat_releaser.pressure, compressor.efficiency)
        self.point_3 = heat_releaser.outlet
        self.point_4 = self.point_3.isenthalpic_expansion_to(evaporator.pressure)

        self.heat_releaser_specific_mass_flow = 1.0
        self.isentropic_specific_work = self.point_2s.enthalpy - self.point_1.enthalpy
        self.specific_cooling_capacity = self.point_1.enthalpy - self.point_4.enthalpy
        self.specific_heating_capacity = self.point_2.enthalpy - self.point_3.enthalpy
        self._freeze()

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_hr = self.heat_releaser_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(self.evaporator_specific_mass_flow, self.point_4, self.point_1),
            HeatReleaserNode(m_hr, self.point_2s, self.point_3),
            [EVNode(m_hr, self.point_3, self.point_4)],
        )
