"""Two-stage cycle with parallel compression."""

from __future__ import annotations

from vcrc.analysis.entropy import EntropyAnalyzer
from vcrc.analysis.nodes import EvaporatorNode, EVNode, HeatReleaserNode, MixingNode
from vcrc.core.config import DEFAULT_SETTINGS, SolverSettings
from vcrc.cycle.base import TwoStageVCRC
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.toolkit import intermediate_pressure, two_phase_quality, validate_refrigerant_type


class VCRCWithPC(TwoStageVCRC):
    """Flash-gas vapour from an intermediate vessel is compressed by a
    parallel compressor straight to the heat releaser pressure.

    Points:
        1. evaporator outlet
        2s/2. main compressor discharge
        3. vessel vapour outlet (parallel compressor suction)
        4s/4. parallel compressor discharge
        5s/5. heat releaser inlet (mix of 2 and 4)
        6. heat releaser outlet
        7. vessel inlet
        8. vessel liquid outlet
        9. evaporator inlet
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        refrigerant = evaporator.refrigerant
        self._validate(validate_refrigerant_type(refrigerant))
        self.intermediate_pressure = intermediate_pressure(
            refrigerant, evaporator.pressure, heat_releaser.pressure
        )
        p_int = self.intermediate_pressure
        p_hr = heat_releaser.pressure
        eff = compressor.efficiency

        self.point_1 = evaporator.outlet
        self.point_2s = self.point_1.isentropic_compression_to(p_hr)
        self.point_2 = self.point_1.compression_to(p_hr, eff)
        self.point_3 = refrigerant.dew_point_at(pressure=p_int)
        self.point_4s = self.point_3.isentropic_compression_to(p_hr)
        self.point_4 = self.point_3.compression_to(p_hr, eff)
        self.point_6 = heat_releaser.outlet
        self.point_7 = self.point_6.isenthalpic_expansion_to(p_int)
        self.point_8 = refrigerant.bubble_point_at(pressure=p_int)
        self.point_9 = self.point_8.isenthalpic_expansion_to(evaporator.pressure)

        m_ev = self.evaporator_specific_mass_flow
        quality = two_phase_quality(self.point_7, "intermediate vessel inlet")
        self.heat_releaser_specific_mass_flow = m_ev * (1.0 + quality / (1.0 - quality))
        m_hr = self.heat_releaser_specific_mass_flow
        m_int = self.intermediate_specific_mass_flow
        self.point_5s = refrigerant.mixing(m_ev, self.point_2s, m_int, self.point_4s)
        self.point_5 = refrigerant.mixing(m_ev, self.point_2, m_int, self.point_4)

        self.isentropic_specific_work = (
            self.point_2s.enthalpy
            - self.point_1.enthalpy
            + m_int * (self.point_4s.enthalpy - self.point_3.enthalpy)
        )
        self.specific_cooling_capacity = self.point_1.enthalpy - self.point_9.enthalpy
        self.specific_heating_capacity = m_hr * (self.point_5.enthalpy - self.point_6.enthalpy)
        self._freeze()

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_ev = self.evaporator_specific_mass_flow
        m_hr = self.heat_releaser_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_9, self.point_1),
            HeatReleaserNode(m_hr, self.point_5s, self.point_6),
            [
                EVNode(m_hr, self.point_6, self.point_7),
                EVNode(m_ev, self.point_8, self.point_9),
            ],
            mixing_node=MixingNode(
                self.point_5,
                m_ev,
                self.point_2,
                self.intermediate_specific_mass_flow,
                self.point_4,
            ),
        )
