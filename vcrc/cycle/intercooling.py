"""Two-stage cycles with an intermediate vessel (flash intercooling).

Both variants throttle the heat releaser outlet into a vessel at the
intermediate pressure; the saturated liquid feeds the evaporator and the
saturated vapour feeds the second compression stage.  With incomplete
intercooling (IIC) the first-stage discharge bypasses the vessel and is
mixed with its vapour; with complete intercooling (CIC) the discharge is
bubbled through the vessel liquid and leaves saturated.
"""

from __future__ import annotations

from vcrc.analysis.entropy import EntropyAnalyzer
from vcrc.analysis.nodes import EvaporatorNode, EVNode, HeatReleaserNode, MixingNode
from vcrc.core.config import DEFAULT_SETTINGS, SolverSettings
from vcrc.cycle.base import TwoStageVCRC
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.toolkit import intermediate_pressure, two_phase_quality, validate_refrigerant_type

_VESSEL_INLET = "intermediate vessel inlet"


class VCRCWithIIC(TwoStageVCRC):
    """Two-stage cycle with incomplete intercooling.

    Points:
        1. evaporator outlet
        2s/2. first-stage discharge
        3. second-stage suction (mix of 2 and 7)
        4s/4. second-stage discharge
        5. heat releaser outlet
        6. vessel inlet
        7. vessel vapour outlet
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
        eff = compressor.efficiency

        self.point_1 = evaporator.outlet
        self.point_2s = self.point_1.isentropic_compression_to(p_int)
        self.point_2 = self.point_1.compression_to(p_int, eff)
        self.point_5 = heat_releaser.outlet
        self.point_6 = self.point_5.isenthalpic_expansion_to(p_int)
        self.point_7 = refrigerant.dew_point_at(pressure=p_int)
        self.point_8 = refrigerant.bubble_point_at(pressure=p_int)
        self.point_9 = self.point_8.isenthalpic_expansion_to(evaporator.pressure)

        m_ev = self.evaporator_specific_mass_flow
        self.heat_releaser_specific_mass_flow = m_ev / (
            1.0 - two_phase_quality(self.point_6, _VESSEL_INLET)
        )
        m_hr = self.heat_releaser_specific_mass_flow
        self.point_3 = refrigerant.mixing(
            m_ev, self.point_2, self.intermediate_specific_mass_flow, self.point_7
        )
        self.point_4s = self.point_3.isentropic_compression_to(heat_releaser.pressure)
        self.point_4 = self.point_3.compression_to(heat_releaser.pressure, eff)

        self.isentropic_specific_work = (
            self.point_2s.enthalpy
            - self.point_1.enthalpy
            + m_hr * (self.point_4s.enthalpy - self.point_3.enthalpy)
        )
        self.specific_cooling_capacity = self.point_1.enthalpy - self.point_9.enthalpy
        self.specific_heating_capacity = m_hr * (self.point_4.enthalpy - self.point_5.enthalpy)
        self._freeze()

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_ev = self.evaporator_specific_mass_flow
        m_hr = self.heat_releaser_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_9, self.point_1),
            HeatReleaserNode(m_hr, self.point_4s, self.point_5),
            [
                EVNode(m_hr, self.point_5, self.point_6),
                EVNode(m_ev, self.point_8, self.point_9),
            ],
            mixing_node=MixingNode(
                self.point_3,
                m_ev,
                self.point_2,
                self.intermediate_specific_mass_flow,
                self.point_7,
            ),
        )


class VCRCWithCIC(TwoStageVCRC):
    """Two-stage cycle with complete intercooling.

    Points:
        1. evaporator outlet
        2s/2. first-stage discharge
        3. second-stage suction (saturated vapour)
        4s/4. second-stage discharge
        5. heat releaser outlet
        6. vessel inlet
        7. vessel liquid outlet
        8. evaporator inlet

    The whole heat releaser flow passes the vessel, so the intermediate
    specific mass flow equals the heat releaser flow.
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
        eff = compressor.efficiency

        self.point_1 = evaporator.outlet
        self.point_2s = self.point_1.isentropic_compression_to(p_int)
        self.point_2 = self.point_1.compression_to(p_int, eff)
        self.point_3 = refrigerant.dew_point_at(pressure=p_int)
        self.point_4s = self.point_3.isentropic_compression_to(heat_releaser.pressure)
        self.point_4 = self.point_3.compression_to(heat_releaser.pressure, eff)
        self.point_5 = heat_releaser.outlet
        self.point_6 = self.point_5.isenthalpic_expansion_to(p_int)
        self.point_7 = refrigerant.bubble_point_at(pressure=p_int)
        self.point_8 = self.point_7.isenthalpic_expansion_to(evaporator.pressure)

        m_ev = self.evaporator_specific_mass_flow
        desuperheating = (self.point_2.enthalpy - self.point_3.enthalpy) / (
            self.point_3.enthalpy - self.point_7.enthalpy
        )
        self.barbotage_specific_mass_flow = m_ev * desuperheating
        self.heat_releaser_specific_mass_flow = (
            m_ev * (1.0 + desuperheating) / (1.0 - two_phase_quality(self.point_6, _VESSEL_INLET))
        )
        m_hr = self.heat_releaser_specific_mass_flow

        self.isentropic_specific_work = (
            self.point_2s.enthalpy
            - self.point_1.enthalpy
            + m_hr * (self.point_4s.enthalpy - self.point_3.enthalpy)
        )
        self.specific_cooling_capacity = self.point_1.enthalpy - self.point_8.enthalpy
        self.specific_heating_capacity = m_hr * (self.point_4.enthalpy - self.point_5.enthalpy)
        self._freeze()

    @property
    def intermediate_specific_mass_flow(self) -> float:
        return self.heat_releaser_specific_mass_flow

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_ev = self.evaporator_specific_mass_flow
        m_hr = self.heat_releaser_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_8, self.point_1),
            HeatReleaserNode(m_hr, self.point_4s, self.point_5),
            [
                EVNode(m_hr, self.point_5, self.point_6),
                EVNode(m_ev, self.point_7, self.point_8),
            ],
            mixing_node=MixingNode(
                self.point_3,
                m_ev,
                self.point_2,
                self.barbotage_specific_mass_flow,
                self.point_7,
            ),
        )
