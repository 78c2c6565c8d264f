"""Two-stage cycles with an economizer.

Part of the heat releaser outlet flow is throttled to the intermediate
pressure and evaporated in the economizer, subcooling the remaining liquid
before it is throttled to the evaporator.  The injection stream either
joins the first-stage discharge (vapour injection), is compressed by a
parallel compressor (PC), or leaves the economizer wet (two-phase
injection, TPI).
"""

from __future__ import annotations

from vcrc.analysis.entropy import EntropyAnalyzer
from vcrc.analysis.nodes import (
    EconomizerNode,
    EvaporatorNode,
    EVNode,
    HeatReleaserNode,
    MixingNode,
)
from vcrc.core.config import DEFAULT_SETTINGS, SolverSettings
from vcrc.cycle.base import TwoStageVCRC
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.economizer import Economizer, EconomizerWithTPI
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.toolkit import (
    intermediate_pressure,
    two_phase_injection_enthalpy,
    validate_economizer_temperatures,
)


class VCRCWithEconomizer(TwoStageVCRC):
    """Economizer with superheated vapour injection between the stages.

    Points:
        1. evaporator outlet
        2s/2. first-stage discharge
        3. second-stage suction (mix of 2 and 7)
        4s/4. second-stage discharge
        5. heat releaser outlet (economizer 'hot' inlet)
        6. economizer 'cold' inlet
        7. economizer 'cold' outlet
        8. economizer 'hot' outlet
        9. evaporator inlet
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        economizer: Economizer,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        self.economizer = economizer
        refrigerant = evaporator.refrigerant
        self.intermediate_pressure = intermediate_pressure(
            refrigerant, evaporator.pressure, heat_releaser.pressure
        )
        p_int = self.intermediate_pressure
        eff = compressor.efficiency
        dt = economizer.temperature_difference

        self.point_1 = evaporator.outlet
        self.point_2s = self.point_1.isentropic_compression_to(p_int)
        self.point_2 = self.point_1.compression_to(p_int, eff)
        self.point_5 = heat_releaser.outlet
        self.point_6 = self.point_5.isenthalpic_expansion_to(p_int)
        self.point_7 = refrigerant.superheated(economizer.superheat, pressure=p_int)
        self._validate(
            validate_economizer_temperatures(dt, self.point_5, self.point_6, self.point_7)
        )
        self.point_8 = self.point_5.cooling_to(temperature=self.point_6.temperature + dt)
        self.point_9 = self.point_8.isenthalpic_expansion_to(evaporator.pressure)

        m_ev = self.evaporator_specific_mass_flow
        self.heat_releaser_specific_mass_flow = m_ev * (
            1.0
            + (self.point_5.enthalpy - self.point_8.enthalpy)
            / (self.point_7.enthalpy - self.point_6.enthalpy)
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
        m_int = self.intermediate_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_9, self.point_1),
            HeatReleaserNode(m_hr, self.point_4s, self.point_5),
            [
                EVNode(m_int, self.point_5, self.point_6),
                EVNode(m_ev, self.point_8, self.point_9),
            ],
            economizer_node=EconomizerNode(
                m_int, self.point_6, self.point_7, m_ev, self.point_5, self.point_8
            ),
            mixing_node=MixingNode(self.point_3, m_ev, self.point_2, m_int, self.point_7),
        )


class VCRCWithEconomizerAndPC(TwoStageVCRC):
    """Economizer whose vapour is compressed by a parallel compressor.

    Points:
        1. evaporator outlet
        2s/2. main compressor discharge
        3. economizer 'cold' outlet (parallel compressor suction)
        4s/4. parallel compressor discharge
        5s/5. heat releaser inlet (mix of 2 and 4)
        6. heat releaser outlet (economizer 'hot' inlet)
        7. economizer 'cold' inlet
        8. economizer 'hot' outlet
        9. evaporator inlet
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        economizer: Economizer,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        self.economizer = economizer
        refrigerant = evaporator.refrigerant
        self.intermediate_pressure = intermediate_pressure(
            refrigerant, evaporator.pressure, heat_releaser.pressure
        )
        p_int = self.intermediate_pressure
        p_hr = heat_releaser.pressure
        eff = compressor.efficiency
        dt = economizer.temperature_difference

        self.point_1 = evaporator.outlet
        self.point_2s = self.point_1.isentropic_compression_to(p_hr)
        self.point_2 = self.point_1.compression_to(p_hr, eff)
        self.point_6 = heat_releaser.outlet
        self.point_7 = self.point_6.isenthalpic_expansion_to(p_int)
        self.point_3 = refrigerant.superheated(economizer.superheat, pressure=p_int)
        self._validate(
            validate_economizer_temperatures(dt, self.point_6, self.point_7, self.point_3)
        )
        self.point_4s = self.point_3.isentropic_compression_to(p_hr)
        self.point_4 = self.point_3.compression_to(p_hr, eff)
        self.point_8 = self.point_6.cooling_to(temperature=self.point_7.temperature + dt)
        self.point_9 = self.point_8.isenthalpic_expansion_to(evaporator.pressure)

        m_ev = self.evaporator_specific_mass_flow
        self.heat_releaser_specific_mass_flow = m_ev * (
            1.0
            + (self.point_6.enthalpy - self.point_8.enthalpy)
            / (self.point_3.enthalpy - self.point_7.enthalpy)
        )
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
        m_int = self.intermediate_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_9, self.point_1),
            HeatReleaserNode(m_hr, self.point_5s, self.point_6),
            [
                EVNode(m_int, self.point_6, self.point_7),
                EVNode(m_ev, self.point_8, self.point_9),
            ],
            economizer_node=EconomizerNode(
                m_int, self.point_7, self.point_3, m_ev, self.point_6, self.point_8
            ),
            mixing_node=MixingNode(self.point_5, m_ev, self.point_2, m_int, self.point_4),
        )


class VCRCWithEconomizerAndTPI(TwoStageVCRC):
    """Economizer with two-phase injection between the stages.

    The injection stream leaves the economizer wet, in the amount that
    turns the first-stage discharge into saturated vapour.

    Points:
        1. evaporator outlet
        2s/2. first-stage discharge
        3. second-stage suction (saturated vapour)
        4s/4. second-stage discharge
        5. heat releaser outlet (economizer 'hot' inlet)
        6. economizer 'cold' inlet
        7. economizer 'cold' outlet
        8. economizer 'hot' outlet
        9. evaporator inlet
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        economizer: EconomizerWithTPI,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        self.economizer = economizer
        refrigerant = evaporator.refrigerant
        self.intermediate_pressure = intermediate_pressure(
            refrigerant, evaporator.pressure, heat_releaser.pressure
        )
        p_int = self.intermediate_pressure
        eff = compressor.efficiency
        dt = economizer.temperature_difference

        self.point_1 = evaporator.outlet
        self.point_2s = self.point_1.isentropic_compression_to(p_int)
        self.point_2 = self.point_1.compression_to(p_int, eff)
        self.point_3 = refrigerant.dew_point_at(pressure=p_int)
        self.point_4s = self.point_3.isentropic_compression_to(heat_releaser.pressure)
        self.point_4 = self.point_3.compression_to(heat_releaser.pressure, eff)
        self.point_5 = heat_releaser.outlet
        self.point_6 = self.point_5.isenthalpic_expansion_to(p_int)
        self._validate(validate_economizer_temperatures(dt, self.point_5, self.point_6))
        self.point_8 = self.point_5.cooling_to(temperature=self.point_6.temperature + dt)
        self.point_7 = self.point_6.heating_to(
            enthalpy=two_phase_injection_enthalpy(
                self.point_6, self.point_2, self.point_3, self.point_5, self.point_8
            )
        )
        self.point_9 = self.point_8.isenthalpic_expansion_to(evaporator.pressure)

        m_ev = self.evaporator_specific_mass_flow
        self.heat_releaser_specific_mass_flow = m_ev * (
            1.0
            + (self.point_2.enthalpy - self.point_3.enthalpy)
            / (self.point_3.enthalpy - self.point_7.enthalpy)
        )
        m_hr = self.heat_releaser_specific_mass_flow

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
        m_int = self.intermediate_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_9, self.point_1),
            HeatReleaserNode(m_hr, self.point_4s, self.point_5),
            [
                EVNode(m_int, self.point_5, self.point_6),
                EVNode(m_ev, self.point_8, self.point_9),
            ],
            economizer_node=EconomizerNode(
                m_int, self.point_6, self.point_7, m_ev, self.point_5, self.point_8
            ),
            mixing_node=MixingNode(self.point_3, m_ev, self.point_2, m_int, self.point_7),
        )
