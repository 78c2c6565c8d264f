"""Cycles with a two-phase ejector as the expansion device.

The ejector recovers expansion work from the heat releaser outlet flow and
uses it to lift the evaporator vapour to the separator (diffuser outlet)
pressure.  A separator splits the diffuser outlet into saturated vapour,
going to the compressor, and saturated liquid, throttled to the
evaporator.  In the economizer and recuperator variants the nozzle inlet
state depends on the diffuser outlet pressure, which is therefore found
iteratively.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from vcrc.analysis.entropy import EntropyAnalyzer
from vcrc.analysis.nodes import (
    EconomizerNode,
    EjectorNode,
    EvaporatorNode,
    EVNode,
    HeatReleaserNode,
    MixingNode,
    RecuperatorNode,
)
from vcrc.core.config import DEFAULT_SETTINGS, SolverSettings
from vcrc.core.solvers import find_root_near_guess
from vcrc.cycle.base import VCRC, TwoStageVCRC
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.economizer import Economizer, EconomizerWithTPI
from vcrc.cycle.components.ejector import Ejector, EjectorFlows
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.components.recuperator import Recuperator
from vcrc.cycle.toolkit import (
    ejector_flow_ratio,
    intermediate_pressure,
    two_phase_injection_enthalpy,
    validate_economizer_temperatures,
    validate_refrigerant_type,
    validate_without_glide,
)
from vcrc.utils.validation import check

logger = logging.getLogger(__name__)


def solve_diffuser_pressure(
    closure: Callable[[float], dict[str, Any]],
    evaporator: Evaporator,
    heat_releaser: HeatReleaser,
    settings: SolverSettings,
) -> tuple[float, dict[str, Any]]:
    """Find the diffuser outlet pressure reproduced by the ejector.

    Args:
        closure: Computes the cycle's dependent points for a trial diffuser
            outlet pressure [Pa]; must return them with the ``flows`` key
            holding the solved :class:`EjectorFlows`.
        evaporator: Evaporator (lower bracket end).
        heat_releaser: Heat releaser (upper bracket end).
        settings: Seed, bracket margin and tolerance.

    Returns:
        The converged pressure [Pa] and the closure result at it.
    """

    def residual(pressure: float) -> float:
        return closure(pressure)["flows"].diffuser_outlet.pressure - pressure

    pressure = find_root_near_guess(
        residual,
        evaporator.pressure + settings.diffuser_pressure_offset,
        evaporator.pressure + settings.diffuser_pressure_margin,
        heat_releaser.pressure - settings.diffuser_pressure_margin,
        settings.diffuser_pressure_tolerance,
    )
    logger.debug("Diffuser outlet pressure converged to %.1f Pa", pressure)
    return pressure, closure(pressure)


class VCRCWithEjector(VCRC):
    """Single-stage cycle with an ejector and a separator.

    Points:
        1. separator vapour outlet (compressor suction)
        2s/2. compressor discharge
        3. heat releaser outlet (nozzle inlet)
        4. nozzle outlet
        5. mixing section inlet
        6. diffuser outlet
        7. separator liquid outlet
        8. evaporator inlet
        9. evaporator outlet (suction inlet)
        10. suction section outlet
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        ejector: Ejector,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        refrigerant = evaporator.refrigerant
        self._validate(validate_refrigerant_type(refrigerant))
        self.ejector = ejector

        self.point_3 = heat_releaser.outlet
        self.point_9 = evaporator.outlet
        self.ejector_flows = ejector.calculate_flows(self.point_3, self.point_9, settings)
        flows = self.ejector_flows
        self.point_4 = flows.nozzle_outlet
        self.point_5 = flows.mixing_inlet
        self.point_6 = flows.diffuser_outlet
        self.point_10 = flows.suction_outlet
        self.point_1 = refrigerant.dew_point_at(pressure=self.point_6.pressure)
        self.point_2s = self.point_1.isentropic_compression_to(heat_releaser.pressure)
        self.point_2 = self.point_1.compression_to(heat_releaser.pressure, compressor.efficiency)
        self.point_7 = refrigerant.bubble_point_at(pressure=self.point_6.pressure)
        self.point_8 = self.point_7.isenthalpic_expansion_to(evaporator.pressure)

        self.heat_releaser_specific_mass_flow = self.evaporator_specific_mass_flow * (
            ejector_flow_ratio(self.point_6.quality)
        )
        m_hr = self.heat_releaser_specific_mass_flow
        self.isentropic_specific_work = m_hr * (self.point_2s.enthalpy - self.point_1.enthalpy)
        self.specific_cooling_capacity = self.point_9.enthalpy - self.point_8.enthalpy
        self.specific_heating_capacity = m_hr * (self.point_2.enthalpy - self.point_3.enthalpy)
        self._freeze()

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_ev = self.evaporator_specific_mass_flow
        m_hr = self.heat_releaser_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_8, self.point_9),
            HeatReleaserNode(m_hr, self.point_2s, self.point_3),
            [EVNode(m_ev, self.point_7, self.point_8)],
            ejector_node=EjectorNode(self.point_6, m_hr, self.point_3, m_ev, self.point_9),
        )


class _EjectorTwoStageVCRC(TwoStageVCRC):
    """Shared bookkeeping of the two-stage ejector cycles.

    The separator vapour (``heat_releaser - intermediate`` flow) enters the
    first compression stage; the intermediate flow is the economizer
    injection stream.  Point 11 is the diffuser outlet.
    """

    point_11: Any

    @property
    def _separator_ratio(self) -> float:
        return ejector_flow_ratio(self.point_11.quality)

    @property
    def intermediate_specific_mass_flow(self) -> float:
        return (
            self.heat_releaser_specific_mass_flow
            - self.evaporator_specific_mass_flow * self._separator_ratio
        )

    @property
    def first_stage_specific_mass_flow(self) -> float:
        return self.heat_releaser_specific_mass_flow - self.intermediate_specific_mass_flow

    def _set_ejector_points(self, flows: EjectorFlows) -> None:
        refrigerant = self.evaporator.refrigerant
        self.ejector_flows = flows
        self.point_9 = flows.nozzle_outlet
        self.point_10 = flows.mixing_inlet
        self.point_11 = flows.diffuser_outlet
        self.point_12 = refrigerant.bubble_point_at(pressure=self.point_11.pressure)
        self.point_13 = self.point_12.isenthalpic_expansion_to(self.evaporator.pressure)
        self.point_14 = self.evaporator.outlet
        self.point_15 = flows.suction_outlet

    def _ejector_node(self) -> EjectorNode:
        return EjectorNode(
            self.point_11,
            self.first_stage_specific_mass_flow,
            self.point_8,
            self.evaporator_specific_mass_flow,
            self.point_14,
        )


class VCRCWithEjectorAndEconomizer(_EjectorTwoStageVCRC):
    """Ejector cycle with an economizer and vapour injection.

    Points:
        1. separator vapour outlet
        2s/2. first-stage discharge
        3. second-stage suction (mix of 2 and 7)
        4s/4. second-stage discharge
        5. heat releaser outlet (economizer 'hot' inlet)
        6. economizer 'cold' inlet
        7. economizer 'cold' outlet
        8. economizer 'hot' outlet (nozzle inlet)
        9. nozzle outlet
        10. mixing section inlet
        11. diffuser outlet
        12. separator liquid outlet
        13. evaporator inlet
        14. evaporator outlet (suction inlet)
        15. suction section outlet
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        ejector: Ejector,
        economizer: Economizer,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        refrigerant = evaporator.refrigerant
        self._validate(validate_refrigerant_type(refrigerant))
        self.ejector = ejector
        self.economizer = economizer
        hot_inlet = heat_releaser.outlet
        dt = economizer.temperature_difference

        def closure(diffuser_pressure: float) -> dict[str, Any]:
            p_int = intermediate_pressure(refrigerant, diffuser_pressure, heat_releaser.pressure)
            injection_inlet = hot_inlet.isenthalpic_expansion_to(p_int)
            injection_outlet = refrigerant.superheated(economizer.superheat, pressure=p_int)
            self._validate(
                validate_economizer_temperatures(dt, hot_inlet, injection_inlet, injection_outlet)
            )
            nozzle_inlet = hot_inlet.cooling_to(temperature=injection_inlet.temperature + dt)
            return {
                "p_int": p_int,
                "point_6": injection_inlet,
                "point_7": injection_outlet,
                "point_8": nozzle_inlet,
                "flows": ejector.calculate_flows(nozzle_inlet, evaporator.outlet, settings),
            }

        _, solved = solve_diffuser_pressure(closure, evaporator, heat_releaser, settings)
        self.intermediate_pressure = solved["p_int"]
        p_int = self.intermediate_pressure
        eff = compressor.efficiency
        self.point_5 = hot_inlet
        self.point_6 = solved["point_6"]
        self.point_7 = solved["point_7"]
        self.point_8 = solved["point_8"]
        self._set_ejector_points(solved["flows"])
        self.point_1 = refrigerant.dew_point_at(pressure=self.point_11.pressure)
        self.point_2s = self.point_1.isentropic_compression_to(p_int)
        self.point_2 = self.point_1.compression_to(p_int, eff)

        self.heat_releaser_specific_mass_flow = (
            self.evaporator_specific_mass_flow
            * self._separator_ratio
            * (
                1.0
                + (self.point_5.enthalpy - self.point_8.enthalpy)
                / (self.point_7.enthalpy - self.point_6.enthalpy)
            )
        )
        m_hr = self.heat_releaser_specific_mass_flow
        m_first = self.first_stage_specific_mass_flow
        self.point_3 = refrigerant.mixing(
            m_first, self.point_2, self.intermediate_specific_mass_flow, self.point_7
        )
        self.point_4s = self.point_3.isentropic_compression_to(heat_releaser.pressure)
        self.point_4 = self.point_3.compression_to(heat_releaser.pressure, eff)

        self.isentropic_specific_work = m_first * (
            self.point_2s.enthalpy - self.point_1.enthalpy
        ) + m_hr * (self.point_4s.enthalpy - self.point_3.enthalpy)
        self.specific_cooling_capacity = self.point_14.enthalpy - self.point_13.enthalpy
        self.specific_heating_capacity = m_hr * (self.point_4.enthalpy - self.point_5.enthalpy)
        self._freeze()

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_ev = self.evaporator_specific_mass_flow
        m_hr = self.heat_releaser_specific_mass_flow
        m_int = self.intermediate_specific_mass_flow
        m_first = self.first_stage_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_13, self.point_14),
            HeatReleaserNode(m_hr, self.point_4s, self.point_5),
            [
                EVNode(m_int, self.point_5, self.point_6),
                EVNode(m_ev, self.point_12, self.point_13),
            ],
            ejector_node=self._ejector_node(),
            economizer_node=EconomizerNode(
                m_int, self.point_6, self.point_7, m_first, self.point_5, self.point_8
            ),
            mixing_node=MixingNode(self.point_3, m_first, self.point_2, m_int, self.point_7),
        )


class VCRCWithEjectorEconomizerAndPC(_EjectorTwoStageVCRC):
    """Ejector cycle with an economizer and a parallel compressor.

    Points:
        1. separator vapour outlet
        2s/2. main compressor discharge
        3. economizer 'cold' outlet (parallel compressor suction)
        4s/4. parallel compressor discharge
        5s/5. heat releaser inlet (mix of 2 and 4)
        6. heat releaser outlet (economizer 'hot' inlet)
        7. economizer 'cold' inlet
        8. economizer 'hot' outlet (nozzle inlet)
        9. nozzle outlet
        10. mixing section inlet
        11. diffuser outlet
        12. separator liquid outlet
        13. evaporator inlet
        14. evaporator outlet (suction inlet)
        15. suction section outlet
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        ejector: Ejector,
        economizer: Economizer,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        refrigerant = evaporator.refrigerant
        self._validate(validate_refrigerant_type(refrigerant))
        self.ejector = ejector
        self.economizer = economizer
        hot_inlet = heat_releaser.outlet
        p_hr = heat_releaser.pressure
        dt = economizer.temperature_difference

        def closure(diffuser_pressure: float) -> dict[str, Any]:
            p_int = intermediate_pressure(refrigerant, diffuser_pressure, p_hr)
            injection_inlet = hot_inlet.isenthalpic_expansion_to(p_int)
            injection_outlet = refrigerant.superheated(economizer.superheat, pressure=p_int)
            self._validate(
                validate_economizer_temperatures(dt, hot_inlet, injection_inlet, injection_outlet)
            )
            nozzle_inlet = hot_inlet.cooling_to(temperature=injection_inlet.temperature + dt)
            return {
                "p_int": p_int,
                "point_3": injection_outlet,
                "point_7": injection_inlet,
                "point_8": nozzle_inlet,
                "flows": ejector.calculate_flows(nozzle_inlet, evaporator.outlet, settings),
            }

        _, solved = solve_diffuser_pressure(closure, evaporator, heat_releaser, settings)
        self.intermediate_pressure = solved["p_int"]
        eff = compressor.efficiency
        self.point_3 = solved["point_3"]
        self.point_6 = hot_inlet
        self.point_7 = solved["point_7"]
        self.point_8 = solved["point_8"]
        self._set_ejector_points(solved["flows"])
        self.point_1 = refrigerant.dew_point_at(pressure=self.point_11.pressure)
        self.point_2s = self.point_1.isentropic_compression_to(p_hr)
        self.point_2 = self.point_1.compression_to(p_hr, eff)
        self.point_4s = self.point_3.isentropic_compression_to(p_hr)
        self.point_4 = self.point_3.compression_to(p_hr, eff)

        self.heat_releaser_specific_mass_flow = (
            self.evaporator_specific_mass_flow
            * self._separator_ratio
            * (
                1.0
                + (self.point_6.enthalpy - self.point_8.enthalpy)
                / (self.point_3.enthalpy - self.point_7.enthalpy)
            )
        )
        m_hr = self.heat_releaser_specific_mass_flow
        m_int = self.intermediate_specific_mass_flow
        m_first = self.first_stage_specific_mass_flow
        self.point_5s = refrigerant.mixing(m_first, self.point_2s, m_int, self.point_4s)
        self.point_5 = refrigerant.mixing(m_first, self.point_2, m_int, self.point_4)

        self.isentropic_specific_work = m_first * (
            self.point_2s.enthalpy - self.point_1.enthalpy
        ) + m_int * (self.point_4s.enthalpy - self.point_3.enthalpy)
        self.specific_cooling_capacity = self.point_14.enthalpy - self.point_13.enthalpy
        self.specific_heating_capacity = m_hr * (self.point_5.enthalpy - self.point_6.enthalpy)
        self._freeze()

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_ev = self.evaporator_specific_mass_flow
        m_hr = self.heat_releaser_specific_mass_flow
        m_int = self.intermediate_specific_mass_flow
        m_first = self.first_stage_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_13, self.point_14),
            HeatReleaserNode(m_hr, self.point_5s, self.point_6),
            [
                EVNode(m_int, self.point_6, self.point_7),
                EVNode(m_ev, self.point_12, self.point_13),
            ],
            ejector_node=self._ejector_node(),
            economizer_node=EconomizerNode(
                m_int, self.point_7, self.point_3, m_first, self.point_6, self.point_8
            ),
            mixing_node=MixingNode(self.point_5, m_first, self.point_2, m_int, self.point_4),
        )


class VCRCWithEjectorEconomizerAndTPI(_EjectorTwoStageVCRC):
    """Ejector cycle with an economizer and two-phase injection.

    Points:
        1. separator vapour outlet
        2s/2. first-stage discharge
        3. second-stage suction (saturated vapour)
        4s/4. second-stage discharge
        5. heat releaser outlet (economizer 'hot' inlet)
        6. economizer 'cold' inlet
        7. economizer 'cold' outlet (two-phase)
        8. economizer 'hot' outlet (nozzle inlet)
        9. nozzle outlet
        10. mixing section inlet
        11. diffuser outlet
        12. separator liquid outlet
        13. evaporator inlet
        14. evaporator outlet (suction inlet)
        15. suction section outlet
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        ejector: Ejector,
        economizer: EconomizerWithTPI,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        refrigerant = evaporator.refrigerant
        self._validate(validate_refrigerant_type(refrigerant))
        self.ejector = ejector
        self.economizer = economizer
        hot_inlet = heat_releaser.outlet
        eff = compressor.efficiency
        dt = economizer.temperature_difference

        def closure(diffuser_pressure: float) -> dict[str, Any]:
            p_int = intermediate_pressure(refrigerant, diffuser_pressure, heat_releaser.pressure)
            suction = refrigerant.dew_point_at(pressure=diffuser_pressure)
            discharge = suction.compression_to(p_int, eff)
            saturated_vapour = refrigerant.dew_point_at(pressure=p_int)
            injection_inlet = hot_inlet.isenthalpic_expansion_to(p_int)
            self._validate(validate_economizer_temperatures(dt, hot_inlet, injection_inlet))
            nozzle_inlet = hot_inlet.cooling_to(temperature=injection_inlet.temperature + dt)
            injection_outlet = injection_inlet.heating_to(
                enthalpy=two_phase_injection_enthalpy(
                    injection_inlet, discharge, saturated_vapour, hot_inlet, nozzle_inlet
                )
            )
            return {
                "p_int": p_int,
                "point_1": suction,
                "point_2": discharge,
                "point_3": saturated_vapour,
                "point_6": injection_inlet,
                "point_7": injection_outlet,
                "point_8": nozzle_inlet,
                "flows": ejector.calculate_flows(nozzle_inlet, evaporator.outlet, settings),
            }

        _, solved = solve_diffuser_pressure(closure, evaporator, heat_releaser, settings)
        self.intermediate_pressure = solved["p_int"]
        self.point_1 = solved["point_1"]
        self.point_2s = self.point_1.isentropic_compression_to(self.intermediate_pressure)
        self.point_2 = solved["point_2"]
        self.point_3 = solved["point_3"]
        self.point_4s = self.point_3.isentropic_compression_to(heat_releaser.pressure)
        self.point_4 = self.point_3.compression_to(heat_releaser.pressure, eff)
        self.point_5 = hot_inlet
        self.point_6 = solved["point_6"]
        self.point_7 = solved["point_7"]
        self.point_8 = solved["point_8"]
        self._set_ejector_points(solved["flows"])

        self.heat_releaser_specific_mass_flow = (
            self.evaporator_specific_mass_flow
            * self._separator_ratio
            * (
                1.0
                + (self.point_2.enthalpy - self.point_3.enthalpy)
                / (self.point_3.enthalpy - self.point_7.enthalpy)
            )
        )
        m_hr = self.heat_releaser_specific_mass_flow
        m_first = self.first_stage_specific_mass_flow

        self.isentropic_specific_work = m_first * (
            self.point_2s.enthalpy - self.point_1.enthalpy
        ) + m_hr * (self.point_4s.enthalpy - self.point_3.enthalpy)
        self.specific_cooling_capacity = self.point_14.enthalpy - self.point_13.enthalpy
        self.specific_heating_capacity = m_hr * (self.point_4.enthalpy - self.point_5.enthalpy)
        self._freeze()

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_ev = self.evaporator_specific_mass_flow
        m_hr = self.heat_releaser_specific_mass_flow
        m_int = self.intermediate_specific_mass_flow
        m_first = self.first_stage_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_13, self.point_14),
            HeatReleaserNode(m_hr, self.point_4s, self.point_5),
            [
                EVNode(m_int, self.point_5, self.point_6),
                EVNode(m_ev, self.point_12, self.point_13),
            ],
            ejector_node=self._ejector_node(),
            economizer_node=EconomizerNode(
                m_int, self.point_6, self.point_7, m_first, self.point_5, self.point_8
            ),
            mixing_node=MixingNode(self.point_3, m_first, self.point_2, m_int, self.point_7),
        )


class VCRCWithEjectorAndRecuperator(VCRC):
    """Ejector cycle whose compressor suction is heated by a recuperator.

    Points:
        1. separator vapour outlet (recuperator 'cold' inlet)
        2. recuperator 'cold' outlet
        3s/3. compressor discharge
        4. heat releaser outlet (recuperator 'hot' inlet)
        5. recuperator 'hot' outlet (nozzle inlet)
        6. nozzle outlet
        7. mixing section inlet
        8. diffuser outlet
        9. separator liquid outlet
        10. evaporator inlet
        11. evaporator outlet (suction inlet)
        12. suction section outlet
    """

    def __init__(
        self,
        evaporator: Evaporator,
        recuperator: Recuperator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        ejector: Ejector,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        refrigerant = evaporator.refrigerant
        self._validate(validate_refrigerant_type(refrigerant))
        self._validate(validate_without_glide(refrigerant))
        self.recuperator = recuperator
        self.ejector = ejector
        hot_inlet = heat_releaser.outlet
        dt = recuperator.temperature_difference

        def closure(diffuser_pressure: float) -> dict[str, Any]:
            suction = refrigerant.dew_point_at(pressure=diffuser_pressure)
            check(
                "recuperator",
                hot_inlet.temperature - dt > suction.temperature,
                "Too high temperature difference at the recuperator 'hot' side!",
            )
            heated = suction.heating_to(temperature=hot_inlet.temperature - dt)
            nozzle_inlet = hot_inlet.cooling_to(
                enthalpy=hot_inlet.enthalpy - (heated.enthalpy - suction.enthalpy)
            )
            return {
                "point_1": suction,
                "point_2": heated,
                "point_5": nozzle_inlet,
                "flows": ejector.calculate_flows(nozzle_inlet, evaporator.outlet, settings),
            }

        _, solved = solve_diffuser_pressure(closure, evaporator, heat_releaser, settings)
        self.ejector_flows = solved["flows"]
        flows = self.ejector_flows
        self.point_1 = solved["point_1"]
        self.point_2 = solved["point_2"]
        self.point_3s = self.point_2.isentropic_compression_to(heat_releaser.pressure)
        self.point_3 = self.point_2.compression_to(heat_releaser.pressure, compressor.efficiency)
        self.point_4 = hot_inlet
        self.point_5 = solved["point_5"]
        self.point_6 = flows.nozzle_outlet
        self.point_7 = flows.mixing_inlet
        self.point_8 = flows.diffuser_outlet
        self.point_9 = refrigerant.bubble_point_at(pressure=self.point_8.pressure)
        self.point_10 = self.point_9.isenthalpic_expansion_to(evaporator.pressure)
        self.point_11 = evaporator.outlet
        self.point_12 = flows.suction_outlet

        self.heat_releaser_specific_mass_flow = self.evaporator_specific_mass_flow * (
            ejector_flow_ratio(self.point_8.quality)
        )
        m_hr = self.heat_releaser_specific_mass_flow
        self.isentropic_specific_work = m_hr * (self.point_3s.enthalpy - self.point_2.enthalpy)
        self.specific_cooling_capacity = self.point_11.enthalpy - self.point_10.enthalpy
        self.specific_heating_capacity = m_hr * (self.point_3.enthalpy - self.point_4.enthalpy)
        self._freeze()

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_ev = self.evaporator_specific_mass_flow
        m_hr = self.heat_releaser_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_10, self.point_11),
            HeatReleaserNode(m_hr, self.point_3s, self.point_4),
            [EVNode(m_ev, self.point_9, self.point_10)],
            ejector_node=EjectorNode(self.point_8, m_hr, self.point_5, m_ev, self.point_11),
            recuperator_node=RecuperatorNode(
                m_hr, self.point_1, self.point_2, m_hr, self.point_4, self.point_5
            ),
        )
