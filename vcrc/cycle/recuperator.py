"""Single-stage cycle with a recuperator (suction line heat exchanger)."""

from __future__ import annotations

from vcrc.analysis.entropy import EntropyAnalyzer
from vcrc.analysis.nodes import EvaporatorNode, EVNode, HeatReleaserNode, RecuperatorNode
from vcrc.core.config import DEFAULT_SETTINGS, SolverSettings
from vcrc.cycle.base import VCRC
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.components.recuperator import Recuperator
from vcrc.utils.validation import check


class VCRCWithRecuperator(VCRC):
    """Simple cycle whose suction vapour is heated by the liquid line.

    Points:
        1. evaporator outlet (recuperator 'cold' inlet)
        2. recuperator 'cold' outlet, ``T4 - ΔT``
        3s/3. compressor discharge
        4. heat releaser outlet (recuperator 'hot' inlet)
        5. recuperator 'hot' outlet
        6. expansion valve outlet

    Raises:
        ConstructionValidationError: If ``T4 - ΔT`` is not above ``T1``.
    """

    def __init__(
        self,
        evaporator: Evaporator,
        recuperator: Recuperator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        super().__init__(evaporator, compressor, heat_releaser, settings)
        self.recuperator = recuperator
        self.point_1 = evaporator.outlet
        self.point_4 = heat_releaser.outlet
        check(
            "recuperator",
            self.point_4.temperature - recuperator.temperature_difference
            > self.point_1.temperature,
            "Too high temperature difference at the recuperator 'hot' side!",
        )
        self.point_2 = self.point_1.heating_to(
            temperature=self.point_4.temperature - recuperator.temperature_difference
        )
        self.point_3s = self.point_2.isentropic_compression_to(heat_releaser.pressure)
        self.point_3 = self.point_2.compression_to(heat_releaser.pressure, compressor.efficiency)
        self.point_5 = self.point_4.cooling_to(
            enthalpy=self.point_4.enthalpy - (self.point_2.enthalpy - self.point_1.enthalpy)
        )
        self.point_6 = self.point_5.isenthalpic_expansion_to(evaporator.pressure)

        self.heat_releaser_specific_mass_flow = 1.0
        self.isentropic_specific_work = self.point_3s.enthalpy - self.point_2.enthalpy
        self.specific_cooling_capacity = self.point_1.enthalpy - self.point_6.enthalpy
        self.specific_heating_capacity = self.point_3.enthalpy - self.point_4.enthalpy
        self._freeze()

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_ev = self.evaporator_specific_mass_flow
        m_hr = self.heat_releaser_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_6, self.point_1),
            HeatReleaserNode(m_hr, self.point_3s, self.point_4),
            [EVNode(m_hr, self.point_5, self.point_6)],
            recuperator_node=RecuperatorNode(
                m_ev, self.point_1, self.point_2, m_hr, self.point_4, self.point_5
            ),
        )
