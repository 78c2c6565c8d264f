"""Mitsubishi Zubadan two-stage cycle.

The condenser outlet is throttled to a "recuperator high" pressure, where
the two-phase stream heats the suction vapour in a recuperator.  The
saturated liquid then feeds an economizer whose injection stream enters
the compressor wet, turning the first-stage discharge into saturated
vapour.

Two unknowns are coupled: the injection quality (solved by Newton for a
given recuperator pressure) and the recuperator pressure itself, which is
raised towards the condensing pressure until every temperature rule
holds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from vcrc.analysis.entropy import EntropyAnalyzer
from vcrc.analysis.nodes import (
    EconomizerNode,
    EvaporatorNode,
    EVNode,
    HeatReleaserNode,
    MixingNode,
    RecuperatorNode,
)
from vcrc.core.config import DEFAULT_SETTINGS, SolverSettings
from vcrc.core.errors import NoFeasibleRecuperatorPressureError, SolverDivergenceError, VCRCError
from vcrc.core.fluids import RefrigerantState
from vcrc.core.solvers import find_root_near_guess
from vcrc.cycle.base import TwoStageVCRC
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.condenser import Condenser
from vcrc.cycle.components.economizer import EconomizerWithTPI
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.components.recuperator import Recuperator
from vcrc.cycle.toolkit import intermediate_pressure
from vcrc.utils.validation import ValidationResult, check

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ZubadanTrial:
    """Points that depend on the trial recuperator pressure and quality."""

    recuperator_high_pressure: float  # Pa
    injection_quality: float
    heat_releaser_specific_mass_flow: float
    point_2: RefrigerantState
    point_3s: RefrigerantState
    point_3: RefrigerantState
    point_7: RefrigerantState
    point_8: RefrigerantState
    point_9: RefrigerantState
    point_10: RefrigerantState
    point_11: RefrigerantState
    point_12: RefrigerantState


class VCRCMitsubishiZubadan(TwoStageVCRC):
    """Mitsubishi Zubadan cycle (recuperator + economizer with TPI).

    Points:
        1. evaporator outlet (recuperator 'cold' inlet)
        2. recuperator 'cold' outlet
        3s/3. first-stage discharge
        4. second-stage suction (saturated vapour)
        5s/5. second-stage discharge
        6. condenser outlet
        7. recuperator 'hot' inlet (two-phase)
        8. recuperator 'hot' outlet (saturated liquid)
        9. economizer 'cold' inlet
        10. economizer 'cold' outlet (two-phase injection)
        11. economizer 'hot' outlet
        12. evaporator inlet

    Args:
        evaporator: Evaporator specification.
        compressor: Compressor specification.
        condenser: Condenser specification.
        economizer: Economizer approach at the 'cold' side.
        settings: Seed and tolerance of the injection quality and the cap
            on recuperator pressure escalations.

    Raises:
        SolverDivergenceError: If the injection quality cannot be found
            ("Solution not found!").
        NoFeasibleRecuperatorPressureError: If no recuperator pressure
            satisfies the temperature rules within the escalation cap.
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        condenser: Condenser,
        economizer: EconomizerWithTPI,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        check(
            "heat_releaser",
            isinstance(condenser, Condenser),
            "Mitsubishi Zubadan cycle requires a condenser!",
        )
        super().__init__(evaporator, compressor, condenser, settings)
        refrigerant = evaporator.refrigerant
        self.economizer = economizer
        self.intermediate_pressure = intermediate_pressure(
            refrigerant, evaporator.pressure, condenser.pressure
        )
        self.point_1 = evaporator.outlet
        self.point_4 = refrigerant.dew_point_at(pressure=self.intermediate_pressure)
        self.point_6 = condenser.outlet

        trial = self._solve_recuperator_pressure()
        self.recuperator_high_pressure = trial.recuperator_high_pressure
        self.injection_quality = trial.injection_quality
        self.heat_releaser_specific_mass_flow = trial.heat_releaser_specific_mass_flow
        self.point_2 = trial.point_2
        self.point_3s = trial.point_3s
        self.point_3 = trial.point_3
        self.point_7 = trial.point_7
        self.point_8 = trial.point_8
        self.point_9 = trial.point_9
        self.point_10 = trial.point_10
        self.point_11 = trial.point_11
        self.point_12 = trial.point_12
        self.point_5s = self.point_4.isentropic_compression_to(condenser.pressure)
        self.point_5 = self.point_4.compression_to(condenser.pressure, compressor.efficiency)
        self.recuperator = Recuperator(self.point_7.temperature - self.point_2.temperature)

        m_hr = self.heat_releaser_specific_mass_flow
        self.isentropic_specific_work = self.point_3s.enthalpy - self.point_2.enthalpy + m_hr * (
            self.point_5s.enthalpy - self.point_4.enthalpy
        )
        self.specific_cooling_capacity = self.point_1.enthalpy - self.point_12.enthalpy
        self.specific_heating_capacity = m_hr * (self.point_5.enthalpy - self.point_6.enthalpy)
        self._freeze()

    # --- Closure ---

    def _solve_recuperator_pressure(self) -> _ZubadanTrial:
        """Raise the recuperator pressure until the solved trial is feasible."""
        refrigerant = self.evaporator.refrigerant
        p_cond = self.heat_releaser.pressure
        pressure = intermediate_pressure(refrigerant, self.intermediate_pressure, p_cond)
        last: ValidationResult | None = None
        for attempt in range(1, self.settings.zubadan_max_pressure_iterations + 1):
            trial = self._solve_injection_quality(pressure)
            last = self._validate_trial(trial)
            if last.is_valid:
                logger.debug(
                    "Recuperator pressure %.1f Pa feasible after %d attempt(s), "
                    "injection quality %.5f",
                    pressure,
                    attempt,
                    trial.injection_quality,
                )
                return trial
            logger.debug(
                "Recuperator pressure %.1f Pa infeasible: %s",
                pressure,
                "; ".join(m.message for m in last.errors),
            )
            pressure = intermediate_pressure(refrigerant, pressure, p_cond)

        reasons = "; ".join(m.message for m in last.errors) if last else ""
        raise NoFeasibleRecuperatorPressureError(
            f"No feasible recuperator pressure after "
            f"{self.settings.zubadan_max_pressure_iterations} attempts: {reasons}"
        )

    def _solve_injection_quality(self, recuperator_pressure: float) -> _ZubadanTrial:
        refrigerant = self.evaporator.refrigerant
        p_int = self.intermediate_pressure
        m_ev = self.evaporator_specific_mass_flow
        margin = self.settings.fraction_margin

        try:
            point_7 = self.point_6.isenthalpic_expansion_to(recuperator_pressure)
            point_8 = refrigerant.bubble_point_at(pressure=recuperator_pressure)
            point_9 = point_8.isenthalpic_expansion_to(p_int)
            point_11 = point_8.cooling_to(
                temperature=point_9.temperature + self.economizer.temperature_difference
            )
            point_12 = point_11.isenthalpic_expansion_to(self.evaporator.pressure)

            def trial_at(quality: float) -> _ZubadanTrial:
                point_10 = refrigerant.two_phase_point_at(p_int, quality)
                m_hr = m_ev * (
                    1.0
                    + (point_8.enthalpy - point_11.enthalpy)
                    / (point_10.enthalpy - point_9.enthalpy)
                )
                point_2 = self.point_1.heating_to(
                    enthalpy=self.point_1.enthalpy
                    + m_hr / m_ev * (point_7.enthalpy - point_8.enthalpy)
                )
                return _ZubadanTrial(
                    recuperator_high_pressure=recuperator_pressure,
                    injection_quality=quality,
                    heat_releaser_specific_mass_flow=m_hr,
                    point_2=point_2,
                    point_3s=point_2.isentropic_compression_to(p_int),
                    point_3=point_2.compression_to(p_int, self.compressor.efficiency),
                    point_7=point_7,
                    point_8=point_8,
                    point_9=point_9,
                    point_10=point_10,
                    point_11=point_11,
                    point_12=point_12,
                )

            def residual(quality: float) -> float:
                trial = trial_at(quality)
                m_int = trial.heat_releaser_specific_mass_flow - m_ev
                return trial.point_10.enthalpy - (
                    self.point_4.enthalpy
                    - m_ev / m_int * (trial.point_3.enthalpy - self.point_4.enthalpy)
                )

            quality = find_root_near_guess(
                residual,
                self.settings.injection_quality_guess,
                margin,
                1.0 - margin,
                self.settings.injection_quality_tolerance,
            )
            return trial_at(quality)
        except VCRCError as exc:
            raise SolverDivergenceError("Solution not found!") from exc

    def _validate_trial(self, trial: _ZubadanTrial) -> ValidationResult:
        result = ValidationResult()
        quality = trial.point_7.quality
        result.require(
            quality is not None and 0.0 < quality < 1.0,
            "recuperator",
            "There should be a two-phase refrigerant at the recuperator 'hot' inlet!",
        )
        result.require(
            trial.point_7.temperature > trial.point_2.temperature,
            "recuperator",
            "Wrong temperature difference at the recuperator 'hot' side!",
        )
        result.require(
            trial.point_8.temperature > self.point_1.temperature,
            "recuperator",
            "Wrong temperature difference at the recuperator 'cold' side!",
        )
        return result

    # --- Entropy analysis ---

    def _entropy_analyzer(self) -> EntropyAnalyzer:
        m_ev = self.evaporator_specific_mass_flow
        m_hr = self.heat_releaser_specific_mass_flow
        m_int = self.intermediate_specific_mass_flow
        return EntropyAnalyzer(
            self,
            EvaporatorNode(m_ev, self.point_12, self.point_1),
            HeatReleaserNode(m_hr, self.point_5s, self.point_6),
            [
                EVNode(m_hr, self.point_6, self.point_7),
                EVNode(m_int, self.point_8, self.point_9),
                EVNode(m_ev, self.point_11, self.point_12),
            ],
            recuperator_node=RecuperatorNode(
                m_ev, self.point_1, self.point_2, m_hr, self.point_7, self.point_8
            ),
            economizer_node=EconomizerNode(
                m_int, self.point_9, self.point_10, m_ev, self.point_8, self.point_11
            ),
            mixing_node=MixingNode(self.point_4, m_ev, self.point_3, m_int, self.point_10),
        )
