"""Entropy (exergy) analysis of solved refrigeration cycles.

The real specific work of a cycle is split into the minimum work of a
reversible (Carnot) cycle between the two heat sources plus the work needed
to compensate for the entropy generated in every device.  Every part is
expressed as a share of the work *recomputed* from these parts, so the
shares always add up to 100 %.  Comparing the recomputed isentropic work
with the cycle's own value yields ``analysis_relative_error``, a check that
the cycle's state points are wired consistently.

References:
    - Brodyansky, Sorin & Le Goff, *The Efficiency of Industrial
      Processes: Exergy Analysis and Optimization*, Elsevier, 1994.
"""

from __future__ import annotations

import logging
import math
from dataclasses import astuple, dataclass, fields
from typing import TYPE_CHECKING, Sequence

import numpy as np

from vcrc.analysis.nodes import (
    EconomizerNode,
    EjectorNode,
    EvaporatorNode,
    EVNode,
    HeatReleaserNode,
    MixingNode,
    RecuperatorNode,
)
from vcrc.core.errors import AnalysisPreconditionError, InputShapeError
from vcrc.cycle.components.condenser import Condenser
from vcrc.cycle.components.gas_cooler import GasCooler

if TYPE_CHECKING:
    from vcrc.cycle.base import VCRC

logger = logging.getLogger(__name__)

SOURCE_TEMPERATURE_TOLERANCE = 1e-3  # K


@dataclass(frozen=True)
class EntropyAnalysisResult:
    """Entropy analysis result.  All values in percent.

    The minimum work ratio and the nine loss ratios are shares of the
    recomputed specific work and sum to 100.
    """

    thermodynamic_perfection: float
    min_specific_work_ratio: float
    compressor_energy_loss_ratio: float
    condenser_energy_loss_ratio: float
    gas_cooler_energy_loss_ratio: float
    expansion_valves_energy_loss_ratio: float
    ejector_energy_loss_ratio: float
    evaporator_energy_loss_ratio: float
    recuperator_energy_loss_ratio: float
    economizer_energy_loss_ratio: float
    mixing_energy_loss_ratio: float
    analysis_relative_error: float

    @property
    def work_breakdown(self) -> dict[str, float]:
        """Minimum work and loss shares keyed by field name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("thermodynamic_perfection", "analysis_relative_error")
        }


class EntropyAnalyzer:
    """Computes an EntropyAnalysisResult for one cycle.

    Args:
        cycle: The solved cycle.
        evaporator_node: Evaporator node.
        heat_releaser_node: Condenser or gas cooler node.
        ev_nodes: Expansion valve nodes (one or more).
        ejector_node: Ejector node, if any.
        recuperator_node: Recuperator node, if any.
        economizer_node: Economizer node, if any.
        mixing_node: Mixing (injection) node, if any.
    """

    def __init__(
        self,
        cycle: VCRC,
        evaporator_node: EvaporatorNode,
        heat_releaser_node: HeatReleaserNode,
        ev_nodes: Sequence[EVNode],
        ejector_node: EjectorNode | None = None,
        recuperator_node: RecuperatorNode | None = None,
        economizer_node: EconomizerNode | None = None,
        mixing_node: MixingNode | None = None,
    ):
        self.cycle = cycle
        self.evaporator_node = evaporator_node
        self.heat_releaser_node = heat_releaser_node
        self.ev_nodes = tuple(ev_nodes)
        self.ejector_node = ejector_node
        self.recuperator_node = recuperator_node
        self.economizer_node = economizer_node
        self.mixing_node = mixing_node

    def perform_analysis(self, indoor: float, outdoor: float) -> EntropyAnalysisResult:
        """Analyse the cycle between indoor and outdoor temperatures [K].

        Raises:
            AnalysisPreconditionError: If the temperatures are equal, or the
                sources cannot exchange heat with the evaporator or the
                heat releaser.
        """
        cold = min(indoor, outdoor)
        hot = max(indoor, outdoor)
        if math.isclose(cold, hot, rel_tol=0.0, abs_tol=SOURCE_TEMPERATURE_TOLERANCE):
            raise AnalysisPreconditionError("Indoor and outdoor temperatures should not be equal!")
        if cold <= self.evaporator_node.outlet.temperature:
            raise AnalysisPreconditionError(
                "Wrong temperature difference in the evaporator! "
                "Increase 'cold' source temperature."
            )
        if hot >= self.heat_releaser_node.outlet.temperature:
            raise AnalysisPreconditionError(
                "Wrong temperature difference in the condenser or gas cooler! "
                "Decrease 'hot' source temperature."
            )

        cycle = self.cycle
        min_work = cycle.specific_cooling_capacity * (hot - cold) / cold
        heat_releaser_loss = self.heat_releaser_node.energy_loss(hot)
        expansion_valves_loss = sum(node.energy_loss(hot) for node in self.ev_nodes)
        ejector_loss = self._optional_loss(self.ejector_node, hot)
        evaporator_loss = self.evaporator_node.energy_loss(cold, hot)
        recuperator_loss = self._optional_loss(self.recuperator_node, hot)
        economizer_loss = self._optional_loss(self.economizer_node, hot)
        mixing_loss = self._optional_loss(self.mixing_node, hot)

        isentropic_work = (
            min_work
            + heat_releaser_loss
            + expansion_valves_loss
            + ejector_loss
            + evaporator_loss
            + recuperator_loss
            + economizer_loss
            + mixing_loss
        )
        compressor_loss = isentropic_work * (1.0 / cycle.compressor.efficiency - 1.0)
        work = isentropic_work + compressor_loss

        def ratio(energy: float) -> float:
            return 100.0 * energy / work

        relative_error = (
            100.0
            * abs(isentropic_work - cycle.isentropic_specific_work)
            / cycle.isentropic_specific_work
        )
        logger.debug(
            "Entropy analysis of %s at %.2f/%.2f K: relative error %.4f %%",
            type(cycle).__name__,
            cold,
            hot,
            relative_error,
        )

        return EntropyAnalysisResult(
            thermodynamic_perfection=100.0 * min_work / cycle.specific_work,
            min_specific_work_ratio=ratio(min_work),
            compressor_energy_loss_ratio=ratio(compressor_loss),
            condenser_energy_loss_ratio=(
                ratio(heat_releaser_loss) if isinstance(cycle.heat_releaser, Condenser) else 0.0
            ),
            gas_cooler_energy_loss_ratio=(
                ratio(heat_releaser_loss) if isinstance(cycle.heat_releaser, GasCooler) else 0.0
            ),
            expansion_valves_energy_loss_ratio=ratio(expansion_valves_loss),
            ejector_energy_loss_ratio=ratio(ejector_loss),
            evaporator_energy_loss_ratio=ratio(evaporator_loss),
            recuperator_energy_loss_ratio=ratio(recuperator_loss),
            economizer_energy_loss_ratio=ratio(economizer_loss),
            mixing_energy_loss_ratio=ratio(mixing_loss),
            analysis_relative_error=relative_error,
        )

    @staticmethod
    def _optional_loss(node: MixingNode | EconomizerNode | None, hot: float) -> float:
        return node.energy_loss(hot) if node is not None else 0.0


# --- Batch helpers ---


def average(results: Sequence[EntropyAnalysisResult]) -> EntropyAnalysisResult:
    """Field-wise arithmetic mean of several analysis results.

    Raises:
        InputShapeError: If *results* is empty.
    """
    if len(results) == 0:
        raise InputShapeError("At least one entropy analysis result is required!")
    if len(results) == 1:
        return results[0]
    table = np.array([astuple(r) for r in results], dtype=float)
    return EntropyAnalysisResult(*(float(v) for v in table.mean(axis=0)))


def entropy_analysis(
    cycles: Sequence[VCRC],
    indoor: Sequence[float],
    outdoor: Sequence[float],
) -> EntropyAnalysisResult:
    """Analyse each cycle at its own source temperatures and average the results.

    Args:
        cycles: Solved cycles.
        indoor: Indoor temperatures [K], one per cycle.
        outdoor: Outdoor temperatures [K], one per cycle.

    Raises:
        InputShapeError: If the three sequences differ in length.
    """
    if not len(cycles) == len(indoor) == len(outdoor):
        raise InputShapeError("Inputs should have the same length!")
    return average(
        [cycle.entropy_analysis(t_in, t_out) for cycle, t_in, t_out in zip(cycles, indoor, outdoor)]
    )
