"""Common interface of all refrigeration cycle topologies.

A cycle is solved completely in its constructor and is read-only
afterwards.  Construction is all-or-nothing: either every state point is
computed and every rule holds, or an exception is raised and no cycle
exists.

Point naming follows the numbering of the cycle diagrams: ``point_1`` is
the evaporator outlet, ``point_2s``/``point_2`` the isentropic and real
discharge of the first compression stage, and so on.  Specific mass flows
are decimal fractions of the evaporator mass flow.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Any

from vcrc.analysis.entropy import EntropyAnalysisResult, EntropyAnalyzer
from vcrc.core.config import DEFAULT_SETTINGS, SolverSettings
from vcrc.core.fluids import Refrigerant, RefrigerantState
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.condenser import Condenser
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.components.gas_cooler import GasCooler
from vcrc.cycle.toolkit import validate_common
from vcrc.utils.validation import ValidationResult

logger = logging.getLogger(__name__)

_POINT_NAME = re.compile(r"^point_(\d+)(s?)$")


class VCRC(ABC):
    """Base class of a vapour-compression refrigeration cycle.

    Subclasses compute their state points in ``__init__`` and must set
    ``heat_releaser_specific_mass_flow``, ``isentropic_specific_work``,
    ``specific_cooling_capacity`` and ``specific_heating_capacity`` (all
    J/kg of evaporator flow except the mass flow) before calling
    :meth:`_freeze`.

    Args:
        evaporator: Evaporator specification.
        compressor: Compressor specification.
        heat_releaser: Condenser or gas cooler specification.
        settings: Numerical settings of any implicit closure.

    Raises:
        ConstructionValidationError: If the components use different
            refrigerants or the condensing temperature is not above the
            evaporating temperature.
    """

    evaporator_specific_mass_flow = 1.0
    heat_releaser_specific_mass_flow: float
    isentropic_specific_work: float  # J/kg
    specific_cooling_capacity: float  # J/kg
    specific_heating_capacity: float  # J/kg

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        settings: SolverSettings = DEFAULT_SETTINGS,
    ):
        self._validate(validate_common(evaporator, heat_releaser))
        self.evaporator = evaporator
        self.compressor = compressor
        self.heat_releaser = heat_releaser
        self.settings = settings

    # --- Immutability ---

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable; cannot set '{name}'")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        """Mark construction complete; no attribute may change afterwards."""
        self._frozen = True
        logger.info(
            "Solved %s (%s): EER %.3f, COP %.3f",
            type(self).__name__,
            self.refrigerant.name,
            self.eer,
            self.cop,
        )

    @staticmethod
    def _validate(result: ValidationResult) -> None:
        result.raise_if_invalid()

    # --- Components ---

    @property
    def refrigerant(self) -> Refrigerant:
        return self.evaporator.refrigerant

    @property
    def condenser(self) -> Condenser | None:
        return self.heat_releaser if isinstance(self.heat_releaser, Condenser) else None

    @property
    def gas_cooler(self) -> GasCooler | None:
        return self.heat_releaser if isinstance(self.heat_releaser, GasCooler) else None

    @property
    def is_transcritical(self) -> bool:
        return isinstance(self.heat_releaser, GasCooler)

    # --- Energy figures ---

    @property
    def specific_work(self) -> float:
        """Real specific work [J/kg]."""
        return self.isentropic_specific_work / self.compressor.efficiency

    @property
    def eer(self) -> float:
        """Energy efficiency ratio (cooling)."""
        return self.specific_cooling_capacity / self.specific_work

    @property
    def cop(self) -> float:
        """Coefficient of performance (heating)."""
        return self.specific_heating_capacity / self.specific_work

    @property
    def points(self) -> dict[str, RefrigerantState]:
        """All state points, ordered by number (isentropic before real)."""
        found = []
        for name, value in vars(self).items():
            match = _POINT_NAME.match(name)
            if match:
                found.append(((int(match.group(1)), match.group(2) == ""), name, value))
        return {name: value for _, name, value in sorted(found)}

    # --- Entropy analysis ---

    @abstractmethod
    def _entropy_analyzer(self) -> EntropyAnalyzer:
        """Build the analyzer describing this cycle's irreversible devices."""
        ...

    def entropy_analysis(self, indoor: float, outdoor: float) -> EntropyAnalysisResult:
        """Entropy analysis between indoor and outdoor temperatures [K]."""
        return self._entropy_analyzer().perform_analysis(indoor, outdoor)

    def summary(self) -> dict[str, Any]:
        """Return a summary dictionary of the cycle performance."""
        return {
            "topology": type(self).__name__,
            "refrigerant": self.refrigerant.name,
            "is_transcritical": self.is_transcritical,
            "isentropic_specific_work_J_kg": self.isentropic_specific_work,
            "specific_work_J_kg": self.specific_work,
            "specific_cooling_capacity_J_kg": self.specific_cooling_capacity,
            "specific_heating_capacity_J_kg": self.specific_heating_capacity,
            "heat_releaser_specific_mass_flow": self.heat_releaser_specific_mass_flow,
            "eer": self.eer,
            "cop": self.cop,
        }


class TwoStageVCRC(VCRC):
    """Base class of cycles with an intermediate pressure level.

    Subclasses set ``intermediate_pressure`` [Pa].  The intermediate
    specific mass flow defaults to the difference between the heat
    releaser and evaporator flows.
    """

    intermediate_pressure: float  # Pa

    @property
    def intermediate_specific_mass_flow(self) -> float:
        return self.heat_releaser_specific_mass_flow - self.evaporator_specific_mass_flow

    def summary(self) -> dict[str, Any]:
        return {
            **super().summary(),
            "intermediate_pressure_Pa": self.intermediate_pressure,
            "intermediate_specific_mass_flow": self.intermediate_specific_mass_flow,
        }
