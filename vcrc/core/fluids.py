"""Refrigerant property interface wrapping CoolProp.

Every thermodynamic state in VCRC is produced here.  A :class:`Refrigerant`
owns one CoolProp ``AbstractState`` and turns pairs of independent
properties into immutable :class:`RefrigerantState` snapshots.  States never
change; processes (compression, expansion, heating, cooling, mixing) derive
new states from old ones.
"""

from __future__ import annotations

import logging
import math
import re
import threading
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property

import CoolProp.CoolProp as CP

from vcrc.core.errors import VCRCError
from vcrc.utils.constants import GLIDE_THRESHOLD, P_ATM
from vcrc.utils.validation import ValidationResult

logger = logging.getLogger(__name__)

# CoolProp input pairs: keyword set -> (input pair, argument order)
_INPUT_PAIRS: dict[frozenset[str], tuple[int, tuple[str, str]]] = {
    frozenset({"pressure", "temperature"}): (CP.PT_INPUTS, ("pressure", "temperature")),
    frozenset({"pressure", "enthalpy"}): (CP.HmassP_INPUTS, ("enthalpy", "pressure")),
    frozenset({"pressure", "entropy"}): (CP.PSmass_INPUTS, ("pressure", "entropy")),
    frozenset({"pressure", "quality"}): (CP.PQ_INPUTS, ("pressure", "quality")),
    frozenset({"temperature", "quality"}): (CP.QT_INPUTS, ("quality", "temperature")),
    frozenset({"enthalpy", "entropy"}): (CP.HmassSmass_INPUTS, ("enthalpy", "entropy")),
    frozenset({"temperature", "entropy"}): (CP.SmassT_INPUTS, ("entropy", "temperature")),
    frozenset({"temperature", "enthalpy"}): (CP.HmassT_INPUTS, ("enthalpy", "temperature")),
}

_ZEOTROPIC_BLEND = re.compile(r"^R4\d{2}")
_AZEOTROPIC_BLEND = re.compile(r"^R5\d{2}")


class InvalidStateError(VCRCError):
    """Raised when a refrigerant state cannot be determined or a process is infeasible."""


class Phase(Enum):
    """Phase of a refrigerant state, as reported by CoolProp."""

    LIQUID = "liquid"
    SUPERCRITICAL = "supercritical"
    SUPERCRITICAL_GAS = "supercritical_gas"
    SUPERCRITICAL_LIQUID = "supercritical_liquid"
    CRITICAL_POINT = "critical_point"
    GAS = "gas"
    TWO_PHASE = "two_phase"
    UNKNOWN = "unknown"
    NOT_IMPOSED = "not_imposed"


_PHASES = {
    CP.iphase_liquid: Phase.LIQUID,
    CP.iphase_supercritical: Phase.SUPERCRITICAL,
    CP.iphase_supercritical_gas: Phase.SUPERCRITICAL_GAS,
    CP.iphase_supercritical_liquid: Phase.SUPERCRITICAL_LIQUID,
    CP.iphase_critical_point: Phase.CRITICAL_POINT,
    CP.iphase_gas: Phase.GAS,
    CP.iphase_twophase: Phase.TWO_PHASE,
    CP.iphase_unknown: Phase.UNKNOWN,
    CP.iphase_not_imposed: Phase.NOT_IMPOSED,
}


class Refrigerant:
    """Property oracle for a single refrigerant.

    Wraps CoolProp's low-level AbstractState.  State updates are serialised
    with a lock, so one instance may be shared between threads.

    Args:
        name: CoolProp refrigerant name (e.g. "R32", "R744", "R407C").
        backend: CoolProp backend string.

    Raises:
        ConstructionValidationError: If the name does not denote a refrigerant.
        InvalidStateError: If CoolProp does not know the fluid.
    """

    def __init__(self, name: str, backend: str = "HEOS"):
        result = ValidationResult()
        result.require(
            name.startswith("R"),
            "name",
            "The selected fluid is not a refrigerant (its name should start with 'R')!",
        )
        result.raise_if_invalid()

        self.name = name
        self.backend = backend
        try:
            self._state = CP.AbstractState(backend, name)
        except Exception as exc:
            raise InvalidStateError(
                f"Cannot create refrigerant '{name}' with backend '{backend}': {exc}"
            ) from exc
        self._lock = threading.Lock()

        self.critical_temperature = self._state.T_critical()  # K
        self.critical_pressure = self._state.p_critical()  # Pa
        self.triple_temperature = self._state.Ttriple()  # K

    @cached_property
    def triple_pressure(self) -> float:
        """Triple point pressure [Pa]."""
        with self._lock:
            try:
                return self._state.trivial_keyed_output(CP.iP_triple)
            except Exception as exc:
                raise InvalidStateError(f"Invalid triple pressure for {self.name}: {exc}") from exc

    @cached_property
    def glide(self) -> float:
        """Temperature glide [K] at atmospheric pressure.

        Refrigerants whose triple point lies above atmospheric pressure
        (e.g. R744) are evaluated just above the triple point instead.
        """
        pressure = max(P_ATM, 1.01 * self.triple_pressure)
        return abs(
            self.dew_point_at(pressure=pressure).temperature
            - self.bubble_point_at(pressure=pressure).temperature
        )

    @property
    def has_glide(self) -> bool:
        return self.glide > GLIDE_THRESHOLD

    @property
    def is_zeotropic_blend(self) -> bool:
        return _ZEOTROPIC_BLEND.match(self.name) is not None

    @property
    def is_azeotropic_blend(self) -> bool:
        return _AZEOTROPIC_BLEND.match(self.name) is not None

    @property
    def is_single_component(self) -> bool:
        return not (self.is_azeotropic_blend or self.is_zeotropic_blend)

    # --- Core state access ---

    def with_state(self, **inputs: float) -> RefrigerantState:
        """Return the state fixed by exactly two independent properties.

        Accepted keywords: ``pressure`` [Pa], ``temperature`` [K],
        ``enthalpy`` [J/kg], ``entropy`` [J/(kg·K)], ``quality`` [-].

        Raises:
            InvalidStateError: If the pair is unsupported or infeasible.
        """
        key = frozenset(inputs)
        if len(inputs) != 2 or key not in _INPUT_PAIRS:
            raise InvalidStateError(f"Unsupported input pair: {sorted(inputs)}")
        pair, order = _INPUT_PAIRS[key]
        with self._lock:
            try:
                self._state.update(pair, inputs[order[0]], inputs[order[1]])
            except Exception as exc:
                raise InvalidStateError(
                    f"State update failed for {self.name} at {inputs}: {exc}"
                ) from exc
            return self._extract_state()

    def _extract_state(self) -> RefrigerantState:
        s = self._state
        phase = _PHASES.get(s.phase(), Phase.UNKNOWN)
        return RefrigerantState(
            name=self.name,
            pressure=s.p(),
            temperature=s.T(),
            enthalpy=s.hmass(),
            entropy=s.smass(),
            density=s.rhomass(),
            quality=s.Q() if phase is Phase.TWO_PHASE else None,
            phase=phase,
            refrigerant=self,
        )

    # --- Saturation states ---

    def bubble_point_at(
        self, *, pressure: float | None = None, temperature: float | None = None
    ) -> RefrigerantState:
        """Saturated liquid at the given pressure [Pa] or temperature [K]."""
        return self._saturated(0.0, pressure, temperature)

    def dew_point_at(
        self, *, pressure: float | None = None, temperature: float | None = None
    ) -> RefrigerantState:
        """Saturated vapour at the given pressure [Pa] or temperature [K]."""
        return self._saturated(1.0, pressure, temperature)

    def two_phase_point_at(self, pressure: float, quality: float) -> RefrigerantState:
        """Two-phase state at pressure [Pa] and vapour quality [-]."""
        return self.with_state(pressure=pressure, quality=quality)

    def _saturated(
        self, quality: float, pressure: float | None, temperature: float | None
    ) -> RefrigerantState:
        if (pressure is None) == (temperature is None):
            raise InvalidStateError("Exactly one of pressure or temperature must be given")
        if pressure is not None:
            return self.with_state(pressure=pressure, quality=quality)
        return self.with_state(temperature=temperature, quality=quality)

    def subcooled(
        self,
        subcooling: float,
        *,
        pressure: float | None = None,
        temperature: float | None = None,
    ) -> RefrigerantState:
        """Liquid *subcooling* [K] below the bubble point at P or T."""
        if subcooling < 0:
            raise InvalidStateError("Invalid subcooling!")
        bubble = self.bubble_point_at(pressure=pressure, temperature=temperature)
        if subcooling == 0:
            return bubble
        return bubble.cooling_to(temperature=bubble.temperature - subcooling)

    def superheated(
        self,
        superheat: float,
        *,
        pressure: float | None = None,
        temperature: float | None = None,
    ) -> RefrigerantState:
        """Vapour *superheat* [K] above the dew point at P or T."""
        if superheat < 0:
            raise InvalidStateError("Invalid superheat!")
        dew = self.dew_point_at(pressure=pressure, temperature=temperature)
        if superheat == 0:
            return dew
        return dew.heating_to(temperature=dew.temperature + superheat)

    def mixing(
        self,
        first_flow: float,
        first: RefrigerantState,
        second_flow: float,
        second: RefrigerantState,
    ) -> RefrigerantState:
        """Adiabatic, isobaric mixing of two flows (specific mass flows [-]).

        Raises:
            InvalidStateError: If the flows differ in fluid or pressure.
        """
        if not (first.name == second.name == self.name):
            raise InvalidStateError("The mixing process is possible only for the same fluids!")
        if not math.isclose(first.pressure, second.pressure, rel_tol=1e-6):
            raise InvalidStateError(
                "The mixing process is possible only for flows with the same pressure!"
            )
        enthalpy = (first_flow * first.enthalpy + second_flow * second.enthalpy) / (
            first_flow + second_flow
        )
        return self.with_state(pressure=first.pressure, enthalpy=enthalpy)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Refrigerant):
            return NotImplemented
        return (self.name, self.backend) == (other.name, other.backend)

    def __hash__(self) -> int:
        return hash((self.name, self.backend))

    def __repr__(self) -> str:
        return f"Refrigerant('{self.name}', backend='{self.backend}')"


@dataclass(frozen=True)
class RefrigerantState:
    """Immutable thermodynamic state of a refrigerant.

    All properties in SI units.  ``quality`` is None outside the two-phase
    region.
    """

    name: str
    pressure: float  # Pa
    temperature: float  # K
    enthalpy: float  # J/kg
    entropy: float  # J/(kg·K)
    density: float  # kg/m³
    quality: float | None  # vapour quality [-]
    phase: Phase
    refrigerant: Refrigerant = field(compare=False, repr=False)

    @property
    def is_two_phase(self) -> bool:
        return self.phase is Phase.TWO_PHASE

    # --- Compression ---

    def isentropic_compression_to(self, pressure: float) -> RefrigerantState:
        """Ideal compression to *pressure* [Pa]."""
        if pressure <= self.pressure:
            raise InvalidStateError(
                "Compressor outlet pressure should be higher than inlet pressure!"
            )
        return self.refrigerant.with_state(pressure=pressure, entropy=self.entropy)

    def compression_to(self, pressure: float, efficiency: float) -> RefrigerantState:
        """Real compression to *pressure* [Pa] with isentropic *efficiency* [-]."""
        if not 0 < efficiency <= 1:
            raise InvalidStateError("Invalid compressor isentropic efficiency!")
        ideal = self.isentropic_compression_to(pressure)
        return self.refrigerant.with_state(
            pressure=pressure,
            enthalpy=self.enthalpy + (ideal.enthalpy - self.enthalpy) / efficiency,
        )

    # --- Expansion ---

    def isenthalpic_expansion_to(self, pressure: float) -> RefrigerantState:
        """Throttling to *pressure* [Pa]."""
        self._check_expansion(pressure)
        return self.refrigerant.with_state(pressure=pressure, enthalpy=self.enthalpy)

    def isentropic_expansion_to(self, pressure: float) -> RefrigerantState:
        """Ideal expansion to *pressure* [Pa]."""
        self._check_expansion(pressure)
        return self.refrigerant.with_state(pressure=pressure, entropy=self.entropy)

    def expansion_to(self, pressure: float, efficiency: float) -> RefrigerantState:
        """Real expansion to *pressure* [Pa] with isentropic *efficiency* [-]."""
        if not 0 < efficiency <= 1:
            raise InvalidStateError("Invalid expander isentropic efficiency!")
        ideal = self.isentropic_expansion_to(pressure)
        return self.refrigerant.with_state(
            pressure=pressure,
            enthalpy=self.enthalpy - efficiency * (self.enthalpy - ideal.enthalpy),
        )

    def _check_expansion(self, pressure: float) -> None:
        if pressure >= self.pressure:
            raise InvalidStateError(
                "Expansion valve outlet pressure should be lower than inlet pressure!"
            )

    # --- Isobaric heat exchange ---

    def cooling_to(
        self, *, temperature: float | None = None, enthalpy: float | None = None
    ) -> RefrigerantState:
        """Isobaric cooling to a temperature [K] or enthalpy [J/kg]."""
        if temperature is not None:
            if temperature >= self.temperature:
                raise InvalidStateError(
                    "During the cooling process, the temperature should decrease!"
                )
            return self.refrigerant.with_state(pressure=self.pressure, temperature=temperature)
        if enthalpy is None or enthalpy >= self.enthalpy:
            raise InvalidStateError("During the cooling process, the enthalpy should decrease!")
        return self.refrigerant.with_state(pressure=self.pressure, enthalpy=enthalpy)

    def heating_to(
        self, *, temperature: float | None = None, enthalpy: float | None = None
    ) -> RefrigerantState:
        """Isobaric heating to a temperature [K] or enthalpy [J/kg]."""
        if temperature is not None:
            if temperature <= self.temperature:
                raise InvalidStateError(
                    "During the heating process, the temperature should increase!"
                )
            return self.refrigerant.with_state(pressure=self.pressure, temperature=temperature)
        if enthalpy is None or enthalpy <= self.enthalpy:
            raise InvalidStateError("During the heating process, the enthalpy should increase!")
        return self.refrigerant.with_state(pressure=self.pressure, enthalpy=enthalpy)

    # --- Same-fluid saturation shortcuts ---

    def bubble_point_at(
        self, *, pressure: float | None = None, temperature: float | None = None
    ) -> RefrigerantState:
        return self.refrigerant.bubble_point_at(pressure=pressure, temperature=temperature)

    def dew_point_at(
        self, *, pressure: float | None = None, temperature: float | None = None
    ) -> RefrigerantState:
        return self.refrigerant.dew_point_at(pressure=pressure, temperature=temperature)

    def two_phase_point_at(self, pressure: float, quality: float) -> RefrigerantState:
        return self.refrigerant.two_phase_point_at(pressure, quality)
