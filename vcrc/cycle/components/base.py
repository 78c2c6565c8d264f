"""Base classes for cycle components.

Components are immutable specifications of the physical devices of a
refrigeration cycle.  Their arguments are validated at construction; an
invalid component never exists.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from vcrc.core.fluids import Refrigerant, RefrigerantState


def as_refrigerant(value: Refrigerant | str) -> Refrigerant:
    """Accept either a refrigerant name or a Refrigerant instance."""
    return value if isinstance(value, Refrigerant) else Refrigerant(value)


class CycleComponent(ABC):
    """Abstract base class for a cycle component."""

    component_type: ClassVar[str] = ""

    @abstractmethod
    def summary(self) -> dict[str, Any]:
        """Return a summary dictionary of the component specification."""
        ...


class MainHeatExchanger(CycleComponent):
    """A heat exchanger with a fixed refrigerant outlet state.

    Concrete subclasses provide ``refrigerant``, ``temperature`` [K],
    ``pressure`` [Pa] and ``outlet``.
    """

    refrigerant: Refrigerant
    temperature: float
    pressure: float
    outlet: RefrigerantState


class HeatReleaser(MainHeatExchanger):
    """Marker base for condensers and gas coolers."""
