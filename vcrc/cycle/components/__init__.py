"""Component specifications for refrigeration cycles."""

from vcrc.cycle.components.base import CycleComponent, HeatReleaser, MainHeatExchanger
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.condenser import Condenser
from vcrc.cycle.components.economizer import Economizer, EconomizerWithTPI
from vcrc.cycle.components.ejector import Ejector, EjectorFlows
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.components.gas_cooler import GasCooler
from vcrc.cycle.components.recuperator import Recuperator

__all__ = [
    "Compressor",
    "Condenser",
    "CycleComponent",
    "Economizer",
    "EconomizerWithTPI",
    "Ejector",
    "EjectorFlows",
    "Evaporator",
    "GasCooler",
    "HeatReleaser",
    "MainHeatExchanger",
    "Recuperator",
]
