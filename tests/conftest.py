"""Shared fixtures: an R32 subcritical and an R744 transcritical setup."""

import pytest

from vcrc.core.fluids import Refrigerant
from vcrc.cycle.components import (
    Compressor,
    Condenser,
    Economizer,
    EconomizerWithTPI,
    Ejector,
    Evaporator,
    GasCooler,
    Recuperator,
)

T0 = 273.15
INDOOR = T0 + 18.0  # K
OUTDOOR = T0 + 35.0  # K


@pytest.fixture(scope="session")
def r32():
    return Refrigerant("R32")


@pytest.fixture(scope="session")
def r744():
    return Refrigerant("R744")


@pytest.fixture(scope="session")
def evaporator(r32):
    return Evaporator(r32, T0 + 5.0, 8.0)


@pytest.fixture(scope="session")
def condenser(r32):
    return Condenser(r32, T0 + 45.0, 3.0)


@pytest.fixture(scope="session")
def r744_evaporator(r744):
    return Evaporator(r744, T0 + 5.0, 8.0)


@pytest.fixture(scope="session")
def gas_cooler(r744):
    return GasCooler(r744, T0 + 40.0)


@pytest.fixture(scope="session")
def compressor():
    return Compressor(0.8)


@pytest.fixture(scope="session")
def recuperator():
    return Recuperator(5.0)


@pytest.fixture(scope="session")
def economizer():
    return Economizer(5.0, 5.0)


@pytest.fixture(scope="session")
def economizer_tpi():
    return EconomizerWithTPI(5.0)


@pytest.fixture(scope="session")
def ejector():
    return Ejector(0.9, 0.9, 0.8)
