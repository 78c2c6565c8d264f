"""Tests for the cycle topologies."""

import re

import pytest

from vcrc.core.errors import ConstructionValidationError
from vcrc.cycle.capabilities import HasEconomizer, HasEjector, HasRecuperator, TwoStage
from vcrc.cycle.components import Condenser, Economizer, Evaporator, Recuperator
from vcrc.cycle.economizer import (
    VCRCWithEconomizer,
    VCRCWithEconomizerAndPC,
    VCRCWithEconomizerAndTPI,
)
from vcrc.cycle.ejector import (
    VCRCWithEjector,
    VCRCWithEjectorAndEconomizer,
    VCRCWithEjectorAndRecuperator,
    VCRCWithEjectorEconomizerAndPC,
    VCRCWithEjectorEconomizerAndTPI,
)
from vcrc.cycle.intercooling import VCRCWithCIC, VCRCWithIIC
from vcrc.cycle.parallel import VCRCWithPC
from vcrc.cycle.recuperator import VCRCWithRecuperator
from vcrc.cycle.simple import SimpleVCRC

T0 = 273.15
INDOOR = T0 + 18.0
OUTDOOR = T0 + 35.0

SUBCRITICAL = [
    "simple",
    "recuperator",
    "iic",
    "cic",
    "pc",
    "economizer",
    "economizer-pc",
    "economizer-tpi",
    "ejector",
    "ejector-economizer",
    "ejector-economizer-pc",
    "ejector-economizer-tpi",
    "ejector-recuperator",
]

TRANSCRITICAL = [
    "simple",
    "recuperator",
    "cic",
    "economizer",
    "economizer-pc",
    "ejector",
    "ejector-economizer",
    "ejector-economizer-pc",
]

# R32, evaporating 5 °C / 8 K superheat, condensing 45 °C / 3 K subcooling
SUBCRITICAL_EER = {
    "simple": 4.326011919496399,
    "recuperator": 4.201006672315493,
    "iic": 4.591346929801504,
    "cic": 4.70997760850132,
    "pc": 4.652194564254316,
    "economizer": 4.511109316237719,
    "economizer-pc": 4.571161584395723,
    "economizer-tpi": 4.631753388612427,
    "ejector": 4.836643336835533,
    "ejector-economizer": 4.783695679338165,
    "ejector-economizer-pc": 4.845602639140372,
    "ejector-economizer-tpi": 4.877124735439032,
    "ejector-recuperator": 4.329758306600281,
}

# Same cycles, analysed at 18 °C indoor / 35 °C outdoor [%]
SUBCRITICAL_RELATIVE_ERROR = {
    "simple": 0.0,
    "recuperator": 0.0,
    "iic": 0.47541346565012926,
    "economizer": 0.4828026105094935,
    "economizer-pc": 0.06974994089376046,
    "economizer-tpi": 0.4957145727345726,
    "ejector": 0.009995775827658926,
    "ejector-economizer": 0.166409223662599,
    "ejector-economizer-pc": 0.023527093808216284,
    "ejector-economizer-tpi": 0.17116247380301927,
    "ejector-recuperator": 0.009494347244105882,
}

# R744, evaporating 5 °C / 8 K superheat, gas cooler outlet 40 °C
TRANSCRITICAL_EER = {
    "simple": 2.6245123507309613,
    "recuperator": 2.711892365925208,
    "cic": 2.7550099889190762,
    "economizer": 2.975458873387994,
    "economizer-pc": 3.0102645369221146,
    "ejector": 3.417683634972164,
    "ejector-economizer": 3.5076990300399533,
    "ejector-economizer-pc": 3.5417485177872754,
}

IMPLICIT = {
    "ejector",
    "ejector-economizer",
    "ejector-economizer-pc",
    "ejector-economizer-tpi",
    "ejector-recuperator",
}


def _build(name, evaporator, compressor, heat_releaser, recuperator, economizer, tpi, ejector):
    builders = {
        "simple": lambda: SimpleVCRC(evaporator, compressor, heat_releaser),
        "recuperator": lambda: VCRCWithRecuperator(
            evaporator, recuperator, compressor, heat_releaser
        ),
        "iic": lambda: VCRCWithIIC(evaporator, compressor, heat_releaser),
        "cic": lambda: VCRCWithCIC(evaporator, compressor, heat_releaser),
        "pc": lambda: VCRCWithPC(evaporator, compressor, heat_releaser),
        "economizer": lambda: VCRCWithEconomizer(
            evaporator, compressor, heat_releaser, economizer
        ),
        "economizer-pc": lambda: VCRCWithEconomizerAndPC(
            evaporator, compressor, heat_releaser, economizer
        ),
        "economizer-tpi": lambda: VCRCWithEconomizerAndTPI(
            evaporator, compressor, heat_releaser, tpi
        ),
        "ejector": lambda: VCRCWithEjector(evaporator, compressor, heat_releaser, ejector),
        "ejector-economizer": lambda: VCRCWithEjectorAndEconomizer(
            evaporator, compressor, heat_releaser, ejector, economizer
        ),
        "ejector-economizer-pc": lambda: VCRCWithEjectorEconomizerAndPC(
            evaporator, compressor, heat_releaser, ejector, economizer
        ),
        "ejector-economizer-tpi": lambda: VCRCWithEjectorEconomizerAndTPI(
            evaporator, compressor, heat_releaser, ejector, tpi
        ),
        "ejector-recuperator": lambda: VCRCWithEjectorAndRecuperator(
            evaporator, recuperator, compressor, heat_releaser, ejector
        ),
    }
    return builders[name]()


@pytest.fixture(scope="module")
def subcritical(
    evaporator, compressor, condenser, recuperator, economizer, economizer_tpi, ejector
):
    return {
        name: _build(
            name,
            evaporator,
            compressor,
            condenser,
            recuperator,
            economizer,
            economizer_tpi,
            ejector,
        )
        for name in SUBCRITICAL
    }


@pytest.fixture(scope="module")
def transcritical(
    r744_evaporator, compressor, gas_cooler, recuperator, economizer, economizer_tpi, ejector
):
    return {
        name: _build(
            name,
            r744_evaporator,
            compressor,
            gas_cooler,
            recuperator,
            economizer,
            economizer_tpi,
            ejector,
        )
        for name in TRANSCRITICAL
    }


def _rel(name):
    return 1e-4 if name in IMPLICIT else 1e-3


class TestSubcriticalCycles:
    """Test every topology with an R32 condenser."""

    @pytest.mark.parametrize("name", sorted(SUBCRITICAL_EER))
    def test_eer(self, subcritical, name):
        assert subcritical[name].eer == pytest.approx(SUBCRITICAL_EER[name], rel=_rel(name))

    @pytest.mark.parametrize("name", SUBCRITICAL)
    def test_energy_balance(self, subcritical, name):
        cycle = subcritical[name]
        rel = 1e-3 if name in IMPLICIT else 1e-6
        assert cycle.cop == pytest.approx(cycle.eer + 1.0, rel=rel)
        assert cycle.specific_heating_capacity == pytest.approx(
            cycle.specific_cooling_capacity + cycle.specific_work, rel=rel
        )

    @pytest.mark.parametrize("name", SUBCRITICAL)
    def test_not_transcritical(self, subcritical, name):
        cycle = subcritical[name]
        assert not cycle.is_transcritical
        assert cycle.condenser is not None
        assert cycle.gas_cooler is None

    @pytest.mark.parametrize("name", SUBCRITICAL)
    def test_entropy_breakdown_sums_to_100(self, subcritical, name):
        result = subcritical[name].entropy_analysis(INDOOR, OUTDOOR)
        assert sum(result.work_breakdown.values()) == pytest.approx(100.0)
        assert result.compressor_energy_loss_ratio == pytest.approx(20.0)
        assert result.gas_cooler_energy_loss_ratio == 0.0

    @pytest.mark.parametrize("name", sorted(SUBCRITICAL_RELATIVE_ERROR))
    def test_analysis_relative_error(self, subcritical, name):
        result = subcritical[name].entropy_analysis(INDOOR, OUTDOOR)
        expected = SUBCRITICAL_RELATIVE_ERROR[name]
        if name in IMPLICIT:
            assert result.analysis_relative_error == pytest.approx(expected, abs=2e-2)
        else:
            assert result.analysis_relative_error == pytest.approx(expected, rel=1e-3, abs=1e-6)

    @pytest.mark.parametrize("outdoor_c", [30.0, 35.0, 40.0])
    @pytest.mark.parametrize("indoor_c", [18.0, 21.0, 24.0])
    @pytest.mark.parametrize("name", SUBCRITICAL)
    def test_relative_error_over_source_temperatures(self, subcritical, name, indoor_c, outdoor_c):
        result = subcritical[name].entropy_analysis(T0 + indoor_c, T0 + outdoor_c)
        assert sum(result.work_breakdown.values()) == pytest.approx(100.0)
        assert 0.0 <= result.analysis_relative_error < 1.0


class TestTranscriticalCycles:
    """Test the topologies that run with an R744 gas cooler."""

    @pytest.mark.parametrize("name", TRANSCRITICAL)
    def test_eer(self, transcritical, name):
        assert transcritical[name].eer == pytest.approx(TRANSCRITICAL_EER[name], rel=_rel(name))

    @pytest.mark.parametrize("name", TRANSCRITICAL)
    def test_gas_cooler(self, transcritical, name):
        cycle = transcritical[name]
        assert cycle.is_transcritical
        assert cycle.gas_cooler is not None
        assert cycle.condenser is None

    @pytest.mark.parametrize("name", TRANSCRITICAL)
    def test_intermediate_pressure_stays_subcritical(self, transcritical, name):
        cycle = transcritical[name]
        if isinstance(cycle, TwoStage):
            assert cycle.intermediate_pressure < cycle.refrigerant.critical_pressure

    @pytest.mark.parametrize("name", TRANSCRITICAL)
    def test_entropy_breakdown(self, transcritical, name):
        result = transcritical[name].entropy_analysis(INDOOR, OUTDOOR)
        assert sum(result.work_breakdown.values()) == pytest.approx(100.0)
        assert result.condenser_energy_loss_ratio == 0.0
        assert result.gas_cooler_energy_loss_ratio > 0.0


class TestSimpleCycle:
    """Test the simple cycle in detail."""

    def test_points(self, subcritical, evaporator, condenser):
        cycle = subcritical["simple"]
        assert list(cycle.points) == ["point_1", "point_2s", "point_2", "point_3", "point_4"]
        assert cycle.point_1 == evaporator.outlet
        assert cycle.point_3 == condenser.outlet
        assert cycle.point_4.enthalpy == pytest.approx(cycle.point_3.enthalpy)

    def test_zeotropic_blend(self, compressor):
        evaporator = Evaporator("R407C", T0 + 5.0, 8.0)
        condenser = Condenser("R407C", T0 + 45.0, 3.0)
        cycle = SimpleVCRC(evaporator, compressor, condenser)
        refrigerant = evaporator.refrigerant
        assert cycle.point_1 == refrigerant.superheated(8.0, temperature=T0 + 5.0)
        assert cycle.point_3 == refrigerant.subcooled(3.0, temperature=T0 + 45.0)
        assert cycle.isentropic_specific_work == cycle.point_2s.enthalpy - cycle.point_1.enthalpy
        assert cycle.eer == cycle.specific_cooling_capacity / cycle.specific_work

    def test_entropy_analysis(self, subcritical):
        result = subcritical["simple"].entropy_analysis(INDOOR, OUTDOOR)
        assert result.thermodynamic_perfection == pytest.approx(25.259214367658867, rel=1e-3)
        assert result.min_specific_work_ratio == pytest.approx(25.259214367658878, rel=1e-3)
        assert result.condenser_energy_loss_ratio == pytest.approx(21.46877321647669, rel=1e-3)
        assert result.expansion_valves_energy_loss_ratio == pytest.approx(
            12.141693490520616, rel=1e-3
        )
        assert result.evaporator_energy_loss_ratio == pytest.approx(21.13031892534382, rel=1e-3)
        assert result.ejector_energy_loss_ratio == 0.0
        assert result.mixing_energy_loss_ratio == 0.0

    def test_swapped_source_temperatures(self, subcritical):
        cycle = subcritical["simple"]
        assert cycle.entropy_analysis(OUTDOOR, INDOOR) == cycle.entropy_analysis(INDOOR, OUTDOOR)

    def test_immutable(self, subcritical):
        cycle = subcritical["simple"]
        with pytest.raises(AttributeError):
            cycle.point_1 = cycle.point_4
        with pytest.raises(AttributeError):
            cycle.extra = 1.0

    def test_summary(self, subcritical):
        summary = subcritical["simple"].summary()
        assert summary["topology"] == "SimpleVCRC"
        assert summary["refrigerant"] == "R32"
        assert summary["eer"] == pytest.approx(subcritical["simple"].eer)


class TestTwoStageCycles:
    """Test the intermediate pressure level and capabilities."""

    @pytest.mark.parametrize("name", ["iic", "cic", "pc", "economizer", "economizer-tpi"])
    def test_geometric_mean_pressure(self, subcritical, evaporator, condenser, name):
        cycle = subcritical[name]
        expected = (evaporator.pressure * condenser.pressure) ** 0.5
        assert cycle.intermediate_pressure == pytest.approx(expected)
        assert cycle.intermediate_specific_mass_flow > 0.0
        assert cycle.heat_releaser_specific_mass_flow > 1.0

    def test_points_ordering(self, subcritical):
        names = list(subcritical["economizer"].points)
        assert names[:5] == ["point_1", "point_2s", "point_2", "point_3", "point_4s"]
        assert names[-1] == "point_9"

    def test_capabilities(self, subcritical):
        assert isinstance(subcritical["iic"], TwoStage)
        assert not isinstance(subcritical["simple"], TwoStage)
        assert isinstance(subcritical["economizer-tpi"], HasEconomizer)
        assert isinstance(subcritical["recuperator"], HasRecuperator)
        assert isinstance(subcritical["ejector-recuperator"], HasRecuperator)
        assert isinstance(subcritical["ejector"], HasEjector)
        assert not isinstance(subcritical["simple"], HasEjector)

    def test_summary(self, subcritical):
        summary = subcritical["cic"].summary()
        assert "intermediate_pressure_Pa" in summary
        assert "intermediate_specific_mass_flow" in summary


class TestEjectorCycles:
    """Test the diffuser pressure closure of the ejector cycles."""

    @pytest.mark.parametrize("name", sorted(IMPLICIT))
    def test_diffuser_above_evaporator(self, subcritical, evaporator, name):
        cycle = subcritical[name]
        flows = cycle.ejector_flows
        assert flows.suction_inlet == evaporator.outlet
        assert evaporator.pressure < flows.diffuser_outlet.pressure < cycle.heat_releaser.pressure

    def test_single_stage_separator(self, subcritical):
        cycle = subcritical["ejector"]
        quality = cycle.point_6.quality
        assert cycle.heat_releaser_specific_mass_flow == pytest.approx(quality / (1.0 - quality))
        assert cycle.point_1.pressure == pytest.approx(cycle.point_6.pressure)

    @pytest.mark.parametrize(
        "name", ["ejector-economizer", "ejector-economizer-pc", "ejector-economizer-tpi"]
    )
    def test_flow_split(self, subcritical, name):
        cycle = subcritical[name]
        assert cycle.first_stage_specific_mass_flow + cycle.intermediate_specific_mass_flow == (
            pytest.approx(cycle.heat_releaser_specific_mass_flow)
        )

    def test_recuperator_property(self, subcritical, recuperator):
        assert subcritical["ejector-recuperator"].recuperator == recuperator


class TestCycleValidation:
    """Test construction errors shared by the topologies."""

    def test_different_refrigerants(self, evaporator, compressor):
        condenser = Condenser("R22", T0 + 45.0, 3.0)
        with pytest.raises(ConstructionValidationError, match="Only one refrigerant"):
            SimpleVCRC(evaporator, compressor, condenser)

    def test_condensing_below_evaporating(self, r32, compressor):
        evaporator = Evaporator(r32, T0 + 30.0, 5.0)
        condenser = Condenser(r32, T0 + 20.0, 3.0)
        with pytest.raises(
            ConstructionValidationError,
            match="Condensing temperature should be greater than evaporating temperature!",
        ):
            SimpleVCRC(evaporator, compressor, condenser)

    def test_zeotropic_blend_rejected_by_two_stage(self, compressor):
        evaporator = Evaporator("R407C", T0 + 5.0, 8.0)
        condenser = Condenser("R407C", T0 + 45.0, 3.0)
        with pytest.raises(
            ConstructionValidationError,
            match="Refrigerant should be a single component or an azeotropic blend!",
        ):
            VCRCWithIIC(evaporator, compressor, condenser)

    def test_zeotropic_blend_rejected_by_ejector(self, compressor, ejector):
        evaporator = Evaporator("R407C", T0 + 5.0, 8.0)
        condenser = Condenser("R407C", T0 + 45.0, 3.0)
        with pytest.raises(ConstructionValidationError, match="single component"):
            VCRCWithEjector(evaporator, compressor, condenser, ejector)

    def test_recuperator_too_large(self, evaporator, compressor, condenser):
        with pytest.raises(
            ConstructionValidationError,
            match=re.escape("Too high temperature difference at the recuperator 'hot' side!"),
        ):
            VCRCWithRecuperator(evaporator, Recuperator(45.0), compressor, condenser)

    def test_economizer_too_large(self, evaporator, compressor, condenser):
        with pytest.raises(
            ConstructionValidationError,
            match=re.escape("Too high temperature difference at the economizer 'cold' side!"),
        ):
            VCRCWithEconomizer(evaporator, compressor, condenser, Economizer(45.0, 5.0))
