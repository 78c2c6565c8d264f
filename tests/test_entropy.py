"""Tests for the entropy analysis and its batch helpers."""

import dataclasses
import re

import pytest

from vcrc.analysis import EntropyAnalysisResult, average, entropy_analysis
from vcrc.core.errors import AnalysisPreconditionError, InputShapeError
from vcrc.cycle.simple import SimpleVCRC

T0 = 273.15
INDOOR = T0 + 18.0
OUTDOOR = T0 + 35.0


@pytest.fixture(scope="module")
def cycle(evaporator, compressor, condenser):
    return SimpleVCRC(evaporator, compressor, condenser)


@pytest.fixture(scope="module")
def result(cycle):
    return cycle.entropy_analysis(INDOOR, OUTDOOR)


class TestPreconditions:
    """Test source temperature checks."""

    def test_equal_temperatures(self, cycle):
        with pytest.raises(AnalysisPreconditionError, match="should not be equal"):
            cycle.entropy_analysis(INDOOR, INDOOR)

    def test_cold_source_below_evaporator_outlet(self, cycle):
        with pytest.raises(
            AnalysisPreconditionError,
            match=re.escape(
                "Wrong temperature difference in the evaporator! "
                "Increase 'cold' source temperature."
            ),
        ):
            cycle.entropy_analysis(T0 + 10.0, OUTDOOR)

    def test_hot_source_above_heat_releaser_outlet(self, cycle):
        with pytest.raises(
            AnalysisPreconditionError, match="Wrong temperature difference in the condenser"
        ):
            cycle.entropy_analysis(INDOOR, T0 + 45.0)


class TestResult:
    """Test the result structure."""

    def test_work_breakdown_keys(self, result):
        breakdown = result.work_breakdown
        assert len(breakdown) == 10
        assert "thermodynamic_perfection" not in breakdown
        assert "analysis_relative_error" not in breakdown

    def test_ratios_are_non_negative(self, result):
        assert all(value >= 0.0 for value in result.work_breakdown.values())

    def test_perfection_matches_min_work_for_exact_cycle(self, result):
        assert result.thermodynamic_perfection == pytest.approx(
            result.min_specific_work_ratio, rel=1e-6
        )

    def test_frozen(self, result):
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.thermodynamic_perfection = 0.0


class TestAverage:
    """Test field-wise averaging of results."""

    def test_empty(self):
        with pytest.raises(InputShapeError, match="At least one"):
            average([])

    def test_single_result(self, result):
        assert average([result]) is result

    def test_identical_results(self, result):
        averaged = average([result, result, result])
        for f in dataclasses.fields(EntropyAnalysisResult):
            assert getattr(averaged, f.name) == pytest.approx(getattr(result, f.name))

    def test_mean(self, result):
        zeros = EntropyAnalysisResult(*([0.0] * len(dataclasses.fields(EntropyAnalysisResult))))
        averaged = average([result, zeros])
        assert averaged.evaporator_energy_loss_ratio == pytest.approx(
            result.evaporator_energy_loss_ratio / 2.0
        )
        assert isinstance(averaged.mixing_energy_loss_ratio, float)


class TestEntropyAnalysis:
    """Test batch analysis over several source temperature pairs."""

    def test_mismatched_lengths(self, cycle):
        with pytest.raises(InputShapeError, match="same length"):
            entropy_analysis([cycle, cycle], [INDOOR], [OUTDOOR, OUTDOOR])

    def test_single_point(self, cycle, result):
        assert entropy_analysis([cycle], [INDOOR], [OUTDOOR]) == result

    def test_outdoor_sweep(self, cycle):
        outdoors = [T0 + 30.0, T0 + 35.0, T0 + 40.0]
        averaged = entropy_analysis([cycle] * 3, [INDOOR] * 3, outdoors)
        individual = [cycle.entropy_analysis(INDOOR, t) for t in outdoors]
        expected = sum(r.min_specific_work_ratio for r in individual) / 3.0
        assert averaged.min_specific_work_ratio == pytest.approx(expected)
        assert sum(averaged.work_breakdown.values()) == pytest.approx(100.0)
