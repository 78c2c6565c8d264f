"""Tests for the CoolProp refrigerant property interface."""

import pytest

from vcrc.core.errors import ConstructionValidationError
from vcrc.core.fluids import InvalidStateError, Phase, Refrigerant

T0 = 273.15


class TestRefrigerant:
    """Test refrigerant construction and classification."""

    def test_not_a_refrigerant(self):
        with pytest.raises(ConstructionValidationError, match="should start with 'R'"):
            Refrigerant("Water")

    def test_unknown_fluid(self):
        with pytest.raises(InvalidStateError):
            Refrigerant("R99999")

    def test_critical_point_r744(self, r744):
        assert r744.critical_temperature == pytest.approx(304.13, rel=1e-3)
        assert r744.critical_pressure == pytest.approx(7.3773e6, rel=1e-3)

    def test_triple_pressure_r744_above_atmospheric(self, r744):
        assert r744.triple_pressure > 101325.0

    def test_single_component(self, r32):
        assert r32.is_single_component
        assert not r32.is_zeotropic_blend
        assert not r32.is_azeotropic_blend

    def test_blend_classification_by_name(self):
        assert Refrigerant("R407C").is_zeotropic_blend
        assert Refrigerant("R507A").is_azeotropic_blend

    def test_pure_fluid_has_no_glide(self, r32, r744):
        assert r32.glide == pytest.approx(0.0, abs=1e-6)
        assert not r32.has_glide
        assert not r744.has_glide

    def test_equality(self, r32):
        assert Refrigerant("R32") == r32
        assert hash(Refrigerant("R32")) == hash(r32)
        assert Refrigerant("R744") != r32


class TestStates:
    """Test state lookups and saturation points."""

    def test_unsupported_input_pair(self, r32):
        with pytest.raises(InvalidStateError, match="Unsupported input pair"):
            r32.with_state(pressure=1e6)

    def test_bubble_and_dew_points(self, r32):
        bubble = r32.bubble_point_at(temperature=T0 + 45.0)
        dew = r32.dew_point_at(temperature=T0 + 45.0)
        assert bubble.quality == pytest.approx(0.0, abs=1e-9)
        assert dew.quality == pytest.approx(1.0, abs=1e-9)
        assert bubble.pressure == pytest.approx(dew.pressure, rel=1e-6)
        assert dew.enthalpy > bubble.enthalpy

    def test_saturation_needs_one_input(self, r32):
        with pytest.raises(InvalidStateError):
            r32.bubble_point_at()
        with pytest.raises(InvalidStateError):
            r32.bubble_point_at(pressure=1e6, temperature=300.0)

    def test_subcooled_zero_is_bubble_point(self, r32):
        assert r32.subcooled(0.0, temperature=T0 + 45.0) == r32.bubble_point_at(
            temperature=T0 + 45.0
        )

    def test_subcooled(self, r32):
        bubble = r32.bubble_point_at(temperature=T0 + 45.0)
        liquid = r32.subcooled(3.0, temperature=T0 + 45.0)
        assert liquid.temperature == pytest.approx(bubble.temperature - 3.0)
        assert liquid.pressure == pytest.approx(bubble.pressure)
        assert liquid.quality is None
        assert liquid.phase is Phase.LIQUID

    def test_superheated(self, r32):
        dew = r32.dew_point_at(temperature=T0 + 5.0)
        vapour = r32.superheated(8.0, pressure=dew.pressure)
        assert vapour.temperature == pytest.approx(dew.temperature + 8.0)
        assert vapour.phase is Phase.GAS

    def test_negative_superheat(self, r32):
        with pytest.raises(InvalidStateError, match="Invalid superheat"):
            r32.superheated(-1.0, temperature=T0 + 5.0)

    def test_two_phase_point(self, r32):
        dew = r32.dew_point_at(temperature=T0 + 5.0)
        state = r32.two_phase_point_at(dew.pressure, 0.3)
        assert state.is_two_phase
        assert state.quality == pytest.approx(0.3)

    def test_states_are_immutable(self, r32):
        state = r32.dew_point_at(temperature=T0 + 5.0)
        with pytest.raises(AttributeError):
            state.pressure = 1.0


class TestProcesses:
    """Test compression, expansion, heating, cooling and mixing."""

    def test_compression_efficiency(self, r32):
        inlet = r32.superheated(8.0, temperature=T0 + 5.0)
        high = r32.bubble_point_at(temperature=T0 + 45.0).pressure
        ideal = inlet.isentropic_compression_to(high)
        real = inlet.compression_to(high, 0.8)
        assert ideal.entropy == pytest.approx(inlet.entropy, rel=1e-6)
        assert real.enthalpy - inlet.enthalpy == pytest.approx(
            (ideal.enthalpy - inlet.enthalpy) / 0.8, rel=1e-6
        )

    def test_compression_to_lower_pressure(self, r32):
        inlet = r32.superheated(8.0, temperature=T0 + 5.0)
        with pytest.raises(InvalidStateError, match="higher than inlet pressure"):
            inlet.isentropic_compression_to(inlet.pressure / 2)

    def test_isenthalpic_expansion(self, r32):
        liquid = r32.subcooled(3.0, temperature=T0 + 45.0)
        low = r32.dew_point_at(temperature=T0 + 5.0).pressure
        outlet = liquid.isenthalpic_expansion_to(low)
        assert outlet.enthalpy == pytest.approx(liquid.enthalpy)
        assert outlet.is_two_phase

    def test_expansion_to_higher_pressure(self, r32):
        liquid = r32.subcooled(3.0, temperature=T0 + 45.0)
        with pytest.raises(InvalidStateError, match="lower than inlet pressure"):
            liquid.isenthalpic_expansion_to(liquid.pressure * 2)

    def test_real_expansion_between_ideal_and_throttling(self, r32):
        liquid = r32.bubble_point_at(temperature=T0 + 45.0)
        low = r32.dew_point_at(temperature=T0 + 5.0).pressure
        ideal = liquid.isentropic_expansion_to(low)
        real = liquid.expansion_to(low, 0.9)
        assert ideal.enthalpy < real.enthalpy < liquid.enthalpy

    def test_cooling_direction(self, r32):
        vapour = r32.superheated(8.0, temperature=T0 + 5.0)
        with pytest.raises(InvalidStateError, match="temperature should decrease"):
            vapour.cooling_to(temperature=vapour.temperature + 1.0)

    def test_heating_direction(self, r32):
        vapour = r32.superheated(8.0, temperature=T0 + 5.0)
        with pytest.raises(InvalidStateError, match="enthalpy should increase"):
            vapour.heating_to(enthalpy=vapour.enthalpy - 1.0)

    def test_mixing_energy_balance(self, r32):
        pressure = r32.dew_point_at(temperature=T0 + 20.0).pressure
        first = r32.dew_point_at(pressure=pressure)
        second = r32.superheated(20.0, pressure=pressure)
        mixed = r32.mixing(1.0, first, 3.0, second)
        assert mixed.enthalpy == pytest.approx(
            (first.enthalpy + 3.0 * second.enthalpy) / 4.0, rel=1e-6
        )
        assert mixed.pressure == pytest.approx(pressure)

    def test_mixing_different_pressures(self, r32):
        first = r32.dew_point_at(temperature=T0 + 5.0)
        second = r32.dew_point_at(temperature=T0 + 20.0)
        with pytest.raises(InvalidStateError, match="same pressure"):
            r32.mixing(1.0, first, 1.0, second)

    def test_mixing_different_fluids(self, r32, r744):
        first = r32.dew_point_at(temperature=T0 + 5.0)
        second = r744.dew_point_at(pressure=first.pressure)
        with pytest.raises(InvalidStateError, match="same fluids"):
            r32.mixing(1.0, first, 1.0, second)
