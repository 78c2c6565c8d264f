"""Tests for utility modules."""

import pytest

from vcrc.core.errors import ConstructionValidationError
from vcrc.utils.constants import (
    BAR_TO_PA,
    MAX_TEMPERATURE_DIFFERENCE,
    P_ATM,
    T_CELSIUS_OFFSET,
)
from vcrc.utils.units import (
    pressure_from_si,
    pressure_to_si,
    ratio_to_fraction,
    specific_energy_from_si,
    specific_entropy_from_si,
    temperature_from_si,
    temperature_to_si,
)
from vcrc.utils.validation import (
    Severity,
    ValidationResult,
    check,
    validate_closed_range,
    validate_open_range,
)


class TestConstants:
    def test_p_atm(self):
        assert P_ATM == pytest.approx(101325.0)

    def test_celsius_offset(self):
        assert T_CELSIUS_OFFSET == pytest.approx(273.15)

    def test_bar_conversion(self):
        assert BAR_TO_PA == pytest.approx(1e5)

    def test_temperature_difference_limit(self):
        assert MAX_TEMPERATURE_DIFFERENCE == 50.0


class TestUnits:
    def test_pressure_bar_to_pa(self):
        assert pressure_to_si(1.0, "bar") == pytest.approx(1e5, rel=1e-6)

    def test_pressure_pa_to_mpa(self):
        assert pressure_from_si(7.3773e6, "MPa") == pytest.approx(7.3773)

    def test_temperature_celsius_to_kelvin(self):
        assert temperature_to_si(5.0, "degC") == pytest.approx(278.15)

    def test_temperature_kelvin_to_celsius(self):
        assert temperature_from_si(318.15, "degC") == pytest.approx(45.0)

    def test_specific_energy(self):
        assert specific_energy_from_si(250e3, "kJ/kg") == pytest.approx(250.0)

    def test_specific_entropy(self):
        assert specific_entropy_from_si(1800.0, "kJ/(kg*K)") == pytest.approx(1.8)

    def test_percent_to_fraction(self):
        assert ratio_to_fraction(80.0) == pytest.approx(0.8)

    def test_package_exports(self):
        from vcrc import utils

        assert utils.pressure_to_si is pressure_to_si
        assert utils.temperature_to_si is temperature_to_si


class TestValidation:
    def test_empty_result_is_valid(self):
        result = ValidationResult()
        assert result.is_valid
        result.raise_if_invalid()

    def test_warnings_do_not_invalidate(self):
        result = ValidationResult()
        result.warning("superheat", "Large superheat")
        assert result.is_valid
        assert len(result.warnings) == 1

    def test_require(self):
        result = ValidationResult()
        result.require(True, "a", "never recorded")
        result.require(False, "b", "first")
        result.require(False, "c", "second")
        assert not result.is_valid
        assert [m.message for m in result.errors] == ["first", "second"]
        assert result.errors[0].severity is Severity.ERROR

    def test_raise_collects_all_messages(self):
        result = ValidationResult()
        result.error("a", "first")
        result.error("b", "second")
        with pytest.raises(ConstructionValidationError) as exc_info:
            result.raise_if_invalid()
        assert exc_info.value.messages == ["first", "second"]
        assert str(exc_info.value) == "first\nsecond"

    def test_merge(self):
        first = ValidationResult()
        first.error("a", "first")
        second = ValidationResult()
        second.warning("b", "second")
        first.merge(second)
        assert len(first.messages) == 2

    def test_open_range_excludes_bounds(self):
        result = ValidationResult()
        validate_open_range("x", 0.0, 0.0, 1.0, result, "out of range")
        validate_open_range("x", 0.5, 0.0, 1.0, result, "out of range")
        assert len(result.errors) == 1
        assert result.errors[0].limit == (0.0, 1.0)

    def test_closed_range_includes_bounds(self):
        result = ValidationResult()
        validate_closed_range("x", 0.0, 0.0, 50.0, result, "out of range")
        validate_closed_range("x", 50.0, 0.0, 50.0, result, "out of range")
        validate_closed_range("x", 51.0, 0.0, 50.0, result, "out of range")
        assert len(result.errors) == 1
        assert result.errors[0].value == 51.0

    def test_check(self):
        check("x", True, "fine")
        with pytest.raises(ConstructionValidationError, match="broken"):
            check("x", False, "broken")
