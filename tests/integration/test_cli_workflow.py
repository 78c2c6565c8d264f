"""Integration tests for end-to-end CLI workflows.

Tests the full pipeline: options → cycle solution → entropy analysis → tables.
"""

import json

import pytest
from click.testing import CliRunner

from vcrc import __version__
from vcrc.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCycleAnalyze:
    """Test the ``cycle analyze`` command."""

    def test_simple_cycle(self, runner):
        result = runner.invoke(cli, ["cycle", "analyze"])
        assert result.exit_code == 0, result.output
        assert "State Points" in result.output
        assert "EER" in result.output
        assert "Thermodynamic Perfection" in result.output

    def test_two_stage_shows_intermediate_pressure(self, runner):
        result = runner.invoke(cli, ["cycle", "analyze", "--topology", "economizer"])
        assert result.exit_code == 0, result.output
        assert "Intermediate Pressure" in result.output

    def test_transcritical(self, runner):
        result = runner.invoke(
            cli,
            ["cycle", "analyze", "--refrigerant", "R744", "--gas-cooler", "--tgc", "40"],
        )
        assert result.exit_code == 0, result.output
        assert "SimpleVCRC" in result.output

    def test_ejector(self, runner):
        result = runner.invoke(
            cli, ["cycle", "analyze", "--topology", "ejector", "--ejector-eta", "90", "90", "80"]
        )
        assert result.exit_code == 0, result.output
        assert "VCRCWithEjector" in result.output

    def test_from_config_file(self, runner, tmp_path):
        path = tmp_path / "cycle.json"
        path.write_text(json.dumps({"topology": "cic", "refrigerant": "R32"}))
        result = runner.invoke(cli, ["cycle", "analyze", "--config", str(path)])
        assert result.exit_code == 0, result.output
        assert "VCRCWithCIC" in result.output

    def test_invalid_efficiency(self, runner):
        result = runner.invoke(cli, ["cycle", "analyze", "--eta-c", "120"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_infeasible_source_temperature(self, runner):
        result = runner.invoke(cli, ["cycle", "analyze", "--outdoor", "50"])
        assert result.exit_code == 1
        assert "Wrong temperature difference" in result.output

    def test_unknown_topology(self, runner):
        result = runner.invoke(cli, ["cycle", "analyze", "--topology", "triple"])
        assert result.exit_code != 0


class TestCycleSweep:
    """Test the ``cycle sweep`` command."""

    def test_sweep(self, runner):
        result = runner.invoke(
            cli, ["cycle", "sweep", "--outdoor-min", "30", "--outdoor-max", "40", "--steps", "3"]
        )
        assert result.exit_code == 0, result.output
        assert "Per-Point Results" in result.output
        assert "Averaged Entropy Analysis" in result.output

    def test_default_range(self, runner):
        result = runner.invoke(cli, ["cycle", "sweep"])
        assert result.exit_code == 0, result.output
        assert "40.00" in result.output

    def test_zero_steps(self, runner):
        result = runner.invoke(cli, ["cycle", "sweep", "--steps", "0"])
        assert result.exit_code == 1


class TestInfo:
    """Test the ``info`` commands."""

    def test_refrigerant(self, runner):
        result = runner.invoke(cli, ["info", "refrigerant", "R32"])
        assert result.exit_code == 0, result.output
        assert "Critical Point" in result.output
        assert "single component" in result.output

    def test_not_a_refrigerant(self, runner):
        result = runner.invoke(cli, ["info", "refrigerant", "Water"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_topologies(self, runner):
        result = runner.invoke(cli, ["info", "topologies"])
        assert result.exit_code == 0, result.output
        assert "zubadan" in result.output
        assert "ejector-recuperator" in result.output


class TestGlobalOptions:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose(self, runner):
        result = runner.invoke(cli, ["-v", "info", "topologies"])
        assert result.exit_code == 0, result.output
