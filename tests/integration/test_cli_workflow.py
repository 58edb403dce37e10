"""Integration tests for CLI workflows.

This module tests complete CLI workflows including multi-step processes,
reproducible ID generation, and configuration-driven behaviour.
"""

import json

import pytest
from click.testing import CliRunner

from sa_idnumber.cli.main import cli


class TestCLIWorkflows:
    """Integration tests for complete CLI workflows."""

    def test_build_then_validate_then_explain(self, cli_args):
        """Test complete workflow: build an ID number, validate it, explain it."""
        # Arrange
        runner = CliRunner()

        # Act - Step 1: Build
        build_result = runner.invoke(
            cli, cli_args + ["build", "9", "7", "1981", "--gender", "5005"]
        )
        id_string = build_result.output.strip()

        # Act - Step 2: Validate
        validate_result = runner.invoke(cli, cli_args + ["validate", id_string])

        # Act - Step 3: Explain
        explain_result = runner.invoke(cli, cli_args + ["explain", id_string])

        # Assert
        assert build_result.exit_code == 0
        assert id_string == "8107095005083"
        assert validate_result.exit_code == 0
        assert explain_result.output.strip() == (
            "Birthdate: 9 July '81 male citizen luhn checksum = 3"
        )

    def test_generated_ids_validate(self, cli_args):
        """Test every generated ID number passes validation."""
        # Arrange
        runner = CliRunner()

        # Act
        generate_result = runner.invoke(
            cli, cli_args + ["generate", "--count", "50", "--seed", "2024"]
        )
        id_strings = generate_result.output.split()
        validate_result = runner.invoke(cli, cli_args + ["validate", "--json"] + id_strings)

        # Assert
        assert generate_result.exit_code == 0
        assert len(id_strings) == 50
        assert validate_result.exit_code == 0
        assert all(entry["valid"] for entry in json.loads(validate_result.stdout))

    def test_configured_generator_span(self, tmp_path, log_file):
        """Test the generator date span is read from the config file."""
        # Arrange
        runner = CliRunner()
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "generator": {"start_date": "1985-03-01", "end_date": "1985-03-01", "seed": 3}
        }))
        args = ["--config", str(config_file), "--log-file", str(log_file)]

        # Act
        result = runner.invoke(cli, args + ["generate", "--count", "10"])

        # Assert
        assert result.exit_code == 0
        assert all(line.startswith("850301") for line in result.output.split())

    def test_tampered_id_reports_checksum(self, cli_args):
        """Test a single changed digit is reported as a checksum mismatch."""
        # Arrange
        runner = CliRunner()
        tampered = "8107095005183"

        # Act
        result = runner.invoke(cli, cli_args + ["validate", "--json", tampered])

        # Assert
        assert result.exit_code == 1
        entry = json.loads(result.stdout)[0]
        assert entry["error_type"] == "ChecksumMismatchError"
        assert "expected 2" in entry["error"]

    @pytest.mark.parametrize(
        "id_string, error_type",
        [
            ("81070950050", "LengthError"),
            ("8113095005083", "DateError"),
            ("81070950A5083", "NumericFieldError"),
        ],
    )
    def test_parse_failures_are_typed(self, cli_args, id_string, error_type):
        """Test each parse failure kind is distinguishable in JSON output."""
        # Arrange
        runner = CliRunner()

        # Act
        result = runner.invoke(cli, cli_args + ["validate", "--json", id_string])

        # Assert
        assert json.loads(result.stdout)[0]["error_type"] == error_type
