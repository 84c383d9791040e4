import pytest
from typer.testing import CliRunner

from fieldguard.cli import app

runner = CliRunner()


class TestCLIBasicFunctionality:
    def test_help_command_works(self):
        """Test that --help lists the available checks."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "append-check" in result.stdout
        assert "subdomain" in result.stdout


class TestNameCommands:
    def test_valid_name(self):
        result = runner.invoke(app, ["name", "my-shoot"])
        assert result.exit_code == 0
        assert "valid" in result.stdout

    def test_prefix_name(self):
        assert runner.invoke(app, ["name", "web-", "--prefix"]).exit_code == 0
        assert runner.invoke(app, ["name", "web-"]).exit_code == 1

    def test_invalid_label_reports_field_path(self):
        result = runner.invoke(app, ["label", "Bad_Name", "--path", "spec.provider.type"])

        assert result.exit_code == 1
        assert 'spec.provider.type: Invalid value: "Bad_Name"' in result.stdout

    def test_subdomain_max_length_option(self):
        result = runner.invoke(app, ["subdomain", "abcdef", "--max-length", "3"])

        assert result.exit_code == 1
        assert "must be no more than 3 characters" in result.stdout

    def test_consecutive_hyphens(self):
        assert runner.invoke(app, ["hyphens", "foo--bar"]).exit_code == 1
        assert runner.invoke(app, ["hyphens", "foo-bar"]).exit_code == 0


class TestAppendCheckCommand:
    def test_trailing_append_allowed(self):
        result = runner.invoke(app, ["append-check", "--old", "a", "--old", "b",
                                     "--new", "a", "--new", "b", "--new", "c"])
        assert result.exit_code == 0
        assert "allowed" in result.stdout

    def test_reorder_enforced(self):
        result = runner.invoke(app, ["append-check", "--old", "a", "--old", "b",
                                     "--new", "b", "--new", "a"])
        assert result.exit_code == 1
        assert "enforce" in result.stdout


class TestPercentCommand:
    def test_percent_value(self):
        result = runner.invoke(app, ["percent", "42%"])
        assert result.exit_code == 0
        assert "value: 42" in result.stdout
        assert "percent: yes" in result.stdout

    def test_integer_value(self):
        result = runner.invoke(app, ["percent", "5"])
        assert "value: 5" in result.stdout
        assert "percent: no" in result.stdout

    @pytest.mark.parametrize("value", ["--5", "\u00b2"])
    def test_non_ascii_or_malformed_integers_resolve_to_zero(self, value):
        """Values that only look numeric are treated as strings, not crashes."""
        result = runner.invoke(app, ["percent", "--", value])

        assert result.exit_code == 0
        assert result.exception is None
        assert "value: 0" in result.stdout
        assert "percent: no" in result.stdout
