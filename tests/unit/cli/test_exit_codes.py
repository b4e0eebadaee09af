"""Tests for cli/exit_codes.py module."""

from apimeta.cli.exit_codes import ExitCode


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_success_is_zero(self) -> None:
        """SUCCESS should be 0."""
        assert ExitCode.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        """GENERAL_ERROR should be 1."""
        assert ExitCode.GENERAL_ERROR == 1

    def test_exit_codes_are_unique(self) -> None:
        """All exit codes should have unique values."""
        values = [int(code) for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_ranges(self) -> None:
        """Exit codes should be within expected ranges."""
        # Validation errors (10-19)
        assert 10 <= ExitCode.PARAMETER_ERROR <= 19
        assert 10 <= ExitCode.CONFIG_ERROR <= 19
        assert 10 <= ExitCode.INVALID_RESOURCE <= 19

        # Lookup errors (20-29)
        assert 20 <= ExitCode.RESOURCE_NOT_FOUND <= 29
