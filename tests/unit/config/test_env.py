"""Tests for EnvReader class."""

from __future__ import annotations

from pathlib import Path

from apimeta.config.env import EnvReader


class TestEnvReaderGetStr:
    """Tests for EnvReader.get_str method."""

    def test_returns_value_when_set(self) -> None:
        """Should return the value when environment variable is set."""
        reader = EnvReader(env={"MY_VAR": "hello"})
        assert reader.get_str("MY_VAR") == "hello"

    def test_returns_default_when_not_set(self) -> None:
        """Should return default when environment variable is not set."""
        reader = EnvReader(env={})
        assert reader.get_str("MY_VAR", "default") == "default"

    def test_returns_empty_string_when_set_to_empty(self) -> None:
        """Should return empty string when variable is set to empty."""
        reader = EnvReader(env={"MY_VAR": ""})
        assert reader.get_str("MY_VAR", "default") == ""


class TestEnvReaderGetBool:
    """Tests for EnvReader.get_bool method."""

    def test_true_values(self) -> None:
        """Should recognize the documented true values."""
        for value in ("true", "1", "YES", "On"):
            assert EnvReader(env={"V": value}).get_bool("V") is True

    def test_other_values_are_false(self) -> None:
        """Should treat anything else as false."""
        assert EnvReader(env={"V": "nope"}).get_bool("V") is False

    def test_default_when_not_set(self) -> None:
        """Should return default when not set."""
        assert EnvReader(env={}).get_bool("V", True) is True


class TestEnvReaderGetPath:
    """Tests for EnvReader.get_path method."""

    def test_expands_tilde(self) -> None:
        """Should expand ~ in paths."""
        result = EnvReader(env={"P": "~/x.log"}).get_path("P")
        assert result == Path("~/x.log").expanduser()

    def test_empty_value_uses_default(self) -> None:
        """Should treat an empty value as unset."""
        assert EnvReader(env={"P": ""}).get_path("P", Path("d")) == Path("d")


class TestEnvReaderGetPathList:
    """Tests for EnvReader.get_path_list method."""

    def test_splits_on_separator(self) -> None:
        """Should split on colons and drop empty parts."""
        reader = EnvReader(env={"PATHS": "/a.yaml:: /b.xml :"})
        assert reader.get_path_list("PATHS") == [Path("/a.yaml"), Path("/b.xml")]

    def test_custom_separator(self) -> None:
        """Should honor a custom separator."""
        reader = EnvReader(env={"PATHS": "/a;/b"})
        assert reader.get_path_list("PATHS", separator=";") == [Path("/a"), Path("/b")]

    def test_returns_empty_list_when_not_set(self) -> None:
        """Should return an empty list when not set."""
        assert EnvReader(env={}).get_path_list("PATHS") == []
