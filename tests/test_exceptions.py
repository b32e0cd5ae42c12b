"""Tests for custom exceptions."""

from aidump.exceptions import ConfigError, OutputSinkError, RootDirectoryError


class TestConfigError:
    def test_attributes(self):
        error = ConfigError("/p/ai.json", "bad syntax")
        assert error.path == "/p/ai.json"
        assert error.reason == "bad syntax"
        assert str(error) == "Invalid configuration file /p/ai.json: bad syntax"

    def test_is_exception(self):
        assert isinstance(ConfigError("a", "b"), Exception)


def test_root_directory_error():
    error = RootDirectoryError("/missing")
    assert error.path == "/missing"
    assert str(error) == "Invalid directory: /missing"


def test_output_sink_error():
    error = OutputSinkError("/ro/out.txt")
    assert error.path == "/ro/out.txt"
    assert str(error) == "Could not open file for writing: /ro/out.txt"
