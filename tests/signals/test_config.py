"""Tests for Settings."""

import pytest
from pydantic import ValidationError

from mixed_signals import Settings, get_settings
from mixed_signals.spec import SpecSerializer


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run every test without MIXED_SIGNALS_ variables or a local .env"""
    monkeypatch.chdir(tmp_path)
    for name in (
        "MIXED_SIGNALS_CONSTRAINED_SHUFFLE_BUDGET",
        "MIXED_SIGNALS_PLOT_WIDTH",
        "MIXED_SIGNALS_PLOT_HEIGHT",
        "MIXED_SIGNALS_LOG_LEVEL",
        "MIXED_SIGNALS_SERIALIZATION_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test Settings defaults and overrides."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = Settings()
        assert settings.constrained_shuffle_budget == 1000
        assert settings.plot_width == 72
        assert settings.plot_height == 12
        assert settings.log_level == "WARNING"
        assert settings.serialization_format == "json"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test prefixed environment variables override defaults."""
        monkeypatch.setenv("MIXED_SIGNALS_PLOT_WIDTH", "100")
        assert get_settings().plot_width == 100

    def test_env_file(self, tmp_path) -> None:
        """Test a .env file in the working directory is read."""
        (tmp_path / ".env").write_text("MIXED_SIGNALS_PLOT_HEIGHT=20\n")
        assert get_settings().plot_height == 20

    def test_fresh_instance_per_call(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test get_settings re-reads the environment."""
        assert get_settings().constrained_shuffle_budget == 1000
        monkeypatch.setenv("MIXED_SIGNALS_CONSTRAINED_SHUFFLE_BUDGET", "7")
        assert get_settings().constrained_shuffle_budget == 7

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values are validated."""
        monkeypatch.setenv("MIXED_SIGNALS_PLOT_WIDTH", "1")
        with pytest.raises(ValidationError):
            get_settings()

    def test_serializer_default_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test SpecSerializer picks its format from settings."""
        assert SpecSerializer().format == "json"
        monkeypatch.setenv("MIXED_SIGNALS_SERIALIZATION_FORMAT", "msgpack")
        assert SpecSerializer().format == "msgpack"
