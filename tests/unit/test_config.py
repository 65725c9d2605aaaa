"""Test settings validation"""

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:
    """Test Settings defaults and validators"""

    def test_defaults(self):
        """Test defaults need no environment"""
        settings = Settings()

        assert settings.split_tolerance == 1e-6
        assert settings.api_prefix == "/api/v1"

    def test_log_level_normalized(self):
        """Test log level names are upper-cased"""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        """Test an unknown log level is rejected"""
        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            Settings(log_level="chatty")

    @pytest.mark.parametrize("tolerance", [0, -1e-6, 1])
    def test_tolerance_out_of_range(self, tolerance):
        """Test tolerance must be small and positive"""
        with pytest.raises(ValidationError, match="SPLIT_TOLERANCE"):
            Settings(split_tolerance=tolerance)

    def test_tolerance_from_environment(self, monkeypatch):
        """Test SPLIT_TOLERANCE is read from the environment"""
        monkeypatch.setenv("SPLIT_TOLERANCE", "0.01")

        assert Settings().split_tolerance == 0.01
