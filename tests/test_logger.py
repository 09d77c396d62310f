"""Tests for the tanka logger configuration."""
import logging
import pytest
from unittest.mock import patch
from tanka.logger import configure_level, logger


class TestConfigureLevel:
    """Test configure_level."""

    @pytest.fixture(autouse=True)
    def restore_level(self, monkeypatch):
        yield
        monkeypatch.delenv("TANKA_LOG_LEVEL", raising=False)
        configure_level()

    def test_default_is_info(self):
        assert configure_level() == logging.INFO
        assert logger.level == logging.INFO

    def test_environment_sets_level(self, monkeypatch):
        monkeypatch.setenv("TANKA_LOG_LEVEL", "DEBUG")
        assert configure_level() == logging.DEBUG
        assert logger.level == logging.DEBUG

    def test_unusable_level_keeps_info_and_warns(self, monkeypatch):
        monkeypatch.setenv("TANKA_LOG_LEVEL", "loud")
        with patch.object(logger, "warning") as mock_warning:
            assert configure_level() == logging.INFO
            mock_warning.assert_called_once()
            assert "TANKA_LOG_LEVEL" in mock_warning.call_args[0][0]
        assert logger.level == logging.INFO
