"""
Tests for configuration loading.
"""

import os
import sys
from unittest.mock import mock_open, patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cpe_candidates.config import get_log_level, get_max_results, load_config


class TestConfig:
    """Test configuration functionality."""

    @patch("cpe_candidates.config.Path.exists", return_value=False)
    def test_defaults(self, mock_exists):
        """Test defaults when there is no config file or environment."""
        with patch.dict(os.environ, {}, clear=True):
            config = load_config()

        assert config["log_level"] == "WARNING"
        assert config["max_results"] == 0

    @patch("cpe_candidates.config.Path.exists", return_value=True)
    def test_config_loading(self, mock_exists):
        """Test loading configuration from config.json."""
        with patch("cpe_candidates.config.open", mock_open(read_data='{"log_level": "info", "max_results": 5}')):
            with patch.dict(os.environ, {}, clear=True):
                config = load_config()

        assert config["log_level"] == "info"
        assert config["max_results"] == 5

    @patch("cpe_candidates.config.Path.exists", return_value=True)
    def test_invalid_config_file(self, mock_exists):
        """Test that a broken config.json falls back to defaults."""
        with patch("cpe_candidates.config.open", mock_open(read_data="not json")):
            with patch.dict(os.environ, {}, clear=True):
                config = load_config()

        assert config["log_level"] == "WARNING"

    @patch("cpe_candidates.config.Path.exists", return_value=False)
    def test_env_override(self, mock_exists):
        """Test that environment variables override config file."""
        env = {"CPE_CANDIDATES_LOG_LEVEL": "debug", "CPE_CANDIDATES_MAX_RESULTS": "7"}
        with patch.dict(os.environ, env, clear=True):
            assert get_log_level() == "DEBUG"
            assert get_max_results() == 7

    @patch("cpe_candidates.config.load_config")
    def test_invalid_values_fall_back(self, mock_load_config):
        mock_load_config.return_value = {"log_level": "loud", "max_results": "lots"}

        assert get_log_level() == "WARNING"
        assert get_max_results() == 0

    @patch("cpe_candidates.config.load_config")
    def test_negative_max_results(self, mock_load_config):
        mock_load_config.return_value = {"log_level": "", "max_results": -3}

        assert get_log_level() == "WARNING"
        assert get_max_results() == 0
