"""
Unit tests for configuration module.
"""
import os
from unittest.mock import patch

import pytest

from revealsync.core import (
    Configuration,
    Settings,
    get_document_options,
    get_settings,
    load_configuration,
    merge_configuration,
)


class TestSettings:
    """Tests for Settings class."""
    
    def test_default_values(self, clean_environment):
        """Test that default values are set correctly."""
        settings = Settings()
        
        assert settings.app_name == "revealsync"
        assert settings.host == "127.0.0.1"
        assert settings.port == 0
        assert settings.quiet_period_ms == 800
        assert settings.quiet_period == pytest.approx(0.8)
        assert settings.export_timeout_seconds is None
    
    def test_port_validation(self):
        """Test that port validation works."""
        with pytest.raises(ValueError):
            Settings(port=-1)
        
        with pytest.raises(ValueError):
            Settings(port=70000)
        
        settings = Settings(port=8080)
        assert settings.port == 8080
    
    def test_quiet_period_must_be_positive(self):
        with pytest.raises(ValueError):
            Settings(quiet_period_ms=0)
    
    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValueError):
            Settings(log_level="chatty")
    
    @patch.dict(os.environ, {
        "REVEALSYNC_QUIET_PERIOD_MS": "250",
        "REVEALSYNC_EXPORT_TIMEOUT_SECONDS": "30",
    })
    def test_environment_overrides(self):
        """Test values read from the environment."""
        settings = Settings()
        
        assert settings.quiet_period == pytest.approx(0.25)
        assert settings.export_timeout_seconds == 30


class TestGetSettings:
    """Tests for get_settings function."""
    
    def test_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)
    
    def test_cached_instance(self):
        """Test that get_settings returns the same cached instance."""
        assert get_settings() is get_settings()


class TestConfiguration:
    """Tests for the presentation configuration."""
    
    def test_defaults(self, clean_environment):
        configuration = Configuration()
        
        assert configuration.theme == "black"
        assert configuration.export_html_path is None
    
    @patch.dict(os.environ, {"REVEALJS_THEME": "white"})
    def test_load_configuration_reads_environment(self):
        """A fresh load picks up the current environment."""
        assert load_configuration().theme == "white"
    
    def test_merge_overrides_win(self):
        base = Configuration(theme="black", transition="fade")
        
        merged = merge_configuration(base, {"theme": "league"})
        
        assert merged.theme == "league"
        assert merged.transition == "fade"
        assert base.theme == "black"
    
    def test_merge_accepts_camel_case_keys(self):
        merged = merge_configuration(Configuration(), {"exportHtmlPath": "out", "slideNumber": True})
        
        assert merged.export_html_path == "out"
        assert merged.slide_number is True
    
    def test_merge_ignores_unknown_keys(self):
        merged = merge_configuration(Configuration(theme="sky"), {"author": "someone"})
        
        assert merged.theme == "sky"
    
    def test_document_options_snapshot(self):
        options = get_document_options(Configuration(separator="^===$"))
        
        assert options["separator"] == "^===$"
        assert "vertical_separator" in options
    
    def test_reveal_options(self):
        options = Configuration(slide_number=True, transition="zoom").reveal_options()
        
        assert options["slideNumber"] is True
        assert options["transition"] == "zoom"
        assert options["hash"] is True
