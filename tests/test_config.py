"""
Tests for the configuration module
"""
import config


def test_settings_are_grouped_in_dicts():
    settings = {name for name in vars(config) if name.isupper()}
    assert settings == {
        "BASE_DIR", "APP_CONFIG", "ASSET_CONFIG", "REPORT_CONFIG", "DB_CONFIG", "LOG_CONFIG",
    }


def test_render_timeout_is_seconds():
    assert isinstance(config.REPORT_CONFIG["render_timeout"], float)
    assert config.REPORT_CONFIG["render_timeout"] >= 0
