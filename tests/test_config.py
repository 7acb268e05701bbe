import os
from unittest import mock

from node_diag import config
from node_diag.models.settings import Settings


def test_settings_defaults():
    with mock.patch.dict(os.environ, {}, clear=True):
        settings = config._read_settings()
        assert settings.OS_RELEASE_PATH == "/etc/os-release"
        assert settings.LOOKBACK == ""
        assert settings.DELAY == ""


def test_settings_custom():
    env = {
        "OS_RELEASE_PATH": "/host/etc/os-release",
        "LOG_LOOKBACK": " 10m ",
        "LOG_DELAY": "30s",
    }
    with mock.patch.dict(os.environ, env, clear=True):
        settings = config._read_settings()
        assert settings.OS_RELEASE_PATH == "/host/etc/os-release"
        assert settings.LOOKBACK == "10m"
        assert settings.DELAY == "30s"


def test_validate_settings_reports_problems(tmp_path, caplog):
    current = Settings(
        OS_RELEASE_PATH=str(tmp_path / "missing"),
        LOOKBACK="ten minutes",
        DELAY="5s",
    )
    with caplog.at_level("WARNING"):
        problems = config.validate_settings(current)
    assert len(problems) == 2
    assert "LOG_LOOKBACK" in problems[0]
    assert "does not exist" in problems[1]
    assert "LOG_LOOKBACK" in caplog.text


def test_validate_settings_ok(tmp_path):
    release = tmp_path / "os-release"
    release.write_text("ID=debian\n")
    current = Settings(OS_RELEASE_PATH=str(release), LOOKBACK="", DELAY="1m")
    assert config.validate_settings(current) == []
