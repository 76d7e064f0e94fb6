"""Tests for YAML configuration overrides."""

import pytest

from cli_config import apply_config, load_config
from constants import Constants
from versioning.errors import InputError


@pytest.fixture(autouse=True)
def restore_constants(monkeypatch):
    monkeypatch.delenv("BEAMVER_CONFIG", raising=False)
    for attr in ("HEXPM_MIRRORS", "REQUEST_TIMEOUT", "HTTP_RETRY_MAX",
                 "HTTP_RETRY_BASE_DELAY_SEC", "RELEASE_PAGES"):
        monkeypatch.setattr(Constants, attr, getattr(Constants, attr))


def test_no_config():
    assert load_config() == {}


def test_config_applied(tmp_path):
    path = tmp_path / "beamver.yml"
    path.write_text(
        "hexpm_mirrors:\n  - https://cdn.jsdelivr.net/hex\n  - https://builds.hex.pm\n"
        "request_timeout: 5\n"
        "release_pages: [1, 2]\n",
        encoding="utf-8",
    )
    apply_config(load_config(str(path)))

    assert Constants.HEXPM_MIRRORS == ["https://cdn.jsdelivr.net/hex", "https://builds.hex.pm"]
    assert Constants.REQUEST_TIMEOUT == 5
    assert Constants.RELEASE_PAGES == [1, 2]


def test_config_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "beamver.yml"
    path.write_text("http_retry_max: 1\n", encoding="utf-8")
    monkeypatch.setenv("BEAMVER_CONFIG", str(path))
    assert load_config() == {"http_retry_max": 1}


def test_empty_file(tmp_path):
    path = tmp_path / "beamver.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == {}


def test_missing_file(tmp_path):
    with pytest.raises(InputError):
        load_config(str(tmp_path / "nope.yml"))


def test_not_a_mapping(tmp_path):
    path = tmp_path / "beamver.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(InputError):
        load_config(str(path))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "beamver.yml"
    path.write_text("request_timeout: [unclosed\n", encoding="utf-8")
    with pytest.raises(InputError):
        load_config(str(path))


def test_bad_value():
    with pytest.raises(InputError):
        apply_config({"request_timeout": "soon"})


def test_unknown_key_ignored(caplog):
    apply_config({"colour": "blue"})
    assert "Ignoring unknown config key: colour" in caplog.text
