"""Tests for the beamver command line."""

import json
from unittest.mock import AsyncMock, patch

import pytest

import beamver
from args import parse_args
from constants import Constants, ExitCodes, Tools
from versioning.errors import InputError, SpecNotFound, UnsupportedPlatform
from versioning.models import ResolvedVersion

RESULTS = {
    Tools.OTP: ResolvedVersion(Tools.OTP, "25.0.4", "OTP-25.0.4"),
    Tools.ELIXIR: ResolvedVersion(Tools.ELIXIR, "v1.14.5", "v1.14.5-otp-25"),
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GITHUB_TOKEN", "ImageOS", "BEAMVER_CONFIG", "GITHUB_WORKSPACE"):
        monkeypatch.delenv(name, raising=False)


class TestBuildRequest:
    """Parsed arguments into a ToolchainRequest."""

    def test_defaults(self):
        args = parse_args(["--otp-version", "25", "--image-os", "ubuntu22", "--platform", "linux"])
        request = beamver.build_request(args)

        assert request.otp_spec == "25"
        assert request.strict is False
        assert request.os_version == "ubuntu-22.04"
        assert list(request.mirrors) == Constants.HEXPM_MIRRORS
        assert request.token is None
        assert request.sources["otp"] == "input"

    def test_explicit_mirrors_token_and_os(self):
        args = parse_args([
            "--otp-version", "25", "--os-version", "ubuntu-20.04", "--platform", "linux",
            "--hexpm-mirror", "https://a.example", "--hexpm-mirror", "https://b.example",
            "--github-token", "t0k",
        ])
        request = beamver.build_request(args)

        assert request.mirrors == ["https://a.example", "https://b.example"]
        assert request.token == "t0k"
        assert request.os_version == "ubuntu-20.04"

    def test_token_from_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        args = parse_args(["--otp-version", "25", "--image-os", "ubuntu22", "--platform", "linux"])
        assert beamver.build_request(args).token == "env-token"

    def test_unknown_image_os(self):
        args = parse_args(["--otp-version", "25", "--image-os", "plan9", "--platform", "linux"])
        with pytest.raises(UnsupportedPlatform):
            beamver.build_request(args)

    def test_otp_disabled_needs_no_image(self):
        args = parse_args(["--otp-version", "false", "--gleam-version", "0.30", "--platform", "darwin"])
        request = beamver.build_request(args)
        assert request.os_version is None

    def test_version_file_requires_strict(self, tmp_path):
        (tmp_path / ".tool-versions").write_text("erlang 25.0.4\n", encoding="utf-8")
        args = parse_args(["--version-file", str(tmp_path / ".tool-versions"), "--platform", "linux"])
        with pytest.raises(InputError):
            beamver.build_request(args)

    def test_version_file(self, tmp_path, monkeypatch):
        (tmp_path / ".tool-versions").write_text("erlang 25.0.4\nelixir 1.14.5\n", encoding="utf-8")
        monkeypatch.setenv("GITHUB_WORKSPACE", str(tmp_path))
        args = parse_args([
            "--version-file", ".tool-versions", "--version-type", "strict",
            "--image-os", "ubuntu22", "--platform", "linux",
        ])
        request = beamver.build_request(args)

        assert request.strict is True
        assert (request.otp_spec, request.elixir_spec) == ("25.0.4", "1.14.5")
        assert request.sources["otp"] == "version-file"

    def test_version_file_conflict(self, tmp_path, monkeypatch):
        (tmp_path / ".tool-versions").write_text("erlang 25.0.4\n", encoding="utf-8")
        monkeypatch.setenv("GITHUB_WORKSPACE", str(tmp_path))
        args = parse_args([
            "--version-file", ".tool-versions", "--version-type", "strict",
            "--otp-version", "26", "--image-os", "ubuntu22", "--platform", "linux",
        ])
        with pytest.raises(InputError):
            beamver.build_request(args)


class TestMain:
    """Exit codes and output rendering."""

    ARGV = ["--otp-version", "25", "--elixir-version", "1.14", "--image-os", "ubuntu22", "--platform", "linux"]

    @patch("beamver.resolve_toolchain", new_callable=AsyncMock, return_value=RESULTS)
    def test_text_output(self, _resolve, capsys):
        assert beamver.main(self.ARGV) == ExitCodes.SUCCESS.value
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "otp-version=25.0.4 (OTP-25.0.4)",
            "elixir-version=v1.14.5 (v1.14.5-otp-25)",
        ]

    @patch("beamver.resolve_toolchain", new_callable=AsyncMock, return_value=RESULTS)
    def test_json_output(self, _resolve, capsys):
        assert beamver.main(self.ARGV + ["--format", "json"]) == ExitCodes.SUCCESS.value
        payload = json.loads(capsys.readouterr().out)
        assert payload["elixir"] == {"version": "v1.14.5", "reference": "v1.14.5-otp-25"}

    @patch("beamver.resolve_toolchain", new_callable=AsyncMock,
           side_effect=SpecNotFound("Requested Erlang/OTP version (27) not found in version list"))
    def test_resolution_error_exit_code(self, _resolve, caplog):
        assert beamver.main(self.ARGV) == ExitCodes.RESOLUTION_ERROR.value
        assert "Requested Erlang/OTP version (27)" in caplog.text

    def test_input_error_exit_code(self):
        assert beamver.main(["--otp-version", "false", "--platform", "linux"]) == ExitCodes.INPUT_ERROR.value

    def test_missing_config_file(self, tmp_path):
        argv = self.ARGV + ["--config", str(tmp_path / "missing.yml")]
        assert beamver.main(argv) == ExitCodes.INPUT_ERROR.value

    @patch("registry.fetch.robust_get", return_value=(403, {}, "rate limited"))
    def test_release_page_failure_exit_code(self, _get, caplog):
        argv = ["--otp-version", "false", "--gleam-version", "1.0", "--platform", "linux"]
        assert beamver.main(argv) == ExitCodes.CONNECTION_ERROR.value
        assert "Got 403 from" in caplog.text
