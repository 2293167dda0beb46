"""Unit tests for the easekit CLI."""

from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from easekit.cli.main import build_arg_parser, build_spec, main
from easekit.core.easing.modes import EasingPhase, InterpolationMode
from easekit.core.easing.registry import set_default_mode


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_root_logging: None):
    """Run each CLI test away from any easekit.yaml in the working directory."""
    monkeypatch.chdir(tmp_path)


class TestBuildSpec:
    def test_explicit_mode_and_phase(self) -> None:
        args = build_arg_parser().parse_args(
            ["sample", "--mode", "exponential", "--phase", "out", "--power", "2"]
        )
        spec = build_spec(args)
        assert spec.mode is InterpolationMode.EXPONENTIAL
        assert spec.phase is EasingPhase.OUT
        assert spec.power == 2

    def test_linear_mode(self) -> None:
        spec = build_spec(build_arg_parser().parse_args(["sample", "--mode", "linear"]))
        assert spec.mode is None
        assert spec.name == "linear"

    def test_missing_mode_uses_default(self) -> None:
        set_default_mode(InterpolationMode.CIRCULAR)
        spec = build_spec(build_arg_parser().parse_args(["sample"]))
        assert spec.mode is InterpolationMode.CIRCULAR
        assert spec.phase is EasingPhase.IN_OUT

    def test_rejects_unknown_mode(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args(["sample", "--mode", "bouncy"])


class TestMain:
    def test_modes_lists_families(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["modes"]) == 0
        out = capsys.readouterr().out
        for name in ("sinusoidal", "quadratic", "exponential", "circular", "linear"):
            assert name in out

    def test_sample_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(
            ["sample", "--mode", "quadratic", "--phase", "in", "--samples", "3", "--json"]
        )
        assert code == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["curve"] == "quadratic_in"
        assert [s["t"] for s in payload["samples"]] == [0.0, 0.5, 1.0]
        assert [s["value"] for s in payload["samples"]] == [0.0, 0.25, 1.0]

    def test_sample_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["sample", "--mode", "linear", "--end", "10", "--samples", "3"]) == 0
        out = capsys.readouterr().out
        assert "5.000000" in out
        assert "10.000000" in out

    def test_config_sets_default_mode(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config_path = tmp_path / "custom.yaml"
        config_path.write_text("easing:\n  mode: circular\nlogging:\n  level: WARNING\n")

        code = main(["--config", str(config_path), "sample", "--samples", "3", "--json"])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["curve"] == "circular_in_out"

    def test_missing_config_reports_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--config", "missing.yaml", "modes"]) == 1
        assert "ERROR" in capsys.readouterr().out

    def test_invalid_config_reports_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config_path = tmp_path / "bad.json"
        config_path.write_text(json.dumps({"easing": {"mode": "bouncy"}}))
        assert main(["--config", str(config_path), "modes"]) == 1
        assert "Invalid configuration" in capsys.readouterr().out

    def test_too_few_samples_reports_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["sample", "--samples", "1"]) == 1
        assert "n_samples must be >= 2" in capsys.readouterr().out

    def test_sample_degenerate_power(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A power that overflows the exponential prints inf instead of crashing."""
        code = main(
            [
                "sample",
                "--mode",
                "exponential",
                "--phase",
                "in",
                "--power",
                "-300",
                "--samples",
                "3",
                "--json",
            ]
        )
        assert code == 0

        values = [s["value"] for s in json.loads(capsys.readouterr().out)["samples"]]
        assert values == [0.0, math.inf, 1.0]
