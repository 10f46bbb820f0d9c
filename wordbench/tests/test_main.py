"""
Copyright (c) 2025. All rights reserved.
"""

"""
Tests for configuration and the command line entry point.
"""

import os
import sys
from unittest.mock import patch

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

import pytest

from wordbench.configs import CALGARY_FILES, BenchmarkConfig
from wordbench.errors import ReportTimeoutError
from wordbench.main import build_config, main, parse_arguments


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WORDBENCH_WORKERS", "WORDBENCH_TOP_N", "WORDBENCH_REPORT_TIMEOUT", "WORDBENCH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestBenchmarkConfig:
    def test_defaults(self):
        config = BenchmarkConfig()
        assert config.files == CALGARY_FILES
        assert config.files is not CALGARY_FILES
        assert config.num_workers == 4
        assert config.top_n == 10
        assert config.mode == "both"
        assert config.validate() is config

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"num_workers": 0},
            {"top_n": -1},
            {"repeat": 0},
            {"report_timeout": 0},
            {"mode": "turbo"},
            {"start_method": "teleport"},
            {"log_level": "LOUD"},
        ],
    )
    def test_validate_rejects(self, kwargs):
        with pytest.raises(ValueError):
            BenchmarkConfig(**kwargs).validate()

    def test_from_env(self):
        config = BenchmarkConfig.from_env(
            {
                "WORDBENCH_WORKERS": "8",
                "WORDBENCH_TOP_N": "3",
                "WORDBENCH_REPORT_TIMEOUT": "12.5",
                "WORDBENCH_LOG_LEVEL": "debug",
            }
        )
        assert config.num_workers == 8
        assert config.top_n == 3
        assert config.report_timeout == 12.5
        assert config.log_level == "DEBUG"

    def test_from_env_defaults(self):
        assert BenchmarkConfig.from_env({}) == BenchmarkConfig()


class TestArguments:
    def test_defaults(self):
        args = parse_arguments([])
        assert args.files == []
        assert args.workers is None
        assert args.mode == "both"

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("WORDBENCH_WORKERS", "8")
        monkeypatch.setenv("WORDBENCH_TOP_N", "5")
        config = build_config(parse_arguments(["a.txt", "--workers", "2", "--log-level", "debug"]))
        assert config.files == ["a.txt"]
        assert config.num_workers == 2
        assert config.top_n == 5
        assert config.log_level == "DEBUG"

    def test_invalid_mode_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(["--mode", "turbo"])
        assert exc_info.value.code == 2


class TestMain:
    def test_success(self, tmp_path, capsys):
        path = tmp_path / "words.txt"
        path.write_text("one two two three three three", encoding="utf-8")
        assert main([str(path), "--mode", "compare", "--workers", "2"]) == 0
        assert f"Results match for file: {path}" in capsys.readouterr().out

    def test_invalid_workers(self, capsys):
        assert main(["--workers", "0"]) == 2
        assert "num_workers" in capsys.readouterr().err

    def test_fatal_error_exit_code(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("hello", encoding="utf-8")
        with patch("wordbench.main.run_benchmark", side_effect=ReportTimeoutError(1.0, [str(path)])):
            assert main([str(path)]) == 1
