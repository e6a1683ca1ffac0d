"""Tests for analyze command."""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path
from typing import Optional

from examine.cli.commands.analyze import AnalyzeCommand
from examine.cli.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_DETECTION_FAILED,
    EXIT_SUCCESS,
)


def _args(path: str, fmt: Optional[str] = None, config: Optional[Path] = None) -> Namespace:
    return Namespace(path=path, format=fmt, config=config)


class TestAnalyzeCommand:
    """Tests for AnalyzeCommand."""

    def test_command_name(self) -> None:
        assert AnalyzeCommand().name == "analyze"

    def test_text_output(self, make_project, capsys) -> None:
        root = make_project({"Cargo.toml": '[package]\nname = "cli"\n\n[dependencies]\nclap = "4.4"\n'})

        result = AnalyzeCommand().execute(_args(str(root)))

        out = capsys.readouterr().out
        assert result == EXIT_SUCCESS
        assert f"📁 Project: {root}" in out
        assert "🚀 Framework: Clap (CLI)" in out
        assert "✨ Summary: Rust + Clap (CLI) v4.4" in out

    def test_json_output(self, make_project, capsys) -> None:
        root = make_project({"requirements.txt": "fastapi==0.110.0\n", ".python-version": "3.12\n"})

        result = AnalyzeCommand().execute(_args(str(root), fmt="json"))

        data = json.loads(capsys.readouterr().out)
        assert result == EXIT_SUCCESS
        assert data["language"] == "Python"
        assert data["language_status"]["status"] == "supported"
        assert data["framework"] == "FastAPI"
        assert data["framework_version"] == "0.110.0"

    def test_format_from_project_config(self, make_project, capsys) -> None:
        root = make_project(
            {"go.mod": "module m\n\ngo 1.21\n", ".examine.yml": "output:\n  format: summary\n"}
        )

        result = AnalyzeCommand().execute(_args(str(root)))

        assert result == EXIT_SUCCESS
        assert capsys.readouterr().out == "Go + v1.21\n"

    def test_cli_format_beats_config(self, make_project, capsys) -> None:
        root = make_project(
            {"go.mod": "module m\n", ".examine.yml": "output:\n  format: summary\n"}
        )

        AnalyzeCommand().execute(_args(str(root), fmt="json"))

        assert json.loads(capsys.readouterr().out)["language"] == "Go"

    def test_custom_frameworks_from_config(self, make_project, capsys) -> None:
        root = make_project(
            {
                "requirements.txt": "flask\n",
                ".examine.yml": (
                    "frameworks:\n"
                    "  Flask:\n"
                    "    type: Micro Framework\n"
                    "    popular: true\n"
                ),
            }
        )

        AnalyzeCommand().execute(_args(str(root), fmt="json"))

        details = json.loads(capsys.readouterr().out)["framework_details"]
        assert details["framework_type"] == "Micro Framework"
        assert details["alternatives"] == []

    def test_missing_path(self, tmp_path: Path, capsys) -> None:
        missing = tmp_path / "nope"

        result = AnalyzeCommand().execute(_args(str(missing)))

        captured = capsys.readouterr()
        assert result == EXIT_DETECTION_FAILED
        assert captured.err.strip() == f"Error: Path does not exist: {missing}"
        assert captured.out == ""

    def test_missing_path_ignores_broken_config_beside_it(self, tmp_path: Path, capsys) -> None:
        (tmp_path / ".examine.yml").write_text("output: [unclosed\n")
        missing = tmp_path / "nope"

        result = AnalyzeCommand().execute(_args(str(missing)))

        captured = capsys.readouterr()
        assert result == EXIT_DETECTION_FAILED
        assert captured.err.strip() == f"Error: Path does not exist: {missing}"

    def test_undetected_language(self, tmp_path: Path, capsys) -> None:
        result = AnalyzeCommand().execute(_args(str(tmp_path)))

        assert result == EXIT_DETECTION_FAILED
        assert "Error: Could not detect project language" in capsys.readouterr().err

    def test_missing_config_file(self, make_project, tmp_path: Path, capsys) -> None:
        root = make_project({"go.mod": "module m\n"})

        result = AnalyzeCommand().execute(_args(str(root), config=tmp_path / "absent.yml"))

        assert result == EXIT_CONFIG_ERROR
        assert "Config file not found" in capsys.readouterr().err

    def test_invalid_project_config(self, make_project, capsys) -> None:
        root = make_project({"go.mod": "module m\n", ".examine.yml": "output: [oops\n"})

        result = AnalyzeCommand().execute(_args(str(root)))

        assert result == EXIT_CONFIG_ERROR
        assert "Invalid YAML" in capsys.readouterr().err

    def test_defaults_to_current_directory(self, make_project, monkeypatch, capsys) -> None:
        root = make_project({"main.rs": "fn main() {}\n"}, name="here")
        monkeypatch.chdir(root)

        result = AnalyzeCommand().execute(Namespace())

        out = capsys.readouterr().out
        assert result == EXIT_SUCCESS
        assert "📁 Project: ." in out
        assert "📦 Name: here" in out
