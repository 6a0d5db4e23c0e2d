"""Tests for the command line interface."""

import json

import pytest

from vscode_theme_generator.cli import main
from vscode_theme_generator.logger import disable_console


@pytest.fixture(autouse=True)
def _reset_console():
    yield
    disable_console()


class TestMain:
    def test_writes_theme(self, dark_theme_path, tmp_path, capsys):
        out = tmp_path / "out" / "harbor.json"
        assert main(["--in", str(dark_theme_path), "--out", str(out)]) == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["name"] == "Midnight Harbor"
        assert data["type"] == "dark"
        captured = capsys.readouterr().out
        assert "Exported:" in captured
        assert str(out) in captured

    def test_default_output_path(self, light_theme_path, tmp_path):
        source = tmp_path / "paper_light.txt"
        source.write_text(light_theme_path.read_text(encoding="utf-8"), encoding="utf-8")
        assert main(["--in", str(source)]) == 0
        assert (tmp_path / "paper_light.json").exists()

    def test_name_and_levels(self, dark_theme_path, tmp_path):
        out = tmp_path / "theme.json"
        assert main(["--in", str(dark_theme_path), "--out", str(out), "--name", "Harbor", "--levels", "8"]) == 0
        assert json.loads(out.read_text(encoding="utf-8"))["name"] == "Harbor"

    def test_report(self, dark_theme_path, tmp_path, capsys):
        out = tmp_path / "theme.json"
        assert main(["--in", str(dark_theme_path), "--out", str(out), "--report"]) == 0
        report_path = tmp_path / "theme-readability.txt"
        assert "READABILITY REPORT" in report_path.read_text(encoding="utf-8")
        assert str(report_path) in capsys.readouterr().out

    def test_missing_input(self, tmp_path, capsys):
        assert main(["--in", str(tmp_path / "nope.txt")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_levels(self, dark_theme_path, tmp_path, capsys):
        assert main(["--in", str(dark_theme_path), "--out", str(tmp_path / "t.json"), "--levels", "2"]) == 1
        assert "Background levels" in capsys.readouterr().err

    def test_oversized_input(self, tmp_path, monkeypatch):
        source = tmp_path / "big.txt"
        source.write_text("#" * 4096)
        monkeypatch.setenv("THEME_MAX_FILE_SIZE", "2K")
        assert main(["--in", str(source), "--out", str(tmp_path / "t.json")]) == 1
        assert not (tmp_path / "t.json").exists()

    def test_requires_input(self):
        with pytest.raises(SystemExit):
            main([])
