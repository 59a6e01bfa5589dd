"""
Tests for cli

Test Coverage:
- main(): stdout and --output, presets, modes, fixed strategy
- Exit codes for invalid input and configuration
"""

import json

import pytest

from worksheet_toolkit.cli import build_parser, main


class TestMain:
    """Tests for main()."""

    def test_prints_result_json(self, elements_file, capsys):
        exit_code = main([str(elements_file)])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["totalPages"] == 2
        assert data["elementsPerPage"] == [2, 1]
        assert data["pages"][0]["pageType"] == "pdf"

    def test_writes_output_file(self, elements_file, tmp_path):
        output = tmp_path / "out" / "pages.json"

        exit_code = main([str(elements_file), "--output", str(output), "--title", "Plants"])

        assert exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [p["title"] for p in data["pages"]] == ["Plants", "Plants"]

    def test_interactive_mode_and_spacing(self, elements_file, capsys):
        exit_code = main([str(elements_file), "--mode", "interactive", "--spacing", "0"])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert {p["pageType"] for p in data["pages"]} == {"interactive"}
        assert data["pages"][0]["heightUsed"] == 700

    def test_fixed_strategy(self, elements_file, capsys):
        assert main([str(elements_file), "--fixed", "2"]) == 0

        assert json.loads(capsys.readouterr().out)["elementsPerPage"] == [2, 1]

    def test_render_mode(self, elements_file, capsys):
        assert main([str(elements_file), "--render", "--age-range", "6-7"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert all(not r["fallback"] for r in data["measurementLog"])

    def test_missing_file_returns_error(self, tmp_path):
        assert main([str(tmp_path / "nope.json")]) == 1

    def test_negative_spacing_returns_config_error(self, elements_file):
        assert main([str(elements_file), "--spacing", "-5"]) == 2

    def test_invalid_fixed_count_returns_error(self, elements_file):
        assert main([str(elements_file), "--fixed", "0"]) == 1


class TestParser:
    """Tests for build_parser()."""

    def test_unknown_preset_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["in.json", "--preset", "POSTCARD"])

    def test_defaults(self):
        args = build_parser().parse_args(["in.json"])

        assert args.preset == "A4"
        assert args.mode == "pdf"
        assert not args.render
