import json

import pytest

from harmony_notation.cli import build_parser, main


class TestParser:
    def test_mode_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["roman", "C", "dorian", "I"])

    def test_harmonize_bass_option(self):
        args = build_parser().parse_args(["harmonize", "A", "minor", "F A D#", "--bass", "F"])
        assert args.notes == "F A D#"
        assert args.bass == "F"


class TestMain:
    def test_roman(self, capsys):
        assert main(["roman", "C", "major", "V6/5"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["symbol"] == "G7/B"
        assert data["chord_tones"] == ["G", "B", "D", "F"]
        assert data["inversion"] == "first"
        assert data["key"] == "C major"

    def test_symbol(self, capsys):
        assert main(["symbol", "C", "major", "C/E"]) == 0
        assert json.loads(capsys.readouterr().out)["roman"] == "I6"

    def test_unconvertible_symbol(self, capsys):
        assert main(["symbol", "C", "major", "H7"]) == 1
        assert "Invalid symbol" in capsys.readouterr().err

    def test_invalid_tonic_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["roman", "H", "major", "I"])
        assert exc_info.value.code == 2
        assert "Invalid tonic" in capsys.readouterr().err

    def test_vocabulary(self, capsys):
        assert main(["vocabulary", "C", "major"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 37
        assert data[0]["roman"] == "I"

    def test_harmonize(self, capsys):
        assert main(["--indent", "0", "harmonize", "A", "minor", "F A D#", "--bass", "F"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [item["roman"] for item in data] == ["It+6", "Fr+6", "Ger+6"]
