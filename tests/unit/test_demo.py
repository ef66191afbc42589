"""Tests for the demo command line."""

import logging

import pytest

from src.demo import build_parser, main


class TestParser:
    """build_parser: argument handling."""

    def test_positional_arguments(self):
        args = build_parser().parse_args(["0", "1", "0.6"])
        assert (args.x, args.t, args.beta) == (0.0, 1.0, 0.6)
        assert args.digits == 6
        assert args.verbose is False

    def test_negative_values(self):
        args = build_parser().parse_args(["-3", "5", "-0.5", "--digits", "3"])
        assert (args.x, args.t, args.beta) == (-3.0, 5.0, -0.5)
        assert args.digits == 3

    def test_non_numeric_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["a", "1", "0.5"])

    def test_json_option(self):
        args = build_parser().parse_args(["--json", "{}"])
        assert args.payload == "{}"
        assert (args.x, args.t, args.beta) == (None, None, None)


class TestMain:
    """main: end-to-end output and exit codes."""

    def test_prints_report(self, capsys):
        assert main(["0", "1", "0.6"]) == 0
        out = capsys.readouterr().out
        assert "x' = -0.75" in out
        assert "t' = 1.25" in out
        assert "Interval type: timelike" in out

    def test_digits_option(self, capsys):
        assert main(["1", "3", "0.5", "--digits", "2"]) == 0
        assert "gamma = 1.15" in capsys.readouterr().out

    @pytest.mark.parametrize("beta", ["1", "-1", "1.5", "-2"])
    def test_invalid_beta_exit_code(self, beta, capsys, caplog):
        with caplog.at_level(logging.ERROR, logger="src.demo"):
            assert main(["0", "1", beta]) == 2
        assert capsys.readouterr().out == ""
        assert "Absolute beta must be less than" in caplog.text

    def test_huge_coordinates(self, capsys):
        assert main(["1e200", "0", "0.5"]) == 0
        out = capsys.readouterr().out
        assert "Interval type: spacelike" in out
        assert "proper distance (original): " in out
        assert "nan" not in out and "inf" not in out

    def test_missing_positionals(self, capsys):
        with pytest.raises(SystemExit):
            main(["0", "1"])

    def test_json_with_positionals(self, capsys):
        with pytest.raises(SystemExit):
            main(["0", "1", "0.6", "--json", '{"x": 0, "t": 1, "beta": 0.6}'])


class TestMainJson:
    """main --json: request given as a JSON payload."""

    def test_prints_report(self, capsys):
        assert main(["--json", '{"x": 0, "t": 1, "beta": 0.6}']) == 0
        out = capsys.readouterr().out
        assert "x' = -0.75" in out
        assert "t' = 1.25" in out

    def test_malformed_json(self, capsys, caplog):
        with caplog.at_level(logging.ERROR, logger="src.demo"):
            assert main(["--json", '{"x": 0,']) == 2
        assert capsys.readouterr().out == ""
        assert "not valid JSON" in caplog.text

    def test_superluminal_beta(self, capsys, caplog):
        with caplog.at_level(logging.ERROR, logger="src.demo"):
            assert main(["--json", '{"x": 0, "t": 1, "beta": 1}']) == 2
        assert capsys.readouterr().out == ""
        assert "transform_request contract" in caplog.text
