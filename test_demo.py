"""
test_demo.py

Tests for the demo CLI driver.
"""

import logging

import pytest

import demo


class TestDemo:

    def test_runs_successfully(self, capsys):
        assert demo.main(["--seed", "1"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Hello World"
        assert out[1] == "123.45"
        assert out[2] == "Eating a burger"
        assert out[3] in ("Meta", "Google")
        assert out[4] == "No Game"
        assert out[5] == str(demo.FAANG)
        assert out[6:8] == ["name1 Alice", "name2 Bob"]
        assert out[8].startswith("Student(id=1")

    def test_seed_is_reproducible(self, capsys):
        demo.main(["--seed", "3"])
        first = capsys.readouterr().out
        demo.main(["--seed", "3"])
        assert capsys.readouterr().out == first

    def test_custom_text(self, capsys):
        assert demo.main(["--text", "2.5e1"]) == 0
        assert capsys.readouterr().out.splitlines()[1] == "25.0"

    @pytest.mark.parametrize("argv,expected", [
        (["--text=-2.5e1"], "-25.0"),
        (["--text=-inf"], "-inf"),
        (["--text=-7.5"], "-7.5"),
    ])
    def test_negative_text_with_equals_form(self, capsys, argv, expected):
        assert demo.main(argv) == 0
        assert capsys.readouterr().out.splitlines()[1] == expected

    def test_log_level_case_insensitive(self):
        args = demo.build_parser().parse_args(["--log-level", "debug"])
        assert args.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            demo.main(["--log-level", "loud"])
        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_debug_failure_logs_without_traceback(self, capsys, caplog):
        with caplog.at_level(logging.DEBUG, logger="demo"):
            assert demo.main(["--log-level", "DEBUG", "--text", "abc"]) == 1
        failures = [r for r in caplog.records if r.getMessage().startswith("Demo failed")]
        assert failures
        assert all(r.exc_info is None for r in failures)
        assert "[E101]" in failures[0].getMessage()
        assert "Traceback" not in capsys.readouterr().err

    def test_parse_failure_exits_nonzero(self, capsys):
        assert demo.main(["--text", "abc"]) == 1
        captured = capsys.readouterr()
        assert captured.out == "Hello World\n"
        assert "Error E101" in captured.err
        assert "Traceback" not in captured.err

    def test_parse_failure_propagates_from_run(self):
        with pytest.raises(ValueError):
            demo.run("abc")

    def test_parser_defaults(self):
        args = demo.build_parser().parse_args([])
        assert args.text == "123.45"
        assert args.seed is None
        assert args.log_level == "WARNING"
