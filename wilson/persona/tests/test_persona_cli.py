"""Tests for the python -m wilson.persona command."""

import json

import pytest

from wilson.persona import compose_system_prompt
from wilson.persona.__main__ import main


def test_prints_composed_prompt(capsys):
    assert main(["--role", "student", "--region", "europe", "--language", "german"]) == 0
    out = capsys.readouterr().out
    assert out.rstrip("\n") == compose_system_prompt("student", "europe", "german")


def test_defaults(capsys):
    main([])
    assert capsys.readouterr().out.rstrip("\n") == compose_system_prompt("", "", "")


def test_list_options(capsys):
    main(["--list"])
    options = json.loads(capsys.readouterr().out)
    assert options["region"][2] == {"key": "asia-pacific", "name": "Asia Pacific"}


def test_unknown_flag_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--persona", "student"])
    assert excinfo.value.code == 2
    assert "unrecognized arguments" in capsys.readouterr().err
