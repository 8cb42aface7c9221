"""Tests for the terminal table renderer CLI."""

from __future__ import annotations

import json

import pytest

from cli import render_table


def _json_run(capsys, *argv):
    code = render_table.main([*argv, "--json"])
    out = capsys.readouterr().out
    return code, json.loads(out)


def test_unsorted_json(capsys):
    code, payload = _json_run(capsys)
    assert code == 0
    assert payload["sorting"] == []
    assert [r["id"] for r in payload["rows"]] == ["1", "2", "3", "4", "5"]
    assert payload["rows"][0]["cells"]["full_name"] == "Tanner Linsley"
    assert payload["rows"][0]["cells"]["zip_code"] == "94107"


def test_sort_by_last_login(capsys):
    code, payload = _json_run(capsys, "--sort", "last_login")
    assert code == 0
    assert payload["sorting"] == [{"id": "last_login", "desc": False}]
    assert [r["id"] for r in payload["rows"]] == ["3", "1", "2", "5", "4"]


def test_repeated_sort_walks_cycle(capsys):
    _, payload = _json_run(capsys, "--sort", "status", "--sort", "status")
    assert payload["sorting"] == [{"id": "status", "desc": True}]
    assert [r["cells"]["status"] for r in payload["rows"]] == [
        "Inactive",
        "Pending",
        "Pending",
        "Active",
        "Active",
    ]
    _, payload = _json_run(capsys, "--sort", "status", "--sort", "status", "--sort", "status")
    assert payload["sorting"] == []


def test_desc_flag(capsys):
    _, payload = _json_run(capsys, "--sort", "progress", "--desc")
    assert [r["cells"]["progress"] for r in payload["rows"]] == ["100%", "90%", "75%", "45%", "20%"]


def test_text_output_has_indicator(capsys):
    code = render_table.main(["--sort", "age"])
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert "Age ▲" in out[0]
    assert out[2].startswith("Jane Doe")
    assert len(out) == 7


def test_unknown_column_exit_code(capsys):
    code = render_table.main(["--sort", "nope"])
    captured = capsys.readouterr()
    assert code == 2
    assert "unknown column 'nope'" in captured.err
    assert captured.out == ""


@pytest.mark.parametrize(
    "argv",
    [["--desc"], ["--sort", "age", "--sort", "status", "--desc"]],
)
def test_desc_needs_exactly_one_sort_column(capsys, argv):
    with pytest.raises(SystemExit) as info:
        render_table.main(argv)
    assert info.value.code == 2
    assert "--desc requires exactly one --sort column" in capsys.readouterr().err
