import dataclasses
import io
import sys

import pytest

from coursekit.records import Record, RecordTable
from coursekit.shell import Shell, main
from coursekit.variants import get_schema


def _table(tmp_path, variant="4-20"):
    schema = dataclasses.replace(get_schema(variant), path=str(tmp_path / "db.txt"))
    return RecordTable(schema)


def _run(table, text):
    out = io.StringIO()
    result = Shell(table, io.StringIO(text), out).run()
    return result, out.getvalue()


def test_enter_and_show_record(tmp_path):
    table = _table(tmp_path)
    result, out = _run(table, "1 1 Smith 2 100\n2 1\n0\n")
    assert result == 0
    assert table.get(1) == Record("Smith", 2, 100)
    assert "@ Last name: Smith" in out


def test_show_missing_record(tmp_path):
    table = _table(tmp_path)
    _, out = _run(table, "2 7 0")
    assert "No record with number 7" in out
    with pytest.raises(KeyError):
        table.get(7)


def test_out_of_range_number_is_reported(tmp_path):
    table = _table(tmp_path)
    _, out = _run(table, "1 999 Smith 1 1 0")
    assert "999" in out
    assert table.entries() == []


def test_show_all_in_sorted_order(tmp_path):
    table = _table(tmp_path)
    _, out = _run(table, "1 1 Adams 1 10 1 2 Zed 2 20 1 3 Miller 3 30 4 0")
    assert out.index("Zed") < out.index("Miller") < out.index("Adams")
    assert [r.name for _, r in table.entries()] == ["Zed", "Miller", "Adams"]


def test_sort_twice_reports_already_sorted(tmp_path):
    table = _table(tmp_path, "4-8")
    _, out = _run(table, "1 1 Petrov 3 1 1 2 Orlov 1 2 3 3 0")
    assert "already sorted" in out
    years = [r.first for _, r in table.entries()]
    assert years == sorted(years)


def test_load_missing_file_is_reported(tmp_path):
    table = _table(tmp_path)
    _, out = _run(table, "6 0")
    assert "Could not load" in out


def test_wrong_command_then_end_of_input(tmp_path):
    table = _table(tmp_path)
    result, out = _run(table, "9 abc")
    assert result == 0
    assert "Wrong command number 9" in out
    assert "Wrong command" in out.split("Wrong command number 9", 1)[1]


def test_end_of_input_mid_record_stops(tmp_path):
    table = _table(tmp_path)
    result, _ = _run(table, "1 1 Smith")
    assert result == 0
    with pytest.raises(KeyError):
        table.get(1)


def test_main_uses_variant_and_path(tmp_path, monkeypatch):
    path = tmp_path / "students.db"
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 1 Orlov 2 300 5 0"))
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert main(["4-8", "--path", str(path)]) == 0
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == ["1", "Orlov 2 300"]