import pytest

from table_engine import ColumnDef, ConfigurationError, SortEntry, TableModel
from gui.demo_data import default_users, user_columns, user_row_id


def _model(**kwargs):
    return TableModel(default_users(), user_columns(), get_row_id=user_row_id, **kwargs)


def _ids(model):
    return [row.id for row in model.rows()]


def test_initial_rows_unsorted():
    model = _model()
    assert _ids(model) == ["1", "2", "3", "4", "5"]
    assert model.sort_state == ()


def test_demo_columns_sort_as_configured():
    model = _model()
    expectations = {
        "full_name": ["5", "2", "3", "4", "1"],
        "age": ["2", "5", "1", "4", "3"],
        "last_login": ["3", "1", "2", "5", "4"],
        "status": ["1", "4", "2", "5", "3"],
        "progress": ["4", "2", "1", "3", "5"],
        "zip_code": ["3", "4", "2", "1", "5"],
    }
    for column_id, expected in expectations.items():
        model.set_sort_state([SortEntry(column_id)])
        assert _ids(model) == expected, column_id


def test_status_descending_keeps_ties_in_original_order():
    model = _model()
    model.toggle_sorting("status")
    model.toggle_sorting("status")
    assert model.sort_state == (SortEntry("status", True),)
    assert _ids(model) == ["3", "2", "5", "1", "4"]


def test_toggle_cycle_through_model():
    model = _model()
    model.toggle_sorting("age")
    model.toggle_sorting("age")
    model.toggle_sorting("age")
    assert model.sort_state == ()
    assert _ids(model) == ["1", "2", "3", "4", "5"]
    model.toggle_sorting("age")
    model.toggle_sorting("zip_code")
    assert model.sort_state == (SortEntry("zip_code"),)


def test_unknown_column_keeps_previous_rows_and_state():
    model = _model()
    model.toggle_sorting("age")
    rows_before = model.rows()
    state_before = model.sort_state
    with pytest.raises(ConfigurationError):
        model.set_sort_state([SortEntry("nope")])
    with pytest.raises(ConfigurationError):
        model.toggle_sorting("nope")
    assert model.rows() is rows_before
    assert model.sort_state == state_before


def test_headers_carry_labels_indicators_and_meta():
    model = _model()
    model.toggle_sorting("age")
    headers = {h.column_id: h for h in model.headers()}
    assert headers["age"].text == "Age ▲"
    assert headers["age"].direction == "asc"
    assert headers["age"].meta == {"is_numeric": True}
    assert headers["status"].text == "Status"
    assert headers["status"].direction is None


def test_unsortable_column_toggle_is_noop():
    records = [{"x": 2}, {"x": 1}]
    model = TableModel(records, [ColumnDef("x", enable_sorting=False)])
    rows = model.rows()
    assert model.toggle_sorting("x") is rows
    assert model.sort_state == ()
    assert model.headers()[0].can_sort is False


def test_set_data_rebuilds_with_current_sort():
    model = TableModel([{"x": 2}, {"x": 1}], [ColumnDef("x")], [SortEntry("x")])
    assert model.rows().column_values("x") == [1, 2]
    model.set_data([{"x": 9}, {"x": 3}, {"x": 5}])
    assert model.rows().column_values("x") == [3, 5, 9]
    model.clear_sorting()
    assert model.rows().column_values("x") == [9, 3, 5]


def test_constructor_rejects_duplicate_columns():
    with pytest.raises(ConfigurationError):
        TableModel([], [ColumnDef("x"), ColumnDef("x")])
    assert TableModel([], [ColumnDef("x")]).get_column("x").id == "x"
