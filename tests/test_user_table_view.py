import pytest

pytest.importorskip("PyQt6.QtWidgets")

from gui.views.table_view import UserTableView  # noqa: E402
from table_engine import ColumnDef, SortEntry  # noqa: E402


@pytest.fixture
def view(qapp):
    w = UserTableView()
    yield w
    w.deleteLater()


def _col_index(view, column_id):
    return next(i for i, c in enumerate(view.model.columns) if c.id == column_id)


def test_renders_demo_rows_unsorted(view):
    assert view.table.rowCount() == 5
    assert view.column_texts("full_name") == [
        "Tanner Linsley",
        "Jane Doe",
        "John Smith",
        "Kevin Vandy",
        "Emily White",
    ]
    assert view.column_texts("last_login")[0] == "03/15/2024"
    assert view.column_texts("progress")[0] == "75%"
    assert view.column_texts("zip_code")[0] == "94107"


def test_header_toggle_cycles_sort_and_indicator(view):
    age = _col_index(view, "age")
    view.toggle_column(age)
    assert view.column_texts("age") == ["25", "28", "30", "35", "42"]
    assert view.header_texts()[age] == "Age ▲"
    view.toggle_column(age)
    assert view.column_texts("age") == ["42", "35", "30", "28", "25"]
    assert view.header_texts()[age] == "Age ▼"
    view.toggle_column(age)
    assert view.column_texts("age") == ["30", "25", "42", "35", "28"]
    assert view.header_texts()[age] == "Age"


def test_status_and_zip_custom_orderings(view):
    view.toggle_column(_col_index(view, "status"))
    assert view.column_texts("status") == ["Active", "Active", "Pending", "Pending", "Inactive"]
    view.toggle_column(_col_index(view, "zip_code"))
    assert view.column_texts("zip_code") == ["10001", "60601", "78701", "94107", "98101"]
    # Switching columns discards the previous column's indicator
    assert view.header_texts()[_col_index(view, "status")] == "Status"


def test_rejected_sort_keeps_last_rows_and_reports(view):
    view.toggle_column(_col_index(view, "age"))
    before = view.column_texts("age")
    view.apply_sort_state([SortEntry("nope")])
    assert "nope" in view.error_text()
    assert view.column_texts("age") == before
    view.apply_sort_state([SortEntry("age", True)])
    assert view.error_text() == ""
    assert view.column_texts("age") == ["42", "35", "30", "28", "25"]


def test_custom_data_and_columns(qapp):
    w = UserTableView(data=[{"n": "b"}, {"n": None}, {"n": "a"}], columns=[ColumnDef("n", header="N")])
    try:
        w.toggle_column(0)
        assert w.column_texts("n") == ["a", "b", ""]
        assert w.header_texts() == ["N ▲"]
    finally:
        w.deleteLater()
