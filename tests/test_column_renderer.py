from modelhelper.column_renderer import ColumnTableRenderer
from modelhelper.models import Column


def _columns():
    return [
        Column(
            name="Id",
            db_type="int",
            is_nullable=False,
            is_identity=True,
            is_primary_key=True,
            description="key",
        ),
        Column(
            name="CustomerId",
            db_type="int",
            is_nullable=True,
            is_foreign_key=True,
            description="owner",
        ),
    ]


def test_rows_without_description():
    rows = ColumnTableRenderer(_columns()).rows()
    assert rows == [
        ["Id", "int", "No", "Yes", "Yes", ""],
        ["CustomerId", "int", "Yes", "", "", "Yes"],
    ]


def test_rows_with_description():
    rows = ColumnTableRenderer(_columns(), include_description=True).rows()
    assert [row[-1] for row in rows] == ["key", "owner"]


def test_header_matches_row_width():
    for include in (False, True):
        renderer = ColumnTableRenderer(_columns(), include_description=include)
        assert all(len(row) == len(renderer.header()) for row in renderer.rows())


def test_headers():
    assert ColumnTableRenderer().header() == [
        "Name",
        "Type",
        "Nullable",
        "Identity",
        "PK",
        "FK",
    ]
    assert ColumnTableRenderer(include_description=True).header()[-1] == "Description"


def test_no_columns_no_rows():
    assert ColumnTableRenderer().rows() == []