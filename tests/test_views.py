from tabulation import Tabulation


def test_views_share_one_grid():
    t = Tabulation()
    row = t.row(0)
    column = t.column(1)
    cell = t.cell(0, 1)
    assert row.empty()
    assert cell.empty()

    t.rows.push([1, 2])
    assert not row.empty()
    assert not column.empty()
    assert cell.value == 2

    column.row(0).value = "changed"
    assert t.cell(0, 1).value == "changed"
    assert row.values() == [1, "changed"]


def test_views_follow_structural_changes():
    t = Tabulation.from_rows([["a"], ["b"]])
    first = t.row(0)
    t.rows.insert(0, ["z"])
    assert first.values() == ["z"]
    t.clear()
    assert first.empty()
    assert first.values() == []


def test_each_with_visitor_returns_collection():
    t = Tabulation.from_rows([[1, 2], [3, 4]])
    seen = []
    rows = t.rows
    assert rows.each(lambda row: seen.append(row.index)) is rows
    assert seen == [0, 1]

    cols = t.columns
    assert cols.each(lambda column: seen.append(column.index)) is cols
    assert seen == [0, 1, 0, 1]


def test_each_without_visitor_is_lazy():
    t = Tabulation.from_rows([[1]])
    rows = t.rows.each()
    t.rows.push([2])
    assert [row.column(0).value for row in rows] == [1, 2]


def test_collections_are_restartable():
    t = Tabulation.from_rows([[1, 2], [3, 4]])
    rows = t.rows
    assert [r.index for r in rows] == [0, 1]
    t.rows.push([5])
    assert [r.index for r in rows] == [0, 1, 2]

    cells = t.row(0).columns
    assert [c.value for c in cells] == [1, 2]
    assert [c.value for c in cells] == [1, 2]
    t.columns.push(["x"])
    assert [c.value for c in cells] == [1, 2, "x"]
    assert len(cells) == 3


def test_cell_collection_each():
    t = Tabulation.from_rows([[1], [2], [3]])
    total = []
    cells = t.column(0).rows
    assert cells.each(lambda cell: total.append(cell.value)) is cells
    assert total == [1, 2, 3]
    assert [cell.row_index for cell in cells.each()] == [0, 1, 2]


def test_empty_row_and_column_views():
    t = Tabulation(2, 3)
    assert not t.row(1).empty()
    assert t.row(2).empty()
    assert not t.column(-3).empty()
    assert t.column(3).empty()
    assert not t.row(-5).empty()
    assert not t.column(-5).empty()
    assert t.cell(-5, 0).empty()
    assert len(t.row(5).columns) == 3
    assert [c.value for c in t.row(5).columns] == [None, None, None]
