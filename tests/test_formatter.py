import pytest

from tabulation import Formatter, Tabulation
from tabulation.src.formatter.html_table import format_value, render_html
from tabulation.src.utils import config_loader


def test_to_html():
    t = Tabulation()
    t.rows.push([1, 2])
    t.rows.push([3, 4])
    out = Formatter(t).to_html()
    assert "<td>1</td>" in out
    assert "<td>2</td>" in out
    assert "<td>3</td>" in out
    assert "<td>4</td>" in out


def test_to_html_structure():
    t = Tabulation.from_rows([[1, 2], [3, 4]])
    out = Formatter(t).to_html(indent=0)
    lines = out.splitlines()
    assert lines[0] == "<table>"
    assert lines[-1] == "</table>"
    assert out.count("<th></th>") == 2
    assert out.count("<tr>") == 3
    cells = [line for line in lines if line.startswith("<td>")]
    assert cells == ["<td>1</td>", "<td>2</td>", "<td>3</td>", "<td>4</td>"]
    assert out.index("</thead>") < out.index("<tbody>")


def test_to_html_unset_cells_are_blank():
    t = Tabulation()
    t.rows << [1]
    t.rows << [2, 3]
    out = Formatter(t).to_html()
    assert out.count("<td></td>") == 1
    assert out.count("<td>") == 4


def test_to_html_empty_tabulation():
    out = Formatter(Tabulation()).to_html()
    assert "<th>" not in out
    assert "<td>" not in out
    assert "<tbody>" in out


def test_to_html_indent():
    t = Tabulation.from_rows([["a"]])
    out = render_html(t, indent=4)
    assert "\n            <td>a</td>\n" in out


def test_to_html_escaping():
    t = Tabulation.from_rows([["<b>&"]])
    assert "<td>&lt;b&gt;&amp;</td>" in Formatter(t).to_html(escape=True)
    assert "<td><b>&</td>" in Formatter(t).to_html(escape=False)


def test_to_html_follows_settings(monkeypatch):
    monkeypatch.setattr(config_loader, "HTML_ESCAPE", False)
    monkeypatch.setattr(config_loader, "HTML_INDENT", 0)
    out = Formatter(Tabulation.from_rows([["<i>"]])).to_html()
    assert "\n<td><i></td>\n" in out


@pytest.mark.parametrize(
    "value,expected",
    [(None, ""), (0, "0"), (1.5, "1.5"), (False, "False"), ("x<y", "x&lt;y")],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_to_text():
    t = Tabulation.from_rows([[1, "long"], [None, 2]])
    assert Formatter(t).to_text() == "1 long\n  2\n"


def test_to_text_empty():
    assert Formatter(Tabulation()).to_text() == ""
