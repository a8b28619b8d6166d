import io

import pytest

from modelhelper.table_builder import (
    console_title,
    create_standard_table,
    create_table_with_column_and_row_separator,
    create_table_with_column_separator,
    pad_right,
    print_console_title,
    render_table,
    sequence,
)


def _render(table):
    buffer = io.StringIO()
    table.render(buffer)
    return buffer.getvalue()


def test_pad_right_fills_to_length():
    assert pad_right("ab", "-", 5) == "ab---"


def test_pad_right_truncates_long_text():
    result = pad_right("abcdefgh", ".", 4)
    assert result == "abcdefgh"[:4]


def test_pad_right_rejects_empty_pad():
    with pytest.raises(ValueError):
        pad_right("a", "", 5)


def test_sequence_fills_the_difference():
    assert sequence("abc", "*", 5) == "**"
    assert sequence("abcdef", "*", 3) == ""


def test_console_title_is_upper_and_fixed_width():
    title = console_title("my title")
    assert len(title) == 50
    assert title.rstrip() == "MY TITLE"


def test_print_console_title(capsys):
    print_console_title("x")
    assert capsys.readouterr().out == "\n\n" + console_title("x") + "\n\n\n"


def test_headers_are_upper_cased():
    table = create_table_with_column_separator(["Col Cnt", "snake_name"])
    output = _render(table)
    assert "COL CNT" in output
    assert "SNAKE NAME" in output


def test_numbers_are_right_aligned():
    table = create_table_with_column_separator(["Name", "Count"])
    table.append_bulk([["a", "1"], ["b", "1000"]])
    lines = _render(table).splitlines()
    row_a = next(line for line in lines if " a " in line)
    row_b = next(line for line in lines if " b " in line)
    assert row_a.rindex("1") + 1 == row_b.rindex("1000") + 4


def test_bordered_table_lines_start_with_border():
    table = create_table_with_column_and_row_separator(["A", "B"])
    table.append(["x", "y"])
    lines = _render(table).splitlines()
    assert all(line[0] in "+|" for line in lines)
    assert lines[0] == lines[-1]


def test_standard_table_wraps_long_text():
    text = " ".join(["word"] * 20)
    table = create_standard_table(["Text"])
    table.append([text])
    output = _render(table)
    assert text not in output
    assert output.count("word") == 20


def test_column_separator_table_does_not_wrap():
    text = " ".join(["word"] * 20)
    table = create_table_with_column_separator(["Text"])
    table.append([text])
    assert text in _render(table)


class _Converter:
    def header(self):
        return ["Key", "Value"]

    def rows(self):
        return [["alpha", "beta"]]


def test_render_table_uses_converter():
    buffer = io.StringIO()
    render_table(_Converter(), buffer)
    output = buffer.getvalue()
    assert "KEY" in output and "VALUE" in output
    assert "alpha" in output and "beta" in output