import io

import pytest

from wordtail.tail import (
    DEFAULT_COUNT,
    MAX_LINE_LEN,
    CircularBuffer,
    UsageError,
    main,
    parse_args,
    read_lines,
    tail_lines,
)


def _numbered(count):
    return [f"line {i}\n" for i in range(count)]


def test_buffer_keeps_last_items():
    buffer = CircularBuffer(3)
    for item in ["a", "b", "c", "d", "e"]:
        buffer.put(item)
    assert list(buffer) == ["c", "d", "e"]
    assert len(buffer) == 3


def test_buffer_partially_filled():
    buffer = CircularBuffer(5)
    buffer.put("a")
    buffer.put("b")
    assert list(buffer) == ["a", "b"]
    assert len(buffer) == 2


def test_buffer_size_one():
    buffer = CircularBuffer(1)
    for item in ["x", "y", "z"]:
        buffer.put(item)
    assert list(buffer) == ["z"]


def test_buffer_rejects_zero_size():
    with pytest.raises(ValueError):
        CircularBuffer(0)


def test_parse_args_defaults():
    assert parse_args([]) == (DEFAULT_COUNT, None)


def test_parse_args_count_and_file():
    options = parse_args(["-n", "3", "input.txt"])
    assert options.count == 3
    assert options.path == "input.txt"


def test_parse_args_last_file_wins():
    assert parse_args(["a.txt", "b.txt"]).path == "b.txt"


def test_parse_args_missing_number():
    with pytest.raises(UsageError, match="Missing number after -n"):
        parse_args(["-n"])


@pytest.mark.parametrize("value", ["3a", "-5", "x", "1.5"])
def test_parse_args_non_digit(value):
    with pytest.raises(UsageError, match="Char after -n"):
        parse_args(["-n", value])


@pytest.mark.parametrize("value", ["0", "000", ""])
def test_parse_args_zero_count(value):
    assert parse_args(["-n", value, "later.txt"]).count == 0


def test_read_lines_passes_short_lines():
    lines = ["abc\n", "\n", "last"]
    assert list(read_lines(iter(lines))) == lines


def test_read_lines_truncates_long_line_keeping_newline():
    long_line = "y" * 5000 + "\n"
    (result,) = read_lines([long_line])
    assert result == "y" * MAX_LINE_LEN + "\n"


def test_read_lines_truncates_final_line_without_newline():
    (result,) = read_lines(["z" * 5000])
    assert result == "z" * MAX_LINE_LEN


def test_read_lines_exact_limit_unchanged():
    line = "q" * MAX_LINE_LEN + "\n"
    assert list(read_lines([line])) == [line]


def test_tail_lines_last_n():
    lines = _numbered(20)
    assert tail_lines(io.StringIO("".join(lines)), 4) == lines[-4:]


def test_tail_lines_fewer_than_n():
    lines = _numbered(2)
    assert tail_lines(io.StringIO("".join(lines)), 10) == lines


def test_tail_lines_empty():
    assert tail_lines(io.StringIO(""), 5) == []


def test_main_default_count(tmp_path, capsys):
    lines = _numbered(15)
    path = tmp_path / "in.txt"
    path.write_text("".join(lines), encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "".join(lines[-DEFAULT_COUNT:])


def test_main_with_count_from_stdin(monkeypatch, capsys):
    lines = _numbered(8)
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(lines)))
    assert main(["-n", "3"]) == 0
    assert capsys.readouterr().out == "".join(lines[-3:])


def test_main_zero_count_prints_nothing(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("a\nb\n", encoding="utf-8")
    assert main(["-n", "0", str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Cannot open file" in capsys.readouterr().err


def test_main_bad_count(capsys):
    assert main(["-n", "abc"]) == 1
    assert "Char after -n" in capsys.readouterr().err


def test_main_preserves_carriage_returns(tmp_path, capsys):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"one\r\ntwo\r\n")
    assert main(["-n", "1", str(path)]) == 0
    assert capsys.readouterr().out == "two\r\n"