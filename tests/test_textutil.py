import pytest

from cubed.textutil import atoi, iter_lines, split_fields


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("  -17abc", -17),
        ("\t\n+8", 8),
        ("255", 255),
        ("007", 7),
    ],
)
def test_atoi_reads_leading_number(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["+-5", "--5", "-+5", "++5", "abc", "", "   ", "-"])
def test_atoi_gives_zero_without_valid_number(text):
    assert atoi(text) == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("12,34") == 12


def test_split_fields_basic():
    assert split_fields("220,100,0", ",") == ["220", "100", "0"]


def test_split_fields_drops_empty_fields():
    assert split_fields(",,a,,b,,", ",") == ["a", "b"]


@pytest.mark.parametrize("text", ["", ",,,", ","])
def test_split_fields_empty_results(text):
    assert split_fields(text, ",") == []


@pytest.mark.parametrize("text", ["1,2,3", "a", "x y z"])
def test_split_fields_round_trip(text):
    assert ",".join(split_fields(text, ",")) == text


def test_iter_lines_keeps_newlines(tmp_path):
    content = "a\nb\n\nc"
    path = tmp_path / "scene.cub"
    path.write_text(content)
    lines = list(iter_lines(path))
    assert lines == ["a\n", "b\n", "\n", "c"]
    assert "".join(lines) == content


def test_iter_lines_empty_file(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_text("")
    assert list(iter_lines(path)) == []


def test_iter_lines_only_splits_on_newline(tmp_path):
    path = tmp_path / "crlf.cub"
    path.write_bytes(b"one\r\ntwo\rthree\n")
    assert list(iter_lines(path)) == ["one\r\n", "two\rthree\n"]


def test_iter_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(iter_lines(tmp_path / "missing.cub"))