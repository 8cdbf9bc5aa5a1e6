import pytest

from algonotes.files import DEFAULT_LINE, append_line, join_words, merge_files


def test_append_creates_file(tmp_path):
    path = tmp_path / "hello.txt"
    assert append_line(path) == "NoobScience\n"
    assert path.read_text(encoding="utf-8") == "NoobScience\n"


def test_append_accumulates(tmp_path):
    path = tmp_path / "hello.txt"
    append_line(path, "first")
    content = append_line(path, "second")
    assert content.splitlines() == ["first", "second"]


def test_append_keeps_existing_content(tmp_path):
    path = tmp_path / "hello.txt"
    path.write_text("existing\n", encoding="utf-8")
    content = append_line(path, DEFAULT_LINE)
    assert content.startswith("existing\n")
    assert content.endswith(DEFAULT_LINE + "\n")


def test_merge_same_file_twice(tmp_path):
    source = tmp_path / "hello.txt"
    source.write_text("alpha\nbeta\n", encoding="utf-8")
    target = tmp_path / "merged.txt"
    merged = merge_files(target, source, source)
    assert merged == "alpha\nbeta\n" * 2
    assert target.read_text(encoding="utf-8") == merged


def test_merge_preserves_order(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("one", encoding="utf-8")
    b.write_text("two", encoding="utf-8")
    assert merge_files(tmp_path / "out.txt", b, a) == "two" + "one"


def test_merge_skips_missing_sources(tmp_path):
    present = tmp_path / "present.txt"
    present.write_text("data", encoding="utf-8")
    merged = merge_files(tmp_path / "out.txt", tmp_path / "missing.txt", present)
    assert merged == "data"


def test_merge_overwrites_target(tmp_path):
    target = tmp_path / "merged.txt"
    target.write_text("old content", encoding="utf-8")
    source = tmp_path / "s.txt"
    source.write_text("new", encoding="utf-8")
    assert merge_files(target, source) == "new"


@pytest.mark.parametrize("first,second", [("hello", "world"), ("a", "b"), ("", "x")])
def test_join_words_round_trip(first, second):
    joined = join_words(first, second)
    assert joined.split(" ", 1) == [first, second]


def test_join_words_value():
    assert join_words("hello", "world") == "hello world"