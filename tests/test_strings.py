import pytest

from catalyst.strings import remove_all, replace_all, split


def test_split_converts_each_piece():
    assert split("1,2,3", ",", int) == [1, 2, 3]


def test_split_without_converter_keeps_strings():
    assert split("a,b", ",") == ["a", "b"]


def test_split_keeps_inner_empty_pieces():
    assert split("a,,b", ",") == ["a", "", "b"]


def test_split_drops_trailing_empty_piece():
    assert split("a,", ",") == ["a"]
    assert split("", ",") == []
    assert split(",", ",") == [""]


@pytest.mark.parametrize("text", ["x", "x,y", "a,,b,c", ",lead"])
def test_split_join_round_trip(text):
    assert ",".join(split(text, ",")) == text


def test_split_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split("a::b", "::")


def test_split_float_values():
    assert split("0.5,1.5", ",", float) == [0.5, 1.5]


def test_remove_all_removes_every_occurrence():
    result = remove_all("a-b-c", "-")
    assert result == "abc"


def test_remove_all_removes_newly_formed_occurrences():
    assert remove_all("aabb", "ab") == ""


def test_remove_all_result_never_contains_target():
    result = remove_all("xyxyzxyxy", "xy")
    assert "xy" not in result


def test_remove_all_empty_target_raises():
    with pytest.raises(ValueError):
        remove_all("abc", "")


def test_replace_all_replaces_every_occurrence():
    assert replace_all("a-b-c", "-", "+") == "a+b+c"


def test_replace_all_unchanged_when_absent():
    assert replace_all("abc", "z", "y") == "abc"


def test_replace_all_rejects_self_containing_replacement():
    with pytest.raises(ValueError):
        replace_all("x", "x", "xx")


def test_replace_all_empty_target_raises():
    with pytest.raises(ValueError):
        replace_all("abc", "", "y")