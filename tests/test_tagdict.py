import pytest

from alpakit.tagdict import DictEntry, TagDict, conditional_append_dict, join_dict

API = object()
EXEC = object()
SHARED = object()


def make_dict():
    return TagDict(DictEntry(API, "cpu"), DictEntry(EXEC, "serial"))


def test_lookup_by_tag():
    d = make_dict()
    assert d[API] == "cpu"
    assert d[EXEC] == "serial"


def test_index_positions_and_missing():
    d = make_dict()
    assert d.index(API) == 0
    assert d.index(EXEC) == 1
    assert d.index(SHARED) == -1


def test_has_tag():
    d = make_dict()
    assert d.has_tag(API)
    assert not d.has_tag(SHARED)


def test_missing_tag_raises_key_error():
    with pytest.raises(KeyError):
        make_dict()[SHARED]


def test_len_and_iteration_order():
    d = make_dict()
    assert len(d) == 2
    assert [entry.key for entry in d] == [API, EXEC]
    assert [entry.value for entry in d] == ["cpu", "serial"]


def test_pairs_are_accepted_as_entries():
    d = TagDict(("a", 1), DictEntry("b", 2))
    assert d["a"] == 1
    assert d["b"] == 2
    assert list(d) == [DictEntry("a", 1), DictEntry("b", 2)]


def test_invalid_argument_raises_type_error():
    with pytest.raises(TypeError):
        TagDict("not an entry")


def test_duplicate_tag_raises_value_error():
    with pytest.raises(ValueError):
        TagDict(("a", 1), ("a", 2))


def test_empty_dict():
    d = TagDict()
    assert len(d) == 0
    assert d.index("anything") == -1


def test_join_dict_preserves_order():
    first = make_dict()
    second = TagDict(DictEntry(SHARED, "mem"))
    joined = join_dict(first, second)
    assert [entry.key for entry in joined] == [API, EXEC, SHARED]
    assert joined[SHARED] == "mem"
    assert len(first) == 2


def test_join_dict_with_clashing_tags_raises():
    with pytest.raises(ValueError):
        join_dict(make_dict(), TagDict(DictEntry(API, "gpu")))


def test_conditional_append_true_joins():
    second = TagDict(DictEntry(SHARED, "mem"))
    result = conditional_append_dict(True, make_dict(), second)
    assert result.has_tag(SHARED)
    assert len(result) == 3


def test_conditional_append_false_returns_first():
    first = make_dict()
    second = TagDict(DictEntry(SHARED, "mem"))
    result = conditional_append_dict(False, first, second)
    assert result is first
    assert not result.has_tag(SHARED)