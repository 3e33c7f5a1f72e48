import pytest

from spotify_search.errors import FieldLookupError
from spotify_search.nested import get_in

DOC = {"tracks": {"items": [{"name": "One"}, {"name": "Two"}], "total": 2}}


def test_empty_path_returns_structure_unchanged():
    assert get_in([], DOC) is DOC
    assert get_in("", DOC) is DOC


def test_descends_one_level_per_key():
    assert get_in(["tracks", "total"], DOC) == 2
    assert get_in("tracks.items", DOC) is DOC["tracks"]["items"]
    assert get_in(["tracks", "items", 1, "name"], DOC) == "Two"


def test_deep_nesting():
    doc = value = {}
    for key in "abcdefgh":
        value[key] = {}
        value = value[key]
    value["leaf"] = 42
    assert get_in(list("abcdefgh") + ["leaf"], doc) == 42


def test_missing_key_is_lookup_error():
    with pytest.raises(LookupError) as excinfo:
        get_in(["tracks", "missing"], DOC)
    assert isinstance(excinfo.value, FieldLookupError)
    assert excinfo.value.path == ("tracks", "missing")


def test_non_mapping_intermediate_is_lookup_error():
    with pytest.raises(FieldLookupError):
        get_in(["tracks", "total", "x"], DOC)
    with pytest.raises(FieldLookupError):
        get_in(["tracks", "items", 5], DOC)


def test_falsy_values_are_returned_not_defaulted():
    assert get_in(["a"], {"a": 0}) == 0
    assert get_in(["a"], {"a": None}) is None
