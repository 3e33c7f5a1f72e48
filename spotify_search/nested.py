# spotify_search/nested.py
"""Path lookups through parsed JSON documents."""

from collections.abc import Mapping, Sequence
from typing import Any, Iterable, Union

from .errors import FieldLookupError

Path = Union[str, Iterable[Union[str, int]]]


def _split(keys: Path) -> tuple:
    if isinstance(keys, str):
        return tuple(k for k in keys.split(".") if k) if keys else ()
    return tuple(keys)


def _step(value: Any, key: Union[str, int]) -> Any:
    # ints index into lists; everything else must be a mapping
    if isinstance(key, int) and isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return value[key]
    if isinstance(value, Mapping):
        return value[key]
    raise TypeError(f"cannot look up {key!r} in {type(value).__name__}")


def get_in(keys: Path, data: Any) -> Any:
    """
    Return the value at ``keys`` inside ``data``, descending one level per key.

    ``keys`` is a sequence of keys or a dotted string such as ``"tracks.items"``.
    An empty path returns ``data`` itself. A missing key, an out-of-range index
    or a non-container along the way raises FieldLookupError; no default is
    ever substituted.
    """
    path = _split(keys)
    return _get_in(path, data, path)


def _get_in(remaining: tuple, value: Any, full_path: tuple) -> Any:
    if not remaining:
        return value
    head, rest = remaining[0], remaining[1:]
    try:
        child = _step(value, head)
    except (KeyError, IndexError, TypeError) as e:
        dotted = ".".join(str(k) for k in full_path)
        raise FieldLookupError(full_path, f"missing field {dotted!r} (at {head!r})") from e
    return _get_in(rest, child, full_path)
