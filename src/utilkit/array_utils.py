"""Sequence helpers.

"Arrays" are lists and tuples. Every function returns a new list (or a plain
value) and never raises for malformed input: when an argument is not an
array, the documented safe default is returned instead.

Field-based helpers (`sort_by`, `group_by`, `sum_by`) read mappings with
``mapping.get(key)`` and other objects with ``getattr``. A missing field and a
field holding None are both treated as undefined.
"""

import math
import random
from collections.abc import Callable, Mapping
from functools import cmp_to_key
from typing import Any, TypeVar

T = TypeVar("T")

_UNDEFINED = object()


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _field(item: Any, key: Any) -> Any:
    """Read ``key`` from ``item``, returning `_UNDEFINED` when absent or None."""
    if isinstance(item, Mapping):
        try:
            value = item.get(key)
        except TypeError:
            # unhashable key
            value = None
    elif isinstance(key, str):
        value = getattr(item, key, None)
    else:
        value = None
    return _UNDEFINED if value is None else value


def _seen_key(item: Any) -> Any:
    # True == 1 in Python; keep booleans apart from numbers
    return (bool, item) if isinstance(item, bool) else item


def _group_key(value: Any) -> str:
    """String form of a field value, spelled the way JavaScript would."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get(seq: Any, index: int, default: Any = None) -> Any:
    """Bounds-checked access.

    Examples:
        >>> get([1, 2, 3], 1)
        2
        >>> get([1, 2, 3], -1, "x")
        'x'
    """
    if not _is_array(seq) or not isinstance(index, int) or index < 0 or index >= len(seq):
        return default
    return seq[index]


def unique(seq: Any) -> list[Any]:
    """Drop duplicates, keeping the first occurrence of each element.

    Hashable elements are compared by equality, except that booleans never
    match numbers (``unique([1, True])`` keeps both); unhashable ones (lists,
    dicts, ...) are compared by identity.

    Examples:
        >>> unique([1, 1, 2, 2, 3])
        [1, 2, 3]
    """
    if not _is_array(seq):
        return []
    seen: set[Any] = set()
    seen_ids: set[int] = set()
    result = []
    for item in seq:
        try:
            marker = _seen_key(item)
            if marker in seen:
                continue
            seen.add(marker)
        except TypeError:
            if id(item) in seen_ids:
                continue
            seen_ids.add(id(item))
        result.append(item)
    return result


def chunk(seq: Any, size: int = 1) -> list[list[Any]]:
    """Split into consecutive groups of ``size``; the last may be shorter.

    Examples:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    if not _is_array(seq) or not isinstance(size, (int, float)) or not size >= 1:
        return []
    step = int(size) if math.isfinite(size) else max(len(seq), 1)
    return [list(seq[i : i + step]) for i in range(0, len(seq), step)]


def flatten(seq: Any, depth: float = 1) -> list[Any]:
    """Concatenate nested lists/tuples up to ``depth`` levels.

    Use ``math.inf`` to flatten completely. ``depth < 1`` returns a shallow
    copy.

    Examples:
        >>> flatten([1, [2, [3, 4]], 5])
        [1, 2, [3, 4], 5]
        >>> flatten([1, [2, [3, 4]], 5], math.inf)
        [1, 2, 3, 4, 5]
    """
    if not _is_array(seq):
        return []
    if not isinstance(depth, (int, float)) or math.isnan(depth) or depth < 1:
        return list(seq)
    flat: list[Any] = []
    for item in seq:
        if _is_array(item):
            flat.extend(flatten(item, depth - 1))
        else:
            flat.append(item)
    return flat


def intersection(first: Any, second: Any) -> list[Any]:
    """Elements of ``first`` that also appear in ``second``."""
    if not _is_array(first) or not _is_array(second):
        return []
    return [item for item in first if item in second]


def difference(first: Any, second: Any) -> list[Any]:
    """Elements of ``first`` that do not appear in ``second``."""
    if not _is_array(first) or not _is_array(second):
        return []
    return [item for item in first if item not in second]


def compact(seq: Any) -> list[Any]:
    """Drop falsy elements."""
    if not _is_array(seq):
        return []
    return [item for item in seq if item]


def _compare(a: Any, b: Any) -> int:
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        pass
    return 0


def sort_by(seq: Any, key: Any, desc: bool = False) -> list[Any]:
    """Stable sort by a field, returning a new list.

    Elements whose field is undefined go last in ascending order and first
    in descending order. Values that cannot be ordered against each other
    keep their relative order.

    Args:
        seq: Sequence of mappings or objects.
        key: Field name (or mapping key).
        desc: Sort in descending order.

    Returns:
        The sorted list; ``seq`` itself is not modified.
    """
    if not _is_array(seq):
        return []
    defined = [item for item in seq if _field(item, key) is not _UNDEFINED]
    undefined = [item for item in seq if _field(item, key) is _UNDEFINED]
    ordered = sorted(
        defined,
        key=cmp_to_key(lambda a, b: _compare(_field(a, key), _field(b, key))),
        reverse=desc,
    )
    return undefined + ordered if desc else ordered + undefined


def find_index(seq: Any, predicate: Callable[[Any], Any]) -> int:
    """Index of the first element satisfying ``predicate``, or -1."""
    if not _is_array(seq) or not callable(predicate):
        return -1
    for index, item in enumerate(seq):
        if predicate(item):
            return index
    return -1


def group_by(seq: Any, key: Any) -> dict[str, list[Any]]:
    """Group elements by the string form of a field.

    Keys follow JavaScript spelling for booleans and whole floats (``"true"``,
    ``"2"``). Elements whose field is undefined are skipped.

    Examples:
        >>> group_by([{"t": "a", "v": 1}, {"t": "b"}, {"t": "a"}], "t")
        {'a': [{'t': 'a', 'v': 1}, {'t': 'a'}], 'b': [{'t': 'b'}]}
    """
    if not _is_array(seq):
        return {}
    groups: dict[str, list[Any]] = {}
    for item in seq:
        value = _field(item, key)
        if value is _UNDEFINED:
            continue
        groups.setdefault(_group_key(value), []).append(item)
    return groups


def sample(seq: Any, count: int = 1, *, rng: random.Random | None = None) -> list[Any]:
    """Pick up to ``count`` elements at distinct random positions.

    Args:
        seq: Source sequence.
        count: Number of elements wanted; fewer are returned when ``seq`` is
            shorter.
        rng: Random source; defaults to the module-level generator.

    Returns:
        Randomly chosen elements, in no particular order.
    """
    if not _is_array(seq) or not seq:
        return []
    if not isinstance(count, (int, float)) or not count >= 1:
        return []
    picker = rng or random
    return picker.sample(list(seq), int(min(count, len(seq))))


def move(seq: Any, from_index: int, to_index: int) -> list[Any]:
    """Move one element from ``from_index`` to ``to_index``.

    Any out-of-range index returns an unchanged shallow copy.

    Examples:
        >>> move(["a", "b", "c"], 0, 2)
        ['b', 'c', 'a']
    """
    if not _is_array(seq):
        return []
    result = list(seq)
    size = len(result)
    if not isinstance(from_index, int) or not isinstance(to_index, int):
        return result
    if not (0 <= from_index < size and 0 <= to_index < size):
        return result
    element = result.pop(from_index)
    result.insert(to_index, element)
    return result


def sum_by(seq: Any, key: Any) -> float:
    """Sum a numeric field; non-numeric values count as zero.

    Examples:
        >>> sum_by([{"n": 1}, {"n": 2.5}, {"n": "3"}, {}], "n")
        3.5
    """
    if not _is_array(seq):
        return 0
    total: float = 0
    for item in seq:
        value = _field(item, key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            total += value
    return total
