import re
from collections.abc import Mapping, Sequence
from typing import Any, List, Tuple

from .errors import AccessError

# either a bracketed segment `[key]` or a bare name between dots
_SEGMENT = re.compile(r"\[([^\]]*)\]|([^.\[\]]+)")


def parse_path(path: str) -> List[Tuple[str, bool]]:
    """
    split a property path into (segment, bracketed) pairs.

    >>> parse_path("user.tags[0]")
    [('user', False), ('tags', False), ('0', True)]
    """
    segments, position = [], 0
    for match in _SEGMENT.finditer(path):
        gap = path[position:match.start()]
        # names must be separated by a single dot, brackets may follow directly
        if gap not in ('', '.') or (gap == '.' and position == 0):
            raise AccessError(path, gap, "malformed path")
        bracketed = match.group(1) is not None
        segments.append((match.group(1) if bracketed else match.group(2), bracketed))
        position = match.end()

    if not segments or position != len(path):
        raise AccessError(path, path[position:], "malformed path")
    return segments


def _key_candidates(segment: str) -> List[Any]:
    """a segment that looks like an integer may address either a str or an int key"""
    candidates: List[Any] = [segment]
    if segment.lstrip('-').isdigit():
        candidates.append(int(segment))
    return candidates


def _step(obj: Any, segment: str, bracketed: bool, path: str) -> Any:
    from .container import Container

    if isinstance(obj, (Mapping, Container)):
        for candidate in _key_candidates(segment):
            present = obj.key_exists(candidate) if isinstance(obj, Container) else candidate in obj
            if present:
                return obj[candidate]
        raise AccessError(path, segment, "no such key")

    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)) and segment.lstrip('-').isdigit():
        try:
            return obj[int(segment)]
        except IndexError:
            raise AccessError(path, segment, "index out of range") from None

    if bracketed:
        raise AccessError(path, segment, f"{type(obj).__name__} is not indexable")

    try:
        return getattr(obj, segment)
    except AttributeError:
        raise AccessError(path, segment, f"{type(obj).__name__} has no attribute") from None


def resolve(obj: Any, path: str) -> Any:
    """
    follow a dotted/bracketed property path through nested objects.

    mappings and containers are indexed by key, sequences by integer position,
    anything else is read by attribute. `a.b`, `a[0]`, `[key].b` and `a.0` are
    all accepted. raises AccessError when any segment cannot be followed.
    """
    current = obj
    for segment, bracketed in parse_path(path):
        current = _step(current, segment, bracketed, path)
    return current
