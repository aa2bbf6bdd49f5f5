from typing import Optional

from .exceptions import IncompletePairError


def validate_pair(first: Optional[str], second: Optional[str], usage: str,
                  names: tuple[str, str] = ("remote name", "branch name")) -> tuple[Optional[str], Optional[str]]:
    """Accept an optional argument pair only when both halves or neither are given.

    Empty strings count as absent.  Returns the pair, normalised to
    ``(None, None)`` when neither half is set; raises
    :class:`IncompletePairError` naming the missing half otherwise.
    """
    first = first or None
    second = second or None
    if first and not second:
        raise IncompletePairError(usage, names[1])
    if second and not first:
        raise IncompletePairError(usage, names[0])
    return first, second
