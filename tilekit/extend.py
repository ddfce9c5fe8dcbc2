"""Extend several lists at once from a stream of tuples."""

from typing import Iterable, List, Tuple


class ExtendTuple:
    """Unzips tuples into the given lists, one list per tuple field."""

    __slots__ = ("_targets",)

    def __init__(self, *args: List):
        if not args:
            raise ValueError("ExtendTuple needs at least one target list")
        self._targets = args

    def extend(self, items: Iterable[Tuple]) -> None:
        """Append each field of every tuple to its list.

        All tuples are checked before any list is changed, so a tuple of
        the wrong width leaves the targets untouched.
        """
        width = len(self._targets)
        rows = list(items)
        for row in rows:
            if len(row) != width:
                raise ValueError(
                    f"expected tuples of {width} values, got {len(row)}"
                )
        for target, column in zip(self._targets, zip(*rows)):
            target.extend(column)