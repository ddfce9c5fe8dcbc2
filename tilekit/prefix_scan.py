"""Walk a prefix-sum table as (group, local index) pairs."""

from bisect import bisect_left, bisect_right
from typing import Iterator, Sequence, Tuple

Pair = Tuple[int, int]


class PrefixScanIter:
    """Iterate over group and local indices described by inclusive prefix sums.

    ``sums[g]`` is the total number of items in groups ``0..=g``. Every
    item yields ``(g, i)`` where ``i`` is its index inside group ``g``.
    Groups of size zero are skipped. The iterator can be consumed from
    both ends and split into two independent halves.
    """

    __slots__ = ("_sums", "_group_start", "_group_end", "_start", "_end")

    def __init__(self, sums: Sequence[int]):
        self._sums = tuple(sums)
        self._group_start = 0
        self._group_end = max(len(self._sums) - 1, 0)
        self._start = 0
        self._end = self._sums[-1] if self._sums else 0

    @classmethod
    def _from_state(
        cls,
        sums: Tuple[int, ...],
        group_start: int,
        group_end: int,
        start: int,
        end: int,
    ) -> "PrefixScanIter":
        piece = cls.__new__(cls)
        piece._sums = sums
        piece._group_start = group_start
        piece._group_end = group_end
        piece._start = start
        piece._end = end
        return piece

    def _exclusive(self, group: int) -> int:
        return self._sums[group - 1] if group > 0 else 0

    def __iter__(self) -> "PrefixScanIter":
        return self

    def __next__(self) -> Pair:
        while True:
            if self._start >= self._end:
                raise StopIteration
            group = self._group_start
            exclusive = self._exclusive(group)
            inclusive = self._sums[group]
            if exclusive == inclusive:
                self._group_start += 1
                continue
            result = (group, self._start - exclusive)
            self._start += 1
            if self._start == inclusive:
                self._group_start += 1
            return result

    def next_back(self) -> Pair:
        """Take the last remaining pair; raise StopIteration when exhausted."""
        while True:
            if self._start >= self._end:
                raise StopIteration
            group = self._group_end
            exclusive = self._exclusive(group)
            inclusive = self._sums[group]
            if exclusive == inclusive:
                self._group_end = max(group - 1, 0)
                continue
            result = (group, self._end - 1 - exclusive)
            self._end -= 1
            if self._end == exclusive:
                self._group_end = max(group - 1, 0)
            return result

    def __reversed__(self) -> Iterator[Pair]:
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return

    def __len__(self) -> int:
        return max(self._end - self._start, 0)

    def split_at(self, index: int) -> Tuple["PrefixScanIter", "PrefixScanIter"]:
        """Split into the first ``index`` remaining pairs and the rest."""
        if not 0 <= index <= len(self):
            raise IndexError(f"split index {index} out of range 0..={len(self)}")
        mid_item = self._start + index
        left = PrefixScanIter._from_state(
            self._sums,
            self._group_start,
            min(bisect_left(self._sums, mid_item), max(len(self._sums) - 1, 0)),
            self._start,
            mid_item,
        )
        right = PrefixScanIter._from_state(
            self._sums,
            bisect_right(self._sums, mid_item),
            self._group_end,
            mid_item,
            self._end,
        )
        return left, right

    def __repr__(self) -> str:
        return (
            f"PrefixScanIter(groups={self._group_start}..={self._group_end}, "
            f"items={self._start}..{self._end})"
        )