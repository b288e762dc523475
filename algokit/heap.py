"""Array-backed binary min-heap."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class MinHeap:
    """A binary min-heap stored in a list, root at index 0."""

    def __init__(self) -> None:
        self._data: list[int] = []

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> MinHeap:
        """Build a heap bottom-up from ``values``."""
        heap = cls()
        heap._data = list(values)
        for index in range((len(heap._data) - 1) // 2, -1, -1):
            heap._sift_down(index)
        return heap

    def _sift_down(self, index: int) -> None:
        data = self._data
        last = len(data) - 1
        item = data[index]
        child = index * 2 + 1
        while child <= last:
            if child + 1 <= last and data[child + 1] < data[child]:
                child += 1
            if data[child] < item:
                data[(child - 1) // 2] = data[child]
                child = child * 2 + 1
            else:
                break
        data[(child - 1) // 2] = item

    def push(self, value: int) -> None:
        """Add ``value`` to the heap."""
        data = self._data
        data.append(value)
        position = len(data) - 1
        while position > 0:
            parent = (position - 1) // 2
            if value < data[parent]:
                data[position] = data[parent]
                position = parent
            else:
                break
        data[position] = value

    def minimum(self) -> int:
        """Return the smallest value without removing it."""
        if not self._data:
            raise IndexError("minimum of an empty heap")
        return self._data[0]

    def pop_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        smallest = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return smallest

    def render(self) -> str:
        """Draw the heap level by level as centred text."""
        count = len(self._data)
        if count == 0:
            return "Tree is empty."
        levels = count.bit_length()
        lines = []
        index = 0
        for level in range(levels):
            width = 2**level
            spacing = 2 ** (levels - level) - 1
            parts = [" " * (spacing // 2)]
            for slot in range(width):
                if index >= count:
                    break
                parts.append(f"{self._data[index]:>2}")
                if slot < width - 1:
                    parts.append(" " * spacing)
                index += 1
            lines.append("".join(parts))
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the values in storage (level) order."""
        return iter(list(self._data))