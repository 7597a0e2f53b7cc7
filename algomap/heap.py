"""A max-heap of integers backed by a Python list."""

from __future__ import annotations

from collections.abc import Iterable


class BinaryHeap:
    """Binary max-heap: the largest value is always at the top."""

    def __init__(self, data: Iterable[int] = ()) -> None:
        self._data: list[int] = []
        for value in data:
            self.push(value)

    def push(self, num: int) -> None:
        """Insert a value and sift it up to its place."""
        data = self._data
        data.append(num)
        index = len(data) - 1
        while index > 0:
            parent = (index - 1) // 2
            if data[index] <= data[parent]:
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def top(self) -> int:
        """Return the largest value without removing it."""
        if not self._data:
            raise IndexError("heap is empty")
        return self._data[0]

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._data:
            raise IndexError("heap is empty")
        data = self._data
        largest = data[0]
        last = data.pop()
        if not data:
            return largest
        data[0] = last
        size = len(data)
        index = 0
        while True:
            left = index * 2 + 1
            right = left + 1
            best = index
            if left < size and data[left] > data[best]:
                best = left
            if right < size and data[right] > data[best]:
                best = right
            if best == index:
                break
            data[index], data[best] = data[best], data[index]
            index = best
        return largest

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self):
        return iter(self._data)

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self._data)


def main(argv: list[str] | None = None) -> int:
    """Build a heap from a sample, push and pop once, printing each state."""
    heap = BinaryHeap([3, 2, 1, 5, 3])
    print(heap)
    heap.push(8)
    print(heap)
    heap.pop()
    print(heap)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())