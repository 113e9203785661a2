"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class StackEmptyError(IndexError):
    """Raised when an empty stack is read or popped."""


class Stack(Generic[T]):
    """A LIFO container; iteration runs from the bottom to the top."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, value: T) -> None:
        """Put a value on top of the stack."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove the top value and return it."""
        if not self._items:
            raise StackEmptyError("No items in stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("No items in stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"