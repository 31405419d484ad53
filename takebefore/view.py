"""A lazy view over the elements of an iterable that come before a delimiter."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import takewhile
from typing import Any, Generic, TypeVar

__all__ = ["TakeBeforeView", "TakeBeforeClosure", "take_before"]

T = TypeVar("T")

_MISSING = object()


class TakeBeforeView(Generic[T]):
    """Yields the elements of ``base`` up to, not including, the first one equal to ``value``.

    The view is lazy and re-iterable whenever ``base`` is re-iterable.
    When ``base`` is a one-shot iterator the view is single pass, and it
    stops at the delimiter even if the iterator never ends.
    """

    __slots__ = ("_base", "_value")

    def __init__(self, base: Iterable[T], value: Any) -> None:
        if not isinstance(base, Iterable):
            raise TypeError(f"{type(base).__name__!r} object is not iterable")
        self._base = base
        self._value = value

    def __iter__(self) -> Iterator[T]:
        value = self._value
        return takewhile(lambda item: not (value == item), self._base)

    def __bool__(self) -> bool:
        return not self.empty()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base!r}, {self._value!r})"

    def base(self) -> Iterable[T]:
        """Return the underlying iterable."""
        return self._base

    def value(self) -> Any:
        """Return the delimiter value."""
        return self._value

    def empty(self) -> bool:
        """Return True if the view yields no elements."""
        return next(iter(self), _MISSING) is _MISSING

    def front(self) -> T:
        """Return the first element of the view."""
        first = next(iter(self), _MISSING)
        if first is _MISSING:
            raise IndexError("front() of an empty view")
        return first


class TakeBeforeClosure:
    """A partially applied ``take_before`` that is applied with ``|`` or a call."""

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value

    def __call__(self, source: Iterable[T]) -> TakeBeforeView[T]:
        return TakeBeforeView(source, self._value)

    def __ror__(self, source: Iterable[T]) -> TakeBeforeView[T]:
        return self(source)

    def __repr__(self) -> str:
        return f"take_before({self._value!r})"


def take_before(*args: Any) -> TakeBeforeView | TakeBeforeClosure:
    """Build a view, or with a single argument a closure for the ``|`` syntax.

    ``take_before(source, value)`` returns a :class:`TakeBeforeView`;
    ``take_before(value)`` returns a :class:`TakeBeforeClosure`, so that
    ``source | take_before(value)`` gives the same view.
    """
    if len(args) == 1:
        return TakeBeforeClosure(args[0])
    if len(args) == 2:
        source, value = args
        return TakeBeforeView(source, value)
    raise TypeError(f"take_before() takes 1 or 2 arguments ({len(args)} given)")