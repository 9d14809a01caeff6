from __future__ import annotations

from typing import Callable, Iterable, Iterator, List


class Seq[T]:
    _value: List[T]

    def __init__(self, value: Iterable[T]) -> None:
        self._value = list(value)

    def map[U](self, func: Callable[[T], U]) -> Seq[U]:
        return Seq([func(v) for v in self._value])

    def join(self, separator: str = "") -> str:
        return separator.join(self._value)

    def print(self, printer, separator: str = "") -> str:
        mapped = self.map(lambda x: x.print(printer))
        joined = mapped.join(separator)
        return joined

    def __iter__(self) -> Iterator[T]:
        return iter(self._value)


__all__ = ["Seq"]
