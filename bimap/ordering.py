from __future__ import annotations
from functools import cached_property

from typing import (
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Sequence,
    TypeVar,
    Union,
    overload,
)

from .core import BiMap, NotFound

_T = TypeVar("_T", bound=Hashable)


class Ordering(Sequence[_T]):
    """A sequence of unique items that also knows the index of every item.

    Backed by a BiMap of index <-> item, so `item in ordering` and
    `ordering.index(item)` don't scan.
    """

    def __init__(self, __items: Iterable[_T] = ()) -> None:
        items = list(__items)
        self._bimap: BiMap[int, _T] = BiMap.from_list(enumerate(items))
        if len(self._bimap) != len(items):
            raise ValueError("Items of an Ordering must be unique.")

    @cached_property
    def indices(self) -> Mapping[_T, int]:
        return self._bimap.inverse

    @overload
    def __getitem__(self, __item: int) -> _T:
        ...

    @overload
    def __getitem__(self, __item: slice) -> Ordering[_T]:
        ...

    def __getitem__(self, __item: Union[int, slice]) -> Union[_T, Ordering[_T]]:
        if isinstance(__item, slice):
            return Ordering(self._bimap[i] for i in range(len(self))[__item])

        index = __item + len(self) if __item < 0 else __item
        try:
            return self._bimap.get_by_left(index)
        except NotFound:  # Be a true sequence
            raise IndexError(f"Ordering index {__item} out of range") from None

    def index(self, value: object, start: int = 0, stop: Optional[int] = None) -> int:
        try:
            i = self._bimap.get_by_right(value)  # type: ignore[arg-type]
        except NotFound:
            raise ValueError(f"{value!r} is not in Ordering") from None
        if i not in range(len(self))[start:stop]:
            raise ValueError(f"{value!r} is not in Ordering")
        return i

    def __iter__(self) -> Iterator[_T]:
        return (self._bimap[i] for i in range(len(self)))

    def __len__(self) -> int:
        return len(self._bimap)

    def __contains__(self, __item: object) -> bool:
        return self._bimap.has_right(__item)

    def __eq__(self, o: object) -> bool:
        return isinstance(o, Ordering) and self._bimap == o._bimap

    def __hash__(self) -> int:
        return hash(self._bimap)

    def __repr__(self) -> str:
        return f"Ordering({list(self)})"
